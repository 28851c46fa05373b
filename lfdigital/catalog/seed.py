"""Default catalogue loaded into a fresh store."""

from lfdigital.catalog.models import CaseStudyCreate, ServiceCreate

SERVICE_CATEGORIES: tuple[str, ...] = (
    "Automation & Workflow Optimization",
    "AI & Machine Learning",
    "Custom Software Development",
    "Data Analytics & Business Intelligence",
    "Cloud Solutions & Infrastructure",
    "Enterprise Systems Integration",
    "Cybersecurity & Compliance",
    "Digital Experience & Customer Journey",
)

DEFAULT_SERVICES: tuple[ServiceCreate, ...] = (
    ServiceCreate(
        name="Intelligent Process Automation",
        description=(
            "Eliminate repetitive tasks and streamline business processes with "
            "custom AI-powered automation solutions."
        ),
        features=[
            "Custom workflow design",
            "Document processing automation",
            "Cross-system integration",
            "Error handling & notifications",
            "Performance analytics",
        ],
        average_roi="300-400%",
        category="Automation & Workflow Optimization",
        icon_key="lightning-bolt",
    ),
    ServiceCreate(
        name="Robotic Process Automation (RPA)",
        description=(
            "Deploy software robots to handle repetitive digital tasks with "
            "precision and speed."
        ),
        features=[
            "UI-based automation",
            "Scheduled execution",
            "Business rule integration",
            "Exception handling",
            "Workflow orchestration",
        ],
        average_roi="250-350%",
        category="Automation & Workflow Optimization",
        icon_key="settings",
    ),
    ServiceCreate(
        name="Predictive Analytics Suite",
        description=(
            "Leverage advanced machine learning to forecast trends, customer "
            "behavior, and business outcomes with high precision."
        ),
        features=[
            "Custom ML models",
            "Interactive dashboards",
            "Trend forecasting",
            "Anomaly detection",
            "Prescriptive recommendations",
        ],
        average_roi="250-320%",
        category="AI & Machine Learning",
        icon_key="bar-chart",
    ),
    ServiceCreate(
        name="Conversational AI Platform",
        description=(
            "Enhance customer interactions with intelligent assistants that "
            "understand context, intent, and sentiment."
        ),
        features=[
            "Natural language processing",
            "Multilingual support",
            "Sentiment analysis",
            "Seamless handoff to humans",
            "Continuous learning",
        ],
        average_roi="210-280%",
        category="AI & Machine Learning",
        icon_key="users",
    ),
    ServiceCreate(
        name="Enterprise Application Suite",
        description=(
            "Custom-built software solutions designed specifically for your "
            "business requirements and workflows."
        ),
        features=[
            "Tailored user experience",
            "Legacy system integration",
            "Scalable architecture",
            "Mobile companion apps",
            "Continuous delivery pipeline",
        ],
        average_roi="180-300%",
        category="Custom Software Development",
        icon_key="rocket",
    ),
    ServiceCreate(
        name="Mobile Application Development",
        description=(
            "Native and cross-platform mobile solutions that deliver exceptional "
            "user experiences across all devices."
        ),
        features=[
            "iOS & Android development",
            "Offline functionality",
            "Push notifications",
            "Analytics integration",
            "Secure authentication",
        ],
        average_roi="200-280%",
        category="Custom Software Development",
        icon_key="rocket",
    ),
    ServiceCreate(
        name="Data Warehouse & Analytics",
        description=(
            "Centralize, organize, and analyze your business data to uncover "
            "insights and drive strategic decisions."
        ),
        features=[
            "ETL pipeline development",
            "Data modeling",
            "Interactive dashboards",
            "Self-service reporting",
            "Real-time analytics",
        ],
        average_roi="220-330%",
        category="Data Analytics & Business Intelligence",
        icon_key="bar-chart",
    ),
    ServiceCreate(
        name="Cloud Migration & Optimization",
        description=(
            "Strategic migration to cloud platforms with architecture "
            "optimization for performance, cost, and scalability."
        ),
        features=[
            "Cloud readiness assessment",
            "Migration planning",
            "Infrastructure as Code",
            "Cost optimization",
            "24/7 monitoring",
        ],
        average_roi="180-250%",
        category="Cloud Solutions & Infrastructure",
        icon_key="cloud",
    ),
    ServiceCreate(
        name="API Strategy & Integration",
        description=(
            "Connect disparate systems and platforms through robust API "
            "development and management."
        ),
        features=[
            "API design & development",
            "Integration strategy",
            "Middleware solutions",
            "Performance monitoring",
            "Documentation & security",
        ],
        average_roi="190-280%",
        category="Enterprise Systems Integration",
        icon_key="layers",
    ),
    ServiceCreate(
        name="Security Assessment & Implementation",
        description=(
            "Comprehensive security solutions that protect your critical assets "
            "and ensure regulatory compliance."
        ),
        features=[
            "Vulnerability assessment",
            "Security architecture",
            "Compliance frameworks",
            "Incident response planning",
            "Security monitoring",
        ],
        average_roi="200-350%",
        category="Cybersecurity & Compliance",
        icon_key="shield",
    ),
    ServiceCreate(
        name="Customer Experience Transformation",
        description=(
            "Reimagine your customer interactions through digital channels with "
            "intuitive, engaging experiences."
        ),
        features=[
            "UX/UI design",
            "Customer journey mapping",
            "Omnichannel integration",
            "A/B testing",
            "Behavioral analytics",
        ],
        average_roi="220-310%",
        category="Digital Experience & Customer Journey",
        icon_key="users",
    ),
)

DEFAULT_CASE_STUDIES: tuple[CaseStudyCreate, ...] = (
    CaseStudyCreate(
        title="How We Increased Customer Retention by 47%",
        industry="SaaS",
        challenge=(
            "Facing a concerning 23% annual churn rate, significantly impacting "
            "growth and increasing customer acquisition costs."
        ),
        solution=(
            "We implemented a three-pronged AI approach: 1) Predictive churn "
            "analysis using ML to identify at-risk accounts 45 days before likely "
            "cancellation, 2) Personalized onboarding flows based on user behavior "
            "patterns, 3) Automated feature discovery prompts based on usage analytics."
        ),
        results=(
            "Within 6 months, customer retention improved by 47%, representing "
            "$1.2M in saved revenue annually."
        ),
        metrics={
            "retentionIncrease": "47%",
            "annualSavings": "$1.2M",
            "implementationTime": "6 mo",
        },
        is_generated=False,
    ),
)
