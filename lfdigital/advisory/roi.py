"""Deterministic ROI estimation.

`estimate_roi()` answers ROI calculator requests without any AI call. It
is pure arithmetic over a small lookup table, so identical requests
always produce identical projections.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ROIRequest(_CamelModel):
    """Parameters of an ROI calculator request."""

    industry: str
    annual_revenue: str
    business_goal: str
    team_size: StrictInt | StrictFloat
    automation_level: str
    implementation_timeline: str


class ImplementationStage(_CamelModel):
    stage: str
    duration: str
    description: str


class ROIProjection(_CamelModel):
    """ROI calculator answer, rendered for display."""

    estimated_roi: str = Field(alias="estimatedROI")
    cost_reduction: str
    timeline_months: int
    potential_savings: str
    recommended_service_categories: list[str] = Field(default_factory=list)
    key_benefits: list[str] = Field(default_factory=list)
    implementation_stages: list[ImplementationStage] = Field(default_factory=list)


BASE_ROI_BY_AUTOMATION_LEVEL: dict[str, int] = {
    "Very Low": 300,
    "Low": 250,
    "Medium": 200,
    "High": 150,
}
DEFAULT_BASE_ROI = 100
URGENT_TIMELINE = "ASAP"
URGENT_MULTIPLIER = 1.2

DEFAULT_REVENUE_ESTIMATE = 1_000_000
# Checked in order; a later match overrides an earlier one
REVENUE_ESTIMATES: tuple[tuple[str, int], ...] = (
    ("1M-5M", 3_000_000),
    ("5M-20M", 10_000_000),
    ("20M-50M", 35_000_000),
    ("over50M", 75_000_000),
)

COST_REDUCTION_FACTOR = 0.05
SAVINGS_MULTIPLIER = 3

# (stage, share of timeline months, description)
STAGES: tuple[tuple[str, float, str], ...] = (
    (
        "Planning & Discovery",
        0.2,
        "Requirements gathering, technical assessment, and solution design",
    ),
    (
        "Development & Integration",
        0.5,
        "Solution building, integration with existing systems, and initial testing",
    ),
    (
        "Deployment & Training",
        0.2,
        "Implementation, user training, and handover",
    ),
    (
        "Optimization",
        0.3,
        "Performance tuning, additional features, and feedback incorporation",
    ),
)

# Keyword fragments matched against the lowercased business goal
CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("automat", "workflow", "process"), "Automation & Workflow Optimization"),
    (("ai", "intelligen", "predict"), "AI & Machine Learning"),
    (("data", "analytic", "insight"), "Data Analytics & Business Intelligence"),
    (("cloud", "infrastruct", "scale"), "Cloud Solutions & Infrastructure"),
    (("customer", "experience", "interface"), "Digital Experience & Customer Journey"),
    (("integrat", "connect", "system"), "Enterprise Systems Integration"),
    (("app", "software", "develop"), "Custom Software Development"),
    (("secur", "complian", "protect"), "Cybersecurity & Compliance"),
)
DEFAULT_CATEGORIES: tuple[str, ...] = (
    "Automation & Workflow Optimization",
    "Data Analytics & Business Intelligence",
)
MAX_CATEGORIES = 3


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def format_dollars_per_year(amount: int) -> str:
    return f"${amount:,}/year"


def revenue_estimate(annual_revenue: str) -> int:
    estimate = DEFAULT_REVENUE_ESTIMATE
    for fragment, value in REVENUE_ESTIMATES:
        if fragment in annual_revenue:
            estimate = value
    return estimate


def timeline_months(implementation_timeline: str) -> int:
    if implementation_timeline == URGENT_TIMELINE:
        return 3
    if implementation_timeline == "3-6 Months":
        return 6
    return 9


def recommended_categories(business_goal: str) -> list[str]:
    goal = business_goal.lower()
    matched = [
        category
        for keywords, category in CATEGORY_KEYWORDS
        if any(keyword in goal for keyword in keywords)
    ]
    if not matched:
        matched = list(DEFAULT_CATEGORIES)
    return matched[:MAX_CATEGORIES]


def implementation_stages(months: int) -> list[ImplementationStage]:
    return [
        ImplementationStage(
            stage=stage,
            duration=f"{math.ceil(months * share)} weeks",
            description=description,
        )
        for stage, share, description in STAGES
    ]


def estimate_roi(request: ROIRequest) -> ROIProjection:
    """Compute an ROI projection from the request alone.

    finalROI is the automation-level base ROI, scaled by 1.2 for ASAP
    timelines. Yearly cost reduction is 5% of the revenue estimate scaled
    by finalROI, and potential savings are three times that.
    """
    base_roi = BASE_ROI_BY_AUTOMATION_LEVEL.get(request.automation_level, DEFAULT_BASE_ROI)
    multiplier = (
        URGENT_MULTIPLIER if request.implementation_timeline == URGENT_TIMELINE else 1
    )
    final_roi = round_half_up(base_roi * multiplier)

    revenue = revenue_estimate(request.annual_revenue)
    cost_reduction = round_half_up(revenue * final_roi / 100 * COST_REDUCTION_FACTOR)
    months = timeline_months(request.implementation_timeline)

    return ROIProjection(
        estimated_roi=f"{final_roi}%",
        cost_reduction=format_dollars_per_year(cost_reduction),
        timeline_months=months,
        potential_savings=format_dollars_per_year(cost_reduction * SAVINGS_MULTIPLIER),
        recommended_service_categories=recommended_categories(request.business_goal),
        key_benefits=[
            f"{final_roi}% ROI through improved efficiency and reduced operational costs",
            "Reduced manual workload allowing your team to focus on strategic initiatives",
            "Enhanced data-driven decision making with real-time insights",
        ],
        implementation_stages=implementation_stages(months),
    )
