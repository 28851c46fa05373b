"""Prompt assembly for the advisory use cases.

Templates live in `prompts/*.txt` beside this module and are filled with
`str.format`; literal JSON braces in them are doubled.
"""

from pathlib import Path

from lfdigital.advisory.roi import ROIRequest
from lfdigital.catalog.models import ChatMessage, Service
from lfdigital.providers.llm.base import LLMMessage

_PROMPTS_DIR = Path(__file__).parent / "prompts"


class PromptBuilder:
    """Build provider messages for each advisory use case."""

    def __init__(self, prompts_dir: Path | None = None) -> None:
        """Initialize the builder.

        Args:
            prompts_dir: Directory holding the templates; the packaged
                templates are used when omitted
        """
        directory = prompts_dir or _PROMPTS_DIR
        self._templates = {
            path.stem: path.read_text(encoding="utf-8")
            for path in directory.glob("*.txt")
        }

    def template(self, name: str) -> str:
        return self._templates[name]

    def service_recommendation(
        self, business_challenge: str, services: list[Service]
    ) -> list[LLMMessage]:
        prompt = self.template("service_recommendation").format(
            business_challenge=business_challenge,
            services=self._format_services(services),
        )
        return [LLMMessage(role="user", content=prompt)]

    def case_study(self, query: str) -> list[LLMMessage]:
        prompt = self.template("case_study").format(
            query=query,
            categories=self.template("categories").strip(),
        )
        return [LLMMessage(role="user", content=prompt)]

    def roi_projection(self, request: ROIRequest) -> list[LLMMessage]:
        prompt = self.template("roi_projection").format(
            industry=request.industry,
            annual_revenue=request.annual_revenue,
            business_goal=request.business_goal,
            team_size=request.team_size,
            automation_level=request.automation_level,
            implementation_timeline=request.implementation_timeline,
            categories=self.template("categories").strip(),
        )
        return [LLMMessage(role="user", content=prompt)]

    def chat(self, history: list[ChatMessage]) -> list[LLMMessage]:
        """System prompt followed by the conversation so far."""
        messages = [LLMMessage(role="system", content=self.template("chat_system").strip())]
        messages.extend(
            LLMMessage(role=message.role, content=message.content) for message in history
        )
        return messages

    def _format_services(self, services: list[Service]) -> str:
        """Render the catalogue as an indented list, one block per service."""
        blocks = []
        for service in services:
            blocks.append(
                f"- {service.name}: {service.description}\n"
                f"  Features: {', '.join(service.features)}\n"
                f"  Category: {service.category}\n"
                f"  Average ROI: {service.average_roi}\n"
                f"  ID: {service.id}"
            )
        return "\n".join(blocks)
