"""Advisory use cases: service recommendation, case studies, ROI and chat."""

from lfdigital.advisory.prompt_builder import PromptBuilder
from lfdigital.advisory.roi import ROIProjection, ROIRequest, estimate_roi
from lfdigital.advisory.service import AdvisoryService, ChatReply

__all__ = [
    "AdvisoryService",
    "ChatReply",
    "PromptBuilder",
    "ROIProjection",
    "ROIRequest",
    "estimate_roi",
]
