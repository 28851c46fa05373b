"""AI endpoints: service recommendation, case study generation, ROI calculator."""

from typing import Any

from fastapi import APIRouter

from lfdigital.advisory.roi import ROIRequest
from lfdigital.api.dependencies import AdvisoryServiceDep
from lfdigital.api.exceptions import AIServiceUnavailableError
from lfdigital.api.models.ai import CaseStudyRequest, ServiceRecommendationRequest
from lfdigital.observability.logging import get_logger
from lfdigital.providers.llm.orchestrator import AllProvidersExhaustedError

logger = get_logger(__name__)

router = APIRouter(prefix="/api/ai")


@router.post("/service-recommendation")
async def recommend_services(
    body: ServiceRecommendationRequest,
    advisory: AdvisoryServiceDep,
) -> dict[str, Any]:
    """Recommend catalogue or new services for a business challenge."""
    try:
        return await advisory.recommend_services(body.business_challenge)
    except AllProvidersExhaustedError as e:
        logger.error("service_recommendation_unavailable", last_reason=e.last_reason)
        raise AIServiceUnavailableError() from e


@router.post("/generate-case-study")
async def generate_case_study(
    body: CaseStudyRequest,
    advisory: AdvisoryServiceDep,
) -> dict[str, Any]:
    """Generate a case study and add it to the catalogue."""
    try:
        return await advisory.generate_case_study(body.query)
    except AllProvidersExhaustedError as e:
        logger.error("case_study_unavailable", last_reason=e.last_reason)
        raise AIServiceUnavailableError() from e


@router.post("/roi-calculator")
async def calculate_roi(
    body: ROIRequest,
    advisory: AdvisoryServiceDep,
) -> dict[str, Any]:
    """Project ROI; answers with a deterministic estimate when AI is unavailable."""
    return await advisory.project_roi(body)
