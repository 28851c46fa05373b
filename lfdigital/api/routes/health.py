"""Health check and metrics endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from lfdigital import __version__
from lfdigital.api.dependencies import OrchestratorDep
from lfdigital.api.models.health import HealthResponse, ProviderHealth
from lfdigital.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()
metrics_router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(orchestrator: OrchestratorDep) -> HealthResponse:
    """Report service status and which completion providers are configured."""
    providers = [
        ProviderHealth(
            name=client.name,
            configured=client.is_configured,
            model=client.default_model or None,
        )
        for client in orchestrator.clients
    ]
    overall = "healthy" if any(p.configured for p in providers) else "degraded"

    logger.debug("health_check_completed", status=overall)

    return HealthResponse(
        status=overall,
        version=__version__,
        providers=providers,
        timestamp=datetime.now(UTC),
    )


@metrics_router.get("/metrics")
async def get_metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
