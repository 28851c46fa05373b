"""API route registration."""

from fastapi import FastAPI

from lfdigital.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI, *, metrics_enabled: bool = True) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        metrics_enabled: Expose GET /metrics
    """
    from lfdigital.api.routes.ai import router as ai_router
    from lfdigital.api.routes.catalog import router as catalog_router
    from lfdigital.api.routes.conversations import router as conversations_router
    from lfdigital.api.routes.health import metrics_router
    from lfdigital.api.routes.health import router as health_router

    app.include_router(ai_router, tags=["AI"])
    app.include_router(conversations_router, tags=["Conversations"])
    app.include_router(catalog_router, tags=["Catalog"])
    app.include_router(health_router, tags=["Health"])

    if metrics_enabled:
        app.include_router(metrics_router, tags=["Health"])

    logger.info("routes_registered", metrics_enabled=metrics_enabled)
