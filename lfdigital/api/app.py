"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from lfdigital import __version__
from lfdigital.api.dependencies import get_settings, reset_dependencies
from lfdigital.api.exceptions import LFDigitalAPIError
from lfdigital.api.middleware.context import REQUEST_ID_HEADER, RequestContextMiddleware
from lfdigital.api.models.errors import ErrorCode, ErrorDetail, ErrorResponse
from lfdigital.api.routes import register_routes
from lfdigital.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    yield
    await reset_dependencies()
    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a fully configured FastAPI app with:
    - Structured logging
    - CORS middleware
    - Request context middleware
    - Global exception handlers
    - All API routes registered

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    log_config = settings.observability.logging
    setup_logging(
        level="DEBUG" if settings.debug else log_config.level,
        format=log_config.format,
        redact_secrets=log_config.redact_secrets,
    )

    app = FastAPI(
        title="L&F Digital API",
        description="AI-assisted service recommendations, case studies and ROI projections",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)

    register_routes(app, metrics_enabled=settings.observability.metrics.enabled)

    logger.info(
        "app_created",
        debug=settings.debug,
        cors_origins=settings.api.cors_origins,
        provider_order=settings.providers.order,
    )

    return app


def _validation_details(errors: list[dict]) -> list[ErrorDetail]:
    details = []
    for error in errors:
        field = ".".join(str(loc) for loc in error["loc"])
        details.append(ErrorDetail(field=field, message=error["msg"]))
    return details


def _request_id_headers(request: Request) -> dict[str, str]:
    request_id = getattr(request.state, "request_id", None)
    return {REQUEST_ID_HEADER: request_id} if request_id else {}


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(LFDigitalAPIError)
    async def api_error_handler(request: Request, exc: LFDigitalAPIError) -> JSONResponse:
        """Handle LFDigitalAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )

        response = ErrorResponse.build(exc.error_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=response.model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors."""
        logger.warning(
            "validation_error",
            error_count=len(exc.errors()),
            path=request.url.path,
        )

        response = ErrorResponse.build(
            ErrorCode.INVALID_REQUEST,
            "Invalid request",
            details=_validation_details(list(exc.errors())),
        )
        return JSONResponse(
            status_code=400,
            content=response.model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised inside handlers."""
        logger.warning(
            "pydantic_validation_error",
            error_count=exc.error_count(),
            path=request.url.path,
        )

        response = ErrorResponse.build(
            ErrorCode.INVALID_REQUEST,
            "Data validation failed",
            details=_validation_details(list(exc.errors())),
        )
        return JSONResponse(
            status_code=400,
            content=response.model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )

        response = ErrorResponse.build(
            ErrorCode.INTERNAL_ERROR,
            "An unexpected error occurred",
        )
        return JSONResponse(
            status_code=500,
            content=response.model_dump(mode="json", exclude_none=True),
            headers=_request_id_headers(request),
        )

    logger.debug("exception_handlers_registered")


# Create the app instance for uvicorn
app = create_app()
