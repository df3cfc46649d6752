"""
FastAPI application entry point for the C-CDA Validation Service.
"""

import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from ccda_validation.api.error_handlers import EXCEPTION_HANDLERS
from ccda_validation.api.middleware import RequestTracingMiddleware
from ccda_validation.api.models import ServiceInfoResponse
from ccda_validation.api.routes import router
from ccda_validation.config import settings
from ccda_validation.logging_config import configure_logging

# Configure structured logging before the app starts emitting events
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Validates C-CDA documents against certification objectives",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestTracingMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["validation"])


@app.on_event("startup")
async def startup():
    """Log configuration; adapters are loaded lazily on first request."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        structural_validator=settings.STRUCTURAL_VALIDATOR,
        vocabulary_validator=settings.VOCABULARY_VALIDATOR,
        content_validator=settings.CONTENT_VALIDATOR,
        default_vocabulary_config=settings.DEFAULT_VOCABULARY_CONFIG,
    )
    if not all((settings.STRUCTURAL_VALIDATOR, settings.VOCABULARY_VALIDATOR, settings.CONTENT_VALIDATOR)):
        logger.warning("Validator adapters not fully configured, validation requests will get 503")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/", response_model=ServiceInfoResponse)
async def root() -> ServiceInfoResponse:
    """Root endpoint with service links."""
    return ServiceInfoResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        metrics="/metrics" if settings.PROMETHEUS_ENABLED else None,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ccda_validation.main:app",
        host="0.0.0.0",
        port=8000,
    )
