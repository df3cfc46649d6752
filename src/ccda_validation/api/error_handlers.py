"""
FastAPI exception handlers for structured error responses.

Validation outcomes never reach these handlers: the pipeline reports service
errors inside the response envelope. Only wiring and request-format problems
are mapped to HTTP errors here.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ccda_validation.validation.exceptions import ValidatorConfigurationError

logger = structlog.get_logger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def validator_configuration_error_handler(
    request: Request, exc: ValidatorConfigurationError
) -> JSONResponse:
    """
    Handle missing or broken validator adapters.

    Maps to 503 Service Unavailable (deployment problem, not a client error).
    """
    logger.error(
        "Validator adapters not available",
        error=exc.message,
        details=exc.details,
    )

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "error": "validators_unavailable",
            "message": exc.message,
            "details": exc.details,
            "timestamp": _timestamp(),
        },
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle invalid form input (missing fields, unknown severity level, ...).

    Maps to 400 Bad Request (client error).
    """
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.warning("Invalid request format", errors=errors)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_request",
            "message": "Request validation failed",
            "details": errors,
            "timestamp": _timestamp(),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": _timestamp(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ValidatorConfigurationError: validator_configuration_error_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}
