"""
API routes for C-CDA validation.

The validation endpoint is a plain `def` route: the pipeline blocks, so
FastAPI runs it in its threadpool. Service errors come back with HTTP 200
and `resultsMetaData.serviceError = true` inside the envelope.
"""

import time
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from prometheus_client import Counter, Histogram

from ccda_validation.api.dependencies import get_settings, get_validation_pipeline
from ccda_validation.api.models import HealthResponse
from ccda_validation.config import Settings
from ccda_validation.models.enums import SeverityLevel
from ccda_validation.models.metadata import ValidationResults
from ccda_validation.validation.exceptions import ValidatorConfigurationError
from ccda_validation.validation.pipeline import ValidationPipeline

logger = structlog.get_logger(__name__)

# Prometheus metrics
validation_requests_total = Counter(
    "ccda_validation_requests_total",
    "Total validation requests",
    ["status"],
)

validation_duration_seconds = Histogram(
    "ccda_validation_duration_seconds",
    "Validation request duration in seconds",
)

router = APIRouter()


@router.post(
    "/referenceccdaservice/",
    response_model=ValidationResults,
    status_code=status.HTTP_200_OK,
    summary="Validate a C-CDA document",
    description="""
    Validate an uploaded C-CDA document against a validation objective.

    Structural validation always runs. Vocabulary validation runs unless the
    document has schema errors or the objective excludes it; content
    validation additionally requires a unique-content objective.
    """,
    responses={
        200: {"description": "Validation finished (check resultsMetaData.serviceError)"},
        400: {"description": "Invalid form input"},
        503: {"description": "Validator adapters not configured"},
    },
)
def validate_document(
    validation_objective: str = Form(..., alias="validationObjective"),
    reference_file_name: str = Form(..., alias="referenceFileName"),
    ccda_file: UploadFile = File(..., alias="ccdaFile"),
    cures_update: bool = Form(False, alias="curesUpdate"),
    svap_2022: bool = Form(False, alias="svap2022"),
    svap_2023: bool = Form(False, alias="svap2023"),
    uscdi_v4: bool = Form(False, alias="uscdiv4"),
    vocabulary_config: Optional[str] = Form(None, alias="vocabularyConfig"),
    severity_level: Optional[SeverityLevel] = Form(None, alias="severityLevel"),
    pipeline: ValidationPipeline = Depends(get_validation_pipeline),
) -> ValidationResults:
    """
    Validate one uploaded document.

    Args:
        validation_objective: Certification objective
        reference_file_name: Reference (gold) file name for content validation
        ccda_file: Uploaded document
        cures_update: Content rule flag
        svap_2022: Content rule flag
        svap_2023: Content rule flag
        uscdi_v4: Content rule flag
        vocabulary_config: Vocabulary ruleset (default when empty)
        severity_level: Severity floor (default INFO)
        pipeline: Validation pipeline (injected)

    Returns:
        ValidationResults envelope
    """
    start_time = time.time()
    logger.info(
        "Validation request received",
        objective=validation_objective,
        reference_file_name=reference_file_name,
        file_name=ccda_file.filename,
        severity_level=severity_level.value if severity_level else None,
    )

    results = pipeline.validate_ccda(
        validation_objective,
        reference_file_name,
        ccda_file.file,
        ccda_file_name=ccda_file.filename,
        cures_update=cures_update,
        svap_2022=svap_2022,
        svap_2023=svap_2023,
        uscdi_v4=uscdi_v4,
        vocabulary_config=vocabulary_config,
        severity_level=severity_level,
    )

    outcome = "service_error" if results.results_metadata.service_error else "success"
    validation_requests_total.labels(status=outcome).inc()
    validation_duration_seconds.observe(time.time() - start_time)
    return results


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Report whether the validator adapters can be loaded.

    Returns:
        HealthResponse, "degraded" when adapters are missing
    """
    try:
        get_validation_pipeline()
    except ValidatorConfigurationError as e:
        logger.warning("Health check degraded", error=e.message)
        return HealthResponse(
            status="degraded",
            version=settings.APP_VERSION,
            validators_configured=False,
            detail=e.message,
        )

    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        validators_configured=True,
    )
