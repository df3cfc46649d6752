"""
Staged C-CDA validation pipeline.

- pipeline.py: Orchestrator (document -> structural -> vocabulary -> content)
- document.py: Stream acquisition, BOM stripping, decoding
- stages.py: Stage runner returning StageSuccess / StageFailure variants
- aggregator.py: ResultMetadata from findings and stage outcomes
- error_normalizer.py: Failure classification and service-error messages
- exceptions.py: Exceptions raised by adapters and document acquisition
"""

from .exceptions import (
    AdapterContractError,
    CCDAValidationServiceError,
    DocumentAcquisitionError,
    DocumentParseError,
    SchemaTypeMismatchError,
    ValidatorConfigurationError,
)
from .error_normalizer import ErrorCategory, classify_failure
from .pipeline import ValidationContext, ValidationPipeline

__all__ = [
    # Main pipeline
    "ValidationPipeline",
    "ValidationContext",
    # Error classification
    "ErrorCategory",
    "classify_failure",
    # Exceptions (raised by adapters / document acquisition)
    "AdapterContractError",
    "CCDAValidationServiceError",
    "DocumentAcquisitionError",
    "DocumentParseError",
    "SchemaTypeMismatchError",
    "ValidatorConfigurationError",
]
