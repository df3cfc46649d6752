"""
Error Normalizer: turn any pipeline failure into service-error metadata.

Four categories, checked in fixed precedence:
1. IO            - the document stream could not be read or decoded
2. PARSE         - malformed markup (typically in-line XSL styling)
3. TYPE_MISMATCH - document does not map onto the expected schema types
4. UNCLASSIFIED  - everything else

The caller never sees the exception. It gets a service-error flag and a
message; the full traceback always goes to the error log.
"""

import traceback
import xml.sax
from enum import Enum
from typing import TYPE_CHECKING, Optional
from xml.etree.ElementTree import ParseError

import structlog

from ccda_validation.models.metadata import ResultMetadata
from ccda_validation.monitoring.metrics import service_errors_total
from .exceptions import (
    DocumentAcquisitionError,
    DocumentParseError,
    SchemaTypeMismatchError,
)

if TYPE_CHECKING:
    from .stages import StageFailure

logger = structlog.get_logger(__name__)

ERROR_GENERAL_PREFIX = "The service has encountered "
ERROR_PARSING_PREFIX = ERROR_GENERAL_PREFIX + "an error parsing the document. "
ERROR_FOLLOWING_ERROR_POSTFIX = "the following error: "
ERROR_IO_EXCEPTION = ERROR_GENERAL_PREFIX + "the following input/output error: "
ERROR_TYPE_MISMATCH_EXCEPTION = (
    ERROR_PARSING_PREFIX
    + "Please verify the document is valid against schema and "
    + "contains a v3 namespace definition: "
)
ERROR_PARSE_EXCEPTION = (
    ERROR_PARSING_PREFIX
    + "Please verify the document does not contain in-line XSL styling and/or address "
    + ERROR_FOLLOWING_ERROR_POSTFIX
)
ERROR_GENERIC_EXCEPTION = ERROR_GENERAL_PREFIX + ERROR_FOLLOWING_ERROR_POSTFIX


class ErrorCategory(str, Enum):
    """Failure classification, in precedence order."""

    IO = "io"
    PARSE = "parse"
    TYPE_MISMATCH = "type_mismatch"
    UNCLASSIFIED = "unclassified"

    @property
    def message_prefix(self) -> str:
        return _MESSAGE_PREFIXES[self]


_MESSAGE_PREFIXES = {
    ErrorCategory.IO: ERROR_IO_EXCEPTION,
    ErrorCategory.PARSE: ERROR_PARSE_EXCEPTION,
    ErrorCategory.TYPE_MISMATCH: ERROR_TYPE_MISMATCH_EXCEPTION,
    ErrorCategory.UNCLASSIFIED: ERROR_GENERIC_EXCEPTION,
}

# Order matters: first match wins
_CLASSIFICATION: tuple[tuple[ErrorCategory, tuple[type[BaseException], ...]], ...] = (
    (ErrorCategory.IO, (DocumentAcquisitionError, OSError, UnicodeError)),
    (ErrorCategory.PARSE, (DocumentParseError, ParseError, xml.sax.SAXException)),
    (ErrorCategory.TYPE_MISMATCH, (SchemaTypeMismatchError, TypeError)),
)


def classify_failure(error: BaseException) -> ErrorCategory:
    """Map an exception onto its ErrorCategory."""
    for category, exception_types in _CLASSIFICATION:
        if isinstance(error, exception_types):
            return category
    return ErrorCategory.UNCLASSIFIED


def failure_message(error: BaseException) -> Optional[str]:
    """The exception's own message, or None if it carries none."""
    message = getattr(error, "message", None) or str(error)
    return message or None


def format_trace(error: BaseException) -> str:
    """Full diagnostic trace, including chained causes."""
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def normalize_failure(
    metadata: ResultMetadata,
    failure: "StageFailure",
    validation_objective: Optional[str],
) -> ResultMetadata:
    """
    Record a pipeline failure on the result metadata.

    Args:
        metadata: Metadata to mark; other fields are left as they are
        failure: Failed stage variant carrying the exception and its category
        validation_objective: Objective from the original request

    Returns:
        The same metadata instance, with service-error fields set
    """
    prefix = failure.category.message_prefix
    full_error_with_trace = prefix + format_trace(failure.error)
    message = failure_message(failure.error)

    metadata.service_error = True
    metadata.service_error_message = prefix + message if message else full_error_with_trace
    metadata.objective_provided = validation_objective

    service_errors_total.labels(category=failure.category.value).inc()
    logger.error(
        full_error_with_trace,
        category=failure.category.value,
        stage=failure.stage,
        error_type=type(failure.error).__name__,
        objective=validation_objective,
    )
    return metadata
