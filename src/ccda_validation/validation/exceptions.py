"""
Exceptions raised inside the validation pipeline.

None of these reach the caller of the pipeline: they are caught at the
pipeline boundary, classified by the error normalizer and turned into
service-error metadata. Validator adapters raise DocumentParseError and
SchemaTypeMismatchError; the document reader raises DocumentAcquisitionError.
"""

from typing import Any


class CCDAValidationServiceError(Exception):
    """
    Base exception for all validation service errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize service error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DocumentAcquisitionError(CCDAValidationServiceError):
    """
    The uploaded document could not be read, closed or decoded.

    Always chained (`raise ... from`) to the underlying OSError/UnicodeError.
    """

    def __init__(self, message: str, file_name: str | None = None, encoding: str | None = None):
        details = {}
        if file_name:
            details["file_name"] = file_name
        if encoding:
            details["encoding"] = encoding

        super().__init__(message, details)


class DocumentParseError(CCDAValidationServiceError):
    """
    The document markup is malformed.

    Typical cause is in-line XSL styling (processing instructions) that the
    validation engines refuse to parse.
    """

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        line_number: int | None = None,
        column_number: int | None = None,
    ):
        """
        Initialize parse error.

        Args:
            message: Error description
            stage: Stage whose engine failed to parse (structural, vocabulary, content)
            line_number: Line of the offending markup, if known
            column_number: Column of the offending markup, if known
        """
        details: dict[str, Any] = {}
        if stage:
            details["stage"] = stage
        if line_number is not None:
            details["line_number"] = line_number
        if column_number is not None:
            details["column_number"] = column_number

        super().__init__(message, details)


class SchemaTypeMismatchError(CCDAValidationServiceError):
    """
    The document parsed but could not be mapped onto the expected schema types.

    Usually the document lacks the HL7 v3 namespace or is not schema valid.
    """

    def __init__(self, message: str, expected_type: str | None = None, actual_type: str | None = None):
        details = {}
        if expected_type:
            details["expected_type"] = expected_type
        if actual_type:
            details["actual_type"] = actual_type

        super().__init__(message, details)


class ValidatorConfigurationError(CCDAValidationServiceError):
    """
    A validator adapter could not be resolved from settings.

    Raised at application wiring time, never from inside the pipeline.
    """

    def __init__(self, message: str, setting: str | None = None, import_path: str | None = None):
        details = {}
        if setting:
            details["setting"] = setting
        if import_path:
            details["import_path"] = import_path

        super().__init__(message, details)


class AdapterContractError(CCDAValidationServiceError):
    """
    A validator adapter returned something other than its outcome type.

    Reported as an unclassified service error: the engine integration is
    broken, not the document.
    """

    def __init__(self, message: str, stage: str | None = None, returned_type: str | None = None):
        details = {}
        if stage:
            details["stage"] = stage
        if returned_type:
            details["returned_type"] = returned_type

        super().__init__(message, details)
