"""Shared test fixtures and configuration for all tests.

Provides fake validator adapters that record their calls, a byte stream that
counts `close()` calls, and settings with safe defaults.
"""

import io
from pathlib import Path
from typing import Optional

import pytest
import structlog

from ccda_validation.adapters.base import (
    ContentValidationOutcome,
    ContentValidator,
    StructuralValidationOutcome,
    StructuralValidator,
    VocabularyValidationOutcome,
    VocabularyValidator,
)
from ccda_validation.config import Settings
from ccda_validation.models.enums import ValidationResultType
from ccda_validation.models.findings import ValidationFinding
from ccda_validation.validation.pipeline import ValidationPipeline


class FakeStructuralValidator(StructuralValidator):
    """Structural adapter returning a preset outcome (or raising a preset error)."""

    def __init__(self, outcome: Optional[StructuralValidationOutcome] = None):
        self.outcome = outcome or StructuralValidationOutcome(
            document_type="Continuity Of Care Document",
            document_version="R2.1",
            total_conformance_rule_count=412,
        )
        self.error: Optional[BaseException] = None
        self.calls: list[tuple] = []

    def validate(self, objective, reference_id, document_text, severity_level):
        self.calls.append((objective, reference_id, document_text, severity_level))
        if self.error is not None:
            raise self.error
        return self.outcome


class FakeVocabularyValidator(VocabularyValidator):
    """Vocabulary adapter returning a preset outcome (or raising a preset error)."""

    def __init__(self, outcome: Optional[VocabularyValidationOutcome] = None):
        self.outcome = outcome or VocabularyValidationOutcome(
            configured_check_count=37,
            checks_with_errors_count=0,
        )
        self.error: Optional[BaseException] = None
        self.calls: list[tuple] = []

    def validate(self, objective, reference_id, document_text, vocabulary_config, severity_level):
        self.calls.append((objective, reference_id, document_text, vocabulary_config, severity_level))
        if self.error is not None:
            raise self.error
        return self.outcome


class FakeContentValidator(ContentValidator):
    """Content adapter returning a preset outcome (or raising a preset error)."""

    def __init__(self, outcome: Optional[ContentValidationOutcome] = None):
        self.outcome = outcome or ContentValidationOutcome()
        self.error: Optional[BaseException] = None
        self.calls: list[tuple] = []

    def validate(
        self,
        objective,
        reference_id,
        document_text,
        cures_update,
        svap_2022,
        svap_2023,
        uscdi_v4,
        severity_level,
    ):
        self.calls.append(
            (
                objective,
                reference_id,
                document_text,
                cures_update,
                svap_2022,
                svap_2023,
                uscdi_v4,
                severity_level,
            )
        )
        if self.error is not None:
            raise self.error
        return self.outcome


class TrackingStream(io.BytesIO):
    """BytesIO that counts close() calls and can fail on read."""

    def __init__(self, data: bytes = b"", read_error: Optional[Exception] = None, name: Optional[str] = None):
        super().__init__(data)
        self.read_error = read_error
        self.close_count = 0
        if name is not None:
            self.name = name

    def read(self, size: Optional[int] = -1) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        return super().read(size)

    def close(self) -> None:
        self.close_count += 1
        super().close()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration (and logger caching) between tests."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing."""
    return Settings(
        APP_NAME="C-CDA Validation Service (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        DEFAULT_VOCABULARY_CONFIG="ccdaReferenceValidatorConfig",
        DEFAULT_SEVERITY_LEVEL="INFO",
        STRUCTURAL_VALIDATOR=None,
        VOCABULARY_VALIDATOR=None,
        CONTENT_VALIDATOR=None,
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_ccda_bytes(fixtures_dir: Path) -> bytes:
    """Raw bytes of the sample C-CDA document."""
    return (fixtures_dir / "sample_ccda.xml").read_bytes()


@pytest.fixture
def sample_ccda_text(sample_ccda_bytes: bytes) -> str:
    """Decoded sample C-CDA document."""
    return sample_ccda_bytes.decode("utf-8")


@pytest.fixture
def ccda_stream(sample_ccda_bytes: bytes) -> TrackingStream:
    """Close-counting stream over the sample document."""
    return TrackingStream(sample_ccda_bytes, name="sample_ccda.xml")


@pytest.fixture
def make_finding():
    """Factory fixture to create ValidationFinding instances.

    Usage:
        def test_something(make_finding):
            finding = make_finding(ValidationResultType.CCDA_MDHT_CONFORMANCE_ERROR, is_schema_error=True)
    """
    def _create(
        result_type: ValidationResultType = ValidationResultType.CCDA_MDHT_CONFORMANCE_ERROR,
        description: str = "Test finding",
        is_schema_error: bool = False,
        **kwargs,
    ) -> ValidationFinding:
        return ValidationFinding(
            type=result_type,
            description=description,
            is_schema_error=is_schema_error,
            **kwargs,
        )
    return _create


@pytest.fixture
def structural_validator() -> FakeStructuralValidator:
    return FakeStructuralValidator()


@pytest.fixture
def vocabulary_validator() -> FakeVocabularyValidator:
    return FakeVocabularyValidator()


@pytest.fixture
def content_validator() -> FakeContentValidator:
    return FakeContentValidator()


@pytest.fixture
def pipeline(
    structural_validator: FakeStructuralValidator,
    vocabulary_validator: FakeVocabularyValidator,
    content_validator: FakeContentValidator,
    test_settings: Settings,
) -> ValidationPipeline:
    """Validation pipeline wired to the fake adapters."""
    return ValidationPipeline(
        structural_validator,
        vocabulary_validator,
        content_validator,
        settings=test_settings,
    )


@pytest.fixture
def make_stream():
    """Factory fixture for TrackingStream.

    Usage:
        def test_something(make_stream):
            stream = make_stream(b"<ClinicalDocument/>", read_error=OSError("reset"))
    """
    return TrackingStream
