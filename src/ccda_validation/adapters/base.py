"""
Abstract contracts for the three validation engines.

The engines themselves (MDHT-style structural validation, vocabulary code
checking, reference content matching) live outside this service. Concrete
implementations inherit from these classes and are wired in through settings.

Every call returns an outcome object carrying the findings *and* the
document-level facts the engine learned during that call. Adapters are shared
across concurrent requests, so they must not keep per-request state.

Adapters MAY raise:
- DocumentParseError: malformed markup
- SchemaTypeMismatchError: document does not map onto the expected schema
- Any other exception: reported as an unclassified service error
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from ccda_validation.models.enums import SeverityLevel
from ccda_validation.models.findings import ValidationFinding


@dataclass(frozen=True)
class StructuralValidationOutcome:
    """
    Result of one structural validation call.

    Attributes:
        findings: Findings at or above the requested severity floor
        document_type: Document type detected by the engine (e.g. "Continuity Of Care Document")
        document_version: C-CDA release detected (e.g. "R2.1")
        total_conformance_rule_count: Conformance rules the engine evaluated
        alternate_certification: Objective was a legacy MU2 (2014 edition) type
    """

    findings: list[ValidationFinding] = field(default_factory=list)
    document_type: Optional[str] = None
    document_version: Optional[str] = None
    total_conformance_rule_count: int = 0
    alternate_certification: bool = False


@dataclass(frozen=True)
class VocabularyValidationOutcome:
    """
    Result of one vocabulary validation call.

    Attributes:
        findings: Findings at or above the requested severity floor
        configured_check_count: Vocabulary checks defined by the selected config
        checks_with_errors_count: Checks that produced at least one error
    """

    findings: list[ValidationFinding] = field(default_factory=list)
    configured_check_count: int = 0
    checks_with_errors_count: int = 0


@dataclass(frozen=True)
class ContentValidationOutcome:
    """Result of one reference content validation call."""

    findings: list[ValidationFinding] = field(default_factory=list)


class StructuralValidator(ABC):
    """Schema and template conformance engine."""

    @abstractmethod
    def validate(
        self,
        objective: str,
        reference_id: str,
        document_text: str,
        severity_level: SeverityLevel,
    ) -> StructuralValidationOutcome:
        """
        Validate document structure.

        Args:
            objective: Requested validation objective
            reference_id: Reference (gold) file name selected by the caller
            document_text: Decoded document, BOM already stripped
            severity_level: Severity floor

        Returns:
            StructuralValidationOutcome
        """


class VocabularyValidator(ABC):
    """Terminology engine: checks coded values against code systems and value sets."""

    @abstractmethod
    def validate(
        self,
        objective: str,
        reference_id: str,
        document_text: str,
        vocabulary_config: str,
        severity_level: SeverityLevel,
    ) -> VocabularyValidationOutcome:
        """
        Validate coded vocabulary.

        Args:
            objective: Requested validation objective
            reference_id: Reference (gold) file name
            document_text: Decoded document
            vocabulary_config: Vocabulary ruleset name, never empty
            severity_level: Severity floor

        Returns:
            VocabularyValidationOutcome
        """


class ContentValidator(ABC):
    """Reference content engine: matches document content against gold templates."""

    @abstractmethod
    def validate(
        self,
        objective: str,
        reference_id: str,
        document_text: str,
        cures_update: bool,
        svap_2022: bool,
        svap_2023: bool,
        uscdi_v4: bool,
        severity_level: SeverityLevel,
    ) -> ContentValidationOutcome:
        """
        Validate document content.

        Args:
            objective: Requested validation objective
            reference_id: Reference (gold) file name
            document_text: Decoded document
            cures_update: Apply 21st Century Cures Update content rules
            svap_2022: Apply SVAP 2022 content rules
            svap_2023: Apply SVAP 2023 content rules
            uscdi_v4: Apply USCDI v4 content rules
            severity_level: Severity floor

        Returns:
            ContentValidationOutcome
        """
