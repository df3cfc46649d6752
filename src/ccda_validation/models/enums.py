"""
Enumerations for C-CDA validation data models.

Closed taxonomies: severity floor levels and finding category tags.
"""

from enum import Enum


class SeverityLevel(str, Enum):
    """
    Severity floor for a validation request.

    Ordered from least to most severe (INFO < WARNING < ERROR). Only findings
    at or above the requested level are reported by the validator adapters.
    """

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def get_ordinal(cls, level: "SeverityLevel") -> int:
        """Get ordinal value for severity (0=info, 1=warning, 2=error)."""
        order = [cls.INFO, cls.WARNING, cls.ERROR]
        return order.index(level)

    @classmethod
    def parse(cls, value: "str | SeverityLevel | None") -> "SeverityLevel":
        """Case-insensitive lookup; None and empty strings map to INFO."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.INFO
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown severity level '{value}', expected one of "
                f"{[level.value for level in cls]}"
            ) from None

    def admits(self, other: "SeverityLevel") -> bool:
        """True if a finding of severity `other` passes this floor."""
        return self.get_ordinal(other) >= self.get_ordinal(self)


class ValidationResultType(str, Enum):
    """
    Category tag carried by every finding, used for per-category counting.

    One error/warning/info triple per validation engine.
    """

    CCDA_MDHT_CONFORMANCE_ERROR = "C-CDA MDHT Conformance Error"
    CCDA_MDHT_CONFORMANCE_WARN = "C-CDA MDHT Conformance Warning"
    CCDA_MDHT_CONFORMANCE_INFO = "C-CDA MDHT Conformance Info"
    CCDA_VOCAB_CONFORMANCE_ERROR = "ONC 2015 S&CC Vocabulary Validation Conformance Error"
    CCDA_VOCAB_CONFORMANCE_WARN = "ONC 2015 S&CC Vocabulary Validation Conformance Warning"
    CCDA_VOCAB_CONFORMANCE_INFO = "ONC 2015 S&CC Vocabulary Validation Conformance Info"
    REF_CCDA_ERROR = "ONC 2015 S&CC Reference C-CDA Validation Error"
    REF_CCDA_WARN = "ONC 2015 S&CC Reference C-CDA Validation Warning"
    REF_CCDA_INFO = "ONC 2015 S&CC Reference C-CDA Validation Info"

    @classmethod
    def severity_of(cls, tag: str) -> "SeverityLevel | None":
        """Severity of a known tag; None for tags outside this taxonomy."""
        try:
            return cls(tag).severity
        except ValueError:
            return None

    @property
    def severity(self) -> SeverityLevel:
        if self.name.endswith("_ERROR"):
            return SeverityLevel.ERROR
        if self.name.endswith("_WARN"):
            return SeverityLevel.WARNING
        return SeverityLevel.INFO
