"""
Finding model produced by the validator adapters.

A finding is one reported issue. The pipeline only reads two things from it:
the category tag (`type`, for counting) and `is_schema_error` (for gating).
Everything else is engine-specific and passed through untouched; top-level
keys this model does not know are folded into `details`.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ValidationFinding(BaseModel):
    """One validation issue reported by a structural, vocabulary or content engine."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    type: str = Field(
        ...,
        description="Category tag, usually a ValidationResultType value",
    )
    description: str = Field(default="", description="Human-readable issue description")
    xpath: Optional[str] = Field(default=None, description="Location of the issue in the document")
    document_line_number: Optional[str] = Field(
        default=None,
        description="Line number reported by the engine (kept as text, engines differ)",
    )
    is_schema_error: bool = Field(
        default=False,
        description="Structural/schema error; suppresses vocabulary and content validation",
    )
    is_data_type_schema_error: bool = Field(default=False)
    is_ig_issue: bool = Field(default=False, description="Implementation guide conformance issue")
    is_mu_issue: bool = Field(default=False, description="Meaningful use conformance issue")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque engine-specific detail fields (codes, code systems, ...)",
    )

    @field_validator("type", mode="before")
    @classmethod
    def unwrap_result_type(cls, value: Any) -> Any:
        """Store ValidationResultType members as their plain tag string."""
        if isinstance(value, Enum):
            return value.value
        return value

    @model_validator(mode="before")
    @classmethod
    def fold_unknown_fields(cls, data: Any) -> Any:
        """Move engine-specific top-level keys into `details`."""
        if not isinstance(data, dict):
            return data

        known = set(cls.model_fields)
        known.update(field.alias for field in cls.model_fields.values() if field.alias)
        extras = {key: value for key, value in data.items() if key not in known}
        if not extras:
            return data

        folded = {key: value for key, value in data.items() if key in known}
        folded["details"] = {**extras, **(folded.get("details") or {})}
        return folded
