"""
Result metadata and the response envelope.

ResultMetadata is built once per request, after all stages complete or a
failure aborts the pipeline. On failure the service-error fields are set and
every other field keeps whatever partial data was available.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from ccda_validation.models.findings import ValidationFinding


class ResultCount(BaseModel):
    """Number of findings reported under one category tag."""

    type: str
    count: int = Field(..., ge=1)


class ResultMetadata(BaseModel):
    """Request-scoped summary of a validation run."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    objective_provided: Optional[str] = None
    severity_level: Optional[str] = None
    ccda_document_type: Optional[str] = None
    ccda_version: Optional[str] = None
    total_conformance_error_checks: int = 0
    vocabulary_validation_configurations_count: int = 0
    vocabulary_validation_configurations_error_count: int = 0
    ccda_file_name: Optional[str] = None
    ccda_file_contents: Optional[str] = Field(default=None, repr=False)
    service_error: bool = False
    service_error_message: Optional[str] = None
    finding_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Category tag -> count, in first-seen order; unseen tags are absent",
    )

    def add_count(self, result_type: str) -> None:
        """Increment the count for a category tag."""
        self.finding_counts[result_type] = self.finding_counts.get(result_type, 0) + 1

    @computed_field(alias="resultMetaData")
    @property
    def result_counts(self) -> list[ResultCount]:
        return [
            ResultCount(type=result_type, count=count)
            for result_type, count in self.finding_counts.items()
        ]


class ValidationResults(BaseModel):
    """Envelope returned for every validation request, success or failure."""

    model_config = ConfigDict(populate_by_name=True)

    results_metadata: ResultMetadata = Field(..., alias="resultsMetaData")
    ccda_validation_results: list[ValidationFinding] = Field(
        default_factory=list, alias="ccdaValidationResults"
    )
