"""
Result Aggregator: derive ResultMetadata from the accumulated findings.

Counts come from the finding list. Document type, version and rule count come
from the structural outcome; vocabulary coverage counts from the vocabulary
outcome. Missing outcomes (stage never ran or failed) leave those fields at
their defaults.
"""

from typing import Iterable, Optional

from ccda_validation.adapters.base import (
    StructuralValidationOutcome,
    VocabularyValidationOutcome,
)
from ccda_validation.models.enums import SeverityLevel
from ccda_validation.models.findings import ValidationFinding
from ccda_validation.models.metadata import ResultMetadata


def build_result_metadata(
    results: Iterable[ValidationFinding],
    validation_objective: Optional[str],
    severity_level: SeverityLevel,
    structural: Optional[StructuralValidationOutcome] = None,
    vocabulary: Optional[VocabularyValidationOutcome] = None,
    metadata: Optional[ResultMetadata] = None,
) -> ResultMetadata:
    """
    Build (or fill in) result metadata.

    Args:
        results: Findings from every stage that ran, in stage order
        validation_objective: Objective echoed back to the caller
        severity_level: Severity floor used for the run
        structural: Structural stage outcome, if the stage completed
        vocabulary: Vocabulary stage outcome, if the stage ran
        metadata: Existing metadata to fill in (file name/contents already set)

    Returns:
        ResultMetadata with counts and document-level facts
    """
    if metadata is None:
        metadata = ResultMetadata()

    for result in results:
        metadata.add_count(result.type)

    metadata.objective_provided = validation_objective
    metadata.severity_level = severity_level.value

    if structural is not None:
        metadata.ccda_document_type = structural.document_type
        metadata.ccda_version = structural.document_version
        metadata.total_conformance_error_checks = structural.total_conformance_rule_count

    if vocabulary is not None:
        metadata.vocabulary_validation_configurations_count = vocabulary.configured_check_count
        metadata.vocabulary_validation_configurations_error_count = (
            vocabulary.checks_with_errors_count
        )

    return metadata
