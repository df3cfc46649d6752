"""
Unit tests for ValidationFinding, ResultMetadata and the results envelope.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from ccda_validation.models.enums import ValidationResultType
from ccda_validation.models.findings import ValidationFinding
from ccda_validation.models.metadata import ResultMetadata, ValidationResults


class TestValidationFinding:
    """Test suite for the finding model."""

    def test_result_type_member_stored_as_tag(self):
        finding = ValidationFinding(type=ValidationResultType.CCDA_MDHT_CONFORMANCE_WARN)

        assert finding.type == "C-CDA MDHT Conformance Warning"
        assert type(finding.type) is str

    def test_accepts_camel_case_payload(self):
        finding = ValidationFinding.model_validate(
            {
                "type": "C-CDA MDHT Conformance Error",
                "description": "Consol Allergy Concern Act SHALL contain exactly one [1..1] effectiveTime",
                "xpath": "/ClinicalDocument/component/structuredBody",
                "documentLineNumber": 212,
                "isSchemaError": True,
            }
        )

        assert finding.is_schema_error is True
        assert finding.document_line_number == "212"

    def test_is_immutable(self):
        finding = ValidationFinding(type="C-CDA MDHT Conformance Error")

        with pytest.raises(PydanticValidationError):
            finding.is_schema_error = True

    def test_unknown_fields_fold_into_details(self):
        finding = ValidationFinding.model_validate(
            {
                "type": "ONC 2015 S&CC Vocabulary Validation Conformance Error",
                "expectedCodeSystem": "2.16.840.1.113883.6.96",
                "details": {"actualCode": "2823-3"},
            }
        )

        assert finding.details == {
            "expectedCodeSystem": "2.16.840.1.113883.6.96",
            "actualCode": "2823-3",
        }

    def test_known_fields_are_not_folded(self):
        finding = ValidationFinding.model_validate({"type": "x", "isIgIssue": True})

        assert finding.is_ig_issue is True
        assert finding.details == {}

    def test_missing_type_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            ValidationFinding.model_validate({"description": "no tag", "engineRule": "CONF:1198-5256"})

    def test_serializes_camel_case(self):
        finding = ValidationFinding(type="x", is_ig_issue=True, details={"actualCode": "2823-3"})
        data = finding.model_dump(by_alias=True)

        assert data["isIgIssue"] is True
        assert data["details"] == {"actualCode": "2823-3"}


class TestResultMetadata:
    """Test suite for result metadata."""

    def test_defaults(self):
        metadata = ResultMetadata()

        assert metadata.service_error is False
        assert metadata.service_error_message is None
        assert metadata.finding_counts == {}
        assert metadata.result_counts == []

    def test_add_count_keeps_first_seen_order(self):
        metadata = ResultMetadata()
        for result_type in ["B", "A", "B", "C", "B"]:
            metadata.add_count(result_type)

        assert metadata.finding_counts == {"B": 3, "A": 1, "C": 1}
        assert list(metadata.finding_counts) == ["B", "A", "C"]
        assert [(c.type, c.count) for c in metadata.result_counts] == [("B", 3), ("A", 1), ("C", 1)]

    def test_serializes_report_shape(self):
        metadata = ResultMetadata(objective_provided="C-CDA_IG_Plus_Vocab", service_error=True)
        metadata.add_count("C-CDA MDHT Conformance Error")
        data = metadata.model_dump(by_alias=True)

        assert data["objectiveProvided"] == "C-CDA_IG_Plus_Vocab"
        assert data["serviceError"] is True
        assert data["resultMetaData"] == [{"type": "C-CDA MDHT Conformance Error", "count": 1}]


class TestValidationResults:
    """Test suite for the response envelope."""

    def test_results_default_to_empty_list(self):
        envelope = ValidationResults(results_metadata=ResultMetadata())

        assert envelope.ccda_validation_results == []

    def test_serializes_envelope_keys(self):
        envelope = ValidationResults(
            results_metadata=ResultMetadata(),
            ccda_validation_results=[ValidationFinding(type="x")],
        )
        data = envelope.model_dump(by_alias=True)

        assert set(data) == {"resultsMetaData", "ccdaValidationResults"}
        assert data["ccdaValidationResults"][0]["type"] == "x"
