"""
Validation Pipeline: staged C-CDA validation orchestrator.

Stage order and gating:
- Document: read + BOM strip + decode (I/O failure aborts)
- Structural: always runs
- Vocabulary: skipped on any structural schema error, or when the objective
  excludes vocabulary validation
- Content: only after vocabulary, and only for unique-content objectives

Every outcome, success or failure, ends up in one ValidationResults envelope.
`validate_ccda` never raises.
"""

from dataclasses import dataclass, field
from typing import BinaryIO, Optional, Union

import structlog

from ccda_validation.adapters.base import (
    ContentValidationOutcome,
    ContentValidator,
    StructuralValidationOutcome,
    StructuralValidator,
    VocabularyValidationOutcome,
    VocabularyValidator,
)
from ccda_validation.config import Settings, settings as default_settings
from ccda_validation.models.enums import SeverityLevel, ValidationResultType
from ccda_validation.models.findings import ValidationFinding
from ccda_validation.models.metadata import ResultMetadata, ValidationResults
from ccda_validation.models.objectives import (
    objective_allows_content,
    objective_allows_vocabulary,
)
from ccda_validation.monitoring.metrics import stage_skips_total
from .aggregator import build_result_metadata
from .document import read_document
from .error_normalizer import normalize_failure
from .stages import (
    CONTENT,
    DOCUMENT,
    STRUCTURAL,
    VOCABULARY,
    StageFailure,
    StageSuccess,
    run_stage,
)

logger = structlog.get_logger(__name__)

METADATA = "metadata"
REQUEST = "request"
SCHEMA_ERROR_SKIP_REASON = "C-CDA Schema error(s) found"


@dataclass
class ValidationContext:
    """
    Per-request state passed through the pipeline.

    Holds the request parameters plus everything accumulated while stages
    run. Discarded once the envelope is built.
    """
    validation_objective: Optional[str]
    reference_file_name: Optional[str]
    ccda_file_name: Optional[str]
    vocabulary_config: Optional[str]
    severity_level: SeverityLevel
    cures_update: bool = False
    svap_2022: bool = False
    svap_2023: bool = False
    uscdi_v4: bool = False
    document_text: Optional[str] = None
    results: list[ValidationFinding] = field(default_factory=list)
    structural: Optional[StructuralValidationOutcome] = None
    vocabulary: Optional[VocabularyValidationOutcome] = None
    skip_reasons: list[str] = field(default_factory=list)

    @property
    def objective_label(self) -> str:
        return self.validation_objective if self.validation_objective is not None else "null objective"


class ValidationPipeline:
    """
    Multi-stage C-CDA validation orchestrator.

    The three adapters are injected once and shared by all requests; the
    pipeline itself holds no per-request state.
    """

    def __init__(
        self,
        structural_validator: StructuralValidator,
        vocabulary_validator: VocabularyValidator,
        content_validator: ContentValidator,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize validation pipeline.

        Args:
            structural_validator: Schema/template conformance engine
            vocabulary_validator: Terminology engine
            content_validator: Reference content engine
            settings: Application settings (defaults, vocabulary config)
        """
        self.structural_validator = structural_validator
        self.vocabulary_validator = vocabulary_validator
        self.content_validator = content_validator
        self.settings = settings or default_settings

        logger.info(
            "ValidationPipeline initialized",
            structural=type(structural_validator).__name__,
            vocabulary=type(vocabulary_validator).__name__,
            content=type(content_validator).__name__,
            default_vocabulary_config=self.settings.DEFAULT_VOCABULARY_CONFIG,
        )

    def validate_ccda(
        self,
        validation_objective: Optional[str],
        reference_file_name: Optional[str],
        ccda_file: BinaryIO,
        ccda_file_name: Optional[str] = None,
        cures_update: bool = False,
        svap_2022: bool = False,
        svap_2023: bool = False,
        uscdi_v4: bool = False,
        vocabulary_config: Optional[str] = None,
        severity_level: Union[SeverityLevel, str, None] = None,
    ) -> ValidationResults:
        """
        Validate one C-CDA document.

        Args:
            validation_objective: Certification objective (see models.objectives)
            reference_file_name: Reference (gold) file used by content validation
            ccda_file: Binary stream of the document; always closed on return
            ccda_file_name: Original file name (defaults to the stream's name)
            cures_update: Content rule flag
            svap_2022: Content rule flag
            svap_2023: Content rule flag
            uscdi_v4: Content rule flag
            vocabulary_config: Vocabulary ruleset; empty selects the default
            severity_level: Severity floor; None selects the configured default

        Returns:
            ValidationResults; service errors are reported in its metadata
        """
        if ccda_file_name is None:
            stream_name = getattr(ccda_file, "name", None)
            ccda_file_name = stream_name if isinstance(stream_name, str) else None

        metadata = ResultMetadata(
            objective_provided=validation_objective,
            ccda_file_name=ccda_file_name,
        )

        try:
            level = SeverityLevel.parse(severity_level or self.settings.DEFAULT_SEVERITY_LEVEL)
        except ValueError as e:
            _close_quietly(ccda_file)
            normalize_failure(metadata, StageFailure.from_exception(REQUEST, e), validation_objective)
            return ValidationResults(results_metadata=metadata)

        context = ValidationContext(
            validation_objective=validation_objective,
            reference_file_name=reference_file_name,
            ccda_file_name=ccda_file_name,
            vocabulary_config=vocabulary_config,
            severity_level=level,
            cures_update=cures_update,
            svap_2022=svap_2022,
            svap_2023=svap_2023,
            uscdi_v4=uscdi_v4,
        )

        failure = self._run_validators(context, ccda_file, metadata)
        # Metadata is built even after a failure; the first failure is the one reported
        metadata_failure = self._build_metadata(context, metadata)
        failure = failure or metadata_failure

        if failure is not None:
            normalize_failure(metadata, failure, validation_objective)

        results = context.results
        logger.info(
            "Validation finished",
            objective=validation_objective,
            finding_count=len(results),
            service_error=metadata.service_error,
        )
        return ValidationResults(results_metadata=metadata, ccda_validation_results=results)

    def _run_validators(
        self,
        context: ValidationContext,
        ccda_file: BinaryIO,
        metadata: ResultMetadata,
    ) -> Optional[StageFailure]:
        """Run stages in order; return the first failure, if any."""
        try:
            context.document_text = read_document(ccda_file, context.ccda_file_name)
        except Exception as e:
            return StageFailure.from_exception(DOCUMENT, e)
        metadata.ccda_file_contents = context.document_text

        structural = run_stage(
            STRUCTURAL,
            self.structural_validator.validate,
            StructuralValidationOutcome,
            context.validation_objective,
            context.reference_file_name,
            context.document_text,
            context.severity_level,
        )
        if isinstance(structural, StageFailure):
            return structural
        context.structural = structural.outcome
        self._collect(context, structural)

        has_schema_error = any(result.is_schema_error for result in structural.findings)
        allows_vocabulary = objective_allows_vocabulary(
            context.validation_objective,
            alternate_certification=structural.outcome.alternate_certification,
        )

        if has_schema_error or not allows_vocabulary:
            if not allows_vocabulary:
                context.skip_reasons.append(f"validationObjective POSTed: {context.objective_label}")
                stage_skips_total.labels(stage=VOCABULARY, reason="objective").inc()
            if has_schema_error:
                context.skip_reasons.append(SCHEMA_ERROR_SKIP_REASON)
                stage_skips_total.labels(stage=VOCABULARY, reason="schema_error").inc()
            logger.info(
                "Skipping Vocabulary (and thus Content) validation due to: "
                + " and ".join(context.skip_reasons),
                objective=context.validation_objective,
                skip_reasons=context.skip_reasons,
            )
            return None

        vocabulary_config = self._resolve_vocabulary_config(context.vocabulary_config)
        vocabulary = run_stage(
            VOCABULARY,
            self.vocabulary_validator.validate,
            VocabularyValidationOutcome,
            context.validation_objective,
            context.reference_file_name,
            context.document_text,
            vocabulary_config,
            context.severity_level,
        )
        if isinstance(vocabulary, StageFailure):
            return vocabulary
        context.vocabulary = vocabulary.outcome
        self._collect(context, vocabulary)

        if not objective_allows_content(context.validation_objective):
            stage_skips_total.labels(stage=CONTENT, reason="objective").inc()
            logger.info(
                f"Skipping Content validation due to: validationObjective "
                f"({context.objective_label}) is not relevant or valid for Content validation",
                objective=context.validation_objective,
            )
            return None

        content = run_stage(
            CONTENT,
            self.content_validator.validate,
            ContentValidationOutcome,
            context.validation_objective,
            context.reference_file_name,
            context.document_text,
            context.cures_update,
            context.svap_2022,
            context.svap_2023,
            context.uscdi_v4,
            context.severity_level,
        )
        if isinstance(content, StageFailure):
            return content
        self._collect(context, content)
        return None

    def _resolve_vocabulary_config(self, vocabulary_config: Optional[str]) -> str:
        if vocabulary_config:
            return vocabulary_config
        default_config = self.settings.DEFAULT_VOCABULARY_CONFIG
        logger.warning(
            f"Invalid vocabularyConfig of '{vocabulary_config}' received. "
            f"Assigned default config of '{default_config}'.",
        )
        return default_config

    @staticmethod
    def _collect(context: ValidationContext, stage_result: StageSuccess) -> None:
        if stage_result.findings:
            logger.info(
                f"Adding {stage_result.stage} results",
                stage=stage_result.stage,
                finding_count=len(stage_result.findings),
            )
            context.results.extend(stage_result.findings)

        below_floor = [
            result.type
            for result in stage_result.findings
            if not _admitted(result.type, context.severity_level)
        ]
        if below_floor:
            # Adapters own severity filtering; findings are reported as returned
            logger.warning(
                "Validator returned findings below the requested severity level",
                stage=stage_result.stage,
                severity_level=context.severity_level.value,
                below_floor_count=len(below_floor),
            )

    @staticmethod
    def _build_metadata(
        context: ValidationContext, metadata: ResultMetadata
    ) -> Optional[StageFailure]:
        """Fill in counts and document facts; any failure here is a pipeline failure."""
        try:
            build_result_metadata(
                context.results,
                context.validation_objective,
                context.severity_level,
                structural=context.structural,
                vocabulary=context.vocabulary,
                metadata=metadata,
            )
        except Exception as e:
            return StageFailure.from_exception(METADATA, e)
        return None


def _admitted(result_type: str, severity_level: SeverityLevel) -> bool:
    severity = ValidationResultType.severity_of(result_type)
    return severity is None or severity_level.admits(severity)


def _close_quietly(stream: BinaryIO) -> None:
    try:
        stream.close()
    except OSError as e:
        logger.warning("Error closing C-CDA file stream", error=str(e))
