"""
Stage runner: invoke one validator adapter and return a tagged result.

Stages never raise into the pipeline. Each call yields either
StageSuccess (carrying the adapter outcome) or StageFailure (carrying the
exception and its ErrorCategory), and the pipeline branches on the variant.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar, Union

import structlog

from ccda_validation.models.findings import ValidationFinding
from ccda_validation.monitoring.metrics import findings_total, stage_runs_total
from .error_normalizer import ErrorCategory, classify_failure
from .exceptions import AdapterContractError

logger = structlog.get_logger(__name__)

OutcomeT = TypeVar("OutcomeT")

STRUCTURAL = "structural"
VOCABULARY = "vocabulary"
CONTENT = "content"
DOCUMENT = "document"


@dataclass(frozen=True)
class StageSuccess(Generic[OutcomeT]):
    """A stage completed; `outcome` is whatever the adapter returned."""

    stage: str
    outcome: OutcomeT
    findings: list[ValidationFinding] = field(default_factory=list)
    duration_ms: int = 0


@dataclass(frozen=True)
class StageFailure:
    """A stage (or document acquisition) raised; the pipeline must stop."""

    stage: str
    error: BaseException
    category: ErrorCategory

    @classmethod
    def from_exception(cls, stage: str, error: BaseException) -> "StageFailure":
        return cls(stage=stage, error=error, category=classify_failure(error))


StageResult = Union[StageSuccess[OutcomeT], StageFailure]


def run_stage(
    stage: str,
    call: Callable[..., OutcomeT],
    outcome_type: type[OutcomeT],
    *args: Any,
) -> StageResult:
    """
    Run one validation stage.

    Args:
        stage: Stage name (structural, vocabulary, content)
        call: Bound adapter `validate` method
        outcome_type: Outcome class the adapter must return
        *args: Positional arguments for the adapter

    Returns:
        StageSuccess with the adapter outcome, or StageFailure
    """
    logger.info("Attempting validation stage", stage=stage)
    start_time = time.perf_counter()

    try:
        outcome = call(*args)
        if not isinstance(outcome, outcome_type):
            raise AdapterContractError(
                f"{stage} validator returned {type(outcome).__name__}, "
                f"expected {outcome_type.__name__}",
                stage=stage,
                returned_type=type(outcome).__name__,
            )
        # Engines may hand back dicts or foreign models; bad payloads fail the stage
        findings = [ValidationFinding.model_validate(finding) for finding in outcome.findings or ()]
    except Exception as e:
        stage_runs_total.labels(stage=stage, outcome="failure").inc()
        failure = StageFailure.from_exception(stage, e)
        logger.warning(
            "Validation stage failed",
            stage=stage,
            category=failure.category.value,
            error_type=type(e).__name__,
        )
        return failure

    duration_ms = int((time.perf_counter() - start_time) * 1000)
    result = StageSuccess(
        stage=stage, outcome=outcome, findings=findings, duration_ms=duration_ms
    )

    stage_runs_total.labels(stage=stage, outcome="success").inc()
    findings_total.labels(stage=stage).inc(len(result.findings))
    logger.info(
        "Validation stage completed",
        stage=stage,
        finding_count=len(result.findings),
        duration_ms=duration_ms,
    )
    return result
