"""Custom Prometheus metrics for the C-CDA Validation Service.

Exposed at /metrics together with the HTTP instrumentation. Useful alerts:
- ccda_validation_service_errors_total (any growth in category="unclassified")
- ccda_validation_stage_skips_total (sudden rise in reason="schema_error"
  usually means a broken sender, not a broken service)
"""

from prometheus_client import Counter

# === Stage Metrics ===

stage_runs_total = Counter(
    "ccda_validation_stage_runs_total",
    "Validation stage invocations by stage and outcome",
    ["stage", "outcome"],
)
"""
Labels:
- stage: structural, vocabulary, content
- outcome: success, failure
"""

stage_skips_total = Counter(
    "ccda_validation_stage_skips_total",
    "Validation stages skipped by gating, by stage and reason",
    ["stage", "reason"],
)
"""
Labels:
- stage: vocabulary, content
- reason: schema_error, objective
"""

findings_total = Counter(
    "ccda_validation_findings_total",
    "Findings reported by validation stages",
    ["stage"],
)

# === Error Metrics ===

service_errors_total = Counter(
    "ccda_validation_service_errors_total",
    "Requests that ended in a service error, by error category",
    ["category"],
)
"""
Labels:
- category: io, parse, type_mismatch, unclassified
"""
