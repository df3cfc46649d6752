"""Monitoring and metrics instrumentation for the C-CDA Validation Service.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from ccda_validation.monitoring.metrics import (
    findings_total,
    service_errors_total,
    stage_runs_total,
    stage_skips_total,
)

__all__ = [
    "stage_runs_total",
    "stage_skips_total",
    "findings_total",
    "service_errors_total",
]
