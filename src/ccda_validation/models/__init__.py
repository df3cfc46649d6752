"""
Data models for the C-CDA Validation Service.

Includes:
- Enums (SeverityLevel, ValidationResultType)
- Objectives (Sender, Receiver, CCDATypes) and gating predicates
- ValidationFinding (one reported issue)
- ResultMetadata and the ValidationResults envelope
"""

from ccda_validation.models.enums import SeverityLevel, ValidationResultType
from ccda_validation.models.findings import ValidationFinding
from ccda_validation.models.metadata import ResultCount, ResultMetadata, ValidationResults
from ccda_validation.models.objectives import (
    ALL_UNIQUE_CONTENT_ONLY,
    CCDATypes,
    Receiver,
    Sender,
    objective_allows_content,
    objective_allows_vocabulary,
)

__all__ = [
    # Enums
    "SeverityLevel",
    "ValidationResultType",
    # Objectives
    "Sender",
    "Receiver",
    "CCDATypes",
    "ALL_UNIQUE_CONTENT_ONLY",
    "objective_allows_vocabulary",
    "objective_allows_content",
    # Findings and metadata
    "ValidationFinding",
    "ResultCount",
    "ResultMetadata",
    "ValidationResults",
]
