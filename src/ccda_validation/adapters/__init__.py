"""
Validator adapter contracts and loading.

- base.py: Abstract StructuralValidator, VocabularyValidator, ContentValidator
  and the outcome objects they return
- loader.py: Resolve adapters from dotted import paths in settings
"""

from ccda_validation.adapters.base import (
    ContentValidationOutcome,
    ContentValidator,
    StructuralValidationOutcome,
    StructuralValidator,
    VocabularyValidationOutcome,
    VocabularyValidator,
)
from ccda_validation.adapters.loader import load_validator

__all__ = [
    "StructuralValidator",
    "VocabularyValidator",
    "ContentValidator",
    "StructuralValidationOutcome",
    "VocabularyValidationOutcome",
    "ContentValidationOutcome",
    "load_validator",
]
