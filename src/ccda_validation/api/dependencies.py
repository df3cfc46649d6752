"""
FastAPI dependency injection for the C-CDA Validation Service.

The validation pipeline and its three adapters are built once and shared by
all requests. Tests replace them through `app.dependency_overrides`.
"""

from functools import lru_cache

from ccda_validation.adapters.base import (
    ContentValidator,
    StructuralValidator,
    VocabularyValidator,
)
from ccda_validation.adapters.loader import load_validator
from ccda_validation.config import Settings, settings
from ccda_validation.validation.pipeline import ValidationPipeline


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_validation_pipeline() -> ValidationPipeline:
    """
    Get singleton validation pipeline.

    Adapters are resolved from the STRUCTURAL_VALIDATOR, VOCABULARY_VALIDATOR
    and CONTENT_VALIDATOR settings. A failed resolution is not cached, so a
    fixed configuration is picked up on the next request.

    Returns:
        ValidationPipeline instance

    Raises:
        ValidatorConfigurationError: An adapter is missing or cannot be imported
    """
    app_settings = get_settings()
    return ValidationPipeline(
        structural_validator=load_validator(
            app_settings.STRUCTURAL_VALIDATOR, StructuralValidator, "STRUCTURAL_VALIDATOR"
        ),
        vocabulary_validator=load_validator(
            app_settings.VOCABULARY_VALIDATOR, VocabularyValidator, "VOCABULARY_VALIDATOR"
        ),
        content_validator=load_validator(
            app_settings.CONTENT_VALIDATOR, ContentValidator, "CONTENT_VALIDATOR"
        ),
        settings=app_settings,
    )
