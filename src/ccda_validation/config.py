"""
Configuration settings for the C-CDA Validation Service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "C-CDA Validation Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === Validation Defaults ===
    DEFAULT_VOCABULARY_CONFIG: str = "ccdaReferenceValidatorConfig"
    DEFAULT_SEVERITY_LEVEL: str = "INFO"
    
    # === Validator Adapters ===
    # Dotted import paths ("package.module:ClassName"), instantiated with no arguments
    STRUCTURAL_VALIDATOR: Optional[str] = None
    VOCABULARY_VALIDATOR: Optional[str] = None
    CONTENT_VALIDATOR: Optional[str] = None
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
