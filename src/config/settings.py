"""
Configuration management for the project catalog.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Configuration settings for the project catalog."""

    # Catalog source
    catalog_file: Optional[str] = Field(default=None, alias="CATALOG_FILE")
    id_prefix: str = Field(default="p", min_length=1, alias="ID_PREFIX")

    # Display
    currency_code: str = Field(default="INR", alias="CURRENCY_CODE")
    team_display_limit: int = Field(default=3, ge=1, alias="TEAM_DISPLAY_LIMIT")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="standard", alias="LOG_FORMAT")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("catalog_file", "log_file")
    @classmethod
    def blank_path(cls, v):
        """Treat an empty CATALOG_FILE or LOG_FILE as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ["standard", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("currency_code")
    @classmethod
    def validate_currency_code(cls, v):
        """Currency codes are three uppercase letters."""
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError("Currency code must be a three letter ISO code")
        return code


def load_config(env_file: Optional[str] = None) -> CatalogSettings:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return CatalogSettings()


# Global configuration instance
_config: Optional[CatalogSettings] = None


def get_config() -> CatalogSettings:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> CatalogSettings:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
