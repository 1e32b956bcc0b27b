"""Configuration management for the clientlib generator.

Settings are read from environment variables (case-insensitive) and an
optional ``.env`` file. Explicit arguments always win over settings:
CLI flags and ``GeneratorOptions`` fields are only defaulted from here.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"console", "json"}


class Settings(BaseSettings):
    """Process-wide defaults for clientlib generation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    clientlib_root: Optional[str] = Field(
        default=None,
        description="Default output root for library items that omit 'path'",
    )
    clientlib_cwd: Optional[str] = Field(
        default=None,
        description="Base directory for relative item paths and asset sources",
    )

    # Older generator releases wrote the dependency list under a second
    # 'embed' attribute in .content.xml
    xml_legacy_dependencies: bool = Field(
        default=False,
        description="Reproduce the legacy .content.xml dependency attribute",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log output format: console or json")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {value!r}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        lower = value.lower()
        if lower not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {value!r}")
        return lower


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings instance.

    Call ``get_settings.cache_clear()`` to pick up environment changes.
    """
    return Settings()
