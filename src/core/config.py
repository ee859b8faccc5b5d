"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets the decorator and the document read the same values.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.text_decorator import DEFAULT_BULLET, DEFAULT_RULE_WIDTH


class AppSettings(BaseSettings):
    """Central application settings.

    The defaults reproduce the reference document byte for byte; every field
    can be overridden with a `FORMATTED_OUTPUT_*` variable or a local `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORMATTED_OUTPUT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    bullet: str = Field(
        default=DEFAULT_BULLET,
        min_length=1,
        max_length=4,
        description="Glyph printed in front of bullet points.",
    )
    rule_width: int = Field(
        default=DEFAULT_RULE_WIDTH,
        ge=1,
        le=500,
        description="Width of the title rules and the closing rule.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for diagnostic logging on stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
