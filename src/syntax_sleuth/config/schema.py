"""Pydantic models for configuration schema."""

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _validate_keywords(v: list[str]) -> list[str]:
    if not v:
        raise ValueError("Keyword list must not be empty")
    for keyword in v:
        if not _IDENTIFIER.match(keyword):
            raise ValueError(f"Invalid keyword: {keyword!r}")
    return v


class LanguageConfig(BaseModel):
    """Keyword shape of the language being checked."""

    block_keywords: list[str] = [
        "def",
        "class",
        "module",
        "if",
        "unless",
        "while",
        "until",
        "case",
        "begin",
        "for",
    ]
    trailing_keywords: list[str] = ["do"]
    terminator_keywords: list[str] = ["end"]
    comment_prefix: str = Field("#", min_length=1)
    tab_width: int = Field(1, ge=1, le=16)

    @field_validator("block_keywords", "terminator_keywords")
    @classmethod
    def validate_keywords(cls, v: list[str]) -> list[str]:
        """Validate that keyword lists hold plain identifiers."""
        return _validate_keywords(v)

    @field_validator("trailing_keywords")
    @classmethod
    def validate_trailing_keywords(cls, v: list[str]) -> list[str]:
        """Validate trailing keywords, which may be empty."""
        return _validate_keywords(v) if v else v


class SearchConfig(BaseModel):
    """Block search configuration."""

    max_iterations: int = Field(10_000, ge=1, description="Upper bound on search ticks")
    max_combination_size: int = Field(
        6, ge=1, le=10, description="Largest group of blocks tried when isolating errors"
    )


class DisplayConfig(BaseModel):
    """Rendering configuration."""

    highlight_marker: str = "❯ "
    show_filename: bool = True


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("syntax-sleuth.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()


class SleuthConfig(BaseSettings):
    """Root configuration for syntax-sleuth."""

    language: LanguageConfig = LanguageConfig()
    search: SearchConfig = SearchConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="SYNTAX_SLEUTH_",
        env_nested_delimiter="__",
    )
