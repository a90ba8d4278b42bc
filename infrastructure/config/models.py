"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from infrastructure.constants import TAXONOMY_FILE


class ParserConfig(BaseModel):
    """
    Runtime configuration for the CLC parser.
    - Loaded from parser.yaml (all keys optional)
    - Environment overrides applied by the configuration loader
    """

    model_config = ConfigDict(extra="forbid")

    taxonomy_file: Path = Field(
        default_factory=lambda: TAXONOMY_FILE,
        description="Taxonomy definition file (.json, .yaml or .yml).",
    )
    strict_classes: bool = Field(
        default=True,
        description="Only accept 5th-edition class letters when cleaning codes. "
        "If False, any two-letter prefix is accepted.",
    )
    delimiters: list[str] = Field(
        default_factory=lambda: [";", "；"],
        description="Segment delimiters. The first is the split character, the rest are normalised to it.",
    )
    log_level: str = Field(default="INFO", description="Console log level.")

    @field_validator("delimiters")
    @classmethod
    def _check_delimiters(cls, v: list[str]) -> list[str]:
        if not v or any(not d for d in v):
            raise ValueError("delimiters must be a non-empty list of non-empty strings")
        return v

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level
