"""Configuration schema for path_relativizer."""

from typing import Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .logging_config import LoggingConfig


class OutputConfig(BaseModel):
    """How the command line tool reads pairs and prints results."""

    model_config = ConfigDict(extra='forbid')

    format: Literal["plain", "json"] = Field(
        default="plain",
        description="Result format: bare paths or one JSON object per pair"
    )
    separator: str = Field(
        default="\t",
        min_length=1,
        description="Separator between source and target in batch input"
    )

    @field_validator('format', mode='before')
    @classmethod
    def normalize_format(cls, v: str) -> str:
        """Accept format names case-insensitively."""
        if isinstance(v, str):
            return v.lower()
        return v


class RelativizerConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
