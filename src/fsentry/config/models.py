"""Configuration models describing fsentry settings."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FsentryBaseModel(BaseModel):
    """Shared configuration for fsentry Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class ClassificationOptions(FsentryBaseModel):
    """Options governing how entries are classified.

    Attributes:
        sample_size_bytes: Number of leading bytes inspected by the text heuristic.
        follow_symlinks: Whether metadata queries resolve symbolic links.
        labels_file: Optional YAML label table used instead of the packaged one.
        extra_labels: Extension labels merged over the packaged table.
    """

    sample_size_bytes: int = Field(default=1024, ge=1)
    follow_symlinks: bool = True
    labels_file: Optional[str] = None
    extra_labels: Dict[str, str] = Field(default_factory=dict)

    @field_validator("extra_labels")
    @classmethod
    def _strip_leading_dots(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {key.lstrip("."): label for key, label in value.items()}


class LoggingSettings(FsentryBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
        file: Optional log file path; console-only when unset.
        max_size_mb: Maximum log size before rotation.
        backup_count: Number of historical log files to retain.
    """

    level: str = "WARNING"
    file: Optional[str] = None
    max_size_mb: int = 10
    backup_count: int = 3


class CLIOptions(FsentryBaseModel):
    """CLI behavior defaults.

    Attributes:
        json_default: Whether commands emit JSON unless told otherwise.
    """

    json_default: bool = False


class FsentryConfig(FsentryBaseModel):
    """Top-level configuration for fsentry.

    Attributes:
        classification: Classification settings.
        logging: Logging configuration.
        cli: CLI presentation defaults.
    """

    classification: ClassificationOptions = Field(default_factory=ClassificationOptions)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLIOptions = Field(default_factory=CLIOptions)


__all__ = [
    "FsentryBaseModel",
    "ClassificationOptions",
    "LoggingSettings",
    "CLIOptions",
    "FsentryConfig",
]
