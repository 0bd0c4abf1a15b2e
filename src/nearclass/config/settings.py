"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nearclass.schemas.training import DEFAULT_LABEL_COLUMN


class DataConfig(BaseModel):
    """Location and layout of the training CSV."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Path to the training CSV")
    base_dir: Path = Field(
        default=Path("."),
        description="Directory relative paths are resolved against",
    )
    label_column: str = Field(
        default=DEFAULT_LABEL_COLUMN, description="Name of the class label column"
    )
    feature_columns: list[str] | None = Field(
        default=None,
        description="Feature columns in feature order (default: all but label)",
    )

    @field_validator("feature_columns")
    @classmethod
    def validate_feature_columns(cls, v: list[str] | None) -> list[str] | None:
        """Ensure an explicit feature list is non-empty and has no duplicates."""
        if v is None:
            return v
        if not v:
            msg = "feature_columns must not be empty when given"
            raise ValueError(msg)
        if len(set(v)) != len(v):
            msg = f"feature_columns contains duplicates: {v}"
            raise ValueError(msg)
        return v

    def resolve(self) -> Path:
        """Resolve the data path against base_dir."""
        if self.path.is_absolute():
            return self.path
        return self.base_dir / self.path


class DisplayConfig(BaseModel):
    """How feature vectors are rendered."""

    model_config = ConfigDict(frozen=True)

    precision: int = Field(default=1, ge=0, le=10, description="Decimal places")
    separator: str = Field(default=", ", description="Separator between values")


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level


class AppConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(frozen=True)

    data: DataConfig
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    classes: dict[int, str] = Field(
        default_factory=dict, description="Optional label -> class name mapping"
    )
