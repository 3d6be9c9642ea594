"""Configuration settings for cubicmvc."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_COLLINEAR_TOLERANCE = 1e-10


class GeometryConfig(BaseModel):
    """Numerical tolerances for degeneracy detection.

    The tolerance is relative: an edge counts as passing through the query
    point when its signed area against the query is below ``tolerance`` times
    the squared edge length.
    """

    collinear_tolerance: float = Field(
        default=DEFAULT_COLLINEAR_TOLERANCE,
        ge=1e-15,
        le=1e-3,
        description="Relative tolerance for the on-edge test",
    )


class ValidationConfig(BaseModel):
    """Configuration for input validation."""

    validate_boundary: bool = Field(
        default=True,
        description="Check polygon well-formedness before evaluating",
    )
    require_closed_loops: bool = Field(
        default=True,
        description="Reject edge lists whose vertices have unequal in/out degree",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch evaluation."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )
    chunk_size: int = Field(
        default=64,
        ge=1,
        le=100_000,
        description="Number of queries sent to a worker per task",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CubicMVCSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CubicMVCSettings:
    """Get default application settings."""
    return CubicMVCSettings()
