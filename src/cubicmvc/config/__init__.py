"""Configuration management for cubicmvc.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Numerical tolerances
- ValidationConfig: Input validation switches
- ProcessingConfig: Batch evaluation settings
- LoggingConfig: Logging settings
- CubicMVCSettings: Main application settings
"""

from cubicmvc.config.settings import (
    CubicMVCSettings,
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    ValidationConfig,
    get_default_settings,
)

__all__ = [
    "CubicMVCSettings",
    "GeometryConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "ValidationConfig",
    "get_default_settings",
]
