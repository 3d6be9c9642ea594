"""Utility functions for cubicmvc.

This module provides utility functions including:

- Logging setup and configuration
- Evaluation statistics and progress logging
"""

from cubicmvc.utils.logging import (
    EvaluationLogger,
    EvaluationStats,
    configure_logging,
)

__all__ = [
    "EvaluationLogger",
    "EvaluationStats",
    "configure_logging",
]
