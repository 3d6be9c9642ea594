"""Logging utilities for cubicmvc."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_FILE_HANDLER_NAME = "cubicmvc-file"
_CONSOLE_HANDLER_NAME = "cubicmvc-console"


@dataclass
class EvaluationStats:
    """Statistics from a batch evaluation run."""

    evaluated_count: int = 0
    boundary_count: int = 0
    error_count: int = 0
    errors: list[tuple[tuple[float, float], str]] = field(default_factory=list)
    query_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_query_time_ms(self) -> float | None:
        """Average evaluation time per query."""
        if not self.query_timings_ms:
            return None
        return sum(self.query_timings_ms) / len(self.query_timings_ms)

    @property
    def min_query_time_ms(self) -> float | None:
        """Fastest query evaluation."""
        return min(self.query_timings_ms) if self.query_timings_ms else None

    @property
    def max_query_time_ms(self) -> float | None:
        """Slowest query evaluation."""
        return max(self.query_timings_ms) if self.query_timings_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() in (_FILE_HANDLER_NAME, _CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("cubicmvc")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class EvaluationLogger:
    """Logger for tracking batch evaluation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = EvaluationStats()

    def log_boundary_summary(
        self,
        vertex_count: int,
        edge_count: int,
        loop_count: int,
        signed_area: float,
    ) -> None:
        """Log the boundary a batch runs against."""
        self._logger.info(
            "Boundary loaded",
            vertices=vertex_count,
            edges=edge_count,
            loops=loop_count,
            signed_area=signed_area,
        )

    def log_query_complete(
        self,
        query: tuple[float, float],
        on_boundary: bool,
        duration_ms: float,
    ) -> None:
        """Log successful query evaluation."""
        self._logger.debug(
            "Query evaluated",
            query=query,
            on_boundary=on_boundary,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.evaluated_count += 1
        if on_boundary:
            self._stats.boundary_count += 1
        self._stats.query_timings_ms.append(duration_ms)

    def log_query_error(
        self,
        query: tuple[float, float],
        error: str,
        error_type: str,
    ) -> None:
        """Log a failed query evaluation."""
        self._logger.error(
            "Query evaluation failed",
            query=query,
            error=error,
            error_type=error_type,
        )
        self._stats.error_count += 1
        self._stats.errors.append((query, error))

    @property
    def stats(self) -> EvaluationStats:
        """Get current evaluation statistics."""
        return self._stats
