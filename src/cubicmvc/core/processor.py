"""Parallel evaluation of many query points against one boundary.

A boundary is read-only during evaluation, so query points can be spread over
worker processes freely; each worker call allocates its own workspace.

Key components:
- evaluate_query / evaluate_chunk: Top-level picklable functions for workers
- BatchEvaluator: Orchestrates a batch and collects statistics
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from cubicmvc.config import CubicMVCSettings, GeometryConfig, ValidationConfig
from cubicmvc.core.accumulator import EvaluationWorkspace
from cubicmvc.core.evaluator import CubicMVCEvaluator
from cubicmvc.domain import Boundary, CubicMVCCoordinates, Point, PointLike
from cubicmvc.utils import EvaluationLogger, EvaluationStats, configure_logging


def _worker_evaluator(boundary_dict: dict[str, Any], tolerance: float) -> CubicMVCEvaluator:
    # the parent validated the boundary before fanning out
    settings = CubicMVCSettings(
        geometry=GeometryConfig(collinear_tolerance=tolerance),
        validation=ValidationConfig(validate_boundary=False),
    )
    return CubicMVCEvaluator(Boundary.from_dict(boundary_dict), settings)


def _evaluate_point(
    evaluator: CubicMVCEvaluator,
    query: tuple[float, float],
    workspace: EvaluationWorkspace | None,
) -> dict[str, Any]:
    start_time = time.time()
    try:
        coords = evaluator.evaluate(query, workspace)
        return {
            "query": query,
            "coordinates": coords.to_dict(),
            "duration_ms": (time.time() - start_time) * 1000,
        }
    except Exception as e:
        return {
            "query": query,
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": (time.time() - start_time) * 1000,
        }


def evaluate_query(
    boundary_dict: dict[str, Any],
    query: tuple[float, float],
    tolerance: float,
) -> dict[str, Any]:
    """Evaluate one query point.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        boundary_dict: Serialized boundary (from Boundary.to_dict())
        query: Query point as (x, y)
        tolerance: Relative tolerance of the on-edge test

    Returns:
        Dictionary containing either:
        - Success: {"query", "coordinates": dict, "duration_ms": float}
        - Error: {"query", "error": str, "error_type": str, "traceback": str,
          "duration_ms": float}
    """
    evaluator = _worker_evaluator(boundary_dict, tolerance)
    return _evaluate_point(evaluator, query, None)


def evaluate_chunk(
    boundary_dict: dict[str, Any],
    queries: Sequence[tuple[float, float]],
    tolerance: float,
) -> list[dict[str, Any]]:
    """Evaluate several query points with one shared workspace.

    Returns:
        One result dictionary per query, in input order (see evaluate_query)
    """
    evaluator = _worker_evaluator(boundary_dict, tolerance)
    workspace = EvaluationWorkspace.allocate(
        evaluator.boundary.vertex_count, evaluator.boundary.edge_count
    )
    return [_evaluate_point(evaluator, query, workspace) for query in queries]


class BatchEvaluator:
    """Orchestrates evaluation of many query points.

    Manages the complete workflow:
    1. Validate the boundary once
    2. Split queries into chunks
    3. Evaluate chunks in worker processes (or in-process for one worker)
    4. Collect results in query order and update statistics

    Example:
        settings = CubicMVCSettings()
        batch = BatchEvaluator(settings)
        results, stats = batch.evaluate(boundary, queries, max_workers=4)
    """

    def __init__(
        self,
        config: CubicMVCSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the batch evaluator.

        Args:
            config: Settings with tolerance, validation and processing config
            logger: Logger to use (configured from ``config.logging`` if None)
        """
        self.config = config
        if logger is None:
            logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
            )
        self.logger = logger

    def evaluate(
        self,
        boundary: Boundary,
        queries: Sequence[PointLike],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> tuple[list[CubicMVCCoordinates | None], EvaluationStats]:
        """Evaluate coordinates for every query point.

        Args:
            boundary: Boundary to evaluate against
            queries: Query points
            max_workers: Maximum worker processes (None = config, then auto)
            progress_callback: Optional callback(completed, total) called after
                each finished query

        Returns:
            Tuple of (results, stats). ``results[n]`` holds the coordinates of
            ``queries[n]``, or None if that query failed.

        Raises:
            InvalidPolygonError: If boundary validation fails
            KeyboardInterrupt: If evaluation is cancelled by user
        """
        evaluation_logger = EvaluationLogger(self.logger)
        stats = evaluation_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        # raises before any work is scheduled
        CubicMVCEvaluator(boundary, self.config)

        evaluation_logger.log_boundary_summary(
            vertex_count=boundary.vertex_count,
            edge_count=boundary.edge_count,
            loop_count=boundary.loop_count(),
            signed_area=boundary.signed_area(),
        )

        points = [Point.coerce(q).to_tuple() for q in queries]
        chunk_size = self.config.processing.chunk_size
        chunks = [
            (start, points[start:start + chunk_size])
            for start in range(0, len(points), chunk_size)
        ]
        results: list[CubicMVCCoordinates | None] = [None] * len(points)

        self.logger.info(
            "Starting evaluation",
            query_count=len(points),
            chunk_count=len(chunks),
            max_workers=max_workers,
        )

        boundary_dict = boundary.to_dict()
        tolerance = self.config.geometry.collinear_tolerance
        completed = 0

        def collect(start: int, chunk_results: list[dict[str, Any]]) -> None:
            nonlocal completed
            for offset, result in enumerate(chunk_results):
                query = tuple(result["query"])
                if "error" in result:
                    evaluation_logger.log_query_error(
                        query=query,
                        error=result["error"],
                        error_type=result["error_type"],
                    )
                else:
                    coords = CubicMVCCoordinates.from_dict(result["coordinates"])
                    results[start + offset] = coords
                    evaluation_logger.log_query_complete(
                        query=query,
                        on_boundary=coords.on_boundary,
                        duration_ms=result["duration_ms"],
                    )
                completed += 1
                if progress_callback is not None:
                    progress_callback(completed, len(points))

        if max_workers == 1:
            for start, chunk in chunks:
                collect(start, evaluate_chunk(boundary_dict, chunk, tolerance))
        else:
            self._evaluate_parallel(
                boundary_dict, chunks, tolerance, max_workers, stats, collect
            )

        stats.end_time = time.time()
        self.logger.info(
            "Evaluation complete",
            evaluated=stats.evaluated_count,
            on_boundary=stats.boundary_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return results, stats

    def _evaluate_parallel(
        self,
        boundary_dict: dict[str, Any],
        chunks: list[tuple[int, list[tuple[float, float]]]],
        tolerance: float,
        max_workers: int | None,
        stats: EvaluationStats,
        collect: Callable[[int, list[dict[str, Any]]], None],
    ) -> None:
        """Evaluate chunks using ProcessPoolExecutor."""
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for start, chunk in chunks:
                future = executor.submit(evaluate_chunk, boundary_dict, chunk, tolerance)
                pending_futures[future] = (start, chunk)

            try:
                for future in as_completed(pending_futures):
                    start, chunk = pending_futures.pop(future)
                    try:
                        chunk_results = future.result()
                    except Exception as e:
                        # Executor-level error: report every query of the chunk
                        tb = traceback.format_exc()
                        chunk_results = [
                            {
                                "query": query,
                                "error": str(e),
                                "error_type": type(e).__name__,
                                "traceback": tb,
                            }
                            for query in chunk
                        ]
                    collect(start, chunk_results)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = sum(len(chunk) for _, chunk in pending_futures.values())

                executor.shutdown(wait=True, cancel_futures=True)
                raise
