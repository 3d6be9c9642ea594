"""Tests for batch evaluation orchestration."""

from unittest.mock import Mock

import pytest
import structlog

from cubicmvc.config import CubicMVCSettings, ProcessingConfig
from cubicmvc.core import BatchEvaluator, cubic_mvc, evaluate_chunk, evaluate_query
from cubicmvc.domain import Boundary, CubicMVCCoordinates
from cubicmvc.exceptions import InvalidPolygonError


@pytest.fixture
def square_boundary(square) -> Boundary:
    return Boundary.from_polygon(square)


@pytest.fixture
def settings() -> CubicMVCSettings:
    """Settings with small chunks so batches span several chunks."""
    return CubicMVCSettings(processing=ProcessingConfig(max_workers=1, chunk_size=2))


@pytest.fixture
def batch(settings) -> BatchEvaluator:
    return BatchEvaluator(settings, logger=structlog.get_logger("test"))


class TestWorkerFunctions:
    """Tests for the picklable worker entry points."""

    def test_evaluate_query_success(self, square_boundary):
        result = evaluate_query(square_boundary.to_dict(), (2.0, 2.0), 1e-10)
        assert "error" not in result
        coords = CubicMVCCoordinates.from_dict(result["coordinates"])
        assert coords.value_coords == pytest.approx([0.25] * 4)
        assert result["duration_ms"] >= 0

    def test_evaluate_query_error(self, square_boundary):
        """Errors are returned, not raised."""
        result = evaluate_query(square_boundary.to_dict(), (0.0, 0.0), 1e-10)
        assert result["error_type"] == "CoincidentQueryError"
        assert "coordinates" not in result
        assert "traceback" in result

    def test_evaluate_chunk_order(self, square_boundary):
        queries = [(1.0, 3.0), (0.0, 4.0), (2.0, 0.0)]
        results = evaluate_chunk(square_boundary.to_dict(), queries, 1e-10)
        assert [r["query"] for r in results] == queries
        assert "error" in results[1]
        assert CubicMVCCoordinates.from_dict(results[2]["coordinates"]).boundary_edge == 0

    def test_evaluate_chunk_matches_direct(self, square, square_boundary):
        results = evaluate_chunk(square_boundary.to_dict(), [(1.0, 3.0)], 1e-10)
        coords = CubicMVCCoordinates.from_dict(results[0]["coordinates"])
        assert coords == cubic_mvc(square, (1.0, 3.0))


class TestBatchEvaluator:
    """Tests for BatchEvaluator."""

    def test_results_in_query_order(self, batch, square, square_boundary):
        queries = [(2.0, 2.0), (1.0, 3.0), (3.0, 1.0), (2.0, 0.0), (0.5, 0.5)]
        results, stats = batch.evaluate(square_boundary, queries)

        assert len(results) == len(queries)
        for query, coords in zip(queries, results):
            assert coords == cubic_mvc(square, query)
        assert stats.evaluated_count == 5
        assert stats.boundary_count == 1
        assert stats.error_count == 0
        assert len(stats.query_timings_ms) == 5
        assert stats.duration_seconds >= 0

    def test_failed_query_recorded(self, batch, square_boundary):
        results, stats = batch.evaluate(square_boundary, [(2.0, 2.0), (4.0, 4.0)])

        assert results[0] is not None
        assert results[1] is None
        assert stats.error_count == 1
        query, message = stats.errors[0]
        assert query == (4.0, 4.0)
        assert "vertex 2" in message

    def test_progress_callback(self, batch, square_boundary):
        callback = Mock()
        batch.evaluate(square_boundary, [(1.0, 1.0), (2.0, 1.0), (3.0, 1.0)],
                       progress_callback=callback)

        assert callback.call_count == 3
        callback.assert_called_with(3, 3)

    def test_invalid_boundary_raises(self, batch):
        boundary = Boundary.from_polygon([(0.0, 0.0), (1.0, 0.0)])
        with pytest.raises(InvalidPolygonError):
            batch.evaluate(boundary, [(0.5, 0.5)])

    def test_empty_queries(self, batch, square_boundary):
        results, stats = batch.evaluate(square_boundary, [])
        assert results == []
        assert stats.evaluated_count == 0
        assert stats.avg_query_time_ms is None

    def test_parallel_matches_sequential(self, batch, square_with_hole):
        queries = [(1.5, 4.0), (6.0, 6.5), (4.0, 3.0), (7.0, 1.0)]
        sequential, _ = batch.evaluate(square_with_hole, queries, max_workers=1)
        parallel, stats = batch.evaluate(square_with_hole, queries, max_workers=2)

        assert parallel == sequential
        assert stats.evaluated_count == 4
        assert not stats.was_cancelled
