"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from cubicmvc import __version__
from cubicmvc.cli.app import app

runner = CliRunner()


@pytest.fixture
def square_file(tmp_path, square):
    path = tmp_path / "square.json"
    path.write_text(json.dumps({"vertices": square}), encoding="utf-8")
    return path


@pytest.fixture
def queries_file(tmp_path):
    path = tmp_path / "queries.json"
    path.write_text(json.dumps({"queries": [[2, 2], [2, 0], [0, 0]]}), encoding="utf-8")
    return path


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInfo:
    """Tests for the info command."""

    def test_valid_boundary(self, square_file):
        result = runner.invoke(app, ["info", str(square_file)])
        assert result.exit_code == 0
        assert "4 vertices" in result.output
        assert "Boundary is valid" in result.output

    def test_invalid_boundary(self, tmp_path):
        path = tmp_path / "line.json"
        path.write_text(json.dumps({"vertices": [[0, 0], [1, 0]]}), encoding="utf-8")
        result = runner.invoke(app, ["info", str(path)])
        assert result.exit_code == 1
        assert "at least 3 vertices" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.json")])
        assert result.exit_code == 1


class TestEvaluate:
    """Tests for the evaluate command."""

    def test_single_query_quiet(self, square_file):
        result = runner.invoke(app, ["evaluate", str(square_file), "--query", "2,2", "-q"])
        assert result.exit_code == 0
        assert result.output.split() == ["0.25"] * 4

    def test_single_query_tables(self, square_file):
        result = runner.invoke(app, ["evaluate", str(square_file), "--query", "2,0"])
        assert result.exit_code == 0
        assert "query lies on edge 0" in result.output

    def test_bad_query_string(self, square_file):
        result = runner.invoke(app, ["evaluate", str(square_file), "--query", "1;2"])
        assert result.exit_code != 0

    def test_coincident_query(self, square_file):
        result = runner.invoke(app, ["evaluate", str(square_file), "--query", "4,4", "-q"])
        assert result.exit_code == 1

    def test_requires_one_query_source(self, square_file, queries_file):
        result = runner.invoke(app, ["evaluate", str(square_file)])
        assert result.exit_code == 1

        result = runner.invoke(
            app,
            ["evaluate", str(square_file), "--query", "1,1", "--queries", str(queries_file)],
        )
        assert result.exit_code == 1

    def test_verbose_and_quiet_conflict(self, square_file):
        result = runner.invoke(app, ["evaluate", str(square_file), "--query", "1,1", "-v", "-q"])
        assert result.exit_code == 1

    def test_batch(self, tmp_path, square_file, queries_file):
        output = tmp_path / "coords.json"
        result = runner.invoke(
            app,
            [
                "evaluate", str(square_file),
                "--queries", str(queries_file),
                "-o", str(output),
                "-j", "1",
                "-q",
            ],
        )
        assert result.exit_code == 0

        records = json.loads(output.read_text(encoding="utf-8"))["results"]
        assert [r["query"] for r in records] == [[2.0, 2.0], [2.0, 0.0], [0.0, 0.0]]
        assert records[0]["coordinates"]["value_coords"] == pytest.approx([0.25] * 4)
        assert records[1]["coordinates"]["boundary_edge"] == 0
        assert records[2]["coordinates"] is None
        assert "vertex 0" in records[2]["error"]

    def test_batch_default_output(self, tmp_path, square_file, queries_file):
        result = runner.invoke(
            app, ["evaluate", str(square_file), "--queries", str(queries_file), "-j", "1"]
        )
        assert result.exit_code == 0
        assert (tmp_path / "square-coords.json").exists()
        assert "Complete" in result.output
        assert "ms range" in result.output

    def test_batch_log_file(self, tmp_path, square_file, queries_file):
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app,
            [
                "evaluate", str(square_file),
                "--queries", str(queries_file),
                "-j", "1",
                "-q",
                "--log-file", str(log_file),
            ],
        )
        assert result.exit_code == 0
        assert "Evaluation complete" in log_file.read_text(encoding="utf-8")


class TestMalformedEdgeList:
    """Edge lists referencing missing vertices fail with a typed error."""

    @pytest.fixture
    def bad_edges_file(self, tmp_path, square):
        path = tmp_path / "bad-edges.json"
        path.write_text(
            json.dumps({"vertices": square, "edges": [[0, 1], [1, 2], [2, 9], [9, 0]]}),
            encoding="utf-8",
        )
        return path

    def test_info(self, bad_edges_file):
        result = runner.invoke(app, ["info", str(bad_edges_file)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "edge list" in result.output

    def test_evaluate(self, bad_edges_file):
        result = runner.invoke(app, ["evaluate", str(bad_edges_file), "--query", "1,1"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "edge list" in result.output
