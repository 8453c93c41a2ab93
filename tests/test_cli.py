"""Tests for the scqbf command-line interface."""

from __future__ import annotations

import csv
import json

from click.testing import CliRunner

from scqbf.cli import main


class TestMain:
    """Top-level group."""

    def test_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "solve" in result.output
        assert "batch" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestSolveCommand:
    """scqbf solve."""

    def test_text_output(self, diagonal_file):
        result = CliRunner().invoke(main, ["solve", str(diagonal_file), "-n", "2", "--seed", "1"])
        assert result.exit_code == 0, result.output
        assert "Best objective: 3.000000" in result.output
        assert "Selected: 3 of 3" in result.output
        assert "Stopped: max_iterations" in result.output

    def test_json_output(self, diagonal_file):
        result = CliRunner().invoke(
            main,
            ["solve", str(diagonal_file), "-n", "1", "--mode", "reactive",
             "--alphas", "0.1,0.4", "--format", "json"],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["selected_indices"] == [0, 1, 2]
        assert data["construction"] == "reactive"
        assert data["metadata"]["reactive_alphas"] == [0.1, 0.4]

    def test_bad_alphas(self, diagonal_file):
        result = CliRunner().invoke(main, ["solve", str(diagonal_file), "--alphas", "0.1,x"])
        assert result.exit_code != 0
        assert "--alphas" in result.output

    def test_invalid_alpha_reports_error(self, diagonal_file):
        result = CliRunner().invoke(main, ["solve", str(diagonal_file), "--alpha", "2"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_malformed_file(self, tmp_path):
        bad = tmp_path / "bad.txt"
        bad.write_text("3\n1 1\n")
        result = CliRunner().invoke(main, ["solve", str(bad)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(main, ["solve", str(tmp_path / "none.txt")])
        assert result.exit_code != 0


class TestBatchCommand:
    """scqbf batch."""

    def test_writes_csv(self, tmp_path, diagonal_text):
        src = tmp_path / "inst"
        src.mkdir()
        (src / "d.txt").write_text(diagonal_text)
        out = tmp_path / "out.csv"

        result = CliRunner().invoke(
            main, ["batch", str(src), str(out), "--max-iterations", "1", "--minutes", "1"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.count("OK: d.txt") == 5
        assert f"Results saved to: {out}" in result.output

        with open(out, newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 5
        assert {r["best_f"] for r in rows} == {"3.000000"}

    def test_empty_source(self, tmp_path):
        src = tmp_path / "empty"
        src.mkdir()
        result = CliRunner().invoke(main, ["batch", str(src), str(tmp_path / "o.csv")])
        assert result.exit_code == 1
        assert "No instance files found" in result.output
