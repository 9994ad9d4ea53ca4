# tests/integration_tests/test_cli.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# End-to-end tests for the command-line shell

"""End-to-end tests for run_truth_table.

Tables are printed to stdout; diagnostics go through the logger, so only
stdout and exit codes are asserted.
"""

import io
import sys

import pytest
import run_truth_table
from run_truth_table import main, process_formula, read_formula_file


class TestBatchMode:
    """Test cases for formulas given on the command line or in a file."""

    def test_single_formula(self, capsys):
        assert main(["a&b"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == ["(a&b) a b", "F F F", "F T F", "F F T", "T T T"]

    def test_custom_delimiter(self, capsys):
        assert main(["-d", ",", "!a"]) == 0
        assert capsys.readouterr().out.splitlines() == ["(!a),a", "T,F", "F,T"]

    def test_tables_separated_by_blank_line(self, capsys):
        assert main(["a", "!b"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "a", "F", "T", "", "(!b) b", "T F", "F T",
        ]

    def test_bad_formula_skipped_and_reported(self, capsys):
        assert main(["a&", "a"]) == 2
        assert capsys.readouterr().out.splitlines() == ["", "a", "F", "T"]

    def test_formula_file(self, tmp_path, capsys):
        path = tmp_path / "formulas.txt"
        path.write_text("a|!a\n\n  a  \n", encoding="utf-8")

        assert read_formula_file(path) == ["a|!a", "a"]
        assert main(["-q", "-f", str(path)]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "(a|(!a)) a (!a) a"

    def test_missing_formula_file(self, tmp_path):
        assert main(["-f", str(tmp_path / "missing.txt")]) == 3

    def test_empty_formula_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n\n", encoding="utf-8")

        with pytest.raises(ValueError, match="empty"):
            read_formula_file(path)
        assert main(["-f", str(path)]) == 3


class TestInteractiveMode:
    """Test cases for the stdin read loop."""

    def test_stops_at_empty_line(self, monkeypatch, capsys):
        monkeypatch.setattr(run_truth_table.sys, "stdin", io.StringIO("a\n\nb\n"))

        assert main([]) == 0
        assert capsys.readouterr().out.splitlines() == ["a", "F", "T"]

    def test_stops_at_end_of_input(self, monkeypatch, capsys):
        monkeypatch.setattr(run_truth_table.sys, "stdin", io.StringIO("!a\nb"))

        assert main(["--quiet"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "(!a) a", "T F", "F T", "b", "F", "T",
        ]

    def test_failure_does_not_stop_loop(self, monkeypatch, capsys):
        monkeypatch.setattr(run_truth_table.sys, "stdin", io.StringIO("(a\na\n"))

        assert main([]) == 2
        assert capsys.readouterr().out.splitlines() == ["a", "F", "T"]

    def test_deeply_nested_formula_does_not_stop_loop(self, monkeypatch, capsys):
        depth = sys.getrecursionlimit() + 500
        lines = "!" * depth + "a\n" + "&".join(["a"] * depth) + "\nb\n"
        monkeypatch.setattr(run_truth_table.sys, "stdin", io.StringIO(lines))

        assert main(["-q"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 9
        assert out[-3:] == ["b", "F", "T"]


class TestProcessFormula:
    """Test cases for single-formula processing."""

    def test_success_writes_table(self):
        out = io.StringIO()
        assert process_formula("a<->b", " | ", out)
        assert out.getvalue().splitlines()[0] == "(a<->b) | a | b"

    def test_failure_writes_nothing(self):
        out = io.StringIO()
        assert not process_formula("a b", " ", out)
        assert out.getvalue() == ""
