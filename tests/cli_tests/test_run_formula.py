# tests/cli_tests/test_run_formula.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Test suite for the command-line interface

"""Test suite for the run_formula command line.

Checks exit codes for each outcome and the text helpers used to present
truth tables and parse errors.
"""

import logging

import pytest

import run_formula
from formula import ParseError, parse
from semantics import truth_table
from support.logger import get_logger


class TestRunFormula:
    """Test cases for the command-line entry point."""

    def test_evaluates_formula(self):
        assert run_formula.main(["p ∧ q"]) == 0

    def test_normal_forms_and_latex(self):
        assert run_formula.main(["(p ∧ q) ⇄ (q ∧ p)", "--normal-forms", "--latex"]) == 0
        assert run_formula.main(["p ∧ ¬p", "--normal-forms", "--order", "sorted"]) == 0

    def test_equivalence_check(self):
        assert run_formula.main(["p → q", "--against", "¬p ∨ q"]) == 0

    def test_validate_only(self):
        assert run_formula.main(["¬(p ∨ q)", "--validate-only"]) == 0

    def test_parse_error_exit_code(self):
        assert run_formula.main(["p ∧ q ∨"]) == 2
        assert run_formula.main(["p", "--against", "q q"]) == 2

    def test_formula_file(self, tmp_path):
        path = tmp_path / "formula.txt"
        path.write_text("/* modus ponens */\n((p → q) ∧ p) → q\n", encoding="utf-8")
        assert run_formula.main(["-f", str(path)]) == 0

    def test_formula_file_errors(self, tmp_path):
        assert run_formula.main(["-f", str(tmp_path / "missing.txt")]) == 3

        empty = tmp_path / "empty.txt"
        empty.write_text("  \n", encoding="utf-8")
        assert run_formula.main(["-f", str(empty)]) == 3

    def test_proposition_limit(self):
        assert run_formula.main(["p ∧ q ∧ r", "--max-propositions", "2"]) == 4
        assert run_formula.main(["p ∧ q ∧ r", "--max-propositions", "3"]) == 0

    def test_equivalence_counts_combined_propositions(self):
        """Test the limit applies to the names of both formulas together."""
        args = ["p ∧ q", "--against", "r ∨ s", "--max-propositions"]
        assert run_formula.main(args + ["3"]) == 4
        assert run_formula.main(args + ["4"]) == 0
        assert run_formula.main(["p ∧ q", "--against", "q ∧ p", "--max-propositions", "2"]) == 0

    def test_debug_flag_sets_log_level(self):
        logger = get_logger()

        assert run_formula.main(["p", "--debug"]) == 0
        assert logger.logger.level == logging.DEBUG

        assert run_formula.main(["p"]) == 0
        assert logger.logger.level == logging.INFO

    def test_requires_exactly_one_source(self, tmp_path):
        with pytest.raises(SystemExit):
            run_formula.main([])
        with pytest.raises(SystemExit):
            run_formula.main(["p", "-f", str(tmp_path / "x.txt")])


class TestPresentationHelpers:
    """Test cases for text formatting used by the command line."""

    def test_format_truth_table(self):
        lines = run_formula.format_truth_table(truth_table(parse("p → q")), "p → q")

        assert len(lines) == 2 + 4
        assert lines[0].split(" | ") == ["p", "q", "p → q"]
        assert [line.replace(" ", "") for line in lines[2:]] == [
            "F|F|T",
            "F|T|T",
            "T|F|F",
            "T|T|T",
        ]

    def test_format_parse_error_points_at_position(self):
        text = "p ∧ q ∨"
        with pytest.raises(ParseError) as exc_info:
            parse(text)

        rendered = run_formula.format_parse_error(text, exc_info.value).split("\n")
        assert rendered[1] == "1 | p ∧ q ∨"
        assert rendered[2] == " " * (len("1 | ") + 7) + "^"

    def test_format_parse_error_on_later_line(self):
        text = "p ∧\n  @"
        with pytest.raises(ParseError) as exc_info:
            parse(text)

        rendered = run_formula.format_parse_error(text, exc_info.value).split("\n")
        assert rendered[1] == "2 |   @"
        assert rendered[2].index("^") == len("2 | ") + 2

    def test_proposition_limit_counts_shared_names_once(self):
        run_formula.check_proposition_limit(2, parse("p ∧ q"), parse("q ∨ ¬p"))

        with pytest.raises(run_formula.PropositionLimitExceeded) as exc_info:
            run_formula.check_proposition_limit(3, parse("p ∧ q"), parse("r ∨ s"))
        assert exc_info.value.count == 4
        assert exc_info.value.limit == 3
