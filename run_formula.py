#!/usr/bin/env python3
# run_formula.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Command-line interface for formula evaluation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from formula import parse, to_latex, to_text
from formula.ast_nodes import Expr
from formula.exceptions import ParseError
from semantics import (
    TruthTable,
    are_equivalent,
    principal_cnf,
    principal_dnf,
    truth_table,
)
from semantics.classification import Classification, classification_of
from support.logger import configure_logging, get_logger

DEFAULT_MAX_PROPOSITIONS = 12


class PropositionLimitExceeded(ValueError):
    """Raised when a formula has more propositions than the caller allows."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Formula has {count} distinct propositions; the limit is {limit} "
            f"(use --max-propositions to raise it)"
        )
        self.count = count
        self.limit = limit


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content.strip():
        raise ValueError("Formula file is empty")

    return content


def format_parse_error(text: str, error: ParseError) -> str:
    """Render a parse error with the offending source line and a caret."""
    lines = text.split("\n")
    line_no = error.position.line
    source_line = lines[line_no - 1] if line_no <= len(lines) else ""
    gutter = f"{line_no} | "
    caret = " " * (len(gutter) + error.position.column - 1) + "^"
    return f"{error}\n{gutter}{source_line}\n{caret}"


def check_proposition_limit(limit: int, *exprs: Expr) -> None:
    """Reject formulas whose combined distinct propositions exceed ``limit``.

    Equivalence checks enumerate the union of both formulas' names, so
    all formulas evaluated together are counted as one.
    """
    names = set()
    for expr in exprs:
        names.update(expr.propositions())
    if len(names) > limit:
        raise PropositionLimitExceeded(len(names), limit)


def format_truth_table(table: TruthTable, heading: str) -> List[str]:
    """Lay out a truth table as aligned text lines, T/F per cell."""
    headers = list(table.propositions) + [heading]
    widths = [max(len(h), 1) for h in headers]

    def line(cells: List[str]) -> str:
        return " | ".join(cell.center(width) for cell, width in zip(cells, widths))

    lines = [line(headers), "-+-".join("-" * width for width in widths)]
    for row in table.rows:
        cells = ["T" if value else "F" for value in table.columns(row)]
        cells.append("T" if row.value else "F")
        lines.append(line(cells))
    return lines


def report_formula(expr: Expr, source: str, args: argparse.Namespace) -> None:
    """Print the truth table, classification and requested extras."""
    logger = get_logger()
    text = to_text(expr)

    logger.formula_parsed(source, text, expr.propositions())
    if args.latex:
        logger.info(f"LaTeX: {to_latex(expr)}")

    table = truth_table(expr, order=args.order)
    logger.info("")
    for line in format_truth_table(table, text):
        logger.info(line)

    classification = classification_of(table)
    logger.classification_result(
        classification.name, classification is not Classification.CONTRADICTION
    )

    if args.normal_forms:
        render = to_latex if args.latex else to_text
        dnf = principal_dnf(table)
        cnf = principal_cnf(table)
        logger.info(f"\nPrincipal DNF: {render(dnf) if dnf is not None else '(none: contradiction)'}")
        logger.info(f"Principal CNF: {render(cnf) if cnf is not None else '(none: tautology)'}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propcalc Propositional Logic Evaluator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_formula.py "p ∧ q"
  python run_formula.py "(p ∧ q) ⇄ (q ∧ p)" --normal-forms
  python run_formula.py -f formula.txt --order sorted
  python run_formula.py "p → q" --against "¬p ∨ q"
  python run_formula.py "¬(p ∨ q)" --render-ast demorgan --validate-only

Notation:
  ¬ negation, ∧ conjunction, ∨ disjunction, → implication, ⇄ equivalence.
  Binary connectives share one precedence level and group left to right:
  a ∧ b ∨ c reads as (a ∧ b) ∨ c. Comments are written /* ... */.
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula text")

    parser.add_argument(
        "-f", "--file", type=Path, help="Read the formula from a file instead"
    )

    parser.add_argument(
        "--against", metavar="FORMULA", help="Check equivalence with a second formula"
    )

    parser.add_argument(
        "--order",
        choices=["occurrence", "sorted"],
        default="occurrence",
        help="Column order of the truth table (default: occurrence)",
    )

    parser.add_argument(
        "--max-propositions",
        type=int,
        default=DEFAULT_MAX_PROPOSITIONS,
        help=f"Reject formulas with more distinct propositions (default: {DEFAULT_MAX_PROPOSITIONS})",
    )

    parser.add_argument(
        "--normal-forms", action="store_true", help="Print principal DNF and CNF"
    )

    parser.add_argument(
        "--latex", action="store_true", help="Also render formulas as LaTeX"
    )

    parser.add_argument(
        "--render-ast", metavar="NAME", help="Render the syntax tree with Graphviz"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only check the formula syntax"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for formula evaluation.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if (args.formula is None) == (args.file is None):
        parser.error("give exactly one of a formula argument or --file")

    configure_logging(debug=args.debug)
    logger = get_logger()

    source = args.formula
    try:
        if args.file is not None:
            source = read_formula_file(args.file)

        expr = parse(source)
        logger.validation_result(True, "Formula syntax is well-formed")

        if args.render_ast:
            from support.ast_visualizer import render_ast

            render_ast(expr, args.render_ast)

        if args.validate_only:
            logger.info(f"✅ Formula is well-formed: {to_text(expr)}")
            return 0

        check_proposition_limit(args.max_propositions, expr)
        report_formula(expr, source, args)

        if args.against is not None:
            source = args.against
            other = parse(source)
            check_proposition_limit(args.max_propositions, expr, other)
            logger.equivalence_result(
                to_text(expr), to_text(other), are_equivalent(expr, other)
            )

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {format_parse_error(source, e)}")
        return 2

    except PropositionLimitExceeded as e:
        logger.error(str(e))
        return 4

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Evaluation interrupted by user")
        return 5

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 6


if __name__ == "__main__":
    sys.exit(main())
