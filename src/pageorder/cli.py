"""CLI entry point for pageorder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import cast

from pageorder import __version__
from pageorder.puzzle.parser import PuzzleFormatError
from pageorder.puzzle.summary import classify, summarize
from pageorder.rule_engine.config import load_evaluator_config
from pageorder.rule_engine.models import UpdateStatus

SAMPLE_PUZZLE = Path(__file__).parent / "resources" / "puzzle.txt"


def _cmd_sum(args: argparse.Namespace) -> None:
    puzzle = cast(Path, args.puzzle)
    config = load_evaluator_config(cast(Path | None, args.config))
    report = summarize(puzzle, config)

    if args.json:
        print(report.model_dump_json(indent=2))
        return

    print(f"Sum of middle pages: {report.ordered_middle_sum}")
    print(f"Sum of re-ordered middle pages: {report.re_ordered_middle_sum}")


def _cmd_check(args: argparse.Namespace) -> None:
    puzzle = cast(Path, args.puzzle)
    config = load_evaluator_config(cast(Path | None, args.config))

    for i, verdict in enumerate(classify(puzzle, config), 1):
        pages = ",".join(str(page) for page in verdict.update)
        line = f"  {i}. {verdict.status:<9} {pages}"
        if verdict.status == UpdateStatus.UNORDERED and verdict.repaired is not None:
            line += f" -> {','.join(str(page) for page in verdict.repaired)}"
        print(line)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="pageorder",
        description="Check and repair page orderings against precedence rules",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"pageorder {__version__}"
    )
    _ = parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to evaluator config JSON (default: ./.pageorder.json)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # sum subcommand
    sum_parser = subparsers.add_parser("sum", help="Print both middle-page sums")
    _ = sum_parser.add_argument(
        "puzzle",
        type=Path,
        nargs="?",
        default=SAMPLE_PUZZLE,
        help="Path to puzzle file (default: bundled sample)",
    )
    _ = sum_parser.add_argument("--json", action="store_true", help="Print report as JSON")

    # check subcommand
    check_parser = subparsers.add_parser("check", help="Classify and repair each update")
    _ = check_parser.add_argument(
        "puzzle",
        type=Path,
        nargs="?",
        default=SAMPLE_PUZZLE,
        help="Path to puzzle file (default: bundled sample)",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    dispatch = {
        "sum": _cmd_sum,
        "check": _cmd_check,
    }
    command = cast(str | None, args.command)
    handler = dispatch.get(command) if command is not None else None
    if handler is None:
        parser.print_help()
        sys.exit(1)

    try:
        handler(args)
    except OSError as e:
        print(f"Error: cannot read puzzle: {e}", file=sys.stderr)
        sys.exit(1)
    except PuzzleFormatError as e:
        print(f"Error: invalid puzzle: {e}", file=sys.stderr)
        sys.exit(1)
