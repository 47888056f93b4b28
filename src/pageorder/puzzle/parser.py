"""Read the two-section puzzle format: ``NN|NN`` rules, blank line, updates."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pageorder.puzzle.evaluator import Puzzle
from pageorder.rule_engine.config import EvaluatorConfig
from pageorder.rule_engine.index import RuleIndex

logger = logging.getLogger(__name__)

_RULE_RE = re.compile(r"(?P<first>[0-9]{2})\|(?P<second>[0-9]{2})")


class PuzzleFormatError(ValueError):
    """A line of puzzle input could not be parsed."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: {reason}: {line!r}")


def parse_puzzle(text: str, config: EvaluatorConfig | None = None) -> Puzzle:
    """Parse puzzle text into a Puzzle.

    Rules run until the first empty line; each rule line is scanned for one
    or more ``NN|NN`` pairs. Every line after that empty line is one
    comma-separated update. Any unparsable line raises PuzzleFormatError.
    """
    lines = text.splitlines()
    pairs: list[tuple[int, int]] = []

    for number, line in enumerate(lines, 1):
        if not line:
            break
        matches = list(_RULE_RE.finditer(line))
        if not matches:
            raise PuzzleFormatError(number, line, "expected one or more NN|NN rules")
        pairs.extend((int(m.group("first")), int(m.group("second"))) for m in matches)
    else:
        number = len(lines)

    updates: list[tuple[int, ...]] = []
    for offset, line in enumerate(lines[number:], number + 1):
        try:
            updates.append(tuple(int(token) for token in line.split(",")))
        except ValueError:
            raise PuzzleFormatError(offset, line, "non-numeric page in update") from None

    logger.debug(f"Parsed {len(pairs)} rules and {len(updates)} updates")
    return Puzzle(
        rules=RuleIndex.from_rules(pairs),
        updates=tuple(updates),
        config=config or EvaluatorConfig(),
    )


def read_puzzle(path: str | Path, config: EvaluatorConfig | None = None) -> Puzzle:
    """Read and parse a puzzle file. OSError propagates to the caller."""
    return parse_puzzle(Path(path).read_text(encoding="utf-8"), config)
