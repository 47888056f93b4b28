"""Aggregate middle-page sums and per-update verdicts for a puzzle file."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from pageorder.puzzle.evaluator import middle_page
from pageorder.puzzle.parser import read_puzzle
from pageorder.rule_engine.config import EvaluatorConfig
from pageorder.rule_engine.models import UpdateStatus


class UpdateVerdict(BaseModel):
    update: list[int]
    status: UpdateStatus
    repaired: list[int] | None = None


class PuzzleReport(BaseModel):
    ordered_count: int = 0
    unordered_count: int = 0
    ordered_middle_sum: int = 0
    re_ordered_middle_sum: int = 0


def sum_middle_pages(path: str | Path, config: EvaluatorConfig | None = None) -> int:
    """Sum the middle pages of updates that are already ordered."""
    puzzle = read_puzzle(path, config)
    return sum(middle_page(update) for update in puzzle.find_ordered_updates())


def sum_re_ordered_middle_pages(path: str | Path, config: EvaluatorConfig | None = None) -> int:
    """Sum the middle pages of unordered updates after repairing them."""
    puzzle = read_puzzle(path, config)
    return sum(
        middle_page(puzzle.re_order_update(update))
        for update in puzzle.find_unordered_updates()
    )


def classify(path: str | Path, config: EvaluatorConfig | None = None) -> list[UpdateVerdict]:
    puzzle = read_puzzle(path, config)
    verdicts: list[UpdateVerdict] = []
    for update in puzzle.updates:
        if puzzle.is_update_ordered(update):
            verdicts.append(UpdateVerdict(update=list(update), status=UpdateStatus.ORDERED))
        else:
            verdicts.append(
                UpdateVerdict(
                    update=list(update),
                    status=UpdateStatus.UNORDERED,
                    repaired=list(puzzle.re_order_update(update)),
                )
            )
    return verdicts


def summarize(path: str | Path, config: EvaluatorConfig | None = None) -> PuzzleReport:
    """Classify every update once and collect counts and both sums."""
    report = PuzzleReport()
    for verdict in classify(path, config):
        if verdict.repaired is None:
            report.ordered_count += 1
            report.ordered_middle_sum += middle_page(verdict.update)
        else:
            report.unordered_count += 1
            report.re_ordered_middle_sum += middle_page(verdict.repaired)
    return report
