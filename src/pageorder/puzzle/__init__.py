"""Puzzle: parsed rules and updates, classification, repair, and sums."""

from pageorder.puzzle.evaluator import Puzzle, is_update_ordered, middle_page, re_order_update
from pageorder.puzzle.parser import PuzzleFormatError, parse_puzzle, read_puzzle
from pageorder.puzzle.summary import (
    PuzzleReport,
    UpdateVerdict,
    classify,
    sum_middle_pages,
    sum_re_ordered_middle_pages,
    summarize,
)

__all__ = [
    "Puzzle",
    "PuzzleFormatError",
    "PuzzleReport",
    "UpdateVerdict",
    "classify",
    "is_update_ordered",
    "middle_page",
    "parse_puzzle",
    "re_order_update",
    "read_puzzle",
    "sum_middle_pages",
    "sum_re_ordered_middle_pages",
    "summarize",
]
