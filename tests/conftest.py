"""Shared fixtures for pageorder tests."""

from pathlib import Path

import pytest

from pageorder.rule_engine.index import RuleIndex

SAMPLE_RULES = [
    (47, 53),
    (97, 13),
    (97, 61),
    (97, 47),
    (75, 29),
    (61, 13),
    (75, 53),
    (29, 13),
    (97, 29),
    (53, 29),
    (61, 53),
    (97, 53),
    (61, 29),
    (47, 13),
    (75, 47),
    (97, 75),
    (47, 61),
    (75, 61),
    (47, 29),
    (75, 13),
    (53, 13),
]

SAMPLE_UPDATES = [
    (75, 47, 61, 53, 29),
    (97, 61, 53, 29, 13),
    (75, 29, 13),
    (75, 97, 47, 61, 53),
    (61, 13, 29),
    (97, 13, 75, 29, 47),
]


def _render(rules: list[tuple[int, int]], updates: list[tuple[int, ...]]) -> str:
    """Render rules and updates in the two-section puzzle format."""
    rule_lines = [f"{before}|{after}" for before, after in rules]
    update_lines = [",".join(str(page) for page in update) for update in updates]
    return "\n".join(rule_lines) + "\n\n" + "\n".join(update_lines) + "\n"


@pytest.fixture
def sample_index() -> RuleIndex:
    return RuleIndex.from_rules(SAMPLE_RULES)


@pytest.fixture
def sample_text() -> str:
    return _render(SAMPLE_RULES, SAMPLE_UPDATES)


@pytest.fixture
def sample_puzzle(tmp_path: Path, sample_text: str) -> Path:
    """The canonical six-update sample: three ordered, three unordered."""
    path = tmp_path / "puzzle.txt"
    path.write_text(sample_text)
    return path


@pytest.fixture
def light_puzzle(tmp_path: Path) -> Path:
    """Three rules (one on a shared page) and two updates."""
    path = tmp_path / "light_puzzle.txt"
    path.write_text(
        _render(
            [(47, 53), (97, 13), (48, 53)],
            [(75, 47, 61, 53, 29), (97, 61, 53, 29, 13)],
        )
    )
    return path


@pytest.fixture
def sample_rules() -> list[tuple[int, int]]:
    return list(SAMPLE_RULES)
