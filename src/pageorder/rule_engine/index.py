"""RuleIndex: successor and predecessor maps built from page rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from pageorder.rule_engine.models import PageRule

_EMPTY: frozenset[int] = frozenset()


class RuleIndex:
    """Bidirectional adjacency over page rules.

    ``successors(p)`` holds every page some rule places after ``p`` and
    ``predecessors(p)`` every page some rule places before it. Both maps are
    filled from the same pass over the rules, so they always mirror each
    other. Duplicate rules collapse into a single set entry.
    """

    def __init__(
        self,
        successors: dict[int, frozenset[int]],
        predecessors: dict[int, frozenset[int]],
    ) -> None:
        self._successors = MappingProxyType(dict(successors))
        self._predecessors = MappingProxyType(dict(predecessors))

    @classmethod
    def from_rules(cls, rules: Iterable[PageRule | tuple[int, int]]) -> RuleIndex:
        successors: dict[int, set[int]] = {}
        predecessors: dict[int, set[int]] = {}
        for rule in rules:
            before, after = rule.as_pair() if isinstance(rule, PageRule) else rule
            successors.setdefault(before, set()).add(after)
            predecessors.setdefault(after, set()).add(before)
        return cls(
            {page: frozenset(pages) for page, pages in successors.items()},
            {page: frozenset(pages) for page, pages in predecessors.items()},
        )

    def successors(self, page: int) -> frozenset[int]:
        """Pages that must come after ``page``; empty when it has no rules."""
        return self._successors.get(page, _EMPTY)

    def predecessors(self, page: int) -> frozenset[int]:
        """Pages that must come before ``page``; empty when it has no rules."""
        return self._predecessors.get(page, _EMPTY)

    def pages(self) -> frozenset[int]:
        return frozenset(self._successors) | frozenset(self._predecessors)

    @property
    def rule_count(self) -> int:
        return sum(len(pages) for pages in self._successors.values())

    def rules(self) -> Iterator[PageRule]:
        for before in sorted(self._successors):
            for after in sorted(self._successors[before]):
                yield PageRule(before=before, after=after)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        before, after = pair
        return after in self.successors(before)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleIndex):
            return NotImplemented
        return (
            self._successors == other._successors
            and self._predecessors == other._predecessors
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RuleIndex(pages={len(self.pages())}, rules={self.rule_count})"
