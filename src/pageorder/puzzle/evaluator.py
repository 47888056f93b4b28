"""Update classification and topological repair against a RuleIndex."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from pageorder.rule_engine.config import EvaluatorConfig
from pageorder.rule_engine.index import RuleIndex
from pageorder.rule_engine.models import ClassificationMode

logger = logging.getLogger(__name__)


def is_update_ordered(
    rules: RuleIndex,
    update: Sequence[int],
    mode: ClassificationMode = ClassificationMode.STRICT,
) -> bool:
    """Return True if every pair of pages in ``update`` respects the rules.

    All pairs are checked, not only neighbours, since rules are not
    transitive. In strict mode each later page must be a known successor and
    each earlier page a known predecessor, so a pair with no rule between
    them fails. In lenient mode a pair fails only when a rule demands the
    opposite order.
    """
    if mode is ClassificationMode.LENIENT:
        for index, page in enumerate(update):
            before = rules.predecessors(page)
            if any(later in before for later in update[index + 1 :]):
                return False
        return True

    for index, page in enumerate(update):
        after = rules.successors(page)
        if any(later not in after for later in update[index + 1 :]):
            return False
        before = rules.predecessors(page)
        if any(earlier not in before for earlier in update[:index]):
            return False
    return True


def re_order_update(rules: RuleIndex, update: Sequence[int]) -> tuple[int, ...]:
    """Return ``update`` reordered by a topological sort of its own pages.

    Only rules whose two pages both occur in ``update`` become edges. Ties
    are broken by position in ``update``. Pages the sort never reaches
    because of a cycle are appended afterwards in their original order.
    """
    members = set(update)
    dependents: dict[int, list[int]] = {page: [] for page in update}
    in_degree: dict[int, int] = dict.fromkeys(update, 0)

    for page in update:
        for dependency in rules.predecessors(page):
            if dependency in members:
                dependents[dependency].append(page)
                in_degree[page] += 1

    position = {page: i for i, page in enumerate(update)}
    for pages in dependents.values():
        pages.sort(key=position.__getitem__)

    queue = deque(page for page in update if in_degree[page] == 0)
    result: list[int] = []
    while queue:
        page = queue.popleft()
        result.append(page)
        for dependent in dependents[page]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(result) < len(update):
        placed = set(result)
        orphans = [page for page in update if page not in placed]
        logger.debug(f"Appending {len(orphans)} unsorted pages: {orphans}")
        result.extend(orphans)
    return tuple(result)


def middle_page(update: Sequence[int]) -> int:
    """Page at index ``len // 2``. Raises IndexError for an empty update."""
    return update[len(update) // 2]


@dataclass(frozen=True)
class Puzzle:
    """Parsed rules plus the updates to evaluate against them."""

    rules: RuleIndex
    updates: tuple[tuple[int, ...], ...] = ()
    config: EvaluatorConfig = field(default_factory=EvaluatorConfig, compare=False)

    def is_update_ordered(self, update: Sequence[int]) -> bool:
        return is_update_ordered(self.rules, update, self.config.mode)

    def re_order_update(self, update: Sequence[int]) -> tuple[int, ...]:
        repaired = re_order_update(self.rules, update)
        if self.config.verify_repairs and not self.is_update_ordered(repaired):
            logger.warning(f"Repaired update is still unordered: {list(repaired)}")
        return repaired

    def find_ordered_updates(self) -> list[tuple[int, ...]]:
        return [update for update in self.updates if self.is_update_ordered(update)]

    def find_unordered_updates(self) -> list[tuple[int, ...]]:
        return [update for update in self.updates if not self.is_update_ordered(update)]
