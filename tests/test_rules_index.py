"""Tests for rule_engine/index.py — RuleIndex construction and lookups."""

from __future__ import annotations

import pytest

from pageorder.rule_engine.index import RuleIndex
from pageorder.rule_engine.models import PageRule


class TestRuleIndexFromRules:
    def test_successors_and_predecessors(self):
        idx = RuleIndex.from_rules([(47, 53), (97, 13), (48, 53)])
        assert idx.successors(47) == {53}
        assert idx.successors(48) == {53}
        assert idx.successors(97) == {13}
        assert idx.predecessors(53) == {47, 48}
        assert idx.predecessors(13) == {97}

    def test_accepts_page_rule_models(self):
        idx = RuleIndex.from_rules([PageRule(before=47, after=53)])
        assert idx.successors(47) == {53}
        assert idx.predecessors(53) == {47}

    def test_empty_rules(self):
        idx = RuleIndex.from_rules([])
        assert idx.pages() == frozenset()
        assert idx.rule_count == 0

    def test_duplicates_collapse(self):
        idx = RuleIndex.from_rules([(47, 53), (47, 53), (47, 53)])
        assert idx.successors(47) == {53}
        assert idx.predecessors(53) == {47}
        assert idx.rule_count == 1

    def test_duplicates_do_not_change_equality(self):
        assert RuleIndex.from_rules([(47, 53), (47, 53)]) == RuleIndex.from_rules([(47, 53)])

    def test_maps_mirror_every_rule(self, sample_index, sample_rules):
        for before, after in sample_rules:
            assert after in sample_index.successors(before)
            assert before in sample_index.predecessors(after)

    def test_maps_hold_nothing_beyond_the_rules(self, sample_index, sample_rules):
        rebuilt = {(r.before, r.after) for r in sample_index.rules()}
        assert rebuilt == set(sample_rules)
        assert sample_index.rule_count == len(sample_rules)


class TestRuleIndexLookups:
    def test_unknown_page_has_empty_sets(self, sample_index):
        assert sample_index.successors(99) == frozenset()
        assert sample_index.predecessors(99) == frozenset()

    def test_page_with_only_one_direction(self, sample_index):
        assert sample_index.predecessors(97) == frozenset()
        assert sample_index.successors(13) == frozenset()

    def test_pages(self, sample_index):
        assert sample_index.pages() == {13, 29, 47, 53, 61, 75, 97}

    def test_contains_pair(self, sample_index):
        assert (97, 75) in sample_index
        assert (75, 97) not in sample_index
        assert "97|75" not in sample_index

    def test_maps_are_read_only(self, sample_index):
        with pytest.raises(TypeError):
            sample_index._successors[1] = frozenset()  # type: ignore[index]

    def test_repr(self):
        idx = RuleIndex.from_rules([(1, 2), (2, 3)])
        assert repr(idx) == "RuleIndex(pages=3, rules=2)"
