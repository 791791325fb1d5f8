"""
Unit tests for items, interactions, closure lattices and rules.
"""
import numpy as np
import pytest

from maras.core.exceptions import DecodeError
from maras.representation import (
    ClosureLattice, Interaction, Item, MAX_ITEM_ID, RawRule, Rule, RuleDecoder
)


class TestItem:
    """Test the signed drug/reaction encoding."""

    def test_positive_code_is_drug(self):
        """Test positive codes decode to drugs."""
        item = Item.from_int(7)

        assert item.is_drug
        assert item.identifier == 7
        assert item.to_int() == 7
        assert str(item) == "D7"

    def test_negative_code_is_reaction(self):
        """Test negative codes decode to reactions."""
        item = Item.from_int(-7)

        assert not item.is_drug
        assert item.identifier == 7
        assert str(item) == "R7"

    def test_equality_by_code(self):
        """Test items with the same code are equal and hash alike."""
        assert Item.from_int(3) == Item.drug(3)
        assert Item.from_int(-3) == Item.reaction(3)
        assert Item.drug(3) != Item.reaction(3)
        assert len({Item(3), Item.drug(3), Item(-3)}) == 2

    def test_numpy_integer_codes(self):
        """Test integer scalars from numeric back-ends are accepted."""
        item = Item.from_int(np.int64(12))

        assert item == Item(12)
        assert type(item.code) is int

    def test_domain_bounds(self):
        """Test the extreme valid identifiers decode."""
        assert Item.from_int(MAX_ITEM_ID).is_drug
        assert not Item.from_int(-MAX_ITEM_ID).is_drug

    @pytest.mark.parametrize("code", [0, MAX_ITEM_ID + 1, -(MAX_ITEM_ID + 1), 1.5, "4", None, True])
    def test_invalid_codes_raise(self, code):
        """Test out-of-domain codes fail fast."""
        with pytest.raises(DecodeError) as exc_info:
            Item.from_int(code)

        assert exc_info.value.code == code

    def test_immutable(self):
        """Test items cannot be modified."""
        item = Item(5)

        with pytest.raises(AttributeError):
            item.code = 6

    def test_drug_and_reaction_helpers(self):
        """Test helpers encode the kind into the sign of the code."""
        assert Item.drug(5).to_int() == 5
        assert Item.reaction(5).to_int() == -5
        assert Item.reaction(np.int64(5)) == Item(-5)

    @pytest.mark.parametrize("identifier", [-5, 0, 2.0, "5", True])
    def test_helpers_reject_bad_identifiers(self, identifier):
        """Test a negative or non-integer identifier cannot flip the item kind."""
        with pytest.raises(DecodeError):
            Item.drug(identifier)
        with pytest.raises(DecodeError):
            Item.reaction(identifier)


class TestInteraction:
    """Test item sets."""

    def test_unordered_and_unique(self, aspirin, warfarin):
        """Test order and repetition do not matter."""
        a = Interaction.from_items([aspirin, warfarin, aspirin])
        b = Interaction.from_items([warfarin, aspirin])

        assert a == b
        assert a.size == 2
        assert len(a) == 2

    def test_contains(self, aspirin, warfarin, bleeding):
        """Test containment is a superset check."""
        triple = Interaction.from_items([aspirin, warfarin, bleeding])
        pair = Interaction.from_items([aspirin, bleeding])

        assert triple.contains(pair)
        assert triple.contains(triple)
        assert not pair.contains(triple)

    def test_str_sorted_by_code(self, aspirin, bleeding):
        """Test string form is stable."""
        assert str(Interaction.from_items([aspirin, bleeding])) == "{R10, D1}"


class TestClosureLattice:
    """Test the size-indexed closure lattice."""

    def test_from_itemsets_groups_by_size(self, closures):
        """Test closures land on the level matching their size."""
        assert len(closures) == 4
        assert [len(level) for level in closures.levels] == [0, 0, 1, 2]
        assert all(c.size == 3 for c in closures.level(3))

    def test_has_level(self, closures):
        """Test level existence checks."""
        assert closures.has_level(0)
        assert closures.has_level(3)
        assert not closures.has_level(4)
        assert not closures.has_level(-1)

    def test_from_itemsets_empty(self):
        """Test an empty input still yields level 0."""
        lattice = ClosureLattice.from_itemsets([])

        assert len(lattice) == 1
        assert lattice.level(0) == ()

    def test_explicit_levels_kept_as_given(self, aspirin, bleeding):
        """Test explicit levels are not regrouped."""
        pair = Interaction.from_items([aspirin, bleeding])
        lattice = ClosureLattice([[], [pair]])

        assert lattice.level(1) == (pair,)
        assert repr(lattice) == "ClosureLattice(levels=[0, 1])"

    def test_levels_are_read_only(self, closures):
        """Test the lattice hands out tuples, not its internal lists."""
        assert isinstance(closures.levels, tuple)
        assert all(isinstance(level, tuple) for level in closures.levels)
        with pytest.raises(AttributeError):
            closures.level(3).append(Interaction.from_items([Item(9)]))

    def test_plain_sets_become_interactions(self, aspirin, bleeding):
        """Test levels of frozensets of Items or codes are converted."""
        lattice = ClosureLattice([[], [], [frozenset({aspirin, bleeding})], [frozenset({1, 2, -10})]])

        assert lattice.level(2) == (Interaction.from_items([aspirin, bleeding]),)
        assert lattice.level(3) == (Interaction.from_items([Item(1), Item(2), Item(-10)]),)

    def test_bad_codes_in_levels(self):
        """Test undecodable codes in a level raise DecodeError."""
        with pytest.raises(DecodeError):
            ClosureLattice([[frozenset({0})]])


class TestRule:
    """Test rule representation."""

    def test_interaction_is_union(self, aspirin, warfarin, bleeding):
        """Test the derived interaction joins both sides."""
        rule = Rule([aspirin, warfarin], [bleeding], 0.1, 12, 0.8, 3.2)

        assert rule.interaction == Interaction.from_items([aspirin, warfarin, bleeding])
        assert rule.interaction.size == 3

    def test_sides_are_tuples(self, aspirin, bleeding):
        """Test sides are stored as ordered tuples."""
        rule = Rule([aspirin], [bleeding], 0.1, 12, 0.8, 3.2)

        assert rule.antecedent == (aspirin,)
        assert rule.consequent == (bleeding,)

    def test_identity_equality(self, aspirin, bleeding):
        """Test separately built rules are distinct objects."""
        r1 = Rule([aspirin], [bleeding], 0.1, 12, 0.8, 3.2)
        r2 = Rule([aspirin], [bleeding], 0.1, 12, 0.8, 3.2)

        assert r1 == r1
        assert r1 != r2
        assert len({r1, r2}) == 2

    def test_immutable(self, aspirin, bleeding):
        """Test rules are frozen."""
        rule = Rule([aspirin], [bleeding], 0.1, 12, 0.8, 3.2)

        with pytest.raises(AttributeError):
            rule.lift = 9.9

    def test_to_dict_and_str(self, aspirin, warfarin, bleeding):
        """Test diagnostic views."""
        rule = Rule([aspirin, warfarin], [bleeding], 0.1, 12, 0.8, 3.2)

        assert rule.to_dict() == {
            'antecedent': [1, 2],
            'consequent': [-10],
            'coverage': 0.1,
            'absolute_support': 12,
            'confidence': 0.8,
            'lift': 3.2,
        }
        assert str(rule) == "{D1, D2} => {R10}"


class TestRuleDecoder:
    """Test decoding of raw mined rules."""

    def test_decode_keeps_order_and_statistics(self):
        """Test items keep mined order and statistics are untouched."""
        raw = RawRule([2, 1], [-10], coverage=0.125, absolute_support=12.0, confidence=0.75, lift=3.0)

        rule = RuleDecoder().decode(raw)

        assert [item.to_int() for item in rule.antecedent] == [2, 1]
        assert [item.to_int() for item in rule.consequent] == [-10]
        assert rule.coverage == 0.125
        assert rule.absolute_support == 12.0
        assert rule.confidence == 0.75
        assert rule.lift == 3.0

    def test_decode_failure(self):
        """Test a bad consequent code aborts decoding."""
        raw = RawRule([1], [0], coverage=0.1, absolute_support=1, confidence=0.5, lift=1.0)

        with pytest.raises(DecodeError):
            RuleDecoder().decode(raw)

    def test_raw_rule_from_dict(self):
        """Test mapping inputs build raw rules."""
        raw = RawRule.from_dict({
            'antecedent': [1, 2],
            'consequent': [-10],
            'coverage': 0.1,
            'absolute_support': 12,
            'confidence': 0.8,
            'lift': 3.2,
        })

        assert raw.antecedent == [1, 2]
        assert raw.lift == 3.2
