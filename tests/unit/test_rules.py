"""Unit tests for placement rules."""

import pytest

from quilt.core.grid import QuiltGrid
from quilt.core.palettes import BLUE, GREEN, PURPLE, RED, WHITE, YELLOW
from quilt.core.rules import (
    RULES,
    NoMatchingOuterRings,
    NoRepeatedInner,
    NoRepeatedMiddleOrInner,
    NoSameMiddleAndInner,
    NoSharedColours,
    default_rules,
    rules_by_name,
)
from quilt.core.square import GrannySquare


@pytest.fixture
def grid_5x5():
    return QuiltGrid(5, 5)


class TestNoMatchingOuterRings:
    """Tests for the outer ring rule."""

    @pytest.fixture
    def rule(self):
        return NoMatchingOuterRings()

    def test_empty_grid_accepts(self, rule, grid_3x3):
        assert rule.validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_diagonal_outer_match_rejects(self, rule, grid_3x3):
        grid_3x3.set(0, 0, GrannySquare(RED, GREEN, YELLOW))
        assert not rule.validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_orthogonal_outer_match_rejects(self, rule, grid_3x3):
        grid_3x3.set(2, 1, GrannySquare(RED, GREEN, YELLOW))
        assert not rule.validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_different_outer_accepts(self, rule, grid_3x3):
        grid_3x3.set(0, 0, GrannySquare(GREEN, WHITE, BLUE))
        assert rule.validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_inner_rings_ignored(self, rule, grid_3x3):
        grid_3x3.set(1, 0, GrannySquare(GREEN, WHITE, BLUE))
        assert rule.validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_edge_accepts_once_offset_lands_on_self(self, rule, grid_3x3):
        """At (0, 1) the (-1, 0) offset clamps onto the cell itself and the
        rule accepts without checking the later offsets."""
        grid_3x3.set(1, 0, GrannySquare(RED, GREEN, YELLOW))  # offset (1, -1)
        assert rule.validates(0, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_edge_checks_offsets_before_self(self, rule, grid_3x3):
        grid_3x3.set(1, 2, GrannySquare(RED, GREEN, YELLOW))  # offset (1, 1)
        assert not rule.validates(0, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_does_not_modify_grid(self, rule, grid_3x3):
        calls = []
        grid_3x3.add_listener(calls.append)
        rule.validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)
        assert calls == []


class TestNoSameMiddleAndInner:
    """Tests for the middle and inner pair rule."""

    def test_matching_pair_rejects(self, grid_3x3):
        grid_3x3.set(1, 0, GrannySquare(GREEN, WHITE, BLUE))
        assert not NoSameMiddleAndInner().validates(
            1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3
        )

    def test_middle_only_match_accepts(self, grid_3x3):
        grid_3x3.set(1, 0, GrannySquare(GREEN, WHITE, YELLOW))
        assert NoSameMiddleAndInner().validates(
            1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3
        )

    def test_diagonals_not_checked(self, grid_3x3):
        grid_3x3.set(0, 0, GrannySquare(GREEN, WHITE, BLUE))
        assert NoSameMiddleAndInner().validates(
            1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3
        )

    def test_edge_skips_self_and_keeps_checking(self, grid_3x3):
        """Unlike the outer-ring rule, landing on itself only skips that offset."""
        grid_3x3.set(0, 0, GrannySquare(GREEN, WHITE, BLUE))  # offset (0, -1), after self
        assert not NoSameMiddleAndInner().validates(
            0, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3
        )

    def test_radius_two_reaches_further(self, grid_5x5):
        grid_5x5.set(2, 0, GrannySquare(GREEN, WHITE, BLUE))
        proposed = GrannySquare(RED, WHITE, BLUE)
        assert NoSameMiddleAndInner(radius=1).validates(2, 2, proposed, grid_5x5)
        assert not NoSameMiddleAndInner(radius=2).validates(2, 2, proposed, grid_5x5)

    def test_single_cell_grid_accepts(self):
        grid = QuiltGrid(1, 1)
        assert NoSameMiddleAndInner(radius=2).validates(
            0, 0, GrannySquare(RED, WHITE, BLUE), grid
        )


class TestNoRepeatedInner:
    """Tests for the inner ring rule."""

    def test_orthogonal_inner_match_rejects(self, grid_3x3):
        grid_3x3.set(2, 1, GrannySquare(GREEN, YELLOW, BLUE))
        assert not NoRepeatedInner().validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_diagonal_inner_match_accepts(self, grid_3x3):
        grid_3x3.set(2, 2, GrannySquare(GREEN, YELLOW, BLUE))
        assert NoRepeatedInner().validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_edge_skips_self(self, grid_3x3):
        grid_3x3.set(1, 0, GrannySquare(GREEN, YELLOW, BLUE))
        assert not NoRepeatedInner().validates(0, 0, GrannySquare(RED, WHITE, BLUE), grid_3x3)


class TestNoRepeatedMiddleOrInner:
    """Tests for the nearby middle or inner rule."""

    def test_middle_match_alone_rejects(self, grid_3x3):
        grid_3x3.set(1, 0, GrannySquare(GREEN, WHITE, YELLOW))
        assert not NoRepeatedMiddleOrInner().validates(
            1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3
        )

    def test_distance_two_match_rejects(self, grid_5x5):
        grid_5x5.set(4, 2, GrannySquare(GREEN, YELLOW, BLUE))
        assert not NoRepeatedMiddleOrInner().validates(
            2, 2, GrannySquare(RED, WHITE, BLUE), grid_5x5
        )

    def test_no_overlap_accepts(self, grid_5x5):
        grid_5x5.set(2, 1, GrannySquare(RED, YELLOW, GREEN))
        assert NoRepeatedMiddleOrInner().validates(
            2, 2, GrannySquare(RED, WHITE, BLUE), grid_5x5
        )


class TestNoSharedColours:
    """Tests for the shared colours rule."""

    def test_any_shared_color_rejects(self, grid_3x3):
        grid_3x3.set(1, 2, GrannySquare(GREEN, BLUE, YELLOW))
        assert not NoSharedColours().validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_disjoint_colors_accept(self, grid_3x3):
        grid_3x3.set(1, 2, GrannySquare(GREEN, PURPLE, YELLOW))
        assert NoSharedColours().validates(1, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)

    def test_edge_accepts_once_offset_lands_on_self(self, grid_3x3):
        """At (0, 1) the second offset is the cell itself, so (1, 1) is never checked."""
        grid_3x3.set(1, 1, GrannySquare(RED, WHITE, BLUE))
        assert NoSharedColours().validates(0, 1, GrannySquare(RED, WHITE, BLUE), grid_3x3)


class TestRuleRegistry:
    """Tests for looking up rules by name."""

    def test_default_rules(self):
        rules = default_rules()
        assert [type(r) for r in rules] == [NoMatchingOuterRings, NoSameMiddleAndInner]

    def test_experimental_rule_not_in_defaults(self):
        assert not any(isinstance(r, NoSharedColours) for r in default_rules())

    def test_rules_by_name_preserves_order(self):
        rules = rules_by_name(["inner", "outer"])
        assert isinstance(rules[0], NoRepeatedInner)
        assert isinstance(rules[1], NoMatchingOuterRings)

    def test_middle_inner_radius_two(self):
        (rule,) = rules_by_name(["middle-inner-2"])
        assert rule.radius == 2

    def test_unknown_rule(self):
        with pytest.raises(KeyError):
            rules_by_name(["no-such-rule"])

    @pytest.mark.parametrize("name", sorted(RULES))
    def test_every_rule_has_a_name(self, name):
        rule = RULES[name]()
        assert isinstance(rule.name, str) and rule.name
