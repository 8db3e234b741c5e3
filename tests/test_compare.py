"""Tests for hand comparison.

Test coverage:
- Category ordering: each category beats the one below it
- Tie-breaks within a category: pairs before kickers, kickers descending
- Ties: equal ranks in equal order compare as zero, regardless of suits
- Total order: antisymmetry, reflexivity and transitivity on random hands
"""

import functools
import itertools

import numpy as np

from poker_hands.config import EvalConfig
from poker_hands.rules import (
    Card,
    Suit,
    HandCategory,
    classify,
    compare_hands,
    compare_cards,
    beats,
    create_standard_deck,
    parse_hand,
)


def _ranked(tokens, config=None):
    hand = parse_hand(tokens)
    return classify(hand) if config is None else classify(hand, config)


class TestCategoryOrdering:
    """A stronger category always wins."""

    def test_one_pair_beats_high_card(self):
        hand1 = _ranked(["8s", "Qs", "6c", "Ts", "As"])
        hand2 = _ranked(["2s", "Qh", "6d", "2s", "As"])

        assert hand1.category == HandCategory.HIGH_CARD
        assert hand2.category == HandCategory.ONE_PAIR
        assert compare_hands(hand1, hand2) < 0
        assert compare_hands(hand2, hand1) > 0

    def test_two_pair_beats_one_pair(self):
        hand1 = _ranked(["8s", "Qs", "Qc", "8d", "As"])
        hand2 = _ranked(["2s", "Qh", "6d", "2s", "As"])
        assert compare_hands(hand1, hand2) > 0

    def test_three_of_a_kind_beats_two_pair(self):
        hand1 = _ranked(["8s", "Qs", "Qc", "8d", "As"])
        hand2 = _ranked(["Qc", "Qh", "6d", "2s", "Qs"])
        assert compare_hands(hand1, hand2) < 0

    def test_straight_beats_three_of_a_kind(self):
        hand1 = _ranked(["8s", "Js", "9c", "7d", "Ts"])
        hand2 = _ranked(["Qc", "Qh", "6d", "2s", "Qs"])
        assert compare_hands(hand1, hand2) > 0

    def test_flush_beats_straight(self):
        hand1 = _ranked(["8s", "Js", "9c", "7d", "Ts"])
        hand2 = _ranked(["Qc", "4c", "2c", "7c", "Kc"])
        assert compare_hands(hand1, hand2) < 0

    def test_full_house_beats_flush(self):
        hand1 = _ranked(["8s", "Js", "Jc", "Jd", "8d"])
        hand2 = _ranked(["Qc", "4c", "2c", "7c", "Kc"])
        assert compare_hands(hand1, hand2) > 0

    def test_four_of_a_kind_beats_full_house(self):
        hand1 = _ranked(["8s", "Js", "Jc", "Jd", "8d"])
        hand2 = _ranked(["6c", "6h", "6d", "2s", "6s"])
        assert compare_hands(hand1, hand2) < 0

    def test_straight_flush_beats_four_of_a_kind(self):
        hand1 = _ranked(["4s", "3s", "6s", "7s", "5s"])
        hand2 = _ranked(["6c", "6h", "6d", "2s", "6s"])
        assert compare_hands(hand1, hand2) > 0

    def test_low_category_loses_despite_high_cards(self):
        hand1 = _ranked(["As", "Kd", "Qc", "Jh", "9s"])
        hand2 = _ranked(["2s", "2d", "3c", "4h", "5s"])
        assert compare_hands(hand1, hand2) < 0


class TestWithinCategory:
    """Tie-breaks between hands of the same category."""

    def test_highest_card_decides_high_card_hands(self):
        hand1 = _ranked(["4c", "3c", "6s", "9d", "Qd"])
        hand2 = _ranked(["9c", "Jc", "4s", "Td", "8d"])
        assert compare_hands(hand1, hand2) > 0

    def test_all_cards_checked_in_high_card_hands(self):
        hand1 = _ranked(["4c", "8c", "6s", "9d", "Qd"])
        hand2 = _ranked(["9c", "Qc", "4s", "5d", "8d"])
        assert compare_hands(hand1, hand2) > 0

    def test_higher_pair_wins(self):
        hand1 = _ranked(["4c", "8c", "6s", "8d", "Qd"])
        hand2 = _ranked(["7c", "Qc", "4s", "7d", "8d"])
        assert compare_hands(hand1, hand2) > 0

    def test_kickers_decide_equal_pairs(self):
        hand1 = _ranked(["4c", "8c", "Js", "8d", "Kd"])
        hand2 = _ranked(["8c", "Tc", "Ks", "8d", "4d"])
        assert compare_hands(hand1, hand2) > 0

    def test_higher_top_pair_wins_two_pair(self):
        hand1 = _ranked(["4c", "8c", "Js", "8d", "Jd"])
        hand2 = _ranked(["8c", "Tc", "Ts", "8d", "4d"])
        assert compare_hands(hand1, hand2) > 0

    def test_second_pair_decides_before_kicker(self):
        hand1 = _ranked(["4c", "8c", "Js", "8d", "Jd"])
        hand2 = _ranked(["7c", "Jc", "Js", "7d", "Ad"])
        assert compare_hands(hand1, hand2) > 0

    def test_kicker_decides_same_two_pair(self):
        hand1 = _ranked(["5c", "8c", "Js", "8d", "Jd"])
        hand2 = _ranked(["8c", "Jc", "Js", "8d", "4d"])
        assert compare_hands(hand1, hand2) > 0

    def test_same_two_pair_and_kicker_tie(self):
        hand1 = _ranked(["5c", "8c", "Js", "8d", "Jd"])
        hand2 = _ranked(["8c", "Jc", "Js", "8d", "5d"])
        assert compare_hands(hand1, hand2) == 0

    def test_higher_set_wins(self):
        hand1 = _ranked(["4c", "6c", "6s", "6d", "Jd"])
        hand2 = _ranked(["5c", "Jc", "5s", "7d", "5h"])
        assert compare_hands(hand1, hand2) > 0

    def test_kickers_decide_equal_sets(self):
        hand1 = _ranked(["Ac", "6c", "6s", "6d", "Qd"])
        hand2 = _ranked(["6c", "Jc", "6s", "Ad", "6h"])
        assert compare_hands(hand1, hand2) > 0

    def test_trips_decide_full_houses(self):
        hand1 = _ranked(["Ks", "Kc", "Jc", "Jd", "Kh"])
        hand2 = _ranked(["Qs", "Ac", "Qc", "Ad", "Qh"])
        assert compare_hands(hand1, hand2) > 0

    def test_pair_decides_full_houses_with_equal_trips(self):
        hand1 = _ranked(["Ks", "Kc", "Jc", "Jd", "Kh"])
        hand2 = _ranked(["Ts", "Kc", "Kc", "Kd", "Th"])
        assert compare_hands(hand1, hand2) > 0

    def test_kicker_decides_equal_quads(self):
        hand1 = _ranked(["9s", "9c", "9d", "9h", "3d"])
        hand2 = _ranked(["9s", "9c", "9d", "9h", "2d"])
        assert compare_hands(hand1, hand2) > 0

    def test_higher_straight_wins(self):
        hand1 = _ranked(["9s", "8d", "7c", "6h", "5s"])
        hand2 = _ranked(["8s", "7d", "6c", "5h", "4s"])
        assert compare_hands(hand1, hand2) > 0

    def test_flush_compares_every_card(self):
        hand1 = _ranked(["Ah", "Qh", "9h", "5h", "3h"])
        hand2 = _ranked(["As", "Qs", "9s", "5s", "2s"])
        assert compare_hands(hand1, hand2) > 0


class TestAceLowComparison:
    """Five-high straights sit at the bottom of the straights."""

    def test_wheel_loses_to_six_high(self):
        wheel = _ranked(["As", "2d", "3c", "4h", "5s"])
        six_high = _ranked(["6s", "2d", "3c", "4h", "5d"])
        assert compare_hands(wheel, six_high) < 0

    def test_wheel_beats_three_of_a_kind(self):
        wheel = _ranked(["As", "2d", "3c", "4h", "5s"])
        trips = _ranked(["As", "Ad", "Ac", "Kh", "Qs"])
        assert compare_hands(wheel, trips) > 0

    def test_wheels_tie(self):
        wheel1 = _ranked(["As", "2d", "3c", "4h", "5s"])
        wheel2 = _ranked(["5h", "4d", "3s", "2c", "Ah"])
        assert compare_hands(wheel1, wheel2) == 0

    def test_steel_wheel_beats_four_of_a_kind(self):
        steel = _ranked(["Ah", "2h", "3h", "4h", "5h"])
        quads = _ranked(["As", "Ad", "Ac", "Ah", "Ks"])
        assert compare_hands(steel, quads) > 0

    def test_wheel_disabled_loses_to_pair(self):
        config = EvalConfig(ace_low_straight=False)
        wheel = _ranked(["As", "2d", "3c", "4h", "5s"], config)
        pair = _ranked(["2s", "2h", "3d", "4c", "6s"], config)
        assert compare_hands(wheel, pair) < 0


class TestTiesAndSuits:
    """Suits never break ties."""

    def test_identical_ranks_tie(self):
        hand1 = _ranked(["4c", "3c", "6s", "9d", "Qd"])
        hand2 = _ranked(["4d", "3h", "6c", "9s", "Qh"])
        assert compare_hands(hand1, hand2) == 0
        assert not beats(hand1, hand2)
        assert not beats(hand2, hand1)

    def test_suit_relabelling_does_not_change_outcome(self):
        deck = create_standard_deck()
        rng = np.random.default_rng(3)
        mapping = {Suit.CLUBS: Suit.HEARTS, Suit.DIAMONDS: Suit.SPADES,
                   Suit.HEARTS: Suit.CLUBS, Suit.SPADES: Suit.DIAMONDS}
        for _ in range(200):
            hand = [deck[i] for i in rng.choice(len(deck), size=5, replace=False)]
            relabelled = [Card(c.rank, mapping[c.suit]) for c in hand]
            ranked, other = classify(hand), classify(relabelled)
            assert ranked.category == other.category
            assert compare_hands(ranked, other) == 0

    def test_compare_cards(self):
        assert compare_cards(parse_hand("2s 2h 3d 4c 6s"), parse_hand("As Kd Qc Jh 9s")) == 1


class TestTotalOrder:
    """compare_hands is a total order consistent with strength_key."""

    def _hands(self, count, seed):
        deck = create_standard_deck()
        rng = np.random.default_rng(seed)
        return [
            classify([deck[i] for i in rng.choice(len(deck), size=5, replace=False)])
            for _ in range(count)
        ]

    def test_result_is_sign(self):
        for a, b in itertools.combinations(self._hands(40, seed=1), 2):
            assert compare_hands(a, b) in (-1, 0, 1)

    def test_reflexive_and_antisymmetric(self):
        hands = self._hands(60, seed=2)
        for a in hands:
            assert compare_hands(a, a) == 0
        for a, b in itertools.combinations(hands, 2):
            assert compare_hands(a, b) == -compare_hands(b, a)

    def test_consistent_with_strength_key(self):
        for a, b in itertools.combinations(self._hands(60, seed=4), 2):
            expected = (a.strength_key > b.strength_key) - (a.strength_key < b.strength_key)
            assert compare_hands(a, b) == expected

    def test_transitive(self):
        hands = self._hands(25, seed=6)
        for a, b, c in itertools.permutations(hands, 3):
            if compare_hands(a, b) >= 0 and compare_hands(b, c) >= 0:
                assert compare_hands(a, c) >= 0

    def test_sorting_orders_by_strength(self):
        hands = self._hands(80, seed=8)
        ordered = sorted(hands, key=functools.cmp_to_key(compare_hands))
        for weaker, stronger in zip(ordered, ordered[1:]):
            assert compare_hands(weaker, stronger) <= 0
            assert weaker.category <= stronger.category
