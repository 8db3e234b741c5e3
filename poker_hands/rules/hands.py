"""Hand grouping, classification, and comparison for five-card poker.

Hand categories (weakest to strongest):
- High card, one pair, two pair, three of a kind, straight, flush,
  full house, four of a kind, straight flush

Classification:
- Cards are grouped by rank; groups are ordered by size, then by rank
- Group shapes decide the paired categories
- Hands with five distinct ranks are tested for straights and flushes

Comparison rules:
- Category strength first
- Then the canonical card order, position by position, by rank
- Suits never break ties
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple, Union

from poker_hands.config import DEFAULT_CONFIG, EvalConfig

from .ranks import Card, Rank, Suit

logger = logging.getLogger(__name__)

HAND_SIZE = 5

# Ranks of the ace-low straight, high to low as dealt: A, 5, 4, 3, 2
WHEEL_RANKS = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)


class HandCategory(IntEnum):
    """Hand categories ordered by strength (higher value = stronger)."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'full house'."""
        return CATEGORY_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "HandCategory":
        """Look up a category by its human-readable name.

        Raises:
            ValueError: If the label does not name a category
        """
        key = label.strip().lower()
        for category, name in CATEGORY_LABELS.items():
            if name == key:
                return category
        raise ValueError(f"Unknown hand category: {label!r}")


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "high card",
    HandCategory.ONE_PAIR: "one pair",
    HandCategory.TWO_PAIR: "two pair",
    HandCategory.THREE_OF_A_KIND: "three of a kind",
    HandCategory.STRAIGHT: "straight",
    HandCategory.FLUSH: "flush",
    HandCategory.FULL_HOUSE: "full house",
    HandCategory.FOUR_OF_A_KIND: "four of a kind",
    HandCategory.STRAIGHT_FLUSH: "straight flush",
}


@dataclass(frozen=True)
class RankGroup:
    """Cards of a hand that share one rank."""

    rank: Rank
    cards: Tuple[Card, ...]

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class RankedHand:
    """A classified five-card hand.

    Attributes:
        category: The hand category
        cards: The five cards in canonical order, most significant first.
            Comparing two hands of one category position by position on
            rank settles the winner.
    """

    category: HandCategory
    cards: Tuple[Card, ...]

    @property
    def ranks(self) -> Tuple[int, ...]:
        """Ranks of the canonical card order as plain ints."""
        return tuple(int(c.rank) for c in self.cards)

    @property
    def strength_key(self) -> Tuple[int, ...]:
        """Sort key consistent with compare_hands: (category, *ranks)."""
        return (int(self.category),) + self.ranks

    @property
    def label(self) -> str:
        return self.category.label

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.label}({cards_str})"


class HandParseError(ValueError):
    """Raised when card tokens cannot form a five-card hand."""

    pass


# ============================================================================
# Grouping
# ============================================================================


def group_cards(cards: Sequence[Card]) -> List[RankGroup]:
    """Partition cards into rank groups ordered by significance.

    Post-condition: groups are sorted by descending size, and groups of
    equal size by descending rank. Within a group cards keep input order.

    Args:
        cards: The hand's cards, any order

    Returns:
        List of RankGroup covering every input card exactly once
    """
    buckets = {}
    for card in cards:
        buckets.setdefault(card.rank, []).append(card)

    groups = [RankGroup(rank=rank, cards=tuple(members)) for rank, members in buckets.items()]
    groups.sort(key=lambda g: (len(g.cards), g.rank), reverse=True)
    return groups


def flatten_groups(groups: Sequence[RankGroup]) -> Tuple[Card, ...]:
    """Concatenate group cards in group order."""
    return tuple(card for group in groups for card in group.cards)


# ============================================================================
# Classification
# ============================================================================


def is_flush(cards: Sequence[Card]) -> bool:
    """Check whether all cards share one suit."""
    return len({c.suit for c in cards}) == 1


def is_straight(ranks_desc: Sequence[Rank]) -> bool:
    """Check whether distinct ranks sorted descending are consecutive."""
    return int(ranks_desc[0]) - int(ranks_desc[-1]) == len(ranks_desc) - 1


def is_wheel(ranks_desc: Sequence[Rank]) -> bool:
    """Check for the ace-low straight A-5-4-3-2."""
    return tuple(ranks_desc) == WHEEL_RANKS


def classify_groups(groups: Sequence[RankGroup], config: EvalConfig = DEFAULT_CONFIG) -> RankedHand:
    """Classify a hand from its ordered rank groups.

    Args:
        groups: Output of group_cards (sorted by size, then rank)
        config: Evaluation options

    Returns:
        RankedHand with category and canonical card order
    """
    first = len(groups[0])
    second = len(groups[1]) if len(groups) > 1 else 0

    if first >= 4:
        return RankedHand(HandCategory.FOUR_OF_A_KIND, flatten_groups(groups))
    if first == 3:
        category = HandCategory.FULL_HOUSE if second == 2 else HandCategory.THREE_OF_A_KIND
        return RankedHand(category, flatten_groups(groups))
    if first == 2:
        category = HandCategory.TWO_PAIR if second == 2 else HandCategory.ONE_PAIR
        return RankedHand(category, flatten_groups(groups))

    # No paired cards, test for straights and flushes
    singles = [group.cards[0] for group in groups]
    ranks_desc = [c.rank for c in singles]
    flush = is_flush(singles)
    straight = is_straight(ranks_desc)

    if not straight and config.ace_low_straight and is_wheel(ranks_desc):
        # The ace plays low: 5-4-3-2-A
        straight = True
        singles = singles[1:] + singles[:1]

    if flush:
        category = HandCategory.STRAIGHT_FLUSH if straight else HandCategory.FLUSH
    else:
        category = HandCategory.STRAIGHT if straight else HandCategory.HIGH_CARD

    return RankedHand(category, tuple(singles))


def classify(cards: Sequence[Card], config: EvalConfig = DEFAULT_CONFIG) -> RankedHand:
    """Classify a five-card hand.

    The hand is assumed to be validated (exactly five cards).

    Args:
        cards: Five Card objects in any order
        config: Evaluation options

    Returns:
        RankedHand with category and canonical card order
    """
    return classify_groups(group_cards(cards), config)


# ============================================================================
# Comparison
# ============================================================================


def compare_hands(hand1: RankedHand, hand2: RankedHand) -> int:
    """Compare two classified hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        1 if hand1 is stronger, -1 if hand1 is weaker, 0 for a tie
    """
    if hand1.category != hand2.category:
        return 1 if hand1.category > hand2.category else -1

    for card1, card2 in zip(hand1.cards, hand2.cards):
        if card1.rank != card2.rank:
            return 1 if card1.rank > card2.rank else -1
    return 0


def beats(hand1: RankedHand, hand2: RankedHand) -> bool:
    """Check if hand1 strictly beats hand2."""
    return compare_hands(hand1, hand2) > 0


def compare_cards(
    cards1: Sequence[Card], cards2: Sequence[Card], config: EvalConfig = DEFAULT_CONFIG
) -> int:
    """Classify two raw hands and compare them."""
    return compare_hands(classify(cards1, config), classify(cards2, config))


# ============================================================================
# Parsing
# ============================================================================


def parse_hand(tokens: Optional[Union[str, Sequence[str]]]) -> List[Card]:
    """Build a five-card hand from card tokens.

    Duplicate cards are not rejected.

    Args:
        tokens: Sequence of tokens like ["8s", "2h", "7c", "Ad", "4c"],
            or a single space-separated string

    Returns:
        List of five Card objects in input order

    Raises:
        HandParseError: If there are not exactly five tokens, or a token
            is not a valid card
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    if not tokens or len(tokens) != HAND_SIZE:
        count = len(tokens) if tokens else 0
        raise HandParseError(f"Hands must contain exactly {HAND_SIZE} cards, got {count}")

    cards = []
    for i, token in enumerate(tokens):
        try:
            cards.append(Card.from_string(token))
        except ValueError as e:
            raise HandParseError(f"Invalid card at position {i + 1}: {e}") from e

    logger.debug("Parsed hand %s", " ".join(str(c) for c in cards))
    return cards


def make_cards_from_string(s: str) -> List[Card]:
    """Parse any number of cards from a space-separated string like "Ah Kd 5c"."""
    return [Card.from_string(cs) for cs in s.split()]


def make_cards_from_ranks(ranks: Sequence[Rank], suits: Optional[Sequence[Suit]] = None) -> List[Card]:
    """Create cards from ranks, cycling through suits when none are given.

    Cycling suits keeps five-card hands from being accidental flushes.
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=r, suit=s) for r, s in zip(ranks, suits)]
