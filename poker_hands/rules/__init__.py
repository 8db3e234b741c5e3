"""Five-card poker rules.

This module provides:
- Card and rank definitions (ranks.py)
- Hand grouping, classification, comparison and parsing (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    MIN_RANK,
    MAX_RANK,
    create_standard_deck,
)

from .hands import (
    HAND_SIZE,
    HandCategory,
    CATEGORY_LABELS,
    RankGroup,
    RankedHand,
    HandParseError,
    group_cards,
    flatten_groups,
    classify,
    classify_groups,
    compare_hands,
    compare_cards,
    beats,
    parse_hand,
    make_cards_from_ranks,
    make_cards_from_string,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "MIN_RANK",
    "MAX_RANK",
    "create_standard_deck",
    # Hands
    "HAND_SIZE",
    "HandCategory",
    "CATEGORY_LABELS",
    "RankGroup",
    "RankedHand",
    "HandParseError",
    "group_cards",
    "flatten_groups",
    "classify",
    "classify_groups",
    "compare_hands",
    "compare_cards",
    "beats",
    "parse_hand",
    "make_cards_from_ranks",
    "make_cards_from_string",
]
