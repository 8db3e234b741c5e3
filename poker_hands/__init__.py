"""Poker Hands - five-card hand classification and comparison.

Classifies standard five-card poker hands into the nine categories,
orders their cards for tie-breaking, and compares hands, one at a time
or in batches with PyTorch.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.config import DEFAULT_CONFIG, EvalConfig
from poker_hands.rules import (
    Card,
    HandCategory,
    RankedHand,
    classify,
    compare_hands,
    parse_hand,
)
from poker_hands.utils.seeding import set_seed

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "EvalConfig",
    "Card",
    "HandCategory",
    "RankedHand",
    "classify",
    "compare_hands",
    "parse_hand",
    "set_seed",
]
