"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit enumerations with explicit integer values
- Card representation and token parsing
- The 52-card set used to draw random hands
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List


class Rank(IntEnum):
    """Card ranks. The integer value is the rank used for comparison."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. Values only index suits; suits never break ties."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

# Symbol lookups for parsing; "10" is accepted as an alias for T
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["10"] = Rank.TEN
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

MIN_RANK = Rank.TWO
MAX_RANK = Rank.ACE


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first, then by suit, so sorting is stable and
    deterministic. Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like 'Ah', 'td' or '10s'.

        Args:
            s: Card token in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If the rank or suit is not recognised
        """
        if not isinstance(s, str) or len(s) < 2:
            raise ValueError(f"Invalid card token: {s!r}")

        rank_str, suit_char = s[:-1].upper(), s[-1].lower()

        if rank_str not in SYMBOL_TO_RANK:
            raise ValueError(f"Invalid rank specified: {s!r}")
        if suit_char not in SYMBOL_TO_SUIT:
            raise ValueError(f"Invalid suit specified: {s!r}")

        return cls(rank=SYMBOL_TO_RANK[rank_str], suit=SYMBOL_TO_SUIT[suit_char])


def create_standard_deck() -> List[Card]:
    """Create the 52 distinct cards (13 ranks x 4 suits).

    Used to draw random hands in tests and the smoke script.
    """
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]
