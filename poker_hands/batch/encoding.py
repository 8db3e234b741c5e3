"""Card index encoding for batched evaluation.

This module provides:
- Card <-> index conversion (0-51)
- Hand encoding to fixed-width NumPy arrays of shape (5,) / (N, 5)
- Random distinct-card hand sampling for tests and smoke runs

Card encoding: card_idx = suit * 13 + (rank - 2)
- suit: 0=Clubs, 1=Diamonds, 2=Hearts, 3=Spades
- rank: 2..14 (Ace high), so the offset is 0..12
"""

from typing import List, Sequence

import numpy as np

from poker_hands.rules.hands import HAND_SIZE
from poker_hands.rules.ranks import Card, Rank, Suit, MIN_RANK


NUM_RANKS = 13
NUM_SUITS = 4
NUM_CARDS = NUM_RANKS * NUM_SUITS


class EncodingError(ValueError):
    """Raised when a hand cannot be encoded or decoded."""

    pass


def card_to_idx(card: Card) -> int:
    """Convert Card to index 0-51."""
    return int(card.suit) * NUM_RANKS + (int(card.rank) - int(MIN_RANK))


def idx_to_card(idx: int) -> Card:
    """Convert index 0-51 to Card."""
    idx = int(idx)
    if not 0 <= idx < NUM_CARDS:
        raise EncodingError(f"Card index out of range: {idx}")
    return Card(rank=Rank(idx % NUM_RANKS + int(MIN_RANK)), suit=Suit(idx // NUM_RANKS))


def encode_hand(cards: Sequence[Card]) -> np.ndarray:
    """Encode a five-card hand as an int64 array of card indices.

    Raises:
        EncodingError: If the hand does not hold exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise EncodingError(f"Expected {HAND_SIZE} cards, got {len(cards)}")
    return np.array([card_to_idx(c) for c in cards], dtype=np.int64)


def encode_hands(hands: Sequence[Sequence[Card]]) -> np.ndarray:
    """Encode many hands as an (N, 5) int64 array."""
    if len(hands) == 0:
        return np.zeros((0, HAND_SIZE), dtype=np.int64)
    return np.stack([encode_hand(hand) for hand in hands])


def decode_hand(indices: Sequence[int]) -> List[Card]:
    """Decode a row of card indices back to Card objects."""
    return [idx_to_card(i) for i in indices]


def sample_hand_indices(num_hands: int, rng: np.random.Generator) -> np.ndarray:
    """Draw random hands of five distinct cards.

    Each row is an independent draw from a full 52-card set.

    Args:
        num_hands: Number of hands (rows)
        rng: NumPy random generator

    Returns:
        Array of shape (num_hands, 5) with card indices
    """
    keys = rng.random((num_hands, NUM_CARDS))
    return np.argsort(keys, axis=1)[:, :HAND_SIZE].astype(np.int64)
