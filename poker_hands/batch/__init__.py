"""Batched hand evaluation.

This module provides:
- Card index encoding with NumPy (encoding.py)
- Vectorized classification and comparison with PyTorch (gpu_eval.py)
"""

from .encoding import (
    NUM_CARDS,
    NUM_RANKS,
    NUM_SUITS,
    EncodingError,
    card_to_idx,
    idx_to_card,
    encode_hand,
    encode_hands,
    decode_hand,
    sample_hand_indices,
)

from .gpu_eval import (
    BatchRanking,
    BatchHandEvaluator,
)

__all__ = [
    # Encoding
    "NUM_CARDS",
    "NUM_RANKS",
    "NUM_SUITS",
    "EncodingError",
    "card_to_idx",
    "idx_to_card",
    "encode_hand",
    "encode_hands",
    "decode_hand",
    "sample_hand_indices",
    # Evaluation
    "BatchRanking",
    "BatchHandEvaluator",
]
