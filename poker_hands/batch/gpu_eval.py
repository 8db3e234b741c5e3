"""Vectorized hand classification and comparison with PyTorch.

This module provides:
- BatchHandEvaluator: classifies [N, 5] tensors of card indices in one pass
- Packed strength scores that order hands exactly like compare_hands
- Conversion of batch results back to RankedHand objects

Key insight: grouping by rank is a sort. Each card gets the key
(group_size * 16 + rank); a stable descending sort on that key lays the
cards out in canonical order, groups first, kickers after, and cards of
one group in input order, which is the order group_cards produces.

Strength packing: category * 15^5 + sum(rank_i * 15^(4 - i)). Ranks are
in [2, 14], so base 15 keeps the packed value lexicographic.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np
import torch

from poker_hands.batch.encoding import NUM_CARDS, NUM_RANKS, decode_hand
from poker_hands.config import DEFAULT_CONFIG, EvalConfig
from poker_hands.rules.hands import HAND_SIZE, WHEEL_RANKS, HandCategory, RankedHand

logger = logging.getLogger(__name__)

HandsLike = Union[torch.Tensor, np.ndarray, Sequence[Sequence[int]]]

RANK_BASE = 15
KEY_BASE = 16


@dataclass
class BatchRanking:
    """Classification results for N hands.

    All tensors live on the evaluator's device.
    """

    cards: torch.Tensor  # [N, 5] card indices in canonical order
    ranks: torch.Tensor  # [N, 5] ranks in canonical order
    categories: torch.Tensor  # [N] HandCategory values
    strength: torch.Tensor  # [N] packed comparable score

    def __len__(self) -> int:
        return int(self.categories.shape[0])

    def to_ranked_hands(self) -> List[RankedHand]:
        """Convert to RankedHand objects (moves data to the CPU)."""
        cards = self.cards.cpu().tolist()
        categories = self.categories.cpu().tolist()
        return [
            RankedHand(HandCategory(cat), tuple(decode_hand(row)))
            for cat, row in zip(categories, cards)
        ]


class BatchHandEvaluator:
    """Batched five-card evaluator.

    Produces the same categories and canonical card order as
    poker_hands.rules.classify, for N hands at a time.
    """

    def __init__(self, device: Optional[torch.device] = None, config: EvalConfig = DEFAULT_CONFIG):
        self.device = torch.device(device) if device is not None else torch.device("cpu")
        self.config = config
        self._init_tensors()
        logger.debug("BatchHandEvaluator on %s (ace_low_straight=%s)", self.device, config.ace_low_straight)

    def _init_tensors(self):
        """Pre-compute static tensors."""
        self.wheel_ranks = torch.tensor([int(r) for r in WHEEL_RANKS], device=self.device, dtype=torch.long)
        self.rank_weights = torch.tensor(
            [RANK_BASE ** (HAND_SIZE - 1 - i) for i in range(HAND_SIZE)],
            device=self.device,
            dtype=torch.long,
        )
        self.category_weight = RANK_BASE**HAND_SIZE

    def to_tensor(self, hands: HandsLike) -> torch.Tensor:
        """Convert hands to a validated [N, 5] long tensor on the device.

        Raises:
            ValueError: If the indices are not integers, the shape is not
                [N, 5], or an index is outside 0-51
        """
        if isinstance(hands, np.ndarray):
            hands = torch.from_numpy(hands)
        else:
            hands = torch.as_tensor(hands)
        if hands.is_floating_point() or hands.is_complex():
            raise ValueError(f"Card indices must be integers, got {hands.dtype}")
        idx = hands.to(device=self.device, dtype=torch.long)

        if idx.dim() != 2 or idx.shape[1] != HAND_SIZE:
            raise ValueError(f"Expected hands of shape [N, {HAND_SIZE}], got {list(idx.shape)}")
        if idx.numel() > 0 and (int(idx.min()) < 0 or int(idx.max()) >= NUM_CARDS):
            raise ValueError(f"Card indices must be in [0, {NUM_CARDS - 1}]")
        return idx

    def classify(self, hands: HandsLike) -> BatchRanking:
        """Classify a batch of hands.

        Args:
            hands: [N, 5] card indices (tensor, array or nested lists)

        Returns:
            BatchRanking with canonical order, categories and strength
        """
        idx = self.to_tensor(hands)
        batch = idx.shape[0]

        ranks = idx % NUM_RANKS + 2
        suits = idx // NUM_RANKS

        # Rank counts per hand: [N, 15], indexed directly by rank
        counts = torch.zeros((batch, RANK_BASE), device=self.device, dtype=torch.long)
        counts.scatter_add_(1, ranks, torch.ones_like(ranks))
        sizes = counts.gather(1, ranks)

        key = sizes * KEY_BASE + ranks
        _, order = torch.sort(key, dim=1, descending=True, stable=True)
        sorted_ranks = ranks.gather(1, order)
        sorted_sizes = sizes.gather(1, order)

        # Size of the largest group, and of the group right after it
        first = sorted_sizes[:, 0]
        second_pos = first.clamp(max=HAND_SIZE - 1).unsqueeze(1)
        second = sorted_sizes.gather(1, second_pos).squeeze(1)
        second = torch.where(first >= HAND_SIZE, torch.zeros_like(second), second)

        distinct = first == 1
        flush = (suits == suits[:, :1]).all(dim=1)
        straight = distinct & (sorted_ranks[:, 0] - sorted_ranks[:, -1] == HAND_SIZE - 1)

        if self.config.ace_low_straight:
            wheel = distinct & (sorted_ranks == self.wheel_ranks).all(dim=1)
            # The ace plays low: rotate it to the back
            rotated = torch.cat([order[:, 1:], order[:, :1]], dim=1)
            order = torch.where(wheel.unsqueeze(1), rotated, order)
            sorted_ranks = ranks.gather(1, order)
            straight = straight | wheel

        categories = torch.full((batch,), int(HandCategory.HIGH_CARD), device=self.device, dtype=torch.long)
        categories = self._where(distinct & straight, HandCategory.STRAIGHT, categories)
        categories = self._where(distinct & flush, HandCategory.FLUSH, categories)
        categories = self._where(distinct & flush & straight, HandCategory.STRAIGHT_FLUSH, categories)
        categories = self._where((first == 2) & (second != 2), HandCategory.ONE_PAIR, categories)
        categories = self._where((first == 2) & (second == 2), HandCategory.TWO_PAIR, categories)
        categories = self._where((first == 3) & (second != 2), HandCategory.THREE_OF_A_KIND, categories)
        categories = self._where((first == 3) & (second == 2), HandCategory.FULL_HOUSE, categories)
        categories = self._where(first >= 4, HandCategory.FOUR_OF_A_KIND, categories)

        strength = categories * self.category_weight + (sorted_ranks * self.rank_weights).sum(dim=1)

        return BatchRanking(
            cards=idx.gather(1, order),
            ranks=sorted_ranks,
            categories=categories,
            strength=strength,
        )

    def strength(self, hands: HandsLike) -> torch.Tensor:
        """Packed strength per hand; higher is stronger, equal is a tie."""
        return self.classify(hands).strength

    def compare(self, hands_a: HandsLike, hands_b: HandsLike) -> torch.Tensor:
        """Compare hands row by row.

        Returns:
            [N] long tensor: 1 where a is stronger, -1 where weaker, 0 for ties

        Raises:
            ValueError: If the two batches differ in size
        """
        strength_a = self.strength(hands_a)
        strength_b = self.strength(hands_b)
        if strength_a.shape != strength_b.shape:
            raise ValueError(
                f"Batch size mismatch: {strength_a.shape[0]} vs {strength_b.shape[0]}"
            )
        return torch.sign(strength_a - strength_b)

    def _where(self, cond: torch.Tensor, category: HandCategory, current: torch.Tensor) -> torch.Tensor:
        return torch.where(cond, torch.full_like(current, int(category)), current)
