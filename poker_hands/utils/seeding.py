"""Seeding helpers for reproducible random hands.

Random hands only appear in tests and the smoke script; the evaluators
themselves are deterministic and never draw random numbers.
"""

import random
from typing import Optional, Tuple

import numpy as np
import torch


def set_seed(seed: Optional[int] = None) -> int:
    """Seed Python's random, NumPy's global RNG and PyTorch.

    Args:
        seed: The seed to use. If None, one is drawn and returned so the
              run can be reproduced later.

    Returns:
        The seed that was applied.

    Example:
        >>> from poker_hands import set_seed
        >>> set_seed(7)
        7
    """
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)

    return seed


def make_generators(seed: int, device: str = "cpu") -> Tuple[np.random.Generator, torch.Generator]:
    """Create independent NumPy and PyTorch generators from one seed.

    Local generators keep parallel test cases from sharing global state.
    """
    np_rng = np.random.default_rng(seed)
    torch_rng = torch.Generator(device=device)
    torch_rng.manual_seed(seed)
    return np_rng, torch_rng
