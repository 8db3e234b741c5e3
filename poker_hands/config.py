"""Evaluation options shared by the CPU rules and the batch evaluator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EvalConfig:
    """Options for hand classification.

    Attributes:
        ace_low_straight: Treat A-5-4-3-2 as a five-high straight. When False,
            a straight requires max rank - min rank == 4 and the wheel is
            classified as high card (or flush).
    """

    ace_low_straight: bool = True


DEFAULT_CONFIG = EvalConfig()
