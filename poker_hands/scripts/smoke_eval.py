#!/usr/bin/env python3
"""Smoke test for the hand evaluators.

This script draws N random five-card hands and checks that:
- The CPU classifier and the batch evaluator agree on every category
- Both produce the same canonical card order
- compare_hands and BatchHandEvaluator.compare agree on paired hands

It also reports the category distribution and throughput of each path.

Usage:
    python -m poker_hands.scripts.smoke_eval --hands 10000
    python -m poker_hands.scripts.smoke_eval --hands 2000 --seed 42 --device cuda --verbose
"""

import argparse
import logging
import sys
import time
from collections import Counter

import numpy as np
import torch

from poker_hands.batch import BatchHandEvaluator, decode_hand, sample_hand_indices
from poker_hands.config import EvalConfig
from poker_hands.rules import HandCategory, classify, compare_hands
from poker_hands.utils.seeding import set_seed


def run_parity(num_hands: int, seed: int, device: torch.device, config: EvalConfig, verbose: bool = False) -> dict:
    """Classify random hands on both paths and count disagreements.

    Args:
        num_hands: Number of hands to draw (rounded down to an even number)
        seed: Seed for the hand sampler
        device: Torch device for the batch evaluator
        config: Evaluation options shared by both paths
        verbose: If True, print each mismatch

    Returns:
        Dict with statistics
    """
    num_hands -= num_hands % 2
    rng = np.random.default_rng(seed)
    hands_idx = sample_hand_indices(num_hands, rng)
    hands = [decode_hand(row) for row in hands_idx]

    stats = {
        "hands": num_hands,
        "category_mismatches": 0,
        "order_mismatches": 0,
        "compare_mismatches": 0,
        "categories": Counter(),
    }

    start = time.time()
    cpu_ranked = [classify(hand, config) for hand in hands]
    stats["cpu_time"] = time.time() - start

    evaluator = BatchHandEvaluator(device=device, config=config)
    start = time.time()
    batch = evaluator.classify(hands_idx)
    if device.type == "cuda":
        torch.cuda.synchronize()
    stats["batch_time"] = time.time() - start

    for i, (cpu, gpu) in enumerate(zip(cpu_ranked, batch.to_ranked_hands())):
        stats["categories"][cpu.category] += 1
        if cpu.category != gpu.category:
            stats["category_mismatches"] += 1
            if verbose:
                print(f"  category mismatch #{i}: cpu={cpu} batch={gpu}")
        elif cpu.cards != gpu.cards:
            stats["order_mismatches"] += 1
            if verbose:
                print(f"  order mismatch #{i}: cpu={cpu} batch={gpu}")

    half = num_hands // 2
    batch_cmp = evaluator.compare(hands_idx[:half], hands_idx[half:]).cpu().tolist()
    for i in range(half):
        cpu_cmp = compare_hands(cpu_ranked[i], cpu_ranked[half + i])
        if cpu_cmp != batch_cmp[i]:
            stats["compare_mismatches"] += 1
            if verbose:
                print(f"  compare mismatch #{i}: cpu={cpu_cmp} batch={batch_cmp[i]}")

    return stats


def main():
    parser = argparse.ArgumentParser(description="Smoke test for the five-card hand evaluators")
    parser.add_argument(
        "--hands",
        type=int,
        default=10000,
        help="Number of random hands to evaluate (default: 10000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: None for random)",
    )
    parser.add_argument(
        "--device",
        type=str,
        default="cuda" if torch.cuda.is_available() else "cpu",
        help="Torch device for the batch evaluator",
    )
    parser.add_argument(
        "--no-ace-low",
        action="store_true",
        help="Do not count A-5-4-3-2 as a straight",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print mismatches and debug logging",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    seed = set_seed(args.seed)
    config = EvalConfig(ace_low_straight=not args.no_ace_low)
    device = torch.device(args.device)

    print(f"Evaluating {args.hands} hand(s)...")
    print(f"  seed: {seed}")
    print(f"  device: {device}")
    print(f"  ace_low_straight: {config.ace_low_straight}")

    stats = run_parity(args.hands, seed, device, config, verbose=args.verbose)

    print(f"\n=== Categories ===")
    for category in HandCategory:
        count = stats["categories"].get(category, 0)
        share = count / stats["hands"] if stats["hands"] else 0.0
        print(f"  {category.label:<16} {count:>8} ({share:.4%})")

    print(f"\n=== Summary ===")
    print(f"  Hands: {stats['hands']}")
    print(f"  CPU time: {stats['cpu_time']:.3f}s")
    print(f"  Batch time: {stats['batch_time']:.3f}s")
    print(f"  Category mismatches: {stats['category_mismatches']}")
    print(f"  Order mismatches: {stats['order_mismatches']}")
    print(f"  Compare mismatches: {stats['compare_mismatches']}")

    errors = stats["category_mismatches"] + stats["order_mismatches"] + stats["compare_mismatches"]
    if errors > 0:
        print(f"\nFAILED: {errors} mismatch(es) detected")
        sys.exit(1)

    print("\nPASSED: CPU and batch evaluators agree")
    sys.exit(0)


if __name__ == "__main__":
    main()
