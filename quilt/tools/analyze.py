#!/usr/bin/env python3
"""
Granny Square Quilt - Convergence Analyzer

Generates many seeded quilts and reports how much work the repair phase
needed. Useful for judging whether a rule set is too restrictive.
Usage: granny-analyze <width> <height> [--runs N] [--rules ...]
Examples:
    granny-analyze 16 20 --runs 20
    granny-analyze 8 8 --rules outer middle-inner-2 inner --max-passes 100000
"""

import argparse

import numpy as np

from quilt.core.quilt import GenerationStats, RepairBudgetExceeded
from quilt.tools.options import add_quilt_arguments, build_quilt


def percentile_stats(values):
    """Return min/25th/50th/75th/max statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "count": len(values),
    }


def run_generations(args, runs: int, first_seed: int):
    """
    Generate one quilt per seed.

    Returns:
        (completed GenerationStats list, number of runs over budget)
    """
    results: list[GenerationStats] = []
    failures = 0

    for seed in range(first_seed, first_seed + runs):
        quilt = build_quilt(args, seed=seed)
        try:
            stats = quilt.generate_quilt()
        except RepairBudgetExceeded as e:
            print(f"  seed {seed}: {e}")
            failures += 1
            continue
        results.append(stats)

    return results, failures


def print_stats(label: str, values):
    s = percentile_stats(values)
    print(
        f"{label:<12} min {s['min']:>8.0f}  p25 {s['25th']:>8.1f}  "
        f"p50 {s['50th']:>8.1f}  p75 {s['75th']:>8.1f}  max {s['max']:>8.0f}"
    )


def main():
    parser = argparse.ArgumentParser(
        description="Report repair-phase statistics over many generated quilts",
    )
    add_quilt_arguments(parser)
    parser.add_argument(
        "-n", "--runs", type=int, default=10, help="Number of quilts (default: 10)"
    )

    args = parser.parse_args()
    first_seed = args.seed if args.seed is not None else 0

    print(
        f"Generating {args.runs} quilts ({args.width}x{args.height}, "
        f"rules: {' '.join(args.rules) or 'usage cap only'})..."
    )
    results, failures = run_generations(args, args.runs, first_seed)

    print(f"\nCompleted: {len(results)}/{args.runs}")
    if failures:
        print(f"Over budget: {failures}")
    if not results:
        return

    print()
    print_stats("Passes", [s.passes for s in results])
    print_stats("Repairs", [s.repairs for s in results])
    print_stats("Evictions", [s.evictions for s in results])
    print_stats("Mutations", [s.mutations for s in results])
    print_stats("Seed misses", [s.seed_misses for s in results])

    mutations = np.array([s.mutations for s in results])
    print(f"\nAverage mutations: {np.mean(mutations):.1f}")
    print(f"Std dev: {np.std(mutations):.1f}")


if __name__ == "__main__":
    main()
