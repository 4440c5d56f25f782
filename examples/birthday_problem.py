#!/usr/bin/env python3
"""Birthday problem: compare simulation against the exact probability.

Usage:
    python examples/birthday_problem.py [--group-size N] [--simulations M]
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from probsim.analysis import birthday_collision_probability
from probsim.config import DAYS_IN_YEAR, DEFAULT_GROUP_SIZE, DEFAULT_NUM_TRIALS
from probsim.output import ConsoleOutput
from probsim.simulation import simulate_birthday


def main():
    parser = argparse.ArgumentParser(description="Simulate the birthday problem")
    parser.add_argument("--group-size", type=int, default=DEFAULT_GROUP_SIZE)
    parser.add_argument("--days", type=int, default=DAYS_IN_YEAR)
    parser.add_argument("--simulations", "-n", type=int, default=DEFAULT_NUM_TRIALS)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--parallel", action="store_true", help="Use parallel processing")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    results = simulate_birthday(
        group_size=args.group_size,
        num_trials=args.simulations,
        days=args.days,
        seed=args.seed,
        parallel=args.parallel,
    )
    ConsoleOutput.print_birthday_summary(results)

    # Exact curve for nearby group sizes
    print("\nEXACT PROBABILITY BY GROUP SIZE:")
    print("-" * 50)
    for size in range(max(args.group_size - 10, 2), args.group_size + 11, 5):
        prob = birthday_collision_probability(size, args.days)
        print(f"  {size:3d} people: {prob:.4f} {'#' * int(prob * 50)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
