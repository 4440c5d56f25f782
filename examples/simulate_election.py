#!/usr/bin/env python3
"""Example: Simulate an election from per-state win probabilities.

This script demonstrates the full workflow:
1. Load electoral votes and per-state probabilities from CSV
2. Join them on the state name into typed entities
3. Run Monte Carlo election trials
4. Display and export results

Usage:
    python examples/simulate_election.py [--simulations N] [--draws D]

Examples:
    python examples/simulate_election.py --simulations 1000
    python examples/simulate_election.py -n 10000 --no-parallel --export
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from probsim.analysis import histogram
from probsim.config import DEFAULT_DRAWS, DEFAULT_NUM_TRIALS
from probsim.data import load_entities
from probsim.errors import ProbSimError
from probsim.output import ConsoleOutput, Exporter
from probsim.simulation import simulate_election

DATA_DIR = Path(__file__).parent / "data"


def main():
    parser = argparse.ArgumentParser(description="Simulate an election with Monte Carlo")
    parser.add_argument(
        "--weights",
        default=str(DATA_DIR / "electoral_votes.csv"),
        help="CSV with state and electoral_votes columns",
    )
    parser.add_argument(
        "--probabilities",
        default=str(DATA_DIR / "state_probabilities.csv"),
        help="CSV with state and probability columns",
    )
    parser.add_argument(
        "--simulations",
        "-n",
        type=int,
        default=DEFAULT_NUM_TRIALS,
        help=f"Number of simulations (default: {DEFAULT_NUM_TRIALS})",
    )
    parser.add_argument(
        "--draws",
        type=int,
        default=DEFAULT_DRAWS,
        help=f"Bernoulli draws per state (default: {DEFAULT_DRAWS})",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--parallel",
        action="store_true",
        default=True,
        help="Use parallel processing (default: True)",
    )
    parser.add_argument(
        "--no-parallel",
        action="store_false",
        dest="parallel",
        help="Disable parallel processing",
    )
    parser.add_argument("--export", action="store_true", help="Export results to CSV/JSON")
    parser.add_argument(
        "--output-dir",
        default="output",
        help="Output directory for exports (default: output)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("Election Monte Carlo Simulation")
    print(f"{'=' * 40}")
    print(f"Simulations: {args.simulations}")
    print(f"Draws per state: {args.draws}")
    print(f"Parallel: {args.parallel}")
    print()

    try:
        entities = load_entities(args.weights, args.probabilities, key="state")
    except (OSError, ProbSimError) as e:
        print(f"Error loading state data: {e}")
        return 1

    print(f"Loaded {len(entities)} states")
    print(f"\nRunning {args.simulations} simulations...")

    try:
        results = simulate_election(
            entities,
            num_trials=args.simulations,
            draws=args.draws,
            seed=args.seed,
            parallel=args.parallel,
        )
    except ProbSimError as e:
        print(f"Error: {e}")
        return 1

    ConsoleOutput.print_election_summary(results)
    if args.simulations > 1:
        ConsoleOutput.print_statistics(results.statistics, title="ELECTORAL VOTES")
    if results.votes:
        ConsoleOutput.print_histogram(histogram(results.votes), title="ELECTORAL VOTE DISTRIBUTION")

    if args.export:
        print(f"\nExporting results to {args.output_dir}/...")
        exporter = Exporter(output_dir=args.output_dir)
        files = exporter.export_all(results, prefix="election")

        print("Exported files:")
        for fmt, path in files.items():
            print(f"  {fmt}: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
