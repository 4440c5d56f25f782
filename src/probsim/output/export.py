"""Export simulation results to CSV and JSON."""

import csv
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from probsim.analysis.aggregate import aggregate
from probsim.simulation.election import ElectionResults


class Exporter:
    """Exports trial results and statistics to files."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_trials_csv(
        self,
        results: Sequence[float],
        filename: str = "trials.csv",
        column: str = "result",
    ) -> Path:
        """Export one row per trial.

        Args:
            results: Trial results in index order
            filename: Output filename
            column: Header of the result column

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["trial", column])
            for index, result in enumerate(results):
                writer.writerow([index, result])

        return filepath

    def export_statistics_json(
        self,
        results: Sequence[float],
        filename: str = "statistics.json",
        metadata: dict[str, Any] | None = None,
    ) -> Path:
        """Export aggregate statistics to JSON.

        Args:
            results: Numeric trial results
            filename: Output filename
            metadata: Extra values stored under "metadata"

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename
        # Spread is undefined below two results; statistics is written as null
        statistics: dict[str, Any] | None = None
        if len(results) >= 2:
            stats = aggregate(results)
            statistics = {
                "count": stats.count,
                "mean": stats.mean,
                "variance": stats.variance,
                "stddev": stats.stddev,
            }

        stats_dict: dict[str, Any] = {
            "metadata": dict(metadata or {}),
            "num_results": len(results),
            "statistics": statistics,
        }

        with open(filepath, "w") as f:
            json.dump(stats_dict, f, indent=2)

        return filepath

    def export_election_json(
        self,
        results: ElectionResults,
        filename: str = "election.json",
    ) -> Path:
        """Export election win probabilities and vote distribution."""
        filepath = self.output_dir / filename

        stats_dict = {
            "metadata": {
                "num_trials": results.num_trials,
                "total_weight": results.total_weight,
            },
            "win_probability": results.win_probability,
            "tie_probability": results.tie_probability,
            "entity_win_rates": results.entity_win_rates,
            "vote_distribution": {
                str(votes): p for votes, p in results.get_vote_distribution().items()
            },
        }

        with open(filepath, "w") as f:
            json.dump(stats_dict, f, indent=2)

        return filepath

    def export_all(
        self,
        results: ElectionResults,
        prefix: str = "",
    ) -> dict[str, Path]:
        """Export all formats for an election run.

        Args:
            results: Election results
            prefix: Optional prefix for filenames

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        return {
            "trials_csv": self.export_trials_csv(
                results.votes, f"{prefix}trials.csv", column="votes"
            ),
            "statistics_json": self.export_statistics_json(
                results.votes,
                f"{prefix}statistics.json",
                metadata={"num_trials": results.num_trials, "total_weight": results.total_weight},
            ),
            "election_json": self.export_election_json(
                results, f"{prefix}election.json"
            ),
        }
