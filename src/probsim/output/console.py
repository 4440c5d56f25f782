"""Console output formatting."""

from probsim.analysis.aggregate import AggregateStatistics, Histogram
from probsim.config import BAR_SCALE
from probsim.simulation.birthday import BirthdayResults
from probsim.simulation.election import ElectionResults


def _bar(percent: float) -> str:
    return "#" * int(percent / BAR_SCALE)


class ConsoleOutput:
    """Formats simulation results for console display."""

    @staticmethod
    def print_statistics(stats: AggregateStatistics, title: str = "TRIAL STATISTICS") -> None:
        """Print aggregate statistics to console.

        Args:
            stats: Aggregated trial results
            title: Heading line
        """
        print("\n" + "=" * 50)
        print(title)
        print("=" * 50)
        print(f"  Trials:    {stats.count:8d}")
        print(f"  Mean:      {stats.mean:12.4f}")
        print(f"  Variance:  {stats.variance:12.4f}")
        print(f"  Std dev:   {stats.stddev:12.4f}")
        print(f"  Std error: {stats.standard_error():12.4f}")
        print("=" * 50)

    @staticmethod
    def print_histogram(hist: Histogram, title: str = "DISTRIBUTION") -> None:
        """Print histogram bins with percentage bars."""
        print(f"\n{title}:")
        print("-" * 50)
        for (left, right, _count), freq in zip(hist.bins(), hist.frequencies):
            pct = freq * 100
            print(f"  [{left:9.2f}, {right:9.2f}) {pct:5.1f}% {_bar(pct)}")

    @staticmethod
    def print_election_summary(results: ElectionResults, top: int = 10) -> None:
        """Print election simulation summary.

        Args:
            results: Results from simulate_election
            top: Number of entities listed by win rate
        """
        print("\n" + "=" * 60)
        print("ELECTION SIMULATION RESULTS")
        print(f"({results.num_trials} simulations, {results.total_weight} total votes)")
        print("=" * 60)

        print(f"\nWin probability:  {results.win_probability * 100:5.1f}%")
        print(f"Tie probability:  {results.tie_probability * 100:5.1f}%")

        if results.num_trials > 1:
            stats = results.statistics
            print(f"Votes: mean {stats.mean:.1f}, std dev {stats.stddev:.1f}")

        print("\nENTITY WIN RATES:")
        print("-" * 50)
        for name, rate in list(results.entity_win_rates.items())[:top]:
            pct = rate * 100
            print(f"{name:<20} {pct:5.1f}% {_bar(pct)}")

        print("=" * 60)

    @staticmethod
    def print_birthday_summary(results: BirthdayResults) -> None:
        """Print simulated against exact birthday collision probability."""
        print("\n" + "=" * 50)
        print(f"BIRTHDAY PROBLEM - {results.group_size} people, {results.days} days")
        print(f"({results.num_trials} simulations)")
        print("=" * 50)
        print(f"  Simulated: {results.collision_rate:.4f}")
        print(f"  Exact:     {results.exact_probability:.4f}")
        print(f"  Error:     {results.collision_rate - results.exact_probability:+.4f}")
        print("=" * 50)
