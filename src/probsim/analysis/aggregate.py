"""Summary statistics over a completed batch of trial results."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from probsim.config import DEFAULT_HISTOGRAM_BINS
from probsim.errors import InvalidState
from probsim.validation import check_level


@dataclass(frozen=True)
class AggregateStatistics:
    """Count, mean and unbiased spread of numeric trial results."""

    count: int
    mean: float
    variance: float
    stddev: float

    def standard_error(self) -> float:
        """Standard error of the mean."""
        return self.stddev / np.sqrt(self.count)


@dataclass(frozen=True)
class Histogram:
    """Bucket counts over ``len(counts)`` bins delimited by ``edges``."""

    edges: tuple[float, ...]
    counts: tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def frequencies(self) -> tuple[float, ...]:
        """Share of results in each bin."""
        total = self.total
        return tuple(c / total if total else 0.0 for c in self.counts)

    def bins(self) -> list[tuple[float, float, int]]:
        """(left edge, right edge, count) for each bin."""
        return [
            (self.edges[i], self.edges[i + 1], count)
            for i, count in enumerate(self.counts)
        ]


class EmpiricalCDF:
    """Step function giving the share of results less than or equal to ``x``."""

    def __init__(self, values: np.ndarray):
        self.values = np.sort(np.asarray(values, dtype=np.float64))
        self.values.flags.writeable = False

    def __len__(self) -> int:
        return len(self.values)

    def __call__(self, x: float) -> float:
        return int(np.searchsorted(self.values, x, side="right")) / len(self.values)

    def quantile(self, p: float) -> float:
        """Smallest observed value whose empirical CDF reaches ``p``."""
        level = check_level(p)
        index = int(np.ceil(level * len(self.values))) - 1
        return float(self.values[index])


def _numeric(
    results: Sequence[Any],
    value: Callable[[Any], float] | None,
) -> np.ndarray:
    if value is not None:
        results = [value(r) for r in results]
    return np.asarray(results, dtype=np.float64)


def aggregate(
    results: Sequence[Any],
    value: Callable[[Any], float] | None = None,
) -> AggregateStatistics:
    """Compute count, mean, variance and standard deviation.

    Args:
        results: Trial results in any order
        value: Extracts the number to summarise from a record result

    Returns:
        AggregateStatistics with the unbiased (n - 1) sample variance

    Raises:
        InvalidState: If fewer than two results are given
    """
    values = _numeric(results, value)
    if len(values) == 0:
        raise InvalidState("Cannot aggregate an empty result set")
    if len(values) == 1:
        raise InvalidState("Sample variance is undefined for a single result")

    variance = float(np.var(values, ddof=1))
    return AggregateStatistics(
        count=len(values),
        mean=float(np.mean(values)),
        variance=variance,
        stddev=float(np.sqrt(variance)),
    )


def histogram(
    results: Sequence[Any],
    bins: int | Sequence[float] = DEFAULT_HISTOGRAM_BINS,
    value: Callable[[Any], float] | None = None,
) -> Histogram:
    """Bucket results into equal-width bins or explicit edges."""
    values = _numeric(results, value)
    if len(values) == 0:
        raise InvalidState("Cannot build a histogram of an empty result set")

    counts, edges = np.histogram(values, bins=bins)
    return Histogram(
        edges=tuple(float(e) for e in edges),
        counts=tuple(int(c) for c in counts),
    )


def empirical_cdf(
    results: Sequence[Any],
    value: Callable[[Any], float] | None = None,
) -> EmpiricalCDF:
    """Empirical distribution function of the results."""
    values = _numeric(results, value)
    if len(values) == 0:
        raise InvalidState("Cannot build an empirical CDF of an empty result set")
    return EmpiricalCDF(values)
