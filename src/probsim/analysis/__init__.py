"""Distribution functions and Monte Carlo statistics."""

from .aggregate import AggregateStatistics, EmpiricalCDF, Histogram, aggregate, empirical_cdf, histogram
from .functions import (
    birthday_collision_probability,
    cdf,
    log_binomial_coefficient,
    mean,
    pmf,
    quantile,
    std,
    support,
    variance,
)

__all__ = [
    "AggregateStatistics",
    "EmpiricalCDF",
    "Histogram",
    "aggregate",
    "birthday_collision_probability",
    "cdf",
    "empirical_cdf",
    "histogram",
    "log_binomial_coefficient",
    "mean",
    "pmf",
    "quantile",
    "std",
    "support",
    "variance",
]
