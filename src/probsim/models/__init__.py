"""Data models for probability simulation."""

from .distribution import (
    DISTRIBUTION_FAMILIES,
    Bernoulli,
    Binomial,
    DiscreteUniform,
    Distribution,
    DistributionParams,
    make_distribution,
)
from .entity import Entity

__all__ = [
    "DISTRIBUTION_FAMILIES",
    "Bernoulli",
    "Binomial",
    "DiscreteUniform",
    "Distribution",
    "DistributionParams",
    "Entity",
    "make_distribution",
]
