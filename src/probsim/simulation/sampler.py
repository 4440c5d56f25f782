"""Seeded draws from the supported distribution families.

Every sampler takes the caller's ``numpy.random.Generator``; its state
advances with each draw, so a fixed seed reproduces the same samples.
Parameters are checked before anything is drawn.
"""

import numpy as np

from probsim.errors import InvalidParameter
from probsim.models import Bernoulli, Binomial, DiscreteUniform
from probsim.validation import check_count, check_integer, check_probability

SAMPLING_METHODS = ("numpy", "direct")


def as_generator(
    seed: int | np.random.SeedSequence | np.random.Generator | None = None,
) -> np.random.Generator:
    """Return a Generator for a seed, seed sequence, or existing generator."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def _freeze(values: np.ndarray) -> np.ndarray:
    values = values.astype(np.int64, copy=False)
    values.flags.writeable = False
    return values


def sample_bernoulli(
    n: int,
    probability: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Draw ``n`` independent Bernoulli variates.

    Args:
        n: Number of draws
        probability: Probability that a draw is 1
        rng: Random number generator

    Returns:
        Read-only int array of 0s and 1s with length ``n``
    """
    n = check_count("n", n)
    p = check_probability(probability)
    rng = as_generator(rng)

    # random() is in [0, 1): p=1 always succeeds, p=0 never does
    return _freeze(rng.random(n) < p)


def sample_binomial(
    n: int,
    trials: int,
    probability: float,
    rng: np.random.Generator | None = None,
    method: str = "numpy",
) -> np.ndarray:
    """Draw ``n`` independent Binomial(trials, probability) variates.

    Args:
        n: Number of draws
        trials: Bernoulli trials summed per draw
        probability: Success probability of each trial
        rng: Random number generator
        method: "numpy" for the generator's binomial sampler, "direct" to
            sum ``trials`` Bernoulli draws per element

    Returns:
        Read-only int array with values in [0, trials]
    """
    n = check_count("n", n)
    trials = check_count("trials", trials)
    p = check_probability(probability)
    if method not in SAMPLING_METHODS:
        raise InvalidParameter(f"method must be one of {SAMPLING_METHODS}, got {method!r}")
    rng = as_generator(rng)

    if method == "direct":
        successes = rng.random((n, trials)) < p
        return _freeze(successes.sum(axis=1))
    return _freeze(rng.binomial(trials, p, size=n))


def sample_discrete_uniform(
    n: int,
    low: int,
    high: int,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Draw ``n`` integers uniformly from ``[low, high]`` inclusive."""
    n = check_count("n", n)
    low = check_integer("low", low)
    high = check_integer("high", high)
    if low > high:
        raise InvalidParameter(f"low ({low}) must not exceed high ({high})")
    rng = as_generator(rng)

    return _freeze(rng.integers(low, high, size=n, endpoint=True))


def sample(
    distribution: Bernoulli | Binomial | DiscreteUniform,
    n: int,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Draw ``n`` variates from a distribution model."""
    if isinstance(distribution, Bernoulli):
        return sample_bernoulli(n, distribution.probability, rng)
    if isinstance(distribution, Binomial):
        return sample_binomial(n, distribution.trials, distribution.probability, rng)
    if isinstance(distribution, DiscreteUniform):
        return sample_discrete_uniform(n, distribution.low, distribution.high, rng)
    raise InvalidParameter(f"Unsupported distribution: {distribution!r}")
