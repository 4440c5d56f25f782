"""Deterministic distribution functions: PMF, CDF, quantile and moments.

Combinatorial terms are evaluated as sums of log-gamma values and only
exponentiated at the end, so large counts do not overflow. The Binomial CDF
uses the regularized incomplete beta function and needs no table, and the
quantile bisects over ``cdf`` itself, so ``quantile(d, cdf(d, x)) <= x``
holds without a second code path.
"""

import math

import numpy as np
from scipy.special import bdtr, gammaln

from probsim.errors import InvalidParameter
from probsim.models import Bernoulli, Binomial, DiscreteUniform
from probsim.validation import check_count, check_level

DistributionLike = Bernoulli | Binomial | DiscreteUniform


def _check_distribution(distribution) -> None:
    if not isinstance(distribution, (Bernoulli, Binomial, DiscreteUniform)):
        raise InvalidParameter(f"Unsupported distribution: {distribution!r}")


def _as_point(x) -> float:
    try:
        value = float(x)
    except (TypeError, ValueError):
        raise InvalidParameter(f"x must be a number, got {x!r}") from None
    if math.isnan(value):
        raise InvalidParameter("x must not be NaN")
    return value


def support(distribution: DistributionLike) -> tuple[int, int]:
    """Smallest and largest value with non-zero probability mass."""
    _check_distribution(distribution)
    if isinstance(distribution, Bernoulli):
        return 0, 1
    if isinstance(distribution, Binomial):
        return 0, distribution.trials
    return distribution.low, distribution.high


def log_binomial_coefficient(n: int, k: int) -> float:
    """Natural log of C(n, k) via log-gamma."""
    n = check_count("n", n)
    k = check_count("k", k)
    if k > n:
        raise InvalidParameter(f"k ({k}) must not exceed n ({n})")
    return float(gammaln(n + 1) - gammaln(k + 1) - gammaln(n - k + 1))


def _binomial_log_pmf(k, trials: int, p: float):
    """Log P(X = k) for X ~ Binomial(trials, p); works on scalars and arrays."""
    k = np.asarray(k, dtype=np.float64)
    if p == 0.0:
        return np.where(k == 0, 0.0, -np.inf)
    if p == 1.0:
        return np.where(k == trials, 0.0, -np.inf)
    return (
        gammaln(trials + 1)
        - gammaln(k + 1)
        - gammaln(trials - k + 1)
        + k * math.log(p)
        + (trials - k) * math.log1p(-p)
    )


def _binomial_cdf(k: int, trials: int, p: float) -> float:
    """P(X <= k) for 0 <= k < trials via the regularized incomplete beta."""
    if p == 0.0:
        return 1.0
    if p == 1.0:
        return 0.0
    return min(max(float(bdtr(k, trials, p)), 0.0), 1.0)


def pmf(distribution: DistributionLike, x) -> float:
    """P(X = x); zero outside the support and for non-integer ``x``."""
    _check_distribution(distribution)
    value = _as_point(x)
    low, high = support(distribution)
    if math.isinf(value) or value != math.floor(value) or not low <= value <= high:
        return 0.0

    k = int(value)
    if isinstance(distribution, Bernoulli):
        return distribution.probability if k == 1 else 1.0 - distribution.probability
    if isinstance(distribution, Binomial):
        log_mass = _binomial_log_pmf(k, distribution.trials, distribution.probability)
        return float(np.exp(log_mass))
    return 1.0 / (high - low + 1)


def cdf(distribution: DistributionLike, x) -> float:
    """P(X <= x); accepts any real ``x`` including +/-inf."""
    _check_distribution(distribution)
    value = _as_point(x)
    low, high = support(distribution)
    if value < low:
        return 0.0
    if value >= high:
        return 1.0

    k = math.floor(value)
    if isinstance(distribution, DiscreteUniform):
        return (k - low + 1) / (high - low + 1)
    if isinstance(distribution, Bernoulli):
        return 1.0 - distribution.probability
    return _binomial_cdf(k, distribution.trials, distribution.probability)


def quantile(distribution: DistributionLike, p) -> int:
    """Smallest support value ``x`` with ``cdf(x) >= p``.

    Args:
        distribution: Distribution model
        p: Probability level in (0, 1]

    Returns:
        The left-continuous inverse of the CDF at ``p``

    Raises:
        InvalidParameter: If ``p`` is outside [0, 1], NaN, or 0 (the
            inverse is unbounded below)
    """
    _check_distribution(distribution)
    level = check_level(p)

    low, high = support(distribution)
    if isinstance(distribution, DiscreteUniform):
        size = high - low + 1
        j = min(max(math.ceil(level * size), 1), size)
        # Settle on the same division cdf() performs
        while j > 1 and (j - 1) / size >= level:
            j -= 1
        while j < size and j / size < level:
            j += 1
        return low + j - 1

    # Bisection over cdf() itself; cdf(high) is exactly 1
    lo, hi = low, high
    while lo < hi:
        mid = (lo + hi) // 2
        if cdf(distribution, mid) >= level:
            hi = mid
        else:
            lo = mid + 1
    return lo


def mean(distribution: DistributionLike) -> float:
    """Closed-form expectation."""
    _check_distribution(distribution)
    if isinstance(distribution, Bernoulli):
        return distribution.probability
    if isinstance(distribution, Binomial):
        return distribution.trials * distribution.probability
    return (distribution.low + distribution.high) / 2


def variance(distribution: DistributionLike) -> float:
    """Closed-form variance."""
    _check_distribution(distribution)
    if isinstance(distribution, Bernoulli):
        p = distribution.probability
        return p * (1 - p)
    if isinstance(distribution, Binomial):
        p = distribution.probability
        return distribution.trials * p * (1 - p)
    size = distribution.high - distribution.low + 1
    return (size**2 - 1) / 12


def std(distribution: DistributionLike) -> float:
    """Closed-form standard deviation."""
    return math.sqrt(variance(distribution))


def birthday_collision_probability(group_size: int, days: int = 365) -> float:
    """Probability that at least two of ``group_size`` people share a birthday.

    Evaluates ``1 - days! / (days - group_size)! / days**group_size`` in the
    log domain.

    Args:
        group_size: Number of people
        days: Number of equally likely birthdays

    Returns:
        Collision probability in [0, 1]
    """
    group_size = check_count("group_size", group_size)
    days = check_count("days", days)
    if days == 0:
        raise InvalidParameter("days must be positive")
    if group_size <= 1:
        return 0.0
    if group_size > days:
        return 1.0

    log_no_collision = (
        gammaln(days + 1) - gammaln(days - group_size + 1) - group_size * math.log(days)
    )
    return float(-np.expm1(log_no_collision))
