"""
Tests for the deterministic distribution functions.

Tests cover:
- PMF/CDF values against scipy.stats and closed forms
- CDF monotonicity, limits and right-continuity
- Quantile as the left-inverse of the CDF
- Log-space stability for large counts
- Birthday collision probability
"""

import math

import numpy as np
import pytest
from scipy import stats

from probsim.analysis.functions import (
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
from probsim.errors import InvalidParameter
from probsim.models import Bernoulli, Binomial, DiscreteUniform

DISTRIBUTIONS = [
    Bernoulli(probability=0.6),
    Bernoulli(probability=0.05),
    Binomial(trials=10, probability=0.5),
    Binomial(trials=37, probability=0.2),
    Binomial(trials=5, probability=1.0),
    DiscreteUniform(low=1, high=6),
    DiscreteUniform(low=-3, high=7),
]


class TestBernoulliScenario:
    """pmf/cdf of Bernoulli(0.6)."""

    def test_pmf(self):
        d = Bernoulli(probability=0.6)
        assert pmf(d, 1) == pytest.approx(0.6)
        assert pmf(d, 0) == pytest.approx(0.4)

    def test_cdf_between_support_points(self):
        assert cdf(Bernoulli(probability=0.6), 0.5) == pytest.approx(0.4)

    def test_quantile(self):
        d = Bernoulli(probability=0.6)
        assert quantile(d, 0.3) == 0
        assert quantile(d, 0.5) == 1
        assert quantile(d, 1.0) == 1


class TestPMF:
    def test_outside_support_is_zero(self):
        assert pmf(Binomial(trials=4, probability=0.5), -1) == 0.0
        assert pmf(Binomial(trials=4, probability=0.5), 5) == 0.0
        assert pmf(DiscreteUniform(low=1, high=6), 7) == 0.0
        assert pmf(Bernoulli(probability=0.5), math.inf) == 0.0

    def test_non_integer_is_zero(self):
        assert pmf(Binomial(trials=4, probability=0.5), 2.5) == 0.0

    def test_binomial_matches_scipy(self):
        d = Binomial(trials=37, probability=0.2)
        for k in range(38):
            assert pmf(d, k) == pytest.approx(stats.binom.pmf(k, 37, 0.2), rel=1e-9, abs=1e-300)

    def test_uniform(self):
        assert pmf(DiscreteUniform(low=1, high=6), 3) == pytest.approx(1 / 6)

    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_sums_to_one(self, d):
        low, high = support(d)
        total = sum(pmf(d, k) for k in range(low, high + 1))
        assert total == pytest.approx(1.0)

    def test_degenerate_binomial(self):
        assert pmf(Binomial(trials=5, probability=0.0), 0) == 1.0
        assert pmf(Binomial(trials=5, probability=1.0), 5) == 1.0
        assert pmf(Binomial(trials=5, probability=1.0), 4) == 0.0

    def test_large_trials_do_not_overflow(self):
        n = 1_000_000
        d = Binomial(trials=n, probability=0.5)
        value = pmf(d, n // 2)
        assert math.isfinite(value)
        assert value == pytest.approx(math.sqrt(2 / (math.pi * n)), rel=1e-3)

    def test_nan_rejected(self):
        with pytest.raises(InvalidParameter):
            pmf(Bernoulli(probability=0.5), math.nan)


class TestCDF:
    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_limits(self, d):
        low, high = support(d)
        assert cdf(d, -math.inf) == 0.0
        assert cdf(d, math.inf) == 1.0
        assert cdf(d, low - 0.5) == 0.0
        assert cdf(d, high) == 1.0

    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_non_decreasing(self, d):
        low, high = support(d)
        grid = np.linspace(low - 2, high + 2, 200)
        values = [cdf(d, x) for x in grid]
        assert all(a <= b for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_right_continuous(self, d):
        low, high = support(d)
        for k in range(low, high + 1):
            assert cdf(d, k + 1e-9) == cdf(d, k)

    def test_binomial_matches_scipy(self):
        d = Binomial(trials=10, probability=0.5)
        for k in range(10):
            assert cdf(d, k) == pytest.approx(stats.binom.cdf(k, 10, 0.5), rel=1e-9)

    def test_uniform(self):
        assert cdf(DiscreteUniform(low=1, high=6), 3.7) == pytest.approx(0.5)


class TestQuantile:
    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_left_inverse(self, d):
        low, high = support(d)
        for x in range(low, high + 1):
            p = cdf(d, x)
            if p == 0.0:
                continue
            assert quantile(d, p) <= x

    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_smallest_value_reaching_level(self, d):
        for p in (0.01, 0.25, 0.5, 0.75, 0.99):
            x = quantile(d, p)
            assert cdf(d, x) >= p
            if x > support(d)[0]:
                assert cdf(d, x - 1) < p

    def test_binomial_median(self):
        assert quantile(Binomial(trials=10, probability=0.5), 0.5) == 5

    def test_uniform_median(self):
        assert quantile(DiscreteUniform(low=1, high=6), 0.5) == 3

    def test_one_is_support_max(self):
        assert quantile(Binomial(trials=8, probability=0.3), 1.0) == 8
        assert quantile(DiscreteUniform(low=2, high=9), 1.0) == 9

    @pytest.mark.parametrize("p", [0.0, -0.2, 1.5, math.nan, "x"])
    def test_invalid_levels(self, p):
        with pytest.raises(InvalidParameter):
            quantile(Binomial(trials=8, probability=0.3), p)


class TestMoments:
    def test_bernoulli(self):
        d = Bernoulli(probability=0.6)
        assert mean(d) == 0.6
        assert variance(d) == pytest.approx(0.24)

    def test_binomial(self):
        d = Binomial(trials=20, probability=0.25)
        assert mean(d) == 5.0
        assert variance(d) == pytest.approx(3.75)
        assert std(d) == pytest.approx(math.sqrt(3.75))

    def test_uniform(self):
        d = DiscreteUniform(low=1, high=6)
        assert mean(d) == 3.5
        assert variance(d) == pytest.approx(35 / 12)

    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_closed_form_matches_pmf(self, d):
        low, high = support(d)
        ks = range(low, high + 1)
        m = sum(k * pmf(d, k) for k in ks)
        v = sum((k - m) ** 2 * pmf(d, k) for k in ks)
        assert mean(d) == pytest.approx(m, abs=1e-9)
        assert variance(d) == pytest.approx(v, abs=1e-9)


class TestPurity:
    @pytest.mark.parametrize("d", DISTRIBUTIONS)
    def test_repeat_calls_identical(self, d):
        low, high = support(d)
        mid = (low + high) // 2
        assert pmf(d, mid) == pmf(d, mid)
        assert cdf(d, mid) == cdf(d, mid)
        assert quantile(d, 0.42) == quantile(d, 0.42)
        assert variance(d) == variance(d)

    def test_unsupported_distribution(self):
        with pytest.raises(InvalidParameter):
            pmf({"family": "bernoulli", "probability": 0.5}, 1)


class TestLogBinomialCoefficient:
    def test_small_values(self):
        assert math.exp(log_binomial_coefficient(10, 3)) == pytest.approx(120)
        assert log_binomial_coefficient(7, 0) == pytest.approx(0.0)

    def test_large_values_finite(self):
        assert math.isfinite(log_binomial_coefficient(10**7, 5 * 10**6))

    def test_k_above_n(self):
        with pytest.raises(InvalidParameter):
            log_binomial_coefficient(3, 4)


class TestBirthdayProbability:
    def test_classic_value(self):
        assert birthday_collision_probability(23) == pytest.approx(0.5073, abs=1e-4)

    def test_matches_direct_product(self):
        no_collision = 1.0
        for i in range(30):
            no_collision *= (365 - i) / 365
        assert birthday_collision_probability(30) == pytest.approx(1 - no_collision, rel=1e-9)

    def test_edges(self):
        assert birthday_collision_probability(0) == 0.0
        assert birthday_collision_probability(1) == 0.0
        assert birthday_collision_probability(366) == 1.0
        assert birthday_collision_probability(2, days=1) == 1.0

    def test_increasing_in_group_size(self):
        values = [birthday_collision_probability(n) for n in range(1, 80)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_invalid_days(self):
        with pytest.raises(InvalidParameter):
            birthday_collision_probability(5, days=0)


class TestLargeBinomial:
    """CDF and quantile stay O(1) in memory for very large trial counts."""

    def test_cdf_at_center(self):
        n = 10**9
        d = Binomial(trials=n, probability=0.5)
        center = cdf(d, n // 2)
        assert math.isfinite(center)
        # P(X <= n/2) = 1/2 + P(X = n/2)/2
        assert center == pytest.approx(0.5 + pmf(d, n // 2) / 2, rel=1e-7)

    def test_quantile_median(self):
        n = 10**9
        d = Binomial(trials=n, probability=0.5)
        assert quantile(d, 0.5) == n // 2

    def test_left_inverse_far_in_tail(self):
        d = Binomial(trials=10**9, probability=0.3)
        x = 3 * 10**8 + 20_000
        assert quantile(d, cdf(d, x)) <= x

    def test_matches_scipy(self):
        d = Binomial(trials=10**7, probability=0.01)
        for k in (99_000, 100_000, 101_000):
            assert cdf(d, k) == pytest.approx(stats.binom.cdf(k, 10**7, 0.01), rel=1e-9)
