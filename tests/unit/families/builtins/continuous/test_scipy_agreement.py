"""
Tests shared by all continuous families

Density, cumulative probability and quantile are compared against
``scipy.stats`` and checked for the properties every continuous
distribution has.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_families.errors import InvalidProbabilityError
from pysatl_families.families.builtins import (
    Beta,
    Cauchy,
    ChiSquared,
    Exponential,
    F,
    Gamma,
    Logistic,
    LogNormal,
    Normal,
    StudentT,
    Uniform,
)

from .base import BaseDistributionTest

CASES = [
    pytest.param(Normal(mu=2.0, sigma=1.5), stats.norm(loc=2.0, scale=1.5), id="normal"),
    pytest.param(
        LogNormal(mu=0.5, sigma=0.75), stats.lognorm(s=0.75, scale=math.exp(0.5)), id="lognormal"
    ),
    pytest.param(
        Uniform(lower_bound=-1.0, upper_bound=3.0), stats.uniform(loc=-1.0, scale=4.0), id="uniform"
    ),
    pytest.param(Exponential(lambda_=0.5), stats.expon(scale=2.0), id="exponential"),
    pytest.param(ChiSquared(df=4), stats.chi2(4), id="chi_squared"),
    pytest.param(F(df1=5.0, df2=12.0), stats.f(5.0, 12.0), id="f"),
    pytest.param(StudentT(df=3.5), stats.t(3.5), id="student_t"),
    pytest.param(Gamma(shape=2.5, scale=1.5), stats.gamma(2.5, scale=1.5), id="gamma"),
    pytest.param(
        Cauchy(location=1.0, scale=0.5), stats.cauchy(loc=1.0, scale=0.5), id="cauchy"
    ),
    pytest.param(Beta(alpha=2.0, beta=5.0), stats.beta(2.0, 5.0), id="beta"),
    pytest.param(
        Logistic(location=-1.0, scale=2.0), stats.logistic(loc=-1.0, scale=2.0), id="logistic"
    ),
]

PROBABILITIES = np.array([0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999])


@pytest.mark.parametrize("distr, frozen", CASES)
class TestContinuousFamilies(BaseDistributionTest):
    def test_density_matches_scipy(self, distr, frozen):
        x = frozen.ppf(PROBABILITIES)
        self.assert_arrays_almost_equal(distr.density(x), frozen.pdf(x))

    def test_cumulative_probability_matches_scipy(self, distr, frozen):
        x = frozen.ppf(PROBABILITIES)
        self.assert_arrays_almost_equal(distr.cumulative_probability(x), frozen.cdf(x))

    def test_quantile_matches_scipy(self, distr, frozen):
        self.assert_arrays_almost_equal(distr.quantile(PROBABILITIES), frozen.ppf(PROBABILITIES))

    def test_scalar_input_gives_float(self, distr, frozen):
        x = float(frozen.median())
        assert isinstance(distr.density(x), float)
        assert isinstance(distr.cumulative_probability(x), float)
        assert isinstance(distr.quantile(0.5), float)

    def test_cumulative_probability_is_non_decreasing(self, distr, frozen):
        lo, hi = frozen.ppf([0.0001, 0.9999])
        x = np.linspace(lo - 1.0, hi + 1.0, 200)
        self.assert_non_decreasing(distr.cumulative_probability(x))

    def test_quantile_inverts_cumulative_probability(self, distr, frozen):
        x = frozen.ppf(PROBABILITIES)
        roundtrip = distr.quantile(distr.cumulative_probability(x))
        np.testing.assert_allclose(roundtrip, x, rtol=1e-6, atol=1e-9)

    def test_quantile_bounds_are_support_bounds(self, distr, frozen):
        support = distr.support
        assert distr.quantile(0.0) == support.left
        assert distr.quantile(1.0) == support.right

    @pytest.mark.parametrize("p", [-0.1, 1.1, -math.inf, math.inf])
    def test_quantile_rejects_probability_outside_unit_interval(self, distr, frozen, p):
        with pytest.raises(InvalidProbabilityError, match=r"p must be in range \[0, 1\]"):
            distr.quantile(p)

    def test_quantile_rejects_array_with_one_bad_probability(self, distr, frozen):
        with pytest.raises(ValueError):
            distr.quantile(np.array([0.2, 0.5, 1.5]))

    def test_samples_lie_in_support(self, distr, frozen, rng):
        sample = distr.sample(200, rng=rng)
        assert sample.shape == (200,)
        assert sample.dtype == np.float64
        assert np.all(distr.support.contains(sample.array))

    def test_single_sample(self, distr, frozen, rng):
        sample = distr.sample(1, rng=rng)
        assert len(sample) == 1
