"""
Agreement of the discrete families with scipy.stats.

Mass, cumulative probability and moments of each family are compared with
the corresponding ``scipy.stats`` distribution. The negative binomial family
counts successes before the r-th failure, which is scipy's ``nbinom`` with
the roles of success and failure swapped.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy import stats

from pysatl_families.distributions.distribution import DiscreteDistribution, Moments
from pysatl_families.families.builtins import (
    Binomial,
    Geometric,
    Hypergeometric,
    NegativeBinomial,
    Poisson,
)

from ..continuous.base import BaseDistributionTest

CASES = [
    pytest.param(Poisson(rate=3.5), stats.poisson(3.5), np.arange(-2, 15), id="poisson"),
    pytest.param(Binomial(trials=12, p=0.35), stats.binom(12, 0.35), np.arange(-1, 14), id="binomial"),
    pytest.param(Geometric(p=0.3), stats.geom(0.3), np.arange(0, 20), id="geometric"),
    pytest.param(
        Hypergeometric(t=20, m=7, k=12),
        stats.hypergeom(20, 7, 12),
        np.arange(0, 10),
        id="hypergeometric",
    ),
    pytest.param(
        NegativeBinomial(failures=4, p=0.4),
        stats.nbinom(4, 0.6),
        np.arange(0, 20),
        id="negative_binomial",
    ),
]


class TestScipyAgreement(BaseDistributionTest):
    @pytest.mark.parametrize("distr, reference, ks", CASES)
    def test_probability(self, distr, reference, ks):
        self.assert_arrays_almost_equal(distr.probability(ks), reference.pmf(ks))

    @pytest.mark.parametrize("distr, reference, ks", CASES)
    def test_cumulative_probability(self, distr, reference, ks):
        self.assert_arrays_almost_equal(distr.cumulative_probability(ks), reference.cdf(ks))

    @pytest.mark.parametrize("distr, reference, ks", CASES)
    def test_cumulative_is_running_sum(self, distr, reference, ks):
        lower = distr.support.first()
        ks = np.arange(lower, lower + 8)
        cdf = distr.cumulative_probability(ks)

        self.assert_arrays_almost_equal(cdf, np.cumsum(distr.probability(ks)))
        self.assert_non_decreasing(cdf)

    @pytest.mark.parametrize("distr, reference, ks", CASES)
    def test_moments(self, distr, reference, ks):
        mean, var, skew, kurt = (float(v) for v in reference.stats(moments="mvsk"))

        assert isinstance(distr, Moments)
        assert distr.mean == pytest.approx(mean)
        assert distr.variance == pytest.approx(var)
        assert distr.skewness == pytest.approx(skew)
        assert distr.kurtosis == pytest.approx(kurt)

    @pytest.mark.parametrize("distr, reference, ks", CASES)
    def test_scalar_input_gives_float(self, distr, reference, ks):
        assert isinstance(distr.probability(2), float)
        assert isinstance(distr.cumulative_probability(2), float)

    @pytest.mark.parametrize("distr, reference, ks", CASES)
    def test_samples_in_support(self, distr, reference, ks, rng):
        sample = distr.sample(500, rng=rng)

        assert isinstance(distr, DiscreteDistribution)
        assert sample.dtype == np.int64
        assert np.all(distr.support.contains(sample.array))

    @pytest.mark.parametrize("distr, reference, ks", CASES)
    def test_sample_mean(self, distr, reference, ks, rng):
        sample = distr.sample(20000, rng=rng).array
        tolerance = 5 * np.sqrt(distr.variance / len(sample))

        assert abs(sample.mean() - distr.mean) < tolerance
