"""
Negative binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np
from scipy import stats

from pysatl_families.distributions.distribution import (
    DiscreteDistribution,
    Moments,
    as_result,
)
from pysatl_families.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import fraction, sqr
from pysatl_families.types import FamilyName, UnivariateDiscrete


NEGATIVE_BINOMIAL_DOC = """
Negative binomial distribution.

The number of successes in a sequence of independent trials, each
succeeding with probability p, observed before the r-th failure.

Probability mass function:
    P(X = k) = C(k + r - 1, k) p^k (1-p)^r for k = 0, 1, 2, ...

With r = 0 the distribution is a point mass at zero.
"""

NegativeBinomialFamily = ParametricFamily(
    name=FamilyName.NEGATIVE_BINOMIAL,
    distr_type=UnivariateDiscrete,
    distr_parametrizations=["failuresProbability"],
)
NegativeBinomialFamily.__doc__ = NEGATIVE_BINOMIAL_DOC


@parametrization(family=NegativeBinomialFamily, name="failuresProbability")
class NegativeBinomial(ParametricFamilyDistribution, DiscreteDistribution, Moments):
    """
    Negative binomial distribution.

    Parameters
    ----------
    failures : int
        Number of failures (r) that stops the experiment
    p : float
        Success probability of a single trial, in (0, 1)
    """

    failures: int
    p: float

    @constraint(description="failures is an integer")
    def check_failures_integer(self) -> bool:
        return float(self.failures).is_integer()

    @constraint(description="failures >= 0")
    def check_failures_non_negative(self) -> bool:
        return self.failures >= 0

    @constraint(description="0 < p < 1")
    def check_p_range(self) -> bool:
        return 0 < self.p < 1

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        if self.failures == 0:
            return IntegerLatticeDiscreteSupport(min_k=0, max_k=0)
        return IntegerLatticeDiscreteSupport(min_k=0)

    def probability(self, n: Any) -> Any:
        if self.failures == 0:
            return as_result(np.where(np.asarray(n) == 0, 1.0, 0.0))
        # scipy's nbinom counts failures before the n-th success
        return as_result(stats.nbinom.pmf(n, self.failures, 1 - self.p))

    def cumulative_probability(self, n: Any) -> Any:
        if self.failures == 0:
            return as_result(np.where(np.asarray(n) >= 0, 1.0, 0.0))
        return as_result(stats.nbinom.cdf(n, self.failures, 1 - self.p))

    def generate(self, rng: np.random.Generator) -> int:
        if self.failures == 0:
            return 0
        return int(rng.negative_binomial(int(self.failures), 1 - self.p))

    @property
    def mean(self) -> float:
        return self.failures * self.p / (1 - self.p)

    @property
    def variance(self) -> float:
        return self.failures * self.p / sqr(1 - self.p)

    @property
    def skewness(self) -> float:
        return fraction(1 + self.p, math.sqrt(self.failures * self.p))

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis: 6/r + (1-p)²/(r p)."""
        r, p = self.failures, self.p
        return fraction(6.0, r) + fraction(sqr(1 - p), r * p)


def configure_negative_binomial_family() -> None:
    """
    Configure and register the NegativeBinomial distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return
    ParametricFamilyRegister.register(NegativeBinomialFamily)
