"""
Log-normal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy import stats

from pysatl_families.distributions.distribution import (
    ContinuousDistribution,
    Estimable,
    Moments,
    as_result,
)
from pysatl_families.distributions.support import ContinuousSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import as_observations, sample_mean, sample_sd, sqr
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


LOG_NORMAL_DOC = """
Log-normal distribution.

A random variable X is log-normally distributed when ln(X) is normally
distributed with mean μ and standard deviation σ.

Probability density function:
    f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
"""

LogNormalFamily = ParametricFamily(
    name=FamilyName.LOG_NORMAL,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["logMeanStd"],
)
LogNormalFamily.__doc__ = LOG_NORMAL_DOC


@parametrization(family=LogNormalFamily, name="logMeanStd")
class LogNormal(ParametricFamilyDistribution, ContinuousDistribution, Moments, Estimable):
    """
    Log-normal distribution parametrized by the moments of ``ln(X)``.

    Parameters
    ----------
    mu : float
        Mean of the underlying normal distribution
    sigma : float
        Standard deviation of the underlying normal distribution
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    def density(self, x: Any) -> Any:
        return as_result(stats.lognorm.pdf(x, s=self.sigma, scale=math.exp(self.mu)))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.lognorm.cdf(x, s=self.sigma, scale=math.exp(self.mu)))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.lognorm.ppf(p, s=self.sigma, scale=math.exp(self.mu))

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.lognormal(self.mu, self.sigma))

    @property
    def mean(self) -> float:
        return math.exp(self.mu + sqr(self.sigma) / 2)

    @property
    def variance(self) -> float:
        s2 = sqr(self.sigma)
        return math.expm1(s2) * math.exp(2 * self.mu + s2)

    @property
    def skewness(self) -> float:
        s2 = sqr(self.sigma)
        return (math.exp(s2) + 2) * math.sqrt(math.expm1(s2))

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis: e^{4σ²} + 2e^{3σ²} + 3e^{2σ²} - 6."""
        s2 = sqr(self.sigma)
        return math.exp(4 * s2) + 2 * math.exp(3 * s2) + 3 * math.exp(2 * s2) - 6

    @classmethod
    def mle(cls, observations: ArrayLike) -> LogNormal:
        """
        Maximum-likelihood estimate from strictly positive ``observations``.

        Raises
        ------
        ValueError
            If any observation is not positive.
        """
        values = as_observations(observations)
        if np.any(values <= 0):
            raise ValueError("LogNormal.mle: observations must be positive")
        logs = np.log(values)
        mu = sample_mean(logs)
        return cls(mu=mu, sigma=sample_sd(logs, mean=mu))


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return
    ParametricFamilyRegister.register(LogNormalFamily)
