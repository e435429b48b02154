"""
Normal distribution family implementation.

Contains the Normal family with mean-std and mean-precision parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any

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
from pysatl_families.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import as_observations, sample_mean, sample_sd, sqr
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike


NORMAL_DOC = """
Normal (Gaussian) distribution.

The normal distribution is a continuous probability distribution characterized
by its bell-shaped curve. It is symmetric about its mean and is defined by
two parameters: mean (μ) and standard deviation (σ).

Probability density function:
    f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

The normal distribution is widely used in statistics, natural sciences,
and social sciences as a simple model for complex random phenomena.
"""

NormalFamily = ParametricFamily(
    name=FamilyName.NORMAL,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["meanStd", "meanPrec"],
)
NormalFamily.__doc__ = NORMAL_DOC


@parametrization(family=NormalFamily, name="meanStd")
class Normal(ParametricFamilyDistribution, ContinuousDistribution, Moments, Estimable):
    """
    Standard parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0

    @classmethod
    def standard(cls) -> Normal:
        """Standard normal distribution N(0, 1)."""
        return cls(mu=0.0, sigma=1.0)

    @property
    def support(self) -> ContinuousSupport:
        """Support of normal distribution"""
        return ContinuousSupport()

    def density(self, x: Any) -> Any:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        x : float or NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        float or NumericArray
            Probability density values at points x
        """
        return as_result(stats.norm.pdf(x, loc=self.mu, scale=self.sigma))

    def cumulative_probability(self, x: Any) -> Any:
        """
        Cumulative distribution function for normal distribution.

        Parameters
        ----------
        x : float or NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        float or NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        return as_result(stats.norm.cdf(x, loc=self.mu, scale=self.sigma))

    def _ppf(self, p: np.ndarray) -> Any:
        """
        Percent point function (inverse CDF) for normal distribution.

        If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly.
        """
        return stats.norm.ppf(p, loc=self.mu, scale=self.sigma)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.normal(self.mu, self.sigma))

    @property
    def mean(self) -> float:
        """Mean of normal distribution."""
        return float(self.mu)

    @property
    def variance(self) -> float:
        """Variance of normal distribution."""
        return sqr(self.sigma)

    @property
    def skewness(self) -> float:
        """Skewness of normal distribution (always 0)."""
        return 0.0

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis of normal distribution (always 0)."""
        return 0.0

    @classmethod
    def mle(cls, observations: ArrayLike) -> Normal:
        """
        Maximum-likelihood estimate from ``observations``.

        The mean is the sample mean and the standard deviation is the
        (biased) sample standard deviation about it.
        """
        values = as_observations(observations)
        mu = sample_mean(values)
        return cls(mu=mu, sigma=sample_sd(values, mean=mu))


@parametrization(family=NormalFamily, name="meanPrec")
class NormalMeanPrec(Parametrization):
    """
    Mean-precision parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    tau : float
        Precision parameter (inverse variance)
    """

    mu: float
    tau: float

    @constraint(description="tau > 0")
    def check_tau_positive(self) -> bool:
        """Check that precision parameter is positive."""
        return self.tau > 0

    def transform_to_base_parametrization(self) -> Normal:
        """
        Transform to Standard parametrization.

        Returns
        -------
        Normal
            Standard parametrization instance
        """
        return Normal(mu=self.mu, sigma=math.sqrt(1 / self.tau))


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return
    ParametricFamilyRegister.register(NormalFamily)
