"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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
from pysatl_families.numeric import as_observations, fraction, sample_mean, sqr
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike


EXPONENTIAL_DOC = """
Exponential distribution.

The exponential distribution is a continuous probability distribution that
describes the time between events in a Poisson process. It has a single
parameter: rate (λ) or scale (β = 1/λ).

Probability density function (rate parametrization):
    f(x) = λ * exp(-λ * x) for x ≥ 0

The exponential distribution is memoryless and is widely used in reliability
engineering, queuing theory, and survival analysis.
"""

ExponentialFamily = ParametricFamily(
    name=FamilyName.EXPONENTIAL,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["rate", "scale"],
)
ExponentialFamily.__doc__ = EXPONENTIAL_DOC


@parametrization(family=ExponentialFamily, name="rate")
class Exponential(ParametricFamilyDistribution, ContinuousDistribution, Moments, Estimable):
    """
    Rate parametrization of exponential distribution.

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ) of the distribution
    """

    lambda_: float

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lambda_ > 0

    @property
    def support(self) -> ContinuousSupport:
        """Support of exponential distribution"""
        return ContinuousSupport(left=0.0)

    def density(self, x: Any) -> Any:
        """Probability density; zero for negative ``x``."""
        return as_result(stats.expon.pdf(x, scale=1.0 / self.lambda_))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.expon.cdf(x, scale=1.0 / self.lambda_))

    def _ppf(self, p: np.ndarray) -> Any:
        """
        Quantiles corresponding to probabilities p:
            - For p = 0: returns 0.0
            - For p = 1: returns np.inf
            - For p in (0, 1): returns -ln(1-p)/λ
        """
        return stats.expon.ppf(p, scale=1.0 / self.lambda_)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.exponential(1.0 / self.lambda_))

    @property
    def mean(self) -> float:
        """Mean of exponential distribution."""
        return 1.0 / self.lambda_

    @property
    def variance(self) -> float:
        """Variance of exponential distribution."""
        return 1.0 / sqr(self.lambda_)

    @property
    def skewness(self) -> float:
        """Skewness of exponential distribution (always 2)."""
        return 2.0

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis of exponential distribution (always 6)."""
        return 6.0

    @classmethod
    def mle(cls, observations: ArrayLike) -> Exponential:
        """Rate estimated as the reciprocal of the sample mean."""
        values = as_observations(observations)
        return cls(lambda_=fraction(1.0, sample_mean(values)))


@parametrization(family=ExponentialFamily, name="scale")
class ExponentialScale(Parametrization):
    """
    Scale parametrization of exponential distribution.

    Parameters
    ----------
    beta : float
        Scale parameter (β) of the distribution, β = 1/λ
    """

    beta: float

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        """Check that scale parameter is positive."""
        return self.beta > 0

    def transform_to_base_parametrization(self) -> Exponential:
        """
        Transform to Rate parametrization.

        Returns
        -------
        Exponential
            Rate parametrization instance
        """
        return Exponential(lambda_=1.0 / self.beta)


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return
    ParametricFamilyRegister.register(ExponentialFamily)
