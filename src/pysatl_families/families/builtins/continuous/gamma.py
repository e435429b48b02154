"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate parameterizations.
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
from pysatl_families.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import as_observations, fraction, sample_mean, sqr
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


GAMMA_DOC = """
Gamma distribution.

A continuous distribution on the positive half-line with shape k and scale θ
(or rate β = 1/θ).

Probability density function (shape-scale parametrization):
    f(x) = x^(k-1) e^(-x/θ) / (Γ(k) θ^k) for x > 0
"""

GammaFamily = ParametricFamily(
    name=FamilyName.GAMMA,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["shapeScale", "shapeRate"],
)
GammaFamily.__doc__ = GAMMA_DOC


@parametrization(family=GammaFamily, name="shapeScale")
class Gamma(ParametricFamilyDistribution, ContinuousDistribution, Moments, Estimable):
    """
    Shape-scale parametrization of gamma distribution.

    Parameters
    ----------
    shape : float
        Shape parameter (k)
    scale : float
        Scale parameter (θ)
    """

    shape: float
    scale: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def density(self, x: Any) -> Any:
        return as_result(stats.gamma.pdf(x, self.shape, scale=self.scale))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.gamma.cdf(x, self.shape, scale=self.scale))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.gamma.ppf(p, self.shape, scale=self.scale)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.gamma(self.shape, self.scale))

    @property
    def mean(self) -> float:
        return self.shape * self.scale

    @property
    def variance(self) -> float:
        return self.shape * sqr(self.scale)

    @property
    def skewness(self) -> float:
        return 2.0 / math.sqrt(self.shape)

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis of gamma distribution."""
        return 6.0 / self.shape

    @classmethod
    def mle(cls, observations: ArrayLike) -> Gamma:
        """
        Approximate maximum-likelihood estimate from ``observations``.

        With ``s = ln(mean) - mean(ln x)`` the shape is taken as

            k ≈ (3 - s + sqrt((s - 3)² + 24)) / (12 s)

        which is within about 1.5% of the exact estimate, and the scale as
        ``mean / k``. The shape is not refined by Newton iterations.

        Raises
        ------
        ValueError
            If any observation is not positive.
        """
        values = as_observations(observations)
        if np.any(values <= 0):
            raise ValueError("Gamma.mle: observations must be positive")
        mean = sample_mean(values)
        s = math.log(mean) - sample_mean(np.log(values))
        shape = fraction(3 - s + math.sqrt(sqr(s - 3) + 24), 12 * s)
        return cls(shape=shape, scale=fraction(mean, shape))


@parametrization(family=GammaFamily, name="shapeRate")
class GammaShapeRate(Parametrization):
    """
    Shape-rate parametrization of gamma distribution.

    Parameters
    ----------
    shape : float
        Shape parameter (k)
    rate : float
        Rate parameter (β = 1/θ)
    """

    shape: float
    rate: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return self.rate > 0

    def transform_to_base_parametrization(self) -> Gamma:
        return Gamma(shape=self.shape, scale=1.0 / self.rate)


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return
    ParametricFamilyRegister.register(GammaFamily)
