"""
Cauchy distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

from scipy import stats

from pysatl_families.distributions.distribution import ContinuousDistribution, as_result
from pysatl_families.distributions.support import ContinuousSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    import numpy as np


CAUCHY_DOC = """
Cauchy distribution.

A symmetric distribution with location x₀ and scale γ whose tails are so
heavy that none of its moments exist. It therefore provides neither
moments nor an estimator.

Probability density function:
    f(x) = 1 / (πγ (1 + ((x - x₀)/γ)²))
"""

CauchyFamily = ParametricFamily(
    name=FamilyName.CAUCHY,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["locationScale"],
)
CauchyFamily.__doc__ = CAUCHY_DOC


@parametrization(family=CauchyFamily, name="locationScale")
class Cauchy(ParametricFamilyDistribution, ContinuousDistribution):
    """
    Cauchy distribution.

    Parameters
    ----------
    location : float
        Location (median) of the distribution
    scale : float
        Half-width at half-maximum
    """

    location: float
    scale: float

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @classmethod
    def standard(cls) -> Cauchy:
        """Standard Cauchy distribution (location 0, scale 1)."""
        return cls(location=0.0, scale=1.0)

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: Any) -> Any:
        return as_result(stats.cauchy.pdf(x, loc=self.location, scale=self.scale))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.cauchy.cdf(x, loc=self.location, scale=self.scale))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.cauchy.ppf(p, loc=self.location, scale=self.scale)

    def generate(self, rng: np.random.Generator) -> float:
        return float(self.location + self.scale * rng.standard_cauchy())


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return
    ParametricFamilyRegister.register(CauchyFamily)
