"""
Beta distribution family implementation.
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
    Moments,
    as_result,
)
from pysatl_families.distributions.support import ContinuousSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import sqr
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    import numpy as np


BETA_DOC = """
Beta distribution.

A continuous distribution on [0, 1] with two positive shape parameters
α and β.

Probability density function:
    f(x) = x^(α-1) (1-x)^(β-1) / B(α, β) for x in [0, 1]
"""

BetaFamily = ParametricFamily(
    name=FamilyName.BETA,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["shapes"],
)
BetaFamily.__doc__ = BETA_DOC


@parametrization(family=BetaFamily, name="shapes")
class Beta(ParametricFamilyDistribution, ContinuousDistribution, Moments):
    """
    Beta distribution.

    Parameters
    ----------
    alpha : float
        First shape parameter (α)
    beta : float
        Second shape parameter (β)
    """

    alpha: float
    beta: float

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    def density(self, x: Any) -> Any:
        return as_result(stats.beta.pdf(x, self.alpha, self.beta))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.beta.cdf(x, self.alpha, self.beta))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.beta.ppf(p, self.alpha, self.beta)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.beta(self.alpha, self.beta))

    @property
    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        return a * b / (sqr(a + b) * (a + b + 1))

    @property
    def skewness(self) -> float:
        a, b = self.alpha, self.beta
        return 2 * (b - a) * math.sqrt(a + b + 1) / ((a + b + 2) * math.sqrt(a * b))

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis of beta distribution."""
        a, b = self.alpha, self.beta
        numerator = sqr(a - b) * (a + b + 1) - a * b * (a + b + 2)
        return 6 * numerator / (a * b * (a + b + 2) * (a + b + 3))


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return
    ParametricFamilyRegister.register(BetaFamily)
