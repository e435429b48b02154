"""
Chi-squared distribution family implementation.
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
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    import numpy as np


CHI_SQUARED_DOC = """
Chi-squared distribution.

The distribution of a sum of squares of ``df`` independent standard normal
random variables.

Probability density function:
    f(x) = x^(k/2-1) e^(-x/2) / (2^(k/2) Γ(k/2)) for x ≥ 0
"""

ChiSquaredFamily = ParametricFamily(
    name=FamilyName.CHI_SQUARED,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["degreesOfFreedom"],
)
ChiSquaredFamily.__doc__ = CHI_SQUARED_DOC


@parametrization(family=ChiSquaredFamily, name="degreesOfFreedom")
class ChiSquared(ParametricFamilyDistribution, ContinuousDistribution, Moments):
    """
    Chi-squared distribution.

    Parameters
    ----------
    df : int
        Degrees of freedom, a positive integer
    """

    df: int

    @constraint(description="df is an integer")
    def check_df_integer(self) -> bool:
        return float(self.df).is_integer()

    @constraint(description="df > 0")
    def check_df_positive(self) -> bool:
        return self.df > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def density(self, x: Any) -> Any:
        return as_result(stats.chi2.pdf(x, self.df))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.chi2.cdf(x, self.df))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.chi2.ppf(p, self.df)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.chisquare(self.df))

    @property
    def mean(self) -> float:
        return float(self.df)

    @property
    def variance(self) -> float:
        return 2.0 * self.df

    @property
    def skewness(self) -> float:
        return math.sqrt(8.0 / self.df)

    @property
    def kurtosis(self) -> float:
        return 12.0 / self.df


def configure_chi_squared_family() -> None:
    """
    Configure and register the ChiSquared distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return
    ParametricFamilyRegister.register(ChiSquaredFamily)
