"""
Fisher-Snedecor (F) distribution family implementation.
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
    OptionalMoments,
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


F_DOC = """
Fisher-Snedecor (F) distribution.

The distribution of the ratio of two independent chi-squared variables, each
divided by its degrees of freedom (``df1`` for the numerator, ``df2`` for the
denominator).

Its moments exist only for large enough ``df2``: the mean needs df2 > 2, the
variance df2 > 4, the skewness df2 > 6 and the kurtosis df2 > 8. Otherwise
the corresponding property is ``None``.
"""

FFamily = ParametricFamily(
    name=FamilyName.F,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["degreesOfFreedom"],
)
FFamily.__doc__ = F_DOC


@parametrization(family=FFamily, name="degreesOfFreedom")
class F(ParametricFamilyDistribution, ContinuousDistribution, OptionalMoments):
    """
    F distribution.

    Parameters
    ----------
    df1 : float
        Numerator degrees of freedom
    df2 : float
        Denominator degrees of freedom
    """

    df1: float
    df2: float

    @constraint(description="df1 > 0")
    def check_df1_positive(self) -> bool:
        return self.df1 > 0

    @constraint(description="df2 > 0")
    def check_df2_positive(self) -> bool:
        return self.df2 > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def density(self, x: Any) -> Any:
        return as_result(stats.f.pdf(x, self.df1, self.df2))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.f.cdf(x, self.df1, self.df2))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.f.ppf(p, self.df1, self.df2)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.f(self.df1, self.df2))

    @property
    def mean(self) -> float | None:
        if self.df2 <= 2:
            return None
        return self.df2 / (self.df2 - 2)

    @property
    def variance(self) -> float | None:
        d1, d2 = self.df1, self.df2
        if d2 <= 4:
            return None
        return 2 * sqr(d2) * (d1 + d2 - 2) / (d1 * sqr(d2 - 2) * (d2 - 4))

    @property
    def skewness(self) -> float | None:
        d1, d2 = self.df1, self.df2
        if d2 <= 6:
            return None
        numerator = (2 * d1 + d2 - 2) * math.sqrt(8 * (d2 - 4))
        return numerator / ((d2 - 6) * math.sqrt(d1 * (d1 + d2 - 2)))

    @property
    def kurtosis(self) -> float | None:
        """Excess kurtosis, defined for df2 > 8."""
        d1, d2 = self.df1, self.df2
        if d2 <= 8:
            return None
        numerator = d1 * (5 * d2 - 22) * (d1 + d2 - 2) + (d2 - 4) * sqr(d2 - 2)
        return 12 * numerator / (d1 * (d2 - 6) * (d2 - 8) * (d1 + d2 - 2))


def configure_f_family() -> None:
    """
    Configure and register the F distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.F):
        return
    ParametricFamilyRegister.register(FFamily)
