"""
Student's t distribution family implementation.
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
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    import numpy as np


STUDENT_T_DOC = """
Student's t distribution.

A symmetric, heavy-tailed distribution with ``df`` degrees of freedom.

Moments exist only above thresholds on ``df``. Where a moment is undefined
the property is ``None``; where it diverges the property is ``math.inf``:

    mean      df > 1
    variance  df > 2   (inf for 1 < df ≤ 2)
    skewness  df > 3
    kurtosis  df > 4   (inf for 2 < df ≤ 4)
"""

StudentTFamily = ParametricFamily(
    name=FamilyName.STUDENT_T,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["degreesOfFreedom"],
)
StudentTFamily.__doc__ = STUDENT_T_DOC


@parametrization(family=StudentTFamily, name="degreesOfFreedom")
class StudentT(ParametricFamilyDistribution, ContinuousDistribution, OptionalMoments):
    """
    Student's t distribution.

    Parameters
    ----------
    df : float
        Degrees of freedom
    """

    df: float

    @constraint(description="df > 0")
    def check_df_positive(self) -> bool:
        return self.df > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: Any) -> Any:
        return as_result(stats.t.pdf(x, self.df))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.t.cdf(x, self.df))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.t.ppf(p, self.df)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.standard_t(self.df))

    @property
    def mean(self) -> float | None:
        return 0.0 if self.df > 1 else None

    @property
    def variance(self) -> float | None:
        if self.df > 2:
            return self.df / (self.df - 2)
        if self.df > 1:
            return math.inf
        return None

    @property
    def skewness(self) -> float | None:
        return 0.0 if self.df > 3 else None

    @property
    def kurtosis(self) -> float | None:
        if self.df > 4:
            return 6.0 / (self.df - 4)
        if self.df > 2:
            return math.inf
        return None


def configure_student_t_family() -> None:
    """
    Configure and register the StudentT distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return
    ParametricFamilyRegister.register(StudentTFamily)
