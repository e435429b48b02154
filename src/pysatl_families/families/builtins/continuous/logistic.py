"""
Logistic distribution family implementation.
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


LOGISTIC_DOC = """
Logistic distribution.

Its cumulative distribution function is the logistic function:
    F(x) = 1 / (1 + exp(-(x - μ)/s))
"""

LogisticFamily = ParametricFamily(
    name=FamilyName.LOGISTIC,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["locationScale"],
)
LogisticFamily.__doc__ = LOGISTIC_DOC


@parametrization(family=LogisticFamily, name="locationScale")
class Logistic(ParametricFamilyDistribution, ContinuousDistribution, Moments):
    """
    Logistic distribution.

    Parameters
    ----------
    location : float
        Location (mean) of the distribution
    scale : float
        Scale parameter (s)
    """

    location: float
    scale: float

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: Any) -> Any:
        return as_result(stats.logistic.pdf(x, loc=self.location, scale=self.scale))

    def cumulative_probability(self, x: Any) -> Any:
        return as_result(stats.logistic.cdf(x, loc=self.location, scale=self.scale))

    def _ppf(self, p: np.ndarray) -> Any:
        return stats.logistic.ppf(p, loc=self.location, scale=self.scale)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.logistic(self.location, self.scale))

    @property
    def mean(self) -> float:
        return float(self.location)

    @property
    def variance(self) -> float:
        return sqr(self.scale * math.pi) / 3

    @property
    def skewness(self) -> float:
        return 0.0

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis of logistic distribution (always 6/5)."""
        return 6.0 / 5.0


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return
    ParametricFamilyRegister.register(LogisticFamily)
