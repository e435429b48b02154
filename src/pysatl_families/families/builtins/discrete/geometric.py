"""
Geometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any

from scipy import stats

from pysatl_families.distributions.distribution import (
    DiscreteDistribution,
    Moments,
    as_result,
)
from pysatl_families.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import fraction, sqr
from pysatl_families.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    import numpy as np


GEOMETRIC_DOC = """
Geometric distribution.

The number of independent trials up to and including the first success,
each trial succeeding with probability p. The support is 1, 2, 3, ...

Probability mass function:
    P(X = k) = (1-p)^(k-1) p
"""

GeometricFamily = ParametricFamily(
    name=FamilyName.GEOMETRIC,
    distr_type=UnivariateDiscrete,
    distr_parametrizations=["probability"],
)
GeometricFamily.__doc__ = GEOMETRIC_DOC


@parametrization(family=GeometricFamily, name="probability")
class Geometric(ParametricFamilyDistribution, DiscreteDistribution, Moments):
    """
    Geometric distribution over the number of trials.

    Parameters
    ----------
    p : float
        Success probability of a single trial, in (0, 1]
    """

    p: float

    @constraint(description="0 < p <= 1")
    def check_p_range(self) -> bool:
        return 0 < self.p <= 1

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=1)

    def probability(self, n: Any) -> Any:
        return as_result(stats.geom.pmf(n, self.p))

    def cumulative_probability(self, n: Any) -> Any:
        return as_result(stats.geom.cdf(n, self.p))

    def generate(self, rng: np.random.Generator) -> int:
        return int(rng.geometric(self.p))

    @property
    def mean(self) -> float:
        return 1.0 / self.p

    @property
    def variance(self) -> float:
        return (1 - self.p) / sqr(self.p)

    @property
    def skewness(self) -> float:
        return fraction(2 - self.p, math.sqrt(1 - self.p))

    @property
    def kurtosis(self) -> float:
        return 6 + fraction(sqr(self.p), 1 - self.p)


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return
    ParametricFamilyRegister.register(GeometricFamily)
