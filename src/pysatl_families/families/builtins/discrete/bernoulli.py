"""
Bernoulli distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np

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
from pysatl_families.numeric import fraction
from pysatl_families.types import FamilyName, UnivariateDiscrete


BERNOULLI_DOC = """
Bernoulli distribution.

A single trial that succeeds (1) with probability p and fails (0) with
probability 1 - p.
"""

BernoulliFamily = ParametricFamily(
    name=FamilyName.BERNOULLI,
    distr_type=UnivariateDiscrete,
    distr_parametrizations=["probability"],
)
BernoulliFamily.__doc__ = BERNOULLI_DOC


@parametrization(family=BernoulliFamily, name="probability")
class Bernoulli(ParametricFamilyDistribution, DiscreteDistribution, Moments):
    """
    Bernoulli distribution.

    Mass and cumulative probability are evaluated exactly, so
    ``Bernoulli(p=0.3).probability(0) == 1 - 0.3``.

    Parameters
    ----------
    p : float
        Probability of success
    """

    p: float

    @constraint(description="0 <= p <= 1")
    def check_p_in_unit_interval(self) -> bool:
        return 0 <= self.p <= 1

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=1)

    def probability(self, n: Any) -> Any:
        k = np.asarray(n)
        return as_result(np.where(k == 1, self.p, np.where(k == 0, 1 - self.p, 0.0)))

    def cumulative_probability(self, n: Any) -> Any:
        k = np.asarray(n)
        return as_result(np.where(k >= 1, 1.0, np.where(k >= 0, 1 - self.p, 0.0)))

    def generate(self, rng: np.random.Generator) -> int:
        return int(rng.random() < self.p)

    @property
    def mean(self) -> float:
        return float(self.p)

    @property
    def variance(self) -> float:
        return self.p * (1 - self.p)

    @property
    def skewness(self) -> float:
        return fraction(1 - 2 * self.p, math.sqrt(self.variance))

    @property
    def kurtosis(self) -> float:
        return fraction(1 - 6 * self.variance, self.variance)


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return
    ParametricFamilyRegister.register(BernoulliFamily)
