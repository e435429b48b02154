"""
Uniform distribution family implementation.

Contains the Uniform family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
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
from pysatl_families.numeric import as_observations, sqr
from pysatl_families.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


UNIFORM_DOC = """
Uniform (continuous) distribution.

The uniform distribution is a continuous probability distribution where
all intervals of the same length are equally probable. It is defined by
two parameters: lower bound and upper bound.

Probability density function:
    f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise

The uniform distribution is often used when there is no prior knowledge
about the possible values of a variable, representing maximum uncertainty.
"""

UniformFamily = ParametricFamily(
    name=FamilyName.CONTINUOUS_UNIFORM,
    distr_type=UnivariateContinuous,
    distr_parametrizations=["standard", "meanWidth", "minRange"],
)
UniformFamily.__doc__ = UNIFORM_DOC


@parametrization(family=UniformFamily, name="standard")
class Uniform(ParametricFamilyDistribution, ContinuousDistribution, Moments, Estimable):
    """
    Standard parametrization of uniform distribution.

    The bounds may be given in either order; the smaller one becomes
    ``lower_bound``. Equal bounds describe a degenerate distribution (a point
    mass) and emit a ``UserWarning``.

    Parameters
    ----------
    lower_bound : float
        Lower bound of the distribution
    upper_bound : float
        Upper bound of the distribution
    """

    lower_bound: float
    upper_bound: float

    def __post_init__(self) -> None:
        if self.lower_bound > self.upper_bound:
            lower, upper = self.upper_bound, self.lower_bound
            object.__setattr__(self, "lower_bound", lower)
            object.__setattr__(self, "upper_bound", upper)
        if self.lower_bound == self.upper_bound:
            warnings.warn(
                f"Uniform distribution with equal bounds ({self.lower_bound}) is degenerate",
                UserWarning,
                stacklevel=3,
            )
        self.validate()

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    @property
    def support(self) -> ContinuousSupport:
        """Support of uniform distribution"""
        return ContinuousSupport(
            left=self.lower_bound,
            right=self.upper_bound,
            left_closed=True,
            right_closed=True,
        )

    def density(self, x: Any) -> Any:
        """
        Probability density function for uniform distribution.
            - For x < lower_bound: returns 0
            - For x > upper_bound: returns 0
            - Otherwise: returns (1 / (upper_bound - lower_bound))

        With equal bounds the density is ``inf`` at the point and 0 elsewhere.
        """
        if self.width == 0:
            return as_result(np.where(np.asarray(x) == self.lower_bound, np.inf, 0.0))
        return as_result(stats.uniform.pdf(x, loc=self.lower_bound, scale=self.width))

    def cumulative_probability(self, x: Any) -> Any:
        if self.width == 0:
            return as_result(np.where(np.asarray(x) >= self.lower_bound, 1.0, 0.0))
        return as_result(stats.uniform.cdf(x, loc=self.lower_bound, scale=self.width))

    def _ppf(self, p: np.ndarray) -> Any:
        if self.width == 0:
            return np.full(np.shape(p), self.lower_bound)
        return stats.uniform.ppf(p, loc=self.lower_bound, scale=self.width)

    def generate(self, rng: np.random.Generator) -> float:
        return float(rng.uniform(self.lower_bound, self.upper_bound))

    @property
    def mean(self) -> float:
        """Mean of uniform distribution."""
        return 0.5 * (self.lower_bound + self.upper_bound)

    @property
    def variance(self) -> float:
        """Variance of uniform distribution."""
        return sqr(self.width) / 12

    @property
    def skewness(self) -> float:
        """Skewness of uniform distribution (always 0)."""
        return 0.0

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis of uniform distribution (always -6/5)."""
        return -6.0 / 5.0

    @classmethod
    def mle(cls, observations: ArrayLike) -> Uniform:
        """Bounds estimated as the sample minimum and maximum."""
        values = as_observations(observations)
        return cls(lower_bound=float(np.min(values)), upper_bound=float(np.max(values)))


@parametrization(family=UniformFamily, name="meanWidth")
class UniformMeanWidth(Parametrization):
    """
    Mean-width parametrization of uniform distribution.

    Parameters
    ----------
    mean : float
        Mean (center) of the distribution
    width : float
        Width of the distribution (upper_bound - lower_bound)
    """

    mean: float
    width: float

    @constraint(description="width > 0")
    def check_width_positive(self) -> bool:
        """Check that width is positive."""
        return self.width > 0

    def transform_to_base_parametrization(self) -> Uniform:
        """
        Transform to Standard parametrization.

        Returns
        -------
        Uniform
            Standard parametrization instance
        """
        half_width = self.width / 2
        return Uniform(lower_bound=self.mean - half_width, upper_bound=self.mean + half_width)


@parametrization(family=UniformFamily, name="minRange")
class UniformMinRange(Parametrization):
    """
    Minimum-range parametrization of uniform distribution.

    Parameters
    ----------
    minimum : float
        Minimum value (lower bound)
    range_val : float
        Range of the distribution (upper_bound - lower_bound)
    """

    minimum: float
    range_val: float

    @constraint(description="range_val > 0")
    def check_range_positive(self) -> bool:
        """Check that range is positive."""
        return self.range_val > 0

    def transform_to_base_parametrization(self) -> Uniform:
        """
        Transform to Standard parametrization.

        Returns
        -------
        Uniform
            Standard parametrization instance
        """
        return Uniform(lower_bound=self.minimum, upper_bound=self.minimum + self.range_val)


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return
    ParametricFamilyRegister.register(UniformFamily)
