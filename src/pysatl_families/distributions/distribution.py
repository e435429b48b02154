"""
Distribution Capability Interfaces
==================================

Distributions do not share one universal interface. Each family declares the
capabilities its mathematics supports by inheriting from the matching
abstract classes:

- :class:`BaseDistribution` - drawing samples.
- :class:`DiscreteDistribution` - probability mass and cumulative probability.
- :class:`ContinuousDistribution` - density, cumulative probability and
  quantile.
- :class:`Moments` - mean, variance, skewness and kurtosis, always defined.
- :class:`OptionalMoments` - the same four moments, ``None`` where the moment
  does not exist for the current parameters.
- :class:`Estimable` - maximum-likelihood estimation from observations.

Notes
-----
- Kurtosis is the *excess* kurtosis (0 for the normal distribution).
- Scalar arguments produce Python floats, array arguments produce arrays.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

import numpy as np

from pysatl_families.errors import InvalidProbabilityError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_families.distributions.sampling import ArraySample
    from pysatl_families.distributions.support import Support
    from pysatl_families.numeric import RandomSource


def as_result(value: Any) -> Any:
    """Return a Python float for 0-d results and an array otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value, dtype=np.float64)


class BaseDistribution(ABC):
    """A distribution that can be sampled."""

    __slots__ = ()

    @property
    @abstractmethod
    def support(self) -> Support:
        """Set of values the distribution can produce."""

    @abstractmethod
    def generate(self, rng: np.random.Generator) -> Any:
        """Draw a single value using ``rng``."""

    @abstractmethod
    def sample(self, n: int, rng: RandomSource = None) -> ArraySample:
        """Draw ``n`` independent values."""

    @property
    def sample_dtype(self) -> np.dtype[Any] | None:
        """
        Dtype of drawn samples.

        ``None`` lets the sampler pick it from the first draw, which suits
        distributions whose draws all have one type.
        """
        return None


class DiscreteDistribution(BaseDistribution):
    """A distribution described by a probability mass function."""

    __slots__ = ()

    @abstractmethod
    def probability(self, n: Any) -> Any:
        """Probability mass at ``n``."""

    @abstractmethod
    def cumulative_probability(self, n: Any) -> Any:
        """Probability that a draw is less than or equal to ``n``."""

    def log_likelihood(self, observations: ArrayLike) -> float:
        """
        Log-likelihood of ``observations``.

        Returns ``-inf`` if any observation has zero probability.
        """
        mass = np.asarray(self.probability(np.asarray(observations)), dtype=np.float64)
        with np.errstate(divide="ignore"):
            return float(np.sum(np.log(mass)))


class ContinuousDistribution(BaseDistribution):
    """A distribution described by a probability density function."""

    __slots__ = ()

    @abstractmethod
    def density(self, x: Any) -> Any:
        """Probability density at ``x``."""

    @abstractmethod
    def cumulative_probability(self, x: Any) -> Any:
        """Probability that a draw is less than or equal to ``x``."""

    @abstractmethod
    def _ppf(self, p: np.ndarray) -> Any:
        """Inverse of the cumulative probability for already validated ``p``."""

    def quantile(self, p: Any) -> Any:
        """
        Quantile (inverse cumulative probability) at ``p``.

        ``quantile(0)`` and ``quantile(1)`` are the infimum and supremum of the
        support, possibly infinite.

        Raises
        ------
        InvalidProbabilityError
            If any ``p`` lies outside ``[0, 1]``.
        """
        arr = np.asarray(p, dtype=np.float64)
        if not np.all((arr >= 0.0) & (arr <= 1.0)):
            raise InvalidProbabilityError(
                f"{type(self).__name__}.quantile: p must be in range [0, 1]"
            )
        return as_result(self._ppf(arr))

    def log_likelihood(self, observations: ArrayLike) -> float:
        """
        Log-likelihood of ``observations``.

        Returns ``-inf`` if any observation lies outside the support.
        """
        dens = np.asarray(self.density(np.asarray(observations, dtype=np.float64)))
        with np.errstate(divide="ignore"):
            return float(np.sum(np.log(dens)))


class Moments(ABC):
    """Mean, variance, skewness and excess kurtosis, defined for all parameters."""

    __slots__ = ()

    @property
    @abstractmethod
    def mean(self) -> float: ...

    @property
    @abstractmethod
    def variance(self) -> float: ...

    @property
    @abstractmethod
    def skewness(self) -> float: ...

    @property
    @abstractmethod
    def kurtosis(self) -> float: ...


class OptionalMoments(ABC):
    """
    Moments that exist only on part of the parameter space.

    An undefined moment is ``None``. A moment that exists but diverges is
    ``math.inf``.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def mean(self) -> float | None: ...

    @property
    @abstractmethod
    def variance(self) -> float | None: ...

    @property
    @abstractmethod
    def skewness(self) -> float | None: ...

    @property
    @abstractmethod
    def kurtosis(self) -> float | None: ...


class Estimable(ABC):
    """A family with a maximum-likelihood estimator."""

    __slots__ = ()

    @classmethod
    @abstractmethod
    def mle(cls, observations: ArrayLike) -> Self:
        """
        Estimate parameters from ``observations``.

        Raises
        ------
        EmptyInputError
            If ``observations`` is empty.
        InvalidParameterError
            If the estimate violates the family's constraints (e.g. a zero
            standard deviation from constant data).
        """


__all__ = [
    "as_result",
    "BaseDistribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
    "Moments",
    "OptionalMoments",
    "Estimable",
]
