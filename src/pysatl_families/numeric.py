"""
Numeric Primitives
==================

Small numeric helpers shared by the distribution families and the
process-wide random-bit source.

Notes
-----
The default generator returned by :func:`default_rng` is a single
:class:`numpy.random.Generator` shared by the whole process. It is **not**
safe for uncoordinated concurrent use: threads that sample concurrently should
pass their own generators explicitly.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, TypeAlias

import numpy as np

from pysatl_families.errors import EmptyInputError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    RandomSource: TypeAlias = np.random.Generator | np.random.SeedSequence | int | None

_DEFAULT_RNG: np.random.Generator | None = None


def sqr(x: float) -> float:
    """Square of ``x``."""
    return x * x


def fraction(numerator: float, denominator: float) -> float:
    """
    Divide ``numerator`` by ``denominator``.

    Returns
    -------
    float
        The quotient, or ``nan`` when ``denominator`` is zero. Moments of
        degenerate (zero variance) distributions are reported this way.
    """
    if denominator == 0:
        return math.nan
    return numerator / denominator


def default_rng() -> np.random.Generator:
    """Return the process-wide generator, creating it on first use."""
    global _DEFAULT_RNG
    if _DEFAULT_RNG is None:
        _DEFAULT_RNG = np.random.default_rng()
    return _DEFAULT_RNG


def seed_default_rng(seed: int | np.random.SeedSequence | None = None) -> np.random.Generator:
    """
    Replace the process-wide generator with a freshly seeded one.

    Parameters
    ----------
    seed : int, SeedSequence or None
        Seed passed to :func:`numpy.random.default_rng`.

    Returns
    -------
    numpy.random.Generator
        The new default generator.
    """
    global _DEFAULT_RNG
    _DEFAULT_RNG = np.random.default_rng(seed)
    return _DEFAULT_RNG


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Resolve a random source to a generator.

    ``None`` maps to the process-wide generator, a generator is returned as
    is, and a seed (int or ``SeedSequence``) builds a new generator.
    """
    if rng is None:
        return default_rng()
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def as_observations(observations: ArrayLike, dtype: type = np.float64) -> np.ndarray:
    """
    Convert observations to a flat array.

    Raises
    ------
    EmptyInputError
        If there are no observations.
    """
    arr = np.asarray(observations, dtype=dtype).ravel()
    if arr.size == 0:
        raise EmptyInputError("At least one observation is required")
    return arr


def sample_mean(values: np.ndarray) -> float:
    """Arithmetic mean of ``values``."""
    return float(np.mean(values))


def sample_sd(values: np.ndarray, mean: float | None = None) -> float:
    """
    Standard deviation of ``values`` about ``mean``.

    The sum of squared deviations is divided by the number of values, which
    is the maximum-likelihood estimate rather than the unbiased one.
    """
    if mean is None:
        mean = sample_mean(values)
    return math.sqrt(float(np.mean((values - mean) ** 2)))


__all__ = [
    "sqr",
    "fraction",
    "default_rng",
    "seed_default_rng",
    "resolve_rng",
    "as_observations",
    "sample_mean",
    "sample_sd",
]
