"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :func:`sample_batch` - lifts a single-draw generator into an array of
  ``n`` independent draws.
- :func:`make_sampler` - binds a single-draw generator into a reusable
  sampler.
- :class:`SamplingStrategy` - draws samples from a distribution.
- :class:`BatchSamplingStrategy` - the default strategy; repeatedly calls the
  distribution's ``generate``.

Notes
-----
- Strategies are stateless; the only mutable state involved in sampling is
  the random generator, which is resolved once per call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numbers
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

import numpy as np

from pysatl_families.numeric import resolve_rng

from .sampling import ArraySample

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pysatl_families.numeric import RandomSource

    from .distribution import BaseDistribution

    Generate: TypeAlias = Callable[[np.random.Generator], Any]


def _dtype_for(value: Any) -> np.dtype[Any]:
    """Array dtype able to hold draws like ``value``."""
    if isinstance(value, bool | np.bool_):
        return np.dtype(np.bool_)
    if isinstance(value, numbers.Integral):
        return np.dtype(np.int64)
    if isinstance(value, numbers.Real):
        return np.dtype(np.float64)
    return np.dtype(object)


def dtype_for_values(values: Iterable[Any]) -> np.dtype[Any]:
    """
    Array dtype able to hold every value in ``values``.

    Numeric values are promoted to a common dtype (``bool`` < ``int64`` <
    ``float64``); any non-numeric value makes the dtype ``object``.
    """
    dtypes = {_dtype_for(value) for value in values}
    if np.dtype(object) in dtypes:
        return np.dtype(object)
    return np.result_type(*dtypes)


def sample_batch(
    generate: Generate,
    n: int,
    rng: RandomSource = None,
    dtype: np.dtype[Any] | None = None,
) -> ArraySample:
    """
    Draw ``n`` independent values with a single-draw generator.

    Parameters
    ----------
    generate : Callable[[numpy.random.Generator], Any]
        Function producing one draw from the given generator.
    n : int
        Number of draws, at least 1.
    rng : Generator, int, SeedSequence or None
        Random source; ``None`` uses the process-wide generator.
    dtype : numpy.dtype, optional
        Dtype of the result. By default it is chosen from the first draw,
        which is only safe when every draw has the same type.

    Returns
    -------
    ArraySample
        Sample of length ``n``.

    Raises
    ------
    ValueError
        If ``n`` is smaller than 1.
    """
    if n < 1:
        raise ValueError(f"Sample size must be at least 1, got {n}")

    gen = resolve_rng(rng)
    first = generate(gen)

    values = np.empty(n, dtype=_dtype_for(first) if dtype is None else dtype)
    values[0] = first
    for i in range(1, n):
        values[i] = generate(gen)
    return ArraySample(values)


def make_sampler(
    generate: Generate, dtype: np.dtype[Any] | None = None
) -> Callable[[int, RandomSource], ArraySample]:
    """
    Lift a single-draw generator into a sampler of fixed-size samples.

    The returned function takes ``(n, rng=None)`` and behaves as
    :func:`sample_batch` with ``generate`` and ``dtype`` bound.
    """

    def sampler(n: int, rng: RandomSource = None) -> ArraySample:
        return sample_batch(generate, n, rng, dtype)

    return sampler


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return an :class:`ArraySample`)."""

    def sample(
        self, n: int, distr: BaseDistribution, rng: RandomSource = None, **options: Any
    ) -> ArraySample: ...


class BatchSamplingStrategy(SamplingStrategy):
    """
    Default univariate sampler.

    Calls the distribution's ``generate`` once per draw through
    :func:`sample_batch`, using the distribution's ``sample_dtype``.

    Returns
    -------
    ArraySample
        A 1D sample of shape ``(n,)``.
    """

    def sample(
        self, n: int, distr: BaseDistribution, rng: RandomSource = None, **options: Any
    ) -> ArraySample:
        return sample_batch(distr.generate, n, rng, distr.sample_dtype)


__all__ = [
    "sample_batch",
    "make_sampler",
    "dtype_for_values",
    "SamplingStrategy",
    "BatchSamplingStrategy",
]
