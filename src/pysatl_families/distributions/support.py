"""
Support primitives for distributions.

Classes
-------
ContinuousSupport
    Interval on the real line.

IntegerLatticeDiscreteSupport
    Integer points ``{min_k, min_k + 1, ...}``, optionally bounded on either
    side.

ExplicitTableDiscreteSupport
    Finite, explicitly provided, ordered set of labels of any totally
    ordered type.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import bisect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_families.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    def contains(self, x: Any) -> bool | BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Any]: ...

    def first(self) -> Any | None: ...


class ExplicitTableDiscreteSupport(DiscreteSupport):
    """
    Finite discrete support defined by an explicit collection of labels.

    Labels only need a total order (``<``); they are kept in a sorted list
    and located with :mod:`bisect`, so strings, tuples or dates work as well
    as numbers.

    Parameters
    ----------
    points : Iterable
        Collection of labels. Duplicates are collapsed.
    assume_sorted : bool, default False
        If ``True``, ``points`` are assumed to be sorted already.

    Raises
    ------
    ValueError
        If ``points`` is empty.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Any], assume_sorted: bool = False) -> None:
        items = list(points)

        if not items:
            raise ValueError("Points must be non-empty")

        if not assume_sorted:
            items.sort()

        unique = [items[0]]
        for item in items[1:]:
            if item != unique[-1]:
                unique.append(item)

        self._points: list[Any] = unique

    def index(self, x: Any) -> int | None:
        """Position of ``x`` in the sorted table, or ``None`` if absent."""
        pos = bisect.bisect_left(self._points, x)
        if pos < len(self._points) and self._points[pos] == x:
            return pos
        return None

    def count_leq(self, x: Any) -> int:
        """Number of labels that are less than or equal to ``x``."""
        return bisect.bisect_right(self._points, x)

    def contains(self, x: Any) -> bool | BoolArray:
        if isinstance(x, np.ndarray):
            return cast(BoolArray, np.array([self.index(v) is not None for v in x], dtype=bool))
        return self.index(x) is not None

    def __contains__(self, x: object) -> bool:
        return self.index(x) is not None

    def __len__(self) -> int:
        return len(self._points)

    def iter_points(self) -> Iterator[Any]:
        return iter(self._points)

    def first(self) -> Any:
        return self._points[0]

    def last(self) -> Any:
        return self._points[-1]

    @property
    def points(self) -> list[Any]:
        return list(self._points)

    __iter__ = iter_points


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integer support ``{min_k, ..., max_k}``.

    Parameters
    ----------
    min_k : int or None
        Smallest point, ``None`` for no lower bound.
    max_k : int or None
        Largest point, ``None`` for no upper bound.
    """

    min_k: int | None = None
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        mask = np.isfinite(xf) & (xf == np.floor(xf))
        if self.min_k is not None:
            mask &= xf >= self.min_k
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def iter_points(self) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate points for a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )

        def _gen() -> Iterator[int]:
            current = cast(int, self.min_k)
            while self.max_k is None or current <= self.max_k:
                yield current
                current += 1

        return _gen()

    def first(self) -> int | None:
        if self.min_k is not None and self.max_k is not None and self.min_k > self.max_k:
            return None
        return self.min_k

    def last(self) -> int | None:
        if self.min_k is not None and self.max_k is not None and self.min_k > self.max_k:
            return None
        return self.max_k

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
