"""
Sampling Interfaces
===================

This module defines protocols and implementations for sample containers
used in distribution sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[Any]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    This implementation stores independent draws of a univariate
    distribution as a 1D array of shape ``(n,)``. Numeric families produce
    ``float64`` or ``int64`` arrays; label-valued families produce ``object``
    arrays.

    Parameters
    ----------
    data : numpy.ndarray
        1D array of draws.

    Attributes
    ----------
    data : numpy.ndarray
        Backing array containing the samples.

    Raises
    ------
    ValueError
        If data is not 1D.
    """

    __slots__ = ("data",)

    data: npt.NDArray[Any]

    def __init__(self, data: npt.NDArray[Any]) -> None:
        if data.ndim != 1:
            raise ValueError("ArraySample expects 1D array of shape (n,).")
        self.data = data

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the draws."""
        yield from self.data

    def __getitem__(self, index: int) -> Any:
        """Return the draw at ``index``."""
        return self.data[index]

    def __repr__(self) -> str:
        return f"ArraySample({self.data!r})"

    @property
    def array(self) -> npt.NDArray[Any]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n,)."""
        return (len(self),)

    @property
    def dtype(self) -> np.dtype[Any]:
        """Return the dtype of the backing array."""
        return self.data.dtype
