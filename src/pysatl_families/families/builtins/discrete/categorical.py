"""
Categorical distribution family implementation.

A categorical distribution is a finite table of ``(label, weight)`` pairs
over labels of any totally ordered type. Lookups go through a sorted label
table, draws through a preprocessed alias table.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from dataclasses import dataclass, field
from operator import itemgetter
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_families.distributions.distribution import DiscreteDistribution
from pysatl_families.distributions.strategies import dtype_for_values
from pysatl_families.distributions.support import ExplicitTableDiscreteSupport
from pysatl_families.errors import EmptyInputError
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class AliasTable:
    """
    Walker alias table for O(1) weighted index draws.

    Built with Vose's method: columns whose scaled weight is below one are
    topped up by an alias column whose weight is above one.

    Parameters
    ----------
    probabilities : numpy.ndarray
        Probability of keeping column ``i`` rather than its alias.
    aliases : numpy.ndarray
        Alias index of each column.
    """

    probabilities: np.ndarray
    aliases: np.ndarray

    @classmethod
    def from_weights(cls, weights: np.ndarray) -> AliasTable:
        """
        Build the table from non-negative weights with a positive sum.

        The weights do not need to sum to one.
        """
        n = len(weights)
        scaled = np.asarray(weights, dtype=np.float64) * n / float(np.sum(weights))
        probabilities = np.ones(n, dtype=np.float64)
        aliases = np.arange(n, dtype=np.intp)

        small = [i for i in range(n) if scaled[i] < 1.0]
        large = [i for i in range(n) if scaled[i] >= 1.0]
        while small and large:
            less = small.pop()
            more = large.pop()
            probabilities[less] = scaled[less]
            aliases[less] = more
            scaled[more] = (scaled[more] + scaled[less]) - 1.0
            if scaled[more] < 1.0:
                small.append(more)
            else:
                large.append(more)
        # Leftovers are full columns up to rounding
        for i in small + large:
            probabilities[i] = 1.0

        return cls(probabilities=probabilities, aliases=aliases)

    def __len__(self) -> int:
        return len(self.probabilities)

    def draw(self, rng: np.random.Generator) -> int:
        """Draw one column index."""
        column = int(rng.integers(len(self.probabilities)))
        if rng.random() < self.probabilities[column]:
            return column
        return int(self.aliases[column])


CATEGORICAL_DOC = """
Categorical distribution.

A finite distribution given by ``(label, weight)`` pairs. Labels may be of
any totally ordered type (numbers, strings, tuples, ...). The pairs are
sorted by label when the distribution is created.

Weights are used as given: they are not normalised and their sum is not
checked against 1, so a table whose weights do not add up to 1 reports
those weights unchanged.
"""

CategoricalFamily = ParametricFamily(
    name=FamilyName.CATEGORICAL,
    distr_type=UnivariateDiscrete,
    distr_parametrizations=["pairs"],
)
CategoricalFamily.__doc__ = CATEGORICAL_DOC


def _as_pairs(
    pairs: Iterable[tuple[Any, float]] | Mapping[Any, float],
) -> tuple[tuple[Any, float], ...]:
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    return tuple(sorted(((label, float(weight)) for label, weight in items), key=itemgetter(0)))


@parametrization(family=CategoricalFamily, name="pairs")
class Categorical(ParametricFamilyDistribution, DiscreteDistribution):
    """
    Categorical distribution over ordered labels.

    Parameters
    ----------
    pairs : iterable of (label, weight) or mapping
        Labels with their probabilities. Stored sorted by label.

    Raises
    ------
    EmptyInputError
        If no pairs are given.
    InvalidParameterError
        If a weight is negative or not finite, all weights are zero, or a
        label occurs twice.

    Examples
    --------
    >>> d = Categorical(pairs=[(1, 0.2), (2, 0.3), (3, 0.5)])
    >>> d.probability(2)
    0.3
    >>> d.cumulative_probability(2)
    0.5
    """

    pairs: tuple[tuple[Any, float], ...]
    _labels: list[Any] = field(init=False, repr=False, compare=False)
    _support: ExplicitTableDiscreteSupport = field(init=False, repr=False, compare=False)
    _weights: np.ndarray = field(init=False, repr=False, compare=False)
    _cumulative: np.ndarray = field(init=False, repr=False, compare=False)
    _table: AliasTable = field(init=False, repr=False, compare=False)
    _dtype: np.dtype = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pairs = _as_pairs(self.pairs)
        if not pairs:
            raise EmptyInputError("Categorical: no data")
        object.__setattr__(self, "pairs", pairs)
        object.__setattr__(self, "_labels", [label for label, _ in pairs])
        object.__setattr__(self, "_weights", np.array([w for _, w in pairs], dtype=np.float64))
        self.validate()

        object.__setattr__(self, "_support", ExplicitTableDiscreteSupport(self._labels, True))
        object.__setattr__(self, "_cumulative", np.cumsum(self._weights))
        object.__setattr__(self, "_table", AliasTable.from_weights(self._weights))
        object.__setattr__(self, "_dtype", dtype_for_values(self._labels))

    @constraint(description="weights are finite and non-negative")
    def check_weights_non_negative(self) -> bool:
        return bool(np.all(np.isfinite(self._weights)) and np.all(self._weights >= 0))

    @constraint(description="total weight > 0")
    def check_total_weight_positive(self) -> bool:
        return float(np.sum(self._weights)) > 0

    @constraint(description="labels are distinct")
    def check_labels_distinct(self) -> bool:
        return all(a != b for a, b in zip(self._labels, self._labels[1:], strict=False))

    @property
    def support(self) -> ExplicitTableDiscreteSupport:
        return self._support

    @property
    def sample_dtype(self) -> np.dtype:
        """Common dtype of all labels, so mixed int and float labels stay exact."""
        return self._dtype

    @property
    def labels(self) -> list[Any]:
        """Labels in ascending order."""
        return list(self._labels)

    @property
    def weights(self) -> np.ndarray:
        """Weights aligned with :attr:`labels`."""
        return self._weights.copy()

    def _mass(self, label: Any) -> float:
        pos = self._support.index(label)
        return 0.0 if pos is None else float(self._weights[pos])

    def _cumulative_mass(self, label: Any) -> float:
        if label < self._labels[0]:
            return 0.0
        if label > self._labels[-1]:
            return 1.0
        count = self._support.count_leq(label)
        return float(self._cumulative[count - 1])

    def probability(self, n: Any) -> Any:
        """
        Weight of label ``n``, 0 for labels not in the table.

        An array of labels gives an array of weights.
        """
        if isinstance(n, np.ndarray):
            return np.array([self._mass(v) for v in n.ravel()], dtype=np.float64).reshape(n.shape)
        return self._mass(n)

    def cumulative_probability(self, n: Any) -> Any:
        """
        Total weight of the labels not greater than ``n``.

        Returns 0 below the smallest label and 1 above the largest one. A
        label between two stored labels gets the total weight of the stored
        labels below it.
        """
        if isinstance(n, np.ndarray):
            return np.array(
                [self._cumulative_mass(v) for v in n.ravel()], dtype=np.float64
            ).reshape(n.shape)
        return self._cumulative_mass(n)

    def generate(self, rng: np.random.Generator) -> Any:
        return self._labels[self._table.draw(rng)]


def configure_categorical_family() -> None:
    """
    Configure and register the Categorical distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return
    ParametricFamilyRegister.register(CategoricalFamily)
