"""
Tests for Categorical Distribution Family

Covers the label table (ordering, lookups, cumulative weights), parameter
validation and the alias-table sampler.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import Counter

import numpy as np
import pytest

from pysatl_families.distributions.support import ExplicitTableDiscreteSupport
from pysatl_families.errors import EmptyInputError, InvalidParameterError
from pysatl_families.families.builtins import AliasTable, Categorical
from pysatl_families.families.configuration import configure_families_register
from pysatl_families.types import CharacteristicName, FamilyName


class TestCategoricalTable:
    def setup_method(self):
        self.dist = Categorical(pairs=[(1, 0.2), (2, 0.3), (3, 0.5)])

    def test_probability(self):
        assert self.dist.probability(1) == 0.2
        assert self.dist.probability(2) == 0.3
        assert self.dist.probability(3) == 0.5
        assert self.dist.probability(4) == 0.0
        assert self.dist.probability(1.5) == 0.0

    def test_cumulative_probability(self):
        assert self.dist.cumulative_probability(0) == 0.0
        assert self.dist.cumulative_probability(1) == pytest.approx(0.2)
        assert self.dist.cumulative_probability(2) == pytest.approx(0.5)
        assert self.dist.cumulative_probability(3) == pytest.approx(1.0)
        assert self.dist.cumulative_probability(10) == 1.0

    def test_cumulative_between_labels(self):
        assert self.dist.cumulative_probability(1.5) == pytest.approx(0.2)
        assert self.dist.cumulative_probability(2.999) == pytest.approx(0.5)

    def test_array_input(self):
        np.testing.assert_allclose(
            self.dist.probability(np.array([0, 1, 2, 3, 4])), [0.0, 0.2, 0.3, 0.5, 0.0]
        )
        np.testing.assert_allclose(
            self.dist.cumulative_probability(np.array([[0.0, 1.5], [2.0, 10.0]])),
            [[0.0, 0.2], [0.5, 1.0]],
        )

    def test_support(self):
        support = self.dist.support

        assert isinstance(support, ExplicitTableDiscreteSupport)
        assert support.points == [1, 2, 3]
        np.testing.assert_array_equal(
            support.contains(np.array([1, 4, 3])), np.array([True, False, True])
        )

    def test_query_method(self):
        assert self.dist.query_method(CharacteristicName.PMF)(2) == 0.3
        assert self.dist.query_method(CharacteristicName.CDF)(2) == pytest.approx(0.5)
        with pytest.raises(RuntimeError):
            self.dist.query_method(CharacteristicName.MEAN)

    def test_through_family(self):
        family = configure_families_register().get(FamilyName.CATEGORICAL)
        dist = family(pairs=[(1, 0.2), (2, 0.3), (3, 0.5)])

        assert dist == self.dist
        assert not family.is_estimable


class TestCategoricalOrdering:
    def test_pairs_are_sorted_by_label(self):
        dist = Categorical(pairs=[(3, 0.5), (1, 0.2), (2, 0.3)])

        assert dist.labels == [1, 2, 3]
        np.testing.assert_allclose(dist.weights, [0.2, 0.3, 0.5])
        assert dist.pairs == ((1, 0.2), (2, 0.3), (3, 0.5))

    def test_equality_ignores_input_order(self):
        a = Categorical(pairs=[(2, 0.5), (1, 0.5)])
        b = Categorical(pairs=[(1, 0.5), (2, 0.5)])

        assert a == b
        assert hash(a) == hash(b)

    def test_mapping_input(self):
        dist = Categorical(pairs={"b": 0.25, "a": 0.75})

        assert dist.labels == ["a", "b"]
        assert dist.probability("a") == 0.75

    def test_string_labels(self):
        dist = Categorical(pairs=[("red", 0.5), ("blue", 0.25), ("green", 0.25)])

        assert dist.labels == ["blue", "green", "red"]
        assert dist.cumulative_probability("blue") == pytest.approx(0.25)
        assert dist.cumulative_probability("cyan") == pytest.approx(0.25)
        assert dist.cumulative_probability("aqua") == 0.0
        assert dist.cumulative_probability("zinc") == 1.0

    def test_weights_are_not_normalised(self):
        dist = Categorical(pairs=[(1, 2.0), (2, 6.0)])

        assert dist.probability(2) == 6.0
        assert dist.cumulative_probability(1.5) == 2.0
        assert dist.cumulative_probability(2) == 8.0

    def test_weights_are_copied(self):
        dist = Categorical(pairs=[(1, 0.5), (2, 0.5)])
        dist.weights[0] = 10.0

        assert dist.probability(1) == 0.5


class TestCategoricalValidation:
    @pytest.mark.parametrize("pairs", [[], {}])
    def test_empty_input(self, pairs):
        with pytest.raises(EmptyInputError, match="Categorical: no data"):
            Categorical(pairs=pairs)

    @pytest.mark.parametrize(
        "pairs, message",
        [
            ([(1, -0.1), (2, 0.5)], "weights are finite and non-negative"),
            ([(1, float("nan")), (2, 0.5)], "weights are finite and non-negative"),
            ([(1, float("inf")), (2, 0.5)], "weights are finite and non-negative"),
            ([(1, 0.0), (2, 0.0)], "total weight > 0"),
            ([(1, 0.5), (1, 0.5)], "labels are distinct"),
        ],
    )
    def test_invalid_pairs(self, pairs, message):
        with pytest.raises(InvalidParameterError, match=message):
            Categorical(pairs=pairs)

    def test_zero_weight_label_is_kept(self):
        dist = Categorical(pairs=[(1, 0.0), (2, 1.0)])

        assert 1 in dist.support
        assert dist.probability(1) == 0.0


class TestCategoricalSampling:
    def test_draw_frequencies(self, rng):
        dist = Categorical(pairs=[("a", 0.1), ("b", 0.6), ("c", 0.3)])
        sample = dist.sample(20000, rng=rng)
        counts = Counter(sample)

        assert sample.dtype == object
        assert set(counts) <= {"a", "b", "c"}
        for label, weight in dist.pairs:
            assert abs(counts[label] / len(sample) - weight) < 0.02

    def test_unnormalised_weights_sample_proportionally(self, rng):
        dist = Categorical(pairs=[(1, 1.0), (2, 3.0)])
        sample = dist.sample(20000, rng=rng).array

        assert sample.dtype == np.int64
        assert abs(np.mean(sample == 2) - 0.75) < 0.02

    def test_zero_weight_label_never_drawn(self, rng):
        dist = Categorical(pairs=[(0, 0.0), (1, 0.5), (2, 0.5)])
        sample = dist.sample(5000, rng=rng).array

        assert not np.any(sample == 0)

    def test_mixed_int_and_float_labels_stay_exact(self, rng):
        dist = Categorical(pairs=[(0, 0.5), (0.5, 0.5)])
        sample = dist.sample(2000, rng=rng).array

        assert dist.sample_dtype == np.float64
        assert sample.dtype == np.float64
        assert set(np.unique(sample)) == {0.0, 0.5}
        assert np.all(dist.support.contains(sample))
        assert abs(np.mean(sample == 0.5) - 0.5) < 0.05

    def test_bool_and_int_labels_share_integer_dtype(self, rng):
        dist = Categorical(pairs=[(True, 0.5), (2, 0.5)])
        sample = dist.sample(500, rng=rng).array

        assert sample.dtype == np.int64
        assert set(np.unique(sample)) == {1, 2}

    @pytest.mark.parametrize(
        "pairs, expected",
        [
            ([(1, 0.5), (2, 0.5)], np.int64),
            ([(1.5, 0.5), (2.5, 0.5)], np.float64),
            ([(False, 0.5), (True, 0.5)], np.bool_),
            ([("a", 0.5), ("b", 0.5)], object),
        ],
    )
    def test_sample_dtype_covers_all_labels(self, pairs, expected):
        assert Categorical(pairs=pairs).sample_dtype == np.dtype(expected)

    def test_single_label(self, rng):
        dist = Categorical(pairs=[(7, 1.0)])

        assert np.all(dist.sample(10, rng=rng).array == 7)
        assert dist.cumulative_probability(7) == 1.0

    def test_reproducible(self):
        dist = Categorical(pairs=[(1, 0.2), (2, 0.3), (3, 0.5)])

        first = dist.sample(100, rng=42).array
        second = dist.sample(100, rng=42).array

        np.testing.assert_array_equal(first, second)


class TestAliasTable:
    def test_uniform_weights_keep_every_column(self):
        table = AliasTable.from_weights(np.array([1.0, 1.0, 1.0, 1.0]))

        assert len(table) == 4
        np.testing.assert_allclose(table.probabilities, 1.0)

    def test_column_masses_reproduce_weights(self):
        weights = np.array([0.1, 0.6, 0.05, 0.25])
        table = AliasTable.from_weights(weights)

        n = len(table)
        masses = np.zeros(n)
        for i in range(n):
            masses[i] += table.probabilities[i] / n
            masses[table.aliases[i]] += (1 - table.probabilities[i]) / n

        np.testing.assert_allclose(masses, weights)

    def test_unnormalised_weights(self):
        a = AliasTable.from_weights(np.array([1.0, 3.0]))
        b = AliasTable.from_weights(np.array([0.25, 0.75]))

        np.testing.assert_allclose(a.probabilities, b.probabilities)
        np.testing.assert_array_equal(a.aliases, b.aliases)

    def test_draw_in_range(self, rng):
        table = AliasTable.from_weights(np.array([0.2, 0.8]))
        assert all(0 <= table.draw(rng) < 2 for _ in range(100))
