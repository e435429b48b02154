__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_families.errors import EmptyInputError
from pysatl_families.numeric import (
    as_observations,
    default_rng,
    fraction,
    resolve_rng,
    sample_mean,
    sample_sd,
    seed_default_rng,
    sqr,
)


def test_sqr():
    assert sqr(-3.0) == 9.0


def test_fraction():
    assert fraction(3.0, 4.0) == 0.75
    assert math.isnan(fraction(1.0, 0.0))
    assert math.isnan(fraction(0.0, 0.0))


class TestRandomSources:
    def test_default_rng_is_shared(self):
        assert default_rng() is default_rng()

    def test_seed_default_rng_replaces_generator(self):
        first = seed_default_rng(7).random()
        second = seed_default_rng(7).random()
        assert first == second

    def test_resolve_none_gives_default(self):
        assert resolve_rng(None) is default_rng()

    def test_resolve_generator_is_identity(self, rng):
        assert resolve_rng(rng) is rng

    @pytest.mark.parametrize("seed", [3, np.random.SeedSequence(3)])
    def test_resolve_seed_builds_generator(self, seed):
        gen = resolve_rng(seed)
        assert isinstance(gen, np.random.Generator)
        assert gen.random() == np.random.default_rng(3).random()


class TestObservations:
    def test_flattens(self):
        arr = as_observations([[1, 2], [3, 4]])
        assert arr.shape == (4,)
        assert arr.dtype == np.float64

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            as_observations([])

    def test_sample_sd_is_population_sd(self):
        values = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        assert sample_mean(values) == 5.0
        assert sample_sd(values) == 2.0
        assert sample_sd(values, mean=5.0) == 2.0
