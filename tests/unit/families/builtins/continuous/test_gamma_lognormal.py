"""
Tests for Gamma and LogNormal Distribution Families

Both families are estimated from strictly positive observations.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_families.errors import EmptyInputError, InvalidParameterError
from pysatl_families.families.builtins import Gamma, LogNormal
from pysatl_families.families.configuration import configure_families_register
from pysatl_families.types import FamilyName


class TestGammaFamily:
    def setup_method(self):
        self.gamma_family = configure_families_register().get(FamilyName.GAMMA)

    def test_shape_rate_parametrization(self):
        dist = self.gamma_family(shape=3.0, rate=0.5, parametrization_name="shapeRate")

        assert isinstance(dist, Gamma)
        assert dist.shape == 3.0
        assert dist.scale == pytest.approx(2.0)

    @pytest.mark.parametrize(
        "parametrization_name, params, message",
        [
            ("shapeScale", {"shape": 0.0, "scale": 1.0}, "shape > 0"),
            ("shapeScale", {"shape": 1.0, "scale": -1.0}, "scale > 0"),
            ("shapeRate", {"shape": 1.0, "rate": 0.0}, "rate > 0"),
        ],
    )
    def test_constraints(self, parametrization_name, params, message):
        with pytest.raises(InvalidParameterError, match=message):
            self.gamma_family(parametrization_name=parametrization_name, **params)

    def test_shape_one_is_exponential(self):
        dist = Gamma(shape=1.0, scale=2.0)

        assert dist.density(0.0) == pytest.approx(0.5)
        assert dist.cumulative_probability(2.0) == pytest.approx(1 - math.exp(-1.0))

    def test_mle_approximation_formula(self):
        data = np.array([0.5, 1.0, 2.0, 4.0])
        mean = float(np.mean(data))
        s = math.log(mean) - float(np.mean(np.log(data)))
        shape = (3 - s + math.sqrt((s - 3) ** 2 + 24)) / (12 * s)

        dist = Gamma.mle(data)

        assert dist.shape == pytest.approx(shape)
        assert dist.scale == pytest.approx(mean / shape)

    def test_mle_recovers_parameters(self, rng):
        data = Gamma(shape=2.5, scale=1.5).sample(20000, rng=rng).array
        dist = Gamma.mle(data)

        assert dist.shape == pytest.approx(2.5, rel=0.05)
        assert dist.scale == pytest.approx(1.5, rel=0.05)

    def test_mle_rejects_non_positive(self):
        with pytest.raises(ValueError, match="positive"):
            Gamma.mle([1.0, 0.0, 2.0])

    def test_mle_constant_data_is_invalid(self):
        with pytest.raises(InvalidParameterError):
            Gamma.mle([2.0, 2.0])

    def test_mle_empty_raises(self):
        with pytest.raises(EmptyInputError):
            Gamma.mle([])


class TestLogNormalFamily:
    def test_constraint(self):
        with pytest.raises(InvalidParameterError, match="sigma > 0"):
            LogNormal(mu=0.0, sigma=0.0)

    def test_support_excludes_zero(self):
        dist = LogNormal(mu=0.0, sigma=1.0)

        assert not dist.support.contains(0.0)
        assert dist.support.contains(1e-9)
        assert dist.density(0.0) == 0.0
        assert dist.density(-1.0) == 0.0

    def test_median_is_exp_mu(self):
        assert LogNormal(mu=1.5, sigma=0.4).quantile(0.5) == pytest.approx(math.exp(1.5))

    def test_moments_closed_form(self):
        dist = LogNormal(mu=0.0, sigma=1.0)

        assert dist.mean == pytest.approx(math.exp(0.5))
        assert dist.variance == pytest.approx((math.e - 1) * math.e)
        assert dist.skewness == pytest.approx((math.e + 2) * math.sqrt(math.e - 1))

    def test_mle_known_values(self):
        data = np.exp([0.0, 1.0, 2.0])
        dist = LogNormal.mle(data)

        assert dist.mu == pytest.approx(1.0)
        assert dist.sigma == pytest.approx(math.sqrt(2 / 3))

    def test_mle_recovers_parameters(self, rng):
        data = LogNormal(mu=0.3, sigma=0.8).sample(20000, rng=rng).array
        dist = LogNormal.mle(data)

        assert dist.mu == pytest.approx(0.3, abs=0.03)
        assert dist.sigma == pytest.approx(0.8, abs=0.03)

    def test_mle_rejects_non_positive(self):
        with pytest.raises(ValueError, match="positive"):
            LogNormal.mle([1.0, -2.0])

    def test_through_family(self):
        family = configure_families_register().get(FamilyName.LOG_NORMAL)
        assert family.is_estimable
        assert isinstance(family.mle([1.0, 2.0, 3.0]), LogNormal)
