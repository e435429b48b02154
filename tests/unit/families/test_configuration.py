"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_families.distributions import Estimable
from pysatl_families.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.types import FamilyName, UnivariateContinuous, UnivariateDiscrete

CONTINUOUS = {
    FamilyName.NORMAL,
    FamilyName.LOG_NORMAL,
    FamilyName.CONTINUOUS_UNIFORM,
    FamilyName.EXPONENTIAL,
    FamilyName.CHI_SQUARED,
    FamilyName.F,
    FamilyName.STUDENT_T,
    FamilyName.GAMMA,
    FamilyName.CAUCHY,
    FamilyName.BETA,
    FamilyName.LOGISTIC,
}
DISCRETE = {
    FamilyName.POISSON,
    FamilyName.BERNOULLI,
    FamilyName.BINOMIAL,
    FamilyName.GEOMETRIC,
    FamilyName.HYPERGEOMETRIC,
    FamilyName.NEGATIVE_BINOMIAL,
    FamilyName.CATEGORICAL,
}
ESTIMABLE = {
    FamilyName.NORMAL,
    FamilyName.LOG_NORMAL,
    FamilyName.CONTINUOUS_UNIFORM,
    FamilyName.EXPONENTIAL,
    FamilyName.GAMMA,
    FamilyName.POISSON,
}


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        """Test that configure_families_register returns the same instance."""
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_all_families_registered(self):
        """Test that every built-in family is registered."""
        assert set(ParametricFamilyRegister.names()) == CONTINUOUS | DISCRETE
        assert len(ParametricFamilyRegister.names()) == 18

    @pytest.mark.parametrize("name", sorted(CONTINUOUS))
    def test_continuous_family_type(self, name):
        assert self.registry.get(name).distr_type == UnivariateContinuous

    @pytest.mark.parametrize("name", sorted(DISCRETE))
    def test_discrete_family_type(self, name):
        assert self.registry.get(name).distr_type == UnivariateDiscrete

    @pytest.mark.parametrize("name", sorted(CONTINUOUS | DISCRETE))
    def test_estimable_families(self, name):
        family = self.registry.get(name)
        assert family.is_estimable is (name in ESTIMABLE)
        assert issubclass(family.base, Estimable) is (name in ESTIMABLE)

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        # They should be different instances after reset
        assert registry1 is not registry2
        assert set(registry2.names()) == CONTINUOUS | DISCRETE

    def test_configuring_twice_after_reset_does_not_duplicate(self):
        reset_families_register()
        configure_families_register()
        configure_families_register.cache_clear()
        configure_families_register()
        assert len(ParametricFamilyRegister.names()) == 18

    def test_registry_singleton_pattern(self):
        """Test that ParametricFamilyRegister itself follows singleton pattern."""
        registry1 = ParametricFamilyRegister()
        registry2 = ParametricFamilyRegister()
        assert registry1 is registry2

    def test_registry_get_family_method(self):
        """Test the get method of ParametricFamilyRegister."""
        normal_family = self.registry.get(FamilyName.NORMAL)
        assert normal_family is not None
        assert normal_family.name == FamilyName.NORMAL

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")

    def test_distribution_through_registry(self):
        gamma = self.registry.get(FamilyName.GAMMA)
        d = gamma.distribution("shapeRate", shape=2.0, rate=4.0)
        assert d.parameters == {"shape": 2.0, "scale": 0.25}
