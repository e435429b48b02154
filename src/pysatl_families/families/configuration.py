"""
Distribution Families Configuration
====================================

This module registers the built-in parametric distribution families in the
global :class:`ParametricFamilyRegister`:

- continuous: Normal, LogNormal, ContinuousUniform, Exponential, ChiSquared,
  F, StudentT, Gamma, Cauchy, Beta, Logistic;
- discrete: Poisson, Bernoulli, Binomial, Geometric, Hypergeometric,
  NegativeBinomial, Categorical.

Notes
-----
- Registration is idempotent; the register is built once and cached.
- :func:`reset_families_register` empties the register, mainly for tests.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_families.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_binomial_family,
    configure_categorical_family,
    configure_cauchy_family,
    configure_chi_squared_family,
    configure_exponential_family,
    configure_f_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_hypergeometric_family,
    configure_logistic_family,
    configure_lognormal_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_poisson_family,
    configure_student_t_family,
    configure_uniform_family,
)
from pysatl_families.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_lognormal_family()
    configure_uniform_family()
    configure_exponential_family()
    configure_chi_squared_family()
    configure_f_family()
    configure_student_t_family()
    configure_gamma_family()
    configure_cauchy_family()
    configure_beta_family()
    configure_logistic_family()

    configure_poisson_family()
    configure_bernoulli_family()
    configure_binomial_family()
    configure_geometric_family()
    configure_hypergeometric_family()
    configure_negative_binomial_family()
    configure_categorical_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
