"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_families.families.builtins.continuous.beta import Beta, configure_beta_family
from pysatl_families.families.builtins.continuous.cauchy import Cauchy, configure_cauchy_family
from pysatl_families.families.builtins.continuous.chi_squared import (
    ChiSquared,
    configure_chi_squared_family,
)
from pysatl_families.families.builtins.continuous.exponential import (
    Exponential,
    ExponentialScale,
    configure_exponential_family,
)
from pysatl_families.families.builtins.continuous.f import F, configure_f_family
from pysatl_families.families.builtins.continuous.gamma import (
    Gamma,
    GammaShapeRate,
    configure_gamma_family,
)
from pysatl_families.families.builtins.continuous.logistic import (
    Logistic,
    configure_logistic_family,
)
from pysatl_families.families.builtins.continuous.lognormal import (
    LogNormal,
    configure_lognormal_family,
)
from pysatl_families.families.builtins.continuous.normal import (
    Normal,
    NormalMeanPrec,
    configure_normal_family,
)
from pysatl_families.families.builtins.continuous.student_t import (
    StudentT,
    configure_student_t_family,
)
from pysatl_families.families.builtins.continuous.uniform import (
    Uniform,
    UniformMeanWidth,
    UniformMinRange,
    configure_uniform_family,
)

__all__ = [
    "Normal",
    "NormalMeanPrec",
    "LogNormal",
    "Uniform",
    "UniformMeanWidth",
    "UniformMinRange",
    "Exponential",
    "ExponentialScale",
    "ChiSquared",
    "F",
    "StudentT",
    "Gamma",
    "GammaShapeRate",
    "Cauchy",
    "Beta",
    "Logistic",
    "configure_normal_family",
    "configure_lognormal_family",
    "configure_uniform_family",
    "configure_exponential_family",
    "configure_chi_squared_family",
    "configure_f_family",
    "configure_student_t_family",
    "configure_gamma_family",
    "configure_cauchy_family",
    "configure_beta_family",
    "configure_logistic_family",
]
