"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families,
including the categorical distribution over arbitrary ordered labels.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_families.families.builtins.discrete.bernoulli import (
    Bernoulli,
    configure_bernoulli_family,
)
from pysatl_families.families.builtins.discrete.binomial import (
    Binomial,
    configure_binomial_family,
)
from pysatl_families.families.builtins.discrete.categorical import (
    AliasTable,
    Categorical,
    configure_categorical_family,
)
from pysatl_families.families.builtins.discrete.geometric import (
    Geometric,
    configure_geometric_family,
)
from pysatl_families.families.builtins.discrete.hypergeometric import (
    Hypergeometric,
    configure_hypergeometric_family,
)
from pysatl_families.families.builtins.discrete.negative_binomial import (
    NegativeBinomial,
    configure_negative_binomial_family,
)
from pysatl_families.families.builtins.discrete.poisson import (
    Poisson,
    configure_poisson_family,
)

__all__ = [
    "Poisson",
    "Bernoulli",
    "Binomial",
    "Geometric",
    "Hypergeometric",
    "NegativeBinomial",
    "Categorical",
    "AliasTable",
    "configure_poisson_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_hypergeometric_family",
    "configure_negative_binomial_family",
    "configure_categorical_family",
]
