"""
PySATL Families
===============

Probability distribution families sharing a common, capability-based
contract: parameter validation, density/mass and cumulative probability,
quantiles, closed-form moments, maximum-likelihood estimation and batch
sampling.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .numeric import default_rng, seed_default_rng
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-families")
__all__ = [
    "__version__",
    "default_rng",
    "seed_default_rng",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _types_all
