"""
Distributions subpackage

Capability interfaces and sampling machinery shared by all families:

- capability interfaces (:mod:`.distribution`);
- supports (:mod:`.support`);
- array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import (
    BaseDistribution,
    ContinuousDistribution,
    DiscreteDistribution,
    Estimable,
    Moments,
    OptionalMoments,
)
from .sampling import ArraySample, Sample
from .strategies import (
    BatchSamplingStrategy,
    SamplingStrategy,
    dtype_for_values,
    make_sampler,
    sample_batch,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    ExplicitTableDiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # capabilities
    "BaseDistribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
    "Moments",
    "OptionalMoments",
    "Estimable",
    # sampling
    "Sample",
    "ArraySample",
    "sample_batch",
    "make_sampler",
    "dtype_for_values",
    # strategies
    "SamplingStrategy",
    "BatchSamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
