from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_families.distributions import (
    ArraySample,
    BaseDistribution,
    SamplingStrategy,
)

if TYPE_CHECKING:
    from pysatl_families.numeric import RandomSource


class MockSamplingStrategy(SamplingStrategy):
    """Returns uniform draws on [0, 1) and records how it was called."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, BaseDistribution, dict[str, Any]]] = []

    def sample(
        self, n: int, distr: BaseDistribution, rng: RandomSource = None, **options: Any
    ) -> ArraySample:
        self.calls.append((n, distr, options))
        return ArraySample(np.random.default_rng(0).random(n))
