from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import numpy as np
import pytest

from pysatl_families.families.configuration import reset_families_register
from pysatl_families.numeric import seed_default_rng

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_families_register()
    seed_default_rng(12345)
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(2025)
