from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from ranvar_core.families.configuration import reset_families_register
from ranvar_core.random_source import reset_default_random_source
from ranvar_core.settings import reset_settings

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_families_register()
    reset_default_random_source()
    reset_settings()
    yield
    reset_settings()
