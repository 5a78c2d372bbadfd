from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

import ranvar_core
from ranvar_core import Hypergeometric, InvalidParametersError, Rayleigh
from ranvar_core.random_source import default_random_source
from ranvar_core.types import FamilyName
from tests.utils.mocks import SequenceRandomSource


class TestShortcuts:
    def test_hypergeometric(self) -> None:
        dist = Hypergeometric(population=10, successes=5, draws=3)

        assert dist.family_name == FamilyName.HYPERGEOMETRIC
        assert dist.parameters.parameters == {"population": 10, "successes": 5, "draws": 3}
        assert dist.random_source is default_random_source()

    def test_hypergeometric_positional(self) -> None:
        source = SequenceRandomSource([])
        dist = Hypergeometric(10, 5, 3, source)
        assert dist.random_source is source

    def test_rayleigh(self) -> None:
        source = SequenceRandomSource([])
        dist = Rayleigh(2.0, random_source=source)

        assert dist.family_name == FamilyName.RAYLEIGH
        assert dist.parametrization_name == "scale"
        assert dist.parameters.parameters == {"sigma": 2.0}
        assert dist.random_source is source

    def test_invalid_parameters(self) -> None:
        with pytest.raises(InvalidParametersError):
            Hypergeometric(population=5, successes=7, draws=1)
        with pytest.raises(InvalidParametersError):
            Rayleigh(sigma=0.0)

    def test_package_exports(self) -> None:
        for name in ("Hypergeometric", "Rayleigh", "NumpyRandomSource", "parameter_checks"):
            assert name in ranvar_core.__all__
