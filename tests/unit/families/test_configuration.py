"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from ranvar_core.families.builtins import (
    configure_hypergeometric_family,
    configure_rayleigh_family,
)
from ranvar_core.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from ranvar_core.families.registry import ParametricFamilyRegister
from ranvar_core.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_cached(self):
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_families_registered(self):
        """Test that all built-in families are registered."""
        assert set(self.registry.list_registered_families()) == {
            FamilyName.HYPERGEOMETRIC,
            FamilyName.RAYLEIGH,
        }

    def test_configure_family_is_idempotent(self):
        """Test that configuring an already registered family is a no-op."""
        rayleigh = self.registry.get(FamilyName.RAYLEIGH)
        hypergeometric = self.registry.get(FamilyName.HYPERGEOMETRIC)

        configure_rayleigh_family()
        configure_hypergeometric_family()

        assert self.registry.get(FamilyName.RAYLEIGH) is rayleigh
        assert self.registry.get(FamilyName.HYPERGEOMETRIC) is hypergeometric

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        rayleigh1 = registry1.get(FamilyName.RAYLEIGH)
        reset_families_register()
        registry2 = configure_families_register()

        assert registry1 is not registry2
        assert registry2.get(FamilyName.RAYLEIGH) is not rayleigh1

    def test_registry_get_family_method(self):
        rayleigh = self.registry.get(FamilyName.RAYLEIGH)
        assert rayleigh.name == FamilyName.RAYLEIGH

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")
