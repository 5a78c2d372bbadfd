"""
Built-in distribution families.

This package contains the parametric families that are available by default
once :func:`~ranvar_core.families.configuration.configure_families_register`
has run.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from ranvar_core.families.builtins.continuous import configure_rayleigh_family
from ranvar_core.families.builtins.discrete import configure_hypergeometric_family

__all__ = [
    "configure_hypergeometric_family",
    "configure_rayleigh_family",
]
