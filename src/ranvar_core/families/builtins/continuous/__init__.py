"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from ranvar_core.families.builtins.continuous.rayleigh import configure_rayleigh_family

__all__ = [
    "configure_rayleigh_family",
]
