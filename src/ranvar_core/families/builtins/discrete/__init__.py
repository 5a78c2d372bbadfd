"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from ranvar_core.families.builtins.discrete.hypergeometric import configure_hypergeometric_family

__all__ = [
    "configure_hypergeometric_family",
]
