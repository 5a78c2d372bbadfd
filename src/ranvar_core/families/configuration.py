"""
Distribution Families Configuration
====================================

This module configures the built-in parametric families of ranvar-core:

- :class:`Hypergeometric Family` — successes in draws without replacement.
- :class:`Rayleigh Family` — magnitude of a 2D Gaussian vector, with scale and
  mean parameterizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Configuration is idempotent; repeated calls return the cached registry.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from ranvar_core.families.builtins import (
    configure_hypergeometric_family,
    configure_rayleigh_family,
)
from ranvar_core.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_hypergeometric_family()
    configure_rayleigh_family()
    register = ParametricFamilyRegister()
    logger.debug("Configured families: %s", register.list_registered_families())
    return register


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
    logger.debug("Families register reset")
