"""
Process-wide Settings
=====================

Switch controlling whether parameter constraints are checked when a
distribution is created, mutated or sampled statelessly.

Disabling the checks is a performance escape hatch: invalid parameters are
then accepted as-is and the analytical formulas return whatever the
arithmetic produces.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Settings:
    check_parameters: bool = True


_settings = _Settings()


def parameter_checks_enabled() -> bool:
    """Return ``True`` when parameter constraints are validated."""
    return _settings.check_parameters


def set_parameter_checks(enabled: bool) -> None:
    """
    Enable or disable parameter validation globally.

    Parameters
    ----------
    enabled : bool
        ``False`` skips every constraint check until re-enabled.
    """
    _settings.check_parameters = bool(enabled)
    logger.debug("Parameter checks %s", "enabled" if enabled else "disabled")


@contextmanager
def parameter_checks(enabled: bool) -> Iterator[None]:
    """
    Temporarily set parameter validation, restoring the prior value on exit.

    Examples
    --------
    >>> with parameter_checks(False):
    ...     dist = Rayleigh(sigma=-1.0)  # accepted unchecked
    """
    previous = _settings.check_parameters
    set_parameter_checks(enabled)
    try:
        yield
    finally:
        set_parameter_checks(previous)


def reset_settings() -> None:
    """Restore default settings (test helper)."""
    set_parameter_checks(True)


__all__ = [
    "parameter_checks",
    "parameter_checks_enabled",
    "reset_settings",
    "set_parameter_checks",
]
