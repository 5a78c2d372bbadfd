"""
Exceptions raised by distribution families and their instances.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParametersError(ValueError):
    """
    Joint parameter tuple violates a constraint of its parametrization.

    Raised at construction, on parameter mutation and by stateless sampling.
    The distribution involved, if any, keeps its previous parameters.

    Parameters
    ----------
    description : str
        Description of the violated constraint (e.g. ``"sigma > 0"``).
    parametrization_name : str or None
        Name of the parametrization being validated.
    """

    def __init__(self, description: str, parametrization_name: str | None = None) -> None:
        self.description = description
        self.parametrization_name = parametrization_name
        super().__init__(f'Constraint "{description}" does not hold')


class UnsupportedCharacteristicError(NotImplementedError):
    """
    Characteristic has no analytical definition for a family.

    The distribution itself stays valid; only the query is rejected.
    """

    def __init__(self, characteristic: str, family_name: str | None = None) -> None:
        self.characteristic = characteristic
        self.family_name = family_name
        where = f" for family '{family_name}'" if family_name else ""
        super().__init__(f"Characteristic '{characteristic}' is not supported{where}.")


__all__ = [
    "InvalidParametersError",
    "UnsupportedCharacteristicError",
]
