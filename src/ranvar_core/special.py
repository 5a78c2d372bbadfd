"""
Special Functions
=================

Binomial coefficients used by discrete families, delegated to
:mod:`scipy.special`.

Both functions broadcast over NumPy arrays and follow the combinatorial
convention outside ``0 <= k <= n``: the coefficient is ``0`` and its
logarithm ``-inf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import comb, gammaln

if TYPE_CHECKING:
    from ranvar_core.types import Number, NumericArray


def _in_range(n: NumericArray, k: NumericArray) -> NumericArray:
    return (k >= 0) & (k <= n)


def binomial(n: Number | NumericArray, k: Number | NumericArray) -> float | NumericArray:
    """
    Binomial coefficient C(n, k) as a float.

    Parameters
    ----------
    n, k : Number or NumericArray
        Integer-valued arguments.

    Returns
    -------
    float or NumericArray
        ``C(n, k)`` where ``0 <= k <= n``, ``0.0`` elsewhere.
    """
    n_arr = np.asarray(n, dtype=np.float64)
    k_arr = np.asarray(k, dtype=np.float64)
    result = np.where(_in_range(n_arr, k_arr), comb(n_arr, k_arr), 0.0)
    return float(result) if result.ndim == 0 else result


def binomial_ln(n: Number | NumericArray, k: Number | NumericArray) -> float | NumericArray:
    """
    Natural logarithm of the binomial coefficient C(n, k).

    Evaluated as ``lgamma(n+1) - lgamma(k+1) - lgamma(n-k+1)`` so it stays
    finite long after ``C(n, k)`` itself overflows a double.

    Parameters
    ----------
    n, k : Number or NumericArray
        Integer-valued arguments.

    Returns
    -------
    float or NumericArray
        ``ln C(n, k)`` where ``0 <= k <= n``, ``-inf`` elsewhere.
    """
    n_arr = np.asarray(n, dtype=np.float64)
    k_arr = np.asarray(k, dtype=np.float64)
    valid = _in_range(n_arr, k_arr)

    # Out-of-range arguments hit gammaln poles; they are masked out anyway.
    with np.errstate(invalid="ignore", divide="ignore"):
        value = gammaln(n_arr + 1.0) - gammaln(k_arr + 1.0) - gammaln(n_arr - k_arr + 1.0)
    result = np.where(valid, value, -np.inf)
    return float(result) if result.ndim == 0 else result


__all__ = [
    "binomial",
    "binomial_ln",
]
