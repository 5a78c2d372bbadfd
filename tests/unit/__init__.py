"""
ranvar-core unit tests
======================

Types, supports, strategies, parametric families and the built-in
hypergeometric and Rayleigh families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
