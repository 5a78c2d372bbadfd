"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
ranvar-core:

- distribution protocol (:mod:`.distribution`);
- analytical computation primitive (:mod:`.computation`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- continuous and integer-range supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    AnalyticalComputationStrategy,
    ComputationStrategy,
    DirectSamplingStrategy,
    InverseTransformSamplingStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerRangeSupport,
    Support,
    restrict_to_support,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "AnalyticalComputationStrategy",
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
    "DirectSamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerRangeSupport",
    "restrict_to_support",
]
