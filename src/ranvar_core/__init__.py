"""
ranvar-core
===========

Parametric random variables with analytical characteristics and pluggable
sampling: distribution abstractions, parametric family management, random
sources and the built-in hypergeometric and Rayleigh families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .exceptions import *
from .exceptions import __all__ as _exceptions_all
from .families import *
from .families import __all__ as _family_all
from .random_source import *
from .random_source import __all__ as _random_source_all
from .settings import *
from .settings import __all__ as _settings_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("ranvar-core")
__all__ = [
    "__version__",
    *_distr_all,
    *_exceptions_all,
    *_family_all,
    *_random_source_all,
    *_settings_all,
    *_types_all,
]

del _distr_all
del _exceptions_all
del _family_all
del _random_source_all
del _settings_all
del _types_all
