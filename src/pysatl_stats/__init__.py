"""
PySATL Stats
============

Descriptive statistics and discrete probability distributions: a
:class:`Statistics` engine over numeric datasets, the Binomial, Geometric and
DiscreteUniform families behind one :class:`DiscreteDistribution` protocol,
and the combinatorial helpers they rely on.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .combinatorics import *
from .combinatorics import __all__ as _comb_all
from .descriptive import *
from .descriptive import __all__ as _descr_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-stats")
__all__ = [
    "__version__",
    *_comb_all,
    *_descr_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _comb_all
del _descr_all
del _distr_all
del _errors_all
del _family_all
del _types_all
