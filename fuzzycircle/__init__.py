"""Public package API for fuzzycircle.

This facade provides a flat import surface on top of the implementation
package ``fuzzycircle.core``.

Example
-------
    from fuzzycircle import Vector2, circle_circle_intr, TwoIntersects

The deeper modules (``fuzzycircle.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import PackageNotFoundError as _NotFound, version as _pkg_version
    __version__ = _pkg_version("fuzzycircle")  # populated when installed
except _NotFound:  # pragma: no cover - source checkout, not installed
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('fuzzycircle.core.constants')
_real = _imp('fuzzycircle.core.real')
_vec = _imp('fuzzycircle.core.vector2')
_intr = _imp('fuzzycircle.core.circle_intersect')
_log = _imp('fuzzycircle.core.logging_utils')

# Tolerances
EPS_FUZZY_F64 = _const.EPS_FUZZY_F64
EPS_FUZZY_F32 = _const.EPS_FUZZY_F32

# Numeric capabilities
Real = _real.Real
F64 = _real.F64
F32 = _real.F32
real_of = _real.real_of
real_for_dtype = _real.real_for_dtype
register_real = _real.register_real

# Vector type
Vector2 = _vec.Vector2

# Intersection
IntrKind = _intr.IntrKind
NoIntersect = _intr.NoIntersect
TangentIntersect = _intr.TangentIntersect
TwoIntersects = _intr.TwoIntersects
Overlapping = _intr.Overlapping
CircleCircleIntr = _intr.CircleCircleIntr
BatchIntr = _intr.BatchIntr
circle_circle_intr = _intr.circle_circle_intr
circle_circle_intr_batch = _intr.circle_circle_intr_batch

# Logging
configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Namespace submodules
constants = _const
real = _real
vector2 = _vec
circle_intersect = _intr
logging_utils = _log

__all__ = [
    '__version__',
    # tolerances
    'EPS_FUZZY_F64', 'EPS_FUZZY_F32',
    # numeric capabilities
    'Real', 'F64', 'F32', 'real_of', 'real_for_dtype', 'register_real',
    # geometry
    'Vector2',
    'IntrKind', 'NoIntersect', 'TangentIntersect', 'TwoIntersects', 'Overlapping',
    'CircleCircleIntr', 'BatchIntr', 'circle_circle_intr', 'circle_circle_intr_batch',
    # logging
    'configure_logging', 'get_logger',
    # submodules
    'constants', 'real', 'vector2', 'circle_intersect', 'logging_utils',
]
