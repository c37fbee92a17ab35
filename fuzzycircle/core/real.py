"""Numeric capabilities with fuzzy (tolerance based) comparisons.

A ``Real`` binds a numpy floating scalar type to its fixed fuzzy epsilon and
exposes the arithmetic helpers and predicates the geometry routines need.
Arithmetic is carried out in the bound scalar type, so float32 inputs stay in
float32 precision end to end.

Capabilities are resolved from a value's type with :func:`real_of`; builtin
``float`` and ``int`` resolve to :data:`F64`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Type

import numpy as np

from .constants import EPS_FUZZY_F32, EPS_FUZZY_F64
from .logging_utils import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Real:
    """Fuzzy numeric capability for one floating precision.

    Attributes
    ----------
    name : str
        Short label, e.g. ``'f64'``.
    scalar_type : type
        numpy floating scalar type values are cast to.
    epsilon : float
        Fixed tolerance used by the fuzzy predicates.
    """
    name: str
    scalar_type: Type[np.floating]
    epsilon: float

    def cast(self, value):
        return self.scalar_type(value)

    def zero(self):
        return self.scalar_type(0)

    def two(self):
        return self.scalar_type(2)

    def sqrt(self, value):
        return self.scalar_type(np.sqrt(self.scalar_type(value)))

    def abs(self, value):
        return self.scalar_type(np.abs(self.scalar_type(value)))

    # -- fuzzy predicates with an explicit tolerance --

    def fuzzy_eq_zero_eps(self, value, eps) -> bool:
        return bool(np.abs(value) <= eps)

    def fuzzy_eq_eps(self, a, b, eps) -> bool:
        return bool(np.abs(a - b) <= eps)

    def fuzzy_lt_eps(self, a, b, eps) -> bool:
        return bool(a < b + eps)

    def fuzzy_gt_eps(self, a, b, eps) -> bool:
        return bool(a + eps > b)

    # -- fuzzy predicates using the capability epsilon --

    def fuzzy_eq_zero(self, value) -> bool:
        """True iff ``|value| <= epsilon``."""
        return self.fuzzy_eq_zero_eps(value, self.epsilon)

    def fuzzy_eq(self, a, b) -> bool:
        """True iff ``|a - b| <= epsilon``."""
        return self.fuzzy_eq_eps(a, b, self.epsilon)

    def fuzzy_lt(self, a, b) -> bool:
        """True iff ``a < b + epsilon``; near-equal values satisfy ``<``."""
        return self.fuzzy_lt_eps(a, b, self.epsilon)

    def fuzzy_gt(self, a, b) -> bool:
        """True iff ``a + epsilon > b``; near-equal values satisfy ``>``."""
        return self.fuzzy_gt_eps(a, b, self.epsilon)


F64 = Real('f64', np.float64, EPS_FUZZY_F64)
F32 = Real('f32', np.float32, EPS_FUZZY_F32)

_REGISTRY: Dict[type, Real] = {
    np.float64: F64,
    np.float32: F32,
    float: F64,
    int: F64,
}


def real_of(value: Any) -> Real:
    """Return the capability registered for ``type(value)``.

    numpy scalars without an exact registration resolve through
    :func:`real_for_dtype`, so numpy integers behave like builtin ``int``.

    Raises
    ------
    TypeError
        If no capability is registered for the value's type.
    """
    real = _REGISTRY.get(type(value))
    if real is None and isinstance(value, np.generic):
        return real_for_dtype(np.dtype(type(value)))
    if real is None:
        raise TypeError("no Real capability registered for type {!r}".format(type(value).__name__))
    return real


def real_for_dtype(dtype) -> Real:
    """Return the capability for an array dtype.

    Integer, boolean and unregistered floating dtypes resolve to float64
    arithmetic.

    Raises
    ------
    TypeError
        If the dtype is not a real numeric kind (complex, object, ...).
    """
    dt = np.dtype(dtype)
    if dt.kind in 'biu':
        return F64
    if dt.kind == 'f':
        return _REGISTRY.get(dt.type, F64)
    raise TypeError("no Real capability for dtype {!r}".format(dt.name))


def register_real(scalar_type: type, epsilon: float, name: str = None) -> Real:
    """Register (or replace) the capability for a numpy floating scalar type.

    Raises
    ------
    ValueError
        If ``scalar_type`` is not a numpy floating type or ``epsilon`` is not positive.
    """
    if not (isinstance(scalar_type, type) and issubclass(scalar_type, np.floating)):
        raise ValueError("scalar_type must be a numpy floating type, got {!r}".format(scalar_type))
    if not epsilon > 0:
        raise ValueError("epsilon must be positive, got {!r}".format(epsilon))
    real = Real(name or np.dtype(scalar_type).name, scalar_type, float(epsilon))
    _REGISTRY[scalar_type] = real
    log.debug("registered Real %s (epsilon=%g)", real.name, real.epsilon)
    return real


__all__ = ['Real', 'F64', 'F32', 'real_of', 'real_for_dtype', 'register_real']
