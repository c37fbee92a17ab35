"""Immutable 2D vector over a generic scalar type."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import numpy as np

from .real import F64, Real, real_of

T = TypeVar('T')


@dataclass(frozen=True)
class Vector2(Generic[T]):
    """A point or displacement in the plane.

    Components keep whatever scalar type they are built from; fuzzy
    comparisons use the :class:`~fuzzycircle.core.real.Real` capability of
    the ``x`` component.
    """
    x: T
    y: T

    @classmethod
    def new(cls, x: T, y: T) -> 'Vector2[T]':
        return cls(x, y)

    @classmethod
    def zero(cls, real: Real = F64) -> 'Vector2':
        return cls(real.zero(), real.zero())

    @classmethod
    def from_array(cls, arr) -> 'Vector2':
        """Build from a length-2 array-like, keeping its numpy scalar type."""
        a = np.asarray(arr)
        if a.dtype.kind != 'f':
            a = a.astype(np.float64)
        return cls(a[0], a[1])

    def __add__(self, other: 'Vector2[T]') -> 'Vector2[T]':
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2[T]') -> 'Vector2[T]':
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Vector2[T]':
        return Vector2(-self.x, -self.y)

    def scale(self, scalar: T) -> 'Vector2[T]':
        return Vector2(self.x * scalar, self.y * scalar)

    def dot(self, other: 'Vector2[T]') -> T:
        return self.x * other.x + self.y * other.y

    def length(self) -> T:
        return real_of(self.x).sqrt(self.dot(self))

    def perp(self) -> 'Vector2[T]':
        """Counter-clockwise rotation by 90 degrees."""
        return Vector2(-self.y, self.x)

    def fuzzy_eq_eps(self, other: 'Vector2[T]', eps) -> bool:
        return bool(abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps)

    def fuzzy_eq(self, other: 'Vector2[T]') -> bool:
        """Component-wise fuzzy equality using the scalar type's epsilon."""
        return self.fuzzy_eq_eps(other, real_of(self.x).epsilon)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])


__all__ = ['Vector2']
