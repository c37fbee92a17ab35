"""Circle-circle intersection with fuzzy classification.

Reference algorithm: http://paulbourke.net/geometry/circlesphere/

Two entry points share one branch structure:

- :func:`circle_circle_intr` classifies a single pair of circles and returns
  one of the four result variants.
- :func:`circle_circle_intr_batch` evaluates many pairs at once with numpy
  masks and returns per-row kind codes plus point arrays.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

import numpy as np

from .logging_utils import get_logger
from .real import real_for_dtype, real_of
from .vector2 import Vector2

log = get_logger(__name__)


class IntrKind(enum.IntEnum):
    NO_INTERSECT = 0
    TANGENT_INTERSECT = 1
    TWO_INTERSECTS = 2
    OVERLAPPING = 3


@dataclass(frozen=True)
class NoIntersect:
    """The circles do not meet."""
    kind: ClassVar[IntrKind] = IntrKind.NO_INTERSECT

    @property
    def points(self) -> Tuple[Vector2, ...]:
        return ()


@dataclass(frozen=True)
class TangentIntersect:
    """The circles touch at exactly one point."""
    point: Vector2
    kind: ClassVar[IntrKind] = IntrKind.TANGENT_INTERSECT

    @property
    def points(self) -> Tuple[Vector2, ...]:
        return (self.point,)


@dataclass(frozen=True)
class TwoIntersects:
    """The circles cross at two distinct points."""
    point1: Vector2
    point2: Vector2
    kind: ClassVar[IntrKind] = IntrKind.TWO_INTERSECTS

    @property
    def points(self) -> Tuple[Vector2, ...]:
        return (self.point1, self.point2)


@dataclass(frozen=True)
class Overlapping:
    """The circles coincide (same center and radius within tolerance)."""
    kind: ClassVar[IntrKind] = IntrKind.OVERLAPPING

    @property
    def points(self) -> Tuple[Vector2, ...]:
        return ()


CircleCircleIntr = Union[NoIntersect, TangentIntersect, TwoIntersects, Overlapping]


def circle_circle_intr(radius1, center1: Vector2, radius2, center2: Vector2) -> CircleCircleIntr:
    """Find the intersects between two circles.

    The circles are given by their radii ``radius1``, ``radius2`` and their
    centers ``center1``, ``center2``. Fuzzy comparisons use the
    :class:`~fuzzycircle.core.real.Real` capability of ``radius1``'s type.

    Example
    -------
        >>> intr = circle_circle_intr(1.0, Vector2.zero(), 2.0 ** 0.5, Vector2(0.0, 1.0))
        >>> isinstance(intr, TwoIntersects)
        True
        >>> intr.point1.fuzzy_eq(Vector2(1.0, 0.0)), intr.point2.fuzzy_eq(Vector2(-1.0, 0.0))
        (True, True)
    """
    real = real_of(radius1)
    radius1 = real.cast(radius1)
    radius2 = real.cast(radius2)

    cv = center2 - center1
    d2 = cv.dot(cv)
    d = real.sqrt(d2)

    if real.fuzzy_eq_zero(d):
        # same center position
        if real.fuzzy_eq(radius1, radius2):
            return Overlapping()
        return NoIntersect()

    # too far apart, or one circle strictly inside the other
    if not real.fuzzy_lt(d, radius1 + radius2) or not real.fuzzy_gt(d, real.abs(radius1 - radius2)):
        return NoIntersect()

    rad1_sq = radius1 * radius1
    a = (rad1_sq - radius2 * radius2 + d2) / (real.two() * d)
    midpoint = center1 + cv.scale(a / d)
    diff = rad1_sq - a * a

    # exact comparison: only the sign of the discriminant matters here
    if diff < real.zero():
        return TangentIntersect(midpoint)

    h = real.sqrt(diff)
    h_over_d = h / d
    x_term = h_over_d * cv.y
    y_term = h_over_d * cv.x

    pt1 = Vector2(midpoint.x + x_term, midpoint.y - y_term)
    pt2 = Vector2(midpoint.x - x_term, midpoint.y + y_term)

    if pt1.fuzzy_eq_eps(pt2, real.epsilon):
        return TangentIntersect(pt1)

    return TwoIntersects(pt1, pt2)


@dataclass(frozen=True)
class BatchIntr:
    """Row-wise result of :func:`circle_circle_intr_batch`.

    Attributes
    ----------
    kinds : (M,) int8 array
        ``IntrKind`` code per pair.
    point1 : (M,2) float array
        Tangent point or first intersect; NaN when the row has no point.
    point2 : (M,2) float array
        Second intersect; NaN unless the row is ``TWO_INTERSECTS``.
    """
    kinds: np.ndarray
    point1: np.ndarray
    point2: np.ndarray

    def __len__(self) -> int:
        return int(self.kinds.shape[0])

    def counts(self) -> dict:
        tally = np.bincount(self.kinds.astype(np.intp), minlength=len(IntrKind))
        return {k.name: int(tally[k]) for k in IntrKind}

    def result(self, i: int) -> CircleCircleIntr:
        """Rebuild the scalar result variant for row ``i``."""
        kind = IntrKind(int(self.kinds[i]))
        if kind is IntrKind.TANGENT_INTERSECT:
            return TangentIntersect(Vector2.from_array(self.point1[i]))
        if kind is IntrKind.TWO_INTERSECTS:
            return TwoIntersects(Vector2.from_array(self.point1[i]), Vector2.from_array(self.point2[i]))
        if kind is IntrKind.OVERLAPPING:
            return Overlapping()
        return NoIntersect()


def circle_circle_intr_batch(radii1, centers1, radii2, centers2) -> BatchIntr:
    """Vectorized circle-circle intersection for equal-length arrays of circle pairs.

    radii1, radii2 must be arrays of shape (M,) and centers1, centers2 arrays of
    shape (M,2). Arithmetic runs in the registered precision of the promoted
    input dtype (float32 when every input is float32); integer, boolean and
    unregistered floating dtypes such as float16 are promoted to float64.
    For float64 input, row ``i`` classifies exactly as
    ``circle_circle_intr(radii1[i], centers1[i], radii2[i], centers2[i])``.
    """
    r1 = np.asarray(radii1)
    r2 = np.asarray(radii2)
    c1 = np.asarray(centers1)
    c2 = np.asarray(centers2)
    real = real_for_dtype(np.result_type(r1, r2, c1, c2))
    dtype = np.dtype(real.scalar_type)
    r1 = r1.astype(dtype, copy=False)
    r2 = r2.astype(dtype, copy=False)
    c1 = c1.astype(dtype, copy=False)
    c2 = c2.astype(dtype, copy=False)

    if r1.ndim != 1 or r2.shape != r1.shape:
        raise ValueError("radii must be 1-D arrays of equal length, got {} and {}".format(r1.shape, r2.shape))
    m = r1.shape[0]
    if c1.shape != (m, 2) or c2.shape != (m, 2):
        raise ValueError("centers must have shape ({}, 2), got {} and {}".format(m, c1.shape, c2.shape))

    eps = real.epsilon
    kinds = np.full(m, IntrKind.NO_INTERSECT, dtype=np.int8)
    point1 = np.full((m, 2), np.nan, dtype=dtype)
    point2 = np.full((m, 2), np.nan, dtype=dtype)
    if m == 0:
        return BatchIntr(kinds, point1, point2)

    cv = c2 - c1
    d2 = cv[:, 0] * cv[:, 0] + cv[:, 1] * cv[:, 1]
    d = np.sqrt(d2)

    same = np.abs(d) <= eps
    kinds[same & (np.abs(r1 - r2) <= eps)] = IntrKind.OVERLAPPING
    in_range = ~same & (d < (r1 + r2) + eps) & (d + eps > np.abs(r1 - r2))

    idx = np.nonzero(in_range)[0]
    if idx.size:
        rs1 = r1[idx]
        rs2 = r2[idx]
        ds = d[idx]
        cvs = cv[idx]
        rad1_sq = rs1 * rs1
        a = (rad1_sq - rs2 * rs2 + d2[idx]) / (dtype.type(2) * ds)
        mid = c1[idx] + cvs * (a / ds)[:, None]
        diff = rad1_sq - a * a

        negative = diff < 0
        h_over_d = np.sqrt(np.where(negative, 0, diff)) / ds
        x_term = h_over_d * cvs[:, 1]
        y_term = h_over_d * cvs[:, 0]
        pt1 = np.column_stack((mid[:, 0] + x_term, mid[:, 1] - y_term))
        pt2 = np.column_stack((mid[:, 0] - x_term, mid[:, 1] + y_term))
        coincident = np.all(np.abs(pt1 - pt2) <= eps, axis=1) & ~negative
        two = ~negative & ~coincident

        kinds[idx[negative]] = IntrKind.TANGENT_INTERSECT
        point1[idx[negative]] = mid[negative]
        kinds[idx[coincident]] = IntrKind.TANGENT_INTERSECT
        point1[idx[coincident]] = pt1[coincident]
        kinds[idx[two]] = IntrKind.TWO_INTERSECTS
        point1[idx[two]] = pt1[two]
        point2[idx[two]] = pt2[two]

    result = BatchIntr(kinds, point1, point2)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("circle_circle_intr_batch(%s, n=%d): %s", real.name, m, result.counts())
    return result


__all__ = [
    'IntrKind', 'NoIntersect', 'TangentIntersect', 'TwoIntersects', 'Overlapping',
    'CircleCircleIntr', 'BatchIntr', 'circle_circle_intr', 'circle_circle_intr_batch',
]
