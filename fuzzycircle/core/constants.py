"""Central fuzzy-comparison tolerances.

Every epsilon used by the numeric capabilities lives here so the values can
be tuned in one place and referenced without scattering literals.
"""
from __future__ import annotations

# Fuzzy epsilons, one per supported floating precision
EPS_FUZZY_F64: float = 1e-8       # float64 / builtin float
EPS_FUZZY_F32: float = 1e-5       # float32

__all__ = [
    'EPS_FUZZY_F64',
    'EPS_FUZZY_F32',
]
