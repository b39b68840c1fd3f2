# optim/vector.py
"""
Fixed-length vector helpers used by the minimizer.

Inputs are any sequence of numbers; results are float64 numpy arrays.
No broadcasting: both operands of a binary helper must have the same length.
"""

import numpy as np
from typing import Sequence

from ..aad.core.errors import LengthMismatch


def _as_vec(v: Sequence[float]) -> np.ndarray:
    return np.asarray(v, dtype=np.float64).reshape(-1)


def scale(v: Sequence[float], k: float) -> np.ndarray:
    """Multiply a vector by a number."""
    return k * _as_vec(v)


def add(v1: Sequence[float], v2: Sequence[float]) -> np.ndarray:
    """Add two vectors; raises LengthMismatch on different lengths."""
    a, b = _as_vec(v1), _as_vec(v2)
    if a.size != b.size:
        raise LengthMismatch(a.size, b.size)
    return a + b


def norm(v: Sequence[float]) -> float:
    """Euclidean norm sqrt(sum v_i^2)."""
    a = _as_vec(v)
    return float(np.sqrt(np.sum(a * a)))


def equal(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """Exact element-wise equality; different lengths compare unequal."""
    a, b = _as_vec(v1), _as_vec(v2)
    if a.size != b.size:
        return False
    return bool(np.array_equal(a, b))
