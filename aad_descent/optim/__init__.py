"""
Optimization module.

Vector helpers and a steepest-descent minimizer driven by
(value, gradient) objectives, e.g. those built with `aad.value_and_grad`.
"""

from . import vector
from .gradient_descent import DescentConfig, gradient_descent, minimize

__all__ = [
    'vector',
    'DescentConfig',
    'gradient_descent',
    'minimize',
]
