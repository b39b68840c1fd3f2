# aad/__init__.py
# Adjoint (reverse-mode) algorithmic differentiation on scalar tapes

from .core import (
    ADVar,
    Tape,
    begin,
    compute_derivatives,
    zero_derivatives,
    value_and_grad,
    grad,
    gradient_check,
    finite_difference_grad,
    AADError,
    DivisionByZero,
    NumericDomainError,
    LengthMismatch,
    SessionMismatch,
    get_graph_stats,
    print_graph_summary,
)
from .ops import constant, add, subtract, multiply, divide, power, exp, log, maximum

# `max` is the engine entry-point name; `maximum` avoids shadowing the builtin.
max = maximum

__all__ = [
    # Core
    'ADVar',
    'Tape',
    'begin',
    'compute_derivatives',
    'zero_derivatives',
    'value_and_grad',
    'grad',
    'gradient_check',
    'finite_difference_grad',
    'get_graph_stats',
    'print_graph_summary',
    # Errors
    'AADError',
    'DivisionByZero',
    'NumericDomainError',
    'LengthMismatch',
    'SessionMismatch',
    # Ops
    'constant', 'add', 'subtract', 'multiply', 'divide', 'power',
    'exp', 'log', 'maximum',
]
