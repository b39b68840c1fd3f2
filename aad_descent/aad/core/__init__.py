# aad/core/__init__.py

"""
Core public API for the AAD package.

Exports:
    Tape                : Arena recording the nodes of one differentiation session.
    begin               : Start a new session on a fresh tape.
    ADVar               : Handle to a node on a tape.
    Node                : Record stored on the tape for each operation.
    compute_derivatives : Run a single reverse pass from an output node.
    zero_derivatives    : Clear all derivatives on a tape.
    value_and_grad      : Wrap a function of ADVars into an (value, gradient) objective.
    grad                : Convenience: gradient of such a function at a point.
    gradient_check      : Compare reverse-pass gradients with finite differences.
"""

from .errors import AADError, DivisionByZero, NumericDomainError, LengthMismatch, SessionMismatch
from .node import Node
from .var import ADVar
from .tape import Tape, begin
from .engine import compute_derivatives, zero_derivatives
from .seeds import value_and_grad, grad, finite_difference_grad, gradient_check
from .graph_utils import get_graph_stats, print_graph_summary

__all__ = [
    "AADError", "DivisionByZero", "NumericDomainError", "LengthMismatch", "SessionMismatch",
    "Node", "ADVar", "Tape", "begin",
    "compute_derivatives", "zero_derivatives",
    "value_and_grad", "grad", "finite_difference_grad", "gradient_check",
    "get_graph_stats", "print_graph_summary",
]
