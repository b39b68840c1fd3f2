"""
aad_descent: reverse-mode automatic differentiation on scalar tapes and a
steepest-descent minimizer driven by the resulting gradients.

Modules:
    aad:   tapes, nodes, elementary operations and the reverse pass
    optim: vector helpers and the backtracking gradient-descent minimizer
"""

__version__ = "0.1.0"
