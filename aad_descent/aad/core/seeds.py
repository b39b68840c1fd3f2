# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. The helpers below wrap that cycle
# (begin -> build -> compute_derivatives -> read back) for plain vectors.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Callable, List, Sequence, Tuple
import numpy as np

from .var import ADVar
from .tape import begin
from .engine import compute_derivatives


def value_and_grad(f: Callable[[List[ADVar]], ADVar]) -> Callable[[Sequence[float]], Tuple[float, np.ndarray]]:
    """
    Turn f(list of ADVar) -> scalar ADVar into an objective x -> (value, gradient).

    Each call opens a fresh session, records one constant per coordinate of x,
    runs one reverse pass and reads the derivative back off every input.
    The returned callable is what `optim.minimize` expects.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    value_and_grad(f)([2.0, 4.0]) -> (16.0, array([4., 3.]))
    """
    def objective(x0: Sequence[float]) -> Tuple[float, np.ndarray]:
        from ..ops.arithmetic import constant

        tape = begin()
        xs = [constant(tape, v) for v in np.asarray(x0, dtype=np.float64)]
        y = f(xs)
        if not isinstance(y, ADVar):
            raise TypeError(f"objective must return an ADVar, got {type(y).__name__}")
        compute_derivatives(y)
        return float(y.value), np.array([x.derivative for x in xs], dtype=np.float64)

    return objective


def grad(f: Callable[[List[ADVar]], ADVar], x0: Sequence[float]) -> np.ndarray:
    """Gradient of a scalar-output function of a list of inputs at x0."""
    return value_and_grad(f)(x0)[1]


def finite_difference_grad(fun: Callable[[np.ndarray], float], x0: Sequence[float],
                           eps: float = 1e-6) -> np.ndarray:
    """
    Central-difference gradient of a plain scalar function:
        g_i = [f(x + eps*e_i) - f(x - eps*e_i)] / (2 eps)
    """
    x = np.asarray(x0, dtype=np.float64)
    g = np.zeros_like(x)
    for i in range(x.size):
        x_up = x.copy(); x_up[i] += eps
        x_dn = x.copy(); x_dn[i] -= eps
        g[i] = (fun(x_up) - fun(x_dn)) / (2.0 * eps)
    return g


def gradient_check(f: Callable[[List[ADVar]], ADVar], x0: Sequence[float], *,
                   eps: float = 1e-6, atol: float = 1e-5, rtol: float = 1e-5) -> bool:
    """Compare the reverse-pass gradient of f at x0 against central differences."""
    objective = value_and_grad(f)
    analytical = objective(x0)[1]
    numerical = finite_difference_grad(lambda x: objective(x)[0], x0, eps=eps)
    return bool(np.allclose(analytical, numerical, atol=atol, rtol=rtol))
