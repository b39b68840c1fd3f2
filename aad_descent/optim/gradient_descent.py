"""
Steepest Descent with Backtracking Line Search

Minimizes a scalar objective f: R^n -> R given as

    f(x) -> (value, gradient)

(typically built with `aad.value_and_grad`). Each outer iteration:

    1. direction d = -∇f(x), norm = ||d||
    2. stop if step·norm <= rel_tol·|f(x)| or the iteration cap is hit
    3. backtrack: x_new = x + (step/norm)·d, halving step until the
       sufficient-decrease (Armijo) test

           f(x) - f(x_new) > c·step·norm

       holds, or x_new == x exactly (the step no longer moves any coordinate)
    4. step *= grow, x = x_new

Dividing by the norm makes `step` a length in parameter space rather than a
multiplier on the gradient.

Errors raised by the objective (DivisionByZero, NumericDomainError, ...)
abort the minimization; they are not caught here.
"""

import numbers
import numpy as np
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple
from scipy.optimize import OptimizeResult

from . import vector

Objective = Callable[[np.ndarray], Tuple[float, Sequence[float]]]


@dataclass
class DescentConfig:
    """Configuration for gradient descent."""
    # Line search
    sufficient_decrease: float = 0.1  # Armijo constant c
    shrink: float = 0.5               # step factor after a rejected trial point
    grow: float = 1.1                 # step factor after an accepted point
    initial_step: float = 1.0

    # Termination
    rel_tol: float = 1e-15  # stop when step·||∇f|| <= rel_tol·|f|

    # Logging
    verbose: bool = False
    log_every: int = 10


def gradient_descent(f: Objective,
                     guess: Sequence[float],
                     max_iter: int,
                     config: Optional[DescentConfig] = None) -> OptimizeResult:
    """
    Run steepest descent from `guess`.

    Args:
        f: Objective returning (value, gradient) at a point
        guess: Initial point
        max_iter: Maximum number of outer iterations (>= 1)
        config: Line-search constants and logging (defaults if None)

    Returns:
        OptimizeResult with fields
            x       : final point
            fun     : f(x) at the final point
            jac     : gradient at the final point
            nit     : outer iterations performed
            nfev    : objective evaluations
            success : True if the tolerance test stopped the run
            message : termination reason
            step    : line-search step length at termination
    """
    config = config or DescentConfig()
    if not isinstance(max_iter, numbers.Integral) or max_iter < 1:
        raise ValueError(f"max_iter must be a positive integer, got {max_iter!r}")

    x = np.asarray(guess, dtype=np.float64).reshape(-1).copy()
    step = config.initial_step
    iteration = 0
    nfev = 0

    while True:
        y, dy = f(x)
        nfev += 1
        direction = vector.scale(dy, -1.0)
        norm = vector.norm(direction)

        # Check termination condition
        iteration += 1
        converged = step * norm <= config.rel_tol * abs(y)
        if converged or iteration >= max_iter:
            message = ("step·||grad|| below tolerance" if converged
                       else "maximum number of iterations reached")
            if config.verbose:
                print(f"  Gradient descent stopped after {iteration} iterations: {message} "
                      f"(f = {y:.6e}, |grad| = {norm:.3e})")
            return OptimizeResult(x=x, fun=y, jac=np.asarray(dy, dtype=np.float64),
                                  nit=iteration, nfev=nfev, success=converged,
                                  message=message, step=step)

        # Shrink step size until we satisfy the Armijo rule
        while True:
            new_x = vector.add(x, vector.scale(direction, step / norm))
            new_y = f(new_x)[0]
            nfev += 1
            if y - new_y > config.sufficient_decrease * step * norm or vector.equal(x, new_x):
                break
            step *= config.shrink

        if config.verbose and iteration % config.log_every == 0:
            print(f"  Iteration {iteration}: f = {y:.6e}, |grad| = {norm:.3e}, step = {step:.3e}")

        # Update for next iteration
        step *= config.grow
        x = new_x


def minimize(f: Objective,
             guess: Sequence[float],
             max_iter: int,
             config: Optional[DescentConfig] = None) -> np.ndarray:
    """Minimize f from `guess` and return the final point."""
    return gradient_descent(f, guess, max_iter, config).x
