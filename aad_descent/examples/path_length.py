"""
Shortest Path by Gradient Descent

Optimizes the interior heights y_1..y_{n-1} of the polyline

    (0, 0), (dx, y_1), (2dx, y_2), ..., ((n-1)dx, y_{n-1}), (1, end_height)

with dx = 1/n so that its total length

    L(y) = Σᵢ sqrt(dx² + (y_{i+1} - y_i)²)

is minimal. Gradients come from a single reverse pass per evaluation; the
optimum is the straight line y_i = i·end_height/n.

Run:
    python -m aad_descent.examples.path_length
"""

import numpy as np
from functools import partial
from typing import Dict, Optional, Sequence, Tuple

from aad_descent.aad import (Tape, begin, constant, add, subtract, multiply, power, log,
                             compute_derivatives, get_graph_stats,
                             print_graph_summary)
from aad_descent.optim import DescentConfig, gradient_descent


def path_length_objective(heights: Sequence[float],
                          n_segments: Optional[int] = None,
                          end_height: float = 1.0,
                          tape: Optional[Tape] = None) -> Tuple[float, np.ndarray]:
    """
    Total length of the polyline and its gradient wrt the interior heights.

    Args:
        heights: Interior heights y_1..y_{n-1}
        n_segments: Number of segments (defaults to len(heights) + 1)
        end_height: Height of the right end point (left end is 0)
        tape: Tape to record on (reset first); a fresh one if None

    Returns:
        (length, ∂length/∂heights)
    """
    n = n_segments if n_segments is not None else len(heights) + 1
    if len(heights) != n - 1:
        raise ValueError(f"expected {n - 1} interior heights, got {len(heights)}")
    dx2 = (1.0 / n) ** 2

    if tape is None:
        tape = begin()
    else:
        tape.reset()
    heights_aad = [constant(tape, h) for h in heights]

    # Sum up lengths of the n segments
    total_length = constant(tape, 0.0)
    for i in range(n):
        left = constant(tape, 0.0) if i == 0 else heights_aad[i - 1]
        right = constant(tape, end_height) if i == n - 1 else heights_aad[i]
        dh = subtract(left, right)
        length = power(add(constant(tape, dx2), multiply(dh, dh)), constant(tape, 0.5))
        total_length = add(total_length, length)

    compute_derivatives(total_length)
    return float(total_length.value), np.array([h.derivative for h in heights_aad])


def dot_log_example(xs: Sequence[float] = (1, 2, 3, 4),
                    ys: Sequence[float] = (2, 3, 4, 5)) -> Dict:
    """log(Σ xᵢ·yᵢ) and its derivatives wrt every xᵢ and yᵢ."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    tape = begin()
    xs_aad = [constant(tape, v) for v in xs]
    ys_aad = [constant(tape, v) for v in ys]
    total = constant(tape, 0.0)
    for x, y in zip(xs_aad, ys_aad):
        total = add(total, multiply(x, y))
    result = log(total)
    compute_derivatives(result)
    return {
        'value': float(result.value),
        'd_xs': [x.derivative for x in xs_aad],
        'd_ys': [y.derivative for y in ys_aad],
        'graph': get_graph_stats(tape),
    }


def main(n_segments: int = 100, max_iter: int = 10000, verbose: bool = True):
    demo = dot_log_example()
    print(f"Value of function: {demo['value']}")
    print(f"Derivatives wrt xs: {demo['d_xs']}")
    print(f"Derivatives wrt ys: {demo['d_ys']}")

    tape = begin()
    path_length_objective(np.zeros(n_segments - 1), n_segments, tape=tape)
    print_graph_summary(tape)

    objective = partial(path_length_objective, n_segments=n_segments)
    config = DescentConfig(verbose=verbose, log_every=1000)
    result = gradient_descent(objective, np.zeros(n_segments - 1), max_iter, config)

    print(f"Gradient descent result = {result.x}")
    print(f"Objective function = {result.fun}")
    print(f"Straight-line length = {np.hypot(1.0, 1.0)}")
    return result


if __name__ == "__main__":
    main()
