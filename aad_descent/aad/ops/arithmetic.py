# aad/ops/arithmetic.py
import numpy as np
from ..core.var import ADVar
from ..core.errors import DivisionByZero


def _tape_of(*xs):
    """Return the tape shared by the ADVar operands."""
    for x in xs:
        if isinstance(x, ADVar):
            return x.tape
    raise TypeError("at least one operand must be an ADVar; use constant(tape, c) for numbers")


def _as_ad(x, tape):
    """Ensure x is an ADVar on `tape`; otherwise record it as a constant."""
    if isinstance(x, ADVar):
        tape.check_owned(x)
        return x
    return constant(tape, x)


def _binary(x, y, f, dfdx, dfdy, tag):
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value)
      - pushes a Node with local partials (∂out/∂x, ∂out/∂y)
    """
    tape = _tape_of(x, y)
    x = _as_ad(x, tape)
    y = _as_ad(y, tape)
    a, b = x.value, y.value
    return tape.push_node(op_tag=tag, value=f(a, b), parents=(x, y),
                          ddparents=(dfdx(a, b), dfdy(a, b)))


def constant(tape, c):
    """Leaf node: no parents, no local derivatives."""
    if isinstance(c, ADVar):
        raise TypeError(f"constant() expects a number, got {c!r}")
    return tape.push_node(op_tag="const", value=c)


def add(x, y):      return _binary(x, y, lambda a, b: a + b, lambda a, b: 1.0, lambda a, b: 1.0,  "add")
def subtract(x, y): return _binary(x, y, lambda a, b: a - b, lambda a, b: 1.0, lambda a, b: -1.0, "sub")
def multiply(x, y): return _binary(x, y, lambda a, b: a * b, lambda a, b: b,   lambda a, b: a,    "mul")


def divide(x, y):
    """
    Division x / y.

    Local partials:
      ∂out/∂x = 1/y
      ∂out/∂y = -x/y^2

    Raises DivisionByZero before anything is recorded when y.value == 0.
    """
    tape = _tape_of(x, y)
    x = _as_ad(x, tape)
    y = _as_ad(y, tape)
    if y.value == 0:
        raise DivisionByZero(x.value)
    return _binary(x, y, lambda a, b: a / b, lambda a, b: 1.0 / b,
                   lambda a, b: -a / np.square(b), "div")


def power(x, y):
    """
    Power x ** y, recorded as exp(y * log(x)).

    A zero base short-circuits to constant(0), so 0 ** 0 is 0 as well and no
    gradient flows through either operand at that point. Negative bases are
    not special-cased: the inner log raises NumericDomainError for them, even
    when y is an integer.
    """
    from .transcendental import exp, log

    tape = _tape_of(x, y)
    x = _as_ad(x, tape)
    y = _as_ad(y, tape)
    if x.value == 0:
        return constant(tape, 0.0)
    return exp(multiply(y, log(x)))
