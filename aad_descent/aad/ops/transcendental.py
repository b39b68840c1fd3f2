# aad/ops/transcendental.py
import numpy as np
from ..core.var import ADVar
from ..core.errors import NumericDomainError


def _check(x):
    if not isinstance(x, ADVar):
        raise TypeError(f"expected an ADVar, got {x!r}; use constant(tape, c) for numbers")
    x.tape.check_owned(x)
    return x


def exp(x):
    x = _check(x)
    with np.errstate(over="ignore", invalid="ignore"):
        ex = np.exp(x.value)
    if np.isnan(ex):
        raise NumericDomainError("exp", x.value)
    # d/dx(exp(x)) = exp(x)
    return x.tape.push_node(op_tag="exp", value=ex, parents=(x,), ddparents=(ex,))


def log(x):
    x = _check(x)
    with np.errstate(divide="ignore", invalid="ignore"):
        lx = np.log(x.value)
    if x.value <= 0 or np.isnan(lx):
        raise NumericDomainError("log", x.value)
    return x.tape.push_node(op_tag="log", value=lx, parents=(x,), ddparents=(1.0 / x.value,))
