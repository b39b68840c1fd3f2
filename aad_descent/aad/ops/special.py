# aad/ops/special.py
from .arithmetic import _as_ad, _tape_of


def maximum(x, y):
    """
    max(x, y) with a subgradient at the kink.

    Ties go to the first argument: local partials are (1, 0) whenever
    x.value >= y.value, otherwise (0, 1).
    """
    tape = _tape_of(x, y)
    x = _as_ad(x, tape)
    y = _as_ad(y, tape)
    first = x.value >= y.value
    return tape.push_node(op_tag="max", value=x.value if first else y.value,
                          parents=(x, y),
                          ddparents=(1.0, 0.0) if first else (0.0, 1.0))
