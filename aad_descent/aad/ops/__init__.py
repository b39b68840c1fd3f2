# aad/ops/__init__.py

from .arithmetic import constant, add, subtract, multiply, divide, power
from .transcendental import exp, log
from .special import maximum

# `max` mirrors the engine entry-point name; `maximum` avoids shadowing the builtin.
max = maximum

__all__ = [
    "constant", "add", "subtract", "multiply", "divide", "power",
    "exp", "log",
    "maximum",
]
