# aad/core/errors.py
"""
Error kinds raised by the AAD engine and the vector helpers.

All of them are raised at the point of detection (node construction or a
vector operation) and are never caught inside the package.
"""


class AADError(Exception):
    """Base class for every error raised by aad_descent."""


class DivisionByZero(AADError, ZeroDivisionError):
    """Divisor node has value exactly 0."""

    def __init__(self, numerator):
        self.numerator = numerator
        super().__init__(f"Division by 0 (numerator={numerator!r})")


class NumericDomainError(AADError, ValueError):
    """An elementary function produced a non-representable result."""

    def __init__(self, op: str, argument):
        self.op = op
        self.argument = argument
        super().__init__(f"NaN from {op}({argument!r})")


class LengthMismatch(AADError, ValueError):
    """Vector operation on sequences of different length."""

    def __init__(self, len1: int, len2: int):
        self.len1 = len1
        self.len2 = len2
        super().__init__(f"unequal vector sizes: {len1} != {len2}")


class SessionMismatch(AADError, RuntimeError):
    """A handle from another tape, or from a finished session, was used."""
