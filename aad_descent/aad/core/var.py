# aad/core/var.py
from __future__ import annotations
from typing import Tuple


class ADVar:
    """
    Handle to one scalar node recorded on a Tape.

    A handle is a non-owning (tape, index, session) identifier: copying it is
    cheap and it never keeps parents alive on its own. Field access goes
    through the tape, so reading a handle after the tape was reset raises
    SessionMismatch instead of returning another session's data.

    Attributes
    ----------
    tape    : Tape
        Tape that owns the node.
    index   : int
        Position of the node on the tape (creation order).
    session : int
        Tape session the handle was issued in.
    """

    __slots__ = ("tape", "index", "session")

    def __init__(self, tape, index: int):
        self.tape = tape
        self.index = index
        self.session = tape.session

    @property
    def node(self):
        self.tape.check_owned(self)
        return self.tape.nodes[self.index]

    @property
    def value(self) -> float:
        return self.node.value

    @property
    def parents(self) -> Tuple["ADVar", ...]:
        return tuple(ADVar(self.tape, i) for i in self.node.parents)

    @property
    def ddparents(self) -> Tuple[float, ...]:
        return self.node.ddparents

    @property
    def derivative(self) -> float:
        """Accumulated ∂output/∂self from the last reverse pass (0.0 if not reached)."""
        d = self.node.derivative
        return 0.0 if d is None else d

    @property
    def has_derivative(self) -> bool:
        return self.node.derivative is not None

    @property
    def op_tag(self) -> str:
        return self.node.op_tag

    def __float__(self):
        return float(self.value)

    def __eq__(self, other):
        return (isinstance(other, ADVar) and self.tape is other.tape
                and self.index == other.index and self.session == other.session)

    def __hash__(self):
        return hash((id(self.tape), self.index, self.session))

    def __repr__(self):
        if self.session != self.tape.session:
            return f"ADVar(#{self.index}, stale session {self.session})"
        node = self.tape.nodes[self.index]
        return f"ADVar(#{self.index}, {node.op_tag}, value={node.value!r})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import subtract
        return subtract(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import divide
        return divide(other, self)

    def __neg__(self):
        from ..ops.arithmetic import subtract
        return subtract(0.0, self)

    def __pow__(self, other):
        from ..ops.arithmetic import power
        return power(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import power
        return power(other, self)
