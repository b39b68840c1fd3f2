# aad/core/tape.py
from __future__ import annotations
from typing import List, Sequence
import numpy as np
from .node import Node


class Tape:
    """
    Records Nodes in forward (creation) order for one differentiation session.

    The tape owns every node; callers only hold ADVar handles, which are
    (tape, index, session) triples. `reset()` starts a new session and makes
    all previously issued handles stale.
    """
    def __init__(self):
        self.nodes: List[Node] = []
        self.session = 0

    def __len__(self):
        return len(self.nodes)

    def reset(self):
        self.nodes.clear()
        self.session += 1

    def push_node(self, *, op_tag: str, value, parents: Sequence = (), ddparents: Sequence = ()):
        """
        Append a Node and return an ADVar handle to it.
        `parents` is a sequence of ADVar handles living on this tape and
        `ddparents` the matching local partials.
        """
        from .var import ADVar  # local import to avoid cycles

        if len(parents) != len(ddparents):
            raise ValueError(
                f"{op_tag}: {len(parents)} parents but {len(ddparents)} local partials"
            )
        for p in parents:
            self.check_owned(p)
        node = Node(
            op_tag=op_tag,
            value=np.float64(value),
            parents=tuple(p.index for p in parents),
            ddparents=tuple(np.float64(d) for d in ddparents),
        )
        self.nodes.append(node)
        return ADVar(self, len(self.nodes) - 1)

    def check_owned(self, var):
        """Raise SessionMismatch unless `var` was created in this tape's current session."""
        from .errors import SessionMismatch

        if var.tape is not self:
            raise SessionMismatch(f"{var!r} belongs to a different tape")
        if var.session != self.session:
            raise SessionMismatch(
                f"{var!r} is from session {var.session}, tape is at session {self.session}"
            )


def begin() -> Tape:
    """Start a new differentiation session on a fresh tape."""
    return Tape()
