# aad/core/node.py
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class Node:
    """
    One node on the tape produced by a primitive operation.

    Attributes
    ----------
    op_tag    : str
        Debug tag (e.g., "add", "mul").
    value     : float
        Forward (primal) value, fixed at creation.
    parents   : Tuple[int, ...]
        Tape indices of the direct inputs. Always smaller than this node's
        own index, so the tape order is already topological.
    ddparents : Tuple[float, ...]
        Local partial ∂value/∂parent for each entry of `parents`.
    derivative: Optional[float]
        Adjoint ∂output/∂value, filled by the reverse pass. None until the
        pass reaches this node.
    """
    op_tag: str
    value: float
    parents: Tuple[int, ...] = ()
    ddparents: Tuple[float, ...] = ()
    derivative: Optional[float] = None
