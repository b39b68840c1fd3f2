# aad/core/engine.py
from __future__ import annotations
from .var import ADVar


def zero_derivatives(tape):
    """
    Clear the derivative (adjoint) field of every node on the tape.
    Cleared nodes read back as 0.0 until a reverse pass reaches them.
    """
    for node in tape.nodes:
        node.derivative = None


def compute_derivatives(output: ADVar):
    """
    Run a single reverse pass from `output`.

    Seeds ∂output/∂output = 1 and walks the tape from `output` back to the
    first node. For each node and each (parent, local_partial) pair:

        parent.derivative += local_partial * node.derivative

    Contributions are summed, so a node shared by several children receives
    the total over all paths. Nodes created after `output` cannot feed it and
    are not visited; nodes never reached keep an absent derivative.
    """
    if not isinstance(output, ADVar):
        raise TypeError(f"compute_derivatives expects an ADVar, got {output!r}")
    tape = output.tape
    tape.check_owned(output)

    zero_derivatives(tape)
    nodes = tape.nodes
    nodes[output.index].derivative = 1.0

    # Backward sweep
    for n in range(output.index, -1, -1):
        node = nodes[n]
        if node.derivative is None:
            continue  # not on any path to output
        for p, local_partial in zip(node.parents, node.ddparents):
            parent = nodes[p]
            parent.derivative = (parent.derivative or 0.0) + local_partial * node.derivative
