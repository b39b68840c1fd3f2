"""
Computation graph utilities.
Summaries of the node/edge structure recorded on a Tape.
"""

import numpy as np
from typing import Dict
from collections import Counter


def get_graph_stats(tape) -> Dict:
    """
    Collect computation graph statistics (no printing).

    Returns:
        dict with node/edge counts, fan-in/fan-out and an operation histogram
    """
    if not tape.nodes:
        return {
            'nodes': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(tape.nodes)
    fan_ins = [len(node.parents) for node in tape.nodes]

    # Fan-out: how many children reference each node
    fan_outs = [0] * n_nodes
    for node in tape.nodes:
        for p in node.parents:
            fan_outs[p] += 1

    op_counter = Counter(node.op_tag for node in tape.nodes)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(tape) -> Dict:
    """Print a short summary of the tape and return the statistics."""
    stats = get_graph_stats(tape)
    if stats['nodes'] == 0:
        print("Empty computation graph")
        return stats

    print("=" * 50)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 50)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:8s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 50)
    return stats
