"""
Graph utilities.
Print and analyze the structure of the graph reachable from a root node.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .node import Node
from .backward import topological_order


def get_graph_stats(root: Node) -> Dict:
    """
    Collect graph statistics without printing.

    Returns:
        dict with node/edge counts, fan-in/fan-out and per-op counts
    """
    nodes = topological_order(root)
    n_nodes = len(nodes)
    n_edges = sum(len(node.operands) for node in nodes)

    fan_ins = [len(node.operands) for node in nodes]

    # fan-out: number of consumers inside the reachable set
    index = {id(node): i for i, node in enumerate(nodes)}
    fan_outs = [0] * n_nodes
    for node in nodes:
        for p in node.operands:
            fan_outs[index[id(p)]] += 1

    op_counter = Counter(node.op.kind.value for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: output node
        detailed: also list every node (only for graphs of at most 100 nodes)

    Returns:
        the statistics dict from get_graph_stats()
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        nodes = topological_order(root)
        index = {id(node): i for i, node in enumerate(nodes)}
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for i, node in enumerate(nodes):
            if node.operands:
                parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.operands)
                print(f"Node {i:4d}: {str(node.op):12s} ({float(node.value):10.6f}) <- [{parent_info}]")
            else:
                print(f"Node {i:4d}: {str(node.op):12s} ({float(node.value):10.6f}) [leaf/input]")

    print("="*70 + "\n")
    return stats


def analyze_graph_complexity(root: Node) -> str:
    """
    Short text report on graph size and branching.
    """
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"
    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
