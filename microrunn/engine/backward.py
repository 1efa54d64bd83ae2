# microrunn/engine/backward.py
from __future__ import annotations
import logging
import math
from typing import List

import numpy as np

from .node import Node, OpKind

logger = logging.getLogger(__name__)


def topological_order(root: Node) -> List[Node]:
    """
    Nodes reachable from `root`, each listed after all of its operands.

    Depth-first post-order with a visited set keyed by node identity, so a
    node reachable through several consumers is listed exactly once. Uses an
    explicit stack; batch losses build chains deeper than the recursion limit.
    """
    order: List[Node] = []
    seen = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.append((node, True))
        for p in reversed(node.operands):
            if id(p) not in seen:
                stack.append((p, False))
    return order


def zero_grad(root: Node) -> None:
    """Set the gradient of every node reachable from `root` to zero."""
    for node in topological_order(root):
        node.grad = 0.0


def backward(root: Node, seed=1.0) -> Node:
    """
    Run a single reverse pass from `root`.

    Args:
        root: scalar output node.
        seed: d(output)/d(root); 1.0 for the usual gradient.

    Notes:
        - Every operand receives p.grad += (local partial) * node.grad; the
          sum over all consumers is what makes shared nodes come out right.
        - Not idempotent: a second call without zero_grad() adds the same
          contributions again.
    """
    if not isinstance(root, Node):
        raise TypeError(f"backward() expects a Node, but got {type(root).__name__}")
    seed = float(seed)
    if seed == 0.0 or not math.isfinite(seed):
        raise ValueError(f"backward() needs a finite non-zero seed, got {seed!r}")

    order = topological_order(root)
    logger.debug("backward: %d nodes reachable from root", len(order))

    root.grad = seed
    for node in reversed(order):
        _propagate(node)
    return root


def _propagate(node: Node) -> None:
    """Apply the local gradient rule of `node` to its operands."""
    kind = node.op.kind
    g = node.grad

    if kind is OpKind.LEAF:
        return

    if kind is OpKind.ADD:
        a, b = node.operands
        a.grad += g
        b.grad += g
        return

    if kind is OpKind.MUL:
        a, b = node.operands
        a.grad += b.value * g
        b.grad += a.value * g
        return

    if kind is OpKind.POW:
        (a,) = node.operands
        n = node.op.exponent
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            a.grad += n * np.power(a.value, n - 1.0) * g
        return

    if kind is OpKind.TANH:
        # uses the output value: d tanh(x)/dx = 1 - tanh(x)^2
        (a,) = node.operands
        a.grad += (1.0 - node.value * node.value) * g
        return

    raise ValueError(f"no gradient rule for op {node.op}")
