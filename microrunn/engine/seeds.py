# microrunn/engine/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Iterable, List

from .node import Node
from .ops import leaf
from .backward import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def grad(f: Callable[[Node], Node], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph, so earlier gradients never leak in.
    """
    x = leaf(x0, label="x")
    y = f(x)
    if not isinstance(y, Node):
        # f ignored its input: constant output
        return 0.0
    backward(y)
    return float(x.grad)


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[float]) -> List[float]:
    """
    Partials of y=f(xs) w.r.t. every input, from ONE reverse pass.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [leaf(v, label=f"x{i}") for i, v in enumerate(x0_list)]
    y = f(xs)
    if not isinstance(y, Node):
        return [0.0 for _ in xs]
    backward(y)
    return [float(x.grad) for x in xs]
