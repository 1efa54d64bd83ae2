# microrunn/engine/ops.py
import numbers

import numpy as np

from .node import Node, Op, OpKind


def _check_real(x, what):
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise TypeError(f"{what} must be a real number, but got {type(x).__name__}")


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a fresh leaf."""
    return x if isinstance(x, Node) else leaf(x)


def leaf(x, label=""):
    """Create an input/parameter node with no operands."""
    if isinstance(x, Node):
        raise TypeError("leaf() expects a number, not a Node")
    _check_real(x, "leaf value")
    return Node(x, label=label)


def _binary(a, b, f, kind):
    """
    Generic binary primitive:
      - computes out.value = f(a.value, b.value)
      - records (a, b) as operands under `kind`
    """
    a = _as_node(a)
    b = _as_node(b)
    return Node(f(a.value, b.value), Op(kind), (a, b))


def add(a, b): return _binary(a, b, lambda x, y: x + y, OpKind.ADD)
def multiply(a, b): return _binary(a, b, lambda x, y: x * y, OpKind.MUL)


def power(a, n):
    """
    Raise a node to a fixed real exponent:
      out.value = a.value ** n

    A non-integer power of a negative base is NaN, not an error; the NaN
    flows through the rest of the graph like any other value.
    """
    _check_real(n, "exponent")
    a = _as_node(a)
    n = float(n)
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        out = np.power(a.value, n)
    return Node(out, Op(OpKind.POW, exponent=n), (a,))


def tanh(a):
    a = _as_node(a)
    return Node(np.tanh(a.value), Op(OpKind.TANH), (a,))


def negate(a):
    """-a, recorded as a * (-1)."""
    return multiply(a, leaf(-1.0))


def subtract(a, b):
    """a - b, recorded as a + (-b)."""
    return add(a, negate(b))
