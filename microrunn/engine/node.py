# microrunn/engine/node.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class OpKind(str, Enum):
    """Closed set of operations a node can be produced by."""
    LEAF = "leaf"
    ADD = "add"
    MUL = "mul"
    POW = "pow"
    TANH = "tanh"


@dataclass(frozen=True)
class Op:
    """
    Operation tag recorded on a node.

    Attributes
    ----------
    kind     : OpKind
        Which primitive produced the node.
    exponent : Optional[float]
        Fixed real exponent captured at construction; only set for POW.
    """
    kind: OpKind
    exponent: Optional[float] = None

    def __str__(self):
        if self.kind is OpKind.POW:
            return f"pow({self.exponent:g})"
        return self.kind.value


LEAF_OP = Op(OpKind.LEAF)


class Node:
    """
    One scalar value in the computation graph.

    Attributes
    ----------
    value    : np.float64
        Forward (primal) value. Read-only after construction.
    grad     : float
        Accumulated partial derivative of the chosen output w.r.t. this node.
        The only field mutated after construction (by backward()).
    op       : Op
        How this node was produced.
    operands : Tuple[Node, ...]
        Nodes this one was computed from (shared references, never copied).
    label    : str
        Optional debug/pretty-print name.

    Nodes compare and hash by identity: two nodes with equal values are still
    distinct graph vertices.
    """

    def __init__(self, value, op: Op = LEAF_OP, operands: Tuple["Node", ...] = (), label: str = ""):
        self._value = np.float64(value)
        self._op = op
        self._operands = tuple(operands)
        self.grad = 0.0
        self.label = label

    @property
    def value(self) -> np.float64:
        return self._value

    @property
    def op(self) -> Op:
        return self._op

    @property
    def operands(self) -> Tuple["Node", ...]:
        return self._operands

    @property
    def is_leaf(self) -> bool:
        return self._op.kind is OpKind.LEAF

    def __repr__(self):
        name = f", label={self.label!r}" if self.label else ""
        return f"Node(value={float(self._value)!r}, grad={float(self.grad)!r}, op={self._op}{name})"

    # Operator overloading for the engine operations
    def __add__(self, other):
        from .ops import add
        return add(self, other)

    def __radd__(self, other):
        from .ops import add
        return add(other, self)

    def __sub__(self, other):
        from .ops import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        from .ops import subtract
        return subtract(other, self)

    def __mul__(self, other):
        from .ops import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from .ops import multiply
        return multiply(other, self)

    def __neg__(self):
        from .ops import negate
        return negate(self)

    def __pow__(self, exponent):
        from .ops import power
        return power(self, exponent)

    def tanh(self):
        from .ops import tanh
        return tanh(self)
