# microrunn/engine/__init__.py

"""
Core public API of the autodiff engine.

Exports:
    Node, Op, OpKind : graph vertex and its operation tag
    leaf             : create an input/parameter node
    add, multiply, power, tanh, negate, subtract
                     : construction operations (each returns a new node)
    backward         : run one reverse pass from a scalar root
    zero_grad        : reset gradients of every node reachable from a root
    topological_order: reachable nodes, operands before consumers
    value, grad, grads_list
                     : convenience wrappers around a single reverse pass
"""

from .node import Node, Op, OpKind
from .ops import leaf, add, multiply, power, tanh, negate, subtract
from .backward import backward, zero_grad, topological_order
from .seeds import value, grad, grads_list

__all__ = [
    "Node", "Op", "OpKind",
    "leaf", "add", "multiply", "power", "tanh", "negate", "subtract",
    "backward", "zero_grad", "topological_order",
    "value", "grad", "grads_list",
]
