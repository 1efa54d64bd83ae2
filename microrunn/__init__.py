# microrunn/__init__.py
# Scalar reverse-mode automatic differentiation and a small MLP builder

from .engine import (
    Node,
    leaf,
    add,
    multiply,
    power,
    tanh,
    negate,
    subtract,
    backward,
    zero_grad,
    topological_order,
)
from .nn import InitConfig, Neuron, Layer, Network

# Graph inspection and gradient checking
from .engine import graph_utils, gradcheck

__all__ = [
    # Engine
    'Node',
    'leaf',
    'add',
    'multiply',
    'power',
    'tanh',
    'negate',
    'subtract',
    'backward',
    'zero_grad',
    'topological_order',
    # Network builder
    'InitConfig',
    'Neuron',
    'Layer',
    'Network',
    # Utilities
    'graph_utils',
    'gradcheck',
]
