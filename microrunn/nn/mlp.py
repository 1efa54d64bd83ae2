"""
Feed-forward network builder on top of the scalar engine.

    Neuron : bias + Σ w_i·x_i, optionally squashed by tanh
    Layer  : nout neurons reading the same inputs
    Network: layers chained; every layer but the last is nonlinear

All arithmetic goes through engine operations, so `loss(...)` returns the root
of a single graph on which `backward()` can be called.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..engine.node import Node
from ..engine.ops import _as_node, leaf, add, multiply, power, subtract, tanh
from .init import InitConfig, make_rng, sample
from .module import Module

logger = logging.getLogger(__name__)


def _resolve_rng(rng: Optional[np.random.Generator], config: InitConfig) -> np.random.Generator:
    return rng if rng is not None else make_rng(config.seed)


class Neuron(Module):
    """
    Attributes:
        weights (List[Node]): nin weight leaves
        bias (Node): bias leaf
        nonlin (bool): apply tanh to the weighted sum
    """

    def __init__(self, nin: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None,
                 config: Optional[InitConfig] = None):
        config = config or InitConfig()
        rng = _resolve_rng(rng, config)
        # one draw per parameter, never shared
        self.weights = [leaf(sample(rng, config.low, config.high)) for _ in range(nin)]
        self.bias = leaf(sample(rng, config.low, config.high))
        self.nonlin = nonlin

    @property
    def nin(self) -> int:
        return len(self.weights)

    def evaluate(self, inputs: Sequence) -> Node:
        if len(inputs) != len(self.weights):
            raise ValueError(
                f"Neuron expects {len(self.weights)} inputs, but got {len(inputs)}"
            )
        act = self.bias
        for w, x in zip(self.weights, inputs):
            act = add(act, multiply(w, _as_node(x)))
        return tanh(act) if self.nonlin else act

    __call__ = evaluate

    def parameters(self) -> List[Node]:
        return self.weights + [self.bias]

    def __repr__(self):
        kind = "Tanh" if self.nonlin else "Linear"
        return f"{kind}Neuron({len(self.weights)})"


class Layer(Module):
    """nout neurons sharing the same input width and generator."""

    def __init__(self, nin: int, nout: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None,
                 config: Optional[InitConfig] = None):
        config = config or InitConfig()
        rng = _resolve_rng(rng, config)
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng, config=config) for _ in range(nout)]

    def evaluate(self, inputs: Sequence) -> List[Node]:
        return [n.evaluate(inputs) for n in self.neurons]

    __call__ = evaluate

    def parameters(self) -> List[Node]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class Network(Module):
    """
    Multi-layer perceptron.

    Args:
        nin: input width
        layer_sizes: output width of each layer; the last layer is linear
        config: initialization settings (seed, range)
        rng: generator to draw parameters from; overrides config.seed
    """

    def __init__(self, nin: int, layer_sizes: Sequence[int],
                 config: Optional[InitConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        layer_sizes = list(layer_sizes)
        if not layer_sizes:
            raise ValueError("Network needs at least one layer")
        sizes = [nin] + layer_sizes
        if any(s <= 0 for s in sizes):
            raise ValueError(f"layer widths must be positive, got {sizes}")

        config = config or InitConfig()
        rng = _resolve_rng(rng, config)
        self.layers = [
            Layer(sizes[i], sizes[i + 1], nonlin=(i != len(layer_sizes) - 1), rng=rng, config=config)
            for i in range(len(layer_sizes))
        ]
        logger.info("Network: sizes=%s, %d parameters", sizes, len(self.parameters()))

    @property
    def nin(self) -> int:
        return self.layers[0].neurons[0].nin

    def evaluate(self, inputs: Sequence) -> List[Node]:
        out = list(inputs)
        for layer in self.layers:
            out = layer.evaluate(out)
        return out

    __call__ = evaluate

    def loss(self, batch_inputs: Sequence[Sequence], batch_targets: Sequence) -> Node:
        """
        Sum of squared errors over a batch, as a single graph root.

            L = Σ_k (evaluate(x_k)[0] - y_k)^2
        """
        if len(batch_inputs) != len(batch_targets):
            raise ValueError(
                f"batch has {len(batch_inputs)} inputs but {len(batch_targets)} targets"
            )
        total = leaf(0.0)
        for x, y in zip(batch_inputs, batch_targets):
            out = self.evaluate(x)[0]
            total = add(total, power(subtract(out, y), 2))
        logger.debug("loss: batch=%d, value=%.6f", len(batch_inputs), float(total.value))
        return total

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"Network of [{', '.join(str(layer) for layer in self.layers)}]"
