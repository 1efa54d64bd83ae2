# microrunn/nn/__init__.py

from .init import InitConfig, make_rng, sample
from .module import Module
from .mlp import Neuron, Layer, Network

__all__ = [
    "InitConfig", "make_rng", "sample",
    "Module",
    "Neuron", "Layer", "Network",
]
