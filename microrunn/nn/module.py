"""
Base class for everything in the network builder that owns parameters.
"""

from abc import ABC, abstractmethod
from typing import List

from ..engine.node import Node


class Module(ABC):
    """
    Abstract base class for neurons, layers and networks.

    Subclasses expose their parameter leaves in a stable order; an external
    optimizer reads `.value`/`.grad` from them after backward().
    """

    @abstractmethod
    def parameters(self) -> List[Node]:
        """Return parameter leaf nodes in order."""
        pass

    def zero_grad(self) -> None:
        """Reset the gradient of every parameter to zero."""
        for p in self.parameters():
            p.grad = 0.0
