"""
XOR loss and gradients for a 2-[3,3,1] network.

Builds the squared-error loss over the four XOR examples, runs one reverse
pass and prints the graph summary and the parameter gradients.
"""

import logging

from microrunn import Network, InitConfig, backward
from microrunn.engine.graph_utils import print_graph_summary


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    inputs = [
        [0.0, 0.0],
        [0.0, 1.0],
        [1.0, 0.0],
        [1.0, 1.0],
    ]
    targets = [0.0, 1.0, 1.0, 0.0]

    model = Network(2, [3, 3, 1], config=InitConfig(seed=42))
    loss = model.loss(inputs, targets)
    backward(loss)

    print_graph_summary(loss)
    print(f"Loss: {float(loss.value):.6f}")
    for i, p in enumerate(model.parameters()):
        print(f"  param {i:2d}: value={float(p.value):+.6f}  grad={float(p.grad):+.6f}")


if __name__ == "__main__":
    main()
