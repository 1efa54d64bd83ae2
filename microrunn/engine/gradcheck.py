"""
Finite-difference verification of reverse-mode gradients.

Bumping formula (forward difference, as in scipy.optimize.approx_fprime):
    dF/dx_i ≈ [F(x + ε e_i) - F(x)] / ε

The autodiff result comes from one backward() over a graph built from the
same inputs; both are evaluated at identical points.
"""

from typing import Callable, Dict, List, Sequence

import numpy as np
from scipy.optimize import approx_fprime

from .node import Node
from .ops import leaf
from .backward import backward


Builder = Callable[[List[Node]], Node]


def _forward(build: Builder, x: np.ndarray) -> float:
    """Build the graph from fresh leaves and return the root value."""
    return float(build([leaf(float(v)) for v in x]).value)


def numerical_grad(build: Builder, values: Sequence[float], epsilon: float = 1e-6) -> np.ndarray:
    """
    Gradient of build(leaves).value w.r.t. each input by bumping.

    Args:
        build: maps a list of leaf nodes to a scalar root node
        values: point at which to differentiate
        epsilon: bump size

    Returns:
        np.ndarray of partials, in input order
    """
    x0 = np.asarray(values, dtype=np.float64)
    return approx_fprime(x0, lambda x: _forward(build, x), epsilon)


def analytic_grad(build: Builder, values: Sequence[float]) -> np.ndarray:
    """Gradient of build(leaves).value via one reverse pass."""
    xs = [leaf(float(v)) for v in values]
    backward(build(xs))
    return np.array([x.grad for x in xs], dtype=np.float64)


def check_grads(build: Builder, values: Sequence[float],
                atol: float = 1e-4, epsilon: float = 1e-6) -> Dict:
    """
    Compare autodiff gradients against finite differences.

    Returns:
        {
            'analytic': np.ndarray,   # reverse-mode partials
            'numeric': np.ndarray,    # bumped partials
            'max_abs_err': float,     # max |analytic - numeric|
            'ok': bool                # max_abs_err <= atol
        }
    """
    analytic = analytic_grad(build, values)
    numeric = numerical_grad(build, values, epsilon=epsilon)
    max_abs_err = float(np.max(np.abs(analytic - numeric))) if analytic.size else 0.0
    return {
        'analytic': analytic,
        'numeric': numeric,
        'max_abs_err': max_abs_err,
        'ok': bool(max_abs_err <= atol),
    }
