"""
scalargrad: a minimal reverse-mode autograd engine over scalar values.

This package provides automatic differentiation for scalar expressions and a
small tanh MLP trained by gradient descent on top of it.
"""

from scalargrad.engine import Value, backward, topological_order, zero_grad
from scalargrad import nn
from scalargrad.utils import draw_dot

__version__ = "0.1.0"
__all__ = ["Value", "backward", "topological_order", "zero_grad", "nn", "draw_dot"]
