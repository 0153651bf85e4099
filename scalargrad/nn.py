"""
Neural network building blocks for scalargrad.

Every weight is its own scalar Value, so a forward pass builds an ordinary
computation graph that backward() can differentiate.
"""

import numpy as np
from scalargrad.engine import Value, zero_grad


class Module:
    """
    Base class for all neural network modules.

    Provides common functionality for managing parameters and gradients.
    """

    def zero_grad(self):
        """
        Reset all parameter gradients to zero.

        Call this before each backward pass; backward() itself only accumulates.
        """
        zero_grad(self.parameters())

    def parameters(self):
        """
        Return a list of all trainable parameters (weights and biases).

        Override this in subclasses to return actual parameters.
        """
        return []


class Neuron(Module):
    """
    A single neuron: tanh(w . x + b).

    Args:
        nin: Number of inputs
        nonlin: If True, apply tanh to the weighted sum (default: True)
        rng: Optional numpy Generator used to draw the initial parameters
        label: Prefix for parameter labels

    Example:
        >>> n = Neuron(3)
        >>> y = n([1.0, -2.0, 0.5])  # a single Value in (-1, 1)
    """

    def __init__(self, nin, nonlin=True, rng=None, label=""):
        rng = rng if rng is not None else np.random.default_rng()
        self.nin = nin
        self.nonlin = nonlin
        self.w = [Value(rng.uniform(-1, 1), label=f"{label}.w{i}") for i in range(nin)]
        self.b = Value(rng.uniform(-1, 1), label=f"{label}.b")

    def __call__(self, x):
        assert len(x) == self.nin, f"expected {self.nin} inputs, got {len(x)}"

        act = Value(0.0) + self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * xi

        return act.tanh() if self.nonlin else act

    def parameters(self):
        return self.w + [self.b]

    def __repr__(self):
        return f"{'Tanh' if self.nonlin else 'Linear'}Neuron({self.nin})"


class Layer(Module):
    """
    A fully-connected layer of ``nout`` independent neurons.

    Calling a layer on ``nin`` inputs returns a list of ``nout`` Values.
    """

    def __init__(self, nin, nout, nonlin=True, rng=None, label=""):
        self.nin = nin
        self.nout = nout
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng, label=f"{label}.N{i}")
                        for i in range(nout)]

    def __call__(self, x):
        assert len(x) == self.nin, f"expected {self.nin} inputs, got {len(x)}"
        return [n(x) for n in self.neurons]

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer([{', '.join(str(n) for n in self.neurons)}])"


class MLP(Module):
    """
    Multi-Layer Perceptron: a sequence of fully-connected layers.

    Every layer uses tanh, including the last one, so outputs lie in (-1, 1).
    Pass ``nonlin_output=False`` for an unsquashed output layer.

    Args:
        nin: Number of input features
        nouts: List of output sizes for each layer
               Example: [4, 4, 1] creates 3 layers: input→4→4→1
        nonlin_output: Whether the last layer applies tanh (default: True)
        seed: Optional seed for reproducible initialization

    Example:
        >>> mlp = MLP(3, [4, 4, 1])
        >>> ypred = mlp([2.0, 3.0, -1.0])[0]
        >>> loss = (ypred - 1.0) ** 2
        >>> mlp.zero_grad()
        >>> loss.backward()
        >>> for p in mlp.parameters():
        ...     p.data -= 0.01 * p.grad
    """

    def __init__(self, nin, nouts, nonlin_output=True, seed=None):
        layer_sizes = [nin] + list(nouts)
        rng = np.random.default_rng(seed)

        self.layers = []
        for i in range(len(nouts)):
            is_output_layer = (i == len(nouts) - 1)
            layer = Layer(
                nin=layer_sizes[i],
                nout=layer_sizes[i + 1],
                nonlin=nonlin_output or not is_output_layer,
                rng=rng,
                label=f"L{i}",
            )
            self.layers.append(layer)

    def __call__(self, x):
        """
        Forward pass: pass input through all layers sequentially.

        Args:
            x: Sequence of ``nin`` Values or plain numbers

        Returns:
            List of output Values, one per neuron of the last layer
        """
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self):
        """Return all trainable parameters from all layers."""
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        layer_str = ' → '.join(f"{layer.nin}→{layer.nout}" for layer in self.layers)
        return f"MLP[{layer_str}]"
