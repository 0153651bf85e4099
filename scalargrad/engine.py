import logging

import numpy as np

logger = logging.getLogger(__name__)


class Value:
    """
    Wraps a single scalar and tracks operations for automatic differentiation.

    Every arithmetic operation on Values returns a new Value that remembers its
    parents and a small closure describing how to push its gradient back into
    them. Calling backward() on the final Value (usually a loss) fills in
    ``grad`` for every Value it depends on.

    Example:
        >>> a = Value(2.0, label='a')
        >>> b = Value(-3.0, label='b')
        >>> f = (a * b + 10.0).tanh()
        >>> f.backward()
        >>> round(float(a.grad), 5)  # df/da = b * (1 - tanh(4)^2)
        -0.00402
    """

    def __init__(self, data, _children=(), _op='', label=""):
        """
        Initialize a Value object.

        Args:
            data: The scalar data (int, float or 0-d numpy value)
            _children: Tuple of parent Value objects (internal use for autograd)
            _op: String describing the operation that created this Value (internal)
            label: Optional name for debugging and visualization
        """
        assert np.ndim(data) == 0, f"Value only wraps scalars, got shape {np.shape(data)}"

        # float64 so that singular operations give inf/nan instead of raising
        self.data = np.float64(data)
        self.grad = 0.0
        self.label = label

        # Internal variables for building the computational graph
        self._backward = None     # Set by operators, None for leaves
        self._prev = tuple(_children)  # Parents, in operand order
        self._op = _op

    @property
    def value(self):
        """The forward-computed scalar (alias of ``data``)."""
        return self.data

    @value.setter
    def value(self, new):
        self.data = np.float64(new)

    def __add__(self, other):
        """
        Addition: d(a+b)/da = 1, d(a+b)/db = 1.

        Example:
            >>> c = Value(1.5) + 2  # c.data = 3.5
        """
        other = other if isinstance(other, Value) else Value(other)
        out = Value(self.data + other.data, (self, other), '+', label=self.label + other.label)

        def _backward():
            self.grad += out.grad
            other.grad += out.grad

        out._backward = _backward
        return out

    def __mul__(self, other):
        """
        Multiplication: d(a*b)/da = b, d(a*b)/db = a.

        Example:
            >>> c = Value(3.0) * Value(4.0)  # c.data = 12.0
        """
        other = other if isinstance(other, Value) else Value(other)
        out = Value(self.data * other.data, (self, other), '*', label=self.label + other.label)

        def _backward():
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad

        out._backward = _backward
        return out

    def __pow__(self, other):
        """
        Power with a fixed integer exponent.

        Backward pass uses the power rule d(x^n)/dx = n * x^(n-1). Nothing is
        guarded: a zero base with a non-positive exponent yields inf/nan.

        Example:
            >>> y = Value(3.0) ** 2  # y.data = 9.0
        """
        assert isinstance(other, (int, np.integer)) and not isinstance(other, bool), \
            "Only supporting integer powers"

        out = Value(self.data ** other, (self,), f'**{other}')

        def _backward():
            self.grad += (other * self.data ** (other - 1)) * out.grad

        out._backward = _backward
        return out

    def tanh(self):
        """
        Hyperbolic tangent activation, squashing the input to (-1, 1).

        The derivative is written in terms of the output: 1 - tanh(x)^2.

        Example:
            >>> y = Value(0.0).tanh()  # y.data = 0.0
        """
        y = np.tanh(self.data)
        out = Value(y, (self,), 'tanh')

        def _backward():
            self.grad += (1.0 - y * y) * out.grad

        out._backward = _backward
        return out

    def backward(self):
        """
        Run reverse-mode differentiation rooted at this Value.

        Gradients are accumulated, not overwritten: reset them first
        (Module.zero_grad() or Value.zero_grad()) for a fresh pass.

        Example:
            >>> x = Value(2.0)
            >>> y = x * 3 + 1
            >>> y.backward()
            >>> float(x.grad)
            3.0
        """
        backward(self)

    def zero_grad(self):
        """Reset the gradient of this Value and of every Value it depends on."""
        zero_grad(topological_order(self))

    # Reverse and derived operations (use the basic operations defined above)

    def __neg__(self):
        """Negation: -x = x * -1"""
        return self * -1

    def __radd__(self, other):
        """Right addition: other + self (when other is not a Value)"""
        return self + other

    def __sub__(self, other):
        """Subtraction: a - b = a + (-b)"""
        other = other if isinstance(other, Value) else Value(other)
        return self + (-other)

    def __rsub__(self, other):
        """Right subtraction: other - self"""
        return other + (-self)

    def __rmul__(self, other):
        """Right multiplication: other * self (when other is not a Value)"""
        return self * other

    def __truediv__(self, other):
        """Division: a / b = a * b^(-1)"""
        other = other if isinstance(other, Value) else Value(other)
        return self * other**-1

    def __rtruediv__(self, other):
        """Right division: other / self"""
        return other * self**-1

    def __repr__(self):
        label_str = f"'{self.label}' " if self.label else ""
        op_str = f" from {self._op}" if self._op else ""
        return f"Value({label_str}data={self.data:.5f}, grad={self.grad:.5f}{op_str})"


def topological_order(root):
    """
    Return ``root`` and all of its ancestors in post-order.

    Every Value appears after all of its parents, and exactly once no matter
    how many paths lead to it. Visited tracking uses object identity (Value
    does not define __eq__/__hash__). An explicit stack replaces recursion so
    that deep graphs do not hit Python's recursion limit.
    """
    topo = []
    visited = {id(root)}
    stack = [(root, iter(root._prev))]
    while stack:
        v, parents = stack[-1]
        for child in parents:
            if id(child) not in visited:
                visited.add(id(child))
                stack.append((child, iter(child._prev)))
                break
        else:
            stack.pop()
            topo.append(v)
    return topo


def backward(root):
    """
    Seed ``root.grad`` with 1 and replay every local gradient rule from the
    root down to the leaves.

    Gradients are not reset here; callers that want a fresh pass must zero
    them first, since several roots sharing leaves may accumulate on purpose.
    """
    topo = topological_order(root)
    logger.debug("backward from %r over %d nodes", root, len(topo))

    root.grad = 1.0
    for v in reversed(topo):
        if v._backward is not None:
            v._backward()


def zero_grad(values):
    """Set ``grad`` to 0 on every given Value."""
    for v in values:
        v.grad = 0.0
