"""
Inspection utilities for scalargrad computational graphs.

draw_dot() renders a graph with graphviz; format_topo()/print_topo() dump the
backward visiting order as text.
"""

import logging

from graphviz import Digraph

from scalargrad.engine import topological_order

logger = logging.getLogger(__name__)


def trace(root):
    """
    Collect every Value reachable from ``root`` and the edges between them.

    Args:
        root: A Value, typically the output of a computation

    Returns:
        tuple: (nodes, edges) where nodes is a set of Values and edges is a
        set of (parent, child) tuples

    Example:
        >>> from scalargrad.engine import Value
        >>> x = Value(2.0)
        >>> y = Value(3.0)
        >>> z = x * y + x
        >>> nodes, edges = trace(z)
        >>> len(nodes)  # x, y, x*y and z
        4
    """
    nodes, edges = set(), set()
    for v in topological_order(root):
        nodes.add(v)
        for child in v._prev:
            edges.add((child, v))
    return nodes, edges


def draw_dot(root, format='svg', rankdir='LR'):
    """
    Visualize the computational graph of a Value as a directed graph.

    Each Value becomes a record showing its label, data and gradient, and
    each derived Value gets an extra node for the operation that produced it.

    Args:
        root: A Value object (typically the loss) to visualize from
        format: Output format ('svg', 'png', 'pdf', etc.)
        rankdir: Graph direction - 'LR' (left-right) or 'TB' (top-bottom)

    Returns:
        Digraph: A graphviz Digraph object that can be rendered or displayed

    Example:
        >>> from scalargrad.engine import Value
        >>> x = Value(2.0, label='x')
        >>> z = (x * -3.0).tanh()
        >>> z.backward()
        >>> draw_dot(z).render('computation_graph')  # needs the graphviz binaries
    """
    assert rankdir in ['LR', 'TB'], "rankdir must be 'LR' (left-right) or 'TB' (top-bottom)"

    nodes, edges = trace(root)
    dot = Digraph(format=format, graph_attr={'rankdir': rankdir})

    for n in nodes:
        label = f'{{ {n.label} | data {n.data:.4f} | grad {n.grad:.4f} }}'
        dot.node(name=str(id(n)), label=label, shape='record')

        if n._op:
            dot.node(name=str(id(n)) + n._op, label=n._op)
            dot.edge(str(id(n)) + n._op, str(id(n)))

    for n1, n2 in edges:
        dot.edge(str(id(n1)), str(id(n2)) + n2._op)

    return dot


def format_topo(topo):
    """Format a list of Values one per line, in the given order."""
    lines = [f"Topo(Count = {len(topo)}) = {{"]
    lines += [f"\t{v!r}" for v in topo]
    lines.append("}")
    return "\n".join(lines)


def print_topo(root, level=logging.DEBUG):
    """Log the backward visiting order of ``root`` (root first)."""
    logger.log(level, "%s", format_topo(list(reversed(topological_order(root)))))
