import numpy as np
import pytest

from scalargrad.engine import Value
from scalargrad.nn import MLP, Layer, Module, Neuron


def test_module_defaults():
    m = Module()
    assert m.parameters() == []
    m.zero_grad()


def test_neuron_forward_matches_manual_computation(rng):
    n = Neuron(3, rng=rng, label="n")
    x = [2.0, 3.0, -1.0]
    out = n(x)

    w = [p.data for p in n.w]
    expected = np.tanh(n.b.data + sum(wi * xi for wi, xi in zip(w, x)))
    assert out.data == pytest.approx(expected)
    assert out._op == 'tanh'
    assert [p.label for p in n.parameters()] == ["n.w0", "n.w1", "n.w2", "n.b"]


def test_linear_neuron_skips_tanh(rng):
    n = Neuron(2, nonlin=False, rng=rng)
    out = n([1.0, 1.0])
    assert out._op == '+'
    assert out.data == pytest.approx(n.b.data + n.w[0].data + n.w[1].data)


def test_neuron_parameters_start_in_unit_interval(rng):
    n = Neuron(50, rng=rng)
    assert all(-1.0 <= p.data < 1.0 for p in n.parameters())


def test_neuron_rejects_wrong_input_width(rng):
    with pytest.raises(AssertionError):
        Neuron(3, rng=rng)([1.0, 2.0])


def test_neuron_gradients_flow_to_weights(rng):
    n = Neuron(2, rng=rng)
    x = [Value(0.5), Value(-1.5)]
    out = n(x)
    out.backward()

    local = 1 - out.data ** 2
    assert n.b.grad == pytest.approx(local)
    assert n.w[0].grad == pytest.approx(local * 0.5)
    assert n.w[1].grad == pytest.approx(local * -1.5)
    assert x[0].grad == pytest.approx(local * n.w[0].data)


def test_layer_shapes(rng):
    layer = Layer(3, 4, rng=rng, label="L0")
    out = layer([1.0, 2.0, 3.0])
    assert len(out) == 4
    assert all(isinstance(o, Value) for o in out)
    assert len(layer.parameters()) == 4 * (3 + 1)
    with pytest.raises(AssertionError):
        layer([1.0])


def test_mlp_parameter_count():
    mlp = MLP(3, [4, 4, 1])
    assert len(mlp.parameters()) == (3 + 1) * 4 + (4 + 1) * 4 + (4 + 1) * 1
    assert len({id(p) for p in mlp.parameters()}) == 41


def test_mlp_output_is_squashed():
    mlp = MLP(3, [4, 4, 1], seed=0)
    out = mlp([2.0, 3.0, -1.0])
    assert len(out) == 1
    assert -1.0 < out[0].data < 1.0


def test_mlp_linear_output_layer():
    mlp = MLP(2, [3, 1], nonlin_output=False, seed=0)
    assert mlp([1.0, 1.0])[0]._op == '+'
    assert mlp.layers[0].neurons[0].nonlin


def test_mlp_seed_is_reproducible():
    a = MLP(3, [4, 1], seed=7)
    b = MLP(3, [4, 1], seed=7)
    c = MLP(3, [4, 1], seed=8)
    assert [p.data for p in a.parameters()] == [p.data for p in b.parameters()]
    assert [p.data for p in a.parameters()] != [p.data for p in c.parameters()]


def test_mlp_zero_grad_resets_only_parameters():
    mlp = MLP(2, [2, 1], seed=0)
    x = [Value(1.0), Value(-1.0)]
    loss = (mlp(x)[0] - 1.0) ** 2
    loss.backward()
    assert any(p.grad != 0.0 for p in mlp.parameters())

    mlp.zero_grad()
    assert all(p.grad == 0.0 for p in mlp.parameters())
    assert x[0].grad != 0.0


def test_mlp_repr():
    assert repr(MLP(3, [4, 4, 1], seed=0)) == "MLP[3→4 → 4→4 → 4→1]"
