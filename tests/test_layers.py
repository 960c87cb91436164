import random

import pytest

from dola.layers import DenseLayer, Neuron
from dola.primitives import F16, F32


def test_neuron_sum_worked_example():
    neuron = Neuron([F32(1), F32(2)], F32(0.5))
    assert neuron.sum([F32(3), F32(4)]) == F32(11.5)


def test_neuron_zero_weights_gives_bias():
    neuron = Neuron([F32(0)] * 3, F32(0.25))
    assert neuron.sum([F32(1), F32(2), F32(3)]) == F32(0.25)


def test_neuron_sum_rejects_wrong_shape():
    neuron = Neuron([F32(1), F32(1)], F32(0))
    with pytest.raises(ValueError, match="invalid input shape"):
        neuron.sum([F32(1)])


def test_neuron_sum_keeps_kind():
    neuron = Neuron([F16(0.5)], F16(0.0))
    result = neuron.sum([F16(2.0)])
    assert isinstance(result, F16)
    assert result == F16(1.0)


def test_neuron_params_counts_bias():
    neuron = Neuron.random(5, F32, random.Random(1))
    assert neuron.params() == len(neuron.weights) + 1
    assert len(neuron.weights) == 5


def test_neuron_random_values_in_unit_interval():
    neuron = Neuron.random(50, F16, random.Random(3))
    values = neuron.weights + [neuron.bias]
    assert all(isinstance(v, F16) for v in values)
    assert all(0.0 <= float(v) <= 1.0 for v in values)


def test_neuron_random_is_deterministic_with_seed():
    first = Neuron.random(4, F32, random.Random(7))
    second = Neuron.random(4, F32, random.Random(7))
    assert first.weights == second.weights
    assert first.bias == second.bias


def test_dense_layer_output_length_matches_neuron_count():
    layer = DenseLayer("l", 3, [4, 1], F32, random.Random(0))
    out = layer.forward([F32(0.5)] * 4)
    assert len(out) == 3


def test_dense_layer_forward_matches_neurons():
    layer = DenseLayer("l", 2, [2, 2], F32, random.Random(5))
    inputs = [F32(0.1), F32(0.2), F32(0.3), F32(0.4)]
    assert layer.forward(inputs) == [n.sum(inputs) for n in layer.neurons]


def test_dense_layer_accepts_flattened_input():
    layer = DenseLayer("l0", 1, [28, 28], F32, random.Random(2))
    out = layer.forward([F32(0.0)] * (28 * 28))
    assert out == [layer.neurons[0].bias]


def test_dense_layer_rejects_wrong_shape():
    layer = DenseLayer("hidden", 2, [3, 1], F32, random.Random(0))
    with pytest.raises(ValueError, match="hidden"):
        layer.forward([F32(1.0)] * 2)


def test_dense_layer_params():
    layer = DenseLayer("l", 2, [3, 1], F32, random.Random(0))
    assert layer.params() == 8


def test_dense_layer_empty_input_dim_raises():
    with pytest.raises(ValueError):
        DenseLayer("l", 2, [], F32)


def test_dense_layer_attributes():
    layer = DenseLayer("name", 1, [2, 3])
    assert layer.layer_name == "name"
    assert layer.input_dim == [2, 3]
    assert layer.freeze is False
    assert len(layer.neurons[0].weights) == 6