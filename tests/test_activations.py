import math

from dola.activations import Relu, SoftMax
from dola.primitives import F8, F16, F32


def test_relu_zeroes_negatives():
    out = Relu().forward([F32(-1.5), F32(0.0), F32(2.25)])
    assert out == [F32(0.0), F32(0.0), F32(2.25)]


def test_relu_keeps_kind():
    out = Relu().forward([F8(-2.0), F8(3.0)])
    assert all(isinstance(v, F8) for v in out)
    assert out == [F8(0.0), F8(3.0)]


def test_relu_empty():
    assert Relu().forward([]) == []


def test_relu_output_non_negative():
    values = [F32(x / 4) for x in range(-8, 9)]
    out = Relu().forward(values)
    assert len(out) == len(values)
    assert all(float(v) >= 0.0 for v in out)


def test_softmax_equal_inputs():
    out = SoftMax().forward([F32(1.0), F32(1.0)])
    assert out == [F32(0.5), F32(0.5)]


def test_softmax_sums_to_one():
    out = SoftMax().forward([F32(0.3), F32(1.7), F32(2.0), F32(4.1)])
    assert math.isclose(sum(float(v) for v in out), 1.0, rel_tol=1e-6)


def test_softmax_preserves_order():
    out = SoftMax().forward([F32(0.5), F32(2.0), F32(1.0)])
    assert out[1] > out[2] > out[0]


def test_softmax_keeps_kind():
    out = SoftMax().forward([F16(1.0), F16(3.0)])
    assert all(isinstance(v, F16) for v in out)
    assert out[1] > out[0]


def test_softmax_zero_sum_is_nan():
    out = SoftMax().forward([F32(0.0), F32(0.0)])
    assert len(out) == 2
    assert math.isnan(float(out[0]))
    assert math.isnan(float(out[1]))


def test_softmax_empty():
    assert SoftMax().forward([]) == []