import math

import numpy as np
import pytest

from microrunn.engine import (
    Node,
    OpKind,
    leaf,
    add,
    multiply,
    power,
    tanh,
    negate,
    subtract,
)


def test_add_and_multiply_values():
    for a_val, b_val in [(2.0, -3.0), (0.0, 5.5), (-1.25, -4.0), (1e6, 1e-6)]:
        a, b = leaf(a_val), leaf(b_val)
        assert add(a, b).value == a.value + b.value
        assert multiply(a, b).value == a.value * b.value


def test_construction_leaves_gradients_at_zero():
    a, b = leaf(2.0), leaf(-3.0)
    out = tanh(add(multiply(a, b), power(b, 2)))
    for node in (a, b, out):
        assert node.grad == 0.0


def test_operands_and_op_tags_are_recorded():
    a, b = leaf(2.0), leaf(-3.0)
    s = add(a, b)
    assert s.op.kind is OpKind.ADD
    assert s.operands == (a, b)
    assert s.operands[0] is a

    p = power(a, 3)
    assert p.op.kind is OpKind.POW
    assert p.op.exponent == 3.0
    assert str(p.op) == "pow(3)"
    assert p.operands == (a,)

    assert a.is_leaf
    assert a.operands == ()


def test_tanh_stays_in_open_interval():
    for x in np.linspace(-10.0, 10.0, 41):
        y = tanh(leaf(float(x))).value
        assert -1.0 < y < 1.0
    assert tanh(leaf(2.0)).value == pytest.approx(0.96402, abs=1e-5)


def test_negate_is_multiply_by_minus_one():
    a = leaf(4.0)
    n = negate(a)
    assert n.value == -4.0
    assert n.op.kind is OpKind.MUL
    assert n.operands[0] is a
    assert n.operands[1].value == -1.0


def test_subtract_is_add_of_negation():
    a, b = leaf(5.0), leaf(3.0)
    d = subtract(a, b)
    assert d.value == 2.0
    assert d.op.kind is OpKind.ADD
    assert d.operands[0] is a
    assert d.operands[1].op.kind is OpKind.MUL


def test_operator_overloading():
    a, b = leaf(2.0), leaf(-3.0)
    assert (a + b).value == -1.0
    assert (a * b).value == -6.0
    assert (a - b).value == 5.0
    assert (-a).value == -2.0
    assert (a ** 2).value == 4.0
    assert (1 + a).value == 3.0
    assert (3 * a).value == 6.0
    assert (10 - a).value == 8.0
    assert a.tanh().value == pytest.approx(math.tanh(2.0))


def test_plain_numbers_become_leaves():
    a = leaf(2.0)
    out = add(a, 1.5)
    assert isinstance(out.operands[1], Node)
    assert out.operands[1].is_leaf
    assert out.value == 3.5


def test_power_of_negative_base_is_nan_not_error():
    x = leaf(-8.0)
    y = power(x, 0.5)
    assert math.isnan(y.value)
    # NaN flows onward like any other value
    assert math.isnan(add(y, leaf(1.0)).value)


def test_integer_power_of_negative_base():
    assert power(leaf(-2.0), 3).value == -8.0


def test_leaf_rejects_non_numbers():
    for bad in ("3", None, [1.0], leaf(1.0)):
        with pytest.raises(TypeError):
            leaf(bad)


def test_power_rejects_non_real_exponent():
    with pytest.raises(TypeError):
        power(leaf(2.0), "2")
    with pytest.raises(TypeError):
        power(leaf(2.0), leaf(2.0))


def test_node_value_is_read_only():
    a = leaf(1.0)
    with pytest.raises(AttributeError):
        a.value = 2.0
    with pytest.raises(AttributeError):
        a.operands = ()


def test_nodes_use_identity_not_value():
    a, b = leaf(1.0), leaf(1.0)
    assert a is not b
    assert a != b
    assert len({a, b}) == 2


def test_values_are_double_precision():
    assert isinstance(leaf(1).value, np.float64)
    assert isinstance(add(leaf(1), leaf(2)).value, np.float64)


def test_repr():
    r = repr(leaf(3.0, label="x"))
    assert "value=3.0" in r
    assert "grad=0.0" in r
    assert "label='x'" in r
