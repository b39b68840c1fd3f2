import math
import numpy as np
import pytest

from aad_descent.aad import (begin, constant, add, subtract, multiply, divide, power,
                             exp, log, maximum, compute_derivatives, value_and_grad,
                             grad, gradient_check, get_graph_stats,
                             DivisionByZero, NumericDomainError, SessionMismatch)


def test_add_value_and_derivatives():
    tape = begin()
    a = constant(tape, 2.5)
    b = constant(tape, -4.0)
    y = add(a, b)
    compute_derivatives(y)
    assert y.value == a.value + b.value
    assert a.derivative == 1.0
    assert b.derivative == 1.0
    assert y.derivative == 1.0


def test_subtract_local_partials():
    tape = begin()
    y = subtract(constant(tape, 5.0), constant(tape, 3.0))
    assert y.value == 2.0
    assert y.ddparents == (1.0, -1.0)


def test_product_rule():
    tape = begin()
    a = constant(tape, 3.0)
    b = constant(tape, 7.0)
    y = multiply(a, b)
    compute_derivatives(y)
    assert y.value == 21.0
    assert a.derivative == b.value
    assert b.derivative == a.value


def test_divide_partials():
    tape = begin()
    x = constant(tape, 4.0)
    y = constant(tape, 2.0)
    z = divide(x, y)
    compute_derivatives(z)
    assert z.value == 2.0
    assert x.derivative == pytest.approx(0.5)
    assert y.derivative == pytest.approx(-1.0)


def test_shared_subexpression_sums_paths():
    tape = begin()
    a = constant(tape, 3.0)
    y = add(multiply(a, a), a)
    compute_derivatives(y)
    assert y.value == 12.0
    assert a.derivative == pytest.approx(2 * a.value + 1)


def test_diamond_dependency():
    # y = (a + b) * (a - b) = a^2 - b^2
    tape = begin()
    a = constant(tape, 5.0)
    b = constant(tape, 2.0)
    y = multiply(add(a, b), subtract(a, b))
    compute_derivatives(y)
    assert y.value == 21.0
    assert a.derivative == pytest.approx(10.0)
    assert b.derivative == pytest.approx(-4.0)


def test_divide_by_zero_raises():
    tape = begin()
    with pytest.raises(DivisionByZero) as err:
        divide(constant(tape, 1.0), constant(tape, 0.0))
    assert err.value.numerator == 1.0
    # Still a ZeroDivisionError for callers catching the builtin
    assert isinstance(err.value, ZeroDivisionError)


def test_divide_by_zero_records_nothing():
    tape = begin()
    one = constant(tape, 1.0)
    zero = constant(tape, 0.0)
    with pytest.raises(DivisionByZero):
        divide(one, zero)
    assert len(tape) == 2


@pytest.mark.parametrize("bad", [-1.0, 0.0, float("nan")])
def test_log_domain_errors(bad):
    tape = begin()
    with pytest.raises(NumericDomainError) as err:
        log(constant(tape, bad))
    assert err.value.op == "log"


def test_exp_nan_raises():
    tape = begin()
    with pytest.raises(NumericDomainError):
        exp(constant(tape, float("nan")))


def test_exp_overflow_is_infinite_not_error():
    tape = begin()
    y = exp(constant(tape, 1000.0))
    assert math.isinf(y.value)


def test_exp_self_derivative():
    tape = begin()
    x = constant(tape, 1.5)
    y = exp(x)
    compute_derivatives(y)
    assert y.ddparents == (y.value,)
    assert x.derivative == pytest.approx(math.exp(1.5))


def test_log_exp_round_trip():
    tape = begin()
    x = constant(tape, 0.75)
    y = log(exp(x))
    compute_derivatives(y)
    assert y.value == pytest.approx(0.75)
    assert x.derivative == pytest.approx(1.0)


def test_power_zero_base_short_circuit():
    tape = begin()
    y = power(constant(tape, 0.0), constant(tape, 2.0))
    assert y.value == 0.0
    assert y.parents == ()
    assert y.op_tag == "const"


def test_power_zero_to_zero_is_zero():
    tape = begin()
    y = power(constant(tape, 0.0), constant(tape, 0.0))
    assert y.value == 0.0


def test_power_value_and_partials():
    tape = begin()
    a = constant(tape, 2.0)
    b = constant(tape, 3.0)
    y = power(a, b)
    compute_derivatives(y)
    assert y.value == pytest.approx(8.0)
    assert a.derivative == pytest.approx(3.0 * 2.0 ** 2)
    assert b.derivative == pytest.approx(8.0 * math.log(2.0))


def test_power_negative_base_raises():
    tape = begin()
    with pytest.raises(NumericDomainError):
        power(constant(tape, -2.0), constant(tape, 2.0))


def test_max_tie_break_favours_first():
    tape = begin()
    y = maximum(constant(tape, 3.0), constant(tape, 3.0))
    assert y.value == 3.0
    assert y.ddparents == (1.0, 0.0)


def test_max_second_larger():
    tape = begin()
    a = constant(tape, 1.0)
    b = constant(tape, 4.0)
    y = maximum(a, b)
    compute_derivatives(y)
    assert y.value == 4.0
    assert a.derivative == 0.0
    assert b.derivative == 1.0


def test_unreached_nodes_have_no_derivative():
    tape = begin()
    a = constant(tape, 2.0)
    b = constant(tape, 3.0)
    unused = multiply(b, b)
    y = multiply(a, a)
    later = add(y, b)
    compute_derivatives(y)
    assert a.derivative == pytest.approx(4.0)
    assert not b.has_derivative
    assert b.derivative == 0.0
    assert not unused.has_derivative
    assert not later.has_derivative


def test_repeated_pass_does_not_accumulate():
    tape = begin()
    a = constant(tape, 2.0)
    y = multiply(a, a)
    compute_derivatives(y)
    compute_derivatives(y)
    assert a.derivative == pytest.approx(4.0)


def test_operator_overloading_matches_functions():
    tape = begin()
    x = constant(tape, 2.0)
    y = constant(tape, 5.0)
    z = (x * y + 3.0) / y - x ** 2 + (-x)
    compute_derivatives(z)
    # z = x + 3/y - x^2 - x
    assert z.value == pytest.approx(2.0 + 3.0 / 5.0 - 4.0 - 2.0)
    assert x.derivative == pytest.approx(1.0 - 2 * 2.0 - 1.0)
    assert y.derivative == pytest.approx(-3.0 / 25.0)


def test_stale_handle_rejected_after_reset():
    tape = begin()
    a = constant(tape, 1.0)
    tape.reset()
    with pytest.raises(SessionMismatch):
        add(a, constant(tape, 1.0))
    with pytest.raises(SessionMismatch):
        a.value


def test_mixing_tapes_rejected():
    t1 = begin()
    t2 = begin()
    with pytest.raises(SessionMismatch):
        multiply(constant(t1, 1.0), constant(t2, 2.0))


def test_dot_log_gradient():
    # log(sum x_i*y_i): d/dx_i = y_i / s, d/dy_i = x_i / s
    xs = [1.0, 2.0, 3.0, 4.0]
    ys = [2.0, 3.0, 4.0, 5.0]
    f = lambda v: log(sum((v[i] * v[i + 4] for i in range(4)), v[0] * 0.0))
    value, g = value_and_grad(f)(xs + ys)
    s = sum(a * b for a, b in zip(xs, ys))
    assert value == pytest.approx(math.log(s))
    np.testing.assert_allclose(g, np.array(ys + xs) / s)


def test_grad_helper():
    g = grad(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0])
    np.testing.assert_allclose(g, [4.0, 3.0])


def test_gradient_check_on_composite():
    f = lambda v: log(add(exp(v[0] / v[1]), power(v[2], v[0])))
    assert gradient_check(f, [0.7, 1.3, 2.1])


def test_value_and_grad_requires_advar_output():
    with pytest.raises(TypeError):
        value_and_grad(lambda xs: 1.0)([1.0])


def test_graph_stats_counts_fan_out():
    tape = begin()
    a = constant(tape, 3.0)
    add(multiply(a, a), a)
    stats = get_graph_stats(tape)
    assert stats['nodes'] == 3
    assert stats['edges'] == 4
    assert stats['max_fan_out'] == 3
    assert stats['operations'] == {'const': 1, 'mul': 1, 'add': 1}


def test_max_alias():
    from aad_descent import aad

    tape = aad.begin()
    y = aad.max(aad.constant(tape, 1.0), 2.0)
    assert y.value == 2.0
    assert y.ddparents == (0.0, 1.0)
