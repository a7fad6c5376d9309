'''
Stack machine tests
'''

import math

from polacco.lexer import Operation
from polacco.machine import Machine
from polacco.util import StackUnderflow, DivisionByZero, InvalidPower

from pytest import raises, mark


def test_new_populated():
    assert Machine(1, 2, 3, 4, 5).values() == [1, 2, 3, 4, 5]


def test_new_empty(machine):
    assert machine.values() == []
    assert len(machine) == 0


def test_values_is_a_copy():
    machine = Machine(1, 2)
    values = machine.values()
    values.append(3)
    assert machine.values() == [1, 2]


def test_pop_returns_top():
    machine = Machine(1, 2, 3)
    assert machine.pop() == 3
    assert machine.values() == [1, 2]


def test_pop_empty(machine):
    with raises(StackUnderflow, match='stack is empty'):
        machine.pop()


def test_push():
    machine = Machine(1, 2, 3)
    machine.push(4)
    assert machine.values() == [1, 2, 3, 4]
    assert all(isinstance(value, float) for value in machine.values())


@mark.parametrize('method,result', [
    ('add', 3 + 4),
    ('diff', 3 - 4),
    ('mul', 3 * 4),
    ('div', 3 / 4),
    ('pow', 3 ** 4),
])
def test_binary(method, result):
    machine = Machine(1, 2, 3, 4)
    getattr(machine, method)()
    assert machine.values() == [1, 2, result]


@mark.parametrize('operation', list(Operation))
def test_apply(operation):
    machine = Machine(6, 2)
    machine.apply(operation)
    assert len(machine) == 1


@mark.parametrize('method', ['add', 'diff', 'mul', 'div', 'pow'])
def test_binary_underflow_empty(method, machine):
    with raises(StackUnderflow, match='not enough elements in the stack'):
        getattr(machine, method)()
    assert machine.values() == []


@mark.parametrize('method', ['add', 'diff', 'mul', 'div', 'pow'])
def test_binary_underflow_consumes_operand(method):
    machine = Machine(1)
    with raises(StackUnderflow):
        getattr(machine, method)()
    assert machine.values() == []


def test_divide_by_zero_consumes_only_divisor():
    machine = Machine(7, 3, 0)
    with raises(DivisionByZero, match='cannot divide by 0'):
        machine.div()
    assert machine.values() == [7, 3]


def test_zero_to_the_zero_consumes_both():
    machine = Machine(7, 0, 0)
    with raises(InvalidPower, match='power of 0'):
        machine.pow()
    assert machine.values() == [7]


def test_negative_to_fraction():
    machine = Machine(-1, 0.3)
    with raises(InvalidPower, match='fractional exponent'):
        machine.pow()
    assert machine.values() == []


def test_negative_to_whole():
    machine = Machine(-1, 3)
    machine.pow()
    assert machine.values() == [-1]


def test_pow_saturates():
    machine = Machine(0, -1)
    machine.pow()
    assert machine.values() == [math.inf]

    machine = Machine(10, 400)
    machine.pow()
    assert machine.values() == [math.inf]

    machine = Machine(-10, 401)
    machine.pow()
    assert machine.values() == [-math.inf]


def test_negative_to_infinity():
    machine = Machine(-2, math.inf)
    with raises(InvalidPower):
        machine.pow()
