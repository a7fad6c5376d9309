from collections import deque
import logging
import math

from .lexer import Operation
from .util import StackUnderflow, DivisionByZero, InvalidPower


logger = logging.getLogger(__name__)


def _has_fraction(x):
    '''
    Return True unless x is a finite whole number.
    '''
    return not math.isfinite(x) or math.modf(x)[0] != 0


def _power(base, exponent):
    '''
    Real-valued exponentiation that saturates to infinity like C pow.

    Python raises instead for 0 to a negative power and on overflow.
    '''
    try:
        return base ** exponent
    except (ZeroDivisionError, OverflowError):
        odd = not _has_fraction(exponent) and exponent % 2 == 1
        if odd and math.copysign(1, base) < 0:
            return -math.inf
        return math.inf


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Holds a stack of floats, top of the stack last. Binary operations pop
    the right hand side first, then the left hand side, and are *not*
    atomic: whatever they popped before failing stays popped.

    - add, diff, mul, pow: on underflow, the lone operand (if any) is gone.
    - div: a zero divisor fails after popping it, before touching the
      dividend.
    - pow: both operands are popped before the operands are checked.
    '''

    # Operation to the name of the method running it.
    OPERATIONS = {
        Operation.ADD: 'add',
        Operation.DIFF: 'diff',
        Operation.MUL: 'mul',
        Operation.DIV: 'div',
        Operation.POW: 'pow',
    }

    def __init__(self, *values):
        '''
        Create stack machine, optionally pre-populated, bottom first.
        '''
        self.stack = deque(float(value) for value in values)

    def __len__(self):
        return len(self.stack)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__,
                               ', '.join(map(repr, self.stack)))

    def values(self):
        '''
        Return a copy of the stack, bottom first.
        '''
        return list(self.stack)

    def push(self, value):
        '''
        Push value onto the top of the stack.
        '''
        self.stack.append(float(value))

    def pop(self):
        '''
        Pop and return the value on top of the stack.
        '''
        return self._popstack('stack is empty')

    def _popstack(self, message):
        if not self.stack:
            raise StackUnderflow(message)
        return self.stack.pop()

    def _operand(self):
        return self._popstack('not enough elements in the stack')

    def apply(self, operation):
        '''
        Run binary operation on the top two elements of the stack.
        '''
        logger.debug('%s on %r', operation.value, self)
        getattr(self, type(self).OPERATIONS[operation])()

    def add(self):
        rhs = self._operand()
        lhs = self._operand()
        self.push(lhs + rhs)

    def diff(self):
        rhs = self._operand()
        lhs = self._operand()
        self.push(lhs - rhs)

    def mul(self):
        rhs = self._operand()
        lhs = self._operand()
        self.push(lhs * rhs)

    def div(self):
        rhs = self._operand()
        if rhs == 0:
            raise DivisionByZero('cannot divide by 0')
        lhs = self._operand()
        self.push(lhs / rhs)

    def pow(self):
        rhs = self._operand()
        lhs = self._operand()
        if lhs == 0 and rhs == 0:
            raise InvalidPower('cannot raise 0 to the power of 0')
        if lhs < 0 and _has_fraction(rhs):
            raise InvalidPower('cannot raise a negative number to a '
                               'fractional exponent')
        self.push(_power(lhs, rhs))
