import math


class RPNError(Exception):
    '''
    Recoverable calculator error. Hosts report it and carry on.
    '''
    pass


class UnexpectedCharacter(RPNError):
    def __init__(self, char, position):
        super().__init__('unexpected character: {}'.format(char))
        self.char = char
        self.position = position


class NumberOutOfRange(RPNError):
    def __init__(self, literal):
        super().__init__('parsing "{}": value out of range'.format(literal))
        self.literal = literal


class StackUnderflow(RPNError):
    pass


class DivisionByZero(RPNError):
    pass


class InvalidPower(RPNError):
    pass


def format_value(value):
    '''
    Format a stack value for display.

    Integral values print without the trailing .0, like Go's %v would.
    '''
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        if value == 0 and math.copysign(1, value) < 0:
            return '-0'
        return '{:d}'.format(int(value))
    return repr(value)


def format_stack(values):
    '''
    Format all values, bottom of the stack first, as [1 2 3].
    '''
    return '[' + ' '.join(map(format_value, values)) + ']'
