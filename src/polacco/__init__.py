'''
polacco: interactive postfix (RPN) calculator.

Type numbers and the operators + - * / ^, in postfix order, separated by
spaces, tabs or commas; results stay on the stack. The pieces:

- Lexer turns a line into Number and Operator tokens.
- Machine is the stack the tokens run on.
- evaluate() runs a line on a machine.
- LineBuffer is the line editor the terminal UI and the shell share.
- Session handles command words (help, list, pop, reset, quit).
'''

from .cli import CLI
from .evaluator import evaluate
from .lexer import Lexer, Number, Operation, Operator, scan
from .machine import Machine
from .readline import LineBuffer, Mode
from .shell import Session
from .util import (RPNError, UnexpectedCharacter, NumberOutOfRange,
                   StackUnderflow, DivisionByZero, InvalidPower)


__all__ = ('CLI', 'evaluate', 'Lexer', 'Number', 'Operation', 'Operator',
           'scan', 'Machine', 'LineBuffer', 'Mode', 'Session', 'RPNError',
           'UnexpectedCharacter', 'NumberOutOfRange', 'StackUnderflow',
           'DivisionByZero', 'InvalidPower')
