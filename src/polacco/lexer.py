from collections import namedtuple
from enum import Enum
from functools import reduce
import math
import operator

import regex

from .util import NumberOutOfRange, UnexpectedCharacter


class Operation(Enum):
    '''
    Binary operations understood by the machine, keyed by their symbol.
    '''
    ADD = '+'
    DIFF = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'


# The only two kinds of token. The set is closed; the evaluator matches on
# the type.
Number = namedtuple('Number', ['value'])
Operator = namedtuple('Operator', ['operation'])


class Lexer:
    '''
    Lexer for the postfix *regular* grammar.

    One instance scans one expression, once. Iterating yields Number and
    Operator tokens, left to right, and raises UnexpectedCharacter on the
    first character that can't start a token. Scanning never backs up, so
    scan again with a fresh instance.
    '''
    # Anything between tokens. Not a token itself.
    IGNORE = r'[\x20\t\n,]+'
    # Number. Only ever one decimal point; a second one ends the number right
    # before it, and is left over for the next token (which then fails).
    NUMBER = r'''
              [0-9]+
              (?:
                  # 3. and 3.14, but not .14
                  \.
                  [0-9]*
              )?
              '''
    assert not [operation
                for operation
                in Operation
                if len(operation.value) != 1]
    OPERATOR = r'(?:' + r'|'.join(regex.escape(operation.value)
                                  for operation
                                  in Operation) + r')'

    # All possible lexemes.
    TOKEN = r'(?<ignore>' + IGNORE + r')|' \
            r'(?<number>' + NUMBER + r')|' \
            r'(?<operator>' + OPERATOR + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(TOKEN, flags=FLAGS)

    def __init__(self, expression):
        self.expression = expression
        self.position = 0
        self._tokens = self._scan()

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._tokens)

    def _scan(self):
        while self.position < len(self.expression):
            match = self.PATTERN.match(self.expression, self.position)
            if match is None:
                char = self.expression[self.position]
                position = self.position
                self.position += 1
                raise UnexpectedCharacter(char, position)
            self.position = match.end()
            yield from self._tokenize(match)

    def _tokenize(self, match):
        '''
        Yield the token for a lexeme match, if it is one.
        '''
        kind = match.lastgroup
        if kind == 'number':
            literal = match.group(kind)
            value = float(literal)
            if math.isinf(value):
                raise NumberOutOfRange(literal)
            yield Number(value)
        elif kind == 'operator':
            yield Operator(Operation(match.group(kind)))


def scan(expression):
    '''
    Return a fresh token iterator over expression.
    '''
    return Lexer(expression)
