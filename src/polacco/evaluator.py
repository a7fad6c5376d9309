import logging

from .lexer import Lexer, Number, Operator


logger = logging.getLogger(__name__)


def evaluate(machine, expression):
    '''
    Run postfix expression on machine, token by token.

    Stops on, and raises, the first lexing or arithmetic error. Whatever the
    tokens before it did to the stack stays done.
    '''
    for token in Lexer(expression):
        logger.debug('feeding %r', token)
        if isinstance(token, Number):
            machine.push(token.value)
        elif isinstance(token, Operator):
            machine.apply(token.operation)
        else:
            raise TypeError('Not a token: {!r}'.format(token))
