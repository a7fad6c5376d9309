from os import isatty
from sys import stdin, stdout, stderr
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from .lexer import Lexer, Operator
from .logging_config import setup_logging
from .shell import Session
from .util import RPNError


logger = logging.getLogger(__name__)


def _isatty(stream):
    try:
        return isatty(stream.fileno())
    # Not a real file, e.g. StringIO
    except (AttributeError, OSError, ValueError):
        return False


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_HISTORY_SIZE = Session.DEFAULT_HISTORY_SIZE
    DEFAULT_WIDTH = 40

    def dumper(self):
        '''
        Dump every token of every expression, and where scanning got to.
        '''
        print('<kind>\t<value>\t<position>', file=self.stdout)
        for line in self._lines():
            lexer = Lexer(line)
            try:
                for token in lexer:
                    value = (token.operation.value
                             if isinstance(token, Operator)
                             else token.value)
                    print(type(token).__name__,
                          value,
                          lexer.position,
                          sep='\t',
                          file=self.stdout)
            except RPNError as e:
                print('error:', e, file=self.stderr)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.TOKEN, file=self.stdout)

    def executor(self):
        '''
        Run calculator: the UI on a terminal, a line session otherwise.
        '''
        if self._interactive():
            from . import ui
            return ui.main(max_history_size=self.args.history_size,
                           width=self.args.width)
        session = Session(stdin=self._lines(),
                          stdout=self.stdout,
                          stderr=self.stderr,
                          max_history_size=self.args.history_size,
                          prompt=self.args.prompt or '')
        session.run()
        return 0

    def _lines(self):
        if self.args.expressions is None:
            return self.stdin
        return self.args.expressions

    def _interactive(self):
        '''
        True if there is no explicit input and nobody asked for a prompt, and
        both stdin/out are a tty.
        '''
        return (self.args.expressions is None and
                self.args.prompt is None and
                _isatty(self.stdin) and
                _isatty(self.stdout))

    def __init__(self, *, stdin=stdin, stdout=stdout, stderr=stderr):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.argument_parser = ArgumentParser(prog='polacco',
                                              description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log debugging output, '
                                               'including error tracebacks')
        self.argument_parser.add_argument('-n', '--history-size',
                                          type=int,
                                          default=self.DEFAULT_HISTORY_SIZE,
                                          help='lines of history to keep')
        self.argument_parser.add_argument('-w', '--width',
                                          type=int,
                                          default=self.DEFAULT_WIDTH,
                                          help='width of the UI input line')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process' arguments.

        Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.history_size < 0:
            self.argument_parser.error('history size cannot be negative')
        setup_logging(logging.DEBUG if self.args.verbose else logging.WARNING)
        logger.debug('running %s', self.args.action.__name__)
        try:
            return self.args.action() or 0
        except KeyboardInterrupt:
            return 1


def main():
    return CLI().run()
