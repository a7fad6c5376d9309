'''
Line oriented calculator session: reads lines, runs commands or expressions.
'''

from sys import stdin, stdout, stderr
import logging

from .evaluator import evaluate
from .machine import Machine
from .readline import LineBuffer
from .util import RPNError, format_value, format_stack


logger = logging.getLogger(__name__)


HELP = '''\
h: print this help
q: quit
p: pop and show last element of stack
r: reset stack
l: show stack

Supported operations:
\t+: sum
\t-: diff
\t/: div
\t*: mul
\t^: pow
'''


class Session:
    '''
    Calculator session over line streams.

    Lines that are command words (or their prefixes) run the command; all
    other lines are evaluated as postfix expressions on the session's
    machine.
    '''

    DEFAULT_HISTORY_SIZE = LineBuffer.DEFAULT_HISTORY_SIZE

    # Command word to method name. Any prefix of a word works too.
    COMMANDS = {
        'help': 'help',
        'list': 'list',
        'pop': 'pop',
        'reset': 'reset',
        'quit': 'quit',
    }
    ALIASES = {
        'ls': 'list',
    }

    def __init__(self, *,
                 stdin=stdin,
                 stdout=stdout,
                 stderr=stderr,
                 stack=(),
                 max_history_size=DEFAULT_HISTORY_SIZE,
                 prompt='',
                 help=HELP):
        '''
        Create session, ready to run.

        :param stdin: Iterable of input lines.
        :param stack: Initial stack, bottom first.
        :param max_history_size: How many lines history remembers.
        '''
        for name, stream in [('stdin', stdin),
                             ('stdout', stdout),
                             ('stderr', stderr)]:
            if stream is None:
                raise ValueError('{} is None'.format(name))
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.machine = Machine(*stack)
        self.buffer = LineBuffer(max_history_size)
        self.prompt = prompt
        self.helptext = help
        self.quitting = False

    @property
    def history(self):
        return list(self.buffer.history)

    def _command(self, word):
        '''
        Return the command method for word, or None if it is not one.
        '''
        word = type(self).ALIASES.get(word, word)
        if not word:
            return None
        for command, method in type(self).COMMANDS.items():
            if command.startswith(word):
                return getattr(self, method)
        return None

    def exec(self, line):
        '''
        Run one line, either a command or an expression.
        '''
        expression = line.strip().lower()
        command = self._command(expression)
        if command is not None:
            command()
        else:
            self.parse(expression)

    def _error(self, e):
        logger.debug('%s', e, exc_info=True)
        print('error:', e, file=self.stderr)

    def help(self):
        '''
        Print help.
        '''
        print(self.helptext, file=self.stdout)

    def list(self):
        '''
        Print the whole stack, bottom first.
        '''
        print(format_stack(self.machine.values()), file=self.stdout)

    def pop(self):
        '''
        Pop and print element at top of stack.
        '''
        try:
            print(format_value(self.machine.pop()), file=self.stdout)
        except RPNError as e:
            self._error(e)

    def reset(self):
        '''
        Start over with an empty stack.
        '''
        self.machine = Machine()

    def quit(self):
        self.quitting = True

    def parse(self, expression):
        '''
        Evaluate expression, reporting rather than raising errors.
        '''
        try:
            evaluate(self.machine, expression)
        except RPNError as e:
            self._error(e)

    def _write_prompt(self):
        print(self.prompt, end='', file=self.stdout, flush=True)

    def run(self):
        '''
        Run every input line, prompting before each, until input ends or quit.
        '''
        self._write_prompt()
        for line in self.stdin:
            self.buffer.insert_text(line.rstrip('\r\n'))
            self.exec(self.buffer.commit())
            if self.quitting:
                break
            self._write_prompt()
