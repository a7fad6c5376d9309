'''
Terminal user interface: a prompt_toolkit application around a Session.

The input line is the session's own LineBuffer; prompt_toolkit only
delivers keys and draws.
'''

from io import StringIO
import logging

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from .shell import Session


logger = logging.getLogger(__name__)


HELP = '''\
pop:   pop last element from stack
list:  show stack
reset: reset stack
quit:  quit'''

STYLE = Style.from_dict({
    'prompt': '#870087 bold',
    'cursor': 'reverse',
    'output': '#870087 bold',
    'stack': '#870087',
    'help': '#71797e italic',
})


def render_stack(values, width):
    '''
    Render as many values as fit in width, top of the stack rightmost.

    Older values that don't fit are elided with '...'.
    '''
    if not values:
        return 'EMPTY'
    shown = []
    used = 0
    truncated = False
    for value in reversed(values):
        text = '{:.2f}'.format(value)
        used += len(text) + 2
        # Leave room for the ellipsis.
        if used + 5 > width:
            truncated = True
            break
        shown.insert(0, '[' + text + ']')
    if truncated:
        shown.insert(0, '...')
    return ' '.join(shown)


class Calculator:
    '''
    State behind the UI: a session run on captured output.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_WIDTH = 40

    def __init__(self, *,
                 prompt=DEFAULT_PROMPT,
                 width=DEFAULT_WIDTH,
                 max_history_size=Session.DEFAULT_HISTORY_SIZE):
        self.prompt = prompt
        self.width = width
        self._stdout = StringIO()
        self._stderr = StringIO()
        self.session = Session(stdin=(),
                               stdout=self._stdout,
                               stderr=self._stderr,
                               max_history_size=max_history_size,
                               help=HELP)
        self.output = ''

    @property
    def buffer(self):
        return self.session.buffer

    @property
    def quitting(self):
        return self.session.quitting

    @property
    def line_width(self):
        return max(0, self.width - len(self.prompt))

    def submit(self):
        '''
        Commit the line and run it; keep what it printed as the output.
        '''
        line = self.buffer.commit()
        self.session.exec(line)
        printed = (self._stdout.getvalue() + self._stderr.getvalue()).strip()
        for stream in self._stdout, self._stderr:
            stream.seek(0)
            stream.truncate()
        # Long output: keep the end, like a terminal would.
        self.output = printed[-self.width:] if self.width else ''

    def line_fragments(self):
        before, after = self.buffer.visible(self.line_width)
        under, after = after[:1] or ' ', after[1:]
        return [('class:prompt', self.prompt),
                ('', before),
                ('class:cursor', under),
                ('', after)]

    def output_fragments(self):
        return [('class:output', self.output)]

    def stack_fragments(self):
        return [('class:stack',
                 render_stack(self.session.machine.values(), self.width))]


def build_key_bindings(calculator):
    '''
    Map keys onto the calculator's line buffer.
    '''
    bindings = KeyBindings()
    buffer = calculator.buffer

    @bindings.add('up')
    @bindings.add('pageup')
    def _(event):
        buffer.history_prev()

    @bindings.add('down')
    @bindings.add('pagedown')
    def _(event):
        buffer.history_next()

    @bindings.add('home')
    @bindings.add('c-a')
    def _(event):
        buffer.move_to_start()

    @bindings.add('end')
    @bindings.add('c-e')
    def _(event):
        buffer.move_to_end()

    @bindings.add('left')
    def _(event):
        buffer.move_cursor(-1)

    @bindings.add('right')
    def _(event):
        buffer.move_cursor(1)

    @bindings.add('backspace')
    def _(event):
        buffer.backspace()

    @bindings.add('delete')
    def _(event):
        buffer.delete_forward()

    @bindings.add('c-k')
    def _(event):
        buffer.delete_to_end()

    @bindings.add('c-u')
    def _(event):
        buffer.delete_to_start()

    @bindings.add('tab')
    def _(event):
        buffer.insert_text('\t')

    @bindings.add('enter')
    def _(event):
        calculator.submit()
        if calculator.quitting:
            event.app.exit()

    @bindings.add('c-c')
    @bindings.add('c-d')
    def _(event):
        event.app.exit()

    @bindings.add('<any>')
    def _(event):
        # Only printable input; unbound control keys are dropped.
        if event.data and event.data.isprintable():
            buffer.insert_text(event.data)

    return bindings


def build_application(calculator):
    body = HSplit([
        Frame(HSplit([
            Window(FormattedTextControl(calculator.line_fragments),
                   height=1),
            Window(FormattedTextControl(calculator.output_fragments),
                   height=1),
        ]), width=calculator.width + 2),
        Window(FormattedTextControl(calculator.stack_fragments), height=1),
        Window(FormattedTextControl([('class:help', HELP)])),
    ])
    return Application(layout=Layout(body),
                       key_bindings=build_key_bindings(calculator),
                       style=STYLE,
                       full_screen=False)


def main(**kwargs):
    '''
    Run the UI until the user quits.
    '''
    calculator = Calculator(**kwargs)
    logger.debug('starting UI with %r', calculator.buffer)
    build_application(calculator).run()
    print('Bye!')
    return 0
