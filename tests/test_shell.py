'''
Shell session tests
'''

from io import StringIO

from polacco.shell import Session, HELP

from pytest import raises, mark


def test_list(session_factory):
    session = session_factory('3 1 2 + +  \nls\n', prompt='> ')
    session.run()
    assert session.stdout.getvalue() == '> > [6]\n> '


def test_pop(session_factory):
    session = session_factory('3 1 2 +  \npop\n', prompt='> ')
    session.run()
    assert session.stdout.getvalue() == '> > 3\n> '
    assert session.machine.values() == [3]


def test_pop_empty(session_factory):
    session = session_factory('pop\n')
    session.run()
    assert session.stderr.getvalue() == 'error: stack is empty\n'


def test_reset(session_factory):
    session = session_factory('3 1 2 +  \nreset\nls\n', prompt='> ')
    session.run()
    assert session.stdout.getvalue() == '> > > []\n> '


def test_help(session_factory):
    session = session_factory('HeL\n')
    session.run()
    assert session.stdout.getvalue() == HELP + '\n'


@mark.parametrize('expression,message', [
    ('3 1 2 + + +', 'not enough elements in the stack'),
    ('3 0 /', 'cannot divide by 0'),
    ('0 0 ^', 'cannot raise 0 to the power of 0'),
    ('0 1 - 1.5 ^',
     'cannot raise a negative number to a fractional exponent'),
    ('3 x', 'unexpected character: x'),
])
def test_errors(session_factory, expression, message):
    session = session_factory(expression)
    session.run()
    assert session.stderr.getvalue() == 'error: ' + message + '\n'


def test_continues_after_error(session_factory):
    session = session_factory('3 0 /\n4 +\nl\n')
    session.run()
    assert session.stdout.getvalue() == '[7]\n'


def test_quit_stops(session_factory):
    session = session_factory('1\nqu\n2\n', prompt='> ')
    session.run()
    assert session.quitting
    assert session.machine.values() == [1]
    assert session.stdout.getvalue() == '> > '


@mark.parametrize('word', ['l', 'ls', 'li', 'lis', 'list', '  LIST '])
def test_command_prefixes(session_factory, word):
    session = session_factory(word, stack=(1, 2.5))
    session.exec(word)
    assert session.stdout.getvalue() == '[1 2.5]\n'


def test_not_a_command(session_factory):
    session = session_factory()
    session.exec('lists')
    assert session.stderr.getvalue() == 'error: unexpected character: l\n'


def test_history(session_factory):
    session = session_factory('3 1 2 +  \npop\np\nh\nl  \nls\n^\n-\n-\n'
                              '\t\n-\n\t\n')
    session.run()
    assert session.history == ['3 1 2 +  ', 'pop', 'p', 'h', 'l  ', 'ls',
                               '^', '-']


def test_history_length(session_factory):
    size = 100
    session = session_factory('\n'.join(['pop'] +
                                        ['ls{}'.format(i)
                                         for i in range(size)]),
                              max_history_size=size)
    session.run()
    assert session.history == ['ls{}'.format(i) for i in range(size)]


def test_history_browsing(session_factory):
    session = session_factory('3 1 2 +  \npop\np\nh\nl  \nls\n^\n-')
    session.run()
    session.buffer.history_prev()
    assert session.buffer.content == '-'
    session.buffer.history_prev()
    session.buffer.history_next()
    assert session.buffer.content == '-'


def test_bad_options():
    with raises(ValueError, match='stdin is None'):
        Session(stdin=None)
    with raises(ValueError, match='negative history size'):
        Session(stdin=StringIO(), max_history_size=-1)


def test_negative_zero_keeps_its_sign(session_factory):
    session = session_factory('0 1 - 0 *\nl\n')
    session.run()
    assert session.stdout.getvalue() == '[-0]\n'
