from io import StringIO

from pytest import Item, fixture

from polacco.machine import Machine
from polacco.readline import LineBuffer
from polacco.shell import Session


@fixture
def machine():
    return Machine()


@fixture
def line():
    return LineBuffer()


@fixture
def session_factory():
    '''
    Make sessions over in-memory streams; input is a single string.
    '''
    def make(input='', **kwargs):
        return Session(stdin=StringIO(input),
                       stdout=StringIO(),
                       stderr=StringIO(),
                       **kwargs)
    return make


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
