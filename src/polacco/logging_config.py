'''
Logging setup for the command line entry point.
'''

import logging
import sys


def setup_logging(level=logging.WARNING, stream=None):
    '''
    Configure the 'polacco' logger namespace, once per process.

    Logs go to stderr by default; stdout carries results.

    :param level: Logging level, e.g. logging.DEBUG.
    :param stream: Where to write records instead of stderr.
    '''
    logger = logging.getLogger('polacco')
    logger.setLevel(level)

    # Avoid duplicate records when called again, e.g. by tests.
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
