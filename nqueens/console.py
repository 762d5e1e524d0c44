#######################################
# Read a board size, solve, and print #
# every solution board                #
#######################################

import logging
import os
import re
import sys
import nqueens

PROMPT = 'Please input board size:'
SEPARATOR = '=' * 10

logger = logging.getLogger(__name__)

_integer_re = re.compile(r'\s*[-+]?[0-9]+\s*', re.ASCII)

# Board sizes must fit in a signed 32-bit integer.
MIN_BOARD_SIZE = -2**31
MAX_BOARD_SIZE = 2**31 - 1


class InputError(Exception):
    'The board size could not be read.'


class EmptyOrWhitespaceInputError(InputError):
    'No board size was provided.'

    def __init__(self):
        super().__init__('No board size was provided')


class NotAnIntegerError(InputError):
    'The board size is not an integer.'

    def __init__(self, text):
        self.bad_text = text
        super().__init__('"%s" is not an integer' % text)


def parse_board_size(text):
    '''Convert a line of text to a board size.  Raise an InputError if the
    text is blank or not a 32-bit integer.'''
    if text is None or text.strip() == '':
        raise EmptyOrWhitespaceInputError()
    if _integer_re.fullmatch(text) is None:
        raise NotAnIntegerError(text.strip())
    size = int(text)
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise NotAnIntegerError(text.strip())
    return size


def print_solutions(solutions, out):
    'Write each solution board followed by a separator, then a total.'
    for board in solutions:
        out.write(str(board) + '\n')
        out.write(SEPARATOR + '\n')
    out.write('total count: %d\n' % len(solutions))


def setup_logging():
    'Send log messages to stderr at the level named by NQUEENS_LOG_LEVEL.'
    level = os.getenv('NQUEENS_LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr)


def main(argv=None, stdin=None, stdout=None):
    '''Read a board size from the command line or from stdin, then print
    all solutions.  Return a process exit status.'''
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    # Read the board size.
    if len(argv) > 0:
        text = argv[0]
    else:
        if stdin.isatty():
            stdout.write(PROMPT)
            stdout.flush()
        text = stdin.readline()
    try:
        size = parse_board_size(text)
    except InputError as e:
        logger.debug('Rejected input: %s', e)
        stdout.write('input error\n')
        return 1

    # Solve and report.
    result = nqueens.Board(size).solve()
    print_solutions(result.solutions, stdout)
    return 0
