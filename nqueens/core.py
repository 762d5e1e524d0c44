#################################
# N-Queens top-level definitions #
#################################

import nqueens
import enum
import numpy as np
import os
import shlex


class CellState(enum.IntEnum):
    'Possible contents of a single board cell.'
    UNDEFINED = 0
    EMPTY = 1
    BLOCKED = 2
    QUEEN = 3


# Character used to print each cell state.
_state_chars = {
    CellState.EMPTY: 'E',
    CellState.BLOCKED: '.',
    CellState.QUEEN: 'Q',
}


def _convert_param(value):
    'Return a parameter value as an int or a float if it looks like one.'
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            pass
    return value


def _env_params():
    '''Return the solver keyword arguments listed in NQUEENS_PARAMS as
    shell-quoted key=value words.  A word without "=" maps to True.'''
    params = {}
    for word in shlex.split(os.getenv('NQUEENS_PARAMS', '')):
        key, eq, value = word.partition('=')
        params[key] = _convert_param(value) if eq else True
    return params


class Cell(object):
    'One position on a board.'

    __slots__ = ('_row', '_column', 'state')

    def __init__(self, row, column, state=CellState.EMPTY):
        self._row = row        # Row index, fixed at creation
        self._column = column  # Column index, fixed at creation
        self.state = state

    @property
    def row(self):
        return self._row

    @property
    def column(self):
        return self._column

    def copy(self):
        'Return an independent copy of the cell.'
        return Cell(self._row, self._column, self.state)

    def __str__(self):
        'Return the cell as a single character.'
        return _state_chars.get(self.state, 'U')

    def __repr__(self):
        return 'Cell(%d, %d, %s)' % (self._row, self._column, self.state.name)


class Board(object):
    'An NxN grid of cells plus the queen-placement rule.'

    def __init__(self, size):
        '''Create a board with every cell empty.  A size less than 1
        produces a board with no cells at all.'''
        self._size = size
        self.cells = [Cell(r, c)
                      for r in range(size)
                      for c in range(size)]

    @property
    def size(self):
        return self._size

    def copy(self):
        'Return a deep copy of the board.'
        board = Board.__new__(Board)
        board._size = self._size
        board.cells = [c.copy() for c in self.cells]
        return board

    def cell(self, row, column):
        'Return the cell at (row, column) or None if there is no such cell.'
        if 0 <= row < self._size and 0 <= column < self._size:
            return self.cells[row*self._size + column]
        return None

    def can_place_queen(self, row, column):
        'Return True if the cell at (row, column) exists and is empty.'
        c = self.cell(row, column)
        return c is not None and c.state == CellState.EMPTY

    def place_queen(self, row, column):
        '''Put a queen at (row, column) and block every cell it attacks in
        the rows below.  Do nothing if the target is missing or not
        empty.'''
        target = self.cell(row, column)
        if target is None or target.state != CellState.EMPTY:
            return

        # Block the entire row, target included.
        for c in self.cells:
            if c.row == row:
                c.state = CellState.BLOCKED

        # Block the column below the target.
        for c in self.cells:
            if c.column == column and c.row > row:
                c.state = CellState.BLOCKED

        # Block both diagonals below the target.
        for c in self.cells:
            if c.row > row and abs(c.row - row) == abs(c.column - column):
                c.state = CellState.BLOCKED

        target.state = CellState.QUEEN

    def queens(self):
        'Return a list of (row, column) pairs that hold a queen.'
        return [(c.row, c.column)
                for c in self.cells
                if c.state == CellState.QUEEN]

    def to_array(self):
        'Return the cell states as a size x size numpy array.'
        n = max(self._size, 0)
        return np.array([int(c.state) for c in self.cells],
                        dtype=np.int8).reshape((n, n))

    def valid(self):
        '''Return True if every row and every column holds exactly one
        queen and no diagonal holds more than one.'''
        if self._size < 1:
            return False
        q = (self.to_array() == CellState.QUEEN).astype(int)
        if not (np.all(q.sum(axis=0) == 1) and np.all(q.sum(axis=1) == 1)):
            return False
        flipped = np.fliplr(q)
        for ofs in range(1 - self._size, self._size):
            if np.trace(q, offset=ofs) > 1:
                return False
            if np.trace(flipped, offset=ofs) > 1:
                return False
        return True

    def __str__(self):
        'Return the board as one line of characters per row.'
        rows = []
        for r in range(self._size):
            rows.append(''.join([str(c)
                                 for c in self.cells[r*self._size:
                                                     (r + 1)*self._size]]))
        return '\n'.join(rows)

    def __repr__(self):
        return 'nqueens.Board(%d)' % self._size

    def solve(self, solver=None, *args, **kwargs):
        '''Find all queen placements that complete the board.  Keyword
        arguments override those given in NQUEENS_PARAMS.'''
        all_kwargs = _env_params()
        all_kwargs.update(**kwargs)
        solve_func = nqueens.solve
        if solver is not None:
            solve_func = nqueens._name_to_solver(solver)
        return solve_func(self, *args, **all_kwargs)
