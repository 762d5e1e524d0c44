######################################
# Use the Z3 Theorem Prover to find  #
# all ways to complete an N-Queens   #
# board                              #
######################################

import datetime
import logging
import z3
from nqueens import solver

logger = logging.getLogger(__name__)


class Z3Result(solver.Result):
    'Add Z3-specific fields to a Result.'

    def __init__(self):
        super().__init__()
        self.models = None


def solve(board, row=0):
    '''Enumerate every way to place one queen in each row of the board from
    the given row down, using only empty cells.'''
    n = board.size
    rows = list(range(row, n)) if row >= 0 else []
    ret = Z3Result()
    ret.board_size = n
    if len(rows) == 0:
        ret.solutions = []
        ret.models = 0
        return ret

    # Assign each row a column, which must refer to an empty cell.
    s = z3.Solver()
    cols = {r: z3.Int('col%d' % r) for r in rows}
    for r, v in cols.items():
        allowed = [v == c for c in range(n) if board.can_place_queen(r, c)]
        if len(allowed) == 0:
            ret.solutions = []
            ret.models = 0
            return ret
        s.add(z3.Or(allowed))

    # No two queens may share a column or a diagonal.
    if len(rows) > 1:
        s.add(z3.Distinct(list(cols.values())))
    for i, r1 in enumerate(rows):
        for r2 in rows[i + 1:]:
            s.add(cols[r2] - cols[r1] != r2 - r1)
            s.add(cols[r1] - cols[r2] != r2 - r1)

    # Find all models, blocking each one once seen.
    logger.debug('Enumerating Z3 models for a %dx%d board from row %d',
                 n, n, row)
    stime1 = datetime.datetime.now()
    placements = []
    while s.check() == z3.sat:
        model = s.model()
        placement = tuple(model[cols[r]].as_long() for r in rows)
        placements.append(placement)
        s.add(z3.Or([cols[r] != c for r, c in zip(rows, placement)]))
    stime2 = datetime.datetime.now()
    logger.debug('Z3 found %d model(s)', len(placements))

    # Replay each placement on a copy of the board so the results look
    # exactly like those found by backtracking.
    solutions = []
    for placement in sorted(placements):
        candidate = board.copy()
        for r, c in zip(rows, placement):
            candidate.place_queen(r, c)
        solutions.append(candidate)
    ret.solutions = solutions
    ret.models = len(placements)
    ret.solver_times = (stime1, stime2)
    return ret
