########################################
# Enumerate all N-Queens solutions by  #
# row-by-row backtracking, copying the #
# board at every branch                #
########################################

import datetime
import logging
from nqueens import solver

logger = logging.getLogger(__name__)


class BacktrackResult(solver.Result):
    'Add backtracking-specific fields to a Result.'

    def __init__(self):
        super().__init__()
        self.nodes = None
        self.early_exit = None

    def __repr__(self):
        ret = self._repr_dict()
        ret["nodes"] = self.nodes
        ret["early exit"] = self.early_exit
        return 'nqueens.solver.Result(%s)' % str(ret)

    def __str__(self):
        ret = self._str_dict()
        ret["nodes"] = self.nodes
        return str(ret)


class BacktrackSolver(object):
    'Depth-first search over board snapshots.'

    def __init__(self, early_exit=False):
        self.solutions = []           # Completed boards in discovery order
        self.nodes = 0                # Number of queens placed on a copy
        self.early_exit = early_exit  # true: end last-row frame early

    def solve(self, board, row):
        '''Try every column of the given row, recursing into the next row
        on a fresh copy of the board for each legal placement.'''
        for column in range(board.size):
            if not board.can_place_queen(row, column):
                continue

            candidate = board.copy()
            candidate.place_queen(row, column)
            self.nodes += 1

            if row == board.size - 1:
                # The last row is filled, so this is a solution.
                self.solutions.append(candidate.copy())
                if self.early_exit:
                    return
                continue

            self.solve(candidate, row + 1)


def solve(board, row=0, early_exit=False):
    'Find all ways to complete the given board starting at the given row.'
    logger.debug('Backtracking over a %dx%d board from row %d',
                 board.size, board.size, row)
    bs = BacktrackSolver(bool(early_exit))
    stime1 = datetime.datetime.now()
    bs.solve(board, row)
    stime2 = datetime.datetime.now()
    logger.debug('Placed %d queen(s) and found %d solution(s)',
                 bs.nodes, len(bs.solutions))
    ret = BacktrackResult()
    ret.board_size = board.size
    ret.solutions = bs.solutions
    ret.solver_times = (stime1, stime2)
    ret.nodes = bs.nodes
    ret.early_exit = bs.early_exit
    return ret
