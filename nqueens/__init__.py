# Load the core N-Queens functionality.
from nqueens.core import *
import os


def _name_to_solver(name):
    '''Map a solver name to an appropriate solve function.  Raise a ValueError
    if the name is not recognized.'''
    if name == 'backtrack':
        import nqueens.solver.backtrack
        return nqueens.solver.backtrack.solve
    elif name == 'z3':
        import nqueens.solver.z3
        return nqueens.solver.z3.solve
    else:
        raise ValueError('"%s" is not a recognized N-Queens solver' % name)


# Load a solver based on the setting of the NQUEENS_SOLVER environment
# variable.
_solver_name = os.getenv('NQUEENS_SOLVER')
if _solver_name is None:
    _solver_name = 'backtrack'
solve = _name_to_solver(_solver_name)


def solver_name():
    'Return the name of the solver being used.'
    return _solver_name
