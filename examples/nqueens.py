#! /usr/bin/env python

###################################
# Solve the n-queens problem with #
# both solvers and compare them   #
###################################

import nqueens
import sys

# Read the number of queens from the command line.
if len(sys.argv) < 2:
    sys.exit('Usage: %s <#queens>' % sys.argv[0])
n = int(sys.argv[1])

# Enumerate all solutions both ways.
board = nqueens.Board(n)
bt = board.solve(solver='backtrack')
z3 = board.solve(solver='z3')
print('Backtracking: %s' % bt)
print('Z3:           %s' % z3)
if [b.queens() for b in bt.solutions] != [b.queens() for b in z3.solutions]:
    sys.exit('The two solvers disagree')

# Show the first solution.
if len(bt.solutions) == 0:
    sys.exit('No solutions exist for %d queen(s)' % n)
soln = bt.solutions[0]
for r in range(n):
    for c in range(n):
        if soln.cell(r, c).state == nqueens.CellState.QUEEN:
            print('* ', end='')
        else:
            print('- ', end='')
    print('')
