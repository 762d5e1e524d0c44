##########################################
# Define classes that are common across  #
# multiple solvers                       #
##########################################


class Result():
    'Encapsulate solver results and related data.'

    def __init__(self):
        self.board_size = None
        self.solutions = None
        self.solver_times = None

    def _repr_dict(self):
        'Return a dictionary for use internally by __repr__.'
        ret = {}
        if self.board_size is not None:
            ret["board size"] = self.board_size
        if self.solutions is not None:
            ret["solutions"] = [b.queens() for b in self.solutions]
        if self.solver_times:
            ret["solver times"] = self.solver_times
        return ret

    def __repr__(self):
        ret = self._repr_dict()
        return 'nqueens.solver.Result(%s)' % str(ret)

    def _str_dict(self):
        'Return a dictionary for use internally by __str__.'
        ret = {}
        if self.board_size is not None:
            ret["board size"] = self.board_size
        if self.solutions is not None:
            if self.solutions:
                ret["first solution"] = self.solutions[0].queens()
            ret["number of solutions"] = len(self.solutions)
        if self.solver_times:
            ret["solver times"] = \
                (self.solver_times[0].strftime("%Y-%m-%d %H:%M:%S.%f"),
                 self.solver_times[1].strftime("%Y-%m-%d %H:%M:%S.%f"))
        return ret

    def __str__(self):
        ret = self._str_dict()
        return str(ret)
