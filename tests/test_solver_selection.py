import pytest

import nqueens
import nqueens.solver.backtrack
import nqueens.solver.z3


def test_name_to_solver():
    assert nqueens._name_to_solver('backtrack') is \
        nqueens.solver.backtrack.solve
    assert nqueens._name_to_solver('z3') is nqueens.solver.z3.solve


def test_unknown_solver():
    with pytest.raises(ValueError, match='"qiskit" is not a recognized'):
        nqueens._name_to_solver('qiskit')


def test_solver_name():
    assert nqueens.solver_name() in ('backtrack', 'z3')


@pytest.mark.parametrize("solver,result_type", [
    ("backtrack", nqueens.solver.backtrack.BacktrackResult),
    ("z3", nqueens.solver.z3.Z3Result),
])
def test_board_solve_by_name(monkeypatch, solver, result_type):
    monkeypatch.delenv('NQUEENS_PARAMS', raising=False)
    result = nqueens.Board(5).solve(solver=solver)
    assert isinstance(result, result_type)
    assert len(result.solutions) == 10


@pytest.fixture()
def recorded(monkeypatch):
    calls = []

    def fake_solve(board, *args, **kwargs):
        calls.append((board, args, kwargs))
        return 'result'

    monkeypatch.setattr(nqueens, 'solve', fake_solve)
    return calls


def test_params_from_environment(monkeypatch, recorded):
    monkeypatch.setenv('NQUEENS_PARAMS', 'a=1 b=2.5 c=x "d=two words" e')
    board = nqueens.Board(3)
    assert board.solve() == 'result'
    assert recorded == [(board, (), {'a': 1, 'b': 2.5, 'c': 'x',
                                     'd': 'two words', 'e': True})]


@pytest.mark.parametrize("value,expected", [
    ("", {}),
    ("n=3", {'n': 3}),
    ("x=-0.5 flag", {'x': -0.5, 'flag': True}),
    ("k=v=w empty=", {'k': 'v=w', 'empty': ''}),
    ("'name=a b'", {'name': 'a b'}),
])
def test_env_params(monkeypatch, value, expected):
    monkeypatch.setenv('NQUEENS_PARAMS', value)
    assert nqueens.core._env_params() == expected


def test_env_params_unset(monkeypatch):
    monkeypatch.delenv('NQUEENS_PARAMS', raising=False)
    assert nqueens.core._env_params() == {}


def test_explicit_arguments_override_environment(monkeypatch, recorded):
    monkeypatch.setenv('NQUEENS_PARAMS', 'early_exit=1 row=0')
    nqueens.Board(3).solve(early_exit=False)
    assert recorded[0][2] == {'early_exit': False, 'row': 0}


def test_early_exit_from_environment(monkeypatch):
    monkeypatch.setenv('NQUEENS_PARAMS', 'early_exit=1')
    result = nqueens.Board(6).solve(solver='backtrack')
    assert result.early_exit
    assert len(result.solutions) == 4


if __name__ == "__main__":
    pytest.main(["-v", __file__])
