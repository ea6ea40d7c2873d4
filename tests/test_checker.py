import io
import sys

import pytest

from pushswap.checker import check, main
from pushswap.parsing import InputError
from pushswap.solver import solve


def _stdin(data):
    return io.TextIOWrapper(io.BytesIO(data))


def test_swap_sorts_two():
    assert check([2, 1], ["sa\n"]) is True


def test_sorted_without_commands():
    assert check([1, 2, 3], []) is True


def test_unsorted_without_commands():
    assert check([2, 1], []) is False


def test_nonempty_b_is_not_ok():
    assert check([1, 2], ["pb\n"]) is False


def test_push_and_back():
    assert check([1, 2, 3], ["pb\n", "pb\n", "pa\n", "pa\n"]) is True


@pytest.mark.parametrize("line", ["xx\n", "sa", "sa \n", "SA\n", "\n"])
def test_bad_command_raises(line):
    with pytest.raises(InputError):
        check([1, 2], [line])


@pytest.mark.parametrize("values", [[5, 3, 9, 1], [8, 7, 6, 5, 4, 3, 2, 1], list(range(30, 0, -1))])
def test_solver_output_is_accepted(values):
    commands = [f"{operation}\n" for operation in solve(values)]
    assert check(values, commands) is True


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", _stdin(b"sa\n"))
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", _stdin(b"ra\n"))
    assert main(["2 1 3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", _stdin(b"sa\nnope\n"))
    assert main(["2", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_bad_numbers(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", _stdin(b""))
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""