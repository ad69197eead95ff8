import io

import pytest

from pushswap import checker
from pushswap.checker import CheckerError, apply_commands, check
from pushswap.stack import Machine


def test_swap_sorts_two_values():
    assert check([2, 1], ["sa"]) is True


def test_no_commands_on_sorted_input():
    assert check([1, 2, 3], []) is True


def test_no_commands_on_unsorted_input():
    assert check([2, 1], []) is False


def test_nonempty_b_is_not_sorted():
    assert check([1, 2, 3], ["pb"]) is False


def test_push_and_back_restores():
    assert check([1, 2, 3], ["pb\n", "pa\n"]) is True


def test_apply_commands_changes_stacks():
    machine = apply_commands(Machine([1, 2, 3]), ["pb", "ra"])
    assert list(machine.a) == [3, 2]
    assert list(machine.b) == [1]
    assert machine.operations() == []


@pytest.mark.parametrize("command", ["", "xx", "sa ", "rrrr", "SA"])
def test_invalid_command_raises(command):
    with pytest.raises(CheckerError):
        apply_commands(Machine([1, 2]), [command])


def test_push_from_empty_stack_raises():
    with pytest.raises(CheckerError):
        apply_commands(Machine([1, 2]), ["pa"])


def _run(monkeypatch, capsys, args, stdin_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    status = checker.main(args)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_main_ok(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, ["2", "1"], "sa\n") == (0, "OK\n", "")


def test_main_ko(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, ["2", "1"], "") == (0, "KO\n", "")


def test_main_bad_command(monkeypatch, capsys):
    status, out, err = _run(monkeypatch, capsys, ["2", "1"], "sa\nfoo\n")
    assert (status, out, err) == (1, "", "Error\n")


def test_main_empty_line_is_error(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["2", "1"], "sa\n\n")
    assert status == 1
    assert err == "Error\n"


def test_main_bad_arguments(monkeypatch, capsys):
    status, out, err = _run(monkeypatch, capsys, ["1", "1"], "")
    assert (status, out, err) == (1, "", "Error\n")


def test_main_no_arguments(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, [], "sa\n") == (0, "", "")