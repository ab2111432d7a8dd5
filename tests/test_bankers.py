import io

import pytest

from osalgos.bankers import BankersState, UnsafeStateError, main

TEXTBOOK = BankersState(
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    available=[3, 3, 2],
)


def test_textbook_safe_sequence():
    assert TEXTBOOK.safe_sequence() == [1, 3, 4, 0, 2]


def test_safe_sequence_is_feasible_permutation():
    sequence = TEXTBOOK.safe_sequence()
    assert sorted(sequence) == list(range(len(TEXTBOOK.maximum)))
    need = TEXTBOOK.need()
    work = list(TEXTBOOK.available)
    for index in sequence:
        assert all(n <= w for n, w in zip(need[index], work))
        work = [w + a for w, a in zip(work, TEXTBOOK.allocation[index])]


def test_need_plus_allocation_is_maximum():
    for need_row, alloc_row, max_row in zip(
        TEXTBOOK.need(), TEXTBOOK.allocation, TEXTBOOK.maximum
    ):
        assert [n + a for n, a in zip(need_row, alloc_row)] == list(max_row)


def test_unsafe_state_raises():
    state = BankersState([[2]], [[0]], [1])
    with pytest.raises(UnsafeStateError) as info:
        state.safe_sequence()
    assert info.value.completed == ()


def test_unsafe_state_reports_completed_processes():
    state = BankersState([[1], [5]], [[0], [0]], [1])
    with pytest.raises(UnsafeStateError) as info:
        state.safe_sequence()
    assert info.value.completed == (0,)


def test_empty_state_is_safe():
    assert BankersState((), (), ()).safe_sequence() == []


def test_rejects_mismatched_rows():
    with pytest.raises(ValueError):
        BankersState([[1, 2]], [[0]], [1, 1])


def test_rejects_mismatched_process_counts():
    with pytest.raises(ValueError):
        BankersState([[1], [1]], [[0]], [1])


def test_rejects_too_many_processes():
    with pytest.raises(ValueError):
        BankersState([[0]] * 11, [[0]] * 11, [0])


def test_rejects_too_many_resources():
    with pytest.raises(ValueError):
        BankersState([[0] * 11], [[0] * 11], [0] * 11)


def test_format_matrices():
    state = BankersState([[1, 2]], [[0, 1]], [3, 4])
    assert state.format_matrices() == (
        "\nMaximum Matrix:\n1 2 \n"
        "\nAllocation Matrix:\n0 1 \n"
        "\nNeed Matrix:\n1 1 \n"
        "\nAvailable Resources: 3 4 \n"
    )


def test_main_finds_safe_sequence(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n2\n1 2\n0 1\n3 4\n3\n4\n"))
    assert main([]) == 0
    assert "Safe Sequence: P0 \n" in capsys.readouterr().out


def test_main_reports_unsafe(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n1\n5\n0\n1\n3\n4\n"))
    assert main([]) == 0
    assert "System is in an unsafe state!" in capsys.readouterr().out


def test_main_displays_matrices(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n2\n1 2\n0 1\n3 4\n2\n4\n"))
    assert main([]) == 0
    assert "Need Matrix:\n1 1 \n" in capsys.readouterr().out


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n4\n"))
    assert main([]) == 0
    assert "Invalid choice! Try again." in capsys.readouterr().out


def test_main_end_of_input_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Banker's Algorithm Menu" in capsys.readouterr().out


def test_main_truncated_details_fail(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n2\n1 2\n"))
    assert main([]) == 1