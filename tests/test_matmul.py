import io

import pytest

from osalgos.matmul import format_matrix, main, multiply, sample_matrices


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def _transpose(m):
    return [list(col) for col in zip(*m)]


def test_sample_matrices_small():
    a, b = sample_matrices(2)
    assert a == [[0, 1], [1, 2]]
    assert b == [[0, -1], [1, 0]]


def test_sample_matrices_symmetry():
    a, b = sample_matrices(5)
    assert a == _transpose(a)
    assert b == [[-v for v in row] for row in _transpose(b)]


def test_sample_matrices_negative_size():
    with pytest.raises(ValueError):
        sample_matrices(-1)


def test_multiply_sample_two():
    a, b = sample_matrices(2)
    assert multiply(a, b) == [[1, 0], [2, -1]]


@pytest.mark.parametrize("workers", [1, 2, 4, 16])
def test_multiply_identity(workers):
    a, _ = sample_matrices(4)
    assert multiply(a, _identity(4), workers) == a
    assert multiply(_identity(4), a, workers) == a


def test_multiply_transpose_property():
    a, b = sample_matrices(3)
    ab = multiply(a, b)
    assert _transpose(ab) == multiply(_transpose(b), _transpose(a))


def test_multiply_worker_count_does_not_change_result():
    a, b = sample_matrices(6)
    assert multiply(a, b, 1) == multiply(a, b, 7)


def test_multiply_rectangular():
    a = [[1, 2, 3]]
    b = [[1], [1], [1]]
    result = multiply(a, b)
    assert len(result) == 1 and len(result[0]) == 1
    assert result[0][0] == sum(a[0])


def test_multiply_empty():
    assert multiply([], []) == []


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_multiply_bad_workers():
    with pytest.raises(ValueError):
        multiply([[1]], [[1]], 0)


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"
    assert format_matrix([]) == ""


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    a, b = sample_matrices(3)
    result = multiply(a, b)
    assert "Matrix A:\n" + format_matrix(a) in out
    assert "Matrix B:\n" + format_matrix(b) in out
    assert "Result Matrix:\n" + format_matrix(result) in out
    total = sum(sum(row) for row in result)
    assert out.endswith(f"Total sum of all elements: {total}\n")


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_no_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1