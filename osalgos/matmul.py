"""Matrix multiplication with one worker task per result cell."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

MAX_THREADS = 4

Matrix = list[list[int]]


def sample_matrices(size: int) -> tuple[Matrix, Matrix]:
    """Build the demo matrices: A[i][j] = i + j and B[i][j] = i - j."""
    if size < 0:
        raise ValueError("matrix size must not be negative")
    matrix_a = [[i + j for j in range(size)] for i in range(size)]
    matrix_b = [[i - j for j in range(size)] for i in range(size)]
    return matrix_a, matrix_b


def multiply(
    matrix_a: Sequence[Sequence[int]],
    matrix_b: Sequence[Sequence[int]],
    max_workers: int = MAX_THREADS,
) -> Matrix:
    """Multiply two matrices, computing each cell as a separate thread task."""
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")
    a = [list(row) for row in matrix_a]
    b = [list(row) for row in matrix_b]
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must match rows of the second")
    cols = len(b[0]) if b else 0
    if any(len(row) != cols for row in b):
        raise ValueError("rows of the second matrix differ in length")

    def cell(i: int, j: int) -> int:
        return sum(value * b[k][j] for k, value in enumerate(a[i]))

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            (i, j): executor.submit(cell, i, j)
            for i in range(len(a))
            for j in range(cols)
        }
        return [[futures[i, j].result() for j in range(cols)] for i in range(len(a))]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix one row per line, each value followed by a space."""
    return "".join("".join(f"{v} " for v in row) + "\n" for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a size from standard input and print the demo multiplication."""
    del argv
    print("Enter the size of the square matrices: ", end="", flush=True)
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise EOFError("unexpected end of input")
        size = int(tokens[0])
        matrix_a, matrix_b = sample_matrices(size)
    except (EOFError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print("Matrix A:")
    print(format_matrix(matrix_a), end="")
    print("\nMatrix B:")
    print(format_matrix(matrix_b), end="")

    result = multiply(matrix_a, matrix_b)
    total = sum(sum(row) for row in result)

    print("\nResult Matrix:")
    print(format_matrix(result), end="")
    print(f"\nTotal sum of all elements: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())