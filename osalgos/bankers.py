"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

MAX_PROCESSES = 10
MAX_RESOURCES = 10

Matrix = tuple[tuple[int, ...], ...]


class UnsafeStateError(Exception):
    """No ordering lets every process finish."""

    def __init__(self, completed: Sequence[int]):
        super().__init__("System is in an unsafe state!")
        self.completed = tuple(completed)


@dataclass(frozen=True)
class BankersState:
    """Maximum demand, current allocation and available resources."""

    maximum: Matrix
    allocation: Matrix
    available: tuple[int, ...]

    def __post_init__(self) -> None:
        maximum = tuple(map(tuple, self.maximum))
        allocation = tuple(map(tuple, self.allocation))
        available = tuple(self.available)
        if len(maximum) != len(allocation) or any(
            len(row) != len(available) for row in maximum + allocation
        ):
            raise ValueError("matrix shapes do not match")
        if len(maximum) > MAX_PROCESSES or len(available) > MAX_RESOURCES:
            raise ValueError(
                f"at most {MAX_PROCESSES} processes and {MAX_RESOURCES} resources"
            )
        object.__setattr__(self, "maximum", maximum)
        object.__setattr__(self, "allocation", allocation)
        object.__setattr__(self, "available", available)

    def need(self) -> Matrix:
        """Remaining demand of each process: maximum minus allocation."""
        return tuple(
            tuple(m - a for m, a in zip(max_row, alloc_row))
            for max_row, alloc_row in zip(self.maximum, self.allocation)
        )

    def safe_sequence(self) -> list[int]:
        """Return process indices in a safe order, or raise UnsafeStateError."""
        need = self.need()
        work = list(self.available)
        sequence: list[int] = []
        while len(sequence) < len(need):
            progressed = False
            for index, (need_row, alloc_row) in enumerate(zip(need, self.allocation)):
                if index not in sequence and all(n <= w for n, w in zip(need_row, work)):
                    work = [w + a for w, a in zip(work, alloc_row)]
                    sequence.append(index)
                    progressed = True
            if not progressed:
                raise UnsafeStateError(sequence)
        return sequence

    def format_matrices(self) -> str:
        """Render the maximum, allocation and need matrices and the available vector."""

        def line(values: Sequence[int]) -> str:
            return "".join(f"{v} " for v in values)

        parts = [
            f"\n{title} Matrix:\n" + "".join(line(row) + "\n" for row in matrix)
            for title, matrix in (
                ("Maximum", self.maximum),
                ("Allocation", self.allocation),
                ("Need", self.need()),
            )
        ]
        return "".join(parts) + f"\nAvailable Resources: {line(self.available)}\n"


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _next_int(tokens: Iterator[str], prompt: str = "") -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return int(token)


def _read_state(tokens: Iterator[str]) -> BankersState:
    processes = _next_int(tokens, "Enter number of processes: ")
    resources = _next_int(tokens, "Enter number of resources: ")
    if processes < 0 or resources < 0:
        raise ValueError("counts must not be negative")

    def matrix(prompt: str) -> list[list[int]]:
        print(prompt)
        return [[_next_int(tokens) for _ in range(resources)] for _ in range(processes)]

    maximum = matrix("Enter Maximum Demand Matrix:")
    allocation = matrix("Enter Allocation Matrix:")
    print("Enter Available Resources:")
    available = [_next_int(tokens) for _ in range(resources)]
    return BankersState(maximum, allocation, available)


_MENU = (
    "\n=== Banker's Algorithm Menu ===\n1. Input details\n2. Display matrices\n"
    "3. Find safe sequence\n4. Exit\nEnter choice: "
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    del argv
    tokens = _tokens()
    state = BankersState((), (), ())
    while True:
        try:
            choice = _next_int(tokens, _MENU)
        except EOFError:
            return 0
        except ValueError:
            choice = -1
        try:
            if choice == 1:
                state = _read_state(tokens)
            elif choice == 2:
                print(state.format_matrices(), end="")
            elif choice == 3:
                print("Safe Sequence: " + "".join(f"P{i} " for i in state.safe_sequence()))
            elif choice == 4:
                return 0
            else:
                print("Invalid choice! Try again.")
        except UnsafeStateError as exc:
            print(exc)
        except EOFError as exc:
            print(f"\nerror: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())