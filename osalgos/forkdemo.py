"""Two tasks each reduce the same array: one sums it, one multiplies it."""

from __future__ import annotations

import argparse
import math
import sys
import threading
from typing import Iterable, Sequence

DEFAULT_VALUES = tuple(range(1, 11))


def array_sum(values: Iterable[int]) -> int:
    """Sum of the values."""
    return sum(values)


def array_product(values: Iterable[int]) -> int:
    """Product of the values."""
    return math.prod(values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sum as the parent task and the product as the child task."""
    parser = argparse.ArgumentParser(
        prog="osalgos-fork", description="Split work between a parent and a child task."
    )
    parser.add_argument(
        "--no-fork",
        action="store_true",
        help="compute the child's result in the calling thread",
    )
    args = parser.parse_args(argv)

    values = DEFAULT_VALUES
    child_line = f"Child Process: Product = {array_product(values)}"
    parent_line = f"Parent Process: Sum = {array_sum(values)}"

    print(parent_line, flush=True)
    if args.no_fork:
        print(child_line, flush=True)
        return 0
    child = threading.Thread(target=print, args=(child_line,), kwargs={"flush": True})
    child.start()
    child.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())