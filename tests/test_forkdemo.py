import math

import pytest

from osalgos.forkdemo import DEFAULT_VALUES, array_product, array_sum, main


def test_sum_of_default_values():
    assert array_sum(DEFAULT_VALUES) == 55


def test_product_of_default_values():
    assert array_product(DEFAULT_VALUES) == math.factorial(10)


def test_empty_reductions():
    assert array_sum([]) == 0
    assert array_product([]) == 1


@pytest.mark.parametrize("values", [[3], [2, 5], [-1, 4, 6]])
def test_single_and_small(values):
    assert array_sum(values + [0]) == array_sum(values)
    assert array_product(values + [1]) == array_product(values)
    assert array_product(values + [0]) == 0


def test_generators_accepted():
    assert array_sum(x for x in DEFAULT_VALUES) == array_sum(list(DEFAULT_VALUES))
    assert array_product(iter(DEFAULT_VALUES)) == array_product(list(DEFAULT_VALUES))


def test_main_without_fork(capsys):
    assert main(["--no-fork"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Parent Process: Sum = {array_sum(DEFAULT_VALUES)}",
        f"Child Process: Product = {array_product(DEFAULT_VALUES)}",
    ]