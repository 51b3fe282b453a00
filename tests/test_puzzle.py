import random

import pytest

from countdown.node import Leaf
from countdown.puzzle import Puzzle, PuzzleGenerator, PuzzleRules


def test_default_rules():
    rules = PuzzleRules()
    assert rules.large_numbers == [25, 50, 75, 100]
    assert rules.small_numbers == list(range(1, 11))
    assert (rules.num_large, rules.num_small) == (2, 4)
    assert (rules.target_min, rules.target_max) == (100, 999)


def test_generated_round():
    generator = PuzzleGenerator(rng=random.Random(7))
    numbers, large, small = generator.generate_numbers()
    assert numbers == large + small
    assert len(large) == 2 and len(set(large)) == 2
    assert set(large) <= {25, 50, 75, 100}
    assert len(small) == 4
    assert all(1 <= n <= 10 for n in small)
    assert 100 <= generator.generate_target() <= 999


def test_generation_is_seeded():
    first = PuzzleGenerator(rng=random.Random(42)).generate()
    second = PuzzleGenerator(rng=random.Random(42)).generate()
    assert first == second
    first.validate()


@pytest.mark.parametrize("kwargs", [
    {"num_large": 5},
    {"num_large": -1},
    {"num_large": 1, "num_small": 0},
    {"small_numbers": []},
    {"small_numbers": [0, 1]},
    {"target_min": 500, "target_max": 100},
])
def test_invalid_rules(kwargs):
    with pytest.raises(ValueError):
        PuzzleGenerator(PuzzleRules(**kwargs))


def test_puzzle_leaves():
    leaves = Puzzle(numbers=[4, 4, 9], target=17).leaves()
    assert all(isinstance(leaf, Leaf) for leaf in leaves)
    assert [leaf.evaluate() for leaf in leaves] == [4, 4, 9]
    assert leaves[0] is not leaves[1]


@pytest.mark.parametrize("numbers, target", [
    ([5], 5),
    ([], 5),
    ([5, 0], 5),
    ([5, -2], 5),
    ([5, 2.5], 5),
    ([5, True], 5),
    ([5, 2], -1),
    ([5, 2], "7"),
])
def test_invalid_puzzle(numbers, target):
    with pytest.raises(ValueError):
        Puzzle(numbers=numbers, target=target).validate()


def test_zero_target_is_allowed():
    Puzzle(numbers=[5, 5], target=0).validate()
