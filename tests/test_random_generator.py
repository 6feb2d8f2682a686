import random

import pytest

from simplejudge.random_generator import RandomGenerator


def test_zero_elements_raises():
    with pytest.raises(ValueError):
        RandomGenerator(3, random.Random(1)).next(0)


def test_single_element_always_zero():
    gen = RandomGenerator(2, random.Random(5))
    assert [gen.next(1) for _ in range(5)] == [0] * 5


@pytest.mark.parametrize("seed", range(10))
def test_full_capacity_gives_permutation(seed):
    gen = RandomGenerator(6, random.Random(seed))
    draws = [gen.next(6) for _ in range(6)]
    assert sorted(draws) == list(range(6))


@pytest.mark.parametrize("seed", range(10))
def test_window_of_capacity_plus_one_is_distinct(seed):
    capacity = 3
    gen = RandomGenerator(capacity, random.Random(seed))
    draws = [gen.next(8) for _ in range(40)]
    for start in range(len(draws) - capacity):
        window = draws[start:start + capacity + 1]
        assert len(set(window)) == capacity + 1


def test_results_in_range():
    gen = RandomGenerator(2, random.Random(3))
    assert all(0 <= gen.next(5) < 5 for _ in range(50))


def test_same_seed_same_sequence():
    first = RandomGenerator(2, random.Random(42))
    second = RandomGenerator(2, random.Random(42))
    assert [first.next(10) for _ in range(20)] == \
        [second.next(10) for _ in range(20)]