from random import randint
import pytest
from extraseq import element_at, cyclic_index, clamp_index, IndexingPolicy, \
    InvalidArgumentError, IndexOutOfRangeError


def test_cyclic():
    arr = [randint(0, 1000) for _ in range(37)]

    for _ in range(200):
        i = randint(-500, 500)
        value = element_at(arr, i, IndexingPolicy.CYCLIC)
        assert value == arr[i % len(arr)]
        assert value in arr

        k = randint(-10, 10)
        assert element_at(arr, i + k * len(arr), 'cyclic') == value

    assert cyclic_index(-7, 5) == 3
    assert cyclic_index(-5, 5) == 0
    assert cyclic_index(12, 5) == 2
    assert cyclic_index(-10 ** 12 - 1, 3) == (-10 ** 12 - 1) % 3


def test_clamp():
    arr = [randint(0, 1000) for _ in range(37)]

    for i in range(-50, 1):
        assert element_at(arr, i, IndexingPolicy.CLAMP) \
            == element_at(arr, 0, IndexingPolicy.DEFAULT)

    for i in range(len(arr) - 1, 100):
        assert element_at(arr, i, 'clamp') \
            == element_at(arr, len(arr) - 1)

    for i in range(len(arr)):
        assert element_at(arr, i, IndexingPolicy.CLAMP) == arr[i]

    assert clamp_index(-3, 4) == 0
    assert clamp_index(9, 4) == 3
    assert clamp_index(2, 4) == 2


def test_default():
    arr = [randint(0, 1000) for _ in range(37)]
    assert [element_at(arr, i) for i in range(len(arr))] == arr

    for i in [len(arr), len(arr) + 10, -1, -len(arr)]:
        with pytest.raises(IndexOutOfRangeError) as excinfo:
            element_at(arr, i)
        assert excinfo.value.index == i
        assert excinfo.value.size == len(arr)

    # still an IndexError for callers unaware of extraseq
    with pytest.raises(IndexError):
        element_at(arr, 100, IndexingPolicy.DEFAULT)


def test_scenario():
    data = [10, 20, 30]
    assert element_at(data, -1, IndexingPolicy.CYCLIC) == 30
    assert element_at(data, 5, IndexingPolicy.CYCLIC) == 30
    assert element_at(data, -1, IndexingPolicy.CLAMP) == 10
    assert element_at(data, 99, IndexingPolicy.CLAMP) == 30
    assert element_at(data, 1, IndexingPolicy.DEFAULT) == 20
    with pytest.raises(IndexOutOfRangeError):
        element_at(data, 5, IndexingPolicy.DEFAULT)


def test_single_pass():
    reads = []

    def gen():
        for v in ['a', 'b', 'c', 'd']:
            reads.append(v)
            yield v

    assert element_at(gen(), -2, IndexingPolicy.CYCLIC) == 'c'
    assert reads == ['a', 'b', 'c', 'd']

    it = iter(range(10))
    assert element_at(it, 3) == 3
    assert list(it) == []


@pytest.mark.parametrize("policy", list(IndexingPolicy))
def test_invalid_source(policy):
    for i in [-1, 0, 1]:
        with pytest.raises(InvalidArgumentError) as excinfo:
            element_at([], i, policy)
        assert excinfo.value.param == "source"

        with pytest.raises(InvalidArgumentError) as excinfo:
            element_at(iter([]), i, policy)
        assert excinfo.value.param == "source"

        with pytest.raises(InvalidArgumentError) as excinfo:
            element_at(None, i, policy)
        assert excinfo.value.param == "source"


def test_invalid_arguments():
    with pytest.raises(TypeError):
        element_at([1, 2, 3], 1.0)

    with pytest.raises(ValueError):
        element_at([1, 2, 3], 1, 'wrap')

    with pytest.raises(InvalidArgumentError):
        cyclic_index(3, 0)

    with pytest.raises(InvalidArgumentError):
        clamp_index(3, -1)


@pytest.mark.timeout(3)
def test_large_indices():
    arr = ['x', 'y', 'z']
    assert element_at(arr, -3 * 10 ** 15 - 1, IndexingPolicy.CYCLIC) == 'z'
    assert element_at(arr, 10 ** 18, IndexingPolicy.CYCLIC) == 'y'
    assert element_at(arr, -10 ** 18, IndexingPolicy.CLAMP) == 'x'
