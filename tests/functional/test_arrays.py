import pytest

from loscore.core.exceptions import UnsupportedCollectionError
from loscore.functional.arrays import head, tail, take, take_right, uniq
from loscore.functional.basics import add, identity


def test_identity_and_add():
    value = {"a": 1}
    assert identity(value) is value
    assert add(1, 2) == 3
    assert add("foo", "bar") == "foobar"


def test_head():
    assert head([5, 6, 7]) == 5
    assert head([]) is None


def test_tail():
    data = [1, 2, 3]
    assert tail(data) == [2, 3]
    assert data == [1, 2, 3]
    assert tail([]) == []


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, []),
        (1, [1]),
        (2, [1, 2]),
        (10, [1, 2, 3]),
        (-1, [3]),
        (-2, [2, 3]),
    ],
)
def test_take(n, expected):
    assert take([1, 2, 3], n) == expected


def test_take_defaults_to_one():
    assert take([1, 2, 3]) == [1]


def test_take_right():
    assert take_right([1, 2, 3]) == [3]
    assert take_right([1, 2, 3], 2) == [2, 3]
    assert take_right([1, 2, 3], 0) == []


def test_take_returns_list_for_tuples():
    assert take((1, 2, 3), 2) == [1, 2]


def test_uniq():
    assert uniq([1, 2, 1, 3, 2, 4]) == [1, 2, 3, 4]
    assert uniq(["b", "a", "b"]) == ["b", "a"]
    assert uniq([]) == []


def test_uniq_unhashable_values():
    assert uniq([[1], [2], [1], 3, 3]) == [[1], [2], 3]


def test_array_helpers_reject_mappings():
    with pytest.raises(UnsupportedCollectionError):
        head({"a": 1})
    with pytest.raises(UnsupportedCollectionError):
        uniq({"a": 1})
