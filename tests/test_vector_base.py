import sys

import pytest

from cielcontainers.vector_base import LengthError, VectorBase


def test_capacity_of_empty_vector_is_zero():
    v = VectorBase()
    assert v.capacity() == 0


def test_capacity_grows_past_full():
    v = VectorBase.filled(100, 0)
    assert v.capacity() >= 100
    old_cap = v.capacity()
    assert len(v) == old_cap
    v.push_back(0)
    assert v.capacity() > old_cap
    assert len(v) == 101


def test_empty_push_clear():
    c = VectorBase()
    assert c.empty()
    c.push_back(1)
    assert not c.empty()
    c.clear()
    assert c.empty()


def test_max_size_bounded():
    c = VectorBase()
    assert c.max_size() <= sys.maxsize
    assert c.max_size() > 0


def test_growth_policy_doubles():
    v = VectorBase()
    caps = []
    for i in range(5):
        v.push_back(i)
        caps.append(v.capacity())
    assert caps == [1, 2, 4, 4, 8]
    assert v == [0, 1, 2, 3, 4]


def test_init_from_sized_and_generator():
    assert VectorBase([1, 2, 3, 4, 5]).capacity() == 5
    g = VectorBase(x for x in range(5))
    assert g == [0, 1, 2, 3, 4]
    assert g.capacity() == 8


def test_filled_copies_value():
    v = VectorBase.filled(3, [1])
    assert v == [[1], [1], [1]]
    v[0].append(2)
    assert v[1] == [1]


def test_filled_negative_raises():
    with pytest.raises(ValueError):
        VectorBase.filled(-1, 0)


def test_at_front_back():
    v = VectorBase([10, 20, 30])
    assert v.at(1) == 20
    assert v.front() == 10
    assert v.back() == 30
    with pytest.raises(IndexError):
        v.at(3)
    with pytest.raises(IndexError):
        v.at(-1)


def test_front_back_on_empty_raise():
    v = VectorBase()
    with pytest.raises(IndexError):
        v.front()
    with pytest.raises(IndexError):
        v.back()
    with pytest.raises(IndexError):
        v.pop_back()


def test_reserve_and_shrink():
    v = VectorBase([1, 2])
    v.reserve(10)
    assert v.capacity() == 10
    v.reserve(3)
    assert v.capacity() == 10
    v.shrink_to_fit()
    assert v.capacity() == 2
    assert v == [1, 2]


def test_reserve_beyond_max_size():
    v = VectorBase()
    with pytest.raises(LengthError):
        v.reserve(v.max_size() + 1)
    assert v.capacity() == 0


def test_assign_keeps_or_grows_capacity():
    v = VectorBase([1, 2, 3, 4, 5])
    v.assign([7, 8])
    assert v == [7, 8]
    assert v.capacity() == 5
    v.assign([1, 2, 3, 4, 5, 6, 7])
    assert v.capacity() == 7


def test_assign_from_generator_grows_geometrically():
    v = VectorBase([1, 2, 3])
    v.assign(x for x in range(4))
    assert v == [0, 1, 2, 3]
    assert v.capacity() == 6


def test_assign_fill():
    v = VectorBase([1])
    v.assign_fill(4, 9)
    assert v == [9, 9, 9, 9]
    assert v.capacity() == 4
    v.assign_fill(2, 0)
    assert v == [0, 0]
    assert v.capacity() == 4


def test_pop_back_returns_last():
    v = VectorBase([1, 2, 3])
    assert v.pop_back() == 3
    assert v == [1, 2]


def test_clear_keeps_capacity():
    v = VectorBase([1, 2, 3])
    v.clear()
    assert len(v) == 0
    assert v.capacity() == 3


def test_copy_is_independent():
    v = VectorBase([1, 2])
    v.reserve(10)
    c = v.copy()
    assert c == v
    assert c.capacity() == 2
    c.push_back(3)
    assert v == [1, 2]


def test_setitem_and_slices():
    v = VectorBase([1, 2, 3])
    v[1] = 5
    assert v[1] == 5
    assert v[0:2] == [1, 5]
    with pytest.raises(TypeError):
        v[0:1] = [9]


def test_reversed_and_repr():
    v = VectorBase([1, 2, 3])
    assert list(reversed(v)) == [3, 2, 1]
    assert repr(v) == "VectorBase([1, 2, 3])"


def test_equality_with_other_vectors():
    assert VectorBase([1, 2]) == VectorBase([1, 2])
    assert not (VectorBase([1, 2]) == VectorBase([2, 1]))
    assert not (VectorBase([1]) == "1")