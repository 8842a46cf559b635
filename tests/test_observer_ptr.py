import pytest

from cielcontainers.observer_ptr import ObserverPtr, make_observer


class Base:
    pass


class Derived(Base):
    pass


class Box:
    def __init__(self, value):
        self.value = value


def test_all():
    p1 = ObserverPtr()
    p2 = ObserverPtr(None)

    assert not p1
    assert not p2

    up1 = Box(123)
    p3 = ObserverPtr(up1)

    assert p3
    assert p3.get() is up1
    assert p3.get().value == 123

    assert hash(p3) == hash(id(p3.get()))

    p1.swap(p3)

    assert not p3
    assert p1.get() is up1

    up2 = Derived()
    p4 = ObserverPtr(up2)

    assert p4
    assert p4.get() is up2
    assert p4.release() is up2
    assert not p4

    p4.reset()
    assert not p4

    p4.reset(up2)
    assert p4.get() is up2


def test_equality_is_identity():
    a = Box(1)
    b = Box(1)
    assert ObserverPtr(a) == ObserverPtr(a)
    assert not (ObserverPtr(a) == ObserverPtr(b))


def test_equality_with_none():
    assert ObserverPtr() == None  # noqa: E711
    assert not (ObserverPtr(Box(1)) == None)  # noqa: E711


def test_make_observer():
    target = Box(7)
    p = make_observer(target)
    assert p.get() is target
    assert p == ObserverPtr(target)


def test_ordering_is_consistent():
    a, b = Box(1), Box(2)
    pa, pb = ObserverPtr(a), ObserverPtr(b)
    assert (pa < pb) != (pb < pa)
    assert not (pa < ObserverPtr(a))


def test_usable_as_dict_key():
    target = Box(3)
    table = {ObserverPtr(target): "seen"}
    assert table[make_observer(target)] == "seen"


def test_release_on_empty_returns_none():
    p = ObserverPtr()
    assert p.release() is None
    assert not p


def test_lt_with_other_type_raises():
    with pytest.raises(TypeError):
        ObserverPtr(Box(1)) < 5