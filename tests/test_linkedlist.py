import pytest

from eqset.data_structures.linkedlist import LinkedList


def test_empty():
    l = LinkedList()
    assert len(l) == 0
    assert l.front() is None
    assert l.back() is None
    assert list(l) == []


def test_push_front_and_back():
    l = LinkedList()
    l.push_back(2)
    l.push_front(1)
    l.push_back(3)
    assert list(l) == [1, 2, 3]
    assert list(reversed(l)) == [3, 2, 1]
    assert l.front().value == 1
    assert l.back().value == 3
    assert len(l) == 3


def test_element_links():
    l = LinkedList([1, 2, 3])
    e = l.front()
    assert e.prev is None
    assert e.next.value == 2
    assert e.next.next.value == 3
    assert e.next.next.next is None
    assert l.back().prev.value == 2


def test_remove():
    l = LinkedList([1, 2, 3])
    mid = l.front().next
    assert l.remove(mid) == 2
    assert list(l) == [1, 3]
    assert len(l) == 2
    assert mid.next is None and mid.prev is None

    with pytest.raises(ValueError):
        l.remove(mid)


def test_remove_foreign_element():
    a = LinkedList([1])
    b = LinkedList([1])
    assert not a.owns(b.front())
    with pytest.raises(ValueError):
        a.remove(b.front())
    assert len(b) == 1


def test_clear_invalidates_elements():
    l = LinkedList([1, 2])
    e = l.front()
    l.clear()
    assert len(l) == 0
    assert list(l) == []
    assert not l.owns(e)
    with pytest.raises(ValueError):
        l.remove(e)

    l.push_front(5)
    assert list(l) == [5]


def test_remove_current_while_traversing():
    l = LinkedList([1, 2, 3, 4])
    for e in l.elements():
        if e.value % 2:
            l.remove(e)
    assert list(l) == [2, 4]


def test_repr():
    assert repr(LinkedList([1, 'a'])) == "LinkedList([1, 'a'])"


def test_owns_rejects_non_elements():
    l = LinkedList([1])
    assert not l.owns(None)
    assert not l.owns(1)
    assert l.owns(l.front())


def test_cleared_elements_stop_walking():
    l = LinkedList([1, 2, 3])
    e = l.front()
    l.clear()
    assert e.next is None
    assert e.prev is None
    assert not e.live

    l.push_back(4)
    assert l.front().live
    assert l.front().next is None
