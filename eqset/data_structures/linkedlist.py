from collections.abc import Reversible, Sized

__all__ = ['LinkedList', 'Element']


class Element:
    '''
        Position of a single value inside a LinkedList.

        An element stays valid until it is removed from its list or the list
        is cleared; after that next/prev are None and the list no longer
        accepts it.
    '''
    __slots__ = 'value', '_next', '_prev', '_root'

    def __init__(self, value, root=None):
        self.value = value
        self._next = None
        self._prev = None
        self._root = root

    @property
    def live(self):
        #a sentinel points at itself until its list is cleared
        root = self._root
        return root is not None and root._root is root

    @property
    def next(self):
        n = self._next
        if not self.live or n is self._root:
            return None
        return n

    @property
    def prev(self):
        p = self._prev
        if not self.live or p is self._root:
            return None
        return p

    def __repr__(self):
        return 'Element({!r})'.format(self.value)


class LinkedList(Sized, Reversible):
    '''
        Doubly linked list with a sentinel root.

        push_front/push_back/remove are O(1), traversal is O(n).
        clear() swaps in a fresh sentinel so every outstanding Element is
        invalidated without walking the list.
    '''
    __slots__ = '_root', '_len'

    def __init__(self, it=()):
        self.clear()
        for v in it:
            self.push_back(v)

    def clear(self):
        old = getattr(self, '_root', None)
        if old is not None:
            old._root = None

        root = Element(None)
        root._root = root
        root._next = root
        root._prev = root
        self._root = root
        self._len = 0

    def __len__(self):
        return self._len

    def owns(self, elem):
        return isinstance(elem, Element) and elem._root is self._root and elem is not self._root

    def front(self):
        if not self._len:
            return None
        return self._root._next

    def back(self):
        if not self._len:
            return None
        return self._root._prev

    def _insert_after(self, value, at):
        e = Element(value, self._root)
        e._prev = at
        e._next = at._next
        at._next._prev = e
        at._next = e
        self._len += 1
        return e

    def push_front(self, value):
        return self._insert_after(value, self._root)

    def push_back(self, value):
        return self._insert_after(value, self._root._prev)

    def remove(self, elem):
        if not self.owns(elem):
            raise ValueError('{!r} is not in this list'.format(elem))

        elem._prev._next = elem._next
        elem._next._prev = elem._prev
        #drop links so the stale handle can't walk back into the list
        elem._next = None
        elem._prev = None
        elem._root = None
        self._len -= 1
        return elem.value

    def elements(self):
        e = self.front()
        while e is not None:
            #grab the successor first, e may be removed while suspended
            nxt = e.next
            yield e
            e = nxt

    def __iter__(self):
        for e in self.elements():
            yield e.value

    def __reversed__(self):
        e = self.back()
        while e is not None:
            prv = e.prev
            yield e.value
            e = prv

    def __repr__(self):
        c = []
        for v in self:
            c.append('{!r}'.format(v))

        s = 'LinkedList([' + ', '.join(c) + '])'
        return s
