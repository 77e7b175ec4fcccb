import logging
import operator
import reprlib
from collections.abc import MutableSet, Reversible, Set

from .linkedlist import LinkedList

__all__ = ['EqualitySet']

logger = logging.getLogger(__name__)


class EqualitySet(MutableSet, Reversible):
    '''
        Set whose uniqueness is decided by an equality test alone.

        Elements need not be hashable or orderable.  Membership is
        eq(candidate, stored), which defaults to ==.  Any element __eq__
        must answer False (or NotImplemented) for operands of an unrelated
        type rather than raise.

        Iteration yields the most recently inserted element first.  This is
        a property of the storage, not a promise of insertion order.
        Mutating the set while an iterator over it is live makes that
        iterator raise RuntimeError on its next step, even when the last
        element was already yielded, as builtin set does.

        EqualitySets may hold other EqualitySets; they compare structurally.
        Nested sets are held by reference, so mutating one after it was
        inserted changes what the outer set contains and can leave two equal
        members in it.  Freeze nested sets by convention or copy() them
        before inserting.

        Not thread safe: mutation must be serialised against every read.
    '''
    __slots__ = '_l', '_eq', '_version'

    def __init__(self, it=(), *, eq=None):
        '''
          it : initial values, duplicates under eq are dropped
          eq : eq(candidate, stored) -> bool, defaults to operator.eq
        '''
        self._l = LinkedList()
        self._eq = operator.eq if eq is None else eq
        self._version = 0

        for i in it:
            self.add(i)

    @property
    def eq(self):
        return self._eq

    def _new(self):
        return type(self)(eq=self._eq)

    def _from_iterable(self, it):
        return type(self)(it, eq=self._eq)

    def _coerce(self, other):
        if isinstance(other, EqualitySet):
            return other
        return self._from_iterable(other)

    def _find(self, value):
        eq = self._eq
        for e in self._l.elements():
            if eq(value, e.value):
                return e
        return None

    def _walk(self, reverse):
        version = self._version
        vals = reversed(self._l) if reverse else iter(self._l)
        for v in vals:
            yield v
            if version != self._version:
                logger.debug('%s mutated under an active iterator', type(self).__name__)
                raise RuntimeError('{} changed during iteration'.format(type(self).__name__))

    def __len__(self):
        return len(self._l)

    def contains(self, value):
        return self._find(value) is not None

    __contains__ = contains

    def __iter__(self):
        return self._walk(False)

    def __reversed__(self):
        return self._walk(True)

    def front(self):
        return self._l.front()

    def back(self):
        return self._l.back()

    def insert(self, value):
        '''
           Adds value, returning its Element or None if it was already present
        '''
        if self.contains(value):
            logger.debug('duplicate not inserted: %r', value)
            return None

        self._version += 1
        return self._l.push_front(value)

    def add(self, value):
        return self.insert(value) is not None

    def discard(self, value):
        e = self._find(value)
        if e is None:
            return False

        self._version += 1
        self._l.remove(e)
        return True

    def remove(self, value):
        if not self.discard(value):
            raise KeyError(value)

    def remove_element(self, elem):
        '''
           O(1) removal by the handle insert() returned
        '''
        if not self._l.owns(elem):
            logger.debug('stale or foreign handle ignored: %r', elem)
            return False

        self._version += 1
        self._l.remove(elem)
        return True

    def pop(self):
        e = self._l.front()
        if e is None:
            raise KeyError('pop from an empty set')

        self._version += 1
        return self._l.remove(e)

    def clear(self):
        self._version += 1
        self._l.clear()
        logger.debug('%s cleared', type(self).__name__)

    def update(self, *its):
        for it in its:
            for v in it:
                self.add(v)

    def copy(self):
        c = self._new()
        for v in reversed(self._l):
            c._l.push_front(v)
        return c

    __copy__ = copy

    def subset(self, other):
        '''
           True if every element of other is in self (other <= self)
        '''
        other = self._coerce(other)
        if len(other) > len(self):
            return False

        for v in other:
            if not self.contains(v):
                return False
        return True

    def superset(self, other):
        '''
           True if every element of self is in other (self <= other)
        '''
        return self._coerce(other).subset(self)

    def equal(self, other):
        if not isinstance(other, Set):
            return False
        if other is self:
            return True

        other = self._coerce(other)
        return len(self) == len(other) and self.subset(other)

    def issubset(self, other):
        return self.superset(other)

    def issuperset(self, other):
        return self.subset(other)

    def union(self, other):
        u = self._new()
        for v in self._l:
            u._l.push_front(v)

        for v in other:
            u.add(v)
        return u

    def intersection(self, other):
        other = self._coerce(other)
        i = self._new()
        for v in self._l:
            if other.contains(v):
                i._l.push_front(v)
        return i

    def relative_complement(self, other):
        '''
           Elements of self that are not in other
        '''
        other = self._coerce(other)
        d = self._new()
        for v in self._l:
            if not other.contains(v):
                d._l.push_front(v)
        return d

    difference = relative_complement

    def complement(self, other):
        '''
           Elements of other that are not in self
        '''
        return self._coerce(other).relative_complement(self)

    def symmetric_difference(self, other):
        other = self._coerce(other)
        return self.union(other).relative_complement(self.intersection(other))

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.equal(other)

    __hash__ = None

    def __le__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issubset(other)

    def __ge__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issuperset(other)

    def __or__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.relative_complement(other)

    def __xor__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.symmetric_difference(other)

    @reprlib.recursive_repr()
    def __repr__(self):
        c = []
        for v in self:
            c.append('{!r}'.format(v))

        s = type(self).__name__ + '({' + ', '.join(c) + '})'
        return s
