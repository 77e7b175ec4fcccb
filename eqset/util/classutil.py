__all__ = ['Equatable']


class Equatable:
    '''
        Equatable:
            value wrapper that is only ever equal to a wrapper of exactly
            the same type holding an equal value; anything else compares
            unequal instead of raising

        ------------------------------------

        class EqInt(Equatable):
            __slots__ = ()

        class EqStr(Equatable):
            __slots__ = ()

        assert EqInt(3) == EqInt(3)
        assert EqInt(3) != EqInt(4)
        assert EqInt(3) != 3
        assert EqInt(3) != EqStr(3)
    '''
    __slots__ = '_value',

    def __init__(self, value):
        self._value = value

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        return type(other) is type(self) and self._value == other._value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self._value))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._value)
