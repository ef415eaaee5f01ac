"""Sets of variables as bit masks. Bit `i` of the mask is set if and only if
the variable with index `i` is a member.

The primitive operations are union, intersection, and difference. Containment
is derived from removal, and the subset relation is derived from difference.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Self

from .variable import Variable

from ..support.tracing import trace  # noqa


class VariableSet:
    """A finite set of variables.

    >>> from norlogic.atoms import variables
    >>> v0, v1, v2 = variables(0, 1, 2)
    >>> s = VariableSet([v2, v0])
    >>> s
    VariableSet({v0, v2})
    >>> v2 in s, v1 in s
    (True, False)
    >>> s | VariableSet.singleton(v1)
    VariableSet({v0, v1, v2})
    >>> len(s)
    2
    """

    __slots__ = ('_bits',)

    def __init__(self, vars: Iterable[Variable] = ()) -> None:
        self._bits = 0
        for v in vars:
            self.add(v)

    @classmethod
    def _from_bits(cls, bits: int) -> Self:
        me = cls()
        me._bits = bits
        return me

    @classmethod
    def singleton(cls, v: Variable) -> Self:
        return cls._from_bits(1 << v.index)

    def __and__(self, other: VariableSet) -> VariableSet:
        return self.intersect(other)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, v: object) -> bool:
        return isinstance(v, Variable) and self.contains(v)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariableSet):
            return NotImplemented
        return self._bits == other._bits

    def __iter__(self) -> Iterator[Variable]:
        """Iterate over the members in ascending order of their indices. This
        drains a copy, so that `self` is not changed.
        """
        return self.copy().drain()

    def __le__(self, other: VariableSet) -> bool:
        return self.is_subset(other)

    def __len__(self) -> int:
        return self._bits.bit_count()

    def __or__(self, other: VariableSet) -> VariableSet:
        return self.unify(other)

    def __repr__(self) -> str:
        if self.is_empty():
            return f'{self.__class__.__name__}()'
        members = ', '.join(repr(v) for v in self)
        return f'{self.__class__.__name__}({{{members}}})'

    def __sub__(self, other: VariableSet) -> VariableSet:
        return self.difference(other)

    def add(self, v: Variable) -> None:
        """Add `v` to `self`.
        """
        self._bits = self.added(v)._bits

    def added(self, v: Variable) -> VariableSet:
        """The union of `self` and ``{v}``.
        """
        return self.unify(VariableSet.singleton(v))

    def contains(self, v: Variable) -> bool:
        """Test for membership. A variable is a member if removing it makes a
        difference.
        """
        return self != self.removed(v)

    def copy(self) -> VariableSet:
        return VariableSet._from_bits(self._bits)

    def difference(self, other: VariableSet) -> VariableSet:
        return VariableSet._from_bits(self._bits & ~other._bits)

    def drain(self) -> Iterator[Variable]:
        """Destructively iterate over the members in ascending order of their
        indices. Afterwards, `self` is empty.

        >>> from norlogic.atoms import variables
        >>> s = VariableSet(variables(5, 1, 3))
        >>> list(s.drain())
        [v1, v3, v5]
        >>> s
        VariableSet()
        """
        while (v := self.take()) is not None:
            yield v

    def intersect(self, other: VariableSet) -> VariableSet:
        return VariableSet._from_bits(self._bits & other._bits)

    def is_empty(self) -> bool:
        return self._bits == 0

    def is_subset(self, other: VariableSet) -> bool:
        """Test whether `self` is a subset of `other`, i.e., nothing remains
        when removing `other` from `self`.
        """
        return self.difference(other).is_empty()

    def remove(self, v: Variable) -> None:
        """Remove `v` from `self`. Removing a non-member has no effect.
        """
        self._bits = self.removed(v)._bits

    def removed(self, v: Variable) -> VariableSet:
        """The difference of `self` and ``{v}``.
        """
        return self.difference(VariableSet.singleton(v))

    def take(self) -> Optional[Variable]:
        """Remove and return the member with the smallest index, or
        :data:`None` if `self` is empty.
        """
        if self.is_empty():
            return None
        lowest = self._bits & -self._bits
        v = Variable(lowest.bit_length() - 1)
        self.remove(v)
        return v

    def unify(self, other: VariableSet) -> VariableSet:
        return VariableSet._from_bits(self._bits | other._bits)
