"""Variables are the atoms of formulas. A variable is identified by a small
non-negative integer index. The admissible indices are bounded by
:data:`CAPACITY`, so that a set of variables fits into one 64-bit word, see
:class:`.varset.VariableSet`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..support.excepthook import NoTraceException


CAPACITY: Final = 64
"""The number of distinct variables. Admissible indices are ``0, ...,
CAPACITY - 1``.
"""


class VariableRangeError(NoTraceException, ValueError):
    """Raised when a variable is created with an index outside ``[0,
    CAPACITY)``.
    """
    pass


@dataclass(frozen=True, order=True)
class Variable:
    """A variable with index `index`. Variables are immutable values, they
    compare and sort by their index.

    >>> Variable(3)
    v3
    >>> Variable(3) == Variable(3)
    True
    >>> Variable(2) < Variable(10)
    True
    >>> Variable(64)
    Traceback (most recent call last):
    ...
    norlogic.atoms.variable.VariableRangeError: variable index 64 out of range [0, 64)
    """

    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(f'variable index must be int, not {type(self.index).__name__}')
        if not 0 <= self.index < CAPACITY:
            raise VariableRangeError(
                f'variable index {self.index} out of range [0, {CAPACITY})')

    def __repr__(self) -> str:
        return f'v{self.index}'


def variables(*indices: int) -> tuple[Variable, ...]:
    """Obtain several variables simultaneously by their indices.

    >>> v0, v1, v2 = variables(0, 1, 2)
    >>> v2
    v2
    """
    return tuple(Variable(index) for index in indices)
