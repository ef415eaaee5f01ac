from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .variable import Variable
from .varset import VariableSet


class KnowledgeBase:
    """A partial truth assignment: the variables in :attr:`true_vars` are known
    to be true, the ones in :attr:`false_vars` are known to be false, and all
    other variables are unknown.

    The two sets must be disjoint. This is the responsibility of the caller
    and it is not checked, see :meth:`is_consistent`.

    >>> from norlogic.atoms import variables
    >>> v0, v1, v2 = variables(0, 1, 2)
    >>> kb = KnowledgeBase(true_vars=[v0], false_vars=[v1])
    >>> kb
    KnowledgeBase(true_vars=VariableSet({v0}), false_vars=VariableSet({v1}))
    >>> kb.test_variable(v0), kb.test_variable(v1), kb.test_variable(v2)
    (True, False, None)
    """

    def __init__(self, true_vars: Iterable[Variable] = (),
                 false_vars: Iterable[Variable] = ()) -> None:
        self.true_vars = VariableSet(true_vars)
        self.false_vars = VariableSet(false_vars)

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}(true_vars={self.true_vars!r}, '
                f'false_vars={self.false_vars!r})')

    @classmethod
    def from_assignment(cls, assignment: Mapping[Variable, bool]) -> KnowledgeBase:
        """Create a knowledge base from a dictionary mapping variables to truth
        values.

        >>> from norlogic.atoms import variables
        >>> v0, v1 = variables(0, 1)
        >>> KnowledgeBase.from_assignment({v0: False, v1: True})
        KnowledgeBase(true_vars=VariableSet({v1}), false_vars=VariableSet({v0}))
        """
        true_vars = (v for v, value in assignment.items() if value)
        false_vars = (v for v, value in assignment.items() if not value)
        return cls(true_vars, false_vars)

    def is_consistent(self) -> bool:
        """Test whether no variable is known to be both true and false.
        """
        return self.true_vars.intersect(self.false_vars).is_empty()

    def test_variable(self, v: Variable) -> Optional[bool]:
        """The truth value of `v`, or :data:`None` if `v` is unknown.
        """
        if self.true_vars.contains(v):
            return True
        if self.false_vars.contains(v):
            return False
        return None

    def variables(self) -> VariableSet:
        """All variables with a known truth value.
        """
        return self.true_vars.unify(self.false_vars)
