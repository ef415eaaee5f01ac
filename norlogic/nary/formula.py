from __future__ import annotations

from abc import abstractmethod
import functools
from typing import Any, Final, Iterator, Mapping, Optional, Self
from typing_extensions import TypeIs

from IPython.lib import pretty

from ..atoms import Variable, VariableSet

from ..support.tracing import trace  # noqa


@functools.total_ordering
class Formula:
    r"""This abstract base class implements representations of and methods on
    propositional formulas recursively built from variables using a single
    operator, the n-ary NOR :math:`\downarrow`. It has exactly two
    subclasses:

    1. :class:`Var` for occurrences of variables,

    2. :class:`Nor` for :math:`\downarrow(\varphi_1, \dots, \varphi_n)`,
       which holds if and only if none of the :math:`\varphi_i` holds.

    All other Boolean operators are derived, see
    :mod:`norlogic.nary.connectives`. In particular, the truth values are
    :data:`T` ``= Nor()`` and :data:`F` ``= Nor(T)``.

    Formulas are immutable. They are totally ordered: variables come first,
    sorted by their index, followed by NORs, sorted lexicographically by
    their arguments.
    """

    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.

        .. seealso::
            * :attr:`Var.var` -- the variable of a :class:`Var`
        """
        return self._args

    @args.setter
    def args(self, args: tuple[Any, ...]) -> None:
        self._args = args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :func:`.connectives.And`.

        >>> Var(0) & Var(1)
        Nor(Nor(Var(v0)), Nor(Var(v1)))
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for equality of `self` and `other`.

        Note that this is not a logical operator for equality.

        >>> Nor(Var(0), T) == Nor(Var(0), Nor())
        True
        >>> Nor(Var(0), Var(1)) == Nor(Var(1), Var(0))
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __getnewargs__(self) -> tuple[Any, ...]:
        return self.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :func:`.connectives.Not`.

        >>> ~ Var(0)
        Nor(Var(v0))
        """
        return Not(self)

    def __le__(self, other: Formula) -> bool:
        """Returns :external:obj:`True` if `self` should be sorted before or is
        equal to `other`.

        >>> Var(5) < Nor()
        True
        >>> sorted([Nor(Var(1)), F, Var(2), T, Var(0)])
        [Var(v0), Var(v2), T, Nor(Var(v1)), F]
        """
        L = (Var, Nor)
        if self.op is not other.op:
            return L.index(self.op) < L.index(other.op)
        return self.args <= other.args

    def __lshift__(self, other: Formula) -> Formula:
        r"""Override the :obj:`\<\< <object.__lshift__>` operator to apply
        :func:`.connectives.Implies` with reversed sides.
        """
        return Implies(other, self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply
        :func:`.connectives.Or`.

        >>> Var(0) | Var(1)
        Nor(Nor(Var(v0), Var(v1)))
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of `self` that is suitable for use as an input.
        The truth values are represented as :data:`T` and :data:`F`.
        """
        if self == T:
            return 'T'
        if self == F:
            return 'F'
        r = self.op.__name__
        r += '('
        if self.args:
            r += self.args[0].__repr__()
            for a in self.args[1:]:
                r += ', ' + a.__repr__()
        r += ')'
        return r

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :func:`.connectives.Implies`.
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Debug representation: a variable is rendered as ``v`` followed by
        its index, a NOR as the bracketed list of its rendered arguments. This
        is not meant as a stable serialization format.

        >>> print(Nor(Var(0), Nor(Var(2), T)))
        [v0, [v2, []]]
        >>> print(F)
        [[]]
        """
        match self:
            case Var():
                return repr(self.var)
            case Nor():
                return '[' + ', '.join(str(arg) for arg in self.args) + ']'
            case _:
                assert False, type(self)

    def atoms(self) -> Iterator[Var]:
        """An iterator over all occurrences of variables in `self`, from left
        to right.

        >>> f = Nor(Var(1), Nor(Var(0), Var(1)))
        >>> list(f.atoms())
        [Var(v1), Var(v0), Var(v1)]
        """
        match self:
            case Var():
                yield self
            case Nor():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                assert False, type(self)

    def depth(self) -> int:
        """The depth of `self`, where variables have depth 0.

        >>> Var(0).depth()
        0
        >>> T.depth(), F.depth()
        (1, 2)
        """
        match self:
            case Var():
                return 0
            case Nor():
                return 1 + max((arg.depth() for arg in self.args), default=0)
            case _:
                assert False, type(self)

    @staticmethod
    def is_false(f: Formula) -> bool:
        """Test whether `f` is the truth value :data:`F`.
        """
        return f == F

    @staticmethod
    def is_nor(f: Formula) -> TypeIs[Nor]:
        """Type narrowing :func:`isinstance` test for :class:`Nor`.
        """
        return isinstance(f, Nor)

    @staticmethod
    def is_true(f: Formula) -> bool:
        """Test whether `f` is the truth value :data:`T`.
        """
        return f == T

    @staticmethod
    def is_var(f: Formula) -> TypeIs[Var]:
        """Type narrowing :func:`isinstance` test for :class:`Var`.
        """
        return isinstance(f, Var)

    def normify(self) -> Formula:
        """Compute the normal form of `self`. This is a shortcut for
        :func:`.normify.normify`.

        >>> Nor(Var(1), Var(0), Var(1)).normify()
        Nor(Var(v0), Var(v1))
        """
        return normify(self)

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        if self == T or self == F or Formula.is_var(self):
            p.text(repr(self))
            return
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def subs(self, substitution: Mapping[Variable, Formula]) -> Formula:
        """Simultaneous substitution of formulas for variables.

        >>> from norlogic.atoms import variables
        >>> v0, v1 = variables(0, 1)
        >>> Nor(Var(v0), Var(v1)).subs({v0: Var(v1), v1: T})
        Nor(Var(v1), T)
        """
        match self:
            case Var():
                return substitution.get(self.var, self)
            case Nor():
                return Nor(*(arg.subs(substitution) for arg in self.args))
            case _:
                assert False, type(self)

    def variables(self) -> VariableSet:
        """The set of all variables occurring in `self`.

        >>> Nor(Var(3), Nor(Var(0), Var(3))).variables()
        VariableSet({v0, v3})
        """
        result = VariableSet()
        for atom in self.atoms():
            result.add(atom.var)
        return result


class Var(Formula):
    """An occurrence of a variable. An :class:`int` is accepted in place of a
    :class:`.Variable` and converted.

    >>> Var(0)
    Var(v0)
    >>> Var(70)
    Traceback (most recent call last):
    ...
    norlogic.atoms.variable.VariableRangeError: variable index 70 out of range [0, 64)
    """

    def __init__(self, var: Variable | int) -> None:
        super().__init__()
        if not isinstance(var, Variable):
            var = Variable(var)
        self.args = (var,)

    @property
    def var(self) -> Variable:
        """The variable.
        """
        return self.args[0]


class Nor(Formula):
    r"""The n-ary NOR :math:`\downarrow(\varphi_1, \dots, \varphi_n)`, which
    holds if and only if none of its arguments holds. Without arguments, it
    is true.

    >>> Nor(Var(0), Var(1))
    Nor(Var(v0), Var(v1))
    >>> Nor()
    T
    >>> Nor(Nor())
    F
    """

    def __init__(self, *args: Formula) -> None:
        super().__init__()
        self.args = args


T: Final[Nor] = Nor()
"""The truth value true, which is the NOR of nothing.
"""

F: Final[Nor] = Nor(T)
"""The truth value false, which is the negation of :data:`T`.
"""


from .connectives import And, Implies, Not, Or  # noqa: E402
from .normify import normify  # noqa: E402
