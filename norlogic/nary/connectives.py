"""Boolean operators derived from :class:`.formula.Nor`. These are plain
functions building NOR formulas; none of them introduces a new operator.

>>> from norlogic.atoms import variables
>>> a, b = (Var(v) for v in variables(0, 1))
>>> print(Implies(a, b))
[[[v0], v1]]
"""
from __future__ import annotations

from .formula import F, Formula, Nor, T, Var  # noqa: F401


def Not(arg: Formula) -> Nor:
    """The negation of `arg`, which is the NOR of `arg` alone.

    >>> Not(T)
    F
    """
    return Nor(arg)


def And(*args: Formula) -> Nor:
    """The conjunction of `args`, which is the NOR of their negations.

    >>> And()
    T
    >>> print(And(Var(0), Var(1), Var(2)))
    [[v0], [v1], [v2]]
    """
    return Nor(*(Not(arg) for arg in args))


def Or(*args: Formula) -> Nor:
    """The disjunction of `args`, which is the negation of their NOR.

    >>> Or()
    F
    """
    return Not(Nor(*args))


def Nand(*args: Formula) -> Nor:
    """The negation of the conjunction of `args`.

    >>> Nand()
    F
    """
    return Not(And(*args))


def NotImplies(lhs: Formula, rhs: Formula) -> Nor:
    r"""The negated implication :math:`\neg(\varphi \longrightarrow \psi)`,
    i.e., :math:`\varphi \land \neg \psi`.
    """
    return Nor(Not(lhs), rhs)


def Implies(lhs: Formula, rhs: Formula) -> Nor:
    r"""The implication :math:`\varphi \longrightarrow \psi`. The converse
    direction is available via ``rhs << lhs``.

    >>> Implies(Var(0), Var(1)) == (Var(1) << Var(0))
    True
    """
    return Not(NotImplies(lhs, rhs))


def Constant(value: bool) -> Nor:
    """The truth value :data:`.T` or :data:`.F` corresponding to `value`.

    >>> Constant(True), Constant(False)
    (T, F)
    """
    return T if value else F
