"""Conversion between NOR formulas and Boolean expressions of `SymPy
<https://docs.sympy.org/latest/modules/logic.html>`_. The variable with index
`i` corresponds to the SymPy symbol named ``v<i>``.
"""
from __future__ import annotations

import re

from sympy import Symbol
from sympy.logic import boolalg

from ..atoms import Variable
from .connectives import And, Implies, Not, Or
from .formula import F, Formula, Nor, T, Var

from ..support.tracing import trace  # noqa

_SYMBOL_NAME = re.compile(r'v(\d+)')


def to_sympy(f: Formula) -> boolalg.Boolean:
    """Convert `f` into a SymPy Boolean expression.

    >>> to_sympy(Nor(Var(0), Var(1)))
    ~(v0 | v1)
    >>> to_sympy(T), to_sympy(F)
    (True, False)
    """
    match f:
        case Var():
            return Symbol(repr(f.var))
        case Nor():
            return boolalg.Nor(*(to_sympy(arg) for arg in f.args))
        case _:
            assert False, type(f)


def from_sympy(expr: boolalg.Boolean) -> Formula:
    """Convert a SymPy Boolean expression into a NOR formula. Symbols must be
    named ``v<i>`` with ``0 <= i < 64``.

    >>> from sympy import symbols
    >>> from sympy.logic.boolalg import Implies as SympyImplies
    >>> v0, v1 = symbols('v0 v1')
    >>> print(from_sympy(SympyImplies(v0, v1)))
    [[[v0], v1]]
    >>> from_sympy(symbols('x'))
    Traceback (most recent call last):
    ...
    ValueError: cannot convert symbol x, expecting names v0, v1, ...
    """
    match expr:
        case boolalg.BooleanTrue():
            return T
        case boolalg.BooleanFalse():
            return F
        case Symbol():
            m = _SYMBOL_NAME.fullmatch(expr.name)
            if m is None:
                raise ValueError(f'cannot convert symbol {expr.name}, expecting names v0, v1, ...')
            return Var(Variable(int(m.group(1))))
        case boolalg.Not():
            return Not(from_sympy(expr.args[0]))
        case boolalg.And():
            return And(*(from_sympy(arg) for arg in expr.args))
        case boolalg.Or():
            return Or(*(from_sympy(arg) for arg in expr.args))
        case boolalg.Implies():
            lhs, rhs = expr.args
            return Implies(from_sympy(lhs), from_sympy(rhs))
        case boolalg.Equivalent():
            # All arguments are equivalent if and only if they form a cycle of
            # implications.
            args = [from_sympy(arg) for arg in expr.args]
            return And(*(Implies(a, b) for a, b in zip(args, args[1:] + args[:1])))
        case boolalg.Xor():
            args = [from_sympy(arg) for arg in expr.args]
            result = args[0]
            for arg in args[1:]:
                result = Or(And(result, Not(arg)), And(Not(result), arg))
            return result
        case _:
            raise ValueError(f'cannot convert {expr!r}')
