r"""Propositional formulas over the single Boolean operator n-ary NOR
:math:`\downarrow`, their normal forms, and their simplification modulo
knowledge bases.

A formula is either a variable :class:`Var` or a NOR :class:`Nor` of
arbitrarily many argument formulas. :math:`\downarrow(\varphi_1, \dots,
\varphi_n)` holds if and only if none of the :math:`\varphi_i` holds. The
truth values are :data:`T`, the NOR of nothing, and :data:`F`, the negation of
:data:`T`:

>>> Nor()
T
>>> Nor(T)
F

The other Boolean operators are functions that build NOR formulas:

+---------------+---------------+--------------+--------------+-------------------------+
| :math:`\lnot` | :math:`\land` | :math:`\lor` | NAND         | :math:`\longrightarrow` |
+---------------+---------------+--------------+--------------+-------------------------+
| :func:`Not`   | :func:`And`   | :func:`Or`   | :func:`Nand` | :func:`Implies`         |
+---------------+---------------+--------------+--------------+-------------------------+

>>> from norlogic.atoms import KnowledgeBase, variables
>>> v0, v1, v2 = variables(0, 1, 2)
>>> f = And(Var(v0), Not(Var(v1)))
>>> print(f)
[[v0], [[v1]]]

:func:`normify` computes a normal form, and :func:`test_formula` decides the
truth of a formula with respect to a :class:`.KnowledgeBase`, as far as
substitution of known truth values permits:

>>> normify(Not(Not(Var(v2))))
Var(v2)
>>> kb = KnowledgeBase(true_vars=[v0], false_vars=[v1])
>>> test_formula(f, kb)
True
>>> print(test_formula(Var(v2), kb))
None
"""

from .formula import Formula, Var, Nor, T, F  # noqa

from .connectives import Not, And, Or, Nand, Implies, NotImplies, Constant  # noqa

from .normify import normify  # noqa

from .simplify import Options, Simplify, simplify_formula, test_formula  # noqa

from .sympy import from_sympy, to_sympy  # noqa


__all__ = [
    'Formula', 'Var', 'Nor', 'T', 'F',

    'Not', 'And', 'Or', 'Nand', 'Implies', 'NotImplies', 'Constant',

    'normify',

    'Options', 'Simplify', 'simplify_formula', 'test_formula',

    'from_sympy', 'to_sympy'
]
