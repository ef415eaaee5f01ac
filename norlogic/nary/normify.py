r"""Normal forms of NOR formulas.

The normal form computed by :func:`normify` is obtained bottom-up:

1. Nested disjunctions are flattened. An argument of the shape
   :math:`\downarrow(\downarrow(\psi_1, \dots, \psi_m))`, which is the
   disjunction of the :math:`\psi_i`, is replaced by :math:`\psi_1, \dots,
   \psi_m` within the enclosing NOR.

2. Arguments are sorted and duplicates are removed.

3. A NOR with argument :data:`.T` becomes :data:`.F`. Otherwise, arguments
   :data:`.F` are removed.

4. A double negation :math:`\downarrow(\downarrow(\varphi))` becomes
   :math:`\varphi`.

Formulas with equal normal forms are equivalent. Equal normal forms are
structurally equal.
"""
from __future__ import annotations

from itertools import groupby
import logging
from typing import Optional

from .formula import F, Formula, Nor, T, Var
from ..support.queue import InPlaceQueue

from ..support.tracing import trace  # noqa

logger = logging.getLogger(__name__)


def normify(f: Formula) -> Formula:
    """Compute the normal form of `f`.

    >>> from norlogic.nary.connectives import And, Not, Or
    >>> normify(Not(Not(Var(2))))
    Var(v2)
    >>> normify(Nor(Var(1), Or(Var(0), Var(1)), F))
    Nor(Var(v0), Var(v1))
    >>> normify(Nor(Var(0), T))
    F
    >>> normify(And(Var(0), Not(Var(0)), Var(1)))
    Nor(Var(v0), Nor(Var(v0)), Nor(Var(v1)))

    Complementary arguments are not detected, so that the last result is not
    :data:`.F`, although it is unsatisfiable.

    The recursion follows the nesting of `f`. Formulas nested deeper than
    about :func:`sys.getrecursionlimit` raise :exc:`RecursionError`. The same
    holds for hashing and for :func:`.simplify.simplify_formula`.
    """
    match f:
        case Var():
            return f
        case Nor():
            args = list(f.args)
            queue = InPlaceQueue(args)
            while queue.has_unprocessed():
                arg = normify(queue.take_unprocessed())  # type: ignore[arg-type]
                disjuncts = _disjuncts(arg)
                if disjuncts is None:
                    queue.add_processed(arg)
                    continue
                logger.debug(f'flattening {arg} into {len(disjuncts)} arguments')
                for disjunct in disjuncts:
                    queue.add_unprocessed(disjunct)
            args.sort()
            args = [arg for arg, _ in groupby(args)]
            if T in args:
                return F
            args = [arg for arg in args if arg != F]
            if len(args) == 1:
                negated = _negated(args[0])
                if negated is not None:
                    return negated
            return Nor(*args)
        case _:
            assert False, type(f)


def _disjuncts(f: Formula) -> Optional[tuple[Formula, ...]]:
    r"""If `f` is of the shape :math:`\downarrow(\downarrow(\psi_1, \dots,
    \psi_m))`, return the :math:`\psi_i`. Otherwise return :data:`None`.
    """
    negated = _negated(f)
    if negated is None or not Formula.is_nor(negated):
        return None
    return negated.args


def _negated(f: Formula) -> Optional[Formula]:
    r"""If `f` is of the shape :math:`\downarrow(\varphi)`, return
    :math:`\varphi`. Otherwise return :data:`None`.
    """
    if Formula.is_nor(f) and len(f.args) == 1:
        return f.args[0]
    return None
