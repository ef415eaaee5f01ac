"""Partial evaluation of formulas with respect to a knowledge base. Variables
with known truth values are replaced by :data:`.T` or :data:`.F`, and the
result is brought into normal form via :func:`.normify.normify`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Optional

from ..atoms import KnowledgeBase
from .formula import F, Formula, Nor, T, Var
from .normify import normify
from ..support.logging import DeltaTimeFormatter, Timer
from ..support.queue import InPlaceQueue

from ..support.tracing import trace  # noqa

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.setLevel(logging.WARNING)


@dataclass(frozen=True)
class Options:
    """This class holds options that can be provided to
    :func:`.simplify_formula` and :func:`.test_formula`.
    """

    log_level: int = logging.WARNING
    """The `log_level` of the logger used by :class:`.Simplify`.
    """


@dataclass(frozen=True)
class Simplify:
    """Simplification of formulas modulo a :class:`.KnowledgeBase`.

    The simplifier should be called via :func:`.simplify_formula` or
    :func:`.test_formula`, as described below.
    """

    _options: Options = field(default_factory=Options)
    """The options that have been passed to :func:`.simplify_formula` or
    :func:`.test_formula`.
    """

    def simplify(self, f: Formula, kb: KnowledgeBase) -> Formula:
        """Simplify `f` modulo `kb`.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(self._options.log_level)
            logger.info(f'{self._options}')
            result = self._simplify(f, kb)
            logger.info(f'finished in {timer.get():.6f} s')
        finally:
            logger.setLevel(save_level)
        return result

    def _simplify(self, f: Formula, kb: KnowledgeBase) -> Formula:
        match f:
            case Var():
                value = kb.test_variable(f.var)
                if value is None:
                    return f
                logger.debug(f'{f.var} is {value}')
                return T if value else F
            case Nor():
                args = list(f.args)
                InPlaceQueue.in_place_endo_map(args, lambda arg: self._simplify(arg, kb))
                return normify(Nor(*args))
            case _:
                assert False, type(f)

    def test(self, f: Formula, kb: KnowledgeBase) -> Optional[bool]:
        """Simplification-based test for the truth of `f` modulo `kb`.

        :returns: Returns :data:`True` or :data:`False` if :meth:`simplify`
          yields :data:`.T` or :data:`.F`, respectively. Returns :data:`None`
          in the sense of "undetermined" otherwise.
        """
        f = self.simplify(f, kb)
        if Formula.is_true(f):
            return True
        if Formula.is_false(f):
            return False
        return None


def simplify_formula(f: Formula, kb: KnowledgeBase, **options) -> Formula:
    """Simplify `f` modulo `kb`.

    :param f:
      The formula to be simplified. It is not changed.

    :param kb:
      The knowledge base. Variables in ``kb.true_vars`` are replaced with
      :data:`.T`, variables in ``kb.false_vars`` with :data:`.F`.

    :param log_level:
      The log level used during simplification, see :class:`.Options`.

    :returns:
      The normal form of the result of the replacement.

    >>> from norlogic.atoms import KnowledgeBase, variables
    >>> from norlogic.nary.connectives import And, Or
    >>> v0, v1, v2 = variables(0, 1, 2)
    >>> kb = KnowledgeBase(true_vars=[v0], false_vars=[v1])
    >>> simplify_formula(And(Var(v0), Var(v2)), kb)
    Var(v2)
    >>> simplify_formula(Or(Var(v1), Var(v2)), kb)
    Var(v2)
    >>> simplify_formula(And(Var(v1), Var(v2)), kb)
    F
    """
    return Simplify(Options(**options)).simplify(f, kb)


def test_formula(f: Formula, kb: KnowledgeBase, **options) -> Optional[bool]:
    """Decide the truth of `f` modulo `kb` by simplification.

    :returns: :data:`True` or :data:`False` if `f` simplifies to :data:`.T` or
      :data:`.F`, respectively, and :data:`None` if variables remain.

    >>> from norlogic.atoms import KnowledgeBase, variables
    >>> from norlogic.nary.connectives import And, Not
    >>> v0, v1, v2 = variables(0, 1, 2)
    >>> kb = KnowledgeBase(true_vars=[v0], false_vars=[v1])
    >>> test_formula(And(Var(v0), Not(Var(v1))), kb)
    True
    >>> test_formula(And(Var(v0), Var(v1)), kb)
    False
    >>> print(test_formula(Var(v2), kb))
    None
    """
    return Simplify(Options(**options)).test(f, kb)


# Keep pytest from collecting the function above as a test.
test_formula.__test__ = False  # type: ignore[attr-defined]
