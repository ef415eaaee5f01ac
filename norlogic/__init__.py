__version__ = 0.1

___author___ = 'norlogic contributors'
___license__ = 'BSD-2-Clause'
___status__ = 'Prototype'

from . import atoms

from .atoms import (CAPACITY, Variable, VariableRangeError, variables,  # noqa
                    VariableSet, KnowledgeBase)

from . import nary

from .nary import (Formula, Var, Nor, T, F, Not, And, Or, Nand,  # noqa
                   Implies, NotImplies, Constant, normify, simplify_formula,
                   Options, Simplify, test_formula, from_sympy, to_sympy)

__all__ = atoms.__all__ + nary.__all__
