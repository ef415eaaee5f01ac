"""Variables, sets of variables, and knowledge bases assigning truth values to
variables.
"""

from .variable import CAPACITY, Variable, VariableRangeError, variables  # noqa

from .varset import VariableSet  # noqa

from .kb import KnowledgeBase  # noqa


__all__ = [
    'CAPACITY', 'Variable', 'VariableRangeError', 'variables',

    'VariableSet',

    'KnowledgeBase'
]
