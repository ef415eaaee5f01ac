import pytest

from norlogic import KnowledgeBase, variables

from helpers import NUM_VARS


@pytest.fixture
def v():
    return variables(*range(NUM_VARS))


@pytest.fixture
def kb(v):
    """The knowledge base with v0 true and v1 false.
    """
    return KnowledgeBase(true_vars=[v[0]], false_vars=[v[1]])
