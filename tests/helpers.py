"""Random formulas and a reference evaluator that is independent of the
normalizer.
"""

import itertools
import random

from norlogic import KnowledgeBase, Nor, Var, variables


NUM_VARS = 4


def random_formula(rng: random.Random, depth: int, num_vars: int = NUM_VARS):
    if depth == 0 or rng.random() < 0.25:
        return Var(rng.randrange(num_vars))
    n = rng.randrange(0, 4)
    return Nor(*(random_formula(rng, depth - 1, num_vars) for _ in range(n)))


def random_formulas(seed: int, count: int = 40, depth: int = 4):
    rng = random.Random(seed)
    return [random_formula(rng, depth) for _ in range(count)]


def evaluate(f, assignment: dict) -> bool:
    if isinstance(f, Var):
        return assignment[f.var]
    return not any(evaluate(arg, assignment) for arg in f.args)


def assignments(num_vars: int = NUM_VARS):
    """All total assignments of the first `num_vars` variables, together with
    the corresponding knowledge bases.
    """
    vs = variables(*range(num_vars))
    for values in itertools.product([False, True], repeat=num_vars):
        assignment = dict(zip(vs, values))
        yield assignment, KnowledgeBase.from_assignment(assignment)
