"""
Tests for the conversion between NOR formulas and SymPy Boolean expressions.
"""

import pytest
from sympy import Symbol, symbols
from sympy.logic import boolalg
from sympy.logic.inference import satisfiable

from norlogic import F, Nor, T, Var, normify
from norlogic.nary import from_sympy, to_sympy

from helpers import assignments, evaluate, random_formulas


def equivalent(f, g) -> bool:
    return not satisfiable(boolalg.Xor(to_sympy(f), to_sympy(g)))


class TestToSympy:
    """Test the conversion into SymPy."""

    def test_var(self):
        assert to_sympy(Var(3)) == Symbol('v3')

    def test_truth_values(self):
        assert to_sympy(T) is boolalg.true
        assert to_sympy(F) is boolalg.false

    def test_nor(self):
        v0, v1 = symbols('v0 v1')
        assert to_sympy(Nor(Var(0), Var(1))) == boolalg.Not(boolalg.Or(v0, v1))

    @pytest.mark.parametrize('seed', range(4))
    def test_evaluation_agrees(self, seed):
        for f in random_formulas(seed, count=10):
            expr = to_sympy(f)
            for assignment, _ in assignments():
                values = {Symbol(repr(x)): value for x, value in assignment.items()}
                assert bool(expr.subs(values)) is evaluate(f, assignment)


class TestFromSympy:
    """Test the conversion from SymPy."""

    def test_constants(self):
        assert from_sympy(boolalg.true) == T
        assert from_sympy(boolalg.false) == F

    def test_symbol(self):
        assert from_sympy(Symbol('v12')) == Var(12)

    @pytest.mark.parametrize('name', ['x', 'v', 'v1a', 'w1'])
    def test_bad_symbol_name(self, name):
        with pytest.raises(ValueError):
            from_sympy(Symbol(name))

    def test_symbol_out_of_range(self):
        with pytest.raises(ValueError):
            from_sympy(Symbol('v64'))

    @pytest.mark.parametrize('build', [
        lambda a, b, c: a & b,
        lambda a, b, c: a | ~b,
        lambda a, b, c: boolalg.Implies(a, b | c),
        lambda a, b, c: boolalg.Equivalent(a, b),
        lambda a, b, c: boolalg.Equivalent(a, b, c),
        lambda a, b, c: boolalg.Xor(a, b, c),
        lambda a, b, c: boolalg.Nand(a, b, c),
        lambda a, b, c: boolalg.Nor(a, boolalg.And(b, c)),
    ])
    def test_connectives(self, build):
        a, b, c = symbols('v0 v1 v2')
        expr = build(a, b, c)
        f = from_sympy(expr)
        assert not satisfiable(boolalg.Xor(expr, to_sympy(f)))

    def test_unsupported(self):
        a, b, c = symbols('v0 v1 v2')
        with pytest.raises(ValueError):
            from_sympy(boolalg.ITE(a, b, c))

    @pytest.mark.parametrize('seed', range(4))
    def test_round_trip_is_equivalent(self, seed):
        for f in random_formulas(seed, count=10):
            g = from_sympy(to_sympy(f))
            assert equivalent(f, g)


class TestNormifyWithSympy:
    """Cross-check the normalizer with SymPy's satisfiability check."""

    @pytest.mark.parametrize('seed', range(4))
    def test_normify_is_equivalent(self, seed):
        for f in random_formulas(seed, count=10):
            assert equivalent(f, normify(f))
