"""
Tests for NOR formulas and the derived connectives.
"""

import pytest
from IPython.lib.pretty import pretty

from norlogic import (And, Constant, F, Formula, Implies, Nand, Nor, Not,
                      NotImplies, Or, T, Var, Variable, VariableRangeError,
                      VariableSet)


class TestConstruction:
    """Test the two kinds of formulas and the truth values."""

    def test_var_accepts_int(self, v):
        assert Var(2) == Var(v[2])
        assert Var(2).var == v[2]

    def test_var_out_of_range(self):
        with pytest.raises(VariableRangeError):
            Var(64)

    def test_truth_values(self):
        assert T == Nor()
        assert F == Nor(Nor())
        assert T.args == ()
        assert Formula.is_true(T) and not Formula.is_true(F)
        assert Formula.is_false(F) and not Formula.is_false(T)

    def test_type_tests(self):
        assert Formula.is_var(Var(0))
        assert not Formula.is_var(T)
        assert Formula.is_nor(T)
        assert not Formula.is_nor(Var(0))

    def test_immutable_args(self):
        f = Nor(Var(0), Var(1))
        assert isinstance(f.args, tuple)


class TestEqualityAndOrder:
    """Test structural equality and the total order."""

    def test_structural_equality(self):
        assert Nor(Var(0), Nor(Var(1))) == Nor(Var(0), Nor(Var(1)))
        assert Nor(Var(0), Var(1)) != Nor(Var(1), Var(0))
        assert Var(0) != Nor(Var(0))
        assert Var(0) != 'v0'

    def test_hash_consistent_with_equality(self):
        a = Nor(Var(3), T)
        b = Nor(Var(3), Nor())
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_vars_before_nors(self):
        assert Var(63) < T
        assert not T < Var(0)

    def test_vars_by_index(self):
        assert Var(1) < Var(2)
        assert Var(2) <= Var(2)

    def test_nors_lexicographically(self):
        assert T < F
        assert Nor(Var(0)) < Nor(Var(1))
        assert Nor(Var(0)) < Nor(Var(0), Var(0))
        assert Nor(Var(5)) < Nor(T)

    def test_sort(self):
        L = [F, Var(1), Nor(Var(0), Var(1)), T, Var(0), Nor(Var(0))]
        assert sorted(L) == [Var(0), Var(1), T, Nor(Var(0)), Nor(Var(0), Var(1)), F]


class TestConnectives:
    """Test that all connectives are NOR compositions."""

    def test_not(self):
        assert Not(Var(0)) == Nor(Var(0))
        assert ~Var(0) == Not(Var(0))
        assert Not(T) == F

    def test_and(self):
        assert And(Var(0), Var(1)) == Nor(Nor(Var(0)), Nor(Var(1)))
        assert (Var(0) & Var(1)) == And(Var(0), Var(1))
        assert And() == T

    def test_or(self):
        assert Or(Var(0), Var(1)) == Nor(Nor(Var(0), Var(1)))
        assert (Var(0) | Var(1)) == Or(Var(0), Var(1))
        assert Or() == F

    def test_nand(self):
        assert Nand(Var(0), Var(1)) == Not(And(Var(0), Var(1)))

    def test_implications(self):
        a, b = Var(0), Var(1)
        assert NotImplies(a, b) == Nor(Not(a), b)
        assert Implies(a, b) == Not(NotImplies(a, b))
        assert (a >> b) == Implies(a, b)
        assert (a << b) == Implies(b, a)

    def test_constant(self):
        assert Constant(True) == T
        assert Constant(False) == F


class TestRepresentations:
    """Test repr, the bracketed debug rendering, and pretty printing."""

    def test_repr(self):
        assert repr(Nor(Var(0), T, F)) == 'Nor(Var(v0), T, F)'
        assert repr(Var(3)) == 'Var(v3)'

    def test_str(self):
        assert str(Var(7)) == 'v7'
        assert str(T) == '[]'
        assert str(F) == '[[]]'
        assert str(Nor(Var(0), Nor(Var(1), Var(2)))) == '[v0, [v1, v2]]'

    def test_pretty(self):
        assert pretty(Nor(Var(0), T)) == 'Nor(Var(v0), T)'
        assert pretty(F) == 'F'


class TestTraversal:
    """Test atoms, variables, depth, and substitution."""

    def test_atoms(self):
        f = Nor(Var(2), Nor(Var(0), Nor(Var(2))))
        assert list(f.atoms()) == [Var(2), Var(0), Var(2)]
        assert list(T.atoms()) == []

    def test_variables(self):
        f = And(Var(3), Or(Var(1), Var(3)))
        assert f.variables() == VariableSet([Variable(1), Variable(3)])
        assert F.variables().is_empty()

    def test_depth(self):
        assert Not(Not(Var(0))).depth() == 2
        assert Nor(Var(0), F).depth() == 3

    def test_subs_is_simultaneous(self, v):
        f = Nor(Var(v[0]), Var(v[1]))
        assert f.subs({v[0]: Var(v[1]), v[1]: Var(v[0])}) == Nor(Var(v[1]), Var(v[0]))

    def test_subs_leaves_input_unchanged(self, v):
        f = Nor(Var(v[0]))
        g = f.subs({v[0]: T})
        assert g == F
        assert f == Nor(Var(v[0]))
