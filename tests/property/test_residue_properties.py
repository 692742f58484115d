"""
Property-based tests for the Residue class.

Tests Residue arithmetic against exact integer arithmetic, and drives a
running residue through random operation sequences with Hypothesis
stateful testing, checking invariants after each step.
"""

import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from modarith import I64, U32, NoInverseError, Residue

moduli = st.integers(min_value=1, max_value=2**31 - 1)

values = st.integers(min_value=-(2**40), max_value=2**40)


@pytest.mark.property
class TestResidueProperties:
    """Property-based tests for Residue."""

    @given(value=values, modulus=moduli)
    def test_value_is_canonical(self, value: int, modulus: int):
        """Construction always lands in [0, modulus)."""
        r = Residue(value, modulus)
        assert 0 <= r.value < modulus
        assert r.value == value % modulus

    @given(a=values, b=values, modulus=moduli)
    def test_operators_match_exact_arithmetic(self, a: int, b: int, modulus: int):
        """+, - and * agree with Python integers reduced afterwards."""
        x, y = Residue(a, modulus), Residue(b, modulus)
        assert int(x + y) == (a + b) % modulus
        assert int(x - y) == (a - b) % modulus
        assert int(x * y) == (a * b) % modulus

    @given(a=values, b=values, modulus=moduli)
    def test_division_round_trip(self, a: int, b: int, modulus: int):
        """(a / b) * b == a whenever b is invertible."""
        assume(math.gcd(b, modulus) == 1)
        x, y = Residue(a, modulus), Residue(b, modulus)
        assert (x / y) * y == x

    @given(a=values, modulus=moduli)
    def test_negation_is_additive_inverse(self, a: int, modulus: int):
        """x + (-x) == 0"""
        x = Residue(a, modulus)
        assert int(x + (-x)) == 0

    @given(a=values, modulus=moduli, exponent=st.integers(min_value=-50, max_value=50))
    def test_power_matches_builtin(self, a: int, modulus: int, exponent: int):
        """x ** n agrees with pow(a, n, m), inverting for negative n."""
        assume(exponent >= 0 or math.gcd(a, modulus) == 1)
        assert int(Residue(a, modulus) ** exponent) == pow(a, exponent, modulus)

    @given(a=values, b=values, modulus=moduli)
    def test_equality_is_congruence(self, a: int, b: int, modulus: int):
        """Residues compare equal exactly when their values are congruent."""
        assert (Residue(a, modulus) == Residue(b, modulus)) == ((a - b) % modulus == 0)


@pytest.mark.property
@pytest.mark.slow
class ResidueStateMachine(RuleBasedStateMachine):
    """
    Stateful testing for Residue using Hypothesis state machines.

    A running residue of a fixed-width type is updated by random operations
    and compared to an exact Python integer tracked alongside it.
    """

    def __init__(self) -> None:
        super().__init__()
        self.modulus = 2**31 - 1
        self.residue = Residue(1, self.modulus, I64)
        self.expected = 1

    @invariant()
    def value_is_canonical(self) -> None:
        """Value should always be in [0, modulus)."""
        assert 0 <= self.residue.value < self.modulus

    @invariant()
    def value_matches_exact(self) -> None:
        """Residue should track the exact computation."""
        assert self.residue.value == self.expected % self.modulus

    @rule(value=st.integers(min_value=I64.min_value, max_value=I64.max_value))
    def add_value(self, value: int) -> None:
        """Add a value."""
        self.residue = self.residue + value
        self.expected += value

    @rule(value=st.integers(min_value=I64.min_value, max_value=I64.max_value))
    def subtract_value(self, value: int) -> None:
        """Subtract a value."""
        self.residue = self.residue - value
        self.expected -= value

    @rule(value=st.integers(min_value=I64.min_value, max_value=I64.max_value))
    def multiply_value(self, value: int) -> None:
        """Multiply by a value."""
        self.residue = self.residue * value
        self.expected = (self.expected % self.modulus) * value

    @rule(value=st.integers(min_value=1, max_value=U32.max_value))
    def divide_value(self, value: int) -> None:
        """Divide by a value; the modulus is prime so only multiples fail."""
        try:
            self.residue = self.residue / value
        except NoInverseError:
            assert value % self.modulus == 0
            return
        self.expected = (self.expected % self.modulus) * pow(value, -1, self.modulus)

    @precondition(lambda self: self.residue.value != 0)
    @rule()
    def invert(self) -> None:
        """Replace the residue with its inverse."""
        self.residue = self.residue.inverse()
        self.expected = pow(self.expected, -1, self.modulus)

    @rule(exponent=st.integers(min_value=0, max_value=1000))
    def raise_power(self, exponent: int) -> None:
        """Raise to a non-negative power."""
        self.residue = self.residue**exponent
        self.expected = pow(self.expected, exponent, self.modulus)


# Run the state machine as a pytest test
TestStateMachine = ResidueStateMachine.TestCase
