from hypothesis import given
from hypothesis import strategies as st

from algebrakit.fraction import Fraction


def test_fraction_add():
    assert Fraction(1, 2).add(Fraction(1, 3)) == Fraction(5, 6)


def test_fraction_reduce():
    assert Fraction(4, 8).reduce() == Fraction(1, 2)


def test_fraction_reduce_negative_denominator():
    assert Fraction(1, -2).reduce() == Fraction(-1, 2)


def test_fraction_denominator_invariant():
    assert Fraction(-4, -8).reduce() == Fraction(1, 2)


def test_fraction_reduce_zero_numerator():
    assert Fraction(0, -5).reduce() == Fraction(0, 1)


def test_fraction_reduce_zero_denominator_unchanged():
    assert Fraction(3, 0).reduce() == Fraction(3, 0)


def test_fraction_add_to_zero():
    assert Fraction(1, 2).add(Fraction(-1, 2)) == Fraction(0, 1)


@given(
    st.integers(-1000, 1000),
    st.integers(-1000, 1000).filter(bool),
)
def test_reduce_keeps_positive_denominator(num, den):
    reduced = Fraction(num, den).reduce()
    assert reduced.den > 0
    assert reduced.num * den == num * reduced.den