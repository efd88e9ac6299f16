"""Integer fractions kept in lowest terms with a positive denominator."""

from __future__ import annotations

from dataclasses import dataclass

from algebrakit.arithmetic import gcd

__all__ = ["Fraction"]


@dataclass(frozen=True)
class Fraction:
    """A fraction ``num/den`` of integers."""

    num: int
    den: int

    def add(self, other: Fraction) -> Fraction:
        """Return the reduced sum of two fractions."""
        return Fraction(
            self.num * other.den + other.num * self.den,
            self.den * other.den,
        ).reduce()

    def reduce(self) -> Fraction:
        """Return the fraction in lowest terms with a positive denominator.

        A zero denominator is left as it is; zero becomes ``0/1``.
        """
        if self.den == 0:
            return self
        if self.num == 0:
            return Fraction(0, 1)
        g = gcd(self.num, self.den)
        num, den = self.num // g, self.den // g
        if den < 0:
            num, den = -num, -den
        return Fraction(num, den)