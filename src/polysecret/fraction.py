"""Exact rational arithmetic over Python ints.

Values are kept in canonical form: gcd(|num|, den) == 1 and den > 0, so the
sign lives in the numerator and zero is always 0/1. Every operation builds
a new, independently reduced Fraction. There is no float conversion.
"""

from polysecret.errors import DivisionByZero, NonIntegerResult


def gcd(a: int, b: int) -> int:
    """Euclidean GCD on absolute values. gcd(0, 0) == 0."""
    a = -a if a < 0 else a
    b = -b if b < 0 else b
    while b:
        a, b = b, a % b
    return a


def _check_int(value, name: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


class Fraction:
    """Immutable reduced fraction num/den."""

    __slots__ = ('_num', '_den')

    def __init__(self, numerator: int = 0, denominator: int = 1):
        _check_int(numerator, 'numerator')
        _check_int(denominator, 'denominator')
        if denominator == 0:
            raise DivisionByZero("Denominator zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = gcd(numerator, denominator)
        object.__setattr__(self, '_num', numerator // g)
        object.__setattr__(self, '_den', denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError("Fraction is immutable")

    @classmethod
    def from_int(cls, n: int) -> 'Fraction':
        return cls(n, 1)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    # -- arithmetic ---------------------------------------------------

    def add(self, other: 'Fraction') -> 'Fraction':
        return Fraction(self._num * other._den + other._num * self._den,
                        self._den * other._den)

    def sub(self, other: 'Fraction') -> 'Fraction':
        return Fraction(self._num * other._den - other._num * self._den,
                        self._den * other._den)

    def mul(self, other: 'Fraction') -> 'Fraction':
        return Fraction(self._num * other._num, self._den * other._den)

    def div(self, other: 'Fraction') -> 'Fraction':
        if other._num == 0:
            raise DivisionByZero("Division by zero fraction")
        return Fraction(self._num * other._den, self._den * other._num)

    def is_integer(self) -> bool:
        return self._den == 1

    def to_int(self) -> int:
        """Exact integer value, or NonIntegerResult if den != 1."""
        if self._den != 1:
            raise NonIntegerResult(self)
        return self._num

    # -- operator protocol --------------------------------------------

    @staticmethod
    def _coerce(other):
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other, 1)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __neg__(self):
        return Fraction(-self._num, self._den)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __hash__(self):
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __repr__(self):
        return f"Fraction({self._num}, {self._den})"

    def __str__(self):
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"
