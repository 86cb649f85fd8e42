from __future__ import annotations
from abc import abstractmethod
from decimal import Context, Decimal
from fractions import Fraction
from typing import Optional

import decimals
from errors import ArithmeticOverflowError, require
from formats import get_integer_format
from numeric import Numeric
from overflow import check_range


class Rational(Numeric):
    """Numeric contract plus the predicates, total order and decimal
    conversions of a ratio of two integers.

    Subclasses provide `numerator`, `denominator`, `of` and the abstract
    operations; everything else, including the Python operator protocol,
    is derived here.
    """
    __slots__ = ()

    @property
    @abstractmethod
    def numerator(self) -> int: ...

    @property
    @abstractmethod
    def denominator(self) -> int: ...

    @classmethod
    @abstractmethod
    def of(cls, numerator, denominator=1): ...

    @classmethod
    def from_fraction(cls, q: Fraction):
        q = require(q, "q")
        return cls.of(q.numerator, q.denominator)

    @abstractmethod
    def compare(self, other) -> int:
        """Negative, zero or positive as self is below, equal to or above other."""

    @abstractmethod
    def is_unit_fraction(self) -> bool: ...

    def is_not_unit_fraction(self) -> bool:
        return not self.is_unit_fraction()

    @abstractmethod
    def is_dyadic(self) -> bool: ...

    def is_not_dyadic(self) -> bool:
        return not self.is_dyadic()

    @abstractmethod
    def is_proper(self) -> bool: ...

    def is_improper(self) -> bool:
        return not self.is_proper()

    @abstractmethod
    def is_positive(self) -> bool: ...

    def is_negative(self) -> bool:
        return not self.is_positive() and not self.is_zero()

    @abstractmethod
    def signum(self) -> int: ...

    def is_less_than(self, other) -> bool:
        require(other, "other")
        return self.compare(other) < 0

    def is_less_than_or_equal_to(self, other) -> bool:
        require(other, "other")
        return self.compare(other) <= 0

    def is_greater_than(self, other) -> bool:
        require(other, "other")
        return self.compare(other) > 0

    def is_greater_than_or_equal_to(self, other) -> bool:
        require(other, "other")
        return self.compare(other) >= 0

    def min(self, other):
        require(other, "other")
        return self if self.is_less_than_or_equal_to(other) else other

    def max(self, other):
        require(other, "other")
        return self if self.is_greater_than_or_equal_to(other) else other

    def increment(self):
        return self.add(type(self).of(1))

    def decrement(self):
        return self.subtract(type(self).of(1))

    def to_decimal(self, rounding: Optional[str] = None, scale: Optional[int] = None,
                   context: Optional[Context] = None) -> Decimal:
        """See decimals.to_decimal for the three supported configurations."""
        return decimals.to_decimal(self.numerator, self.denominator, rounding, scale, context)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_int_exact(self, fmt: Optional[str] = None) -> int:
        """The value as an int, without rounding.

        Args:
            fmt: Optional integer format name (see formats.py) the result
                must also fit in

        Raises:
            ArithmeticOverflowError: If the value has a fractional part, or
                does not fit in fmt
        """
        if self.is_not_integer():
            raise ArithmeticOverflowError(f"{self} has a fractional part")
        if fmt is None:
            return self.numerator
        return check_range(self.numerator, f"int({self})", get_integer_format(fmt))

    # Python number protocol. Plain ints are promoted through `of`; other
    # types are left to their own reflected operators.

    def _operand(self, other):
        if isinstance(other, type(self)):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self).of(other)
        return None

    def __add__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else other.divide(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __lt__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.is_less_than(other)

    def __le__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.is_less_than_or_equal_to(other)

    def __gt__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.is_greater_than(other)

    def __ge__(self, other):
        other = self._operand(other)
        return NotImplemented if other is None else self.is_greater_than_or_equal_to(other)

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        # truncates toward zero
        n, d = self.numerator, self.denominator
        return -(-n // d) if n < 0 else n // d

    def __float__(self):
        return self.numerator / self.denominator

    def __str__(self):
        if self.is_integer():
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"
