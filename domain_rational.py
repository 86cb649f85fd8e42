from __future__ import annotations
from fractions import Fraction
from typing import ClassVar, Optional
import operator

from domains import IntegerDomain
from errors import ArithmeticOverflowError, InvalidArgumentError, InvalidStateError, require
from rational import Rational


class DomainRational(Rational):
    """Canonical rational over an integer domain.

    Every instance satisfies: denominator > 0, gcd(|numerator|, denominator)
    == 1 and numerator == 0 implies denominator == 1. Construction reduces,
    and returns the shared ZERO or ONE when the reduced value is 0 or 1.

    Concrete types bind a domain when subclassing:

        class LongRational(DomainRational, domain=LONG):
            __slots__ = ()
    """
    __slots__ = ("_numerator", "_denominator")

    _domain: ClassVar[Optional[IntegerDomain]] = None
    ZERO: ClassVar[DomainRational]
    ONE: ClassVar[DomainRational]

    def __init_subclass__(cls, domain: Optional[IntegerDomain] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if domain is not None:
            cls._domain = domain
            cls.ZERO = cls._from_coprime_ints(0, 1)
            cls.ONE = cls._from_coprime_ints(1, 1)

    def __new__(cls, numerator, denominator=1):
        domain = cls._domain
        if domain is None:
            raise TypeError(f"{cls.__name__} is not bound to an integer domain")
        numerator = domain.coerce(numerator, "numerator")
        denominator = domain.coerce(denominator, "denominator")
        if denominator == 0:
            raise InvalidArgumentError(f"denominator must not be 0 but was {denominator}")
        if numerator == 0:
            return cls.ZERO
        g = domain.gcd(numerator, denominator)
        numerator //= g
        denominator //= g
        if denominator < 0:
            numerator = domain.negate_exact(numerator)
            denominator = domain.negate_exact(denominator)
        if numerator == denominator:
            return cls.ONE
        return cls._from_coprime_ints(numerator, denominator)

    @classmethod
    def _from_coprime_ints(cls, numerator: int, denominator: int):
        # Raw construction, no reduction: callers guarantee canonical form.
        obj = super().__new__(cls)
        obj._numerator = numerator
        obj._denominator = denominator
        return obj

    @classmethod
    def of(cls, numerator, denominator=1):
        return cls(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def _reduced(self, numerator: int, denominator: int):
        # A non-zero denominator product only reaches 0 by wrapping.
        if denominator == 0:
            raise ArithmeticOverflowError(f"{self._domain.name} denominator wrapped to 0")
        return type(self)(numerator, denominator)

    def _check_operand(self, other, name: str):
        require(other, name)
        if not isinstance(other, type(self)):
            raise TypeError(f"{name} must be {type(self).__name__} but was {type(other).__name__}")
        return other

    # Predicates

    def is_invertible(self) -> bool:
        return self._numerator != 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == self._denominator

    def is_unit_fraction(self) -> bool:
        return self._numerator == 1

    def is_dyadic(self) -> bool:
        # exactly one set bit
        d = self._denominator
        return d > 0 and bin(d).count("1") == 1

    def is_proper(self) -> bool:
        return -self._denominator < self._numerator < self._denominator

    def is_positive(self) -> bool:
        return self._numerator > 0

    def signum(self) -> int:
        return (self._numerator > 0) - (self._numerator < 0)

    # Arithmetic

    def negate(self):
        return type(self)(self._domain.negate(self._numerator), self._denominator)

    def abs(self):
        return type(self)(self._domain.abs(self._numerator), self._denominator)

    def add(self, summand):
        summand = self._check_operand(summand, "summand")
        dom = self._domain
        return self._reduced(
            dom.add(dom.multiply(summand._denominator, self._numerator),
                    dom.multiply(self._denominator, summand._numerator)),
            dom.multiply(self._denominator, summand._denominator))

    def subtract(self, subtrahend):
        subtrahend = self._check_operand(subtrahend, "subtrahend")
        dom = self._domain
        return self._reduced(
            dom.subtract(dom.multiply(subtrahend._denominator, self._numerator),
                         dom.multiply(self._denominator, subtrahend._numerator)),
            dom.multiply(self._denominator, subtrahend._denominator))

    def multiply(self, multiplier):
        multiplier = self._check_operand(multiplier, "multiplier")
        dom = self._domain
        return self._reduced(
            dom.multiply(self._numerator, multiplier._numerator),
            dom.multiply(self._denominator, multiplier._denominator))

    def divide(self, divisor):
        divisor = self._check_operand(divisor, "divisor")
        if divisor.is_not_invertible():
            raise InvalidArgumentError(f"divisor must be invertible but was {divisor!r}")
        dom = self._domain
        return self._reduced(
            dom.multiply(self._numerator, divisor._denominator),
            dom.multiply(self._denominator, divisor._numerator))

    def invert(self):
        if self.is_not_invertible():
            raise InvalidStateError(f"this must be invertible but was {self!r}")
        return type(self)(self._denominator, self._numerator)

    def power(self, exponent: int):
        """
        Numerator and denominator are raised independently for exponent >= 0.
        A negative exponent raises to -exponent first and inverts the result
        once, so ZERO.power(-1) raises InvalidStateError. ZERO.power(0) is ZERO.
        """
        exponent = operator.index(require(exponent, "exponent"))
        if exponent < 0:
            positive = self.power(-exponent)
            if positive.is_zero() and self.is_invertible():
                raise ArithmeticOverflowError(f"{self._domain.name} {self}^{-exponent} wrapped to 0")
            return positive.invert()
        dom = self._domain
        return self._reduced(dom.power(self._numerator, exponent), dom.power(self._denominator, exponent))

    # Ordering

    def compare(self, other) -> int:
        other = self._check_operand(other, "other")
        dom = self._domain
        left = dom.multiply_exact(self._numerator, other._denominator)
        right = dom.multiply_exact(other._numerator, self._denominator)
        return (left > right) - (left < right)

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, type(self)):
            return self._numerator == other._numerator and self._denominator == other._denominator
        if isinstance(other, int) and not isinstance(other, bool):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self):
        # Same hash as the equal Fraction, and so as the equal int.
        return hash(Fraction(self._numerator, self._denominator))

    def __repr__(self):
        return f"{type(self).__name__}(numerator={self._numerator}, denominator={self._denominator})"

    def __reduce__(self):
        return (type(self), (self._numerator, self._denominator))
