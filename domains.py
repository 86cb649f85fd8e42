from __future__ import annotations
from math import gcd as _big_gcd
from typing import Optional
import operator

from arithmetic import gcd, power, power_checked
from errors import InvalidArgumentError, require
from formats import IntegerFormat, get_integer_format
import overflow


class IntegerDomain:
    """Arbitrary precision integers; nothing ever overflows.

    A domain is the small set of integer operations the canonical rational
    is written against. Fixed-width domains override the primitives that
    can leave their range.
    """
    name = "big"
    fmt: Optional[IntegerFormat] = None

    def coerce(self, value, what: str) -> int:
        return operator.index(require(value, what))

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def multiply_exact(self, a: int, b: int) -> int:
        return a * b

    def negate(self, a: int) -> int:
        return -a

    def negate_exact(self, a: int) -> int:
        return -a

    def abs(self, a: int) -> int:
        return abs(a)

    def gcd(self, a: int, b: int) -> int:
        return _big_gcd(a, b)

    def power(self, base: int, exponent: int) -> int:
        # Same shortcuts as arithmetic.power, so 0^0 agrees across domains.
        exponent = _natural(exponent)
        if base == 0:
            return 0
        return base ** exponent

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"


class CheckedDomain(IntegerDomain):
    """Fixed-width integers; every primitive raises on overflow."""

    def __init__(self, fmt: IntegerFormat):
        self.fmt = fmt
        self.name = fmt.name

    def coerce(self, value, what: str) -> int:
        value = super().coerce(value, what)
        if not self.fmt.contains(value):
            raise InvalidArgumentError(
                f"{what} must be within [{self.fmt.min_value}, {self.fmt.max_value}] but was {value}"
            )
        return value

    def add(self, a: int, b: int) -> int:
        return overflow.add_exact(a, b, self.fmt)

    def subtract(self, a: int, b: int) -> int:
        return overflow.subtract_exact(a, b, self.fmt)

    def multiply(self, a: int, b: int) -> int:
        return overflow.multiply_exact(a, b, self.fmt)

    def multiply_exact(self, a: int, b: int) -> int:
        return overflow.multiply_exact(a, b, self.fmt)

    def negate(self, a: int) -> int:
        return overflow.negate_exact(a, self.fmt)

    def negate_exact(self, a: int) -> int:
        return overflow.negate_exact(a, self.fmt)

    def abs(self, a: int) -> int:
        return overflow.abs_exact(a, self.fmt)

    def gcd(self, a: int, b: int) -> int:
        # Widened: gcd(min_value, min_value) is 2^(bits-1), and dividing by
        # it brings both operands back into range.
        return gcd(a, b)

    def power(self, base: int, exponent: int) -> int:
        return power_checked(base, _natural(exponent), self.fmt).numerator


class WrappingDomain(CheckedDomain):
    """Fixed-width integers with two's complement wraparound.

    Only add, subtract, multiply, negate, abs and power wrap. Coercion,
    sign normalization and the cross products used for ordering stay
    checked, since a wrapped value there would break canonical form or
    silently reorder values.
    """

    def __init__(self, fmt: IntegerFormat):
        super().__init__(fmt)
        self.name = f"{fmt.name}-wrapping"

    def add(self, a: int, b: int) -> int:
        return overflow.add_wrapping(a, b, self.fmt)

    def subtract(self, a: int, b: int) -> int:
        return overflow.subtract_wrapping(a, b, self.fmt)

    def multiply(self, a: int, b: int) -> int:
        return overflow.multiply_wrapping(a, b, self.fmt)

    def negate(self, a: int) -> int:
        return overflow.negate_wrapping(a, self.fmt)

    def abs(self, a: int) -> int:
        return overflow.abs_wrapping(a, self.fmt)

    def power(self, base: int, exponent: int) -> int:
        return power(base, _natural(exponent), self.fmt).numerator


def _natural(exponent: int) -> int:
    # Integer powers stay integral; reciprocals are the rational type's job.
    if exponent < 0:
        raise InvalidArgumentError(f"exponent must not be negative but was {exponent}")
    return exponent


BIG = IntegerDomain()

def get_domain(name: Optional[str] = None, checked: bool = True) -> IntegerDomain:
    """Domain for a registered integer format, or BIG for name == "big"."""
    if name == "big":
        return BIG
    fmt = get_integer_format(name)
    return CheckedDomain(fmt) if checked else WrappingDomain(fmt)

LONG = get_domain("int64")
WRAPPING_LONG = get_domain("int64", checked=False)
