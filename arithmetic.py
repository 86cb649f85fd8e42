from __future__ import annotations
from fractions import Fraction
from typing import Callable

from errors import ArithmeticOverflowError
from formats import IntegerFormat, INT64
from overflow import abs_exact, multiply_exact

Q = Fraction  # rational type alias

def gcd(a: int, b: int) -> int:
    """
    Non-negative greatest common divisor by Euclidean reduction:
      gcd(a, 0) = |a|
      gcd(a, b) = gcd(b, a mod b)
    For a fixed-width minimum value the result is the widened magnitude
    (e.g. 2^63 for int64), which no fixed-width integer can hold.
    """
    return _gcd(a, b, abs)

def gcd_checked(a: int, b: int, fmt: IntegerFormat = INT64) -> int:
    """
    Same as gcd, but taking the absolute value of fmt.min_value raises
    ArithmeticOverflowError instead of widening.
    """
    return _gcd(a, b, lambda x: abs_exact(x, fmt))

def power(base: int, exponent: int, fmt: IntegerFormat = INT64) -> Q:
    """
    base^exponent wrapped to fmt, the same value as wrapping after every
    multiplication step. Computed by modular exponentiation, so the cost
    grows with the bit length of the exponent, not its size.
    Negative exponents return the reciprocal, hence the rational result type.
    """
    modulus = 1 << fmt.bits
    return _power(base, exponent, lambda b, e: fmt.wrap(pow(b, e, modulus)))

def power_checked(base: int, exponent: int, fmt: IntegerFormat = INT64) -> Q:
    """
    base^exponent raising ArithmeticOverflowError at the first multiplication
    step that leaves fmt. For |base| >= 2 that happens within fmt.bits steps.
    """
    def raise_to(b: int, e: int) -> int:
        result = b
        for _ in range(e - 1):
            result = multiply_exact(result, b, fmt)
        return result
    return _power(base, exponent, raise_to)

def _gcd(a: int, b: int, absolute: Callable[[int], int]) -> int:
    # Iterative form of gcd(b, a mod b); Python's % takes the sign of the
    # divisor, so only the final absolute value matters.
    while b != 0:
        a, b = b, a % b
    return absolute(a)

def _power(base: int, exponent: int, raise_to: Callable[[int, int], int]) -> Q:
    # raise_to(base, n) is only called with n >= 1 and |base| >= 2.
    if base == 0:
        return Q(0)
    if base == 1 or exponent == 0:
        return Q(1)
    if exponent == 1:
        return Q(base)
    if base == -1:
        return Q(-1 if exponent % 2 else 1)
    result = raise_to(base, abs(exponent))
    if exponent < 0:
        if result == 0:
            raise ArithmeticOverflowError(f"{base}^{-exponent} wrapped to 0, reciprocal undefined")
        return Q(1, result)
    return Q(result)
