from __future__ import annotations
from decimal import (
    Context, Decimal,
    ROUND_05UP, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR,
    ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP,
)
from typing import Optional

from errors import InvalidArgumentError, PreconditionError, require

# Predefined precision-and-rounding contexts (significant decimal digits).
DECIMAL32 = Context(prec=7, rounding=ROUND_HALF_EVEN)
DECIMAL64 = Context(prec=16, rounding=ROUND_HALF_EVEN)
DECIMAL128 = Context(prec=34, rounding=ROUND_HALF_EVEN)

ROUNDING_MODES = frozenset({
    ROUND_UP, ROUND_DOWN, ROUND_CEILING, ROUND_FLOOR,
    ROUND_HALF_UP, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_05UP,
})


def to_decimal(numerator: int, denominator: int, rounding: Optional[str] = None,
               scale: Optional[int] = None, context: Optional[Context] = None) -> Decimal:
    """numerator/denominator as a Decimal, in one of three configurations:

    - scale and rounding: exactly `scale` digits after the point
    - rounding only: the exact value if its expansion terminates, else
      rounded to an integer
    - context: rounded to context.prec significant digits with
      context.rounding

    Raises:
        PreconditionError: If neither rounding nor context is given
        InvalidArgumentError: If the configuration is mixed or the rounding
            mode is unknown
    """
    if context is not None:
        if rounding is not None or scale is not None:
            raise InvalidArgumentError("context excludes rounding and scale")
        # copy: divide records Inexact/Rounded flags on the context it runs in
        return context.copy().divide(Decimal(numerator), Decimal(denominator))
    if rounding is None:
        raise PreconditionError("rounding")
    if not isinstance(rounding, str) or rounding not in ROUNDING_MODES:
        raise InvalidArgumentError(f"rounding must be one of {sorted(ROUNDING_MODES)} but was {rounding!r}")
    if scale is None:
        scale = terminating_scale(denominator)
        if scale is None:
            scale = 0
    return round_to_scale(numerator, denominator, scale, rounding)


def terminating_scale(denominator: int) -> Optional[int]:
    """
    Number of fractional digits of x/denominator for x coprime to it,
    or None when the decimal expansion repeats.
    A positive d terminates iff d = 2^a * 5^b, and then needs max(a, b) digits.
    """
    d = abs(denominator)
    twos = fives = 0
    while d % 2 == 0:
        d //= 2
        twos += 1
    while d % 5 == 0:
        d //= 5
        fives += 1
    if d != 1:
        return None
    return max(twos, fives)


def round_to_scale(numerator: int, denominator: int, scale: int, rounding: str) -> Decimal:
    """
    Exact integer rounding of numerator/denominator onto the 10^(-scale) grid.
    The quotient is never formed inexactly, so the half-way modes see the
    true remainder rather than a truncated one.
    """
    require(rounding, "rounding")
    negative = (numerator < 0) != (denominator < 0)
    n, d = abs(numerator), abs(denominator)
    if scale >= 0:
        n *= 10 ** scale
    else:
        d *= 10 ** -scale
    q, r = divmod(n, d)
    if r and _round_away(q, r, d, negative, rounding):
        q += 1
    sign = 1 if negative and q else 0
    return Decimal((sign, tuple(int(c) for c in str(q)), -scale))


def _round_away(q: int, r: int, d: int, negative: bool, rounding: str) -> bool:
    """Whether a non-zero remainder r/d bumps the magnitude q up by one."""
    if rounding == ROUND_DOWN:
        return False
    if rounding == ROUND_UP:
        return True
    if rounding == ROUND_CEILING:
        return not negative
    if rounding == ROUND_FLOOR:
        return negative
    if rounding == ROUND_05UP:
        return q % 10 in (0, 5)
    twice = 2 * r
    if rounding == ROUND_HALF_UP:
        return twice >= d
    if rounding == ROUND_HALF_DOWN:
        return twice > d
    if rounding == ROUND_HALF_EVEN:
        return twice > d or (twice == d and q % 2 == 1)
    raise InvalidArgumentError(f"Unsupported rounding mode {rounding!r}")
