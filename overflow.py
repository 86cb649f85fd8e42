import logging

from errors import ArithmeticOverflowError
from formats import IntegerFormat, INT64

LOG = logging.getLogger(__name__)


def check_range(value: int, op: str, fmt: IntegerFormat = INT64) -> int:
    """Return value unchanged if it is representable in fmt.

    Every checked primitive computes the exact result with Python integers
    first and then calls this, so the check sees the true mathematical value
    rather than a wrapped one.

    Args:
        value: Exact result of the operation
        op: Human readable description of the operation, used in the message
        fmt: Target integer format

    Returns:
        value

    Raises:
        ArithmeticOverflowError: If value lies outside [fmt.min_value, fmt.max_value]
    """
    if not fmt.contains(value):
        LOG.debug("%s overflow in %s (exact result %d)", fmt.name, op, value)
        raise ArithmeticOverflowError(f"{fmt.name} overflow: {op}")
    return value

def add_exact(a: int, b: int, fmt: IntegerFormat = INT64) -> int:
    return check_range(a + b, f"{a} + {b}", fmt)

def subtract_exact(a: int, b: int, fmt: IntegerFormat = INT64) -> int:
    return check_range(a - b, f"{a} - {b}", fmt)

def multiply_exact(a: int, b: int, fmt: IntegerFormat = INT64) -> int:
    return check_range(a * b, f"{a} * {b}", fmt)

def negate_exact(a: int, fmt: IntegerFormat = INT64) -> int:
    return check_range(-a, f"-({a})", fmt)

def abs_exact(a: int, fmt: IntegerFormat = INT64) -> int:
    """|a|, raising for fmt.min_value, whose magnitude is one past max_value."""
    return check_range(abs(a), f"abs({a})", fmt)

# Wrapping counterparts: the result is reduced modulo 2^bits, so overflow
# silently produces the two's complement value.

def add_wrapping(a: int, b: int, fmt: IntegerFormat = INT64) -> int:
    return fmt.wrap(a + b)

def subtract_wrapping(a: int, b: int, fmt: IntegerFormat = INT64) -> int:
    return fmt.wrap(a - b)

def multiply_wrapping(a: int, b: int, fmt: IntegerFormat = INT64) -> int:
    return fmt.wrap(a * b)

def negate_wrapping(a: int, fmt: IntegerFormat = INT64) -> int:
    return fmt.wrap(-a)

def abs_wrapping(a: int, fmt: IntegerFormat = INT64) -> int:
    # abs(min_value) wraps back to min_value
    return fmt.wrap(abs(a))
