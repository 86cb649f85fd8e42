import logging

import pytest

from domains import BIG, LONG, WRAPPING_LONG, CheckedDomain, WrappingDomain, get_domain
from errors import ArithmeticOverflowError, InvalidArgumentError
from formats import INT64
from long_rational import LongRational, WrappingLongRational, fixed_width_rational

MIN = INT64.min_value
MAX = INT64.max_value


def test_wrapping_add_wraps():
    assert WrappingLongRational.of(MAX).add(WrappingLongRational.ONE) == WrappingLongRational.of(MIN)


def test_wrapping_multiply_wraps():
    # max * 2 is 2^64 - 2, which wraps to -2
    assert WrappingLongRational.of(MAX).multiply(WrappingLongRational.of(2)) == WrappingLongRational.of(-2)


def test_wrapping_agrees_when_nothing_overflows():
    a, b = WrappingLongRational.of(2, 3), WrappingLongRational.of(4, 5)
    assert a.add(b) == WrappingLongRational.of(22, 15)
    assert a.subtract(b) == WrappingLongRational.of(-2, 15)
    assert a.multiply(b) == WrappingLongRational.of(8, 15)
    assert a.divide(b) == WrappingLongRational.of(5, 6)
    assert a.power(-2) == WrappingLongRational.of(9, 4)


def test_wrapping_power_wraps():
    assert WrappingLongRational.of(2).power(63) == WrappingLongRational.of(MIN)


def test_wrapping_compare_is_still_checked():
    a = WrappingLongRational.of(MAX, 2)
    b = WrappingLongRational.of(MAX - 2, 3)
    with pytest.raises(ArithmeticOverflowError):
        a.compare(b)


def test_wrapping_construction_is_still_checked():
    with pytest.raises(ArithmeticOverflowError):
        WrappingLongRational.of(MIN, -1)
    with pytest.raises(InvalidArgumentError):
        WrappingLongRational.of(MAX + 1)


def test_wrapping_is_a_separate_type():
    assert WrappingLongRational.ZERO is not LongRational.ZERO
    with pytest.raises(TypeError):
        LongRational.ONE.add(WrappingLongRational.ONE)


def test_default_rational_is_checked():
    with pytest.raises(ArithmeticOverflowError):
        LongRational.of(MAX).add(LongRational.ONE)


@pytest.mark.parametrize("name, checked, expected", [
    ("int64", True, LongRational),
    ("long", True, LongRational),
    (None, True, LongRational),
    ("int64", False, WrappingLongRational),
])
def test_fixed_width_rational_int64(name, checked, expected):
    assert fixed_width_rational(name, checked) is expected


def test_fixed_width_rational_is_cached_across_aliases():
    assert fixed_width_rational("int32") is fixed_width_rational("int")
    assert fixed_width_rational("int32") is not fixed_width_rational("int32", checked=False)


def test_int8_rational():
    Int8Rational = fixed_width_rational("int8")
    assert Int8Rational.__name__ == "Int8Rational"
    assert Int8Rational.of(10, 3).add(Int8Rational.of(1, 3)) == Int8Rational.of(11, 3)
    with pytest.raises(ArithmeticOverflowError):
        Int8Rational.of(100).add(Int8Rational.of(28))
    with pytest.raises(InvalidArgumentError, match=r"\[-128, 127\]"):
        Int8Rational.of(128)
    assert Int8Rational.of(-128, -128) is Int8Rational.ONE
    assert Int8Rational.of(1, 64).is_dyadic()


def test_wrapping_int16_rational():
    WrappingInt16Rational = fixed_width_rational("short", checked=False)
    assert WrappingInt16Rational.__name__ == "WrappingInt16Rational"
    assert WrappingInt16Rational.of(32767).increment() == WrappingInt16Rational.of(-32768)


def test_fixed_width_rational_creation_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="long_rational"):
        fixed_width_rational("i16")
        fixed_width_rational("int16")
    assert caplog.text.count("Created Int16Rational") == 1


def test_get_domain():
    assert get_domain("big") is BIG
    assert isinstance(LONG, CheckedDomain) and not isinstance(LONG, WrappingDomain)
    assert isinstance(WRAPPING_LONG, WrappingDomain)
    assert get_domain("int32").fmt.bits == 32
    assert get_domain("int32", checked=False).name == "int32-wrapping"


def test_domain_coerce():
    assert LONG.coerce(5, "numerator") == 5
    with pytest.raises(InvalidArgumentError, match="numerator must be within"):
        LONG.coerce(MAX + 1, "numerator")
    assert BIG.coerce(MAX + 1, "numerator") == MAX + 1


def test_wrapping_power_handles_huge_exponents():
    exponent = 10 ** 18 + 1
    expected = INT64.wrap(pow(3, exponent, 1 << 64))
    assert WrappingLongRational.of(3).power(exponent) == WrappingLongRational.of(expected)
    assert WrappingLongRational.of(3, 5).power(2 ** 64) is WrappingLongRational.ONE


def test_wrapping_denominator_to_zero_is_overflow():
    with pytest.raises(ArithmeticOverflowError, match="wrapped to 0"):
        WrappingLongRational.of(1, 2).power(64)
    with pytest.raises(ArithmeticOverflowError, match="wrapped to 0"):
        WrappingLongRational.of(1, 2 ** 32).multiply(WrappingLongRational.of(1, 2 ** 32))
    with pytest.raises(ArithmeticOverflowError, match="wrapped to 0"):
        WrappingLongRational.of(1, 2 ** 32).divide(WrappingLongRational.of(2 ** 32))


def test_wrapping_numerator_to_zero_has_no_reciprocal():
    assert WrappingLongRational.of(2).power(64) is WrappingLongRational.ZERO
    with pytest.raises(ArithmeticOverflowError, match="wrapped to 0"):
        WrappingLongRational.of(2).power(-64)


@pytest.mark.parametrize("domain", [BIG, LONG, WRAPPING_LONG])
def test_domain_power_rejects_negative_exponents(domain):
    assert domain.power(2, 3) == 8
    with pytest.raises(InvalidArgumentError, match="exponent must not be negative"):
        domain.power(2, -1)
