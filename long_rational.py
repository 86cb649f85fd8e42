from __future__ import annotations
from functools import lru_cache
from typing import Type
import logging
import types

from domain_rational import DomainRational
from domains import LONG, WRAPPING_LONG, CheckedDomain, WrappingDomain
from formats import get_integer_format

LOG = logging.getLogger(__name__)


class LongRational(DomainRational, domain=LONG):
    """Rational over int64. Every operation raises ArithmeticOverflowError
    instead of returning a wrapped value."""
    __slots__ = ()


class WrappingLongRational(DomainRational, domain=WRAPPING_LONG):
    """Rational over int64 with two's complement wraparound in add,
    subtract, multiply, negate, abs and power.

    Results that overflow are wrong, not rejected. Construction and compare
    are still checked.
    """
    __slots__ = ()


def fixed_width_rational(name: str = "int64", checked: bool = True) -> Type[DomainRational]:
    """Rational type over a registered integer format (see formats.py).

    The same class is returned for repeated calls, so its ZERO and ONE stay
    shared.
    """
    return _rational_type(get_integer_format(name).name, checked)


@lru_cache(maxsize=None)
def _rational_type(format_name: str, checked: bool) -> Type[DomainRational]:
    fmt = get_integer_format(format_name)
    if fmt.name == "int64":
        return LongRational if checked else WrappingLongRational
    domain = CheckedDomain(fmt) if checked else WrappingDomain(fmt)
    prefix = "" if checked else "Wrapping"
    cls_name = f"{prefix}{fmt.name.capitalize()}Rational"
    cls = types.new_class(
        cls_name, (DomainRational,), {"domain": domain},
        lambda ns: ns.update({"__slots__": (), "__module__": __name__}),
    )
    LOG.debug("Created %s over %r", cls_name, domain)
    return cls
