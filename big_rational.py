from domain_rational import DomainRational
from domains import BIG


class BigRational(DomainRational, domain=BIG):
    """Rational over Python integers. Nothing overflows; reducing by the
    gcd is the only cost of an operation."""
    __slots__ = ()
