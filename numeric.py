from __future__ import annotations
from abc import ABC, abstractmethod


class Numeric(ABC):
    """Capabilities shared by every exact number type.

    Binary operations take an operand of the receiver's own type and return
    a new value; nothing is modified in place.
    """
    __slots__ = ()

    @abstractmethod
    def is_invertible(self) -> bool:
        """True unless this is the additive identity."""

    def is_not_invertible(self) -> bool:
        return not self.is_invertible()

    @abstractmethod
    def is_integer(self) -> bool:
        """True when the denominator is the multiplicative identity."""

    def is_not_integer(self) -> bool:
        return not self.is_integer()

    @abstractmethod
    def is_zero(self) -> bool: ...

    @abstractmethod
    def is_one(self) -> bool: ...

    @abstractmethod
    def negate(self): ...

    @abstractmethod
    def abs(self): ...

    @abstractmethod
    def add(self, summand):
        """Raises PreconditionError("summand") when summand is None."""

    @abstractmethod
    def subtract(self, subtrahend):
        """Raises PreconditionError("subtrahend") when subtrahend is None."""

    @abstractmethod
    def multiply(self, multiplier):
        """Raises PreconditionError("multiplier") when multiplier is None."""

    @abstractmethod
    def divide(self, divisor):
        """
        Raises:
            PreconditionError: If divisor is None
            InvalidArgumentError: If divisor is not invertible
        """

    @abstractmethod
    def invert(self):
        """Raises InvalidStateError when this is not invertible."""

    @abstractmethod
    def power(self, exponent: int): ...
