class RationalError(Exception):
    pass

class PreconditionError(RationalError, TypeError):
    """A required operand is missing."""

class InvalidArgumentError(RationalError, ValueError):
    pass

class InvalidStateError(RationalError, ValueError):
    """The receiver itself does not allow the requested operation."""

class ArithmeticOverflowError(RationalError, OverflowError):
    pass

def require(value, name: str):
    if value is None:
        raise PreconditionError(name)
    return value
