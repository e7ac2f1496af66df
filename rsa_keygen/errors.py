"""Error taxonomy for key generation and the modular arithmetic beneath it."""


class RSAKeygenError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(RSAKeygenError, ValueError):
    """A caller supplied a value outside the domain of an operation."""


class InternalInvariantViolation(RSAKeygenError, RuntimeError):
    """A state that the mathematics rules out was reached.

    This always indicates a defect in the implementation, never bad input,
    so it is not meant to be caught and retried.
    """


class PrimeSearchExhaustedError(RSAKeygenError, RuntimeError):
    """A bounded prime or key search ran out of candidates."""


def check_invariant(condition: bool, message: str) -> None:
    """Raise InternalInvariantViolation unless condition holds.

    Unlike ``assert`` this check survives ``python -O``.
    """
    if not condition:
        raise InternalInvariantViolation(message)
