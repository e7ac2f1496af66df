"""Argument checks shared by the public operations."""

from typing import Any

from ..errors import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import WORD_BITS, WORD_LIMIT


class Validator:
    """Static checks that raise InvalidArgumentError on bad caller input."""

    @staticmethod
    def require(condition: bool, message: str) -> None:
        if not condition:
            raise InvalidArgumentError(message)

    @staticmethod
    def require_integer(name: str, value: Any) -> MPZ:
        """Check that value is an int or mpz and return it as an mpz."""
        if not MPC.is_integer(value):
            raise InvalidArgumentError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        return MPC.mpz(value)

    @staticmethod
    def require_word(name: str, value: Any) -> MPZ:
        """Check that value is an Integer, i.e. lies in [0, 2^WORD_BITS)."""
        value = Validator.require_integer(name, value)
        if not 0 <= value < WORD_LIMIT:
            raise InvalidArgumentError(
                f"{name}={value} does not fit in an unsigned {WORD_BITS}-bit word"
            )
        return value

    @staticmethod
    def require_range(name: str, value: Any, low: int, high: int) -> int:
        """Check that value is an integer in the closed range [low, high]."""
        value = Validator.require_integer(name, value)
        if not low <= value <= high:
            raise InvalidArgumentError(f"{name}={value} must be in [{low}, {high}]")
        return int(value)

    @staticmethod
    def require_count(name: str, value: Any, minimum: int = 1) -> int:
        """Check an iteration count such as a number of rounds."""
        value = Validator.require_integer(name, value)
        if value < minimum:
            raise InvalidArgumentError(f"{name}={value} must be at least {minimum}")
        return int(value)
