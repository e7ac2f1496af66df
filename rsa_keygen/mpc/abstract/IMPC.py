from abc import ABC, abstractmethod
from typing import Any
from ..types import MPZ, RandomState


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def is_integer(value: Any) -> bool:
        """Check whether a value is an integer (int or mpz, but not bool).

        Args:
            value (Any): Value to inspect

        Returns:
            bool: True if the value can be used as an Integer
        """

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a random state from a seed.

        Args:
            seed (int): Seed value for random state

        Returns:
            RandomState: Random state object
        """

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        """Generate a uniformly random integer in [0, 2^bit_count).

        Args:
            state (RandomState): Random state to use
            bit_count (int): Number of bits in result

        Returns:
            mpz: Random integer
        """

    @staticmethod
    @abstractmethod
    def mpz_random(state: RandomState, upper: MPZ) -> MPZ:
        """Generate a uniformly random integer in [0, upper).

        Args:
            state (RandomState): Random state to use
            upper (mpz): Exclusive upper bound

        Returns:
            mpz: Random integer
        """

    @staticmethod
    @abstractmethod
    def bit_length(value: MPZ) -> int:
        """Number of bits needed to represent a non-negative value.

        Args:
            value (mpz): Value to measure

        Returns:
            int: Bit length, 0 for 0
        """

    @staticmethod
    @abstractmethod
    def is_odd(value: MPZ) -> bool:
        """Check whether a value is odd.

        Args:
            value (mpz): Value to inspect

        Returns:
            bool: True if odd
        """
