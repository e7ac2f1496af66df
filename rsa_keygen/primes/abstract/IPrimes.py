from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ...mpc.types import MPZ
from ...random.abstract.IRandom import IRandom


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @staticmethod
    @abstractmethod
    def candidate_range(bit_length: int) -> Tuple[MPZ, MPZ]:
        """Get the half-open range [2^(bit_length-1), 2^bit_length) primes are drawn from.

        Args:
            bit_length (int): Number of bits for the prime number

        Returns:
            Tuple[MPZ, MPZ]: Inclusive lower and exclusive upper bound
        """

    @staticmethod
    @abstractmethod
    def generate_prime(
        bit_length: int,
        rounds: Optional[int] = None,
        rand: Optional[IRandom] = None,
        step_limit: Optional[int] = None,
        max_candidates: Optional[int] = None,
    ) -> MPZ:
        """Get a random probable prime of exactly bit_length bits.

        Args:
            bit_length (int): Number of bits for the prime number, 2 to 64.
            rounds (int, optional): Miller-Rabin rounds per candidate.
            rand (IRandom, optional): Randomness source.
            step_limit (int, optional): Consecutive +2 steps before drawing a
                fresh candidate.
            max_candidates (int, optional): Total candidates to test before
                giving up with PrimeSearchExhaustedError. Unbounded if None.

        Returns:
            MPZ: A probable prime
        """
