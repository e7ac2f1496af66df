from abc import ABC, abstractmethod
from typing import Optional

from ...mpc.types import MPZ, Integer
from ...random.abstract.IRandom import IRandom
from ..types import Factorization


class IPrimalityTester(ABC):
    """Abstract base class defining the interface for probabilistic primality testing."""

    @staticmethod
    @abstractmethod
    def factorize(n: Integer) -> Factorization:
        """Decompose n - 1 as 2^r * d with d odd.

        Args:
            n (Integer): Value to decompose, at least 2

        Returns:
            Factorization: (r, d) with 2^r * d + 1 == n
        """

    @staticmethod
    @abstractmethod
    def passes_round(n: MPZ, factorization: Factorization, witness: MPZ) -> bool:
        """Run one Miller-Rabin round for a fixed witness.

        Args:
            n (MPZ): Odd candidate greater than 3
            factorization (Factorization): factorize(n)
            witness (MPZ): Base in [2, n - 2]

        Returns:
            bool: False if the witness proves n composite, True otherwise
        """

    @staticmethod
    @abstractmethod
    def is_probable_prime(
        n: Integer, rounds: Optional[int] = None, rand: Optional[IRandom] = None
    ) -> bool:
        """Miller-Rabin test with independently drawn witnesses.

        A composite is reported prime with probability at most 4^(-rounds).

        Args:
            n (Integer): Odd candidate greater than 2
            rounds (int, optional): Number of witnesses, at least 1. Defaults to
                the MILLER_RABIN_ROUNDS environment variable.
            rand (IRandom, optional): Source of witnesses. Defaults to a fresh
                secure source for this call.

        Returns:
            bool: True if n is probably prime, False if it is composite
        """
