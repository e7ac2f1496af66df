from abc import ABC, abstractmethod
from typing import List, Optional

from ...mpc.types import Integer
from ...random.abstract.IRandom import IRandom
from ..KeyPair import KeyPair


class IKeyGenerator(ABC):
    """Abstract base class defining the interface for RSA key pair generation."""

    @staticmethod
    @abstractmethod
    def generate_rsa_keypair(
        total_bits: int,
        public_exponent: Integer,
        rounds: Optional[int] = None,
        rand: Optional[IRandom] = None,
        parallel: bool = False,
        attempt_limit: Optional[int] = None,
    ) -> KeyPair:
        """Generate a key pair from two fresh probable primes.

        p has total_bits // 2 bits and q the remaining bits; each is resampled
        until gcd(public_exponent, prime - 1) == 1.

        Args:
            total_bits (int): Bit length of the modulus n, 8 to 64
            public_exponent (Integer): Odd e with 1 < e < 2^(total_bits - 2)
            rounds (int, optional): Miller-Rabin rounds per candidate
            rand (IRandom, optional): Randomness source
            parallel (bool): Search p and q in two worker processes
            attempt_limit (int, optional): Primes drawn per factor before
                giving up with PrimeSearchExhaustedError

        Returns:
            KeyPair: The key pair (n, e, d)
        """

    @staticmethod
    @abstractmethod
    def from_primes(p: Integer, q: Integer, public_exponent: Integer) -> KeyPair:
        """Derive a key pair from known primes.

        Args:
            p (Integer): First prime
            q (Integer): Second prime
            public_exponent (Integer): e coprime to (p - 1)(q - 1)

        Returns:
            KeyPair: The key pair (n, e, d)
        """

    @staticmethod
    @abstractmethod
    def generate_many(
        amount: int,
        total_bits: int,
        public_exponent: Integer,
        rounds: Optional[int] = None,
        rand: Optional[IRandom] = None,
    ) -> List[KeyPair]:
        """Generate independent key pairs across a process pool.

        Args:
            amount (int): Number of key pairs
            total_bits (int): Bit length of each modulus
            public_exponent (Integer): Shared public exponent
            rounds (int, optional): Miller-Rabin rounds per candidate
            rand (IRandom, optional): Source of the per-key seeds

        Returns:
            List[KeyPair]: Key pairs in seed order
        """
