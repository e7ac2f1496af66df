"""Prime number generation module."""

from .Primes import Primes
from .PrimalityTester import PrimalityTester
from .abstract.IPrimes import IPrimes
from .abstract.IPrimalityTester import IPrimalityTester
from .types import Factorization

__all__ = ["Primes", "PrimalityTester", "IPrimes", "IPrimalityTester", "Factorization"]
