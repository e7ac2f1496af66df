"""Textbook RSA key generation over Miller-Rabin probable primes."""

from .cipher import Cipher
from .errors import (
    InternalInvariantViolation,
    InvalidArgumentError,
    PrimeSearchExhaustedError,
    RSAKeygenError,
)
from .modular import BezoutCoefficients, ModularArithmetic
from .primes import Factorization, PrimalityTester, Primes
from .random import Random
from .rsa import KeyGenerator, KeyPair, PrivateKey, PublicKey

gcd = ModularArithmetic.gcd
extended_gcd = ModularArithmetic.extended_gcd
power_mod = ModularArithmetic.power_mod
factorize = PrimalityTester.factorize
is_probable_prime = PrimalityTester.is_probable_prime
generate_prime = Primes.generate_prime
generate_rsa_keypair = KeyGenerator.generate_rsa_keypair
encrypt_unit = Cipher.encrypt_unit
decrypt_unit = Cipher.decrypt_unit

__all__ = [
    "gcd",
    "extended_gcd",
    "power_mod",
    "factorize",
    "is_probable_prime",
    "generate_prime",
    "generate_rsa_keypair",
    "encrypt_unit",
    "decrypt_unit",
    "BezoutCoefficients",
    "Factorization",
    "KeyPair",
    "PublicKey",
    "PrivateKey",
    "Random",
    "ModularArithmetic",
    "PrimalityTester",
    "Primes",
    "KeyGenerator",
    "Cipher",
    "RSAKeygenError",
    "InvalidArgumentError",
    "InternalInvariantViolation",
    "PrimeSearchExhaustedError",
]
