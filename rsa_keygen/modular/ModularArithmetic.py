from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..utils.Validator import Validator
from .abstract.IModularArithmetic import IModularArithmetic
from .types import BezoutCoefficients


class ModularArithmetic(IModularArithmetic):
    """Implementation of gcd, extended gcd and modular exponentiation."""

    @staticmethod
    def gcd(a: Integer, b: Integer) -> MPZ:
        a = Validator.require_word("a", a)
        b = Validator.require_word("b", b)
        if a < b:
            a, b = b, a
        while b > 0:
            a, b = b, a % b
        return a

    @staticmethod
    def extended_gcd(a: Integer, b: Integer) -> BezoutCoefficients:
        a = Validator.require_word("a", a)
        b = Validator.require_word("b", b)

        # Invariant on every pass: a*old_x + b*old_y == old_r and a*x + b*y == r
        old_r, r = a, b
        old_x, x = MPC.mpz(1), MPC.mpz(0)
        old_y, y = MPC.mpz(0), MPC.mpz(1)
        while r != 0:
            q = old_r // r
            old_r, r = r, old_r - q * r
            old_x, x = x, old_x - q * x
            old_y, y = y, old_y - q * y

        return BezoutCoefficients(g=old_r, x=old_x, y=old_y)

    @staticmethod
    def power_mod(base: Integer, exponent: Integer, modulus: Integer) -> MPZ:
        base = Validator.require_word("base", base)
        exponent = Validator.require_word("exponent", exponent)
        modulus = Validator.require_word("modulus", modulus)
        Validator.require(modulus >= 1, "modulus must be at least 1")

        result = MPC.mpz(1) % modulus
        base = base % modulus
        while exponent > 0:
            if exponent & 1:
                result = ModularArithmetic._multiply_mod(result, base, modulus)
            exponent >>= 1
            base = ModularArithmetic._multiply_mod(base, base, modulus)
        return result

    # Private methods
    # --------------

    @staticmethod
    def _multiply_mod(a: MPZ, b: MPZ, modulus: MPZ) -> MPZ:
        # a, b < modulus < 2^64, so the mpz product is at most double width
        return (a * b) % modulus
