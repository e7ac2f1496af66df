from typing import Optional

from ..errors import InternalInvariantViolation, check_invariant
from ..modular import ModularArithmetic
from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..random import Random
from ..random.abstract.IRandom import IRandom
from ..utils import EnvironmentManager, EnvironmentVariables, Validator
from .abstract.IPrimalityTester import IPrimalityTester
from .types import Factorization


class PrimalityTester(IPrimalityTester):
    """Implementation of the Miller-Rabin probabilistic primality test."""

    @staticmethod
    def factorize(n: Integer) -> Factorization:
        n = Validator.require_word("n", n)
        Validator.require(n >= 2, f"cannot factorize n - 1 for n={n}")

        m = n - 1
        for r in range(MPC.bit_length(m)):
            d = m >> r
            if MPC.is_odd(d):
                check_invariant((d << r) + 1 == n, f"2^{r} * {d} + 1 != {n}")
                return Factorization(r=r, d=d)
        raise InternalInvariantViolation(f"no odd d with 2^r * d == {m}")

    @staticmethod
    def passes_round(n: MPZ, factorization: Factorization, witness: MPZ) -> bool:
        x = ModularArithmetic.power_mod(witness, factorization.d, n)
        if x == 1 or x == n - 1:
            return True

        for _ in range(factorization.r - 1):
            x = ModularArithmetic.power_mod(x, 2, n)
            if x == n - 1:
                return True
        return False

    @staticmethod
    def is_probable_prime(
        n: Integer, rounds: Optional[int] = None, rand: Optional[IRandom] = None
    ) -> bool:
        n = Validator.require_word("n", n)
        Validator.require(n > 2, f"n={n} must be greater than 2")
        Validator.require(MPC.is_odd(n), f"n={n} must be odd")
        rounds = Validator.require_count(
            "rounds",
            EnvironmentManager.resolve_int(EnvironmentVariables.MILLER_RABIN_ROUNDS, rounds),
        )

        # [2, n - 2] holds no witness for n == 3
        if n == 3:
            return True

        if rand is None:
            rand = Random.secure()

        factorization = PrimalityTester.factorize(n)
        for _ in range(rounds):
            witness = rand.randrange(2, n - 1)
            if not PrimalityTester.passes_round(n, factorization, witness):
                return False
        return True
