import logging
from typing import Optional, Tuple

from ..errors import PrimeSearchExhaustedError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import MIN_PRIME_BITS, WORD_BITS
from ..random import Random
from ..random.abstract.IRandom import IRandom
from ..utils import EnvironmentManager, EnvironmentVariables, Validator
from .PrimalityTester import PrimalityTester
from .abstract.IPrimes import IPrimes

logger = logging.getLogger(__name__)


class Primes(IPrimes):
    """Implementation of prime number generation."""

    @staticmethod
    def candidate_range(bit_length: int) -> Tuple[MPZ, MPZ]:
        bit_length = Validator.require_range("bit_length", bit_length, MIN_PRIME_BITS, WORD_BITS)
        return MPC.mpz(1) << (bit_length - 1), MPC.mpz(1) << bit_length

    @staticmethod
    def generate_prime(
        bit_length: int,
        rounds: Optional[int] = None,
        rand: Optional[IRandom] = None,
        step_limit: Optional[int] = None,
        max_candidates: Optional[int] = None,
    ) -> MPZ:
        low, high = Primes.candidate_range(bit_length)
        rounds = Validator.require_count(
            "rounds",
            EnvironmentManager.resolve_int(EnvironmentVariables.MILLER_RABIN_ROUNDS, rounds),
        )
        step_limit = Validator.require_count(
            "step_limit",
            EnvironmentManager.resolve_int(EnvironmentVariables.PRIME_SEARCH_STEP_LIMIT, step_limit),
        )
        if max_candidates is not None:
            max_candidates = Validator.require_count("max_candidates", max_candidates)
        if rand is None:
            rand = Random.secure()

        tested = 0
        while True:
            candidate = Primes._draw_candidate(rand, low, bit_length)
            for _ in range(step_limit):
                if candidate >= high:
                    break
                if max_candidates is not None and tested >= max_candidates:
                    raise PrimeSearchExhaustedError(
                        f"no {bit_length}-bit prime among {tested} candidates"
                    )
                tested += 1
                if PrimalityTester.is_probable_prime(candidate, rounds, rand):
                    logger.debug("Found %d-bit prime after %d candidates", bit_length, tested)
                    return candidate
                candidate += 2
            logger.debug("Resampling %d-bit candidate after %d tested", bit_length, tested)

    # Private methods
    # --------------

    @staticmethod
    def _draw_candidate(rand: IRandom, low: MPZ, bit_length: int) -> MPZ:
        """Uniformly random odd value in [low, 2 * low)."""
        return (low + rand.randbits(bit_length - 1)) | 1
