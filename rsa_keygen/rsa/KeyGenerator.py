import logging
import multiprocessing
from typing import List, Optional, Tuple

from ..errors import PrimeSearchExhaustedError, check_invariant
from ..modular import ModularArithmetic
from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..primes import PrimalityTester, Primes
from ..protocol_constants import MIN_KEY_BITS, WORD_BITS, WORD_LIMIT
from ..random import Random
from ..random.abstract.IRandom import IRandom
from ..utils import EnvironmentManager, EnvironmentVariables, SystemSpecs, Validator
from .KeyPair import KeyPair
from .abstract.IKeyGenerator import IKeyGenerator

logger = logging.getLogger(__name__)

# (bit_length, public_exponent, rounds, attempt_limit, seed)
FactorSearch = Tuple[int, MPZ, int, int, int]

# (total_bits, public_exponent, rounds, attempt_limit, seed)
KeySearch = Tuple[int, MPZ, int, int, int]


class KeyGenerator(IKeyGenerator):
    """Implementation of textbook RSA key generation.

    p and q are independent draws; q is redrawn in the rare case it equals p.
    """

    @staticmethod
    def generate_rsa_keypair(
        total_bits: int,
        public_exponent: Integer,
        rounds: Optional[int] = None,
        rand: Optional[IRandom] = None,
        parallel: bool = False,
        attempt_limit: Optional[int] = None,
    ) -> KeyPair:
        total_bits, e, rounds, attempt_limit = KeyGenerator._validate(
            total_bits, public_exponent, rounds, attempt_limit
        )
        if rand is None:
            rand = Random.secure()

        p_bits = total_bits // 2
        searches: List[FactorSearch] = [
            (p_bits, e, rounds, attempt_limit, rand.spawn_seed()),
            (total_bits - p_bits, e, rounds, attempt_limit, rand.spawn_seed()),
        ]

        if parallel:
            with multiprocessing.Pool(len(searches)) as pool:
                p, q = pool.map(KeyGenerator._search_factor, searches)
        else:
            p, q = [KeyGenerator._search_factor(search) for search in searches]

        q = KeyGenerator._redraw_equal_factor(p, q, searches[1], rand)
        return KeyGenerator._derive(p, q, e)

    @staticmethod
    def from_primes(p: Integer, q: Integer, public_exponent: Integer) -> KeyPair:
        p = Validator.require_word("p", p)
        q = Validator.require_word("q", q)
        e = Validator.require_word("public_exponent", public_exponent)
        Validator.require(p > 2 and q > 2, "p and q must be odd primes")
        Validator.require(p != q, "p and q must be distinct")
        Validator.require(p * q < WORD_LIMIT, f"p * q does not fit in {WORD_BITS} bits")
        Validator.require(
            PrimalityTester.is_probable_prime(p) and PrimalityTester.is_probable_prime(q),
            "p and q must be prime",
        )

        phi = (p - 1) * (q - 1)
        Validator.require(1 < e < phi, f"public_exponent must be in (1, {phi})")
        Validator.require(
            ModularArithmetic.gcd(e, phi) == 1,
            f"public_exponent {e} is not coprime to phi={phi}",
        )
        return KeyGenerator._derive(p, q, e)

    @staticmethod
    def generate_many(
        amount: int,
        total_bits: int,
        public_exponent: Integer,
        rounds: Optional[int] = None,
        rand: Optional[IRandom] = None,
    ) -> List[KeyPair]:
        amount = Validator.require_count("amount", amount)
        total_bits, e, rounds, attempt_limit = KeyGenerator._validate(
            total_bits, public_exponent, rounds, None
        )
        if rand is None:
            rand = Random.secure()

        key_searches: List[KeySearch] = [
            (total_bits, e, rounds, attempt_limit, rand.spawn_seed()) for _ in range(amount)
        ]

        num_workers = SystemSpecs.get_num_workers(amount)
        with multiprocessing.Pool(num_workers) as pool:
            return pool.map(KeyGenerator._generate_from_seed, key_searches)

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _validate(
        total_bits: int,
        public_exponent: Integer,
        rounds: Optional[int],
        attempt_limit: Optional[int],
    ) -> Tuple[int, MPZ, int, int]:
        total_bits = Validator.require_range("total_bits", total_bits, MIN_KEY_BITS, WORD_BITS)
        e = Validator.require_word("public_exponent", public_exponent)
        Validator.require(e > 1, "public_exponent must be greater than 1")
        Validator.require(
            MPC.is_odd(e), "public_exponent must be odd to be coprime to p - 1"
        )
        # phi >= 2^(total_bits - 2), so this keeps e < phi for every p and q
        Validator.require(
            e < MPC.mpz(1) << (total_bits - 2),
            f"public_exponent {e} is too large for a {total_bits}-bit modulus",
        )
        rounds = Validator.require_count(
            "rounds",
            EnvironmentManager.resolve_int(EnvironmentVariables.MILLER_RABIN_ROUNDS, rounds),
        )
        attempt_limit = Validator.require_count(
            "attempt_limit",
            EnvironmentManager.resolve_int(EnvironmentVariables.KEYGEN_ATTEMPT_LIMIT, attempt_limit),
        )
        return total_bits, e, rounds, attempt_limit

    @staticmethod
    def _search_factor(search: FactorSearch) -> MPZ:
        """Draw primes until one is usable as an RSA factor for e.

        Runs in a worker process when the search is parallel, so the
        randomness source is rebuilt from its seed.
        """
        bit_length, e, rounds, attempt_limit, seed = search
        rand = Random.from_seed(seed)

        for _ in range(attempt_limit):
            prime = Primes.generate_prime(bit_length, rounds, rand)
            if ModularArithmetic.gcd(e, prime - 1) == 1:
                return prime
            logger.debug("Rejected %d-bit prime sharing a factor with e=%d", bit_length, e)

        raise PrimeSearchExhaustedError(
            f"no {bit_length}-bit prime p with gcd({e}, p - 1) == 1 "
            f"after {attempt_limit} attempts"
        )

    @staticmethod
    def _redraw_equal_factor(p: MPZ, q: MPZ, search: FactorSearch, rand: IRandom) -> MPZ:
        """Redraw q until it differs from p.

        With p == q the modulus is p^2 and (p - 1)(q - 1) is not its totient,
        so such a key cannot decrypt.
        """
        bit_length, e, rounds, attempt_limit, _ = search
        attempts = 0
        while q == p:
            if attempts >= attempt_limit:
                raise PrimeSearchExhaustedError(
                    f"no {bit_length}-bit q distinct from p after {attempt_limit} attempts"
                )
            attempts += 1
            logger.debug("Redrawing %d-bit q equal to p", bit_length)
            q = KeyGenerator._search_factor(
                (bit_length, e, rounds, attempt_limit, rand.spawn_seed())
            )
        return q

    @staticmethod
    def _generate_from_seed(key_search: KeySearch) -> KeyPair:
        """Helper method to generate a single key pair for multiprocessing."""
        total_bits, e, rounds, attempt_limit, seed = key_search
        return KeyGenerator.generate_rsa_keypair(
            total_bits, e, rounds, Random.from_seed(seed), attempt_limit=attempt_limit
        )

    @staticmethod
    def _derive(p: MPZ, q: MPZ, e: MPZ) -> KeyPair:
        n = p * q
        phi = (p - 1) * (q - 1)
        check_invariant(
            ModularArithmetic.gcd(e, phi) == 1,
            f"gcd({e}, phi) != 1 although both factors were screened",
        )

        bezout = ModularArithmetic.extended_gcd(e, phi)
        d = bezout.x % phi  # x may be negative
        check_invariant((d * e) % phi == 1, "d is not the inverse of e modulo phi")

        logger.info("Generated RSA key pair with a %d-bit modulus", MPC.bit_length(n))
        return KeyPair(n=n, e=e, d=d)
