import secrets

from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..protocol_constants import SEED_BITS
from ..utils.Validator import Validator
from .abstract.IRandom import IRandom


class Random(IRandom):
    """Seedable random source backed by a GMP random state."""

    def __init__(self, seed: int) -> None:
        """Initialize the source.

        Args:
            seed (int): Seed for the underlying GMP random state
        """
        self._seed = int(Validator.require_integer("seed", seed))
        self._state = MPC.random_state(self._seed)

    @classmethod
    def from_seed(cls, seed: int) -> "Random":
        return cls(seed)

    @classmethod
    def secure(cls, bit_size: int = SEED_BITS) -> "Random":
        """Create a source seeded from the operating system's CSPRNG."""
        return cls(secrets.randbits(bit_size))

    def get_seed(self) -> int:
        return self._seed

    def randbits(self, bit_count: int) -> MPZ:
        bit_count = Validator.require_count("bit_count", bit_count)
        return MPC.mpz_urandomb(self._state, bit_count)

    def randrange(self, low: Integer, high: Integer) -> MPZ:
        low = Validator.require_integer("low", low)
        high = Validator.require_integer("high", high)
        Validator.require(high > low, f"empty range [{low}, {high})")
        return low + MPC.mpz_random(self._state, high - low)

    def spawn_seed(self) -> int:
        return int(self.randbits(SEED_BITS))

    def __repr__(self) -> str:
        return f"Random(seed={self._seed})"
