from abc import ABC, abstractmethod
from ...mpc.types import MPZ, Integer


class IRandom(ABC):
    """Abstract base class defining the interface for a randomness source.

    A source is an explicit object handed to every operation that samples,
    so that runs can be reproduced from a seed and independent searches never
    share generator state.
    """

    @abstractmethod
    def get_seed(self) -> int:
        """Get the seed this source was created from.

        Returns:
            int: The seed
        """

    @abstractmethod
    def randbits(self, bit_count: int) -> MPZ:
        """Draw a uniformly random integer in [0, 2^bit_count).

        Args:
            bit_count (int): Number of random bits, at least 1

        Returns:
            MPZ: Random integer
        """

    @abstractmethod
    def randrange(self, low: Integer, high: Integer) -> MPZ:
        """Draw a uniformly random integer in [low, high).

        Args:
            low (Integer): Inclusive lower bound
            high (Integer): Exclusive upper bound, greater than low

        Returns:
            MPZ: Random integer
        """

    @abstractmethod
    def spawn_seed(self) -> int:
        """Draw a seed for an independent child source.

        Returns:
            int: Seed suitable for Random.from_seed
        """
