"""Named results of the primality machinery."""

from typing import NamedTuple

from ..mpc.types import MPZ


class Factorization(NamedTuple):
    """Decomposition n - 1 == 2^r * d with d odd."""

    r: int
    d: MPZ
