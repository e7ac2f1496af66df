from dataclasses import dataclass, field

from ..mpc import MPC
from ..mpc.types import MPZ


@dataclass(frozen=True)
class PublicKey:
    n: MPZ
    e: MPZ


@dataclass(frozen=True)
class PrivateKey:
    n: MPZ
    d: MPZ = field(repr=False)


@dataclass(frozen=True)
class KeyPair:
    """An RSA key pair.

    Invariants: d * e == 1 (mod phi(n)), 1 < e < phi(n) and gcd(e, phi(n)) == 1.
    The prime factors of n are not retained.
    """

    n: MPZ
    e: MPZ
    d: MPZ = field(repr=False)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(n=self.n, e=self.e)

    @property
    def private_key(self) -> PrivateKey:
        return PrivateKey(n=self.n, d=self.d)

    @property
    def bit_length(self) -> int:
        return MPC.bit_length(self.n)
