from typing import List, Sequence, Union

from ..modular import ModularArithmetic
from ..mpc.types import MPZ, Integer
from ..protocol_constants import BYTE_LIMIT
from ..rsa.KeyPair import PrivateKey, PublicKey
from ..utils.Validator import Validator
from .abstract.ICipher import ICipher


class Cipher(ICipher):
    """Implementation of unpadded per-unit RSA encryption."""

    @staticmethod
    def encrypt_unit(value: Integer, e: Integer, n: Integer) -> MPZ:
        Cipher._require_unit("value", value, n)
        return ModularArithmetic.power_mod(value, e, n)

    @staticmethod
    def decrypt_unit(value: Integer, d: Integer, n: Integer) -> MPZ:
        Cipher._require_unit("ciphertext", value, n)
        return ModularArithmetic.power_mod(value, d, n)

    @staticmethod
    def encrypt(message: Union[bytes, str], public_key: PublicKey) -> List[MPZ]:
        data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
        Validator.require(
            public_key.n >= BYTE_LIMIT,
            f"modulus {public_key.n} is too small to carry a byte",
        )
        return [Cipher.encrypt_unit(byte, public_key.e, public_key.n) for byte in data]

    @staticmethod
    def decrypt(ciphertext: Sequence[Integer], private_key: PrivateKey) -> bytes:
        units = [Cipher.decrypt_unit(unit, private_key.d, private_key.n) for unit in ciphertext]
        Validator.require(
            all(unit < BYTE_LIMIT for unit in units),
            "ciphertext does not decrypt to bytes under this key",
        )
        return bytes(int(unit) for unit in units)

    # Private methods
    # --------------

    @staticmethod
    def _require_unit(name: str, value: Integer, n: Integer) -> None:
        value = Validator.require_word(name, value)
        n = Validator.require_word("n", n)
        Validator.require(value < n, f"{name}={value} is outside [0, {n})")
