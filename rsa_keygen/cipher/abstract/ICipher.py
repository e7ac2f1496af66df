from abc import ABC, abstractmethod
from typing import List, Sequence, Union

from ...mpc.types import MPZ, Integer
from ...rsa.KeyPair import PrivateKey, PublicKey


class ICipher(ABC):
    """Abstract base class defining the interface for textbook RSA on single units.

    Every unit is mapped independently; there is no padding and no chaining.
    """

    @staticmethod
    @abstractmethod
    def encrypt_unit(value: Integer, e: Integer, n: Integer) -> MPZ:
        """Compute value^e mod n.

        Args:
            value (Integer): Plaintext unit in [0, n)
            e (Integer): Public exponent
            n (Integer): Modulus

        Returns:
            MPZ: Ciphertext unit in [0, n)
        """

    @staticmethod
    @abstractmethod
    def decrypt_unit(value: Integer, d: Integer, n: Integer) -> MPZ:
        """Compute value^d mod n.

        Args:
            value (Integer): Ciphertext unit in [0, n)
            d (Integer): Private exponent
            n (Integer): Modulus

        Returns:
            MPZ: Plaintext unit in [0, n)
        """

    @staticmethod
    @abstractmethod
    def encrypt(message: Union[bytes, str], public_key: PublicKey) -> List[MPZ]:
        """Encrypt each byte of a message as its own unit.

        Args:
            message (Union[bytes, str]): Message; str is UTF-8 encoded first
            public_key (PublicKey): Key whose modulus exceeds 255

        Returns:
            List[MPZ]: One ciphertext unit per byte, in order
        """

    @staticmethod
    @abstractmethod
    def decrypt(ciphertext: Sequence[Integer], private_key: PrivateKey) -> bytes:
        """Reverse encrypt().

        Args:
            ciphertext (Sequence[Integer]): Ciphertext units in order
            private_key (PrivateKey): Matching private key

        Returns:
            bytes: The decrypted message
        """
