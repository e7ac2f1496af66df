"""RSA cryptosystem module."""

from .KeyGenerator import KeyGenerator
from .KeyPair import KeyPair, PrivateKey, PublicKey
from .abstract.IKeyGenerator import IKeyGenerator

__all__ = ["KeyGenerator", "IKeyGenerator", "KeyPair", "PublicKey", "PrivateKey"]
