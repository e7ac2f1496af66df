"""Textbook RSA cipher module."""

from .Cipher import Cipher
from .abstract.ICipher import ICipher

__all__ = ["Cipher", "ICipher"]
