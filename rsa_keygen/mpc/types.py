"""Type definitions for multi-precision computing operations."""

from typing import NewType, TypeVar, Union
from gmpy2 import mpz as _mpz, random_state as _random_state

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)
RandomState = NewType("RandomState", _random_state)

# Concrete class of an mpz value, usable with isinstance
MPZ_TYPE = type(_mpz(0))

# Anything accepted where an Integer is expected
Integer = Union[int, MPZ]

# Generic type variable for numeric operations
T = TypeVar("T", MPZ, int)
