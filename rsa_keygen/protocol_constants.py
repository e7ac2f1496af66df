# protocol_constants.py

WORD_BITS = 64                    # Width of an Integer
WORD_LIMIT = 1 << WORD_BITS       # Exclusive upper bound of an Integer

MIN_PRIME_BITS = 2                # Smallest range [2, 4) still holds the prime 3
MIN_KEY_BITS = 8                  # Leaves p and q room to be distinct primes

DEFAULT_KEY_BITS = 64             # n = p * q must fit in one word
DEFAULT_PUBLIC_EXPONENT = 65537

SEED_BITS = 128                   # Bits drawn for a child random seed
BYTE_LIMIT = 256                  # A modulus must exceed every byte value
