"""Generate a textbook RSA key pair and round-trip a message through it."""

import argparse
import logging
import sys
import time

from rsa_keygen import Cipher, InvalidArgumentError, KeyGenerator, Random, RSAKeygenError
from rsa_keygen.protocol_constants import DEFAULT_KEY_BITS, DEFAULT_PUBLIC_EXPONENT
from rsa_keygen.utils import EnvironmentManager, EnvironmentVariables


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate an RSA key pair from Miller-Rabin probable primes."
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=DEFAULT_KEY_BITS,
        help="Bit length of the modulus n (8 to 64)",
    )
    parser.add_argument(
        "--exponent",
        type=int,
        default=DEFAULT_PUBLIC_EXPONENT,
        help="Public exponent e",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Miller-Rabin rounds per candidate (default: MILLER_RABIN_ROUNDS)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible run",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Search p and q in separate processes",
    )
    parser.add_argument(
        "--message",
        type=str,
        default=None,
        help="Text to encrypt and decrypt byte by byte",
    )
    return parser.parse_args()


def main() -> int:
    """Generate a key pair and optionally round-trip a message."""
    args = parse_args()
    log_level = EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        print(f"Invalid LOG_LEVEL: {log_level}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    rand = Random.from_seed(args.seed) if args.seed is not None else Random.secure()

    start_time = time.time()
    try:
        key_pair = KeyGenerator.generate_rsa_keypair(
            args.bits, args.exponent, args.rounds, rand, parallel=args.parallel
        )
    except InvalidArgumentError as error:
        print(f"Invalid parameters: {error}", file=sys.stderr)
        return 2
    except RSAKeygenError as error:
        print(f"Key generation failed: {error}", file=sys.stderr)
        return 1
    gen_time = time.time() - start_time

    print(f"Key pair generated in {gen_time:.4f} seconds")
    print(f"  n = {key_pair.n}")
    print(f"  e = {key_pair.e}")
    print(f"  d = {key_pair.d}")

    if args.message is None:
        return 0

    try:
        ciphertext = Cipher.encrypt(args.message, key_pair.public_key)
        plaintext = Cipher.decrypt(ciphertext, key_pair.private_key)
    except RSAKeygenError as error:
        print(f"Round trip failed: {error}", file=sys.stderr)
        return 1

    print(f"\nCiphertext: {' '.join(str(unit) for unit in ciphertext)}")
    print(f"Decrypted:  {plaintext.decode('utf-8', errors='replace')}")

    if plaintext == args.message.encode("utf-8"):
        print("\nRound trip matched ✓")
        return 0
    print("\nRound trip failed ✗")
    return 1


if __name__ == "__main__":
    sys.exit(main())
