import logging

import gmpy2
import pytest
from unittest.mock import patch

from rsa_keygen.cipher import Cipher
from rsa_keygen.errors import (
    InternalInvariantViolation,
    InvalidArgumentError,
    PrimeSearchExhaustedError,
)
from rsa_keygen.modular import ModularArithmetic
from rsa_keygen.mpc import MPC
from rsa_keygen.primes import Primes
from rsa_keygen.rsa import KeyGenerator, KeyPair


def test_toy_key_from_primes():
    """Test p=11, q=3, e=3: phi=20 and d=7."""
    key_pair = KeyGenerator.from_primes(11, 3, 3)
    assert key_pair == KeyPair(n=33, e=3, d=7)

    bezout = ModularArithmetic.extended_gcd(3, 20)
    assert bezout.x == 7
    assert (7 * 3 - 1) % 20 == 0


def test_negative_bezout_coefficient_is_normalized():
    """Test p=7, q=3, e=7: phi=12 and extended_gcd(7, 12) has x = -5."""
    assert ModularArithmetic.extended_gcd(7, 12).x == -5
    assert KeyGenerator.from_primes(7, 3, 7) == KeyPair(n=21, e=7, d=7)


def _factor(n):
    p = 3
    while n % p:
        p += 2
    return p, n // p


@pytest.mark.parametrize(
    "total_bits,public_exponent,seed",
    [(bits, e, seed) for bits in (10, 12, 14) for e in (3, 17) for seed in range(4)]
    + [(16, 3, 0), (16, 65, 1)],
)
def test_small_generated_keys_decrypt_every_unit(total_bits, public_exponent, seed, make_rand):
    """Test the whole [0, n) range against phi recomputed from the factors of n."""
    key_pair = KeyGenerator.generate_rsa_keypair(total_bits, public_exponent, 10, make_rand(seed))
    p, q = _factor(key_pair.n)
    assert p != q
    assert gmpy2.is_prime(p) and gmpy2.is_prime(q)

    phi = (p - 1) * (q - 1)
    assert ModularArithmetic.gcd(key_pair.e, phi) == 1
    assert (key_pair.d * key_pair.e) % phi == 1

    for value in range(key_pair.n):
        cipher = Cipher.encrypt_unit(value, key_pair.e, key_pair.n)
        assert Cipher.decrypt_unit(cipher, key_pair.d, key_pair.n) == value



def test_generated_key_pair_round_trips(rand):
    key_pair = KeyGenerator.generate_rsa_keypair(64, 65537, 10, rand)
    assert key_pair.e == 65537
    assert 63 <= key_pair.bit_length <= 64
    assert 0 < key_pair.d < key_pair.n

    values = [0, 1, 2, 255, key_pair.n - 1] + [rand.randrange(0, key_pair.n) for _ in range(50)]
    for value in values:
        cipher = Cipher.encrypt_unit(value, key_pair.e, key_pair.n)
        assert Cipher.decrypt_unit(cipher, key_pair.d, key_pair.n) == value


def test_factor_bit_lengths_split_total_bits(rand):
    with patch.object(Primes, "generate_prime", wraps=Primes.generate_prime) as generate_prime:
        key_pair = KeyGenerator.generate_rsa_keypair(37, 3, 10, rand)

    requested = {call.args[0] for call in generate_prime.call_args_list}
    assert requested == {18, 19}
    assert 36 <= key_pair.bit_length <= 37


def test_primes_sharing_a_factor_with_e_are_resampled(rand):
    """Test that 7 is skipped for e=3 because gcd(3, 6) != 1."""
    primes = [MPC.mpz(7), MPC.mpz(11), MPC.mpz(5)]
    with patch.object(Primes, "generate_prime", side_effect=primes) as generate_prime:
        key_pair = KeyGenerator.generate_rsa_keypair(8, 3, 10, rand)

    assert generate_prime.call_count == 3
    assert key_pair == KeyPair(n=55, e=3, d=27)


def test_attempt_limit_bounds_resampling(rand):
    with patch.object(Primes, "generate_prime", return_value=MPC.mpz(7)):
        with pytest.raises(PrimeSearchExhaustedError):
            KeyGenerator.generate_rsa_keypair(8, 3, 10, rand, attempt_limit=4)


def test_q_equal_to_p_is_redrawn(rand):
    """Test that a q colliding with p is replaced: p=11, q=13, phi=120 and d=103."""
    factors = [MPC.mpz(11), MPC.mpz(11), MPC.mpz(13)]
    with patch.object(KeyGenerator, "_search_factor", side_effect=factors) as search_factor:
        key_pair = KeyGenerator.generate_rsa_keypair(8, 7, 10, rand)

    assert search_factor.call_count == 3
    assert key_pair == KeyPair(n=143, e=7, d=103)


def test_attempt_limit_bounds_redrawing_q(rand):
    with patch.object(KeyGenerator, "_search_factor", return_value=MPC.mpz(11)) as search_factor:
        with pytest.raises(PrimeSearchExhaustedError):
            KeyGenerator.generate_rsa_keypair(8, 7, 10, rand, attempt_limit=3)

    assert search_factor.call_count == 5


def test_key_size_with_a_single_usable_prime_is_exhausted(rand):
    """Test 8-bit keys for e=3, where 11 is the only usable 4-bit prime."""
    with pytest.raises(PrimeSearchExhaustedError):
        KeyGenerator.generate_rsa_keypair(8, 3, 10, rand, attempt_limit=5)



def test_totient_sharing_a_factor_with_e_is_an_invariant_violation(rand):
    """Test the check behind the sampling constraint, bypassing the screening."""
    with patch.object(KeyGenerator, "_search_factor", side_effect=[MPC.mpz(7), MPC.mpz(13)]):
        with pytest.raises(InternalInvariantViolation):
            KeyGenerator.generate_rsa_keypair(8, 3, 10, rand)


def test_same_seed_gives_same_key_pair(make_rand):
    first = KeyGenerator.generate_rsa_keypair(48, 17, 10, make_rand(3))
    second = KeyGenerator.generate_rsa_keypair(48, 17, 10, make_rand(3))
    assert first == second


def test_parallel_search_matches_sequential_search(make_rand):
    """Test that searching p and q in worker processes changes nothing but speed."""
    sequential = KeyGenerator.generate_rsa_keypair(48, 17, 10, make_rand(11))
    parallel = KeyGenerator.generate_rsa_keypair(48, 17, 10, make_rand(11), parallel=True)
    assert parallel == sequential


def test_generate_many(rand):
    key_pairs = KeyGenerator.generate_many(3, 48, 65537, 10, rand)
    assert len(key_pairs) == 3
    assert len({key_pair.n for key_pair in key_pairs}) == 3
    for key_pair in key_pairs:
        cipher = Cipher.encrypt_unit(42, key_pair.e, key_pair.n)
        assert Cipher.decrypt_unit(cipher, key_pair.d, key_pair.n) == 42


def test_rounds_default_from_environment(monkeypatch, rand):
    monkeypatch.setenv("MILLER_RABIN_ROUNDS", "2")
    key_pair = KeyGenerator.generate_rsa_keypair(32, 17, rand=rand)
    assert key_pair.e == 17


def test_private_exponent_is_not_logged(rand, caplog):
    with caplog.at_level(logging.DEBUG, logger="rsa_keygen"):
        key_pair = KeyGenerator.generate_rsa_keypair(64, 65537, 10, rand)
    assert f"with a {key_pair.bit_length}-bit modulus" in caplog.text
    assert str(key_pair.d) not in caplog.text


@pytest.mark.parametrize(
    "total_bits,public_exponent,rounds",
    [
        (3, 3, 10),
        (4, 3, 10),
        (6, 5, 10),
        (65, 3, 10),
        (16, 1, 10),
        (16, 0, 10),
        (16, 4, 10),
        (16, 65537, 10),
        (16, 17, 0),
        (16.0, 17, 10),
    ],
)
def test_generate_rsa_keypair_rejects_bad_arguments(total_bits, public_exponent, rounds, rand):
    with pytest.raises(InvalidArgumentError):
        KeyGenerator.generate_rsa_keypair(total_bits, public_exponent, rounds, rand)


@pytest.mark.parametrize(
    "p,q,e",
    [
        (4, 7, 3),
        (9, 7, 5),
        (11, 3, 5),
        (11, 3, 21),
        (11, 3, 1),
        (2, 3, 3),
        (3, 3, 3),
        (11, 11, 3),
        (2**32 + 15, 2**32 + 15, 3),
    ],
)
def test_from_primes_rejects_bad_arguments(p, q, e):
    with pytest.raises(InvalidArgumentError):
        KeyGenerator.from_primes(p, q, e)
