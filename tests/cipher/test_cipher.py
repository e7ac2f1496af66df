import pytest

from rsa_keygen.cipher import Cipher
from rsa_keygen.errors import InvalidArgumentError
from rsa_keygen.rsa import KeyGenerator, KeyPair


@pytest.fixture
def toy_key_pair():
    """Fixture providing the key pair for p=11, q=3, e=3 (d=7)."""
    return KeyPair(n=33, e=3, d=7)


@pytest.fixture
def key_pair(rand):
    """Fixture generating a full-word key pair from the seeded source."""
    return KeyGenerator.generate_rsa_keypair(64, 65537, 10, rand)


def test_unit_literals(toy_key_pair):
    assert Cipher.encrypt_unit(2, toy_key_pair.e, toy_key_pair.n) == 8
    assert Cipher.decrypt_unit(8, toy_key_pair.d, toy_key_pair.n) == 2


def test_every_unit_of_toy_key_round_trips(toy_key_pair):
    for value in range(toy_key_pair.n):
        cipher = Cipher.encrypt_unit(value, toy_key_pair.e, toy_key_pair.n)
        assert 0 <= cipher < toy_key_pair.n
        assert Cipher.decrypt_unit(cipher, toy_key_pair.d, toy_key_pair.n) == value


@pytest.mark.parametrize("value", [33, 34, -1, 2**64])
def test_units_outside_modulus_are_rejected(value, toy_key_pair):
    with pytest.raises(InvalidArgumentError):
        Cipher.encrypt_unit(value, toy_key_pair.e, toy_key_pair.n)
    with pytest.raises(InvalidArgumentError):
        Cipher.decrypt_unit(value, toy_key_pair.d, toy_key_pair.n)


@pytest.mark.parametrize("message", [b"hello, world", "héllo ☃", b"", bytes(range(256))])
def test_message_round_trip(message, key_pair):
    ciphertext = Cipher.encrypt(message, key_pair.public_key)
    expected = message.encode("utf-8") if isinstance(message, str) else message

    assert len(ciphertext) == len(expected)
    assert all(0 <= unit < key_pair.n for unit in ciphertext)
    assert Cipher.decrypt(ciphertext, key_pair.private_key) == expected


def test_equal_bytes_give_equal_units(key_pair):
    """Test that units are independent: no padding, no chaining."""
    ciphertext = Cipher.encrypt(b"aaa", key_pair.public_key)
    assert ciphertext[0] == ciphertext[1] == ciphertext[2]


def test_modulus_too_small_for_bytes(toy_key_pair):
    with pytest.raises(InvalidArgumentError):
        Cipher.encrypt(b"a", toy_key_pair.public_key)


def test_ciphertext_that_does_not_decrypt_to_bytes(key_pair):
    """Test n - 1, which decrypts to itself because d is odd."""
    with pytest.raises(InvalidArgumentError):
        Cipher.decrypt([key_pair.n - 1], key_pair.private_key)
