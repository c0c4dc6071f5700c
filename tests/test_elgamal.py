import string

import pytest

from ecchat import config
from ecchat.common.exceptions import (
    ConfigurationError, DecryptionError, EncodingError, EncryptionError, InvalidKeyError
)
from ecchat.crypto import elgamal
from ecchat.crypto.codec import encode_char
from ecchat.crypto.curve import INFINITY, Point, point_multiply
from ecchat.crypto.elgamal import decrypt, decrypt_string, encrypt, encrypt_string
from ecchat.crypto.keys import generate_keypair

# private key 2 -> public key 2G
PRIVATE_KEY = 2
PUBLIC_KEY = Point(20, 88)


def test_fixed_vector(curve):
    assert point_multiply(PRIVATE_KEY, curve.g, curve) == PUBLIC_KEY
    message = encode_char('h', curve)

    c1, c2 = encrypt(PUBLIC_KEY, message, curve, k=3)
    assert c1 == Point(78, 11)
    assert c2 == Point(66, 68)
    assert decrypt(PRIVATE_KEY, c1, c2, curve) == message


def test_point_round_trip_on_curve_plaintext(curve, keypair):
    for k in (1, 17, 55, 88):
        message = point_multiply(k, curve.g, curve)
        c1, c2 = encrypt(keypair.public_key, message, curve)
        assert decrypt(keypair.private_key, c1, c2, curve) == message


def test_hi_scenario(curve, keypair):
    ciphertext = encrypt_string(keypair.public_key, "hi", curve)
    assert len(ciphertext) == 2
    assert decrypt_string(keypair.private_key, ciphertext, curve) == "hi"


def test_empty_string(curve, keypair):
    assert encrypt_string(keypair.public_key, "", curve) == []
    assert decrypt_string(keypair.private_key, [], curve) == ""


def test_round_trip_alphabet(curve):
    message = string.ascii_lowercase + "{|}~" + chr(150) + chr(193)
    for _ in range(20):
        private_key, public_key = generate_keypair(curve)
        ciphertext = encrypt_string(public_key, message, curve)
        assert decrypt_string(private_key, ciphertext, curve) == message


def test_round_trip_wide_curve(wide_curve):
    private_key, public_key = generate_keypair(wide_curve)
    message = "the quick brown fox"
    expected = message.replace(' ', 'a')
    ciphertext = encrypt_string(public_key, message, wide_curve)
    assert decrypt_string(private_key, ciphertext, wide_curve) == expected


def test_ciphertext_shape(curve, keypair):
    for message in ("a", "hello", "abcdefghijklmnopqrstuvwxyz" * 3):
        ciphertext = encrypt_string(keypair.public_key, message, curve)
        assert len(ciphertext) == len(message)
        for c1, c2 in ciphertext:
            assert isinstance(c1, Point)
            assert isinstance(c2, Point)
            assert curve.is_on_curve(c1)


def test_encryption_is_not_deterministic(curve, keypair):
    message = "hello world"
    first = encrypt_string(keypair.public_key, message, curve)
    second = encrypt_string(keypair.public_key, message, curve)
    assert first != second
    assert decrypt_string(keypair.private_key, first, curve) == "helloaworld"
    assert decrypt_string(keypair.private_key, second, curve) == "helloaworld"


def test_wrong_key_yields_garbled_text(curve):
    sender_view = generate_keypair(curve)
    other = generate_keypair(curve)
    while other.private_key == sender_view.private_key:
        other = generate_keypair(curve)

    garbled = None
    for _ in range(50):
        ciphertext = encrypt_string(sender_view.public_key, "secret", curve)
        try:
            garbled = decrypt_string(other.private_key, ciphertext, curve)
        except DecryptionError:
            continue
        break

    assert garbled is not None
    assert len(garbled) == len("secret")
    assert garbled != "secret"


def test_degenerate_explicit_k_is_rejected(curve):
    # 3 * (2G) = 6G = (40, 36) shares its x with the plaintext
    with pytest.raises(EncryptionError):
        encrypt(PUBLIC_KEY, Point(40, 1), curve, k=3)


def test_explicit_k_out_of_range(curve):
    for k in (0, curve.n, -1, 1.5):
        with pytest.raises(EncryptionError):
            encrypt(PUBLIC_KEY, Point(7, 71), curve, k=k)


def test_degenerate_draw_is_redrawn(curve, monkeypatch):
    draws = iter([3, 5])
    monkeypatch.setattr(elgamal, 'random_scalar', lambda n: next(draws))

    c1, c2 = encrypt(PUBLIC_KEY, Point(40, 1), curve)
    assert c1 == Point(8, 70)
    assert c2 == Point(53, 66)
    assert decrypt(PRIVATE_KEY, c1, c2, curve) == Point(40, 1)


def test_redraws_are_bounded(curve, monkeypatch):
    monkeypatch.setattr(config, 'MAX_EPHEMERAL_ATTEMPTS', 3)
    monkeypatch.setattr(elgamal, 'random_scalar', lambda n: 3)
    with pytest.raises(EncryptionError):
        encrypt(PUBLIC_KEY, Point(40, 1), curve)


def test_encrypt_string_rejects_bad_public_key(curve):
    with pytest.raises(InvalidKeyError):
        encrypt_string(Point(2, 22), "hi", curve)
    with pytest.raises(InvalidKeyError):
        encrypt_string(INFINITY, "hi", curve)


def test_encrypt_string_fails_atomically(curve, keypair):
    with pytest.raises(EncodingError) as excinfo:
        encrypt_string(keypair.public_key, "naïve", curve)
    assert excinfo.value.index == 2


def test_decrypt_string_rejects_bad_private_key(curve, keypair):
    ciphertext = encrypt_string(keypair.public_key, "hi", curve)
    with pytest.raises(InvalidKeyError):
        decrypt_string(0, ciphertext, curve)
    with pytest.raises(InvalidKeyError):
        decrypt_string(curve.n, ciphertext, curve)


def test_decrypt_string_reports_malformed_pair(curve, keypair):
    ciphertext = encrypt_string(keypair.public_key, "abc", curve)

    broken = list(ciphertext)
    broken[1] = (ciphertext[1][0],)
    with pytest.raises(DecryptionError) as excinfo:
        decrypt_string(keypair.private_key, broken, curve)
    assert excinfo.value.index == 1

    broken = list(ciphertext)
    broken[2] = (INFINITY, ciphertext[2][1])
    with pytest.raises(DecryptionError) as excinfo:
        decrypt_string(keypair.private_key, broken, curve)
    assert excinfo.value.index == 2

    broken = list(ciphertext)
    broken[0] = (ciphertext[0][0], Point(500, 1))
    with pytest.raises(DecryptionError) as excinfo:
        decrypt_string(keypair.private_key, broken, curve)
    assert excinfo.value.index == 0


def test_identity_plaintext_round_trip(curve, keypair):
    c1, c2 = encrypt(keypair.public_key, INFINITY, curve)
    assert decrypt(keypair.private_key, c1, c2, curve) == INFINITY


def test_decrypt_string_rejects_non_sequence(curve, keypair):
    for bad in (None, 3):
        with pytest.raises(DecryptionError):
            decrypt_string(keypair.private_key, bad, curve)


def test_non_positive_attempt_bound_is_a_configuration_error(curve, keypair, monkeypatch):
    monkeypatch.setattr(config, 'MAX_EPHEMERAL_ATTEMPTS', 0)
    with pytest.raises(ConfigurationError):
        encrypt_string(keypair.public_key, "hi", curve)
