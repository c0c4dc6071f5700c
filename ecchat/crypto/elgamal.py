"""
EC-ElGamal Encryption

Point level:
    encrypt:  C1 = k*G,  C2 = M + k*Q        (Q = recipient public key)
    decrypt:  M  = C2 - d*C1                 (d = recipient private key)

String level: one (C1, C2) pair per character, fresh k for each, order kept.

Plaintext points from the codec are usually not on the curve. The chord
formulas still invert exactly ((M + S) + (-S) == M) as long as neither
addition hits a branch keyed on equal x coordinates, so encryption redraws
k until S = k*Q and C2 both have an x different from their partner's.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ecchat import config
from ecchat.common.exceptions import (
    ConfigurationError, DecryptionError, EcChatException, EncryptionError
)
from ecchat.common.utils import random_scalar
from ecchat.crypto.codec import decode_point, string_to_points
from ecchat.crypto.curve import (
    CurvePoint, EllipticCurve, Identity, Point, TOY_CURVE,
    point_add, point_multiply, point_negate,
)
from ecchat.crypto.keys import validate_private_key, validate_public_key

logger = logging.getLogger(__name__)

CiphertextPair = Tuple[Point, Point]
Ciphertext = List[CiphertextPair]


def _encrypt_with(k: int, public_key: Point, message_point: CurvePoint,
                  curve: EllipticCurve) -> Optional[CiphertextPair]:
    """Encrypt with a fixed k, or return None if k lands on a degenerate branch."""
    shared = point_multiply(k, public_key, curve)
    if isinstance(shared, Identity):
        return None
    if isinstance(message_point, Identity):
        return point_multiply(k, curve.g, curve), shared
    if message_point.x == shared.x:
        return None

    c2 = point_add(message_point, shared, curve)
    if isinstance(c2, Identity) or c2.x == shared.x:
        return None

    c1 = point_multiply(k, curve.g, curve)
    return c1, c2


def _encrypt_point(public_key: Point, message_point: CurvePoint,
                   curve: EllipticCurve, k: Optional[int] = None) -> CiphertextPair:
    if k is not None:
        if isinstance(k, bool) or not isinstance(k, int) or not 1 <= k <= curve.n - 1:
            raise EncryptionError(f"Ephemeral scalar must be an integer in [1, {curve.n - 1}], got {k!r}")
        pair = _encrypt_with(k, public_key, message_point, curve)
        if pair is None:
            raise EncryptionError(f"Ephemeral scalar {k} is degenerate for plaintext {message_point}")
        return pair

    attempts = config.MAX_EPHEMERAL_ATTEMPTS
    if attempts < 1:
        raise ConfigurationError(f"ECCHAT_MAX_EPHEMERAL_ATTEMPTS must be at least 1, got {attempts}")
    for attempt in range(1, attempts + 1):
        pair = _encrypt_with(random_scalar(curve.n), public_key, message_point, curve)
        if pair is not None:
            return pair
        logger.debug("Ephemeral scalar rejected for %s (attempt %d/%d)", message_point, attempt, attempts)

    raise EncryptionError(f"No usable ephemeral scalar found after {attempts} attempts")


def encrypt(public_key: Point, message_point: CurvePoint,
            curve: EllipticCurve = TOY_CURVE, k: Optional[int] = None) -> CiphertextPair:
    """
    Encrypt one plaintext point.

    Args:
        public_key: Recipient public key
        message_point: Plaintext point
        curve: Domain parameters
        k: Ephemeral scalar (drawn from [1, n-1] when omitted)

    Returns:
        Tuple (C1, C2)

    Raises:
        InvalidKeyError: If public_key is not a valid group element
        EncryptionError: If no usable ephemeral scalar is available
    """
    validate_public_key(public_key, curve)
    return _encrypt_point(public_key, message_point, curve, k)


def decrypt(private_key: int, c1: Point, c2: Point,
            curve: EllipticCurve = TOY_CURVE) -> CurvePoint:
    """
    Recover the plaintext point from (C1, C2).

    Args:
        private_key: Recipient private key
        c1: Ephemeral public point k*G
        c2: Masked plaintext M + k*Q
        curve: Domain parameters

    Returns:
        C2 - private_key*C1
    """
    validate_private_key(private_key, curve)
    for label, point in (('C1', c1), ('C2', c2)):
        if not isinstance(point, Point) or not (0 <= point.x < curve.p and 0 <= point.y < curve.p):
            raise DecryptionError(f"{label} is not an affine point over F_{curve.p}: {point!r}")

    shared = point_multiply(private_key, c1, curve)
    return point_add(c2, point_negate(shared, curve), curve)


def encrypt_string(public_key: Point, message: str,
                   curve: EllipticCurve = TOY_CURVE) -> Ciphertext:
    """
    Encrypt a message character by character.

    The result has exactly one pair per character and differs between calls
    with the same input.

    Raises:
        InvalidKeyError: If public_key is not a valid group element
        EncodingError: If a character cannot be encoded (carries its index)
        EncryptionError: If a character could not be encrypted
    """
    validate_public_key(public_key, curve)
    points = string_to_points(message, curve)

    ciphertext = []
    for index, point in enumerate(points):
        try:
            ciphertext.append(_encrypt_point(public_key, point, curve))
        except EncryptionError as e:
            raise EncryptionError(f"Character {index}: {e}") from e
    return ciphertext


def decrypt_string(private_key: int, ciphertext: Sequence[CiphertextPair],
                   curve: EllipticCurve = TOY_CURVE) -> str:
    """
    Decrypt a ciphertext produced by encrypt_string.

    A wrong private key is not detected: it yields garbled text, not an
    error. Nothing here authenticates the sender.

    Raises:
        InvalidKeyError: If private_key is out of range
        DecryptionError: If a pair is malformed or does not decode
            (carries its index); no partial plaintext is returned
    """
    validate_private_key(private_key, curve)

    try:
        pairs = list(ciphertext)
    except TypeError as e:
        raise DecryptionError(f"Ciphertext must be a sequence of (C1, C2) pairs: {e}") from e

    chars = []
    for index, pair in enumerate(pairs):
        try:
            c1, c2 = pair
            chars.append(decode_point(decrypt(private_key, c1, c2, curve), curve))
        except (TypeError, ValueError) as e:
            raise DecryptionError(f"Pair {index} is malformed: {e}", index=index) from e
        except EcChatException as e:
            raise DecryptionError(f"Pair {index}: {e}", index=index) from e

    return ''.join(chars)


# Test function for development
if __name__ == "__main__":
    from ecchat.crypto.keys import generate_keypair

    print("[*] Testing EC-ElGamal")

    private_key, public_key = generate_keypair()
    print(f"\n[1] Key pair: d={private_key}, Q={public_key}")

    message = "hi"
    ciphertext = encrypt_string(public_key, message)
    print(f"\n[2] Ciphertext for {message!r}:")
    for c1, c2 in ciphertext:
        print(f"    C1={c1}  C2={c2}")

    decrypted = decrypt_string(private_key, ciphertext)
    print(f"\n[3] Decrypted: {decrypted!r}")

    assert decrypted == message, "Round trip failed!"
    print("\n[✓] EC-ElGamal test passed!")
