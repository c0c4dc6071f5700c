"""
Ephemeral Key Pairs

A key pair is (private scalar d in [1, n-1], public point d*G). Keys live
for one chat session and are never written anywhere.
"""

from typing import NamedTuple

from ecchat.common.exceptions import InvalidKeyError
from ecchat.common.utils import random_scalar
from ecchat.crypto.curve import (
    CurvePoint, EllipticCurve, INFINITY, Identity, Point, TOY_CURVE, point_multiply
)


class KeyPair(NamedTuple):
    private_key: int
    public_key: CurvePoint


def generate_keypair(curve: EllipticCurve = TOY_CURVE) -> KeyPair:
    """
    Generate a session key pair.

    Args:
        curve: Domain parameters

    Returns:
        KeyPair(private_key, public_key)
        private_key: Random integer in range [1, n-1]
        public_key: private_key * G
    """
    private_key = random_scalar(curve.n)
    public_key = point_multiply(private_key, curve.g, curve)
    return KeyPair(private_key, public_key)


def validate_private_key(private_key: int, curve: EllipticCurve = TOY_CURVE) -> None:
    if isinstance(private_key, bool) or not isinstance(private_key, int):
        raise InvalidKeyError(f"Private key must be an integer, got {type(private_key).__name__}")
    if not 1 <= private_key <= curve.n - 1:
        raise InvalidKeyError(f"Private key must be in [1, {curve.n - 1}], got {private_key}")


def validate_public_key(public_key: CurvePoint, curve: EllipticCurve = TOY_CURVE) -> None:
    """
    Check that a received public key is a usable group element.

    Raises:
        InvalidKeyError: If the key is the identity, off the curve, or not
            in the subgroup generated by G
    """
    if isinstance(public_key, Identity):
        raise InvalidKeyError("Public key cannot be the point at infinity")
    if not isinstance(public_key, Point) or not curve.contains(public_key):
        raise InvalidKeyError(f"Public key {public_key} is not on curve {curve.name}")
    if point_multiply(curve.n, public_key, curve) != INFINITY:
        raise InvalidKeyError(f"Public key {public_key} is not in the subgroup of order {curve.n}")
