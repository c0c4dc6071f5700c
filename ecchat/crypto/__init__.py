"""
Cryptographic core for ecchat.

This package provides:
- Prime field arithmetic (normalized mod, modular inverse)
- Short Weierstrass curve group with explicit domain parameters
- Ephemeral key pair generation and validation
- Character <-> point codec
- EC-ElGamal encryption of points and strings
"""

from .field import mod, mod_inverse
from .curve import (
    Point, Identity, INFINITY, CurvePoint, EllipticCurve, TOY_CURVE,
    is_on_curve, point_add, point_double, point_multiply, point_negate,
)
from .keys import KeyPair, generate_keypair, validate_private_key, validate_public_key
from .codec import encode_char, decode_point, is_encodable, string_to_points, points_to_string
from .elgamal import Ciphertext, encrypt, decrypt, encrypt_string, decrypt_string

__all__ = [
    'mod',
    'mod_inverse',
    'Point',
    'Identity',
    'INFINITY',
    'CurvePoint',
    'EllipticCurve',
    'TOY_CURVE',
    'is_on_curve',
    'point_add',
    'point_double',
    'point_multiply',
    'point_negate',
    'KeyPair',
    'generate_keypair',
    'validate_private_key',
    'validate_public_key',
    'encode_char',
    'decode_point',
    'is_encodable',
    'string_to_points',
    'points_to_string',
    'Ciphertext',
    'encrypt',
    'decrypt',
    'encrypt_string',
    'decrypt_string',
]
