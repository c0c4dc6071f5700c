"""
Character <-> Point Codec

Each character becomes one point used as an ElGamal plaintext:

    space      -> x = 97
    code < 97  -> x = code + 97
    otherwise  -> x = code
    y = x^2 + a*x + b  (mod p)

Decoding works on the reduced x coordinate:

    x < 97     -> chr(x + 97)
    x >= 25    -> chr(x)
    otherwise  -> chr(x + 97)

The last branch is unreachable and the middle one only fires when p > 97.

Space and characters below 'a' fold onto other letters ("a b" decodes as
"aab"). The plaintext points are generally not on the curve; the cipher
accounts for that.
"""

from typing import List, Sequence

from ecchat.common.exceptions import DecodingError, EncodingError
from ecchat.crypto.curve import CurvePoint, EllipticCurve, Identity, Point, TOY_CURVE
from ecchat.crypto.field import mod

ALPHABET_OFFSET = 97
DECODE_THRESHOLD = 25


def _char_to_x(char: str) -> int:
    if char == ' ':
        return ALPHABET_OFFSET
    x = ord(char)
    if x < ALPHABET_OFFSET:
        x += ALPHABET_OFFSET
    return x


def _x_to_code(x: int) -> int:
    if x < ALPHABET_OFFSET:
        return x + ALPHABET_OFFSET
    elif x >= DECODE_THRESHOLD:
        return x
    else:
        return x + ALPHABET_OFFSET


def encode_char(char: str, curve: EllipticCurve = TOY_CURVE) -> Point:
    """
    Map a single character to a plaintext point.

    Args:
        char: One character
        curve: Domain parameters

    Returns:
        Point(x mod p, (x^2 + a*x + b) mod p)

    Raises:
        EncodingError: If char is not a single character, or its code does
            not survive reduction mod p
    """
    if not isinstance(char, str) or len(char) != 1:
        raise EncodingError(f"Expected a single character, got {char!r}", char=char)

    x = _char_to_x(char)
    reduced = mod(x, curve.p)
    if _x_to_code(reduced) != x:
        raise EncodingError(
            f"Message character {char!r} (code {ord(char)}) is not encodable on curve {curve.name}",
            char=char,
        )

    return Point(reduced, mod(x * x + curve.a * x + curve.b, curve.p))


def decode_point(point: CurvePoint, curve: EllipticCurve = TOY_CURVE) -> str:
    """
    Map a plaintext point back to its character.

    Raises:
        DecodingError: If point is the identity or its x is out of range
    """
    if isinstance(point, Identity):
        raise DecodingError("Point at infinity does not encode a character")
    if not 0 <= point.x < curve.p:
        raise DecodingError(f"Point {point} has x outside [0, {curve.p})")
    return chr(_x_to_code(point.x))


def is_encodable(char: str, curve: EllipticCurve = TOY_CURVE) -> bool:
    """True if char encodes and decodes back to itself."""
    try:
        return decode_point(encode_char(char, curve), curve) == char
    except (EncodingError, DecodingError):
        return False


def string_to_points(message: str, curve: EllipticCurve = TOY_CURVE) -> List[Point]:
    """
    Encode a message, one point per character, in order.

    Raises:
        EncodingError: On the first character that cannot be encoded;
            the error carries its index and nothing is returned
    """
    points = []
    for index, char in enumerate(message):
        try:
            points.append(encode_char(char, curve))
        except EncodingError as e:
            raise EncodingError(f"Character {index}: {e}", index=index, char=char) from e
    return points


def points_to_string(points: Sequence[CurvePoint], curve: EllipticCurve = TOY_CURVE) -> str:
    return ''.join(decode_point(point, curve) for point in points)
