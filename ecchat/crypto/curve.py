"""
Elliptic Curve Group

Short Weierstrass curve y^2 = x^3 + a*x + b over Z_p.

Points are either an affine Point(x, y) or the Identity (point at infinity).
All group operations take the curve explicitly, so several curves can be
used side by side.
"""

from dataclasses import dataclass
from typing import Union

from ecchat.common.exceptions import DomainParameterError, InvalidScalarError
from ecchat.crypto.field import mod, mod_inverse


@dataclass(frozen=True)
class Point:
    """Affine point with coordinates in [0, p)."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Identity:
    """Point at infinity, the neutral element of the group."""

    def __str__(self) -> str:
        return "O"


INFINITY = Identity()

CurvePoint = Union[Point, Identity]


@dataclass(frozen=True)
class EllipticCurve:
    """
    Domain parameters (p, a, b, G, n).

    Validated on construction: the curve must be non-singular, G must lie
    on it, and n*G must be the identity.
    """
    p: int
    a: int
    b: int
    g: Point
    n: int
    name: str = "custom"

    def __post_init__(self):
        if self.p <= 3:
            raise DomainParameterError(f"Field prime must be greater than 3, got {self.p}")
        if mod(4 * self.a ** 3 + 27 * self.b ** 2, self.p) == 0:
            raise DomainParameterError("Curve is singular (4a^3 + 27b^2 = 0 mod p)")
        if not isinstance(self.g, Point):
            raise DomainParameterError("Generator must be an affine point")
        if not (0 <= self.g.x < self.p and 0 <= self.g.y < self.p):
            raise DomainParameterError(f"Generator {self.g} has coordinates outside [0, {self.p})")
        if not self.is_on_curve(self.g):
            raise DomainParameterError(
                f"Generator {self.g} does not satisfy y^2 = x^3 + {self.a}x + {self.b} mod {self.p}"
            )
        if self.n <= 1:
            raise DomainParameterError(f"Group order must be greater than 1, got {self.n}")
        if point_multiply(self.n, self.g, self) != INFINITY:
            raise DomainParameterError(f"{self.n} is not the order of generator {self.g}")

    def is_on_curve(self, point: CurvePoint) -> bool:
        """Check y^2 = x^3 + a*x + b (mod p). The identity is always on the curve."""
        if isinstance(point, Identity):
            return True
        lhs = mod(point.y * point.y, self.p)
        rhs = mod(point.x ** 3 + self.a * point.x + self.b, self.p)
        return lhs == rhs

    def contains(self, point: CurvePoint) -> bool:
        """True if point is the identity, or affine with reduced coordinates and on the curve."""
        if isinstance(point, Identity):
            return True
        if not (0 <= point.x < self.p and 0 <= point.y < self.p):
            return False
        return self.is_on_curve(point)


def is_on_curve(point: CurvePoint, curve: EllipticCurve) -> bool:
    return curve.is_on_curve(point)


def point_negate(point: CurvePoint, curve: EllipticCurve) -> CurvePoint:
    """Return -P = (x, -y mod p)."""
    if isinstance(point, Identity):
        return INFINITY
    return Point(point.x, mod(-point.y, curve.p))


def point_add(p1: CurvePoint, p2: CurvePoint, curve: EllipticCurve) -> CurvePoint:
    """
    Add two points.

    Args:
        p1: First point
        p2: Second point
        curve: Domain parameters

    Returns:
        p1 + p2
    """
    if isinstance(p1, Identity):
        return p2
    if isinstance(p2, Identity):
        return p1

    if p1.x == p2.x and p1.y != p2.y:
        # Additive inverses
        return INFINITY

    if p1 == p2:
        return point_double(p1, curve)

    slope = mod((p2.y - p1.y) * mod_inverse(p2.x - p1.x, curve.p), curve.p)
    return _chord_result(p1, p2, slope, curve)


def point_double(point: CurvePoint, curve: EllipticCurve) -> CurvePoint:
    """
    Double a point using the tangent slope.

    A point with y == 0 has order 2, so its double is the identity.
    """
    if isinstance(point, Identity):
        return INFINITY
    if point.y == 0:
        return INFINITY

    slope = mod((3 * point.x * point.x + curve.a) * mod_inverse(2 * point.y, curve.p), curve.p)
    return _chord_result(point, point, slope, curve)


def _chord_result(p1: Point, p2: Point, slope: int, curve: EllipticCurve) -> Point:
    x3 = mod(slope * slope - p1.x - p2.x, curve.p)
    y3 = mod(slope * (p1.x - x3) - p1.y, curve.p)
    return Point(x3, y3)


def point_multiply(k: int, point: CurvePoint, curve: EllipticCurve) -> CurvePoint:
    """
    Scalar multiplication k*P by double-and-add.

    Bits of k are consumed from least to most significant.

    Args:
        k: Non-negative scalar
        point: Point to multiply
        curve: Domain parameters

    Returns:
        k*P (the identity when k == 0)

    Raises:
        InvalidScalarError: If k is negative or not an integer
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidScalarError(f"Scalar must be an integer, got {type(k).__name__}")
    if k < 0:
        raise InvalidScalarError(f"Scalar must be non-negative, got {k}")

    result = INFINITY
    addend = point

    while k:
        if k & 1:
            result = point_add(result, addend, curve)
        addend = point_double(addend, curve)
        k >>= 1

    return result


# Domain parameters used by default.
# p = 97 matches the codec alphabet offset. G lies on the curve and
# generates the whole group, which has prime order 89.
TOY_CURVE = EllipticCurve(p=97, a=1, b=15, g=Point(2, 5), n=89, name="toy97")
