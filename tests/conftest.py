import pytest

from ecchat.crypto import EllipticCurve, Point, TOY_CURVE, generate_keypair


@pytest.fixture
def curve():
    return TOY_CURVE


@pytest.fixture
def keypair(curve):
    return generate_keypair(curve)


@pytest.fixture
def wide_curve():
    """Prime-order curve over F_257, wide enough to hold every code below 257 unreduced."""
    return EllipticCurve(p=257, a=1, b=7, g=Point(1, 3), n=281, name="wide257")


@pytest.fixture
def two_torsion_curve():
    """y^2 = x^3 + x over F_97, generated by the order-2 point (0, 0)."""
    return EllipticCurve(p=97, a=1, b=0, g=Point(0, 0), n=2, name="two-torsion")
