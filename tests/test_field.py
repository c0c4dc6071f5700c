import pytest

from ecchat.common.exceptions import ArithmeticPreconditionError
from ecchat.crypto.field import mod, mod_inverse


def test_mod_normalizes_negative_values():
    assert mod(-1, 97) == 96
    assert mod(-97, 97) == 0
    assert mod(-195, 97) == 96
    assert mod(200, 97) == 6


def test_mod_rejects_non_positive_modulus():
    with pytest.raises(ArithmeticPreconditionError):
        mod(5, 0)
    with pytest.raises(ArithmeticPreconditionError):
        mod(5, -7)


def test_mod_inverse_known_values():
    assert mod_inverse(3, 97) == 65
    assert mod_inverse(10, 97) == 68
    assert mod_inverse(1, 97) == 1
    assert mod_inverse(96, 97) == 96


def test_mod_inverse_every_nonzero_residue():
    for a in range(1, 97):
        r = mod_inverse(a, 97)
        assert 0 <= r < 97
        assert (a * r) % 97 == 1


def test_mod_inverse_normalizes_negative_input():
    r = mod_inverse(-5, 97)
    assert 0 <= r < 97
    assert (-5 * r) % 97 == 1


def test_mod_inverse_composite_modulus():
    assert mod_inverse(7, 40) == 23


def test_mod_inverse_not_coprime():
    with pytest.raises(ArithmeticPreconditionError):
        mod_inverse(6, 9)
    with pytest.raises(ArithmeticPreconditionError):
        mod_inverse(0, 97)
    with pytest.raises(ArithmeticPreconditionError):
        mod_inverse(194, 97)


def test_mod_inverse_rejects_trivial_modulus():
    with pytest.raises(ArithmeticPreconditionError):
        mod_inverse(3, 1)
