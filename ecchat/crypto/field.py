"""
Prime Field Arithmetic

Normalized reduction and modular inversion used by the curve group law.
"""

from ecchat.common.exceptions import ArithmeticPreconditionError


def mod(value: int, modulus: int) -> int:
    """
    Reduce value into [0, modulus).

    Every subtraction in the group law goes through here so that no
    negative remainder ever becomes a coordinate.

    Args:
        value: Integer to reduce (may be negative)
        modulus: Positive modulus

    Returns:
        value mod modulus, in [0, modulus)

    Raises:
        ArithmeticPreconditionError: If modulus is not positive
    """
    if modulus <= 0:
        raise ArithmeticPreconditionError(f"Modulus must be positive, got {modulus}")
    return value % modulus


def mod_inverse(a: int, m: int) -> int:
    """
    Compute the inverse of a modulo m with the iterative extended Euclidean algorithm.

    Args:
        a: Element to invert
        m: Modulus

    Returns:
        r in [0, m) such that (a * r) % m == 1

    Raises:
        ArithmeticPreconditionError: If a is not coprime to m
    """
    if m <= 1:
        raise ArithmeticPreconditionError(f"Modulus must be greater than 1, got {m}")

    low_coeff, high_coeff = 1, 0
    low, high = mod(a, m), m

    while low > 1:
        ratio = high // low
        low_coeff, high_coeff = high_coeff - low_coeff * ratio, low_coeff
        low, high = high - low * ratio, low

    if low != 1:
        raise ArithmeticPreconditionError(f"{a} has no inverse modulo {m}")

    return mod(low_coeff, m)


# Test function for development
if __name__ == "__main__":
    print("[*] Testing field arithmetic")

    p = 97
    for value in (1, 3, 10, 96, -5):
        inv = mod_inverse(value, p)
        print(f"    {value}^-1 mod {p} = {inv}")
        assert mod(value * inv, p) == 1

    try:
        mod_inverse(0, p)
    except ArithmeticPreconditionError as e:
        print(f"    0 rejected: {e}")

    print("\n[✓] Field arithmetic test passed!")
