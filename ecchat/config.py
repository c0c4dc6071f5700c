"""
Runtime configuration for ecchat.

Values come from the environment (optionally a .env file). Defaults give
the built-in toy curve and INFO logging.

The ECCHAT_CURVE_* variables only take effect through load_curve(); the
crypto functions and ChatSession default to TOY_CURVE unless given a curve.
"""

import logging
import os

from dotenv import load_dotenv

from ecchat.common.exceptions import ConfigurationError, DomainParameterError
from ecchat.crypto.curve import EllipticCurve, Point, TOY_CURVE

load_dotenv()

CURVE_ENV_KEYS = (
    'ECCHAT_CURVE_P',
    'ECCHAT_CURVE_A',
    'ECCHAT_CURVE_B',
    'ECCHAT_CURVE_GX',
    'ECCHAT_CURVE_GY',
    'ECCHAT_CURVE_N',
)


def read_positive_int(key: str, default: int) -> int:
    """
    Read an integer setting that must be at least 1.

    Raises:
        ConfigurationError: If the value is not an integer or is below 1
    """
    raw = os.getenv(key, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigurationError(f"{key} must be at least 1, got {value}")
    return value


MAX_EPHEMERAL_ATTEMPTS = read_positive_int('ECCHAT_MAX_EPHEMERAL_ATTEMPTS', 64)

LOG_LEVEL = getattr(logging, os.getenv('ECCHAT_LOG_LEVEL', 'INFO').upper(), logging.INFO)


def load_curve() -> EllipticCurve:
    """
    Build the domain parameters from ECCHAT_CURVE_* variables.

    Either all of P, A, B, GX, GY, N are set or none of them are.

    Returns:
        Validated EllipticCurve (TOY_CURVE when nothing is configured)

    Raises:
        DomainParameterError: If the variables are incomplete, not integers,
            or describe an invalid curve
    """
    raw = {key: os.getenv(key) for key in CURVE_ENV_KEYS}
    present = [key for key, value in raw.items() if value not in (None, '')]

    if not present:
        return TOY_CURVE

    missing = [key for key in CURVE_ENV_KEYS if key not in present]
    if missing:
        raise DomainParameterError(f"Incomplete curve configuration, missing: {', '.join(missing)}")

    try:
        p, a, b, gx, gy, n = (int(raw[key], 0) for key in CURVE_ENV_KEYS)
    except ValueError as e:
        raise DomainParameterError(f"Curve parameters must be integers: {e}")

    return EllipticCurve(
        p=p, a=a, b=b, g=Point(gx, gy), n=n,
        name=os.getenv('ECCHAT_CURVE_NAME', 'custom'),
    )
