"""
Common utilities and exceptions for ecchat.

Wire models live in ecchat.common.protocol, which depends on the crypto
package and is imported explicitly.
"""

from .utils import now_ms, random_scalar, setup_logger
from .exceptions import *

__all__ = [
    'now_ms',
    'random_scalar',
    'setup_logger',
]
