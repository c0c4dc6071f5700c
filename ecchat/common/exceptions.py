"""
Custom exceptions for ecchat.
"""


class EcChatException(Exception):
    """Base exception for ecchat errors."""
    pass


class ArithmeticPreconditionError(EcChatException):
    """A field operation was called outside its domain (e.g. no inverse exists)."""
    pass


class InvalidScalarError(EcChatException):
    """Scalar multiplication with a negative or non-integer scalar."""
    pass


class DomainParameterError(EcChatException):
    """Curve parameters are inconsistent."""
    pass


class InvalidKeyError(EcChatException):
    """Private key out of range or public key not a valid group element."""
    pass


class EncodingError(EcChatException):
    """Message character not encodable as a curve point."""

    def __init__(self, message: str, index: int = None, char: str = None):
        super().__init__(message)
        self.index = index
        self.char = char


class DecodingError(EcChatException):
    """Point does not map back to a character."""
    pass


class EncryptionError(EcChatException):
    """Encryption failed."""
    pass


class DecryptionError(EcChatException):
    """Decryption of a ciphertext pair failed."""

    def __init__(self, message: str, index: int = None):
        super().__init__(message)
        self.index = index


class ProtocolError(EcChatException):
    """Malformed wire payload."""
    pass


class ConfigurationError(EcChatException):
    """Invalid runtime configuration value."""
    pass
