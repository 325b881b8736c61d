"""
Error classification for protocol encoding, decoding and configuration.

Every failure raised by this package derives from ProtocolError. Decode
failures are further split into the four kinds a consumer needs to reject
bad input without ambiguity.
"""

from .decode import (
    DecodeError,
    MalformedTextError,
    MissingFieldError,
    TypeMismatchError,
    UnknownVariantError,
)
from .protocol import (
    ConfigurationError,
    EncodeError,
    ProtocolError,
)

__all__ = [
    # Base
    "ProtocolError",
    # Decode failures
    "DecodeError",
    "MalformedTextError",
    "UnknownVariantError",
    "MissingFieldError",
    "TypeMismatchError",
    # Encode and configuration failures
    "EncodeError",
    "ConfigurationError",
]
