"""
Decode error classifications for inbound wire text.

A decoder either returns a complete message or raises exactly one of these.
The ``kind`` attribute is a stable string suitable for logs and metrics labels.
"""

from typing import Any, Optional

from .protocol import ProtocolError


class DecodeError(ProtocolError):
    """Base class for wire text that cannot be decoded into a message."""

    kind = "decode_error"

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class MalformedTextError(DecodeError):
    """Input is not well-formed UTF-8 JSON."""

    kind = "malformed_text"

    def __init__(self, message: str, raw_text: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        # Keep enough of the input to identify it in logs
        self.raw_text = raw_text[:200] if raw_text is not None else None


class UnknownVariantError(DecodeError):
    """Discriminator does not name any variant of the target message family."""

    kind = "unknown_variant"

    def __init__(self, message: str, tag: Any = None,
                 family: Optional[str] = None, **kwargs):
        super().__init__(message, path="type", **kwargs)
        self.tag = tag
        self.family = family


class MissingFieldError(DecodeError):
    """A required field of the matched variant is absent."""

    kind = "missing_field"

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name


class TypeMismatchError(DecodeError):
    """A present field does not conform to its declared wire type."""

    kind = "type_mismatch"

    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = type(actual).__name__ if actual is not None else "null"
