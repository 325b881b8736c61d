"""
Base protocol error classifications.

These exceptions cover failures that are not tied to parsing wire text:
values that cannot be represented on the wire and unusable configuration.
"""

from typing import Any, Optional


class ProtocolError(Exception):
    """Base class for all errors raised by the protocol package."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class EncodeError(ProtocolError):
    """A constructed value cannot be represented on the wire."""

    def __init__(self, message: str, field_path: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_path = field_path
        self.value = value
        self.recoverable = False


class ConfigurationError(ProtocolError):
    """Protocol configuration file is unreadable or invalid."""

    def __init__(self, message: str, source: Optional[str] = None,
                 errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.errors = errors or []
        self.recoverable = False
