"""Shared dict conversion for wire dataclasses."""

from typing import Any, Optional, TypeVar

from ..codec.fields import decode_fields, encode_fields
from ..config.defaults import DEFAULT_CODEC_OPTIONS, CodecOptions

T = TypeVar("T", bound="WireModel")


class WireModel:
    """Mixin giving a wire dataclass ``to_dict`` and ``from_dict``."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return encode_fields(self)

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any], *,
                  options: CodecOptions = DEFAULT_CODEC_OPTIONS,
                  path: Optional[str] = None) -> T:
        """Create from dictionary, applying the codec field rules."""
        return cls(**decode_fields(cls, data, options, path))
