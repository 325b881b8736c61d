"""
JSON wire codec shared by both message families.

Wire text is a compact UTF-8 JSON object: the ``type`` discriminator first,
then the variant's fields in declared order. orjson writes floats in their
shortest round-trip form, so every finite double survives encode/decode
unchanged.
"""

from dataclasses import dataclass, field
from typing import Any

import orjson

from ..config.defaults import CodecOptions
from ..errors import DecodeError, EncodeError, MalformedTextError
from ..logging import get_codec_logger, log_decode_failure
from ..messages.base import MessageFamily, MessageVariant
from ..messages.client import CLIENT_MESSAGES, ClientMessage
from ..messages.server import SERVER_MESSAGES, ServerMessage

logger = get_codec_logger(__name__)


def parse_text(text: str | bytes) -> Any:
    """
    Parse wire text into plain JSON values.

    Args:
        text: One complete framed message, as str or UTF-8 bytes

    Returns:
        Parsed JSON value

    Raises:
        MalformedTextError: If the text is not valid UTF-8 JSON
    """
    if not isinstance(text, (str, bytes, bytearray, memoryview)):
        raise MalformedTextError(
            f"Wire text must be str or bytes, got {type(text).__name__}"
        )
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raw = text if isinstance(text, str) else bytes(text).decode("utf-8", "replace")
        raise MalformedTextError(f"Invalid JSON: {e}", raw_text=raw) from e


@dataclass(frozen=True)
class ProtocolCodec:
    """Encoder/decoder for both message families with bound options."""

    options: CodecOptions = field(default_factory=CodecOptions)

    def encode_bytes(self, message: MessageVariant) -> bytes:
        """
        Encode a message into UTF-8 wire bytes.

        Raises:
            EncodeError: If the value holds something the wire cannot carry
        """
        if not isinstance(message, MessageVariant):
            raise EncodeError(f"Cannot encode {type(message).__name__}: not a protocol message",
                              value=message)
        payload = message.to_dict()
        try:
            return orjson.dumps(payload)
        except orjson.JSONEncodeError as e:
            raise EncodeError(f"Cannot encode {message.TAG} message: {e}", value=message) from e

    def encode(self, message: MessageVariant) -> str:
        """Encode a message into wire text."""
        return self.encode_bytes(message).decode("utf-8")

    def decode(self, family: MessageFamily, text: str | bytes) -> MessageVariant:
        """
        Decode wire text into a variant of the given family.

        Raises:
            MalformedTextError: Text is not well-formed JSON
            UnknownVariantError: Discriminator is not a tag of this family
            MissingFieldError: A required field is absent
            TypeMismatchError: A field value has the wrong wire type
        """
        try:
            return family.from_dict(parse_text(text), self.options)
        except DecodeError as e:
            log_decode_failure(logger, family.name, e)
            raise

    def decode_client_message(self, text: str | bytes) -> ClientMessage:
        """Decode a client command."""
        return self.decode(CLIENT_MESSAGES, text)

    def decode_server_message(self, text: str | bytes) -> ServerMessage:
        """Decode a server event."""
        return self.decode(SERVER_MESSAGES, text)


# Default codec instance
default_codec = ProtocolCodec()


def encode(message: MessageVariant) -> str:
    """Convenience function to encode a message with default options."""
    return default_codec.encode(message)


def encode_bytes(message: MessageVariant) -> bytes:
    """Convenience function to encode a message to bytes with default options."""
    return default_codec.encode_bytes(message)


def decode_client_message(text: str | bytes) -> ClientMessage:
    """Convenience function to decode a client command with default options."""
    return default_codec.decode_client_message(text)


def decode_server_message(text: str | bytes) -> ServerMessage:
    """Convenience function to decode a server event with default options."""
    return default_codec.decode_server_message(text)
