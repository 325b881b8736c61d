"""
Stream Protocol - Shared message models for trading-stream clients and servers

Defines the commands a client may send, the events a server may emit, the
payload types they carry, and the JSON codec both ends of the wire use.
"""

from .codec.json_codec import (
    ProtocolCodec,
    decode_client_message,
    decode_server_message,
    encode,
    encode_bytes,
)
from .errors import (
    DecodeError,
    EncodeError,
    MalformedTextError,
    MissingFieldError,
    ProtocolError,
    TypeMismatchError,
    UnknownVariantError,
)
from .messages.client import CLIENT_MESSAGES, ClientMessage
from .messages.server import SERVER_MESSAGES, ServerMessage

__version__ = "0.1.0"
__author__ = "Stream Protocol Team"

__all__ = [
    "ProtocolCodec",
    "encode",
    "encode_bytes",
    "decode_client_message",
    "decode_server_message",
    "ClientMessage",
    "ServerMessage",
    "CLIENT_MESSAGES",
    "SERVER_MESSAGES",
    "ProtocolError",
    "DecodeError",
    "EncodeError",
    "MalformedTextError",
    "UnknownVariantError",
    "MissingFieldError",
    "TypeMismatchError",
]
