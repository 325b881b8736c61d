"""
Client and server message unions.

Each union is a closed set of frozen dataclass variants registered in a
MessageFamily; the two families share no tags.
"""

from .base import TAG_KEY, MessageFamily, MessageVariant
from .client import (
    CLIENT_MESSAGES,
    ClientMessage,
    ClosePosition,
    Configure,
    Ping,
    RequestExitSignal,
    UpdateStrategy,
)
from .dispatch import MessageDispatcher
from .server import (
    SERVER_MESSAGES,
    BalanceUpdate,
    Error,
    ExitSignalWithTx,
    HelloOk,
    PnlUpdate,
    Pong,
    PositionClosed,
    PositionOpened,
    ServerMessage,
)

__all__ = [
    "TAG_KEY",
    "MessageFamily",
    "MessageVariant",
    "MessageDispatcher",
    # Client
    "ClientMessage",
    "CLIENT_MESSAGES",
    "Ping",
    "Configure",
    "UpdateStrategy",
    "ClosePosition",
    "RequestExitSignal",
    # Server
    "ServerMessage",
    "SERVER_MESSAGES",
    "HelloOk",
    "Pong",
    "Error",
    "PnlUpdate",
    "BalanceUpdate",
    "PositionOpened",
    "PositionClosed",
    "ExitSignalWithTx",
]
