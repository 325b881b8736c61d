"""Events and responses sent from server to client."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..codec.fields import I64, STRING, U64, NestedKind, wire_field
from ..models.payloads import Limits, MarketContext
from .base import MessageFamily, MessageVariant


@dataclass(frozen=True, kw_only=True)
class HelloOk(MessageVariant):
    """Successful handshake response with the effective session limits."""
    TAG: ClassVar[str] = "hello_ok"

    session_id: int = wire_field(U64)
    server_time_ms: int = wire_field(U64)
    limits: Limits = wire_field(NestedKind(Limits))


@dataclass(frozen=True, kw_only=True)
class Pong(MessageVariant):
    """Keepalive pong from server."""
    TAG: ClassVar[str] = "pong"

    server_time_ms: int = wire_field(U64)


@dataclass(frozen=True, kw_only=True)
class Error(MessageVariant):
    """Error response for invalid requests or runtime failures."""
    TAG: ClassVar[str] = "error"

    code: str = wire_field(STRING)                  # Stable, machine-readable
    message: str = wire_field(STRING)


@dataclass(frozen=True, kw_only=True)
class PnlUpdate(MessageVariant):
    """Incremental PnL update for a position."""
    TAG: ClassVar[str] = "pnl_update"

    position_id: int = wire_field(U64)
    profit_units: int = wire_field(I64)             # Quote units, may be negative
    proceeds_units: int = wire_field(U64)
    server_time_ms: int = wire_field(U64)


@dataclass(frozen=True, kw_only=True)
class BalanceUpdate(MessageVariant):
    """Balance update for a tracked wallet/mint."""
    TAG: ClassVar[str] = "balance_update"

    wallet_pubkey: str = wire_field(STRING)
    mint: str = wire_field(STRING)
    token_account: Optional[str] = wire_field(STRING, optional=True)
    token_program: Optional[str] = wire_field(STRING, optional=True)
    tokens: int = wire_field(U64)                   # Native units
    slot: int = wire_field(U64)


@dataclass(frozen=True, kw_only=True)
class PositionOpened(MessageVariant):
    """Notification that a new position has been opened."""
    TAG: ClassVar[str] = "position_opened"

    position_id: int = wire_field(U64)
    wallet_pubkey: str = wire_field(STRING)
    mint: str = wire_field(STRING)
    token_account: str = wire_field(STRING)
    token_program: Optional[str] = wire_field(STRING, optional=True)
    tokens: int = wire_field(U64)
    entry_quote_units: int = wire_field(U64)
    market_context: Optional[MarketContext] = wire_field(NestedKind(MarketContext), optional=True)
    slot: int = wire_field(U64)


@dataclass(frozen=True, kw_only=True)
class PositionClosed(MessageVariant):
    """Notification that a position has been closed."""
    TAG: ClassVar[str] = "position_closed"

    position_id: int = wire_field(U64)
    wallet_pubkey: str = wire_field(STRING)
    mint: str = wire_field(STRING)
    token_account: Optional[str] = wire_field(STRING, optional=True)
    reason: str = wire_field(STRING)
    slot: int = wire_field(U64)


@dataclass(frozen=True, kw_only=True)
class ExitSignalWithTx(MessageVariant):
    """Exit signal carrying a base64-encoded unsigned transaction."""
    TAG: ClassVar[str] = "exit_signal_with_tx"

    session_id: int = wire_field(U64)
    position_id: int = wire_field(U64)
    wallet_pubkey: str = wire_field(STRING)
    mint: str = wire_field(STRING)
    token_account: Optional[str] = wire_field(STRING, optional=True)
    token_program: Optional[str] = wire_field(STRING, optional=True)
    position_tokens: int = wire_field(U64)
    profit_units: int = wire_field(I64)
    reason: str = wire_field(STRING)
    triggered_at_ms: int = wire_field(U64)
    market_context: Optional[MarketContext] = wire_field(NestedKind(MarketContext), optional=True)
    unsigned_tx_b64: str = wire_field(STRING)


ServerMessage = Union[
    HelloOk,
    Pong,
    Error,
    PnlUpdate,
    BalanceUpdate,
    PositionOpened,
    PositionClosed,
    ExitSignalWithTx,
]

SERVER_MESSAGES = MessageFamily("server", [
    HelloOk,
    Pong,
    Error,
    PnlUpdate,
    BalanceUpdate,
    PositionOpened,
    PositionClosed,
    ExitSignalWithTx,
])
