"""Commands sent from client to server."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..codec.fields import STRING, U16, U64, NestedKind, StringListKind, wire_field
from ..models.payloads import StrategyConfig
from .base import MessageFamily, MessageVariant


@dataclass(frozen=True, kw_only=True)
class Ping(MessageVariant):
    """Keepalive ping from client."""
    TAG: ClassVar[str] = "ping"

    client_time_ms: int = wire_field(U64)           # Unix milliseconds


@dataclass(frozen=True, kw_only=True)
class Configure(MessageVariant):
    """
    Initial session configuration for wallets and strategy.

    Wallet order is preserved end to end. Legacy producers send a single
    ``wallet_pubkey`` string, which decodes as a one-element tuple and
    re-encodes under the canonical ``wallet_pubkeys`` name.
    """
    TAG: ClassVar[str] = "configure"

    wallet_pubkeys: tuple[str, ...] = wire_field(
        StringListKind(accept_single=True), aliases=("wallet_pubkey",))
    strategy: StrategyConfig = wire_field(NestedKind(StrategyConfig))

    def __post_init__(self):
        """Normalize wallet_pubkeys to a tuple so equality ignores list vs tuple."""
        wallets = self.wallet_pubkeys
        if isinstance(wallets, str):
            wallets = (wallets,)
        object.__setattr__(self, "wallet_pubkeys", tuple(wallets))


@dataclass(frozen=True, kw_only=True)
class UpdateStrategy(MessageVariant):
    """Update strategy thresholds for an active session."""
    TAG: ClassVar[str] = "update_strategy"

    strategy: StrategyConfig = wire_field(NestedKind(StrategyConfig))


@dataclass(frozen=True, kw_only=True)
class ClosePosition(MessageVariant):
    """Request that a tracked position be closed."""
    TAG: ClassVar[str] = "close_position"

    position_id: Optional[int] = wire_field(U64, optional=True)
    token_account: Optional[str] = wire_field(STRING, optional=True)  # Lookup key when id unknown


@dataclass(frozen=True, kw_only=True)
class RequestExitSignal(MessageVariant):
    """Request an immediate exit signal and unsigned transaction."""
    TAG: ClassVar[str] = "request_exit_signal"
    LEGACY_TAGS: ClassVar[tuple[str, ...]] = ("sell_now",)

    position_id: Optional[int] = wire_field(U64, optional=True)
    token_account: Optional[str] = wire_field(STRING, optional=True)
    slippage_bps: Optional[int] = wire_field(U16, optional=True)      # Basis points


ClientMessage = Union[Ping, Configure, UpdateStrategy, ClosePosition, RequestExitSignal]

CLIENT_MESSAGES = MessageFamily("client", [
    Ping,
    Configure,
    UpdateStrategy,
    ClosePosition,
    RequestExitSignal,
])
