"""
Payload types carried by protocol messages.

Market contexts describe the on-chain accounts of the market a position was
opened in. StrategyConfig and Limits carry client thresholds and
server-enforced session limits. Construction never validates; see
stream_protocol.validation for business-rule checks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..codec.fields import F64, STRING, U32, U64, EnumKind, NestedKind, wire_field
from .base import WireModel


class MarketType(str, Enum):
    """Supported market types for an opened position."""
    PUMP_FUN = "pump_fun"
    PUMP_SWAP = "pump_swap"
    METEORA_DBC = "meteora_dbc"
    METEORA_DAMM_V2 = "meteora_damm_v2"
    RAYDIUM_LAUNCHPAD = "raydium_launchpad"
    RAYDIUM_CPMM = "raydium_cpmm"


@dataclass(frozen=True)
class PumpFunContext(WireModel):
    """Context for pump.fun markets; currently an explicit empty marker."""


@dataclass(frozen=True)
class PumpSwapContext(WireModel):
    """Context for PumpSwap markets."""
    pool: str = wire_field(STRING)
    global_config: Optional[str] = wire_field(STRING, optional=True)


@dataclass(frozen=True)
class MeteoraDbcContext(WireModel):
    """Context for Meteora Dynamic Bonding Curve markets."""
    pool: str = wire_field(STRING)
    config: str = wire_field(STRING)
    quote_mint: str = wire_field(STRING)


@dataclass(frozen=True)
class MeteoraDammV2Context(WireModel):
    """Context for Meteora DAMM v2 markets."""
    pool: str = wire_field(STRING)


@dataclass(frozen=True)
class RaydiumLaunchpadContext(WireModel):
    """Context for Raydium Launchpad markets."""
    pool: str = wire_field(STRING)
    config: str = wire_field(STRING)
    platform: str = wire_field(STRING)
    quote_mint: str = wire_field(STRING)
    user_quote_account: str = wire_field(STRING)    # User's quote token account


@dataclass(frozen=True)
class RaydiumCpmmContext(WireModel):
    """Context for Raydium CPMM markets."""
    pool: str = wire_field(STRING)
    config: str = wire_field(STRING)
    quote_mint: str = wire_field(STRING)
    user_quote_account: str = wire_field(STRING)


# market_type value -> MarketContext attribute holding its context
CONTEXT_FIELD_BY_MARKET = {
    MarketType.PUMP_FUN: "pumpfun",
    MarketType.PUMP_SWAP: "pumpswap",
    MarketType.METEORA_DBC: "meteora_dbc",
    MarketType.METEORA_DAMM_V2: "meteora_damm_v2",
    MarketType.RAYDIUM_LAUNCHPAD: "raydium_launchpad",
    MarketType.RAYDIUM_CPMM: "raydium_cpmm",
}


@dataclass(frozen=True)
class MarketContext(WireModel):
    """
    Market-specific context carried with position events.

    Exactly one context field should be set, the one matching market_type.
    """
    market_type: MarketType = wire_field(EnumKind(MarketType))
    pumpfun: Optional[PumpFunContext] = wire_field(NestedKind(PumpFunContext), optional=True)
    pumpswap: Optional[PumpSwapContext] = wire_field(NestedKind(PumpSwapContext), optional=True)
    meteora_dbc: Optional[MeteoraDbcContext] = wire_field(
        NestedKind(MeteoraDbcContext), optional=True)
    meteora_damm_v2: Optional[MeteoraDammV2Context] = wire_field(
        NestedKind(MeteoraDammV2Context), optional=True)
    raydium_launchpad: Optional[RaydiumLaunchpadContext] = wire_field(
        NestedKind(RaydiumLaunchpadContext), optional=True)
    raydium_cpmm: Optional[RaydiumCpmmContext] = wire_field(
        NestedKind(RaydiumCpmmContext), optional=True)

    @property
    def active_context(self) -> Optional[WireModel]:
        """Context payload matching market_type, None if it is not set."""
        return getattr(self, CONTEXT_FIELD_BY_MARKET[self.market_type])


@dataclass(frozen=True)
class StrategyConfig(WireModel):
    """Client-side strategy thresholds used for automated exits."""
    target_profit_pct: float = wire_field(F64)      # 5.0 means 5%
    stop_loss_pct: float = wire_field(F64)
    deadline_timeout_sec: int = wire_field(U64)     # Outbound tx deadline


@dataclass(frozen=True)
class Limits(WireModel):
    """Server-enforced per-session and per-key limits."""
    hi_capacity: int = wire_field(U32)              # High-priority position slots
    pnl_flush_ms: int = wire_field(U64)             # PnL push cadence
    max_positions_per_session: int = wire_field(U32)

    # Added after the first protocol release; older servers omit them
    max_wallets_per_session: int = wire_field(U32, default=0)
    max_positions_per_wallet: int = wire_field(U32, default=0)
    max_sessions_per_api_key: int = wire_field(U32, default=0)
