"""
Payload data models module.

Immutable value types carried inside client and server messages.
Follows value semantics with frozen dataclasses: no identity, structural equality.
"""

from .payloads import (
    Limits,
    MarketContext,
    MarketType,
    MeteoraDammV2Context,
    MeteoraDbcContext,
    PumpFunContext,
    PumpSwapContext,
    RaydiumCpmmContext,
    RaydiumLaunchpadContext,
    StrategyConfig,
)

__all__ = [
    "MarketType",
    "PumpFunContext",
    "PumpSwapContext",
    "MeteoraDbcContext",
    "MeteoraDammV2Context",
    "RaydiumLaunchpadContext",
    "RaydiumCpmmContext",
    "MarketContext",
    "StrategyConfig",
    "Limits",
]
