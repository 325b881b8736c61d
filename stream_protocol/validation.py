"""
Business-rule checks for decoded protocol values.

The codec only enforces wire shape. Whether a strategy is sensible or a
market context is consistent is the application's call, so these helpers
report issues instead of raising, and never modify the value they inspect.
"""

import math
from dataclasses import dataclass
from typing import Any

from .messages.client import ClosePosition, Configure, RequestExitSignal, UpdateStrategy
from .messages.server import ExitSignalWithTx, PositionOpened
from .models.payloads import CONTEXT_FIELD_BY_MARKET, MarketContext, StrategyConfig


def _finite_percentage(value: Any) -> bool:
    if not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        return False


@dataclass(frozen=True)
class ValidationIssue:
    """A single business-rule violation."""
    field: str
    message: str
    value: Any


def validate_strategy(strategy: StrategyConfig, path: str = "strategy") -> list[ValidationIssue]:
    """Percentages must be finite and non-negative."""
    issues = []

    for name in ("target_profit_pct", "stop_loss_pct"):
        value = getattr(strategy, name)
        if not _finite_percentage(value):
            issues.append(ValidationIssue(
                field=f"{path}.{name}",
                message="Must be a finite, non-negative percentage",
                value=value
            ))

    return issues


def validate_market_context(context: MarketContext,
                            path: str = "market_context") -> list[ValidationIssue]:
    """Exactly one context must be set and it must match market_type."""
    issues = []

    populated = [name for name in CONTEXT_FIELD_BY_MARKET.values()
                 if getattr(context, name) is not None]
    expected = CONTEXT_FIELD_BY_MARKET.get(context.market_type)

    if expected is not None and expected not in populated:
        issues.append(ValidationIssue(
            field=f"{path}.{expected}",
            message=f"Context for market_type '{context.market_type.value}' is missing",
            value=None
        ))

    for name in populated:
        if name != expected:
            issues.append(ValidationIssue(
                field=f"{path}.{name}",
                message=f"Context does not match market_type '{context.market_type.value}'",
                value=getattr(context, name)
            ))

    return issues


def validate_payload(payload: Any, path: str = "") -> list[ValidationIssue]:
    """Validate a standalone payload value."""
    if isinstance(payload, StrategyConfig):
        return validate_strategy(payload, path or "strategy")
    if isinstance(payload, MarketContext):
        return validate_market_context(payload, path or "market_context")
    return []


def validate_message(message: Any) -> list[ValidationIssue]:
    """
    Validate a client or server message against application invariants.

    Args:
        message: Any protocol message variant

    Returns:
        List of issues, empty if the message is acceptable
    """
    issues: list[ValidationIssue] = []

    if isinstance(message, Configure):
        if not message.wallet_pubkeys:
            issues.append(ValidationIssue(
                field="wallet_pubkeys",
                message="At least one wallet is required",
                value=message.wallet_pubkeys
            ))
        for i, wallet in enumerate(message.wallet_pubkeys):
            if not wallet:
                issues.append(ValidationIssue(
                    field=f"wallet_pubkeys[{i}]",
                    message="Wallet pubkey must be non-empty",
                    value=wallet
                ))
        issues.extend(validate_strategy(message.strategy))

    elif isinstance(message, UpdateStrategy):
        issues.extend(validate_strategy(message.strategy))

    elif isinstance(message, (ClosePosition, RequestExitSignal)):
        if message.position_id is None and message.token_account is None:
            issues.append(ValidationIssue(
                field="position_id",
                message="Either position_id or token_account is required",
                value=None
            ))

    elif isinstance(message, (PositionOpened, ExitSignalWithTx)):
        if message.market_context is not None:
            issues.extend(validate_market_context(message.market_context))

    return issues
