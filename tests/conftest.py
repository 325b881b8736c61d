"""Pytest configuration and shared fixtures."""

import pytest

from stream_protocol.messages.client import Configure
from stream_protocol.messages.server import ExitSignalWithTx, HelloOk
from stream_protocol.models.payloads import (
    Limits,
    MarketContext,
    MarketType,
    RaydiumCpmmContext,
    StrategyConfig,
)

ADDR_1 = "11111111111111111111111111111111"
ADDR_2 = "22222222222222222222222222222222"
ADDR_3 = "33333333333333333333333333333333"
ADDR_4 = "44444444444444444444444444444444"
ADDR_5 = "55555555555555555555555555555555"


@pytest.fixture
def strategy() -> StrategyConfig:
    """Strategy thresholds used across client message tests."""
    return StrategyConfig(target_profit_pct=5.0, stop_loss_pct=1.5, deadline_timeout_sec=45)


@pytest.fixture
def limits() -> Limits:
    """Fully populated session limits."""
    return Limits(
        hi_capacity=256,
        pnl_flush_ms=100,
        max_positions_per_session=256,
        max_wallets_per_session=8,
        max_positions_per_wallet=64,
        max_sessions_per_api_key=1,
    )


@pytest.fixture
def cpmm_context() -> MarketContext:
    """Raydium CPMM market context with its matching payload set."""
    return MarketContext(
        market_type=MarketType.RAYDIUM_CPMM,
        raydium_cpmm=RaydiumCpmmContext(
            pool=ADDR_1,
            config=ADDR_2,
            quote_mint=ADDR_3,
            user_quote_account=ADDR_4,
        ),
    )


@pytest.fixture
def configure_message(strategy) -> Configure:
    """Two-wallet configure command."""
    return Configure(wallet_pubkeys=(ADDR_1, ADDR_2), strategy=strategy)


@pytest.fixture
def hello_ok_message(limits) -> HelloOk:
    """Handshake response."""
    return HelloOk(session_id=42, server_time_ms=1700000000000, limits=limits)


@pytest.fixture
def exit_signal_message(cpmm_context) -> ExitSignalWithTx:
    """Exit signal with market context and one optional field left unset."""
    return ExitSignalWithTx(
        session_id=7,
        position_id=8,
        wallet_pubkey=ADDR_5,
        mint=ADDR_1,
        token_account=ADDR_2,
        token_program=None,
        position_tokens=10,
        profit_units=5,
        reason="tp",
        triggered_at_ms=123,
        market_context=cpmm_context,
        unsigned_tx_b64="dGVzdA==",
    )
