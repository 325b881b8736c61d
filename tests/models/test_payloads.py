"""Tests for payload dataclasses and their dict conversion."""

import pytest

from stream_protocol.errors import MissingFieldError, TypeMismatchError
from stream_protocol.models.payloads import (
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

POOL = "11111111111111111111111111111111"
CONFIG = "22222222222222222222222222222222"
MINT = "33333333333333333333333333333333"
PLATFORM = "44444444444444444444444444444444"
USER_QUOTE = "55555555555555555555555555555555"


class TestStrategyConfig:
    """Test strategy thresholds payload."""

    def test_to_dict_preserves_field_order(self, strategy) -> None:
        """Test fields are emitted in declared order."""
        assert list(strategy.to_dict()) == [
            "target_profit_pct", "stop_loss_pct", "deadline_timeout_sec"
        ]

    def test_structural_equality(self) -> None:
        """Test equal field values compare equal."""
        a = StrategyConfig(target_profit_pct=5.0, stop_loss_pct=1.5, deadline_timeout_sec=45)
        b = StrategyConfig(target_profit_pct=5.0, stop_loss_pct=1.5, deadline_timeout_sec=45)
        assert a == b
        assert hash(a) == hash(b)

    def test_construction_does_not_validate(self) -> None:
        """Test out-of-range business values are still constructible."""
        config = StrategyConfig(target_profit_pct=-1.0, stop_loss_pct=500.0, deadline_timeout_sec=0)
        assert config.target_profit_pct == -1.0

    def test_integer_percentage_widens_to_float(self) -> None:
        """Test a JSON integer is accepted for an f64 field."""
        config = StrategyConfig.from_dict(
            {"target_profit_pct": 5, "stop_loss_pct": 1, "deadline_timeout_sec": 45}
        )
        assert config.target_profit_pct == 5.0
        assert isinstance(config.target_profit_pct, float)

    def test_string_percentage_rejected(self) -> None:
        """Test a numeric string is never coerced."""
        with pytest.raises(TypeMismatchError) as exc_info:
            StrategyConfig.from_dict(
                {"target_profit_pct": "5.0", "stop_loss_pct": 1.5, "deadline_timeout_sec": 45}
            )
        assert exc_info.value.path == "target_profit_pct"
        assert exc_info.value.expected == "f64"
        assert exc_info.value.actual == "str"

    def test_float_deadline_rejected(self) -> None:
        """Test a float is not accepted for an integer field."""
        with pytest.raises(TypeMismatchError, match="deadline_timeout_sec"):
            StrategyConfig.from_dict(
                {"target_profit_pct": 5.0, "stop_loss_pct": 1.5, "deadline_timeout_sec": 45.0}
            )

    def test_missing_field(self) -> None:
        """Test absence of a required field is an error, not a default."""
        with pytest.raises(MissingFieldError) as exc_info:
            StrategyConfig.from_dict({"target_profit_pct": 5.0, "deadline_timeout_sec": 45})
        assert exc_info.value.field_name == "stop_loss_pct"


class TestLimits:
    """Test server limits payload."""

    def test_round_trip(self, limits) -> None:
        """Test dict conversion round trip."""
        assert Limits.from_dict(limits.to_dict()) == limits

    def test_late_added_fields_default_to_zero(self) -> None:
        """Test fields absent from older servers fall back to their schema default."""
        decoded = Limits.from_dict(
            {"hi_capacity": 256, "pnl_flush_ms": 100, "max_positions_per_session": 256}
        )
        assert decoded.max_wallets_per_session == 0
        assert decoded.max_positions_per_wallet == 0
        assert decoded.max_sessions_per_api_key == 0

    def test_first_three_fields_still_required(self) -> None:
        """Test schema defaults do not extend to the first three fields."""
        with pytest.raises(MissingFieldError, match="pnl_flush_ms"):
            Limits.from_dict({"hi_capacity": 256, "max_positions_per_session": 256})

    def test_defaulted_fields_always_encoded(self) -> None:
        """Test defaulted fields are written even when zero."""
        encoded = Limits(hi_capacity=1, pnl_flush_ms=2, max_positions_per_session=3).to_dict()
        assert encoded["max_wallets_per_session"] == 0

    def test_u32_overflow_rejected(self) -> None:
        """Test u32 range is enforced on decode."""
        with pytest.raises(TypeMismatchError, match="out of u32 range"):
            Limits.from_dict(
                {"hi_capacity": 2**32, "pnl_flush_ms": 100, "max_positions_per_session": 1}
            )


class TestMarketContext:
    """Test market context payloads for each market type."""

    @pytest.mark.parametrize("market_type,attr,payload", [
        (MarketType.PUMP_FUN, "pumpfun", PumpFunContext()),
        (MarketType.PUMP_SWAP, "pumpswap", PumpSwapContext(pool=POOL, global_config=CONFIG)),
        (MarketType.METEORA_DBC, "meteora_dbc",
         MeteoraDbcContext(pool=POOL, config=CONFIG, quote_mint=MINT)),
        (MarketType.METEORA_DAMM_V2, "meteora_damm_v2", MeteoraDammV2Context(pool=POOL)),
        (MarketType.RAYDIUM_LAUNCHPAD, "raydium_launchpad",
         RaydiumLaunchpadContext(pool=POOL, config=CONFIG, platform=PLATFORM,
                                 quote_mint=MINT, user_quote_account=USER_QUOTE)),
        (MarketType.RAYDIUM_CPMM, "raydium_cpmm",
         RaydiumCpmmContext(pool=POOL, config=CONFIG, quote_mint=MINT,
                            user_quote_account=USER_QUOTE)),
    ])
    def test_round_trip_per_market(self, market_type, attr, payload) -> None:
        """Test every market type round-trips with its context."""
        context = MarketContext(market_type=market_type, **{attr: payload})

        encoded = context.to_dict()

        assert encoded["market_type"] == market_type.value
        assert set(encoded) == {"market_type", attr}
        assert MarketContext.from_dict(encoded) == context
        assert context.active_context == payload

    def test_pumpfun_marker_is_empty_object(self) -> None:
        """Test the pump.fun marker encodes as an empty object."""
        context = MarketContext(market_type=MarketType.PUMP_FUN, pumpfun=PumpFunContext())
        assert context.to_dict() == {"market_type": "pump_fun", "pumpfun": {}}

    def test_optional_global_config_omitted(self) -> None:
        """Test a None optional field is left out of the encoding."""
        assert PumpSwapContext(pool=POOL).to_dict() == {"pool": POOL}

    def test_unknown_market_type_rejected(self) -> None:
        """Test market_type outside the enum is a type mismatch."""
        with pytest.raises(TypeMismatchError, match="unknown MarketType 'orca'"):
            MarketContext.from_dict({"market_type": "orca"})

    def test_nested_missing_field_reports_path(self) -> None:
        """Test nested errors carry the dotted path."""
        with pytest.raises(MissingFieldError) as exc_info:
            MarketContext.from_dict(
                {"market_type": "meteora_dbc", "meteora_dbc": {"pool": POOL, "config": CONFIG}}
            )
        assert exc_info.value.path == "meteora_dbc.quote_mint"

    def test_nested_context_must_be_object(self) -> None:
        """Test a scalar where a nested object is expected is rejected."""
        with pytest.raises(TypeMismatchError) as exc_info:
            MarketContext.from_dict({"market_type": "pump_swap", "pumpswap": POOL})
        assert exc_info.value.path == "pumpswap"
        assert exc_info.value.expected == "PumpSwapContext object"

    def test_active_context_missing(self) -> None:
        """Test active_context is None when the matching field is unset."""
        context = MarketContext(market_type=MarketType.METEORA_DAMM_V2)
        assert context.active_context is None
