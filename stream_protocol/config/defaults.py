"""Default configuration parameters for the stream protocol codec."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecOptions:
    """Decode behaviour switches shared by both message families."""
    accept_legacy_aliases: bool = True     # sell_now tag, wallet_pubkey field
    reject_unknown_fields: bool = False    # Ignore unrecognized keys by default


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters passed to configure_logging."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    codec: CodecOptions
    logging: LoggingParams


DEFAULT_CODEC_OPTIONS = CodecOptions()


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        codec=CodecOptions(),
        logging=LoggingParams(),
    )
