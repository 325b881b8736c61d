"""
Logging configuration and utilities for the stream protocol package.
"""
from .config import configure_logging, get_codec_logger, get_logger, log_decode_failure

__all__ = ["configure_logging", "get_logger", "get_codec_logger", "log_decode_failure"]
