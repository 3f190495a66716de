"""Lookmatch - photographic look analysis and style transfer backed by Gemini."""

__version__ = "0.1.0"

from lookmatch.core.config import LookmatchConfig, config
from lookmatch.core.errors import (
    ApiKeyMissingError,
    InvalidDataUrlError,
    KeyInvalidError,
    LookmatchError,
    NoImageGeneratedError,
    QuotaExceededError,
)
from lookmatch.core.metrics import LookMetrics, analyze_look_metrics
from lookmatch.core.transfer import apply_look_transfer

__all__ = [
    "ApiKeyMissingError",
    "InvalidDataUrlError",
    "KeyInvalidError",
    "LookMetrics",
    "LookmatchConfig",
    "LookmatchError",
    "NoImageGeneratedError",
    "QuotaExceededError",
    "analyze_look_metrics",
    "apply_look_transfer",
    "config",
]
