"""Exception types raised by Lookmatch and remote error classification.

Every error carries the exact message code clients key off (``API_KEY_MISSING``,
``QUOTA_EXCEEDED``, ``KEY_INVALID``, ``No image generated``), so ``str(exc)``
is stable across the Python API and the HTTP layer.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LookmatchError(Exception):
    """Base class for all Lookmatch errors."""

    pass


class ApiKeyMissingError(LookmatchError):
    """No credential was supplied for the call."""

    def __init__(self, message: str = "API_KEY_MISSING") -> None:
        super().__init__(message)


class InvalidDataUrlError(LookmatchError, ValueError):
    """Input is not a ``data:<mime>;base64,<payload>`` string or not valid base64."""

    def __init__(self, message: str = "Invalid Data URL format") -> None:
        super().__init__(message)


class QuotaExceededError(LookmatchError):
    """The remote service rejected the call for rate limiting or quota."""

    def __init__(self, message: str = "QUOTA_EXCEEDED") -> None:
        super().__init__(message)


class KeyInvalidError(LookmatchError):
    """The remote service reported the key or model as not found."""

    def __init__(self, message: str = "KEY_INVALID") -> None:
        super().__init__(message)


class NoImageGeneratedError(LookmatchError):
    """The image model answered without any inline image part."""

    def __init__(self, message: str = "No image generated") -> None:
        super().__init__(message)


class MetricsValidationError(LookmatchError):
    """The metrics response was empty, not JSON, or missing required scores."""

    pass


class CompositorError(LookmatchError):
    """The blend between the original and the styled image could not be produced."""

    pass


class ImageDecodeError(CompositorError):
    pass


class ImageLoadTimeoutError(CompositorError):
    pass


def classify_remote_error(error: BaseException, *, map_not_found: bool) -> LookmatchError | None:
    """Map a remote failure to a Lookmatch error by inspecting its message.

    Args:
        error: Exception raised by the SDK call
        map_not_found: Whether ``"not found"`` maps to :class:`KeyInvalidError`.
            Only the style transfer path maps it.

    Returns:
        The mapped error, or ``None`` if the error should propagate unchanged.
    """
    message = str(error) or ""
    if "429" in message or "quota" in message:
        logger.warning("Remote call hit rate limit: %s", message)
        return QuotaExceededError()
    if map_not_found and "not found" in message:
        logger.warning("Remote call reported key or model not found: %s", message)
        return KeyInvalidError()
    return None
