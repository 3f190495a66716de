"""Lookmatch - FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST routes, and the
``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application is stateless:

- **Configuration** comes from :data:`lookmatch.core.config.config` and is
  exposed read-only via ``GET /api/config``.
- **Credentials** are never stored. Each request carries its Gemini key in
  the ``X-API-Key`` header and the key is handed straight to the core call.
- **Errors** raised by the core are translated to HTTP status codes by
  :func:`_http_error`; anything unmapped surfaces as a 500.

Endpoints
---------
========  ==================  ====================================
Method    Path                Purpose
========  ==================  ====================================
GET       ``/api/config``     Version, model names, aspect ratio
POST      ``/api/analyze``    Score look metrics of an image
POST      ``/api/transfer``   Transfer a look and blend the result
========  ==================  ====================================

Usage
-----
CLI (installed entry point)::

    lookmatch

Direct invocation::

    python -m lookmatch.api.main
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from lookmatch import __version__
from lookmatch.api.models import AnalyzeRequest, TransferRequest, TransferResponse
from lookmatch.core.config import config
from lookmatch.core.errors import (
    ApiKeyMissingError,
    ImageDecodeError,
    ImageLoadTimeoutError,
    InvalidDataUrlError,
    KeyInvalidError,
    LookmatchError,
    MetricsValidationError,
    NoImageGeneratedError,
    QuotaExceededError,
)
from lookmatch.core.metrics import LookMetrics, analyze_look_metrics
from lookmatch.core.transfer import apply_look_transfer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Error code → HTTP status.  Checked in order, so subclasses come first.
# ---------------------------------------------------------------------------
_STATUS_BY_ERROR: tuple[tuple[type[LookmatchError], int], ...] = (
    (ApiKeyMissingError, 401),
    (KeyInvalidError, 401),
    (InvalidDataUrlError, 400),
    (QuotaExceededError, 429),
    (NoImageGeneratedError, 502),
    (MetricsValidationError, 502),
    (ImageLoadTimeoutError, 504),
    (ImageDecodeError, 422),
)


def _http_error(error: LookmatchError) -> HTTPException:
    """Translate a core error into an :class:`HTTPException`.

    The detail is the error message, so clients see the same codes
    (``API_KEY_MISSING``, ``QUOTA_EXCEEDED``, ...) as Python callers.
    """
    status_code = next(
        (code for error_type, code in _STATUS_BY_ERROR if isinstance(error, error_type)),
        500,
    )
    logger.info("Request failed with %d: %s", status_code, error)
    return HTTPException(status_code=status_code, detail=str(error))


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Lookmatch",
    description="Photographic look metrics and look transfer backed by Gemini.",
    version=__version__,
)

# Allow cross-origin requests so a browser frontend on another port can call
# the API during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config() -> dict:
    """Return the non-secret configuration the frontend needs.

    Returns:
        Dictionary with ``version``, ``metrics_model``, ``transfer_model``
        and ``aspect_ratio``.
    """
    return {
        "version": __version__,
        "metrics_model": config.metrics_model,
        "transfer_model": config.transfer_model,
        "aspect_ratio": config.transfer_aspect_ratio,
    }


@app.post("/api/analyze", response_model=LookMetrics)
async def analyze(
    req: AnalyzeRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> LookMetrics:
    """Score the look metrics of a single image.

    Args:
        req: Validated :class:`AnalyzeRequest` payload.
        x_api_key: Gemini API key from the ``X-API-Key`` header.

    Returns:
        The five look metrics.

    Raises:
        HTTPException: 401 missing key, 400 malformed image, 429 quota,
            502 unusable model answer.
    """
    try:
        return await analyze_look_metrics(req.image, api_key=x_api_key, config=config)
    except LookmatchError as e:
        raise _http_error(e) from e


@app.post("/api/transfer", response_model=TransferResponse)
async def transfer(
    req: TransferRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> TransferResponse:
    """Transfer the look of ``reference`` onto ``target``.

    Args:
        req: Validated :class:`TransferRequest` payload.
        x_api_key: Gemini API key from the ``X-API-Key`` header.

    Returns:
        :class:`TransferResponse` with the resulting data URL.

    Raises:
        HTTPException: 401 missing or invalid key, 400 malformed image,
            429 quota, 502 no image generated, 504 decode timeout.
    """
    try:
        image = await apply_look_transfer(
            req.reference,
            req.target,
            req.intensity,
            req.preset,
            api_key=x_api_key,
            config=config,
        )
    except LookmatchError as e:
        raise _http_error(e) from e
    return TransferResponse(image=image)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~lookmatch.core.config.config`
    (``LOOKMATCH_SERVER_HOST``, ``LOOKMATCH_SERVER_PORT``,
    ``LOOKMATCH_LOG_LEVEL``). Defaults to ``0.0.0.0:8000``.

    This function is registered as the ``lookmatch`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    uvicorn.run(
        "lookmatch.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level,
        reload=False,
    )


if __name__ == "__main__":
    main()
