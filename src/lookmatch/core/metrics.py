"""Look metrics analysis with a JSON-schema constrained Gemini call.

The model is asked to score five photographic qualities of an image on a
0-100 scale and to answer with a JSON object matching
:data:`METRICS_RESPONSE_SCHEMA`. The answer is validated into
:class:`LookMetrics`; an empty or partial answer is an error, never a
partially populated result.

Error mapping on this path covers rate limiting only. A ``"not found"``
error from the SDK propagates unchanged (style transfer maps it to
``KEY_INVALID``; this path does not).
"""

from __future__ import annotations

import json
import logging

from google.genai import types
from pydantic import BaseModel, ConfigDict, ValidationError

from .config import LookmatchConfig
from .config import config as default_config
from .credentials import get_client
from .data_url import normalize_image_input
from .errors import MetricsValidationError, classify_remote_error

logger = logging.getLogger(__name__)

METRICS_PROMPT = "Analyze contrast, saturation, warmth, uniformity, exposure (0-100) as JSON."

METRIC_FIELDS = ("contrast", "saturation", "warmth", "uniformity", "exposure")

METRICS_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={name: types.Schema(type=types.Type.INTEGER) for name in METRIC_FIELDS},
    required=list(METRIC_FIELDS),
)


class LookMetrics(BaseModel):
    """Five 0-100 scores describing the photographic look of an image.

    The range is what the model is asked for; it is not enforced here.
    Scores must be JSON integers; nothing is coerced.
    """

    model_config = ConfigDict(strict=True)

    contrast: int
    saturation: int
    warmth: int
    uniformity: int
    exposure: int


def parse_metrics(text: str | None) -> LookMetrics:
    """Validate the model's JSON answer into :class:`LookMetrics`.

    Args:
        text: Response text (None or empty is treated as ``"{}"``)

    Raises:
        MetricsValidationError: If the text is not JSON or lacks a required score
    """
    try:
        payload = json.loads(text or "{}")
    except json.JSONDecodeError as e:
        raise MetricsValidationError(f"Metrics response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MetricsValidationError("Metrics response is not a JSON object")

    try:
        return LookMetrics.model_validate(payload)
    except ValidationError as e:
        missing = [name for name in METRIC_FIELDS if name not in payload]
        if missing:
            raise MetricsValidationError(
                f"Metrics response is missing: {', '.join(missing)}"
            ) from e
        raise MetricsValidationError(f"Metrics response is invalid: {e}") from e


async def analyze_look_metrics(
    image: str,
    *,
    api_key: str | None,
    config: LookmatchConfig | None = None,
) -> LookMetrics:
    """Score contrast, saturation, warmth, uniformity and exposure of an image.

    Args:
        image: Data URL or raw base64 image
        api_key: Gemini API key for this call
        config: Configuration (defaults to the global instance)

    Returns:
        Validated :class:`LookMetrics`

    Raises:
        ApiKeyMissingError: If no key is supplied (before any network call)
        InvalidDataUrlError: If the image is a malformed data URL or bad base64
        QuotaExceededError: If the remote error mentions "429" or "quota"
        MetricsValidationError: If the answer lacks required scores
    """
    config = config or default_config
    client = get_client(api_key, config)

    source = normalize_image_input(image, config.default_mime_type)
    image_bytes = source.to_bytes()

    logger.info(
        "Requesting look metrics from %s (%s, %d bytes)",
        config.metrics_model,
        source.mime_type,
        len(image_bytes),
    )

    try:
        response = await client.aio.models.generate_content(
            model=config.metrics_model,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=source.mime_type),
                METRICS_PROMPT,
            ],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=METRICS_RESPONSE_SCHEMA,
            ),
        )
    except Exception as e:
        mapped = classify_remote_error(e, map_not_found=False)
        if mapped is not None:
            raise mapped from e
        raise

    metrics = parse_metrics(response.text)
    logger.info("Look metrics: %s", metrics.model_dump())
    return metrics
