"""Look transfer from a reference image onto a target image.

Both images and a short instruction go to a Gemini image model. The first
inline image in the answer is blended over the target at the requested
intensity (see :mod:`lookmatch.core.compositor`).

Request Layout
--------------
Parts are sent in this order:

    "Apply <preset> style from reference to target. Return image."
    "Target:"     <target image>
    "Reference:"  <reference image>

The request asks for a fixed aspect ratio (``config.transfer_aspect_ratio``)
and disables blocking on the four adjustable harm categories.

Error Mapping
-------------
- message contains "429" or "quota"  -> QuotaExceededError (QUOTA_EXCEEDED)
- message contains "not found"       -> KeyInvalidError (KEY_INVALID)
- anything else                      -> re-raised unchanged

No retry is attempted and a failed call produces no partial result.
"""

from __future__ import annotations

import base64
import logging
from typing import Any

from google.genai import types

from .compositor import blend_images
from .config import LookmatchConfig
from .config import config as default_config
from .credentials import get_client
from .data_url import DataUrl, parse_data_url
from .errors import NoImageGeneratedError, classify_remote_error

logger = logging.getLogger(__name__)

TRANSFER_SAFETY_SETTINGS = [
    types.SafetySetting(category=category, threshold=types.HarmBlockThreshold.BLOCK_NONE)
    for category in (
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    )
]


def build_transfer_instruction(preset: str) -> str:
    return f"Apply {preset} style from reference to target. Return image."


def build_transfer_contents(reference: DataUrl, target: DataUrl, preset: str) -> list[Any]:
    """Assemble the ordered request parts for a look transfer."""
    return [
        build_transfer_instruction(preset),
        "Target:",
        types.Part.from_bytes(data=target.to_bytes(), mime_type=target.mime_type),
        "Reference:",
        types.Part.from_bytes(data=reference.to_bytes(), mime_type=reference.mime_type),
    ]


def extract_generated_image(response: Any) -> str | None:
    """Return the first inline image of the first candidate as a PNG data URL.

    The SDK hands back decoded bytes; a string payload is taken to be base64
    already. Returns ``None`` when no part carries inline data.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        data = getattr(inline_data, "data", None) if inline_data is not None else None
        if not data:
            continue
        if isinstance(data, bytes):
            data = base64.b64encode(data).decode("ascii")
        return f"data:image/png;base64,{data}"
    return None


async def apply_look_transfer(
    reference: str,
    target: str,
    intensity: int,
    preset: str,
    *,
    api_key: str | None,
    config: LookmatchConfig | None = None,
    load_timeout: float | None = None,
) -> str:
    """Transfer the look of ``reference`` onto ``target``.

    Args:
        reference: Data URL of the style reference
        target: Data URL of the image to restyle
        intensity: Opacity of the generated image over the target, in percent
        preset: Style label used in the instruction
        api_key: Gemini API key for this call
        config: Configuration (defaults to the global instance)
        load_timeout: Seconds allowed for decoding before blending
            (defaults to ``config.image_load_timeout``)

    Returns:
        Data URL of the result: PNG when intensity >= 100, the unchanged
        target when intensity <= 0, JPEG otherwise

    Raises:
        ApiKeyMissingError: If no key is supplied (before any network call)
        InvalidDataUrlError: If either input is malformed
        QuotaExceededError: If the remote error mentions "429" or "quota"
        KeyInvalidError: If the remote error mentions "not found"
        NoImageGeneratedError: If the answer has no inline image
    """
    config = config or default_config
    client = get_client(api_key, config)

    ref = parse_data_url(reference)
    tgt = parse_data_url(target)
    contents = build_transfer_contents(ref, tgt, preset)

    logger.info(
        "Requesting look transfer from %s (preset=%r, target=%s, reference=%s)",
        config.transfer_model,
        preset,
        tgt.mime_type,
        ref.mime_type,
    )

    try:
        response = await client.aio.models.generate_content(
            model=config.transfer_model,
            contents=contents,
            config=types.GenerateContentConfig(
                image_config=types.ImageConfig(aspect_ratio=config.transfer_aspect_ratio),
                safety_settings=TRANSFER_SAFETY_SETTINGS,
            ),
        )
    except Exception as e:
        mapped = classify_remote_error(e, map_not_found=True)
        if mapped is not None:
            raise mapped from e
        raise

    generated = extract_generated_image(response)
    if generated is None:
        logger.error("Look transfer response contained no inline image")
        raise NoImageGeneratedError()

    if load_timeout is None:
        load_timeout = config.image_load_timeout

    return await blend_images(
        target,
        generated,
        intensity,
        load_timeout=load_timeout,
        quality=config.jpeg_quality,
    )
