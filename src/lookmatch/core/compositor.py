"""Opacity blend of a styled image over its original.

The styled result from the image model is laid over the original at a
caller-chosen opacity. The operation mirrors drawing both images onto a
canvas sized to the original:

1. The original is drawn at full opacity on an opaque black background.
2. The styled image is stretched to the original's size and drawn on top
   with its alpha multiplied by ``opacity / 100``.
3. The result is encoded as a JPEG data URL.

At the extremes no pixels are touched: ``opacity >= 100`` returns the styled
input and ``opacity <= 0`` returns the original, both byte-for-byte.

Decoding runs in worker threads so the event loop stays free, and the wait
for both images can be bounded with ``load_timeout``.
"""

from __future__ import annotations

import asyncio
import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from .data_url import encode_data_url, parse_data_url
from .errors import ImageDecodeError, ImageLoadTimeoutError

logger = logging.getLogger(__name__)


def _load_image(data_url: str) -> Image.Image:
    """Decode a data URL into an RGBA image with EXIF orientation applied."""
    raw = parse_data_url(data_url).to_bytes()
    try:
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e

    image = ImageOps.exif_transpose(image)
    return image.convert("RGBA")


def _compose(original: Image.Image, styled: Image.Image, opacity: int, quality: int) -> str:
    size = original.size
    if styled.size != size:
        styled = styled.resize(size, Image.Resampling.LANCZOS)

    factor = opacity / 100
    alpha = styled.getchannel("A").point(lambda v: round(v * factor))
    styled.putalpha(alpha)

    canvas = Image.new("RGBA", size, (0, 0, 0, 255))
    canvas = Image.alpha_composite(canvas, original)
    canvas = Image.alpha_composite(canvas, styled)

    buffer = io.BytesIO()
    canvas.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return encode_data_url("image/jpeg", buffer.getvalue())


async def blend_images(
    original: str,
    styled: str,
    opacity: int,
    *,
    load_timeout: float | None = None,
    quality: int = 90,
) -> str:
    """Blend ``styled`` over ``original`` at ``opacity`` percent.

    Args:
        original: Data URL of the original image (sets the output size)
        styled: Data URL of the styled image
        opacity: Blend weight of the styled image in percent
        load_timeout: Seconds to wait for both images to decode (None = no limit)
        quality: JPEG quality of the blended output

    Returns:
        ``styled`` if opacity >= 100, ``original`` if opacity <= 0, otherwise
        a JPEG data URL with the original's dimensions

    Raises:
        InvalidDataUrlError: If either input is not a base64 data URL
        ImageDecodeError: If either image cannot be decoded
        ImageLoadTimeoutError: If decoding does not finish within load_timeout
    """
    if opacity >= 100:
        return styled
    if opacity <= 0:
        return original

    try:
        original_image, styled_image = await asyncio.wait_for(
            asyncio.gather(
                asyncio.to_thread(_load_image, original),
                asyncio.to_thread(_load_image, styled),
            ),
            timeout=load_timeout,
        )
    except asyncio.TimeoutError as e:
        raise ImageLoadTimeoutError(f"Images did not load within {load_timeout} seconds") from e

    logger.info(
        "Blending %dx%d original with styled %dx%d at %d%% opacity",
        *original_image.size,
        *styled_image.size,
        opacity,
    )
    return await asyncio.to_thread(_compose, original_image, styled_image, opacity, quality)
