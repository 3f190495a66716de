"""Pydantic request and response models for the Lookmatch API.

Models
------
AnalyzeRequest
    Payload for ``POST /api/analyze``: one image to score.
TransferRequest
    Payload for ``POST /api/transfer``: reference, target, intensity, preset.
TransferResponse
    Result of ``POST /api/transfer``: the blended image as a data URL.

The metrics response reuses :class:`lookmatch.core.metrics.LookMetrics`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request body for the ``POST /api/analyze`` endpoint.

    Attributes:
        image: Data URL (``data:<mime>;base64,<payload>``) or raw base64.
            Raw base64 is treated as JPEG.
    """

    image: str = Field(
        ...,
        min_length=1,
        description="Data URL or raw base64 image to analyze.",
    )


class TransferRequest(BaseModel):
    """Request body for the ``POST /api/transfer`` endpoint.

    Attributes:
        reference: Data URL of the image whose look is copied.
        target: Data URL of the image that receives the look.
        intensity: Opacity of the generated image over the target, 0-100.
            100 returns the generated image as is, 0 returns the target.
        preset: Style label inserted into the instruction sent to the model.
    """

    reference: str = Field(
        ...,
        min_length=1,
        description="Data URL of the style reference image.",
    )
    target: str = Field(
        ...,
        min_length=1,
        description="Data URL of the image to restyle.",
    )
    intensity: int = Field(
        default=100,
        ge=0,
        le=100,
        description="Blend opacity of the generated image in percent.",
    )
    preset: str = Field(
        default="Custom",
        description="Style preset label (e.g. 'Film Noir', 'Golden Hour').",
    )


class TransferResponse(BaseModel):
    """Response body of ``POST /api/transfer``.

    Attributes:
        image: Resulting data URL (``image/png`` at intensity 100,
            the target at 0, ``image/jpeg`` otherwise).
    """

    image: str
