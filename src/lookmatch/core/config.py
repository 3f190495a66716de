"""Configuration management for Lookmatch.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the LOOKMATCH_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (LOOKMATCH_* prefix)
2. .env file in the project root
3. Default values defined in LookmatchConfig

Example .env file:
    LOOKMATCH_METRICS_MODEL=gemini-3-flash-preview
    LOOKMATCH_TRANSFER_MODEL=gemini-3-pro-image-preview
    LOOKMATCH_IMAGE_LOAD_TIMEOUT=30
    LOOKMATCH_SERVER_PORT=8000

Credentials
-----------
There is no API key setting. Every call to the analyzer or the style transfer
takes the key as an explicit argument, and the HTTP layer reads it from the
``X-API-Key`` request header.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

    from lookmatch.core.config import config

    print(config.metrics_model)
    print(config.image_load_timeout)
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LookmatchConfig(BaseSettings):
    """Main configuration for Lookmatch.

    Attributes
    ----------
    Remote Model Settings:
        metrics_model : str
            Gemini model used to score look metrics
        transfer_model : str
            Gemini image model used for style transfer
        transfer_aspect_ratio : str
            Aspect ratio requested from the image model
        request_timeout_ms : int | None
            HTTP timeout handed to the SDK client (None = SDK default)

    Image Settings:
        default_mime_type : str
            MIME type assumed for raw base64 input without a data URL header
        jpeg_quality : int
            JPEG quality of blended output (1-100)
        image_load_timeout : float | None
            Seconds to wait for both images to decode before blending

    Server Settings:
        server_host : str
            Server bind address
        server_port : int
            Server port (1024-65535)
        log_level : Literal["critical", "error", "warning", "info", "debug"]
            Log level handed to uvicorn

    Examples
    --------
        >>> custom_config = LookmatchConfig(
        ...     transfer_aspect_ratio="4:3",
        ...     image_load_timeout=5.0,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOOKMATCH_",
        case_sensitive=False,
    )

    # Remote model settings
    metrics_model: str = Field(
        default="gemini-3-flash-preview",
        description="Model used to score contrast, saturation, warmth, uniformity and exposure",
    )
    transfer_model: str = Field(
        default="gemini-3-pro-image-preview",
        description="Image generation model used for look transfer",
    )
    transfer_aspect_ratio: str = Field(
        default="1:1",
        description="Aspect ratio requested from the image generation model",
    )
    request_timeout_ms: int | None = Field(
        default=None,
        description="HTTP timeout in milliseconds for remote calls (None = SDK default)",
        gt=0,
    )

    # Image settings
    default_mime_type: str = Field(
        default="image/jpeg",
        description="MIME type assumed for raw base64 input",
    )
    jpeg_quality: int = Field(
        default=90,
        description="JPEG quality for blended output",
        ge=1,
        le=100,
    )
    image_load_timeout: float | None = Field(
        default=30.0,
        description="Seconds to wait for both images to decode (None = wait forever)",
        gt=0,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=8000,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["critical", "error", "warning", "info", "debug"] = Field(
        default="info",
        description="Log level handed to uvicorn",
    )


# Global configuration instance
# Loads values from environment variables (LOOKMATCH_* prefix) and .env file.
config = LookmatchConfig()
