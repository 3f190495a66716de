"""Core functionality for look analysis and transfer.

This module provides the core components of Lookmatch:

- **analyze_look_metrics**: Score contrast, saturation, warmth, uniformity and exposure
- **apply_look_transfer**: Restyle a target after a reference and blend the result
- **blend_images**: Opacity blend of a styled image over its original
- **parse_data_url**: Split ``data:<mime>;base64,<payload>`` strings
- **LookmatchConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with LOOKMATCH_ in .env files

2. **Remote Call Layer** (credentials.py, metrics.py, transfer.py):
   - One Gemini client per call, built from a caller-supplied key
   - Async requests through ``client.aio``
   - Remote errors mapped to the types in errors.py

3. **Image Layer** (data_url.py, compositor.py):
   - Data URL parsing and encoding
   - Pillow-based blend with a bounded decode wait

Usage Example
-------------
    import asyncio
    from lookmatch.core import analyze_look_metrics, apply_look_transfer

    metrics = asyncio.run(analyze_look_metrics(image_url, api_key=key))
    styled = asyncio.run(
        apply_look_transfer(reference_url, target_url, 70, "Film Noir", api_key=key)
    )
"""

from lookmatch.core.compositor import blend_images
from lookmatch.core.config import LookmatchConfig, config
from lookmatch.core.data_url import DataUrl, normalize_image_input, parse_data_url
from lookmatch.core.metrics import LookMetrics, analyze_look_metrics
from lookmatch.core.transfer import apply_look_transfer

__all__ = [
    "DataUrl",
    "LookMetrics",
    "LookmatchConfig",
    "analyze_look_metrics",
    "apply_look_transfer",
    "blend_images",
    "config",
    "normalize_image_input",
    "parse_data_url",
]
