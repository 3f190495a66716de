"""Shared pytest fixtures for Lookmatch tests."""

import base64
import io
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from lookmatch.core.config import LookmatchConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> LookmatchConfig:
    """Create a test configuration that ignores any local .env file.

    Returns:
        LookmatchConfig instance for testing
    """
    return LookmatchConfig(
        _env_file=None,
        metrics_model="test-metrics-model",
        transfer_model="test-image-model",
        transfer_aspect_ratio="1:1",
        image_load_timeout=5.0,
        jpeg_quality=90,
    )


def _encode_image(size: tuple[int, int], color, fmt: str, mode: str = "RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def image_bytes() -> Callable[..., bytes]:
    """Factory for encoded solid-colour images.

    Returns:
        Callable ``(size=(8, 8), color=(255, 0, 0), fmt="PNG", mode="RGB") -> bytes``
    """

    def factory(size=(8, 8), color=(255, 0, 0), fmt="PNG", mode="RGB") -> bytes:
        return _encode_image(size, color, fmt, mode)

    return factory


@pytest.fixture
def make_data_url(image_bytes) -> Callable[..., str]:
    """Factory for data URLs of solid-colour images.

    Returns:
        Callable with the same arguments as ``image_bytes``
    """

    def factory(size=(8, 8), color=(255, 0, 0), fmt="PNG", mode="RGB") -> str:
        payload = base64.b64encode(image_bytes(size, color, fmt, mode)).decode("ascii")
        return f"data:image/{fmt.lower()};base64,{payload}"

    return factory


@pytest.fixture
def fake_client() -> MagicMock:
    """Stand-in for ``genai.Client`` with an async ``generate_content``.

    Returns:
        MagicMock whose ``aio.models.generate_content`` is an AsyncMock
    """
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


@pytest.fixture
def text_response() -> Callable[[str | None], SimpleNamespace]:
    """Factory for a response carrying only ``text`` (metrics answers)."""

    def factory(text):
        return SimpleNamespace(text=text, candidates=[])

    return factory


@pytest.fixture
def image_response() -> Callable[..., SimpleNamespace]:
    """Factory for a response whose first candidate holds the given parts.

    Each positional argument becomes one part: ``bytes`` or ``str`` values
    become inline image data, ``None`` becomes a text-only part.
    """

    def factory(*payloads):
        parts = []
        for payload in payloads:
            if payload is None:
                parts.append(SimpleNamespace(text="Here is your image.", inline_data=None))
            else:
                parts.append(
                    SimpleNamespace(
                        text=None,
                        inline_data=SimpleNamespace(mime_type="image/png", data=payload),
                    )
                )
        candidate = SimpleNamespace(content=SimpleNamespace(parts=parts))
        return SimpleNamespace(text=None, candidates=[candidate])

    return factory
