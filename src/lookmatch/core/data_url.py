"""Data URL parsing and encoding.

Images travel through Lookmatch as ``data:<mime>;base64,<payload>`` strings.
The analyzer additionally accepts bare base64, which is assumed to be JPEG
unless configured otherwise.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from .errors import InvalidDataUrlError

_DATA_URL_RE = re.compile(r"data:(.+);base64,(.+)")


@dataclass(frozen=True)
class DataUrl:
    """A parsed data URL.

    Attributes:
        mime_type: MIME type from the header (e.g. ``image/png``)
        data: Base64 payload, still encoded
    """

    mime_type: str
    data: str

    def to_bytes(self) -> bytes:
        """Decode the base64 payload.

        ASCII whitespace is dropped first, so line-wrapped base64 is accepted.

        Raises:
            InvalidDataUrlError: If the payload is not valid base64
        """
        try:
            return base64.b64decode("".join(self.data.split()), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidDataUrlError("Invalid base64 payload") from e

    def __str__(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


def parse_data_url(value: str) -> DataUrl:
    """Split a data URL into MIME type and base64 payload.

    Args:
        value: String of the form ``data:<mime>;base64,<payload>``

    Returns:
        Parsed :class:`DataUrl`

    Raises:
        InvalidDataUrlError: If the string does not match the pattern
    """
    match = _DATA_URL_RE.fullmatch(value or "")
    if match is None:
        raise InvalidDataUrlError()
    return DataUrl(mime_type=match.group(1), data=match.group(2))


def normalize_image_input(value: str, default_mime_type: str = "image/jpeg") -> DataUrl:
    """Accept a data URL or raw base64 and return it as a :class:`DataUrl`."""
    if value.startswith("data:"):
        return parse_data_url(value)
    return DataUrl(mime_type=default_mime_type, data=value)


def encode_data_url(mime_type: str, payload: bytes) -> str:
    return str(DataUrl(mime_type=mime_type, data=base64.b64encode(payload).decode("ascii")))
