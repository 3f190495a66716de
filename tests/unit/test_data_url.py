"""Unit tests for data URL parsing."""

import base64

import pytest

from lookmatch.core.data_url import (
    DataUrl,
    encode_data_url,
    normalize_image_input,
    parse_data_url,
)
from lookmatch.core.errors import InvalidDataUrlError


class TestParseDataUrl:
    """Tests for parse_data_url."""

    def test_well_formed_png(self):
        result = parse_data_url("data:image/png;base64,AAAA")

        assert result.mime_type == "image/png"
        assert result.data == "AAAA"

    def test_keeps_mime_parameters(self):
        """Everything between ``data:`` and ``;base64,`` is the MIME type."""
        result = parse_data_url("data:image/svg+xml;charset=utf-8;base64,PHN2Zz4=")

        assert result.mime_type == "image/svg+xml;charset=utf-8"
        assert result.data == "PHN2Zz4="

    @pytest.mark.parametrize(
        "value",
        [
            "AAAA",
            "data:image/png,AAAA",
            "data:;base64,AAAA",
            "data:image/png;base64,",
            "prefix data:image/png;base64,AAAA",
            "data:image/png;base64,AA\nAA",
            "",
        ],
    )
    def test_malformed_input_fails(self, value):
        with pytest.raises(InvalidDataUrlError, match="Invalid Data URL format"):
            parse_data_url(value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_data_url("not a data url")


class TestDataUrl:
    """Tests for the DataUrl value type."""

    def test_to_bytes(self):
        assert DataUrl("text/plain", "aGVsbG8=").to_bytes() == b"hello"

    def test_to_bytes_rejects_bad_base64(self):
        with pytest.raises(InvalidDataUrlError, match="Invalid base64 payload"):
            DataUrl("image/png", "not*base64").to_bytes()

    def test_to_bytes_accepts_line_wrapped_base64(self):
        payload = b"x" * 200
        wrapped = base64.encodebytes(payload).decode()

        assert "\n" in wrapped
        assert DataUrl("image/jpeg", wrapped).to_bytes() == payload

    def test_str_serialises(self):
        assert str(DataUrl("image/png", "AAAA")) == "data:image/png;base64,AAAA"

    def test_encode_data_url(self):
        assert encode_data_url("text/plain", b"hello") == "data:text/plain;base64,aGVsbG8="


class TestNormalizeImageInput:
    """Tests for normalize_image_input."""

    def test_data_url_is_parsed(self):
        result = normalize_image_input("data:image/webp;base64,AAAA")

        assert result == DataUrl("image/webp", "AAAA")

    def test_raw_base64_defaults_to_jpeg(self):
        result = normalize_image_input("AAAA")

        assert result == DataUrl("image/jpeg", "AAAA")

    def test_raw_base64_uses_given_default(self):
        result = normalize_image_input("AAAA", default_mime_type="image/png")

        assert result.mime_type == "image/png"

    def test_malformed_data_url_still_fails(self):
        with pytest.raises(InvalidDataUrlError):
            normalize_image_input("data:image/png,AAAA")

    def test_wrapped_raw_base64_round_trips(self):
        payload = b"y" * 120

        result = normalize_image_input(base64.encodebytes(payload).decode())

        assert result.mime_type == "image/jpeg"
        assert result.to_bytes() == payload
