"""
Tests for the Pillow decode/encode collaborator.
"""

import io

import numpy as np
import pytest
from PIL import Image

from codec import (
    DecodeError,
    EncodeError,
    decode,
    encode,
    extension_for_format,
    format_for_path,
)
from raster import PixelBuffer


def png_bytes(image: Image.Image) -> bytes:
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


class TestDecode:
    """Tests for decode()."""

    @pytest.mark.parametrize("mode,channels", [("L", 1), ("RGB", 3), ("RGBA", 4)])
    def test_native_modes(self, mode, channels):
        buf = decode(png_bytes(Image.new(mode, (5, 3))))
        assert buf.size == (5, 3)
        assert buf.channels == channels

    def test_la_becomes_rgba(self):
        buf = decode(png_bytes(Image.new("LA", (4, 3), (100, 200))))
        assert buf.channels == 4
        assert [buf.get(0, 0, c) for c in range(4)] == [100, 100, 100, 200]

    def test_bilevel_becomes_gray(self):
        buf = decode(png_bytes(Image.new("1", (4, 4), 1)))
        assert buf.channels == 1
        assert buf.get(3, 3, 0) == 255

    def test_palette_without_transparency_becomes_rgb(self):
        image = Image.new("RGB", (4, 4), (10, 20, 30)).convert(
            "P", palette=Image.Palette.ADAPTIVE
        )
        buf = decode(png_bytes(image))
        assert buf.channels == 3
        assert [buf.get(0, 0, c) for c in range(3)] == [10, 20, 30]

    def test_garbage_raises(self):
        with pytest.raises(DecodeError, match="Could not decode"):
            decode(b"definitely not an image")


class TestEncode:
    """Tests for encode()."""

    def test_png_is_lossless(self, random_rgba):
        assert decode(encode(random_rgba, "PNG")) == random_rgba

    def test_gray_png_stays_gray(self, random_gray):
        assert decode(encode(random_gray, "png")) == random_gray

    def test_jpeg_flattens_alpha(self, random_rgba):
        data = encode(random_rgba, "jpg")
        assert data[:2] == b"\xff\xd8"
        buf = decode(data)
        assert buf.channels == 3
        assert buf.size == random_rgba.size

    def test_jpeg_is_default(self):
        data = encode(PixelBuffer.create(4, 4, 3, fill=128))
        with Image.open(io.BytesIO(data)) as image:
            assert image.format == "JPEG"

    def test_unknown_format_raises(self, random_rgb):
        with pytest.raises(EncodeError, match="NOPE"):
            encode(random_rgb, "nope")


class TestFormats:
    """Tests for extension and format lookups."""

    @pytest.mark.parametrize("path,expected", [
        ("photo.jpg", "JPEG"),
        ("photo.JPEG", "JPEG"),
        ("dir/scan.png", "PNG"),
        ("scan.tif", "TIFF"),
    ])
    def test_format_for_path(self, path, expected):
        assert format_for_path(path) == expected

    def test_unknown_extension_raises(self):
        with pytest.raises(EncodeError, match="Unknown image extension"):
            format_for_path("notes.txt")

    @pytest.mark.parametrize("fmt,expected", [
        ("jpg", ".jpg"),
        ("JPEG", ".jpg"),
        ("png", ".png"),
        ("ICO", ".ico"),
    ])
    def test_extension_for_format(self, fmt, expected):
        assert extension_for_format(fmt) == expected
