"""
Pytest configuration and shared fixtures for Picto tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import io

import pytest
from PIL import Image

from Picto_Libs.BufferLib import Buffer, Rgb, U8


@pytest.fixture
def white():
    return Rgb(1.0, 1.0, 1.0)


@pytest.fixture
def black():
    return Rgb(0.0, 0.0, 0.0)


@pytest.fixture
def sample_rgb_colors():
    """
    Provide a list of sample RGB pixels that are exact in 8-bit storage.

    Returns:
        List of Rgb pixels with common test colors
    """
    return [
        Rgb(1.0, 0.0, 0.0),    # Red
        Rgb(0.0, 1.0, 0.0),    # Green
        Rgb(0.0, 0.0, 1.0),    # Blue
        Rgb(1.0, 1.0, 1.0),    # White
        Rgb(0.0, 0.0, 0.0),    # Black
        Rgb(1.0, 0.0, 1.0),    # Magenta
    ]


@pytest.fixture
def numbered_buffer():
    """
    Provide a 4x3 u8 Rgb buffer whose red channel encodes the pixel index.

    Pixel (x, y) has red value ``y * 4 + x``, so any reordering is visible.
    """
    data = []
    for y in range(3):
        for x in range(4):
            data.extend([y * 4 + x, 10 * y, 20 * x])
    return Buffer.from_raw(4, 3, data, U8, Rgb)


@pytest.fixture
def png_bytes():
    """Encode a 3x2 RGBA image as PNG with Pillow."""
    img = Image.new("RGBA", (3, 2), (255, 0, 0, 255))
    img.putpixel((1, 0), (0, 255, 0, 128))
    img.putpixel((2, 1), (0, 0, 255, 0))
    stream = io.BytesIO()
    img.save(stream, format="PNG")
    return stream.getvalue()
