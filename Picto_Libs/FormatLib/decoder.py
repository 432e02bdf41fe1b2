"""
Pillow-backed decoder.

Bitstream decoding is delegated to Pillow. The decoder normalises whatever
mode Pillow produces to one of the four canonical pixel kinds and hands the
image over as a sequence of rows; ``load`` consumes those rows into a Buffer
of the requested channel domain and pixel kind.

Classes:
    PillowDecoder: Opens one encoded image and yields its rows

Functions:
    load: Fill a new Buffer from a decoder
"""

import io
import logging
from typing import Any, Iterator, Tuple, Type

import numpy as np
from PIL import Image

from Picto_Libs.BufferLib.buffer import Buffer
from Picto_Libs.BufferLib.channel import F32, U8, U16, Channel, get_channel
from Picto_Libs.BufferLib.pixel import Luma, Lumaa, Pixel, Rgb, Rgba, convert_array, get_pixel
from Picto_Libs.FormatLib.format import Format
from Picto_Libs.constants import (
    PILLOW_MODE_FLOAT,
    PILLOW_MODE_INT,
    PILLOW_MODE_LUMA,
    PILLOW_MODE_LUMA16,
    PILLOW_MODE_LUMAA,
    PILLOW_MODE_RGB,
    PILLOW_MODE_RGBA,
)
from Picto_Libs.errors import DecodeFailed

logger = logging.getLogger(__name__)

# Pillow plugin names per format
PILLOW_FORMATS = {
    Format.PNG: "PNG",
    Format.JPEG: "JPEG",
    Format.GIF: "GIF",
    Format.WEBP: "WEBP",
    Format.TIFF: "TIFF",
    Format.BMP: "BMP",
    Format.ICO: "ICO",
}

# Pillow mode -> (pixel kind, channel domain)
NATIVE_MODES = {
    PILLOW_MODE_RGB: (Rgb, U8),
    PILLOW_MODE_RGBA: (Rgba, U8),
    PILLOW_MODE_LUMA: (Luma, U8),
    PILLOW_MODE_LUMAA: (Lumaa, U8),
    PILLOW_MODE_LUMA16: (Luma, U16),
    "I;16B": (Luma, U16),
    "I;16L": (Luma, U16),
    # 32-bit integer samples are clamped into the 16-bit domain
    PILLOW_MODE_INT: (Luma, U16),
    PILLOW_MODE_FLOAT: (Luma, F32),
}


class PillowDecoder:
    """
    Decode one image with Pillow.

    Args:
        data: Encoded image bytes
        image_format: Format the bytes are expected to be in

    Raises:
        DecodeFailed: If Pillow cannot open or decode the data
    """

    def __init__(self, data: bytes, image_format: Format):
        self.format = image_format
        self._image = self._open(data, image_format)

    @staticmethod
    def _open(data: bytes, image_format: Format) -> Any:
        plugin = PILLOW_FORMATS.get(image_format)
        if plugin is None:
            raise DecodeFailed(f"no Pillow plugin for {image_format.value}")

        try:
            img = Image.open(io.BytesIO(data), formats=[plugin])
            img.load()
        except Exception as e:
            raise DecodeFailed(f"{image_format.value}: {e}") from e

        if img.mode not in NATIVE_MODES:
            has_alpha = "A" in img.getbands() or "transparency" in img.info
            target = PILLOW_MODE_RGBA if has_alpha else PILLOW_MODE_RGB
            logger.debug(f"Converting Pillow mode {img.mode} to {target}")
            img = img.convert(target)

        return img

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def kind(self) -> Type[Pixel]:
        return NATIVE_MODES[self._image.mode][0]

    @property
    def channel(self) -> Channel:
        return NATIVE_MODES[self._image.mode][1]

    def rows(self) -> Iterator[np.ndarray]:
        """Yield each row as a flat array of channel values, top to bottom."""
        pixels = np.asarray(self._image)
        if not self.channel.is_float:
            pixels = np.clip(pixels, 0, self.channel.maximum)
        pixels = pixels.astype(self.channel.dtype, copy=False)
        for row in pixels:
            yield row.reshape(-1)


def load(decoder: PillowDecoder, channel: Any = U8, pixel: Any = Rgba) -> Buffer:
    """
    Build a Buffer from a decoder's rows.

    Args:
        decoder: Source of rows
        channel: Channel domain of the result
        pixel: Pixel kind of the result

    Returns:
        A new Buffer with the decoded image
    """
    channel = get_channel(channel)
    pixel = get_pixel(pixel)
    width, height = decoder.dimensions
    buffer = Buffer(width, height, channel, pixel)

    with buffer.writable() as out:
        grid = out.writable_array()
        for y, row in enumerate(decoder.rows()):
            unit = decoder.channel.to_unit(row.reshape(-1, decoder.kind.CHANNELS))
            converted = convert_array(unit, decoder.kind, pixel)
            grid[y] = channel.from_unit(converted).reshape(width, pixel.CHANNELS)

    logger.debug(
        f"Decoded {decoder.format.value} {width}x{height} "
        f"{decoder.kind.__name__} into {pixel.__name__}/{channel.name}"
    )
    return buffer
