"""
Reading encoded images into Buffers.

Functions:
    from_memory: Detect the format of in-memory bytes and decode them
    from_path: Read a file and decode it
    with_format: Decode bytes of a known format
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from Picto_Libs.BufferLib.buffer import Buffer
from Picto_Libs.BufferLib.channel import U8
from Picto_Libs.BufferLib.pixel import Rgba
from Picto_Libs.FormatLib.decoder import PillowDecoder, load
from Picto_Libs.FormatLib.format import Format, guess
from Picto_Libs.constants import ENABLED_DECODERS
from Picto_Libs.errors import UnsupportedFormat

logger = logging.getLogger(__name__)


def with_format(
    data: bytes,
    image_format: Format,
    channel: Any = U8,
    pixel: Any = Rgba,
    decoders: Optional[Iterable[str]] = None,
) -> Buffer:
    """
    Decode ``data`` as ``image_format``.

    Args:
        data: Encoded image bytes
        image_format: The format of ``data``
        channel: Channel domain of the result (default U8)
        pixel: Pixel kind of the result (default Rgba)
        decoders: Format names allowed to decode (default ENABLED_DECODERS)

    Raises:
        UnsupportedFormat: If no decoder is enabled for the format
        DecodeFailed: If the data cannot be decoded
    """
    enabled = ENABLED_DECODERS if decoders is None else frozenset(decoders)
    if image_format.value not in enabled:
        raise UnsupportedFormat(f"unsupported image format: {image_format.value}")

    return load(PillowDecoder(bytes(data), image_format), channel, pixel)


def from_memory(
    data: bytes,
    channel: Any = U8,
    pixel: Any = Rgba,
    decoders: Optional[Iterable[str]] = None,
) -> Buffer:
    """
    Detect the format of ``data`` from its magic bytes and decode it.

    Raises:
        UnsupportedFormat: If the format is unknown or has no enabled decoder
        DecodeFailed: If the data cannot be decoded
    """
    image_format = guess(data)
    if image_format is None:
        raise UnsupportedFormat()

    logger.debug(f"Detected format: {image_format.value}")
    return with_format(data, image_format, channel, pixel, decoders)


def from_path(
    path: Union[str, Path],
    channel: Any = U8,
    pixel: Any = Rgba,
    decoders: Optional[Iterable[str]] = None,
) -> Buffer:
    """
    Read and decode the image file at ``path``.

    Raises:
        FileNotFoundError: If path does not exist
        UnsupportedFormat: If the format is unknown or has no enabled decoder
        DecodeFailed: If the data cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Image file not found: {path}")

    return from_memory(path.read_bytes(), channel, pixel, decoders)
