"""
Image format identification by magic bytes.

Functions:
    guess: Map the first bytes of a file to a Format, or None
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

from Picto_Libs.constants import (
    FORMAT_BMP,
    FORMAT_GIF,
    FORMAT_HDR,
    FORMAT_ICO,
    FORMAT_JPEG,
    FORMAT_PNG,
    FORMAT_TIFF,
    FORMAT_WEBP,
)


class Format(Enum):
    PNG = FORMAT_PNG
    JPEG = FORMAT_JPEG
    GIF = FORMAT_GIF
    WEBP = FORMAT_WEBP
    TIFF = FORMAT_TIFF
    BMP = FORMAT_BMP
    ICO = FORMAT_ICO
    HDR = FORMAT_HDR


# Checked in order, first match wins
MAGIC: Sequence[Tuple[bytes, Format]] = (
    (b"\x89PNG\r\n\x1a\n", Format.PNG),
    (b"\xff\xd8\xff", Format.JPEG),
    (b"GIF89a", Format.GIF),
    (b"GIF87a", Format.GIF),
    (b"WEBP", Format.WEBP),
    (b"MM.*", Format.TIFF),
    (b"II*.", Format.TIFF),
    (b"BM", Format.BMP),
    (b"\x00\x00\x01\x00", Format.ICO),
    (b"#?RADIANCE", Format.HDR),
)


def guess(data: bytes) -> Optional[Format]:
    """
    Identify an image format from its leading bytes.

    Args:
        data: The start of the file (any bytes-like object)

    Returns:
        The matching Format, or None if no magic prefix matches
    """
    prefix = bytes(data[:16])
    for magic, image_format in MAGIC:
        if prefix.startswith(magic):
            return image_format
    return None
