"""
FormatLib - Image format detection and decoding

This module identifies encoded images by their magic bytes and decodes
them into Buffers through Pillow.
"""

from Picto_Libs.FormatLib.format import Format, guess
from Picto_Libs.FormatLib.decoder import PillowDecoder, load
from Picto_Libs.FormatLib.reader import from_memory, from_path, with_format

__all__ = [
    "Format",
    "guess",
    "PillowDecoder",
    "load",
    "from_memory",
    "from_path",
    "with_format",
]
