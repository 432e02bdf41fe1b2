"""
BufferLib - Pixel storage and addressing

This module provides areas, channel domains, pixel kinds, owned buffers
and borrowed views for Picto.
"""

from Picto_Libs.BufferLib.area import Area, Builder
from Picto_Libs.BufferLib.channel import Channel, U8, U16, F32, F64, get_channel
from Picto_Libs.BufferLib.pixel import Pixel, Rgb, Rgba, Luma, Lumaa, get_pixel
from Picto_Libs.BufferLib.orientation import Orientation, Vertically, Horizontally
from Picto_Libs.BufferLib.gradient import Gradient
from Picto_Libs.BufferLib.view import Read, Write, View
from Picto_Libs.BufferLib.buffer import Buffer

__all__ = [
    "Area",
    "Builder",
    "Channel",
    "U8",
    "U16",
    "F32",
    "F64",
    "get_channel",
    "Pixel",
    "Rgb",
    "Rgba",
    "Luma",
    "Lumaa",
    "get_pixel",
    "Orientation",
    "Vertically",
    "Horizontally",
    "Gradient",
    "Read",
    "Write",
    "View",
    "Buffer",
]
