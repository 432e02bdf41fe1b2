"""
Rotation by quarter turns into a new Buffer.

Positive degrees turn clockwise, negative degrees counter-clockwise. For a
W x H source:

- 0: copy (with channel/pixel conversion only)
- 90: H x W result, ``dst(H - 1 - y, x) = src(x, y)``
- 180: W x H result, ``dst(W - 1 - x, H - 1 - y) = src(x, y)``
- 270: H x W result, ``dst(y, W - 1 - x) = src(x, y)``
"""

from numbers import Real
from typing import Any

import numpy as np

from Picto_Libs.BufferLib.buffer import Buffer
from Picto_Libs.BufferLib.channel import get_channel
from Picto_Libs.BufferLib.pixel import get_pixel
from Picto_Libs.BufferLib.view import convert_window
from Picto_Libs.ProcessingLib.scaler import as_readable
from Picto_Libs.constants import FULL_TURN, ROTATION_STEP
from Picto_Libs.errors import ContractViolation, InvalidArgument

# np.rot90 turns counter-clockwise for positive k
_QUARTER_TURNS = {90: -1, 180: 2, 270: 1}


def normalize_degrees(by: float) -> int:
    """
    Reduce ``by`` to 0, 90, 180 or 270.

    Raises:
        InvalidArgument: If ``by`` is not a multiple of 90
    """
    if isinstance(by, bool) or not isinstance(by, Real):
        raise InvalidArgument(f"degrees must be a number, got {by!r}")
    if by % ROTATION_STEP != 0:
        raise InvalidArgument(f"degrees must be a multiple of {ROTATION_STEP}, got {by}")
    return int(by) % FULL_TURN


def rotate(source: Any, by: float, channel: Any = None, pixel: Any = None) -> Buffer:
    """
    Rotate a Buffer or readable view by a multiple of 90 degrees.

    Args:
        source: Buffer or readable view
        by: Degrees, a multiple of 90; negative turns counter-clockwise
        channel: Target channel domain (default: the source's)
        pixel: Target pixel kind (default: the source's)

    Returns:
        A newly allocated Buffer

    Raises:
        InvalidArgument: If ``by`` is not a multiple of 90
    """
    view = as_readable(source)
    degrees = normalize_degrees(by)
    target_channel = view.channel if channel is None else get_channel(channel)
    target_pixel = view.pixel if pixel is None else get_pixel(pixel)

    if degrees == 0:
        return Buffer.from_window(view, channel=target_channel, pixel=target_pixel)

    if degrees not in _QUARTER_TURNS:
        raise ContractViolation(f"unreachable rotation: {degrees}")

    rotated = np.rot90(view.as_array(), k=_QUARTER_TURNS[degrees], axes=(0, 1))
    data = convert_window(rotated, view.channel, view.pixel, target_channel, target_pixel)
    height, width = rotated.shape[:2]
    return Buffer.from_raw(width, height, data, target_channel, target_pixel)
