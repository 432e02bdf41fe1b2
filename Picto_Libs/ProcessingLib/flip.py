"""
In-place flips.

Example:
    >>> flip(image, Orientation.VERTICAL)        # top row becomes bottom row
    >>> with image.view(Area.new(width=8)) as left:
    ...     flip(left, Orientation.HORIZONTAL)   # mirror only the left strip
"""

from typing import Any

from Picto_Libs.BufferLib.buffer import Buffer
from Picto_Libs.BufferLib.orientation import Orientation
from Picto_Libs.BufferLib.view import View
from Picto_Libs.errors import InvalidArgument


def flip(target: Any, orientation: Orientation) -> None:
    """
    Flip a Buffer or a read-write View in place.

    ``Orientation.VERTICAL`` swaps rows top/bottom, ``Orientation.HORIZONTAL``
    swaps columns left/right. Row (or column) ``i`` of the first half is
    swapped with ``size - 1 - i``; an odd centre stays where it is.

    Args:
        target: Buffer or View to flip
        orientation: Axis to mirror

    Raises:
        InvalidArgument: If target is not a Buffer or View
        BorrowConflict: If a Buffer target has live write views
    """
    if isinstance(target, Buffer):
        with target.view() as view:
            _flip_view(view, orientation)
    elif isinstance(target, View):
        _flip_view(target, orientation)
    else:
        raise InvalidArgument(f"Expected Buffer or View, got {type(target)}")


def _flip_view(view: View, orientation: Orientation) -> None:
    grid = view.writable_array()
    width, height = view.dimensions

    if orientation is Orientation.VERTICAL:
        if height <= 1:
            return
        for y in range(height // 2):
            reverse = height - 1 - y
            grid[[y, reverse]] = grid[[reverse, y]]

    elif orientation is Orientation.HORIZONTAL:
        if width <= 1:
            return
        for x in range(width // 2):
            reverse = width - 1 - x
            grid[:, [x, reverse]] = grid[:, [reverse, x]]

    else:
        raise InvalidArgument(f"Unknown orientation: {orientation}")
