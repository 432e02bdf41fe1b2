"""
Borrowed windows into buffer storage.

A view never owns storage. It keeps a reference to the owner's flat channel
array, the owner's full Area (for the row stride) and its own window Area in
owner coordinates. Every access resolves to a single flat index:

    index = channels * ((window.y + y) * owner.width + (window.x + x))

Narrowing a view re-bases the new window on the original owner, so nested
views stay one index computation away from the storage.

Classes:
    Read: Read-only view
    Write: Write-only view, holds a write lease
    View: Read-write view

Functions:
    convert_window: Convert a window's stored values to another channel/pixel
"""

from typing import Iterator, Optional, Tuple, Type

import numpy as np

from Picto_Libs.BufferLib.area import Area, resolve
from Picto_Libs.BufferLib.borrow import Lease
from Picto_Libs.BufferLib.channel import Channel
from Picto_Libs.BufferLib.pixel import Pixel, convert_array
from Picto_Libs.errors import BorrowConflict, OutOfBounds


def convert_window(
    grid: np.ndarray,
    channel: Channel,
    pixel: Type[Pixel],
    target_channel: Channel,
    target_pixel: Type[Pixel],
) -> np.ndarray:
    """
    Convert a (height, width, channels) grid of stored values.

    Pixels are processed in address order; the result is a new flat array in
    the target channel domain laid out for ``target_pixel``.
    """
    if channel == target_channel and pixel is target_pixel:
        return np.array(grid, dtype=channel.dtype, copy=True).reshape(-1)

    unit = channel.to_unit(grid.reshape(-1, pixel.CHANNELS))
    unit = convert_array(unit, pixel, target_pixel)
    return target_channel.from_unit(unit).reshape(-1)


class _Window:
    def __init__(
        self,
        data: np.ndarray,
        owner: Area,
        area: Area,
        channel: Channel,
        pixel: Type[Pixel],
    ):
        self._data = data
        self._owner = owner
        self._area = area
        self._channel = channel
        self._pixel = pixel

    @property
    def area(self) -> Area:
        return self._area

    @property
    def owner(self) -> Area:
        return self._owner

    @property
    def width(self) -> int:
        return self._area.width

    @property
    def height(self) -> int:
        return self._area.height

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self._area.width, self._area.height

    @property
    def channel(self) -> Channel:
        return self._channel

    @property
    def pixel(self) -> Type[Pixel]:
        return self._pixel

    def _index(self, x: int, y: int) -> int:
        if x < 0 or y < 0 or x >= self._area.width or y >= self._area.height:
            raise OutOfBounds(
                f"out of bounds: ({x}, {y}) outside {self._area.width}x{self._area.height}"
            )
        return self._pixel.CHANNELS * (
            (self._area.y + y) * self._owner.width + (self._area.x + x)
        )

    def _narrow(self, area) -> Area:
        local = resolve(area, Area(0, 0, self._area.width, self._area.height))
        if local.x + local.width > self._area.width or local.y + local.height > self._area.height:
            raise OutOfBounds(f"out of bounds: {local} exceeds {self._area.width}x{self._area.height}")
        return Area(
            local.x + self._area.x,
            local.y + self._area.y,
            local.width,
            local.height,
        )

    def _grid(self) -> np.ndarray:
        area = self._area
        full = self._data.reshape(self._owner.height, self._owner.width, self._pixel.CHANNELS)
        return full[area.y:area.y + area.height, area.x:area.x + area.width]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._pixel.__name__}, {self._channel.name}, "
            f"window={self._area}, owner={self._owner.width}x{self._owner.height})"
        )


class Read(_Window):
    """A read-only window."""

    def get(self, x: int, y: int) -> Pixel:
        """
        Get the pixel at window-relative coordinates.

        Raises:
            OutOfBounds: If ``x >= width`` or ``y >= height``
        """
        index = self._index(x, y)
        return self._pixel.read(self._channel, self._data[index:index + self._pixel.CHANNELS])

    def readable(self, area=None) -> "Read":
        """Narrow to a read-only sub-window given relative to this window."""
        return Read(self._data, self._owner, self._narrow(area), self._channel, self._pixel)

    def pixels(self) -> Iterator[Tuple[int, int, Pixel]]:
        """Iterate ``(x, y, pixel)`` in window-relative row-major order."""
        for x, y in self._area.relative():
            yield x, y, self.get(x, y)

    def as_array(self) -> np.ndarray:
        """Zero-copy (height, width, channels) array of the window, not writeable."""
        grid = self._grid()
        grid.flags.writeable = False
        return grid

    def convert(self, channel=None, pixel=None):
        """Materialise the window into a new Buffer, optionally converting."""
        from Picto_Libs.BufferLib.buffer import Buffer

        return Buffer.from_window(self, channel=channel, pixel=pixel)


class Write(_Window):
    """A write-only window holding a lease on its region."""

    def __init__(
        self,
        data: np.ndarray,
        owner: Area,
        area: Area,
        channel: Channel,
        pixel: Type[Pixel],
        lease: Optional[Lease] = None,
    ):
        super().__init__(data, owner, area, channel, pixel)
        self._lease = lease

    def _check_lease(self) -> None:
        if self._lease is not None and not self._lease.alive:
            raise BorrowConflict("write view used after release")

    def _check_exclusive(self, area: Area) -> None:
        self._check_lease()
        if self._lease is not None and self._lease.blocked(area):
            raise BorrowConflict(f"region {area} is borrowed by a narrowed write view")

    def _child_lease(self, window: Area) -> Optional[Lease]:
        self._check_lease()
        if self._lease is None:
            return None
        return self._lease.narrow(window)

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        """
        Set the pixel at window-relative coordinates.

        Raises:
            OutOfBounds: If ``x >= width`` or ``y >= height``
            BorrowConflict: If the view was released or a narrowed view holds
                the coordinate
        """
        index = self._index(x, y)
        self._check_exclusive(Area(self._area.x + x, self._area.y + y, 1, 1))
        pixel.convert(self._pixel).write(self._channel, self._data[index:index + self._pixel.CHANNELS])

    def writable(self, area=None) -> "Write":
        """
        Narrow to a write-only sub-window under a child lease.

        Raises:
            OutOfBounds: If the sub-window exceeds this window
            BorrowConflict: If a sibling write view overlaps the sub-window
        """
        window = self._narrow(area)
        return Write(self._data, self._owner, window, self._channel, self._pixel, self._child_lease(window))

    def fill(self, pixel: Pixel) -> None:
        """Write ``pixel`` to every coordinate of the window."""
        self._check_exclusive(self._area)
        stored = self._channel.from_unit(pixel.convert(self._pixel).components())
        self._grid()[...] = stored

    def writable_array(self) -> np.ndarray:
        """Zero-copy writeable (height, width, channels) array of the window."""
        self._check_exclusive(self._area)
        return self._grid()

    def release(self) -> None:
        """End this view's lease; the view and its narrowed children become unusable."""
        if self._lease is not None:
            self._lease.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


class View(Read, Write):
    """A read-write window."""

    def view(self, area=None) -> "View":
        """Narrow to a read-write sub-window under a child lease."""
        window = self._narrow(area)
        return View(self._data, self._owner, window, self._channel, self._pixel, self._child_lease(window))

    def get(self, x: int, y: int) -> Pixel:
        self._check_lease()
        return super().get(x, y)
