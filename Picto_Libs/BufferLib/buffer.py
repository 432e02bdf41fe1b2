"""
Owned pixel storage.

A Buffer owns a flat numpy array of ``width * height * pixel.CHANNELS``
values in its channel domain, together with an Area describing its full
extent. Views borrow that array; write-capable views are tracked so that two
of them never overlap.

Example:
    >>> image = Buffer(2, 2, U8, Rgb)
    >>> image.set(0, 0, Rgb(1.0, 0.0, 1.0))
    >>> image.get(0, 0)
    Rgb(red=1.0, green=0.0, blue=1.0)
    >>> with image.writable(Area.new(y=1)) as bottom:
    ...     bottom.fill(Rgb(1.0, 1.0, 1.0))
"""

from typing import Any, Callable, Iterator, Tuple, Type

import numpy as np

from Picto_Libs.BufferLib.area import Area, resolve
from Picto_Libs.BufferLib.borrow import BorrowTracker
from Picto_Libs.BufferLib.channel import U8, Channel, get_channel
from Picto_Libs.BufferLib.gradient import Gradient
from Picto_Libs.BufferLib.orientation import Orientation
from Picto_Libs.BufferLib.pixel import Pixel, Rgb, get_pixel
from Picto_Libs.BufferLib.view import Read, View, Write, convert_window
from Picto_Libs.errors import (
    BorrowConflict,
    DimensionMismatch,
    InvalidArgument,
    OutOfBounds,
)


class Buffer:
    """Owned image storage of a given channel domain and pixel kind."""

    def __init__(self, width: int, height: int, channel: Any = U8, pixel: Any = Rgb):
        """
        Allocate a buffer with every channel set to zero.

        Args:
            width: Width in pixels
            height: Height in pixels
            channel: Channel domain or its name (default U8)
            pixel: Pixel kind or its name (default Rgb)

        Raises:
            InvalidArgument: If a dimension is negative or not an integer
        """
        self._area = Area(0, 0, width, height)
        self._channel = get_channel(channel)
        self._pixel = get_pixel(pixel)
        self._data = self._channel.allocate(width * height * self._pixel.CHANNELS)
        self._borrows = BorrowTracker()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_pixel(cls, width: int, height: int, pixel: Pixel, channel: Any = U8) -> "Buffer":
        """Allocate a buffer of ``type(pixel)`` filled with ``pixel``."""
        buffer = cls(width, height, channel, type(pixel))
        buffer.fill(pixel)
        return buffer

    @classmethod
    def from_fn(
        cls,
        width: int,
        height: int,
        func: Callable[[int, int], Pixel],
        channel: Any = U8,
        pixel: Any = Rgb,
    ) -> "Buffer":
        """
        Allocate a buffer filled by calling ``func(x, y)`` for each pixel.

        ``func`` is called exactly once per coordinate in row-major order,
        so stateful generators see a predictable sequence.
        """
        buffer = cls(width, height, channel, pixel)
        for x, y in buffer.area.absolute():
            buffer.set(x, y, func(x, y))
        return buffer

    @classmethod
    def from_gradient(
        cls,
        width: int,
        height: int,
        orientation: Orientation,
        gradient: Gradient,
        channel: Any = U8,
    ) -> "Buffer":
        """
        Allocate a buffer filled with a gradient.

        ``Orientation.VERTICAL`` varies the colour from top to bottom,
        ``Orientation.HORIZONTAL`` from left to right.
        """
        buffer = cls(width, height, channel, gradient.kind)

        if orientation is Orientation.VERTICAL:
            for y, px in zip(range(height), gradient.take(height)):
                with buffer.writable(Area.new(y=y, height=1)) as row:
                    row.fill(px)
        elif orientation is Orientation.HORIZONTAL:
            for x, px in zip(range(width), gradient.take(width)):
                with buffer.writable(Area.new(x=x, width=1)) as column:
                    column.fill(px)
        else:
            raise InvalidArgument(f"Unknown orientation: {orientation}")

        return buffer

    @classmethod
    def from_raw(cls, width: int, height: int, data, channel: Any = U8, pixel: Any = Rgb) -> "Buffer":
        """
        Use existing channel values as backing storage.

        A one-dimensional numpy array of the channel's dtype is wrapped
        without copying; other sequences are copied into a new array.

        Raises:
            DimensionMismatch: If ``len(data) != width * height * channels``
        """
        channel = get_channel(channel)
        pixel = get_pixel(pixel)
        array = np.asarray(data, dtype=channel.dtype).reshape(-1)

        if width * height * pixel.CHANNELS != array.size:
            raise DimensionMismatch(width, height, pixel.CHANNELS, array.size)

        buffer = cls.__new__(cls)
        buffer._area = Area(0, 0, width, height)
        buffer._channel = channel
        buffer._pixel = pixel
        buffer._data = array
        buffer._borrows = BorrowTracker()
        return buffer

    @classmethod
    def from_window(cls, window: Read, channel: Any = None, pixel: Any = None) -> "Buffer":
        """Copy a view's window into a new buffer, converting if requested."""
        channel = window.channel if channel is None else get_channel(channel)
        pixel = window.pixel if pixel is None else get_pixel(pixel)
        data = convert_window(window.as_array(), window.channel, window.pixel, channel, pixel)
        return cls.from_raw(window.width, window.height, data, channel, pixel)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def area(self) -> Area:
        return self._area

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

    def _storage(self) -> np.ndarray:
        # Read-only while write views are live so they keep exclusive access
        if not self._borrows.active():
            return self._data
        data = self._data.view()
        data.flags.writeable = False
        return data

    def into_raw(self) -> np.ndarray:
        """
        The backing storage, as a flat array.

        The array is writeable only while no write view is live.
        """
        return self._storage()

    def as_array(self) -> np.ndarray:
        """
        Zero-copy (height, width, channels) array over the storage.

        The array is writeable only while no write view is live.
        """
        return self._storage().reshape(self.height, self.width, self._pixel.CHANNELS)

    def __len__(self) -> int:
        return self._data.size

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------

    def _index(self, x: int, y: int) -> int:
        if x < 0 or y < 0 or x >= self._area.width or y >= self._area.height:
            raise OutOfBounds(
                f"out of bounds: ({x}, {y}) outside {self._area.width}x{self._area.height}"
            )
        return self._pixel.CHANNELS * (y * self._area.width + x)

    def get(self, x: int, y: int) -> Pixel:
        """
        Get the pixel at the given coordinates.

        Raises:
            OutOfBounds: If ``x >= width`` or ``y >= height``
        """
        index = self._index(x, y)
        return self._pixel.read(self._channel, self._data[index:index + self._pixel.CHANNELS])

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        """
        Set the pixel at the given coordinates.

        Pixels of another kind are converted first.

        Raises:
            OutOfBounds: If ``x >= width`` or ``y >= height``
            BorrowConflict: If a live write view covers the coordinate
        """
        index = self._index(x, y)
        if self._borrows.is_borrowed(x, y):
            raise BorrowConflict(f"({x}, {y}) is borrowed by a live write view")
        pixel.convert(self._pixel).write(
            self._channel, self._data[index:index + self._pixel.CHANNELS]
        )

    def fill(self, pixel: Pixel) -> None:
        """Fill the whole buffer with ``pixel``."""
        if self._borrows.active():
            raise BorrowConflict("buffer has live write views")
        stored = self._channel.from_unit(pixel.convert(self._pixel).components())
        self._data.reshape(self.height, self.width, self._pixel.CHANNELS)[...] = stored

    def pixels(self) -> Iterator[Tuple[int, int, Pixel]]:
        """Iterate ``(x, y, pixel)`` in row-major order."""
        for x, y in self._area.absolute():
            yield x, y, self.get(x, y)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def _window(self, area) -> Area:
        window = resolve(area, self._area)
        if window.x + window.width > self._area.width or window.y + window.height > self._area.height:
            raise OutOfBounds(f"out of bounds: {window} exceeds {self.width}x{self.height}")
        return window

    def readable(self, area=None) -> Read:
        """
        Get a read-only view of ``area`` (default: the whole buffer).

        Raises:
            OutOfBounds: If the window exceeds the buffer
        """
        return Read(self._data, self._area, self._window(area), self._channel, self._pixel)

    def writable(self, area=None) -> Write:
        """
        Get a write-only view of ``area`` (default: the whole buffer).

        Raises:
            OutOfBounds: If the window exceeds the buffer
            BorrowConflict: If a live write view overlaps the window
        """
        window = self._window(area)
        lease = self._borrows.acquire(window)
        return Write(self._data, self._area, window, self._channel, self._pixel, lease)

    def view(self, area=None) -> View:
        """
        Get a read-write view of ``area`` (default: the whole buffer).

        Raises:
            OutOfBounds: If the window exceeds the buffer
            BorrowConflict: If a live write view overlaps the window
        """
        window = self._window(area)
        lease = self._borrows.acquire(window)
        return View(self._data, self._area, window, self._channel, self._pixel, lease)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert(self, channel: Any = None, pixel: Any = None) -> "Buffer":
        """
        Convert to a new buffer with another channel domain and/or pixel kind.

        Args:
            channel: Target channel domain (default: unchanged)
            pixel: Target pixel kind (default: unchanged)

        Returns:
            A new Buffer of the same dimensions
        """
        return Buffer.from_window(self.readable(), channel=channel, pixel=pixel)

    def copy(self) -> "Buffer":
        return Buffer.from_raw(self.width, self.height, self._data.copy(), self._channel, self._pixel)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return (
            self._area == other._area
            and self._channel == other._channel
            and self._pixel is other._pixel
            and np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Buffer({self.width}x{self.height}, {self._channel.name}, {self._pixel.__name__})"
