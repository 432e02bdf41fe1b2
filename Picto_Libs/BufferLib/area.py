"""
Rectangle arithmetic for buffers and views.

Classes:
    Area: Immutable rectangle (x, y, width, height) in pixel-index space
    Builder: Partially specified Area, completed against an owner Area

Example:
    >>> owner = Area(0, 0, 50, 50)
    >>> window = Area.new(x=10, y=10, width=4).complete(owner)
    >>> window
    Area(x=10, y=10, width=4, height=40)
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator, Optional, Tuple

from Picto_Libs.errors import InvalidArgument

Coordinate = Tuple[int, int]


def _check_unsigned(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {value}")
    return int(value)


class _Coordinates:
    """Restartable row-major iterable over a rectangle's coordinates."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self._x = x
        self._y = y
        self._width = width
        self._height = height

    def __iter__(self) -> Iterator[Coordinate]:
        for y in range(self._y, self._y + self._height):
            for x in range(self._x, self._x + self._width):
                yield x, y

    def __len__(self) -> int:
        return self._width * self._height


@dataclass(frozen=True)
class Area:
    """An axis-aligned rectangle.

    An Area either describes the full extent of an owning buffer (``x`` and
    ``y`` are then 0) or a window inside that owner.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, _check_unsigned(name, getattr(self, name)))

    @staticmethod
    def new(
        x: Optional[int] = None,
        y: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> "Builder":
        """Start a builder; unset fields default to the owner's full extent."""
        return Builder(x=x, y=y, width=width, height=height)

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def size(self) -> int:
        """Number of pixels covered."""
        return self.width * self.height

    def absolute(self) -> _Coordinates:
        """Coordinates in owner space, row-major."""
        return _Coordinates(self.x, self.y, self.width, self.height)

    def relative(self) -> _Coordinates:
        """Coordinates relative to the window origin, row-major."""
        return _Coordinates(0, 0, self.width, self.height)

    def contains(self, other: "Area") -> bool:
        """Whether ``other`` (in the same coordinate space) lies fully inside."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.x + other.width <= self.x + self.width
            and other.y + other.height <= self.y + self.height
        )

    def overlaps(self, other: "Area") -> bool:
        if self.size == 0 or other.size == 0:
            return False
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )


@dataclass(frozen=True)
class Builder:
    """A set of optional Area overrides.

    Attributes:
        x: Horizontal offset, defaults to 0
        y: Vertical offset, defaults to 0
        width: Defaults to the space remaining from ``x`` to the owner's edge
        height: Defaults to the space remaining from ``y`` to the owner's edge
    """

    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def complete(self, owner: Area) -> Area:
        """
        Resolve the builder against an owner Area.

        The result is expressed in the same space as ``owner``'s size, i.e.
        relative to the owner's origin. Bounds are not checked here; callers
        creating windows check the completed Area against the owner.

        Args:
            owner: The Area whose extent provides the defaults

        Returns:
            A fully specified Area

        Raises:
            InvalidArgument: If a field is negative or not an integer
        """
        x = 0 if self.x is None else _check_unsigned("x", self.x)
        y = 0 if self.y is None else _check_unsigned("y", self.y)
        width = max(owner.width - x, 0) if self.width is None else self.width
        height = max(owner.height - y, 0) if self.height is None else self.height
        return Area(x, y, width, height)


def resolve(area, owner: Area) -> Area:
    """Accept ``None``, a Builder or an Area and return a completed Area."""
    if area is None:
        return Builder().complete(owner)
    if isinstance(area, Builder):
        return area.complete(owner)
    if isinstance(area, Area):
        return area
    raise InvalidArgument(f"expected Area or Builder, got {type(area)}")
