"""
Pixel kinds and their conversions.

A pixel is a fixed-arity group of channel components held as floats in the
canonical unit interval. Pixels are read from and written to flat channel
slices through a Channel domain, so the same pixel kind works for 8-bit,
16-bit and floating storage.

Classes:
    Pixel: Base class with read/write/convert/mix capabilities
    Rgb, Rgba, Luma, Lumaa: The four canonical pixel kinds

Functions:
    convert_array: Vectorised conversion of unit-interval rows between kinds
    get_pixel: Look up a pixel kind by name
"""

from dataclasses import astuple, dataclass
from typing import ClassVar, Dict, Tuple, Type

import numpy as np

from Picto_Libs.BufferLib.channel import Channel
from Picto_Libs.constants import LUMA_WEIGHTS
from Picto_Libs.errors import InvalidArgument


@dataclass(frozen=True)
class Pixel:
    CHANNELS: ClassVar[int] = 0
    COLOR: ClassVar[int] = 0
    HAS_ALPHA: ClassVar[bool] = False

    @classmethod
    def channels(cls) -> int:
        return cls.CHANNELS

    @classmethod
    def read(cls, channel: Channel, values) -> "Pixel":
        """Build a pixel from the first ``CHANNELS`` values of a channel slice."""
        if len(values) < cls.CHANNELS:
            raise InvalidArgument(
                f"{cls.__name__} needs {cls.CHANNELS} channel values, got {len(values)}"
            )
        unit = channel.to_unit(values[:cls.CHANNELS])
        return cls(*(float(value) for value in unit))

    @classmethod
    def from_unit(cls, values) -> "Pixel":
        return cls(*(float(value) for value in values))

    def components(self) -> Tuple[float, ...]:
        return astuple(self)

    def write(self, channel: Channel, out) -> None:
        """Serialise into the first ``CHANNELS`` slots of ``out``."""
        out[:self.CHANNELS] = channel.from_unit(self.components())

    def convert(self, kind: Type["Pixel"]) -> "Pixel":
        """Convert to another pixel kind."""
        if kind is type(self):
            return self
        row = np.asarray([self.components()], dtype=np.float64)
        return kind.from_unit(convert_array(row, type(self), kind)[0])

    def mix(self, other: "Pixel", factor: float) -> "Pixel":
        """Linear interpolation towards ``other``; 0 keeps self, 1 gives other."""
        other = other.convert(type(self))
        return type(self)(*(
            a + (b - a) * factor
            for a, b in zip(self.components(), other.components())
        ))


@dataclass(frozen=True)
class Rgb(Pixel):
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    CHANNELS: ClassVar[int] = 3
    COLOR: ClassVar[int] = 3


@dataclass(frozen=True)
class Rgba(Pixel):
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    CHANNELS: ClassVar[int] = 4
    COLOR: ClassVar[int] = 3
    HAS_ALPHA: ClassVar[bool] = True


@dataclass(frozen=True)
class Luma(Pixel):
    luma: float = 0.0

    CHANNELS: ClassVar[int] = 1
    COLOR: ClassVar[int] = 1


@dataclass(frozen=True)
class Lumaa(Pixel):
    luma: float = 0.0
    alpha: float = 1.0

    CHANNELS: ClassVar[int] = 2
    COLOR: ClassVar[int] = 1
    HAS_ALPHA: ClassVar[bool] = True


PIXELS: Dict[str, Type[Pixel]] = {
    "rgb": Rgb,
    "rgba": Rgba,
    "luma": Luma,
    "lumaa": Lumaa,
}


def get_pixel(name) -> Type[Pixel]:
    """Look up a pixel kind by name; Pixel classes pass through."""
    if isinstance(name, type) and issubclass(name, Pixel):
        return name
    key = str(name).strip().lower()
    if key not in PIXELS:
        raise InvalidArgument(
            f"Unknown pixel kind: {name}. Valid kinds: {', '.join(sorted(PIXELS))}"
        )
    return PIXELS[key]


def convert_array(unit: np.ndarray, source: Type[Pixel], target: Type[Pixel]) -> np.ndarray:
    """
    Convert rows of unit-interval components from one pixel kind to another.

    Args:
        unit: Array of shape (N, source.CHANNELS), float64
        source: Pixel kind of the rows
        target: Pixel kind to produce

    Returns:
        Array of shape (N, target.CHANNELS). When the kinds match the input
        array itself is returned.
    """
    if source is target:
        return unit

    color = unit[:, :source.COLOR]
    if source.HAS_ALPHA:
        alpha = unit[:, source.COLOR:source.COLOR + 1]
    else:
        alpha = np.ones((unit.shape[0], 1), dtype=unit.dtype)

    if source.COLOR == 3 and target.COLOR == 1:
        color = color @ np.asarray(LUMA_WEIGHTS, dtype=np.float64).reshape(3, 1)
    elif source.COLOR == 1 and target.COLOR == 3:
        color = np.repeat(color, 3, axis=1)

    if target.HAS_ALPHA:
        return np.concatenate([color, alpha], axis=1)
    return np.ascontiguousarray(color)
