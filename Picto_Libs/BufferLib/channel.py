"""
Channel value domains.

A channel is one scalar component of a pixel. Each domain knows its numpy
dtype and how to move values to and from the canonical unit-interval float64
representation used by pixels, kernels and colour conversion.

Domains:
    U8: 8-bit unsigned integers, 0-255
    U16: 16-bit unsigned integers, 0-65535
    F32: 32-bit floats, unit interval stored as-is
    F64: 64-bit floats, unit interval stored as-is
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np

from Picto_Libs.errors import InvalidArgument


@dataclass(frozen=True)
class Channel:
    """A channel domain.

    Attributes:
        name: Short identifier ('u8', 'u16', 'f32', 'f64')
        dtype: numpy dtype used for storage
        maximum: Largest storable value for integer domains, 1.0 for floats
    """

    name: str
    dtype: np.dtype
    maximum: float

    @property
    def is_float(self) -> bool:
        return np.issubdtype(self.dtype, np.floating)

    @property
    def zero(self):
        return self.dtype.type(0)

    def to_unit(self, values) -> np.ndarray:
        """Convert stored channel values to float64 in the unit interval."""
        array = np.asarray(values)
        if self.is_float:
            return array.astype(np.float64)
        return array.astype(np.float64) / self.maximum

    def from_unit(self, values) -> np.ndarray:
        """
        Convert unit-interval floats to stored channel values.

        Integer domains clamp to [0, 1] and round to the nearest step,
        element by element. Float domains store the values unchanged.
        """
        array = np.asarray(values, dtype=np.float64)
        if self.is_float:
            return array.astype(self.dtype)
        scaled = np.rint(np.clip(array, 0.0, 1.0) * self.maximum)
        return scaled.astype(self.dtype)

    def allocate(self, length: int) -> np.ndarray:
        return np.zeros(length, dtype=self.dtype)

    def __repr__(self) -> str:
        return f"Channel({self.name})"


U8 = Channel("u8", np.dtype(np.uint8), 255.0)
U16 = Channel("u16", np.dtype(np.uint16), 65535.0)
F32 = Channel("f32", np.dtype(np.float32), 1.0)
F64 = Channel("f64", np.dtype(np.float64), 1.0)

CHANNELS: Dict[str, Channel] = {channel.name: channel for channel in (U8, U16, F32, F64)}


def get_channel(name) -> Channel:
    """Look up a channel domain by name; Channel instances pass through."""
    if isinstance(name, Channel):
        return name
    key = str(name).strip().lower()
    if key not in CHANNELS:
        raise InvalidArgument(
            f"Unknown channel: {name}. Valid channels: {', '.join(sorted(CHANNELS))}"
        )
    return CHANNELS[key]


def for_dtype(dtype) -> Channel:
    """Find the channel domain storing values of ``dtype``."""
    dtype = np.dtype(dtype)
    for channel in CHANNELS.values():
        if channel.dtype == dtype:
            return channel
    raise InvalidArgument(f"No channel domain for dtype {dtype}")
