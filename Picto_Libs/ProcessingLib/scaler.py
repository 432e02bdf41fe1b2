"""
Separable image scaling.

The scaler resizes a source view into a newly allocated Buffer in two 1-D
passes: horizontally into an intermediate float array of
(source_height, target_width), then vertically into (target_height,
target_width).

For every output index ``i`` along an axis:

1. ``center = (i + 0.5) * (source_size / target_size) - 0.5``
2. contributors are ``floor(center - support) .. ceil(center + support)``,
   clamped to ``0 .. source_size - 1``
3. each contributor is weighted by ``kernel(center - j)`` and the sum is
   normalised by the weights actually used
4. the result is converted back into the destination channel domain,
   channel by channel

Nearest skips the weighting and looks up
``min(floor((i + 0.5) * source_size / target_size), source_size - 1)``.

Example:
    >>> image = Buffer(320, 240, U8, Rgba)
    >>> half = scale(image, 160, 120, "lanczos3")
    >>> half.dimensions
    (160, 120)
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, List, Optional, Tuple
import logging
import math

import numpy as np

from Picto_Libs.BufferLib.buffer import Buffer
from Picto_Libs.BufferLib.channel import get_channel
from Picto_Libs.BufferLib.pixel import convert_array, get_pixel
from Picto_Libs.BufferLib.view import Read, convert_window
from Picto_Libs.ProcessingLib.sampler import Nearest, Sampler
from Picto_Libs.ProcessingLib.sampler_registry import resolve_sampler
from Picto_Libs.constants import DEFAULT_SAMPLER
from Picto_Libs.errors import InvalidArgument

logger = logging.getLogger(__name__)

# (first source index, normalised weights) for one output index
Contribution = Tuple[int, np.ndarray]


def as_readable(source: Any) -> Read:
    """Accept a Buffer or a readable view."""
    if isinstance(source, Read):
        return source
    if isinstance(source, Buffer):
        return source.readable()
    raise InvalidArgument(f"Expected Buffer or readable view, got {type(source)}")


def _check_size(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgument(f"{name} must be > 0, got {value}")
    return int(value)


def contributions(source_size: int, target_size: int, sampler: Sampler) -> List[Contribution]:
    """
    Compute the contributing source samples for each output index.

    Args:
        source_size: Number of samples along the source axis
        target_size: Number of samples along the target axis
        sampler: Kernel providing ``support()`` and ``kernel()``

    Returns:
        One ``(start, weights)`` pair per output index; weights sum to 1
    """
    ratio = source_size / target_size
    support = sampler.support()
    result = []

    for index in range(target_size):
        center = (index + 0.5) * ratio - 0.5
        start = max(math.floor(center - support), 0)
        end = min(math.ceil(center + support), source_size - 1)

        weights = sampler.kernel(center - np.arange(start, end + 1, dtype=np.float64))
        total = weights.sum()

        if total == 0.0:
            # Every weight fell on a kernel zero; use the closest sample.
            start = min(max(int(round(center)), 0), source_size - 1)
            weights = np.ones(1, dtype=np.float64)
        else:
            weights = weights / total

        result.append((start, weights))

    return result


def _horizontal(data: np.ndarray, plan: List[Contribution]) -> np.ndarray:
    height, _, channels = data.shape
    out = np.empty((height, len(plan), channels), dtype=np.float64)
    for x, (start, weights) in enumerate(plan):
        block = data[:, start:start + weights.size, :]
        out[:, x, :] = np.tensordot(block, weights, axes=([1], [0]))
    return out


def _vertical(data: np.ndarray, plan: List[Contribution]) -> np.ndarray:
    _, width, channels = data.shape
    out = np.empty((len(plan), width, channels), dtype=np.float64)
    for y, (start, weights) in enumerate(plan):
        block = data[start:start + weights.size, :, :]
        out[y, :, :] = np.tensordot(weights, block, axes=([0], [0]))
    return out


def nearest_indices(source_size: int, target_size: int) -> np.ndarray:
    ratio = source_size / target_size
    indices = np.floor((np.arange(target_size, dtype=np.float64) + 0.5) * ratio).astype(np.int64)
    return np.minimum(indices, source_size - 1)


def scale(
    source: Any,
    width: int,
    height: int,
    sampler: Any = DEFAULT_SAMPLER,
    channel: Any = None,
    pixel: Any = None,
) -> Buffer:
    """
    Resample ``source`` into a new ``width`` x ``height`` Buffer.

    Args:
        source: Buffer or readable view
        width: Target width (> 0)
        height: Target height (> 0)
        sampler: Sampler instance, Sampler class or registered name
        channel: Target channel domain (default: the source's)
        pixel: Target pixel kind (default: the source's)

    Returns:
        A newly allocated Buffer

    Raises:
        InvalidArgument: If a target dimension is zero or the source is empty
    """
    view = as_readable(source)
    width = _check_size("width", width)
    height = _check_size("height", height)
    if view.width == 0 or view.height == 0:
        raise InvalidArgument(f"cannot scale an empty {view.width}x{view.height} source")

    sampler = resolve_sampler(sampler)
    target_channel = view.channel if channel is None else get_channel(channel)
    target_pixel = view.pixel if pixel is None else get_pixel(pixel)
    grid = view.as_array()

    if isinstance(sampler, Nearest):
        xs = nearest_indices(view.width, width)
        ys = nearest_indices(view.height, height)
        picked = grid[ys[:, None], xs[None, :], :]
        data = convert_window(picked, view.channel, view.pixel, target_channel, target_pixel)
        return Buffer.from_raw(width, height, data, target_channel, target_pixel)

    unit = view.channel.to_unit(grid)
    unit = _horizontal(unit, contributions(view.width, width, sampler))
    unit = _vertical(unit, contributions(view.height, height, sampler))

    rows = convert_array(unit.reshape(-1, view.pixel.CHANNELS), view.pixel, target_pixel)
    data = target_channel.from_unit(rows).reshape(-1)
    return Buffer.from_raw(width, height, data, target_channel, target_pixel)


def scale_by(
    source: Any,
    factor: float,
    sampler: Any = DEFAULT_SAMPLER,
    channel: Any = None,
    pixel: Any = None,
) -> Buffer:
    """
    Resample by a uniform factor; each dimension is rounded and kept >= 1.

    Raises:
        InvalidArgument: If factor <= 0
    """
    if not factor > 0:
        raise InvalidArgument(f"factor must be > 0, got {factor}")

    view = as_readable(source)
    width = max(1, int(round(view.width * factor)))
    height = max(1, int(round(view.height * factor)))
    return scale(view, width, height, sampler, channel, pixel)


@dataclass
class ScaleConfig:
    """Configuration for a scale operation.

    Attributes:
        width: Target width in pixels
        height: Target height in pixels
        sampler: Registered sampler name ('nearest', 'linear', 'cubic',
                 'gaussian', 'lanczos2', 'lanczos3')
        channel: Target channel name or None to keep the source's
        pixel: Target pixel kind name or None to keep the source's
    """
    width: int
    height: int
    sampler: str = DEFAULT_SAMPLER
    channel: Optional[str] = None
    pixel: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "sampler": self.sampler,
            "channel": self.channel,
            "pixel": self.pixel,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScaleConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items()
                    if k in cls.__dataclass_fields__}
        return cls(**filtered)


def execute_scale(config: ScaleConfig, source: Any) -> Buffer:
    """Run :func:`scale` with the parameters of ``config``."""
    logger.debug(
        f"Scaling to {config.width}x{config.height} with sampler '{config.sampler}'"
    )
    return scale(
        source,
        config.width,
        config.height,
        sampler=config.sampler,
        channel=config.channel,
        pixel=config.pixel,
    )
