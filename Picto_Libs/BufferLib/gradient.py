"""
Colour gradients.

A Gradient is an ordered list of pixel stops spread evenly over the unit
interval. ``take(n)`` samples it at ``n`` evenly spaced positions including
both ends, which is what ``Buffer.from_gradient`` consumes.

Example:
    >>> gradient = Gradient([Luma(0.0), Luma(1.0)])
    >>> [px.luma for px in gradient.take(3)]
    [0.0, 0.5, 1.0]
"""

from typing import Iterator, List, Sequence

from Picto_Libs.BufferLib.pixel import Pixel
from Picto_Libs.errors import InvalidArgument


class Gradient:
    def __init__(self, stops: Sequence[Pixel]):
        if not stops:
            raise InvalidArgument("Gradient requires at least one stop")
        kind = type(stops[0])
        self._stops: List[Pixel] = [stop.convert(kind) for stop in stops]

    @property
    def kind(self):
        return type(self._stops[0])

    def get(self, position: float) -> Pixel:
        """Colour at ``position`` in [0, 1]; values outside are clamped."""
        position = min(max(float(position), 0.0), 1.0)
        if len(self._stops) == 1:
            return self._stops[0]

        segments = len(self._stops) - 1
        scaled = position * segments
        index = min(int(scaled), segments - 1)
        return self._stops[index].mix(self._stops[index + 1], scaled - index)

    def take(self, count: int) -> Iterator[Pixel]:
        """Yield ``count`` evenly spaced samples from start to end."""
        if count <= 0:
            return
        if count == 1:
            yield self.get(0.0)
            return
        for step in range(count):
            yield self.get(step / (count - 1))
