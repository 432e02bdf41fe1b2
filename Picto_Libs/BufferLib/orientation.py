"""Orientation used by flips and gradient fills."""

from enum import Enum


class Orientation(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


# Aliases reading naturally at call sites: flip(image, Vertically)
Vertically = Orientation.VERTICAL
Horizontally = Orientation.HORIZONTAL
