"""
Resampling kernels.

Each sampler exposes two pure functions of a distance ``d`` measured in
source pixels:

- ``support()``: radius beyond which the kernel is zero
- ``kernel(d)``: filter weight at ``d``; accepts a float or a numpy array

Samplers:
    Nearest: Box of radius 0.5
    Linear: Triangle, 1 - |d|
    Cubic: Catmull-Rom cubic (Keys, a = -0.5)
    Gaussian: Normalised Gaussian cut off at 3 sigma
    Lanczos2: sinc(d) * sinc(d / 2) inside |d| < 2
    Lanczos3: sinc(d) * sinc(d / 3) inside |d| < 3

Example:
    >>> Linear().kernel(0.25)
    0.75
    >>> Lanczos3().support()
    3.0
"""

import math

import numpy as np

from Picto_Libs.constants import CUBIC_A, GAUSSIAN_CUTOFF, GAUSSIAN_SIGMA
from Picto_Libs.errors import InvalidArgument


def sinc(value):
    """Normalised sinc: sin(pi x) / (pi x), 1 at x = 0."""
    return np.sinc(value)


class Sampler:
    """Base class for kernels; subclasses implement ``_weights``."""

    name = ""

    def support(self) -> float:
        raise NotImplementedError

    def _weights(self, distance: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def kernel(self, distance):
        array = np.asarray(distance, dtype=np.float64)
        weights = self._weights(array)
        if array.ndim == 0:
            return float(weights)
        return weights

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Nearest(Sampler):
    name = "nearest"

    def support(self) -> float:
        return 0.5

    def _weights(self, distance):
        return np.where(np.abs(distance) <= 0.5, 1.0, 0.0)


class Linear(Sampler):
    name = "linear"

    def support(self) -> float:
        return 1.0

    def _weights(self, distance):
        return np.maximum(1.0 - np.abs(distance), 0.0)


class Cubic(Sampler):
    """Keys cubic convolution; ``a = -0.5`` gives Catmull-Rom."""

    name = "cubic"

    def __init__(self, a: float = CUBIC_A):
        self.a = float(a)

    def support(self) -> float:
        return 2.0

    def _weights(self, distance):
        a = self.a
        x = np.abs(distance)
        x2 = x * x
        x3 = x2 * x
        near = (a + 2.0) * x3 - (a + 3.0) * x2 + 1.0
        far = a * x3 - 5.0 * a * x2 + 8.0 * a * x - 4.0 * a
        return np.where(x < 1.0, near, np.where(x < 2.0, far, 0.0))

    def __repr__(self) -> str:
        return f"Cubic(a={self.a})"


class Gaussian(Sampler):
    name = "gaussian"

    def __init__(self, sigma: float = GAUSSIAN_SIGMA):
        if not sigma > 0:
            raise InvalidArgument(f"sigma must be > 0, got {sigma}")
        self.sigma = float(sigma)

    def support(self) -> float:
        return GAUSSIAN_CUTOFF * self.sigma

    def _weights(self, distance):
        sigma = self.sigma
        weights = np.exp(-(distance * distance) / (2.0 * sigma * sigma))
        weights = weights / (sigma * math.sqrt(2.0 * math.pi))
        return np.where(np.abs(distance) <= self.support(), weights, 0.0)

    def __repr__(self) -> str:
        return f"Gaussian(sigma={self.sigma})"


class _Lanczos(Sampler):
    lobes = 0

    def support(self) -> float:
        return float(self.lobes)

    def _weights(self, distance):
        lobes = self.lobes
        return np.where(
            np.abs(distance) < lobes,
            sinc(distance) * sinc(distance / lobes),
            0.0,
        )


class Lanczos2(_Lanczos):
    name = "lanczos2"
    lobes = 2


class Lanczos3(_Lanczos):
    name = "lanczos3"
    lobes = 3


SAMPLERS = (Nearest, Linear, Cubic, Gaussian, Lanczos2, Lanczos3)
