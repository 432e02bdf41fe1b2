"""
ProcessingLib - Geometric transforms and resampling

This module provides the resampling kernels, the separable scaler and
the flip/rotate transforms for Picto.
"""

from Picto_Libs.ProcessingLib.sampler import (
    Sampler,
    Nearest,
    Linear,
    Cubic,
    Gaussian,
    Lanczos2,
    Lanczos3,
)
from Picto_Libs.ProcessingLib.sampler_registry import (
    SamplerRegistry,
    get_default_registry,
    resolve_sampler,
)
from Picto_Libs.ProcessingLib.scaler import ScaleConfig, scale, scale_by, execute_scale
from Picto_Libs.ProcessingLib.flip import flip
from Picto_Libs.ProcessingLib.rotate import rotate

__all__ = [
    "Sampler",
    "Nearest",
    "Linear",
    "Cubic",
    "Gaussian",
    "Lanczos2",
    "Lanczos3",
    "SamplerRegistry",
    "get_default_registry",
    "resolve_sampler",
    "ScaleConfig",
    "scale",
    "scale_by",
    "execute_scale",
    "flip",
    "rotate",
]
