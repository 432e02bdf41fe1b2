"""
Constants and configuration values for Picto Libs.

This module centralizes the defaults and tuning values used by the
buffer, processing and format sub-packages.
"""

# Resampling
DEFAULT_SAMPLER = "linear"
CUBIC_A = -0.5  # Catmull-Rom
GAUSSIAN_SIGMA = 0.5
GAUSSIAN_CUTOFF = 3.0  # support, in sigmas

# Geometry
ROTATION_STEP = 90
FULL_TURN = 360

# Colour conversion (Rec. 709 luma)
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Format names, as reported by Format.value
FORMAT_PNG = "png"
FORMAT_JPEG = "jpeg"
FORMAT_GIF = "gif"
FORMAT_WEBP = "webp"
FORMAT_TIFF = "tiff"
FORMAT_BMP = "bmp"
FORMAT_ICO = "ico"
FORMAT_HDR = "hdr"

# Formats the Pillow decoder is allowed to handle
ENABLED_DECODERS = frozenset({
    FORMAT_PNG,
    FORMAT_JPEG,
    FORMAT_GIF,
    FORMAT_WEBP,
    FORMAT_TIFF,
    FORMAT_BMP,
    FORMAT_ICO,
})

# Pillow modes mapped onto the canonical pixel kinds
PILLOW_MODE_RGB = "RGB"
PILLOW_MODE_RGBA = "RGBA"
PILLOW_MODE_LUMA = "L"
PILLOW_MODE_LUMAA = "LA"
PILLOW_MODE_LUMA16 = "I;16"
PILLOW_MODE_INT = "I"
PILLOW_MODE_FLOAT = "F"
