"""
Picto_Libs - In-memory pixel buffer toolkit

This package contains the core functionality of Picto,
organized into specialized sub-packages:

- BufferLib: Areas, channel domains, pixel kinds, buffers and views
- ProcessingLib: Resampling kernels, scaling, flipping and rotation
- FormatLib: Format sniffing and Pillow-backed decoding into buffers
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
