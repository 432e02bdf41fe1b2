"""
Error types for Picto Libs.

Two tiers are distinguished:

- Contract violations (``ContractViolation`` and subclasses) signal a bug in
  the caller: out-of-bounds coordinates, windows exceeding their owner,
  overlapping write views, invalid rotation degrees or zero scale targets.
  They are raised immediately and are not meant to be caught.
- Data errors (``PictoError`` and subclasses) describe bad input such as raw
  storage of the wrong length or an undecodable image. Callers may handle
  them; nothing here retries.
"""


class ContractViolation(AssertionError):
    """A precondition of the API was broken by the caller."""


class OutOfBounds(ContractViolation, IndexError):
    """A coordinate or window lies outside its owner."""

    def __init__(self, message: str = "out of bounds"):
        super().__init__(message)


class BorrowConflict(ContractViolation):
    """A write view was requested over a region already borrowed for writing."""


class InvalidArgument(ContractViolation, ValueError):
    """An argument is outside the domain the operation accepts."""


class PictoError(Exception):
    """Base class for recoverable data and environment errors."""


class DimensionMismatch(PictoError, ValueError):
    """Raw storage length does not match ``width * height * channels``."""

    def __init__(self, width: int, height: int, channels: int, length: int):
        self.width = width
        self.height = height
        self.channels = channels
        self.length = length
        super().__init__(
            f"expected {width * height * channels} channel values for "
            f"{width}x{height}x{channels}, got {length}"
        )


class UnsupportedFormat(PictoError):
    """The data is not a recognised image format, or no decoder is enabled for it."""

    def __init__(self, message: str = "unsupported image format"):
        super().__init__(message)


class DecodeFailed(PictoError):
    """A recognised image could not be decoded."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"decode failed: {reason}")
