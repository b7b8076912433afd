"""Error types raised by the mosaic pipeline.

Every failure is fatal. Each error records the pipeline stage it came from
so the command line can tell the user where things went wrong.
"""

ARGUMENTS = "arguments"
DECODE = "decode"
GENERATE = "generate"
WRITE = "write"


class MosaicError(Exception):
    """Base class for all pipeline failures."""

    stage = "mosaic"

    def __str__(self) -> str:
        return f"{self.stage}: {super().__str__()}"


class MissingArgumentError(MosaicError):
    stage = ARGUMENTS


class InvalidNumericArgumentError(MosaicError):
    """A count or height was not a number, or not positive."""

    stage = ARGUMENTS


class FileOpenError(MosaicError):
    stage = DECODE


class ImageDecodeError(MosaicError):
    """The input is not a readable PNG."""

    stage = DECODE


class UnsupportedBitDepthError(MosaicError):
    stage = DECODE


class UnsupportedColorEncodingError(MosaicError):
    stage = DECODE


class InvalidInputError(MosaicError):
    """Grid parameters were asked for with non-positive dimensions."""

    stage = GENERATE


class EmptyImageError(MosaicError):
    stage = GENERATE


class DocumentWriteError(MosaicError):
    stage = WRITE
