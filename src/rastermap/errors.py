"""Exceptions raised by rastermap.

Every error derives from `RasterMapError` and from the builtin a caller would
naturally catch for it (IndexError for positions, ValueError for bad values).
"""


class RasterMapError(Exception):
    """Base class for all rastermap errors."""


class OutOfBoundsError(RasterMapError, IndexError):
    """A geographic or raster position lies outside the map."""


class InvalidColorError(RasterMapError, ValueError):
    """A color does not fit the RGBA layout of the buffer."""


class InvalidExtentError(RasterMapError, ValueError):
    """The bounding corners do not describe a south-west/north-east rectangle."""


class InvalidPixelSizeError(RasterMapError, ValueError):
    """The requested raster size is not a positive integer."""
