"""Georeferenced RGBA raster buffers and great-circle distances."""
from rastermap.errors import (
    InvalidColorError,
    InvalidExtentError,
    InvalidPixelSizeError,
    OutOfBoundsError,
    RasterMapError,
)
from rastermap.geodesy import deg2rad, great_circle_distance
from rastermap.points import GeoPoint, RasterPoint, Sampling
from rastermap.raster_map import RasterMap

__all__ = [
    'GeoPoint',
    'RasterPoint',
    'Sampling',
    'RasterMap',
    'deg2rad',
    'great_circle_distance',
    'RasterMapError',
    'OutOfBoundsError',
    'InvalidColorError',
    'InvalidExtentError',
    'InvalidPixelSizeError',
]
