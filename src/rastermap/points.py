"""Point containers used across the geodesy and raster modules.

Holds small immutable value types plus the sampling mode used when a
geographic position is turned into a raster position.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


Number = Union[int, float]


@dataclass(frozen=True)
class GeoPoint:
    """Geographic position in degrees."""
    lat: float
    lon: float


@dataclass(frozen=True)
class RasterPoint:
    """Raster position, origin top-left, y increasing downward.

    Coordinates are ints for pixel indices and floats for sub-pixel positions.
    """
    x: Number
    y: Number


class Sampling(Enum):
    """How a geographic position is snapped onto the raster grid."""
    NEAREST_NEIGHBOR = 'nearest_neighbor'
    EXACT = 'exact'
