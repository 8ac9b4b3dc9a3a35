"""
raster_map.py

RGBA raster backed by a flat numpy buffer, georeferenced over a
latitude/longitude rectangle with an equirectangular approximation.

The map uses the center-pixel convention: raster position (x, y) refers to
the geographic point at the center of that pixel. Row 0 is the northern edge.

Public API:
- `RasterMap(min_pt, max_pt, longest_pixel_size, alpha_to_max=True)`
- `geo_pos_to_raster_pos(geo_pos, sampling)` -> RasterPoint
- `raster_pos_to_geo_pos(raster_pos)` -> GeoPoint
- `raster_position_to_buffer_position(raster_pos)` -> int
- `set_color_raster(color, raster_pos)` / `set_color_geo(color, geo_pos)`

"""
import logging
import math
from typing import Dict, Sequence

import numpy as np
from affine import Affine

from rastermap.config import RASTER
from rastermap.errors import (
    InvalidColorError,
    InvalidExtentError,
    InvalidPixelSizeError,
    OutOfBoundsError,
)
from rastermap.geodesy import great_circle_distance
from rastermap.points import GeoPoint, RasterPoint, Sampling

logger = logging.getLogger(__name__)


def _round_half_away(v: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    a = abs(v)
    f = math.floor(a)
    # a - f is exact, unlike a + 0.5 just below one half
    if a - f >= 0.5:
        f += 1
    return int(math.copysign(f, v))


def _check_extent(min_pt, max_pt) -> None:
    if not (-90.0 <= min_pt.lat <= 90.0 and -90.0 <= max_pt.lat <= 90.0):
        raise InvalidExtentError(
            f'latitudes must be between -90 and 90, got {min_pt.lat} and {max_pt.lat}')
    if not min_pt.lat < max_pt.lat:
        raise InvalidExtentError(
            f'min.lat ({min_pt.lat}) must be less than max.lat ({max_pt.lat})')
    if not min_pt.lon < max_pt.lon:
        raise InvalidExtentError(
            f'min.lon ({min_pt.lon}) must be less than max.lon ({max_pt.lon})')


def _check_pixel_size(longest_pixel_size) -> None:
    if isinstance(longest_pixel_size, bool) or not isinstance(longest_pixel_size, (int, np.integer)):
        raise InvalidPixelSizeError(
            f'longest_pixel_size must be an integer, got {type(longest_pixel_size).__name__}')
    if longest_pixel_size <= 0:
        raise InvalidPixelSizeError(
            f'longest_pixel_size must be positive, got {longest_pixel_size}')


class RasterMap:
    """RGBA image covering a geographic rectangle.

    The longer side of the rectangle, measured in meters along the great
    circle, gets `longest_pixel_size` pixels; the other side is scaled to keep
    the aspect ratio and rounded up. The buffer is a row-major uint8 array of
    `height * width * 4` bytes (R, G, B, A), top row first.

    Parameters:
    - min_pt: south-west corner, anything with `lat`/`lon` in degrees
    - max_pt: north-east corner
    - longest_pixel_size: pixel count on the longest side
    - alpha_to_max: pre-fill the alpha channel with 255 (otherwise 0)
    """

    def __init__(self, min_pt, max_pt, longest_pixel_size: int, alpha_to_max: bool = RASTER['alpha_to_max']):
        _check_extent(min_pt, max_pt)
        _check_pixel_size(longest_pixel_size)
        longest_pixel_size = int(longest_pixel_size)

        self._corners = {
            'bottom_left': GeoPoint(min_pt.lat, min_pt.lon),
            'top_right': GeoPoint(max_pt.lat, max_pt.lon),
            'bottom_right': GeoPoint(min_pt.lat, max_pt.lon),
            'top_left': GeoPoint(max_pt.lat, min_pt.lon),
        }

        # in meters
        south_to_north = great_circle_distance(self._corners['bottom_left'], self._corners['top_left'])
        west_to_east = great_circle_distance(self._corners['bottom_left'], self._corners['bottom_right'])

        self._meter_size = {'width': west_to_east, 'height': south_to_north}
        self._angle_size = {
            'width': max_pt.lon - min_pt.lon,
            'height': max_pt.lat - min_pt.lat,
        }

        if south_to_north > west_to_east:
            orientation = 'portrait'
            height = longest_pixel_size
            width = math.ceil(longest_pixel_size * (west_to_east / south_to_north))
        else:
            orientation = 'landscape'
            width = longest_pixel_size
            height = math.ceil(longest_pixel_size * (south_to_north / west_to_east))
        self._raster_size = {'width': int(width), 'height': int(height)}

        self._angle_per_pixel = {
            'width': self._angle_size['width'] / self._raster_size['width'],
            'height': self._angle_size['height'] / self._raster_size['height'],
        }
        self._pixel_per_angle = {
            'width': self._raster_size['width'] / self._angle_size['width'],
            'height': self._raster_size['height'] / self._angle_size['height'],
        }

        self._ncpp = RASTER['components_per_pixel']
        self._buffer = np.zeros(self._raster_size['height'] * self._raster_size['width'] * self._ncpp,
                                dtype=np.uint8)
        if alpha_to_max:
            self._buffer[RASTER['alpha_channel']::self._ncpp] = RASTER['alpha_max']

        logger.debug('RasterMap %s: %d x %d px for %.1f m x %.1f m',
                     orientation, self._raster_size['width'], self._raster_size['height'],
                     west_to_east, south_to_north)

    # ------------------------------------------------------------------
    # accessors
    # ------------------------------------------------------------------
    def get_raster_width(self) -> int:
        return self._raster_size['width']

    def get_raster_height(self) -> int:
        return self._raster_size['height']

    def get_raster_data(self) -> np.ndarray:
        """Return the live RGBA buffer. Writes through the map show up here."""
        return self._buffer

    def as_image(self) -> np.ndarray:
        """Return the buffer as a (height, width, 4) view sharing its memory."""
        return self._buffer.reshape((self._raster_size['height'], self._raster_size['width'], self._ncpp))

    @property
    def corners(self) -> Dict[str, GeoPoint]:
        return dict(self._corners)

    @property
    def angle_size(self) -> Dict[str, float]:
        return dict(self._angle_size)

    @property
    def meter_size(self) -> Dict[str, float]:
        return dict(self._meter_size)

    @property
    def raster_size(self) -> Dict[str, int]:
        return dict(self._raster_size)

    @property
    def angle_per_pixel(self) -> Dict[str, float]:
        return dict(self._angle_per_pixel)

    @property
    def pixel_per_angle(self) -> Dict[str, float]:
        return dict(self._pixel_per_angle)

    @property
    def transform(self) -> Affine:
        """Affine mapping raster (x, y) to (lon, lat) at pixel centers.

        Matches `raster_pos_to_geo_pos` up to floating point rounding.
        """
        bl = self._corners['bottom_left']
        apw = self._angle_per_pixel['width']
        aph = self._angle_per_pixel['height']
        top = bl.lat + (self._raster_size['height'] - 1) * aph
        return Affine(apw, 0.0, bl.lon, 0.0, -aph, top)

    # ------------------------------------------------------------------
    # coordinate conversions
    # ------------------------------------------------------------------
    def _check_raster_pos(self, raster_pos) -> None:
        if not (0 <= raster_pos.x < self._raster_size['width'] and
                0 <= raster_pos.y < self._raster_size['height']):
            raise OutOfBoundsError(
                f'raster position ({raster_pos.x}, {raster_pos.y}) is out of bounds '
                f"for a {self._raster_size['width']}x{self._raster_size['height']} raster")

    def geo_pos_to_raster_pos(self, geo_pos, sampling: Sampling = Sampling.NEAREST_NEIGHBOR) -> RasterPoint:
        """Convert a geographic position to a raster position.

        The position must lie strictly inside the map rectangle; every edge is
        exclusive. With `Sampling.NEAREST_NEIGHBOR` the result holds ints
        (ties rounded away from zero), with `Sampling.EXACT` sub-pixel floats.
        """
        bl = self._corners['bottom_left']
        if not (bl.lat < geo_pos.lat < self._corners['top_left'].lat and
                bl.lon < geo_pos.lon < self._corners['bottom_right'].lon):
            raise OutOfBoundsError(f'geo position ({geo_pos.lat}, {geo_pos.lon}) is out of bounds')

        x = (geo_pos.lon - bl.lon) * self._pixel_per_angle['width']
        y = self._raster_size['height'] - (geo_pos.lat - bl.lat) * self._pixel_per_angle['height'] - 1

        if sampling is Sampling.NEAREST_NEIGHBOR:
            return RasterPoint(_round_half_away(x), _round_half_away(y))
        return RasterPoint(x, y)

    def raster_pos_to_geo_pos(self, raster_pos) -> GeoPoint:
        """Convert a raster position inside [0, width) x [0, height) to a geographic position."""
        self._check_raster_pos(raster_pos)
        bl = self._corners['bottom_left']
        lon = bl.lon + raster_pos.x * self._angle_per_pixel['width']
        lat = bl.lat + (self._raster_size['height'] - raster_pos.y - 1) * self._angle_per_pixel['height']
        return GeoPoint(lat, lon)

    def raster_position_to_buffer_position(self, raster_pos) -> int:
        """Offset in the buffer of the red component of the pixel at `raster_pos`."""
        self._check_raster_pos(raster_pos)
        if not (float(raster_pos.x).is_integer() and float(raster_pos.y).is_integer()):
            raise TypeError(f'raster position ({raster_pos.x}, {raster_pos.y}) must be integral')
        return (int(raster_pos.y) * self._raster_size['width'] + int(raster_pos.x)) * self._ncpp

    # ------------------------------------------------------------------
    # pixel writes
    # ------------------------------------------------------------------
    def _check_color(self, color: Sequence[int]) -> None:
        if len(color) > self._ncpp:
            raise InvalidColorError(f'the color must contain at most {self._ncpp} elements, got {len(color)}')
        for c in color:
            if not RASTER['channel_min'] <= c <= RASTER['channel_max']:
                raise InvalidColorError(
                    f"color component {c} is outside {RASTER['channel_min']}..{RASTER['channel_max']}")

    def set_color_raster(self, color: Sequence[int], raster_pos) -> None:
        """Write `color` ([r], [r, g], [r, g, b] or [r, g, b, a]) at a raster position.

        Channels not given keep their current value. The buffer is left
        untouched when the position or the color is rejected.
        """
        pos_1d = self.raster_position_to_buffer_position(raster_pos)
        self._check_color(color)
        n = len(color)
        if n:
            self._buffer[pos_1d:pos_1d + n] = color

    def set_color_geo(self, color: Sequence[int], geo_pos) -> None:
        """Write `color` at the pixel nearest to a geographic position."""
        raster_pos = self.geo_pos_to_raster_pos(geo_pos)
        self.set_color_raster(color, raster_pos)
