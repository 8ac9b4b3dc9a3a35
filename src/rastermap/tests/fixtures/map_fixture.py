from rastermap import GeoPoint, RasterMap


def make_equator_map(longest_pixel_size=100, alpha_to_max=True):
    """One degree square sitting on the equator/prime meridian corner."""
    return RasterMap(GeoPoint(0.0, 0.0), GeoPoint(1.0, 1.0), longest_pixel_size, alpha_to_max)


def make_portrait_map(longest_pixel_size=200):
    """Tall strip in northern Europe: 10 degrees of latitude by 2 of longitude."""
    return RasterMap(GeoPoint(50.0, 4.0), GeoPoint(60.0, 6.0), longest_pixel_size)


def make_landscape_map(longest_pixel_size=300):
    """Wide strip: 2 degrees of latitude by 20 of longitude near 40N."""
    return RasterMap(GeoPoint(40.0, -100.0), GeoPoint(42.0, -80.0), longest_pixel_size)
