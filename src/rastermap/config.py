# -*- coding: utf-8 -*-

"""
rastermap/config.py

Constants shared by the geodesy helpers and the raster map. Keeping the sphere
model and the pixel layout in one place means the distance math and the buffer
indexing always agree.

Contents:
---------
1. EARTH:
   - Spherical Earth model used by the haversine distance.

2. RASTER:
   - Pixel layout of the RGBA buffer (components per pixel, which component
     holds alpha, its maximum value) and the default alpha pre-fill flag.

Usage:
------
    from rastermap.config import EARTH, RASTER
"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) SPHERE MODEL
# ───────────────────────────────────────────────────────────────────────────────
EARTH = {
    'radius_m': 6371e3,         # mean Earth radius (m)
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) RGBA BUFFER LAYOUT
# ───────────────────────────────────────────────────────────────────────────────
RASTER = {
    'components_per_pixel': 4,  # R, G, B, A
    'alpha_channel': 3,         # offset of A within a pixel
    'alpha_max': 255,           # fully opaque
    'channel_min': 0,
    'channel_max': 255,
    'alpha_to_max': True,       # default pre-fill of the alpha channel
}
