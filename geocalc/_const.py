"""
Constants declarations for geocalc
"""

# WGS84 Ellipsoid Constants
EARTH_EQUATORIAL_RADIUS = 6378137.0  # Major axis (meters)
EARTH_POLAR_RADIUS = 6356752.314245  # Minor axis (meters)
EARTH_FLATTENING = 0.00335281066475  # 1 / 298.257223563

# Vincenty inverse formula iteration bounds
VINCENTY_MAX_ITERATIONS = 100
VINCENTY_TOLERANCE = 1e-12
