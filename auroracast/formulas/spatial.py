"""
Spatial analysis constants.
"""

# Mean Earth radius for Haversine distance calculation.
# Standard geodetic value (IUGG).
EARTH_RADIUS_KM = 6371.0

# 8-point compass rose, clockwise from north. Index = round(bearing / 45) % 8.
COMPASS_POINTS = (
    "North",
    "Northeast",
    "East",
    "Southeast",
    "South",
    "Southwest",
    "West",
    "Northwest",
)

# Valid coordinate ranges (decimal degrees, inclusive).
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
