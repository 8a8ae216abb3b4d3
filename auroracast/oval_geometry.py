"""
Aurora oval ring geometry for both hemispheres.

Produces unprojected (longitude, latitude) rings: a boundary line with a
fixed sinusoidal wobble, and a fill polygon covering the band from 2° below
to 4° above the boundary latitude. Projection and drawing belong to the
map renderer.
"""

import numpy as np
from shapely.geometry import LineString, Polygon, mapping

from auroracast import config
from auroracast.aurora import oval_base_latitude
from auroracast.logging_config import get_engine_logger
from auroracast.models import OvalGeometry, OvalPair

log = get_engine_logger(__name__)


def _sample_longitudes():
    """Longitudes -180..180 inclusive at the configured step."""
    step = config.OVAL_LONGITUDE_STEP_DEG
    return np.arange(-180, 180 + step, step, dtype=float)


def _close(points):
    return tuple(points) + (points[0],)


def _hemisphere_oval(base):
    lons = _sample_longitudes()
    lats = base + config.OVAL_WOBBLE_AMPLITUDE_DEG * np.sin(np.radians(lons))

    boundary = [(float(lon), float(lat)) for lon, lat in zip(lons, lats)]

    outer = lats + config.OVAL_FILL_OUTER_OFFSET_DEG
    inner = lats + config.OVAL_FILL_INNER_OFFSET_DEG
    fill = [(float(lon), float(lat)) for lon, lat in zip(lons, outer)]
    fill += [(float(lon), float(lat)) for lon, lat in zip(lons[::-1], inner[::-1])]

    return OvalGeometry(boundary=_close(boundary), fill=_close(fill))


def generate_oval_geometry(activity_index):
    """Boundary and fill rings of the aurora oval for a Kp-like index.

    Returns
    -------
    OvalPair
        ``north`` centred on +oval_base_latitude(index), ``south`` on its
        negation. Each boundary ring has one point per longitude step plus
        the closing point; each fill ring has two per step plus one.
    """
    base = oval_base_latitude(activity_index)
    pair = OvalPair(north=_hemisphere_oval(base), south=_hemisphere_oval(-base))
    log.debug("Generated oval geometry at base latitude %.1f", base)
    return pair


def oval_to_geojson(pair):
    """Convert an OvalPair to a GeoJSON FeatureCollection dict.

    Each hemisphere yields a LineString (role "boundary") and a Polygon
    (role "fill").
    """
    features = []
    for hemisphere, oval in (("north", pair.north), ("south", pair.south)):
        for role, geom in (("boundary", LineString(oval.boundary)),
                           ("fill", Polygon(oval.fill))):
            features.append({
                "type": "Feature",
                "properties": {"hemisphere": hemisphere, "role": role},
                "geometry": mapping(geom),
            })
    return {"type": "FeatureCollection", "features": features}
