"""
Static catalog of weighted light sources.

The catalog is built once from config.MAJOR_CITIES and shared read-only for
the lifetime of the process. Estimators take a catalog explicitly so tests
and callers can inject their own.
"""

from functools import lru_cache

import pandas as pd

from auroracast import config
from auroracast.logging_config import get_engine_logger
from auroracast.models import Coordinate, LightSource
from auroracast.schemas import LightSourceSchema, validate_schema
from auroracast.validation import ValidationError

log = get_engine_logger(__name__)


class LightSourceCatalog:
    """Immutable, ordered collection of LightSource entries keyed by name.

    Iteration follows declaration order, which is also the tie-break order
    for nearest-source lookups. An empty catalog is valid.
    """

    __slots__ = ("_sources",)

    def __init__(self, sources=()):
        by_name = {}
        for source in sources:
            if not isinstance(source, LightSource):
                raise ValidationError(f"catalog entries must be LightSource, got {source!r}")
            if source.name in by_name:
                raise ValidationError(f"duplicate light source name: {source.name!r}")
            by_name[source.name] = source
        self._sources = tuple(by_name.values())

    @classmethod
    def from_config(cls, city_table):
        """Build a catalog from a {name: {"lat", "lon", "weight"}} mapping."""
        sources = []
        for name, info in city_table.items():
            try:
                lat, lon, weight = info["lat"], info["lon"], info["weight"]
            except KeyError as exc:
                raise ValidationError(f"{name}: missing field {exc.args[0]!r}") from exc
            sources.append(LightSource(name, Coordinate(lat, lon), weight))
        return cls(sources)

    def __len__(self):
        return len(self._sources)

    def __iter__(self):
        return iter(self._sources)

    def __contains__(self, name):
        return any(s.name == name for s in self._sources)

    def __repr__(self):
        return f"LightSourceCatalog({len(self)} sources)"

    @property
    def names(self):
        return tuple(s.name for s in self._sources)

    def get(self, name):
        """Return the LightSource called ``name``, or None."""
        for source in self._sources:
            if source.name == name:
                return source
        return None

    def to_frame(self):
        """Return the catalog as a validated DataFrame: [name, lat, lon, weight]."""
        df = pd.DataFrame(
            {
                "name": pd.Series([s.name for s in self._sources], dtype=object),
                "lat": pd.Series([s.coordinate.latitude for s in self._sources], dtype=float),
                "lon": pd.Series([s.coordinate.longitude for s in self._sources], dtype=float),
                "weight": pd.Series([s.weight for s in self._sources], dtype=float),
            }
        )
        validate_schema(df, LightSourceSchema, "catalog", strict=True, allow_empty=True)
        return df


@lru_cache(maxsize=1)
def default_catalog():
    """Process-wide catalog of the major cities in config.MAJOR_CITIES."""
    catalog = LightSourceCatalog.from_config(config.MAJOR_CITIES)
    log.debug("Loaded light-source catalog: %d sources", len(catalog))
    return catalog
