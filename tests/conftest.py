"""
Shared fixtures for auroracast engine tests.

Provides small injected light-source catalogs with known geometry and
seeded random sources, so each test module can check the heuristics
against hand-computed values instead of the full city table.
"""

import math

import numpy as np
import pytest

from auroracast.catalog import LightSourceCatalog
from auroracast.formulas.spatial import EARTH_RADIUS_KM
from auroracast.models import Coordinate, LightSource


def meridian_offset_deg(km):
    """Latitude delta that puts a point exactly ``km`` north along a meridian."""
    return math.degrees(km / EARTH_RADIUS_KM)


class FixedSource:
    """Random source that replays a fixed sequence of uniform values."""

    def __init__(self, values):
        self._values = list(values)
        self._i = 0

    def random(self):
        value = self._values[self._i % len(self._values)]
        self._i += 1
        return value


@pytest.fixture
def origin():
    return Coordinate(0.0, 0.0)


@pytest.fixture
def empty_catalog():
    return LightSourceCatalog()


@pytest.fixture
def single_city_catalog():
    """One weight-10 city at (0, 0)."""
    return LightSourceCatalog([LightSource("Metropolis", Coordinate(0.0, 0.0), 10)])


@pytest.fixture
def city_north_catalog():
    """One city 50 km north of (0, 0), weighted so (0, 0) reads exactly 100.

    weight * 100 / (50² + 1) == 100 at the origin.
    """
    return LightSourceCatalog([
        LightSource("Northtown", Coordinate(meridian_offset_deg(50.0), 0.0), 2501),
    ])


@pytest.fixture
def rng():
    return np.random.default_rng(42)
