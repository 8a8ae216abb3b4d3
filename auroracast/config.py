"""
Centralized configuration for the auroracast estimation engine.

All model parameters, thresholds, and the light-source table are defined
here. Both models are deliberately coarse heuristics: the values below are
hand-tuned, not fitted to observations.
"""

# ─── LIGHT SOURCE CATALOG ────────────────────────────────────────────────
# Major population centers with a hand-assigned weight (6-10) reflecting
# relative light output. Weight is a coarse proxy for city size, not
# photometric data. Declaration order is the tie-break order for
# nearest-source lookups.
MAJOR_CITIES = {
    "New York":    {"lat": 40.7128,  "lon": -74.0060,  "weight": 10},
    "Los Angeles": {"lat": 34.0522,  "lon": -118.2437, "weight": 9},
    "Chicago":     {"lat": 41.8781,  "lon": -87.6298,  "weight": 8},
    "London":      {"lat": 51.5074,  "lon": -0.1278,   "weight": 9},
    "Paris":       {"lat": 48.8566,  "lon": 2.3522,    "weight": 8},
    "Tokyo":       {"lat": 35.6762,  "lon": 139.6503,  "weight": 10},
    "Shanghai":    {"lat": 31.2304,  "lon": 121.4737,  "weight": 10},
    "Sao Paulo":   {"lat": -23.5558, "lon": -46.6396,  "weight": 9},
    "Mumbai":      {"lat": 19.0760,  "lon": 72.8777,   "weight": 9},
    "Beijing":     {"lat": 39.9042,  "lon": 116.4074,  "weight": 9},
    "Moscow":      {"lat": 55.7558,  "lon": 37.6173,   "weight": 8},
    "Sydney":      {"lat": -33.8688, "lon": 151.2093,  "weight": 7},
    "Berlin":      {"lat": 52.5200,  "lon": 13.4050,   "weight": 7},
    "Mexico City": {"lat": 19.4326,  "lon": -99.1332,  "weight": 8},
    "Cairo":       {"lat": 30.0444,  "lon": 31.2357,   "weight": 8},
    "Delhi":       {"lat": 28.7041,  "lon": 77.1025,   "weight": 9},
    "Toronto":     {"lat": 43.6532,  "lon": -79.3832,  "weight": 7},
    "Rome":        {"lat": 41.9028,  "lon": 12.4964,   "weight": 6},
    "Seoul":       {"lat": 37.5665,  "lon": 126.9780,  "weight": 9},
    "Bangkok":     {"lat": 13.7563,  "lon": 100.5018,  "weight": 8},
}

# ─── LIGHT POLLUTION MODEL ───────────────────────────────────────────────
# Contribution of one source: weight * SCALE / (distance_km² + 1).
# The +1 keeps the contribution finite at distance 0 and caps a single
# source at weight * SCALE.
POLLUTION_CUTOFF_KM = 300.0  # Sources at or beyond this distance are ignored
POLLUTION_CONTRIBUTION_SCALE = 100.0
POLLUTION_VALUE_RANGE = (0.0, 100.0)

# Level thresholds (upper bounds, exclusive) in ascending order.
# Anything at or above the last bound is "Severe".
POLLUTION_LEVELS = [
    (10.0, "Excellent",
     "Dark sky site, perfect for aurora viewing. Milky Way clearly visible."),
    (30.0, "Good",
     "Low light pollution. Aurora should be clearly visible when active."),
    (60.0, "Moderate",
     "Moderate light pollution. Aurora visible during strong activity."),
    (80.0, "High",
     "High light pollution. Aurora may be faint or difficult to see."),
]
POLLUTION_SEVERE_LEVEL = (
    "Severe", "Severe light pollution. Aurora unlikely to be visible."
)

# Directional darkness search: probe points at fixed distance along each
# compass bearing when the origin is this polluted.
TRAVEL_HINT_THRESHOLD = 60.0
DARKNESS_SEARCH_BEARINGS = tuple(range(0, 360, 45))  # N, NE, ..., NW
DARKNESS_SEARCH_DISTANCE_KM = 50.0
DARKNESS_MIN_IMPROVEMENT = 20.0  # Probe must be at least this much darker

TRAVEL_HINT_DIRECTIONS = "Consider traveling {directions} for better aurora visibility."
TRAVEL_HINT_GENERIC = (
    "Consider traveling at least 50km away from urban areas for better "
    "aurora visibility."
)

# ─── AURORA OVAL MODEL ───────────────────────────────────────────────────
# Poleward boundary of the oval at Kp 0, moving equatorward by a fixed
# number of degrees per Kp step.
OVAL_BASE_LATITUDE_DEG = 67.0
OVAL_EXPANSION_PER_KP = 3.0
VISIBILITY_BAND_WIDTH_DEG = 5.0
VISIBILITY_CHANCE_RANGE = (0.0, 100.0)

# Oval geometry sampling.
OVAL_LONGITUDE_STEP_DEG = 5
OVAL_WOBBLE_AMPLITUDE_DEG = 4.0  # Sinusoidal perturbation of the boundary
OVAL_FILL_OUTER_OFFSET_DEG = 4.0
OVAL_FILL_INNER_OFFSET_DEG = -2.0

# ─── FORECAST SIMULATION ─────────────────────────────────────────────────
# Synthetic stand-in for a forecast feed; not a prediction.
FORECAST_HOURS = 24
FORECAST_VARIATION = 1.5  # Maximum absolute perturbation per sample
KP_INDEX_RANGE = (0.0, 9.0)
FORECAST_SEED = 42  # Random seed for reproducible reports
