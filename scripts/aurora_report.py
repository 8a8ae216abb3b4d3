#!/usr/bin/env python3
"""
Standalone aurora advisory report.

Prints the visibility chance, light pollution estimate and a simulated
24-hour Kp series for one coordinate and a supplied Kp index. The index
must come from the caller (e.g. the latest NOAA planetary K-index value);
this script does not fetch it.

Usage (run from project root):
    python3 scripts/aurora_report.py --lat 64.84 --lon -147.72 --kp 5.3
    python3 scripts/aurora_report.py --lat 51.5 --lon -0.13 --kp 7 \
        --geojson-out ./outputs/oval.geojson
"""

import argparse
import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import numpy as np

from auroracast import config
from auroracast.advisory import assess_location
from auroracast.forecast import forecast_to_frame, simulate_forecast
from auroracast.logging_config import (
    StepTimer,
    get_engine_logger,
    log_step_summary,
    setup_logging,
)
from auroracast.oval_geometry import generate_oval_geometry, oval_to_geojson
from auroracast.validation import ValidationError

log = get_engine_logger("auroracast.report")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Aurora visibility advisory for a location"
    )
    parser.add_argument("--lat", type=float, required=True)
    parser.add_argument("--lon", type=float, required=True)
    parser.add_argument("--kp", type=float, required=True,
                        help="Current Kp index (latest feed value)")
    parser.add_argument("--hours", type=int, default=config.FORECAST_HOURS)
    parser.add_argument("--seed", type=int, default=config.FORECAST_SEED,
                        help="Seed for the simulated Kp series")
    parser.add_argument("--geojson-out", default=None,
                        help="Write the aurora oval as GeoJSON to this path")
    parser.add_argument("--log-dir", default=None)
    args = parser.parse_args(argv)

    setup_logging(log_dir=args.log_dir)

    try:
        with StepTimer() as t:
            advisory = assess_location((args.lat, args.lon), args.kp)
            samples = simulate_forecast(
                args.kp, hours=args.hours,
                random_source=np.random.default_rng(args.seed),
            )
            oval = generate_oval_geometry(args.kp)
    except ValidationError as exc:
        log.error("Invalid input: %s", exc)
        sys.exit(2)

    log_step_summary(
        log, "aurora_report",
        input_summary={"lat": args.lat, "lon": args.lon, "kp": args.kp},
        output_summary={
            "visibility_chance": round(advisory.visibility_chance, 1),
            "light_pollution": advisory.light_pollution.value,
        },
        timing_seconds=t.elapsed,
    )

    pollution = advisory.light_pollution
    print(f"Location:          {args.lat:.4f}, {args.lon:.4f}")
    print(f"Kp index:          {advisory.activity_index:.1f} ({advisory.activity_level})")
    print(f"Oval latitude:     {advisory.oval_base_latitude:.1f}")
    print(f"Visibility chance: {advisory.visibility_chance:.0f}%")
    print(f"  {advisory.visibility_message}")
    print(f"Light pollution:   {pollution.value}% ({pollution.level})")
    print(f"  {pollution.description}")
    if pollution.nearest_source is not None:
        print(f"  Nearest city: {pollution.nearest_source.name} "
              f"({pollution.nearest_source.distance_km:.0f} km, "
              f"{pollution.nearest_source.direction})")
    if pollution.travel_hint:
        print(f"  {pollution.travel_hint}")

    print("\nSimulated Kp series (illustrative only, not a forecast):")
    print(forecast_to_frame(samples)[["label", "predicted_index", "activity_level"]]
          .to_string(index=False, float_format="%.1f"))

    if args.geojson_out:
        out_dir = os.path.dirname(args.geojson_out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.geojson_out, "w") as f:
            json.dump(oval_to_geojson(oval), f)
        log.info("Saved oval geometry: %s", args.geojson_out)


if __name__ == "__main__":
    main()
