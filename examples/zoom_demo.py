from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from datazoom import AxisModel, ChartModel, DataZoomModel, DataZoomProcessor, Series, SeriesData, load_data_zoom_config


def _build_chart(owners: list[DataZoomModel]) -> ChartModel:
    chart = ChartModel()
    chart.add_component("xAxis", AxisModel("x", 0))
    chart.add_component("yAxis", AxisModel("y", 0, {"type": "category"}))
    x = np.linspace(0.0, 120.0, 121, dtype=np.float64)
    y = 0.65 * np.sin(x * 0.16) + 0.22 * np.cos(x * 0.05)
    chart.add_series(Series("wave", SeriesData({"x": x, "y": y})))
    for owner in owners:
        chart.add_component("dataZoom", owner)
    return chart


def main() -> None:
    parser = argparse.ArgumentParser(description="Resolve a data-zoom window over a demo series.")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with [[data_zoom]] tables")
    parser.add_argument("--start", type=float, default=20.0)
    parser.add_argument("--end", type=float, default=60.0)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.config is not None:
        owners = load_data_zoom_config(args.config)
    else:
        owners = [DataZoomModel(zoom_id="inside", start=args.start, end=args.end)]
    chart = _build_chart(owners)
    DataZoomProcessor(chart).process()

    axis = chart.get_component("xAxis", 0)
    series = chart.series()[0]
    for owner in owners:
        print(f"{owner.zoom_id}: percent={owner.resolved_percent} value={owner.resolved_value}")
    print(f"x axis bounds: min={axis.get('min')} max={axis.get('max')}")
    print(f"points kept: {len(series.get_data())}")


if __name__ == "__main__":
    main()
