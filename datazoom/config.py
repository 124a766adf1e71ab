from __future__ import annotations

from pathlib import Path
import tomllib
from typing import Any, Mapping

from datazoom.errors import ZoomConfigError
from datazoom.zoom import FILTER_MODES, DataZoomModel


_AXIS_INDEX_FIELDS: dict[str, str] = {
    "x_axis_index": "x",
    "y_axis_index": "y",
    "angle_axis_index": "angle",
    "radius_axis_index": "radius",
}


def load_data_zoom_config(path: str | Path) -> list[DataZoomModel]:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"data zoom config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ZoomConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    return parse_data_zoom_options(raw)


def parse_data_zoom_options(raw: Mapping[str, Any]) -> list[DataZoomModel]:
    entries = raw.get("data_zoom", [])
    if not isinstance(entries, list):
        raise ZoomConfigError("data_zoom must be an array of tables")
    models: list[DataZoomModel] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ZoomConfigError(f"data_zoom[{i}] must be a table")
        models.append(_parse_entry(entry, i))
    return models


def _parse_entry(entry: Mapping[str, Any], position: int) -> DataZoomModel:
    filter_mode = entry.get("filter_mode", "filter")
    if filter_mode not in FILTER_MODES:
        raise ZoomConfigError(f"data_zoom[{position}].filter_mode must be one of {FILTER_MODES}")
    from_toolbox = entry.get("from_toolbox", False)
    if not isinstance(from_toolbox, bool):
        raise ZoomConfigError(f"data_zoom[{position}].from_toolbox must be a boolean")

    target_axes: dict[str, tuple[int, ...]] = {}
    for field_name, dim in _AXIS_INDEX_FIELDS.items():
        if field_name in entry:
            target_axes[dim] = _coerce_index_list(entry[field_name], f"data_zoom[{position}].{field_name}")
    if not target_axes:
        target_axes = {"x": (0,)}

    return DataZoomModel(
        zoom_id=str(entry.get("id", f"dataZoom{position}")),
        start=_coerce_optional_percent(entry.get("start"), f"data_zoom[{position}].start"),
        end=_coerce_optional_percent(entry.get("end"), f"data_zoom[{position}].end"),
        start_value=entry.get("start_value"),
        end_value=entry.get("end_value"),
        filter_mode=filter_mode,
        from_toolbox=from_toolbox,
        target_axes=target_axes,
    )


def _coerce_optional_percent(value: Any, label: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ZoomConfigError(f"{label} must be a number")
    return float(value)


def _coerce_index_list(value: Any, label: str) -> tuple[int, ...]:
    if isinstance(value, bool):
        raise ZoomConfigError(f"{label} must be an integer or list of integers")
    if isinstance(value, int):
        return (value,)
    if isinstance(value, list) and all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        return tuple(value)
    raise ZoomConfigError(f"{label} must be an integer or list of integers")
