from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Sequence

import numpy as np

from datazoom.axis import AxisModel, component_type, paired_dimension
from datazoom.model import ChartModel
from datazoom.numeric import (
    DEFAULT_PIXEL_EXTENT,
    asc,
    is_valid_precision,
    linear_map,
    pixel_precision,
    round_to_precision,
)
from datazoom.scale import LinearScale, Scale
from datazoom.series import EMPTY_EXTENT, Series
from datazoom.zoom import DataZoomModel


LOGGER = logging.getLogger(__name__)
PERCENT_EXTENT: tuple[float, float] = (0.0, 100.0)


@dataclass(frozen=True)
class AxisBackup:
    scale: Any
    min: Any
    max: Any


@dataclass(frozen=True)
class DataWindow:
    value_window: tuple[float, float]
    percent_window: tuple[float, float]


def calculate_data_extent(axis_dim: str, series_list: Sequence[Series]) -> tuple[float, float]:
    lo, hi = EMPTY_EXTENT
    for series in series_list:
        data = series.get_data()
        if data is None:
            continue
        for dim in series.dimensions_on_axis(axis_dim):
            smin, smax = data.get_data_extent(dim)
            if smin < lo:
                lo = smin
            if smax > hi:
                hi = smax
    return (lo, hi)


def calculate_data_window(
    zoom: DataZoomModel,
    data_extent: tuple[float, float],
    scale: Scale,
) -> DataWindow:
    percents: list[float | None] = [zoom.start, zoom.end]
    values: list[float | None] = [
        scale.parse(raw) if raw is not None else None for raw in (zoom.start_value, zoom.end_value)
    ]

    for idx in (0, 1):
        bound_percent = percents[idx]
        bound_value = values[idx]
        # Percent bounds take precedence over value bounds.
        if bound_percent is not None or bound_value is None:
            if bound_percent is None:
                bound_percent = PERCENT_EXTENT[idx]
            bound_value = scale.parse(linear_map(bound_percent, PERCENT_EXTENT, data_extent, clamp=True))
        else:
            bound_percent = linear_map(bound_value, data_extent, PERCENT_EXTENT, clamp=True)
        percents[idx] = float(bound_percent)
        values[idx] = float(bound_value)

    return DataWindow(value_window=asc(values), percent_window=asc(percents))


class AxisProxy:
    """Zoom state of one axis, shared by every zoom control targeting that axis.

    Only the current owner may resolve, restore or filter; calls carrying any
    other owner are ignored.
    """

    def __init__(self, dim: str, axis_index: int, owner: DataZoomModel, chart: ChartModel) -> None:
        self.dim = dim
        self.axis_index = axis_index
        self.chart = chart
        self._owner = owner
        self._backup: AxisBackup | None = None
        self._data_extent: tuple[float, float] | None = None
        self._value_window: tuple[float, float] | None = None
        self._percent_window: tuple[float, float] | None = None

    def __repr__(self) -> str:
        return f"AxisProxy(dim={self.dim!r}, axis_index={self.axis_index}, owner={self._owner.zoom_id!r})"

    @property
    def owner(self) -> DataZoomModel:
        return self._owner

    @property
    def backup(self) -> AxisBackup | None:
        return self._backup

    def is_owned_by(self, owner: DataZoomModel) -> bool:
        return self._owner is owner

    def set_owner(self, owner: DataZoomModel) -> None:
        self._owner = owner
        self._backup = None

    def capture_backup(self, owner: DataZoomModel) -> bool:
        if not self._check_owner(owner, "capture_backup"):
            return False
        axis_model = self.get_axis_model()
        if axis_model is None:
            LOGGER.debug("%r has no axis model to back up", self)
            return False
        self._backup = AxisBackup(
            scale=axis_model.get("scale", True),
            min=axis_model.get("min", True),
            max=axis_model.get("max", True),
        )
        return True

    def get_data_extent(self) -> tuple[float, float] | None:
        return self._data_extent

    def get_value_window(self) -> tuple[float, float] | None:
        return self._value_window

    def get_percent_window(self) -> tuple[float, float] | None:
        return self._percent_window

    def get_axis_model(self) -> AxisModel | None:
        return self.chart.get_component(component_type(self.dim), self.axis_index)

    def get_bound_series(self) -> list[Series]:
        bound: list[Series] = []

        def collect(series: Series) -> None:
            if series.axis_index(self.dim) == self.axis_index:
                bound.append(series)

        self.chart.each_series(collect)
        return bound

    def get_paired_axis(self) -> AxisModel | None:
        pair = paired_dimension(self.dim)
        axis_model = self.get_axis_model()
        if pair is None or axis_model is None:
            return None
        other_dim, index_option = pair
        coord_index = axis_model.get(index_option) or 0
        found: list[AxisModel] = []

        def match(other: AxisModel) -> None:
            if (other.get(index_option) or 0) == coord_index:
                found.append(other)

        self.chart.each_component(component_type(other_dim), match)
        # The last matching axis wins when several share a coordinate system.
        return found[-1] if found else None

    def resolve_window(self, owner: DataZoomModel) -> bool:
        if not self._check_owner(owner, "resolve_window"):
            return False
        axis_model = self.get_axis_model()
        scale = axis_model.scale if axis_model is not None else LinearScale()

        self._data_extent = calculate_data_extent(self.dim, self.get_bound_series())
        window = calculate_data_window(owner, self._data_extent, scale)
        self._value_window = window.value_window
        self._percent_window = window.percent_window

        self._write_axis_state(restoring=False)
        return True

    def restore_window(self, owner: DataZoomModel) -> bool:
        if not self._check_owner(owner, "restore_window"):
            return False
        self._value_window = None
        self._percent_window = None
        self._write_axis_state(restoring=True)
        return True

    def apply_filter(self, owner: DataZoomModel) -> bool:
        if not self._check_owner(owner, "apply_filter"):
            return False
        value_window = self._value_window
        if value_window is None:
            LOGGER.debug("%r has no resolved window; nothing to filter", self)
            return False

        filter_mode = owner.filter_mode
        # Dropping points would break index alignment of stacked series on a category axis.
        paired = self.get_paired_axis()
        if owner.from_toolbox and paired is not None and paired.get("type") == "category":
            filter_mode = "empty"

        low, high = value_window

        def in_window(values: np.ndarray) -> np.ndarray:
            return (values >= low) & (values <= high)

        def mask_outside(values: np.ndarray) -> np.ndarray:
            return np.where(in_window(values), values, np.nan)

        for series in self.get_bound_series():
            data = series.get_data()
            if data is None:
                LOGGER.debug("series %s has no data; skipped", series.name)
                continue
            for dim in series.dimensions_on_axis(self.dim):
                if filter_mode == "empty":
                    data = data.map(dim, mask_outside)
                else:
                    data = data.filter(dim, in_window)
            series.set_data(data)
        return True

    def _write_axis_state(self, *, restoring: bool) -> None:
        backup = self._backup
        axis_model = self.get_axis_model()
        if backup is None or axis_model is None:
            LOGGER.debug("%r skipped axis write-back: no backup", self)
            return

        percent_window = self._percent_window
        value_window = self._value_window
        is_full = restoring or (
            percent_window is not None and percent_window[0] == 0 and percent_window[1] == 100
        )
        precision = math.inf
        if not restoring and value_window is not None:
            precision = pixel_precision(value_window, DEFAULT_PIXEL_EXTENT)
        invalid_precision = not restoring and not is_valid_precision(precision)
        if invalid_precision:
            LOGGER.debug("%r precision %s unusable; writing original bounds", self, precision)

        if axis_model.has_capability("needs_cross_zero"):
            axis_model.set_needs_cross_zero(not backup.scale if is_full else False)

        use_backup = is_full or invalid_precision or value_window is None
        if axis_model.has_capability("min"):
            axis_model.set_min(backup.min if use_backup else round_to_precision(value_window[0], int(precision)))
        if axis_model.has_capability("max"):
            axis_model.set_max(backup.max if use_backup else round_to_precision(value_window[1], int(precision)))

    def _check_owner(self, owner: DataZoomModel, operation: str) -> bool:
        if owner is self._owner:
            return True
        LOGGER.debug("%s on %r ignored for non-owner %r", operation, self, getattr(owner, "zoom_id", owner))
        return False
