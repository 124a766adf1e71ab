from __future__ import annotations

import logging
from typing import Any

from datazoom.model import ChartModel
from datazoom.registry import AxisProxyRegistry
from datazoom.zoom import DataZoomModel


LOGGER = logging.getLogger(__name__)
DATA_ZOOM_COMPONENT = "dataZoom"


class DataZoomProcessor:
    """Runs the zoom cycle for every data-zoom component of a chart.

    Per owner the stages run strictly in order: extent and window resolution
    with axis write-back for every target axis, then data filtering.
    """

    def __init__(self, chart: ChartModel, registry: AxisProxyRegistry | None = None) -> None:
        self.chart = chart
        self.registry = registry or AxisProxyRegistry(chart)

    def owners(self) -> list[DataZoomModel]:
        return self.chart.components(DATA_ZOOM_COMPONENT)

    def process(self) -> None:
        self.chart.each_series(lambda series: series.restore_data())
        owners = self.owners()
        for owner in owners:
            for dim, index in owner.each_target_axis():
                proxy = self.registry.get(dim, index)
                if proxy is not None and not any(proxy.is_owned_by(o) for o in owners):
                    self.registry.transfer(owner, dim, index)
        for owner in owners:
            proxies = [self.registry.attach(owner, dim, index) for dim, index in owner.each_target_axis()]
            for proxy in proxies:
                proxy.resolve_window(owner)
            for proxy in proxies:
                proxy.apply_filter(owner)
        for owner in owners:
            self._sync_range(owner)

    def dispatch_zoom(
        self,
        owner: DataZoomModel,
        *,
        start: float | None = None,
        end: float | None = None,
        start_value: Any = None,
        end_value: Any = None,
    ) -> None:
        owner.set_raw_range(start=start, end=end, start_value=start_value, end_value=end_value)
        LOGGER.debug("zoom %s -> start=%s end=%s", owner.zoom_id, start, end)
        self.process()

    def restore(self, owner: DataZoomModel) -> None:
        owner.set_raw_range()
        self.chart.each_series(lambda series: series.restore_data())
        for proxy in self.registry.proxies_for(owner):
            proxy.restore_window(owner)
        for other in self.owners():
            if other is owner:
                continue
            for proxy in self.registry.proxies_for(other):
                proxy.apply_filter(other)
        owner.resolved_percent = None
        owner.resolved_value = None

    def _sync_range(self, owner: DataZoomModel) -> None:
        for dim, index in owner.each_target_axis():
            proxy = self.registry.get(dim, index)
            if proxy is None or not proxy.is_owned_by(owner):
                continue
            percent_window = proxy.get_percent_window()
            value_window = proxy.get_value_window()
            if percent_window is not None and value_window is not None:
                owner.sync_range(percent_window, value_window)
                return
