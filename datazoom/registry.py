from __future__ import annotations

import logging

from datazoom.model import ChartModel
from datazoom.proxy import AxisProxy
from datazoom.zoom import DataZoomModel


LOGGER = logging.getLogger(__name__)

ProxyKey = tuple[str, int]


class AxisProxyRegistry:
    """Axis proxies of one chart, keyed by ``(dimension, axis_index)``."""

    def __init__(self, chart: ChartModel) -> None:
        self.chart = chart
        self._proxies: dict[ProxyKey, AxisProxy] = {}

    def __len__(self) -> int:
        return len(self._proxies)

    def __contains__(self, key: object) -> bool:
        return key in self._proxies

    def get(self, dim: str, axis_index: int) -> AxisProxy | None:
        return self._proxies.get((dim, int(axis_index)))

    def attach(self, owner: DataZoomModel, dim: str, axis_index: int) -> AxisProxy:
        """Return the proxy for an axis, creating it (owned by ``owner``) on first attach."""
        key = (dim, int(axis_index))
        proxy = self._proxies.get(key)
        if proxy is not None:
            if proxy.backup is None and proxy.is_owned_by(owner):
                proxy.capture_backup(owner)
            return proxy
        proxy = AxisProxy(dim, int(axis_index), owner, self.chart)
        proxy.capture_backup(owner)
        self._proxies[key] = proxy
        LOGGER.debug("created %r", proxy)
        return proxy

    def transfer(self, owner: DataZoomModel, dim: str, axis_index: int) -> AxisProxy | None:
        """Hand an existing proxy to ``owner`` after restoring the previous owner's zoom."""
        proxy = self.get(dim, axis_index)
        if proxy is None or proxy.is_owned_by(owner):
            return proxy
        proxy.restore_window(proxy.owner)
        proxy.set_owner(owner)
        proxy.capture_backup(owner)
        LOGGER.debug("transferred %r", proxy)
        return proxy

    def proxies_for(self, owner: DataZoomModel) -> list[AxisProxy]:
        return [proxy for proxy in self._proxies.values() if proxy.is_owned_by(owner)]

    def remove_axis(self, dim: str, axis_index: int) -> AxisProxy | None:
        proxy = self._proxies.pop((dim, int(axis_index)), None)
        if proxy is not None:
            LOGGER.debug("removed %r", proxy)
        return proxy

    def clear(self) -> None:
        self._proxies.clear()
