from __future__ import annotations

from typing import Any, Callable

from datazoom.series import Series


class ChartModel:
    """Series and components of one chart instance."""

    def __init__(self) -> None:
        self._series: list[Series] = []
        self._components: dict[str, dict[int, Any]] = {}

    def add_series(self, series: Series) -> Series:
        self._series.append(series)
        return series

    def add_component(self, component_type: str, component: Any, index: int | None = None) -> Any:
        bucket = self._components.setdefault(component_type, {})
        if index is None:
            index = getattr(component, "index", len(bucket))
        if index in bucket:
            raise ValueError(f"{component_type} index already registered: {index}")
        bucket[index] = component
        return component

    def remove_component(self, component_type: str, index: int) -> Any | None:
        return self._components.get(component_type, {}).pop(index, None)

    def get_component(self, component_type: str, index: int = 0) -> Any | None:
        return self._components.get(component_type, {}).get(index)

    def each_series(self, callback: Callable[[Series], None]) -> None:
        for series in list(self._series):
            callback(series)

    def each_component(self, component_type: str, callback: Callable[[Any], None]) -> None:
        bucket = self._components.get(component_type, {})
        for index in sorted(bucket):
            callback(bucket[index])

    def series(self) -> list[Series]:
        return list(self._series)

    def components(self, component_type: str) -> list[Any]:
        bucket = self._components.get(component_type, {})
        return [bucket[i] for i in sorted(bucket)]
