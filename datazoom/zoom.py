from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Literal


FilterMode = Literal["filter", "empty"]
FILTER_MODES: tuple[str, ...] = ("filter", "empty")


@dataclass(eq=False)
class DataZoomModel:
    """A zoom control's range request.

    Instances act as ownership tokens for axis proxies and are compared by
    identity, so ``eq`` is disabled.
    """

    zoom_id: str = ""
    start: float | None = None
    end: float | None = None
    start_value: Any = None
    end_value: Any = None
    filter_mode: FilterMode = "filter"
    from_toolbox: bool = False
    target_axes: dict[str, tuple[int, ...]] = field(default_factory=lambda: {"x": (0,)})

    # effective range after the last processing cycle
    resolved_percent: tuple[float, float] | None = None
    resolved_value: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        if self.filter_mode not in FILTER_MODES:
            raise ValueError(f"filter_mode must be one of {FILTER_MODES}, got {self.filter_mode!r}")
        self.target_axes = {dim: tuple(int(i) for i in idx) for dim, idx in self.target_axes.items()}

    def each_target_axis(self) -> Iterator[tuple[str, int]]:
        for dim, indices in self.target_axes.items():
            for index in indices:
                yield dim, index

    def set_raw_range(
        self,
        *,
        start: float | None = None,
        end: float | None = None,
        start_value: Any = None,
        end_value: Any = None,
    ) -> "DataZoomModel":
        self.start = start
        self.end = end
        self.start_value = start_value
        self.end_value = end_value
        return self

    def sync_range(self, percent_window: tuple[float, float], value_window: tuple[float, float]) -> None:
        self.resolved_percent = percent_window
        self.resolved_value = value_window
