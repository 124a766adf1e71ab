from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Callable, Mapping

import numpy as np

from datazoom.adapters import normalize_columns
from datazoom.errors import SeriesDataError


ArrayFn = Callable[[np.ndarray], np.ndarray]
EMPTY_EXTENT: tuple[float, float] = (math.inf, -math.inf)


class SeriesData:
    """Immutable table of equally long float64 columns keyed by dimension name.

    ``map`` and ``filter`` return new handles; the arrays of an existing handle are
    never written to.
    """

    def __init__(self, columns: Mapping[str, np.ndarray]) -> None:
        frozen: dict[str, np.ndarray] = {}
        for dim, arr in columns.items():
            out = np.array(arr, dtype=np.float64)
            if out.ndim != 1:
                raise SeriesDataError(f"{dim} must be 1-D")
            out.setflags(write=False)
            frozen[dim] = out
        if len({arr.size for arr in frozen.values()}) > 1:
            raise SeriesDataError("series columns must share one length")
        self._columns = frozen

    @classmethod
    def from_input(cls, data: Any) -> "SeriesData":
        return cls(normalize_columns(data))

    @property
    def dimensions(self) -> tuple[str, ...]:
        return tuple(self._columns)

    def __len__(self) -> int:
        for arr in self._columns.values():
            return int(arr.size)
        return 0

    def get(self, dim: str) -> np.ndarray:
        try:
            return self._columns[dim]
        except KeyError as exc:
            raise SeriesDataError(f"unknown dimension: {dim}") from exc

    def has_dimension(self, dim: str) -> bool:
        return dim in self._columns

    def get_data_extent(self, dim: str) -> tuple[float, float]:
        values = self.get(dim)
        finite = values[np.isfinite(values)]
        if finite.size == 0:
            return EMPTY_EXTENT
        return (float(np.min(finite)), float(np.max(finite)))

    def map(self, dim: str, fn: ArrayFn) -> "SeriesData":
        mapped = np.asarray(fn(self.get(dim)), dtype=np.float64)
        if mapped.shape != self.get(dim).shape:
            raise SeriesDataError(f"map over {dim} changed the column length")
        columns = dict(self._columns)
        columns[dim] = mapped
        return SeriesData(columns)

    def filter(self, dim: str, predicate: ArrayFn) -> "SeriesData":
        keep = np.asarray(predicate(self.get(dim)), dtype=bool)
        return SeriesData({name: arr[keep] for name, arr in self._columns.items()})


@dataclass
class Series:
    name: str
    data: SeriesData | None = None
    axis_indices: dict[str, int] = field(default_factory=dict)
    axis_dimensions: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._original = self.data

    def axis_index(self, axis_dim: str) -> int:
        return int(self.axis_indices.get(axis_dim, 0))

    def dimensions_on_axis(self, axis_dim: str) -> tuple[str, ...]:
        if axis_dim in self.axis_dimensions:
            return tuple(self.axis_dimensions[axis_dim])
        if self.data is not None and self.data.has_dimension(axis_dim):
            return (axis_dim,)
        return ()

    def get_data(self) -> SeriesData | None:
        return self.data

    def set_data(self, data: SeriesData) -> None:
        self.data = data

    def restore_data(self) -> None:
        self.data = self._original
