from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
import math
from typing import Any, Protocol, Sequence

import numpy as np

from datazoom.errors import ZoomConfigError


AXIS_TYPES: tuple[str, ...] = ("value", "log", "time", "category")


class Scale(Protocol):
    def parse(self, raw: Any) -> float:
        ...


def _as_float(raw: Any) -> float:
    if raw is None:
        return math.nan
    if isinstance(raw, np.generic):
        raw = raw.item()
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ZoomConfigError(f"axis value is not numeric: {raw!r}") from exc
    return value


@dataclass(frozen=True)
class LinearScale:
    def parse(self, raw: Any) -> float:
        return _as_float(raw)


@dataclass(frozen=True)
class LogScale:
    base: float = 10.0

    def parse(self, raw: Any) -> float:
        return _as_float(raw)


@dataclass(frozen=True)
class TimeScale:
    """Parses timestamps into epoch milliseconds (UTC for naive values)."""

    def parse(self, raw: Any) -> float:
        if isinstance(raw, np.datetime64):
            return float(raw.astype("datetime64[ms]").astype(np.int64))
        if isinstance(raw, str):
            try:
                raw = datetime.fromisoformat(raw)
            except ValueError as exc:
                raise ZoomConfigError(f"time axis value is not ISO-8601: {raw!r}") from exc
        if isinstance(raw, datetime):
            if raw.tzinfo is None:
                raw = raw.replace(tzinfo=timezone.utc)
            return raw.timestamp() * 1000.0
        if isinstance(raw, date):
            return datetime(raw.year, raw.month, raw.day, tzinfo=timezone.utc).timestamp() * 1000.0
        value = _as_float(raw)
        if not math.isfinite(value):
            return math.nan
        return float(round(value))


@dataclass(frozen=True)
class CategoryScale:
    categories: tuple[str, ...] = field(default_factory=tuple)

    def parse(self, raw: Any) -> float:
        if isinstance(raw, str):
            try:
                return float(self.categories.index(raw))
            except ValueError as exc:
                raise ZoomConfigError(f"unknown category: {raw!r}") from exc
        value = _as_float(raw)
        if not math.isfinite(value):
            return math.nan
        # Half-up: 2.5 -> 3.
        return float(math.floor(value + 0.5))


def scale_for_axis_type(axis_type: str, categories: Sequence[Any] | None = None) -> Scale:
    if axis_type == "value":
        return LinearScale()
    if axis_type == "log":
        return LogScale()
    if axis_type == "time":
        return TimeScale()
    if axis_type == "category":
        return CategoryScale(categories=tuple(str(c) for c in (categories or ())))
    raise ZoomConfigError(f"unknown axis type: {axis_type!r}")
