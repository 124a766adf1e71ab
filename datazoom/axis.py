from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from datazoom.errors import ZoomConfigError
from datazoom.scale import AXIS_TYPES, Scale, scale_for_axis_type


AxisCapability = Literal["min", "max", "needs_cross_zero"]
ALL_CAPABILITIES: frozenset[str] = frozenset({"min", "max", "needs_cross_zero"})

AXIS_DEFAULTS: dict[str, Any] = {
    "type": "value",
    "scale": False,
    "min": None,
    "max": None,
    "grid_index": 0,
    "polar_index": 0,
    "data": None,
}

# axis dimension -> (paired dimension, coordinate-system index option)
_PAIRS: dict[str, tuple[str, str]] = {
    "x": ("y", "grid_index"),
    "y": ("x", "grid_index"),
    "angle": ("radius", "polar_index"),
    "radius": ("angle", "polar_index"),
}


def component_type(axis_dim: str) -> str:
    return f"{axis_dim}Axis"


def paired_dimension(axis_dim: str) -> tuple[str, str] | None:
    return _PAIRS.get(axis_dim)


@dataclass
class AxisModel:
    """Option store for one axis.

    ``capabilities`` lists which bounds this axis accepts writes for; zoom
    write-back consults it instead of assuming every axis is writable.
    """

    dim: str
    index: int = 0
    option: dict[str, Any] = field(default_factory=dict)
    capabilities: frozenset[str] = ALL_CAPABILITIES
    needs_cross_zero: bool | None = None

    def __post_init__(self) -> None:
        unknown = set(self.capabilities) - ALL_CAPABILITIES
        if unknown:
            raise ZoomConfigError(f"unknown axis capabilities: {sorted(unknown)}")
        axis_type = self.get("type")
        if axis_type not in AXIS_TYPES:
            raise ZoomConfigError(f"unknown axis type: {axis_type!r}")

    def get(self, name: str, ignore_parent: bool = False) -> Any:
        if name in self.option:
            return self.option[name]
        if ignore_parent:
            return None
        return AXIS_DEFAULTS.get(name)

    @property
    def scale(self) -> Scale:
        return scale_for_axis_type(self.get("type"), self.get("data"))

    def has_capability(self, capability: AxisCapability) -> bool:
        return capability in self.capabilities

    def set_min(self, value: Any) -> None:
        self._require_capability("min")
        self.option["min"] = value

    def set_max(self, value: Any) -> None:
        self._require_capability("max")
        self.option["max"] = value

    def set_needs_cross_zero(self, needs: bool) -> None:
        self._require_capability("needs_cross_zero")
        self.needs_cross_zero = bool(needs)

    def _require_capability(self, capability: str) -> None:
        if capability not in self.capabilities:
            raise PermissionError(f"axis {self.dim}{self.index} does not accept {capability}")
