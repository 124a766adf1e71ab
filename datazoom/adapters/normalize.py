from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from datazoom.errors import SeriesDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_columns(data: Any) -> dict[str, np.ndarray]:
    """Coerce a mapping of dimension -> values (or a DataFrame) into float64 columns."""
    if pd is not None and isinstance(data, pd.DataFrame):
        raw = {str(c): data[c] for c in data.columns if _is_numeric_dtype(data[c])}
    elif isinstance(data, Mapping):
        raw = {str(k): v for k, v in data.items()}
    else:
        raise SeriesDataError(f"unsupported series data type: {type(data)!r}")

    columns: dict[str, np.ndarray] = {}
    length: int | None = None
    for dim, values in raw.items():
        arr = _coerce_1d_numeric(values, label=dim)
        if length is None:
            length = arr.size
        elif arr.size != length:
            raise SeriesDataError(f"column length mismatch: {dim} has {arr.size}, expected {length}")
        columns[dim] = arr
    return columns


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise SeriesDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise SeriesDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise SeriesDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=True)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise SeriesDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
