from __future__ import annotations

from decimal import Decimal
import importlib.util
import math
import unittest

import numpy as np

from datazoom.adapters.normalize import normalize_columns
from datazoom.axis import AxisModel
from datazoom.errors import SeriesDataError, ZoomConfigError
from datazoom.series import Series, SeriesData


class SeriesDataTests(unittest.TestCase):
    def test_extent_ignores_non_finite_values(self) -> None:
        data = SeriesData({"x": [3.0, np.nan, -1.0, np.inf]})
        self.assertEqual(data.get_data_extent("x"), (-1.0, 3.0))

    def test_extent_of_all_nan_column_is_empty(self) -> None:
        data = SeriesData({"x": [np.nan, np.nan]})
        self.assertEqual(data.get_data_extent("x"), (math.inf, -math.inf))

    def test_map_returns_new_handle(self) -> None:
        data = SeriesData({"x": [1.0, 2.0], "y": [3.0, 4.0]})
        doubled = data.map("x", lambda v: v * 2.0)
        np.testing.assert_array_equal(doubled.get("x"), [2.0, 4.0])
        np.testing.assert_array_equal(data.get("x"), [1.0, 2.0])

    def test_filter_drops_whole_rows(self) -> None:
        data = SeriesData({"x": [1.0, 2.0, 3.0], "y": [10.0, 20.0, 30.0]})
        kept = data.filter("x", lambda v: v >= 2.0)
        np.testing.assert_array_equal(kept.get("y"), [20.0, 30.0])
        self.assertEqual(len(data), 3)

    def test_columns_are_read_only(self) -> None:
        source = np.asarray([1.0, 2.0])
        data = SeriesData({"x": source})
        with self.assertRaises(ValueError):
            data.get("x")[0] = 5.0
        source[0] = 9.0
        self.assertEqual(float(data.get("x")[0]), 1.0)

    def test_length_mismatch_is_rejected(self) -> None:
        with self.assertRaises(SeriesDataError):
            SeriesData({"x": [1.0, 2.0], "y": [1.0]})

    def test_unknown_dimension_is_rejected(self) -> None:
        with self.assertRaises(SeriesDataError):
            SeriesData({"x": [1.0]}).get("y")


class SeriesTests(unittest.TestCase):
    def test_dimensions_on_axis_defaults_to_same_named_column(self) -> None:
        series = Series("s", SeriesData({"x": [1.0], "y": [2.0]}))
        self.assertEqual(series.dimensions_on_axis("x"), ("x",))
        self.assertEqual(series.dimensions_on_axis("angle"), ())

    def test_restore_data_reinstates_original(self) -> None:
        original = SeriesData({"x": [1.0, 2.0]})
        series = Series("s", original)
        series.set_data(original.filter("x", lambda v: v > 1.0))
        series.restore_data()
        self.assertIs(series.get_data(), original)

    def test_axis_index_defaults_to_zero(self) -> None:
        series = Series("s", None, axis_indices={"y": 2})
        self.assertEqual(series.axis_index("x"), 0)
        self.assertEqual(series.axis_index("y"), 2)


class NormalizeColumnsTests(unittest.TestCase):
    def test_mixed_inputs_are_coerced_to_float64(self) -> None:
        columns = normalize_columns({"x": [1, None, Decimal("2.5")], "y": np.asarray([1, 2, 3], dtype=np.int32)})
        self.assertEqual(columns["x"].dtype, np.float64)
        np.testing.assert_array_equal(columns["x"], [1.0, np.nan, 2.5])
        np.testing.assert_array_equal(columns["y"], [1.0, 2.0, 3.0])

    def test_from_input_builds_series_data(self) -> None:
        data = SeriesData.from_input({"x": (1, 2, 3)})
        self.assertEqual(data.dimensions, ("x",))

    def test_non_numeric_values_are_rejected(self) -> None:
        with self.assertRaises(SeriesDataError):
            normalize_columns({"x": [1.0, "abc"]})

    def test_two_dimensional_input_is_rejected(self) -> None:
        with self.assertRaises(SeriesDataError):
            normalize_columns({"x": np.zeros((2, 2))})

    def test_unsupported_container_is_rejected(self) -> None:
        with self.assertRaises(SeriesDataError):
            normalize_columns([1.0, 2.0])


@unittest.skipUnless(importlib.util.find_spec("pandas") is not None, "pandas not installed")
class PandasInputTests(unittest.TestCase):
    def test_dataframe_keeps_numeric_columns(self) -> None:
        import pandas as pd

        frame = pd.DataFrame({"x": [1, 2, 3], "y": [0.5, None, 2.0], "label": ["a", "b", "c"]})
        data = SeriesData.from_input(frame)
        self.assertEqual(data.dimensions, ("x", "y"))
        np.testing.assert_array_equal(data.get("y"), [0.5, np.nan, 2.0])
        self.assertEqual(data.get_data_extent("x"), (1.0, 3.0))

    def test_pandas_series_column(self) -> None:
        import pandas as pd

        data = SeriesData.from_input({"x": pd.Series([4, 5, 6]), "y": [1.0, 2.0, 3.0]})
        np.testing.assert_array_equal(data.get("x"), [4.0, 5.0, 6.0])


@unittest.skipUnless(importlib.util.find_spec("torch") is not None, "torch not installed")
class TorchInputTests(unittest.TestCase):
    def test_tensor_columns_become_float64(self) -> None:
        import torch

        data = SeriesData.from_input({"x": torch.tensor([1.0, 2.5]), "y": torch.arange(2)})
        self.assertEqual(data.get("x").dtype, np.float64)
        np.testing.assert_array_equal(data.get("x"), [1.0, 2.5])
        np.testing.assert_array_equal(data.get("y"), [0.0, 1.0])

    def test_two_dimensional_tensor_is_rejected(self) -> None:
        import torch

        with self.assertRaises(SeriesDataError):
            normalize_columns({"x": torch.zeros((2, 2))})


class AxisModelTests(unittest.TestCase):
    def test_get_falls_back_to_defaults_unless_ignoring_parent(self) -> None:
        axis = AxisModel("x", 0, {"min": 3.0})
        self.assertEqual(axis.get("min"), 3.0)
        self.assertEqual(axis.get("type"), "value")
        self.assertIsNone(axis.get("type", True))
        self.assertFalse(axis.get("scale"))
        self.assertIsNone(axis.get("scale", True))

    def test_setter_without_capability_raises(self) -> None:
        axis = AxisModel("x", 0, capabilities=frozenset({"min"}))
        self.assertFalse(axis.has_capability("max"))
        with self.assertRaises(PermissionError):
            axis.set_max(1.0)

    def test_unknown_axis_type_is_rejected(self) -> None:
        with self.assertRaises(ZoomConfigError):
            AxisModel("x", 0, {"type": "pie"})

    def test_category_scale_uses_axis_data(self) -> None:
        axis = AxisModel("x", 0, {"type": "category", "data": ["jan", "feb", "mar"]})
        self.assertEqual(axis.scale.parse("mar"), 2.0)


if __name__ == "__main__":
    unittest.main()
