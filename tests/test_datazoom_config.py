from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from datazoom.config import load_data_zoom_config, parse_data_zoom_options
from datazoom.errors import ZoomConfigError
from datazoom.zoom import DataZoomModel


class DataZoomConfigTests(unittest.TestCase):
    def test_load_config_builds_zoom_models(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "zoom.toml"
            path.write_text(
                "\n".join(
                    [
                        "[[data_zoom]]",
                        'id = "inside"',
                        "start = 10",
                        "end = 90.5",
                        'filter_mode = "empty"',
                        "x_axis_index = [0, 1]",
                        "",
                        "[[data_zoom]]",
                        'id = "toolbox"',
                        "start_value = 3.5",
                        "from_toolbox = true",
                        "y_axis_index = 2",
                    ]
                ),
                encoding="utf-8",
            )
            inside, toolbox = load_data_zoom_config(path)

        self.assertEqual(inside.zoom_id, "inside")
        self.assertEqual((inside.start, inside.end), (10.0, 90.5))
        self.assertEqual(inside.filter_mode, "empty")
        self.assertEqual(list(inside.each_target_axis()), [("x", 0), ("x", 1)])
        self.assertTrue(toolbox.from_toolbox)
        self.assertEqual(toolbox.start_value, 3.5)
        self.assertIsNone(toolbox.start)
        self.assertEqual(toolbox.target_axes, {"y": (2,)})

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_data_zoom_config(Path(tmp) / "absent.toml")

    def test_invalid_toml_raises_config_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "zoom.toml"
            path.write_text("[[data_zoom]\nstart =", encoding="utf-8")
            with self.assertRaises(ZoomConfigError):
                load_data_zoom_config(path)

    def test_defaults_target_first_x_axis(self) -> None:
        (model,) = parse_data_zoom_options({"data_zoom": [{}]})
        self.assertEqual(model.zoom_id, "dataZoom0")
        self.assertEqual(model.target_axes, {"x": (0,)})
        self.assertEqual(model.filter_mode, "filter")

    def test_invalid_fields_are_rejected(self) -> None:
        bad_entries = [
            {"filter_mode": "drop"},
            {"from_toolbox": "yes"},
            {"start": "10"},
            {"end": True},
            {"x_axis_index": [0, "1"]},
            {"y_axis_index": False},
        ]
        for entry in bad_entries:
            with self.subTest(entry=entry):
                with self.assertRaises(ZoomConfigError):
                    parse_data_zoom_options({"data_zoom": [entry]})

    def test_data_zoom_must_be_table_array(self) -> None:
        with self.assertRaises(ZoomConfigError):
            parse_data_zoom_options({"data_zoom": {"start": 1}})
        with self.assertRaises(ZoomConfigError):
            parse_data_zoom_options({"data_zoom": [1]})

    def test_zoom_model_rejects_unknown_filter_mode(self) -> None:
        with self.assertRaises(ValueError):
            DataZoomModel(filter_mode="weakFilter")  # type: ignore[arg-type]

    def test_zoom_models_compare_by_identity(self) -> None:
        self.assertNotEqual(DataZoomModel(), DataZoomModel())


if __name__ == "__main__":
    unittest.main()
