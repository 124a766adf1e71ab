from datazoom.axis import AxisModel
from datazoom.config import load_data_zoom_config, parse_data_zoom_options
from datazoom.errors import SeriesDataError, ZoomConfigError
from datazoom.model import ChartModel
from datazoom.processor import DataZoomProcessor
from datazoom.proxy import AxisBackup, AxisProxy, DataWindow, calculate_data_extent, calculate_data_window
from datazoom.registry import AxisProxyRegistry
from datazoom.series import Series, SeriesData
from datazoom.zoom import DataZoomModel

__all__ = [
    "AxisBackup",
    "AxisModel",
    "AxisProxy",
    "AxisProxyRegistry",
    "ChartModel",
    "DataWindow",
    "DataZoomModel",
    "DataZoomProcessor",
    "SeriesData",
    "Series",
    "SeriesDataError",
    "ZoomConfigError",
    "calculate_data_extent",
    "calculate_data_window",
    "load_data_zoom_config",
    "parse_data_zoom_options",
]
