from .data_source import AxDataSource, NumDataSource
from .errors import (
    ChartValidationError,
    InvalidColorValueError,
    InvalidDataSourceTypeError,
    InvalidEnumValueError,
    TypeMismatchError,
)
from .line_chart import LineChart
from .line_series import LineSeries
from .options import LineChartOptions, LineSeriesOptions, SeriesOptions
from .series import Series, SeriesTitle
from .types import DEFAULT_MARKER, ChartGrouping, LineDashType, MarkerSymbol

__all__ = [
    "LineDashType",
    "MarkerSymbol",
    "ChartGrouping",
    "DEFAULT_MARKER",
    "SeriesOptions",
    "LineSeriesOptions",
    "LineChartOptions",
    "Series",
    "SeriesTitle",
    "AxDataSource",
    "NumDataSource",
    "LineSeries",
    "LineChart",
    "ChartValidationError",
    "TypeMismatchError",
    "InvalidDataSourceTypeError",
    "InvalidEnumValueError",
    "InvalidColorValueError",
]
