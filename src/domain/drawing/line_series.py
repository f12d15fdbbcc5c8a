"""Line series of a line chart.

A ``LineSeries`` holds the style of one line (color, dash style, marker,
smoothing) plus its labels and values, and writes them as a ``c:ser``
element. The children of ``c:ser`` are order-sensitive in the chart schema;
:meth:`LineSeries.serialize` always writes them as::

    c:idx, c:order, c:tx?, c:spPr, c:marker?, c:cat?, c:val?, c:smooth

The recommended way to create one is ``LineChart.add_series``.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any, Mapping, Optional, Union

from src.env import strict_color_enabled
from src.util.casing import to_lower_camel

from .data_source import AxDataSource, NumDataSource
from .errors import InvalidDataSourceTypeError
from .options import LineSeriesOptions, coerce_options
from .series import Series, SeriesOwner
from .types import LineDashType
from .validators import validate_boolean, validate_color, validate_enum, validate_marker_symbol, validate_type

logger = logging.getLogger(__name__)

# Style options applied through the setters at construction
_STYLE_FIELDS = ("color", "show_marker", "smooth", "line_type")


class LineSeries(Series):
    """Title, style, labels and values of one line in a line chart.

    Args:
        chart: Owning chart; the series appends itself to ``chart.series``.
        options: A ``LineSeriesOptions`` record or an equivalent mapping.
        strict_color: Require ``color`` to be RRGGBB. Defaults to the
            ``CHART_STRICT_COLOR`` setting.
        **kwargs: Option fields, applied on top of ``options``.
    """

    def __init__(
        self,
        chart: SeriesOwner,
        options: Union[LineSeriesOptions, Mapping[str, Any], None] = None,
        strict_color: Optional[bool] = None,
        **kwargs: Any,
    ) -> None:
        opts = coerce_options(LineSeriesOptions, options, kwargs)
        self._strict_color = strict_color_enabled() if strict_color is None else validate_boolean("LineSeries.strict_color", strict_color)
        self._color: Optional[str] = None
        self._show_marker = False
        self._marker_symbol = validate_marker_symbol(opts.marker_symbol)
        self._line_type = LineDashType.solid
        self._smooth = False
        self._labels: Optional[AxDataSource] = None
        self._data: Optional[NumDataSource] = None
        for field in _STYLE_FIELDS:
            value = getattr(opts, field)
            if value is not None:
                setattr(self, field, value)
        super().__init__(chart, opts)
        if opts.labels is not None:
            self._set_labels(AxDataSource(opts.labels, ref=opts.labels_ref))
        if opts.data is not None:
            self._set_data(NumDataSource.from_options(opts))
        logger.debug(f"LineSeries {self.index}: line_type={self._line_type.value} show_marker={self._show_marker} smooth={self._smooth}")

    @property
    def color(self) -> Optional[str]:
        """Line color as RRGGBB hex digits, written verbatim."""
        return self._color

    @color.setter
    def color(self, value: Optional[str]) -> None:
        self._color = validate_color("LineSeries.color", value, strict=self._strict_color)

    @property
    def show_marker(self) -> bool:
        return self._show_marker

    @show_marker.setter
    def show_marker(self, value: bool) -> None:
        self._show_marker = validate_boolean("LineSeries.show_marker", value)

    @property
    def marker_symbol(self) -> Optional[Any]:
        """Marker symbol, or ``None`` to let the application choose one."""
        return self._marker_symbol

    @marker_symbol.setter
    def marker_symbol(self, value: Any) -> None:
        self._marker_symbol = validate_marker_symbol(value)

    @property
    def smooth(self) -> bool:
        return self._smooth

    @smooth.setter
    def smooth(self, value: bool) -> None:
        self._smooth = validate_boolean("LineSeries.smooth", value)

    @property
    def line_type(self) -> Any:
        """Dash style of the line, one of ``LineDashType``."""
        return self._line_type

    @line_type.setter
    def line_type(self, value: Any) -> None:
        self._line_type = validate_enum("LineSeries.line_type", LineDashType, value)

    @property
    def labels(self) -> Optional[AxDataSource]:
        return self._labels

    @property
    def data(self) -> Optional[NumDataSource]:
        return self._data

    def _set_data(self, value: NumDataSource) -> None:
        self._data = validate_type("LineSeries.data", (NumDataSource,), value, error=InvalidDataSourceTypeError)

    def _set_labels(self, value: AxDataSource) -> None:
        self._labels = validate_type("LineSeries.labels", (AxDataSource,), value, error=InvalidDataSourceTypeError)

    def serialize(self, buffer: Optional[StringIO] = None) -> StringIO:  # type: ignore[override]
        return super().serialize(buffer, self._write_series_body)

    def _write_series_body(self, buffer: StringIO) -> None:
        buffer.write("<c:spPr><a:ln>")
        if self._color is not None:
            buffer.write(f'<a:solidFill><a:srgbClr val="{self._color}"/></a:solidFill>')
        buffer.write(f'<a:prstDash val="{to_lower_camel(self._line_type.value)}"/>')
        buffer.write("<a:round/>")
        buffer.write("</a:ln></c:spPr>")

        if not self._show_marker:
            buffer.write('<c:marker><c:symbol val="none"/></c:marker>')
        elif self._marker_symbol is not None:
            buffer.write(f'<c:marker><c:symbol val="{self._marker_symbol.value}"/></c:marker>')

        if self._labels is not None:
            self._labels.serialize(buffer)
        if self._data is not None:
            self._data.serialize(buffer)
        buffer.write(f'<c:smooth val="{"1" if self._smooth else "0"}"/>')
