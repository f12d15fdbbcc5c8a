from __future__ import annotations

import logging
from io import StringIO
from typing import Any, List, Mapping, Optional, Tuple, Union

from .line_series import LineSeries
from .options import LineChartOptions, LineSeriesOptions, coerce_options
from .series import Series
from .types import ChartGrouping
from .validators import validate_boolean, validate_enum

logger = logging.getLogger(__name__)


class LineChart:
    """Plot-area part of a line chart (``c:lineChart``) and owner of its series."""

    def __init__(self, options: Union[LineChartOptions, Mapping[str, Any], None] = None, **kwargs: Any) -> None:
        opts = coerce_options(LineChartOptions, options, kwargs)
        self.series: List[Series] = []
        self._grouping = ChartGrouping.standard
        self._vary_colors = False
        self._show_marker = True
        self.ax_ids: Tuple[int, int] = opts.ax_ids
        if opts.grouping is not None:
            self.grouping = opts.grouping
        if opts.vary_colors is not None:
            self.vary_colors = opts.vary_colors
        if opts.show_marker is not None:
            self.show_marker = opts.show_marker

    @property
    def grouping(self) -> Any:
        return self._grouping

    @grouping.setter
    def grouping(self, value: Any) -> None:
        self._grouping = validate_enum("LineChart.grouping", ChartGrouping, value)

    @property
    def vary_colors(self) -> bool:
        return self._vary_colors

    @vary_colors.setter
    def vary_colors(self, value: bool) -> None:
        self._vary_colors = validate_boolean("LineChart.vary_colors", value)

    @property
    def show_marker(self) -> bool:
        """Chart-level marker switch; series still decide their own symbol."""
        return self._show_marker

    @show_marker.setter
    def show_marker(self, value: bool) -> None:
        self._show_marker = validate_boolean("LineChart.show_marker", value)

    def add_series(self, options: Union[LineSeriesOptions, Mapping[str, Any], None] = None, **kwargs: Any) -> LineSeries:
        series = LineSeries(self, options, **kwargs)
        logger.debug(f"Added line series {series.index} ({len(self.series)} total)")
        return series

    def serialize(self, buffer: Optional[StringIO] = None) -> StringIO:
        buffer = buffer if buffer is not None else StringIO()
        buffer.write("<c:lineChart>")
        buffer.write(f'<c:grouping val="{self._grouping.value}"/>')
        buffer.write(f'<c:varyColors val="{1 if self._vary_colors else 0}"/>')
        for series in self.series:
            series.serialize(buffer)
        buffer.write(f'<c:marker val="{1 if self._show_marker else 0}"/>')
        for ax_id in self.ax_ids:
            buffer.write(f'<c:axId val="{ax_id}"/>')
        buffer.write("</c:lineChart>")
        return buffer

    def to_xml(self) -> str:
        return self.serialize().getvalue()
