"""Tests for the base series bookkeeping and the owning line chart."""

import pytest
from pydantic import ValidationError

from src.domain.drawing import (
    ChartGrouping,
    InvalidEnumValueError,
    LineChart,
    SeriesTitle,
    TypeMismatchError,
)


def test_index_follows_chart_order():
    chart = LineChart()
    first = chart.add_series()
    second = chart.add_series()
    assert (first.index, second.index) == (0, 1)
    assert second.order == 1


def test_explicit_order():
    chart = LineChart()
    series = chart.add_series(order=5)
    assert series.index == 0
    assert '<c:idx val="0"/><c:order val="5"/>' in series.to_xml()


def test_order_validation():
    chart = LineChart()
    series = chart.add_series()
    with pytest.raises(TypeMismatchError):
        series.order = "1"
    with pytest.raises(ValueError):
        series.order = -1
    with pytest.raises(ValidationError):
        chart.add_series(order=-1)


def test_unknown_option_is_rejected():
    with pytest.raises(ValidationError):
        LineChart().add_series(colour="FF0000")


def test_title_with_reference():
    chart = LineChart()
    series = chart.add_series(title="Revenue", title_ref="Sheet1!$B$1")
    assert (
        "<c:tx><c:strRef><c:f>Sheet1!$B$1</c:f>"
        '<c:strCache><c:ptCount val="1"/><c:pt idx="0"><c:v>Revenue</c:v></c:pt></c:strCache>'
        "</c:strRef></c:tx>"
    ) in series.to_xml()


def test_title_setter():
    series = LineChart().add_series()
    series.title = "Plain"
    assert isinstance(series.title, SeriesTitle)
    series.title = SeriesTitle("Cell", ref="Sheet1!$C$1")
    assert series.title.ref == "Sheet1!$C$1"
    with pytest.raises(TypeMismatchError):
        series.title = 42
    assert series.title.text == "Cell"
    series.title = None
    assert "<c:tx>" not in series.to_xml()


def test_chart_defaults():
    assert LineChart().to_xml() == (
        '<c:lineChart><c:grouping val="standard"/><c:varyColors val="0"/>'
        '<c:marker val="1"/><c:axId val="500000001"/><c:axId val="500000002"/></c:lineChart>'
    )


def test_chart_wraps_series_in_order():
    chart = LineChart(grouping="stacked", vary_colors=True, ax_ids=(1, 2))
    chart.add_series(title="a")
    chart.add_series(title="b")
    xml = chart.to_xml()
    assert xml.startswith('<c:lineChart><c:grouping val="stacked"/><c:varyColors val="1"/><c:ser>')
    assert xml.index("<c:v>a</c:v>") < xml.index("<c:v>b</c:v>")
    assert xml.endswith('</c:ser><c:marker val="1"/><c:axId val="1"/><c:axId val="2"/></c:lineChart>')


def test_chart_validation():
    chart = LineChart()
    with pytest.raises(InvalidEnumValueError):
        chart.grouping = "clustered"
    assert chart.grouping == ChartGrouping.standard
    with pytest.raises(TypeMismatchError):
        chart.show_marker = "no"
    chart.grouping = "percentStacked"
    assert '<c:grouping val="percentStacked"/>' in chart.to_xml()
