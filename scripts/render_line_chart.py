#!/usr/bin/env python3
"""
Render a c:lineChart fragment from a YAML description and print it.

Usage: render_line_chart.py [chart.yml]

The YAML file holds the chart options plus a ``series`` list of line series
options, e.g.:

    grouping: standard
    series:
      - title: Revenue
        labels: [Q1, Q2, Q3]
        data: [10, 12.5, 9]
        line_type: lg_dash
        show_marker: true
        marker_symbol: triangle

Without an argument a built-in sample is rendered.
"""

import sys
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from src.domain.drawing import ChartValidationError, LineChart, LineDashType, MarkerSymbol
from src.shared.ssot_loader import get_descriptions

SAMPLE: Dict[str, Any] = {
    "series": [
        {"title": "Sample", "labels": ["A", "B", "C"], "data": [1, 3, 2], "color": "1F77B4", "smooth": True},
        {"title": "Dashed", "data": [2, 1, 4], "line_type": "dash_dot", "show_marker": True, "marker_symbol": "diamond"},
    ]
}


def load_description(path: str | None) -> Dict[str, Any]:
    if path is None:
        return SAMPLE
    with Path(path).open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Unexpected YAML structure in {path}; expected a mapping")
    return raw


def render(description: Dict[str, Any]) -> str:
    options = dict(description)
    series_list = options.pop("series", []) or []
    chart = LineChart(options)
    for series_options in series_list:
        chart.add_series(series_options)
    return chart.to_xml()


def print_value_sets() -> None:
    dash_descriptions = get_descriptions("LineDashType.yml")
    print("Dash styles:")
    for dash in LineDashType:
        print(f"   • {dash.value:<16} {dash_descriptions.get(dash.value, '')}")
    print(f"Marker symbols: {', '.join(m.value for m in MarkerSymbol)}")


if __name__ == "__main__":
    try:
        xml = render(load_description(sys.argv[1] if len(sys.argv) > 1 else None))
    except (ChartValidationError, ValidationError, ValueError, OSError) as e:
        print(f"❌ {e}")
        print_value_sets()
        exit(1)
    print(xml)
    exit(0)
