"""Tests for configuration flags, the SSOT value sets and the casing helper."""

import importlib
import logging

import pytest

import src
import src.util.env as env_util
from src.domain.drawing import InvalidColorValueError, LineChart, LineDashType, MarkerSymbol
from src.env import get_log_level, strict_color_enabled
from src.shared.ssot_loader import SSOTLoadError, get_canonical_values, get_descriptions
from src.util.casing import to_lower_camel


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    # Keep a developer's .env out of the tests
    monkeypatch.setattr(env_util, "_loaded", True)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("solid", "solid"),
        ("lg_dash", "lgDash"),
        ("dash_dot", "dashDot"),
        ("lg_dash_dot", "lgDashDot"),
        ("lg_dash_dot_dot", "lgDashDotDot"),
        ("Solid", "solid"),
        ("dash__dot_", "dashDot"),
        ("", ""),
    ],
)
def test_to_lower_camel(token, expected):
    assert to_lower_camel(token) == expected


def test_dash_types_match_value_set():
    assert [d.value for d in LineDashType] == ["solid", "dot", "dash", "lg_dash", "dash_dot", "lg_dash_dot", "lg_dash_dot_dot"]


def test_marker_symbols_exclude_default_sentinel():
    values = {m.value for m in MarkerSymbol}
    assert "default" not in values
    assert {"none", "triangle", "circle", "auto", "picture"} <= values


def test_enum_members_compare_as_strings():
    assert LineDashType.lg_dash == "lg_dash"


def test_descriptions():
    assert get_descriptions("LineDashType.yml")["lg_dash_dot"] == "Long dash followed by a dot"


def test_missing_ssot_file():
    with pytest.raises(SSOTLoadError):
        get_canonical_values("DoesNotExist.yml")


def test_log_level(monkeypatch):
    monkeypatch.delenv("LOGLEVEL", raising=False)
    assert get_log_level() == "INFO"
    monkeypatch.setenv("LOGLEVEL", "debug")
    assert get_log_level() == "DEBUG"


@pytest.mark.parametrize("value, expected", [("1", True), ("true", True), ("On", True), ("0", False), ("no", False), ("", False)])
def test_strict_color_flag(monkeypatch, value, expected):
    monkeypatch.setenv("CHART_STRICT_COLOR", value)
    assert strict_color_enabled() is expected


def test_strict_color_from_environment(monkeypatch):
    monkeypatch.setenv("CHART_STRICT_COLOR", "1")
    series = LineChart().add_series()
    series.color = "00ff7F"
    with pytest.raises(InvalidColorValueError):
        series.color = "red"
    assert series.color == "00ff7F"


def test_strict_color_argument_overrides_environment(monkeypatch):
    monkeypatch.setenv("CHART_STRICT_COLOR", "1")
    chart = LineChart()
    assert chart.add_series(strict_color=False, color="red").color == "red"
    monkeypatch.delenv("CHART_STRICT_COLOR")
    with pytest.raises(InvalidColorValueError):
        chart.add_series(strict_color=True, color="#FF0000")


@pytest.mark.parametrize("value", ["verbose", "loud", "5x"])
def test_unknown_log_level_falls_back_to_default(monkeypatch, value):
    monkeypatch.setenv("LOGLEVEL", value)
    assert get_log_level() == "INFO"


def test_package_logging_leaves_root_handlers_alone():
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)
    try:
        importlib.reload(src)
        assert marker in root.handlers
        package_handlers = logging.getLogger("src").handlers
        assert len(package_handlers) == 1
        assert isinstance(package_handlers[0].formatter, src.ColorFormatter)
    finally:
        root.removeHandler(marker)


def test_color_formatter_does_not_alter_the_record():
    record = logging.LogRecord("src.domain", logging.WARNING, __file__, 1, "hello", None, None)
    src.ColorFormatter("%(levelname)s %(name)s %(link)s %(message)s").format(record)
    assert record.levelname == "WARNING"
    assert record.name == "src.domain"
