import logging

import pytest
from fastmcp import FastMCP

import weather
from weather import build_parser, context_from_args
from weather.client import parse_command
from weather.config import NWS_API_BASE, WeatherContext


def test_defaults_build_default_context():
    args = build_parser().parse_args([])

    assert context_from_args(args) == WeatherContext()
    assert args.log_level == "INFO"


def test_options_override_context():
    args = build_parser().parse_args([
        "--base-url", "http://localhost:8080",
        "--user-agent", "ops-dashboard/2.0",
        "--timeout", "5",
        "--log-level", "DEBUG",
    ])

    assert context_from_args(args) == WeatherContext("http://localhost:8080", "ops-dashboard/2.0", 5.0)


def test_context_url_joins_base():
    assert WeatherContext().url("/alerts?area=CA") == f"{NWS_API_BASE}/alerts?area=CA"
    assert WeatherContext(base_url="http://localhost/").url("/points") == "http://localhost/points"


def test_parse_client_commands():
    assert parse_command("alerts ca") == ("get-alerts", {"state": "ca"})
    assert parse_command("forecast 37.7 -122.4") == (
        "get-forecast", {"latitude": 37.7, "longitude": -122.4}
    )
    assert parse_command("forecast north west") is None
    assert parse_command("weather") is None
    assert parse_command("") is None


def test_main_logs_readiness_and_serves_stdio(monkeypatch, caplog):
    runs = []
    monkeypatch.setattr(FastMCP, "run", lambda self, **kwargs: runs.append(kwargs))

    with caplog.at_level(logging.INFO):
        weather.main([])

    assert runs == [{"transport": "stdio", "show_banner": False}]
    assert "Weather MCP Server running on stdio" in caplog.text


def test_main_exits_with_status_1_on_startup_failure(monkeypatch, caplog):
    def broken_server(context):
        raise RuntimeError("stdin closed")

    monkeypatch.setattr(weather, "create_server", broken_server)

    with pytest.raises(SystemExit) as exc_info:
        weather.main([])

    assert exc_info.value.code == 1
    assert "Fatal error in main()" in caplog.text
    assert "stdin closed" in caplog.text
