from decimal import Decimal
from typing import Any, Optional

from .models import AlertFeature, ForecastPeriod


def format_number(value: Any) -> str:
    """Render a number the way the API reports it: ``40.0`` as ``40``, ``1e-05`` as ``0.00001``."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def _or(value: Optional[Any], default: str) -> str:
    if value is None or value == "":
        return default
    return format_number(value)


def format_alert(feature: AlertFeature) -> str:
    """Format an alert feature into a readable string."""
    props = feature.get("properties") if isinstance(feature, dict) else None
    if not isinstance(props, dict):
        props = {}

    return "\n".join([
        f"Event: {_or(props.get('event'), 'Unknown')}",
        f"Area: {_or(props.get('areaDesc'), 'Unknown')}",
        f"Severity: {_or(props.get('severity'), 'Unknown')}",
        f"Status: {_or(props.get('status'), 'Unknown')}",
        f"Headline: {_or(props.get('headline'), 'No description available')}",
        "---",
    ])


def format_period(period: ForecastPeriod) -> str:
    """Format one forecast period into a readable string."""
    if not isinstance(period, dict):
        period = {}

    temperature = _or(period.get("temperature"), "Unknown")
    unit = _or(period.get("temperatureUnit"), "F")
    wind = f"{_or(period.get('windSpeed'), 'Unknown')} {_or(period.get('windDirection'), '')}"

    return "\n".join([
        f"{_or(period.get('name'), 'Unknown')}:",
        f"Temperature: {temperature}°{unit}",
        f"Wind: {wind.rstrip()}",
        _or(period.get("shortForecast"), "No forecast available"),
        "---",
    ])
