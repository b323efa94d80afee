import logging
from typing import Annotated, Awaitable, Callable, Optional

from fastmcp import FastMCP
from pydantic import Field

from .config import WeatherContext
from .formatting import format_alert, format_number, format_period
from .models import FetchFailed, FetchResult, WeatherTools
from .nws_api import make_nws_request

logger = logging.getLogger(__name__)

SERVER_NAME = "weather"
SERVER_VERSION = "1.0.0"

Fetch = Callable[[str, WeatherContext], Awaitable[FetchResult]]


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


class WeatherServer:
    """Turns tool arguments into NWS requests and NWS payloads into text."""

    def __init__(self, context: WeatherContext, fetch: Fetch = make_nws_request):
        self.context = context
        self.fetch = fetch

    async def get_alerts(self, state: str) -> str:
        state_code = state.upper()
        alerts_url = self.context.url(f"/alerts?area={state_code}")

        alerts_data = await self.fetch(alerts_url, self.context)
        if isinstance(alerts_data, FetchFailed) or alerts_data.payload is None:
            return "Failed to retrieve alerts data"

        features = _as_list(_as_dict(alerts_data.payload).get("features"))
        if not features:
            return f"No active alerts for {state_code}"

        logger.debug("Formatting %d alerts for %s", len(features), state_code)
        formatted_alerts = [format_alert(feature) for feature in features]
        return f"Active alerts for {state_code}:\n\n" + "\n".join(formatted_alerts)

    async def get_forecast(self, latitude: float, longitude: float) -> str:
        # get grid point data, the space after the comma is what the API has always been sent
        points_url = self.context.url(f"/points/{latitude:.4f}, {longitude:.4f}")
        points_data = await self.fetch(points_url, self.context)
        if isinstance(points_data, FetchFailed) or points_data.payload is None:
            return (
                "Failed to retrieve grid point data for coordinates: "
                f"{format_number(latitude)}, {format_number(longitude)}"
            )

        forecast_url = _as_dict(_as_dict(points_data.payload).get("properties")).get("forecast")
        if not forecast_url or not isinstance(forecast_url, str):
            return "Failed to get forecast URL from grid point data"

        forecast_data = await self.fetch(forecast_url, self.context)
        if isinstance(forecast_data, FetchFailed) or forecast_data.payload is None:
            return "Failed to retrieve forecast data"

        periods = _as_list(_as_dict(_as_dict(forecast_data.payload).get("properties")).get("periods"))
        if not periods:
            return "No forecast periods available"

        formatted_forecast = [format_period(period) for period in periods]
        return (
            f"Forecast for {format_number(latitude)}, {format_number(longitude)}:\n\n"
            + "\n".join(formatted_forecast)
        )


def create_server(
    context: Optional[WeatherContext] = None, fetch: Fetch = make_nws_request
) -> FastMCP:
    """Build the MCP server with both weather tools registered."""
    weather_server = WeatherServer(context or WeatherContext(), fetch)
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    @mcp.tool(name=WeatherTools.GET_ALERTS.value, description="Get weather alerts for a state")
    async def get_alerts(
        state: Annotated[
            str,
            Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)"),
        ],
    ) -> str:
        return await weather_server.get_alerts(state)

    @mcp.tool(name=WeatherTools.GET_FORECAST.value, description="Get weather forecast for a location")
    async def get_forecast(
        latitude: Annotated[float, Field(ge=-90, le=90, description="Latitude of a location")],
        longitude: Annotated[float, Field(ge=-180, le=180, description="Longitude of a location")],
    ) -> str:
        return await weather_server.get_forecast(latitude, longitude)

    return mcp
