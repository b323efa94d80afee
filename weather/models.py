from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypedDict, TypeVar, Union

T = TypeVar("T")


class WeatherTools(str, Enum):
    GET_ALERTS = "get-alerts"
    GET_FORECAST = "get-forecast"


class AlertProperties(TypedDict, total=False):
    event: str
    areaDesc: str
    severity: str
    status: str
    headline: str


class AlertFeature(TypedDict, total=False):
    properties: AlertProperties


class AlertsResponse(TypedDict, total=False):
    features: list[AlertFeature]


class PointsProperties(TypedDict, total=False):
    forecast: str


class PointsResponse(TypedDict, total=False):
    properties: PointsProperties


class ForecastPeriod(TypedDict, total=False):
    name: str
    temperature: float
    temperatureUnit: str
    windSpeed: str
    windDirection: str
    shortForecast: str


class ForecastProperties(TypedDict, total=False):
    periods: list[ForecastPeriod]


class ForecastResponse(TypedDict, total=False):
    properties: ForecastProperties


@dataclass(frozen=True)
class Fetched(Generic[T]):
    payload: T


@dataclass(frozen=True)
class FetchFailed:
    reason: str


FetchResult = Union[Fetched[Any], FetchFailed]
