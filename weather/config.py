from dataclasses import dataclass

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"
REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class WeatherContext:
    """Settings shared by the fetch helper and the tools of one server."""
    base_url: str = NWS_API_BASE
    user_agent: str = USER_AGENT
    timeout: float = REQUEST_TIMEOUT

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"
