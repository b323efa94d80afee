import asyncio
import logging
from typing import Optional

import httpx

from .config import WeatherContext
from .models import Fetched, FetchFailed, FetchResult

logger = logging.getLogger(__name__)


async def make_nws_request(
    url: str,
    context: WeatherContext,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchResult:
    """Make a request to the NWS API with proper error handling.

    Never raises: network errors, timeouts, non-2xx statuses and bodies that
    are not JSON all come back as ``FetchFailed``.
    """
    headers = {
        "User-Agent": context.user_agent,
        "Accept": "application/geo+json",
    }

    async with httpx.AsyncClient(transport=transport, timeout=context.timeout) as client:
        try:
            response = await asyncio.wait_for(
                client.get(url, headers=headers), timeout=context.timeout
            )
            response.raise_for_status()
            return Fetched(response.json())
        except asyncio.TimeoutError:
            reason = f"no response within {context.timeout}s"
        except httpx.HTTPStatusError as e:
            reason = f"HTTP error! status: {e.response.status_code}"
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            reason = f"{type(e).__name__}: {e}"
        except ValueError as e:
            reason = f"invalid JSON body: {e}"

    logger.error("Error making NWS request to %s: %s", url, reason)
    return FetchFailed(reason)
