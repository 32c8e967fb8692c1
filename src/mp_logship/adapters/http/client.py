"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from mp_logship.kernel.errors import ConnectionError as InfraConnectionError
from mp_logship.kernel.errors import ExternalServiceError
from mp_logship.kernel.errors import TimeoutError as InfraTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Every failure is raised as an :class:`InfrastructureError` subclass:

    * timeouts → :class:`TimeoutError`
    * connection / transport failures → :class:`ConnectionError`
    * non-2xx responses → :class:`ExternalServiceError` (with ``status_code``)
    * malformed URLs and other client-side httpx errors → :class:`ExternalServiceError`
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise InfraTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.TransportError as exc:
            raise InfraConnectionError(url, f"{type(exc).__name__} on {method} {url}: {exc}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc), cause=exc) from exc
        except (httpx.InvalidURL, httpx.StreamError, httpx.CookieConflict) as exc:
            raise ExternalServiceError(
                service=url, message=f"{type(exc).__name__} on {method} {url}: {exc}", cause=exc
            ) from exc


__all__ = ["HttpxHttpClient"]
