"""Delivery – HttpRemoteSink, POSTs records to the remote collector."""
from __future__ import annotations

import tenacity

from mp_logship.adapters.http import HttpxHttpClient
from mp_logship.config.validation import MissingRequiredSettingError
from mp_logship.delivery.policy import RetryPolicy
from mp_logship.kernel.errors import InfrastructureError, RemoteDeliveryError
from mp_logship.observability.logging import get_logger
from mp_logship.records import LogRecord
from mp_logship.resilience.retry import TenacityRetrier

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _log_retry(retry_state: tenacity.RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.debug(
        "remote.retry",
        attempt=retry_state.attempt_number,
        wait_seconds=retry_state.next_action.sleep if retry_state.next_action else 0.0,
        error=repr(exc),
    )


class HttpRemoteSink:
    """Remote sink over HTTP.

    Sends ``record.to_json()`` as the request body. Every attempt is bounded
    by ``policy.timeout_ms``; transport errors, timeouts and non-2xx
    responses are retried until ``policy.max_attempts`` attempts were made.
    Any other failure stops at once. Either way the caller only sees
    :class:`RemoteDeliveryError`.
    """

    def __init__(self, client: HttpxHttpClient | None = None) -> None:
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> HttpxHttpClient:
        if self._client is None or self._client.is_closed:
            self._client = HttpxHttpClient()
            self._owns_client = True
        return self._client

    async def send(self, record: LogRecord, policy: RetryPolicy) -> None:
        if not policy.has_endpoint:
            logger.error("remote.endpoint_missing", severity=record.severity.value)
            raise RemoteDeliveryError(
                policy.endpoint,
                attempts=0,
                message="Remote collector endpoint is not configured",
                cause=MissingRequiredSettingError("endpoint"),
            )

        client = self._get_client()
        retrier = TenacityRetrier(
            max_attempts=policy.max_attempts,
            backoff=policy.backoff,
            retry_on=(InfrastructureError,),
            before_sleep=_log_retry,
        )
        attempts = 0

        async def attempt() -> None:
            nonlocal attempts
            attempts += 1
            await client.post(
                policy.endpoint,
                content=record.to_json().encode("utf-8"),
                headers=JSON_HEADERS,
                timeout=policy.timeout_seconds,
            )

        try:
            await retrier.execute_async(attempt)
        except tenacity.RetryError as exc:
            last = exc.last_attempt
            raise RemoteDeliveryError(
                policy.endpoint,
                attempts=last.attempt_number,
                cause=last.exception(),
            ) from last.exception()
        except Exception as exc:
            logger.error("remote.unexpected_error", attempts=attempts, error=repr(exc))
            raise RemoteDeliveryError(policy.endpoint, attempts=attempts, cause=exc) from exc

    async def aclose(self) -> None:
        """Close the HTTP client if this sink created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()


__all__ = ["HttpRemoteSink", "JSON_HEADERS"]
