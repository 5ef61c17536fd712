"""NotificationClient for posting JSON notifications over HTTP."""

import asyncio
import logging
import time
from typing import Any

import httpx

from .config import DEFAULT_TIMEOUT
from .exceptions import TransportError, TransportErrorKind

logger = logging.getLogger(__name__)


def _transport_error(exc: Exception) -> TransportError:
    """Map an httpx failure onto a TransportError kind."""
    if isinstance(exc, httpx.TimeoutException):
        return TransportError(f"Request timeout: {exc}", TransportErrorKind.TIMEOUT)
    if isinstance(exc, (httpx.DecodingError, httpx.ReadError, httpx.RemoteProtocolError)):
        return TransportError(
            f"Cannot read response: {exc}", TransportErrorKind.DECODE
        )
    return TransportError(f"Cannot connect to endpoint: {exc}", TransportErrorKind.CONNECT)


class NotificationClient:
    """Sends one JSON payload per call to an HTTP endpoint.

    Each send is a single POST attempt with an overall timeout. Nothing is
    retried; every failure surfaces as a TransportError.

    Example:
        >>> with NotificationClient(timeout=5.0) as client:
        ...     body = client.send("https://httpbin.org/post", {"message": "hi"})
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the client.

        Args:
            timeout: Overall deadline in seconds for each request, from
                connecting until the last byte of the response body
        """
        self._timeout = timeout
        self._client = httpx.Client(timeout=timeout)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close HTTP client."""
        self.close()

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    @property
    def timeout(self) -> float:
        return self._timeout

    def send(self, endpoint: str, payload: dict[str, Any]) -> str:
        """POST ``payload`` as JSON and return the response body.

        Args:
            endpoint: Absolute URL to post to
            payload: JSON-serializable body

        Returns:
            Raw response body as text

        Raises:
            TransportError: Connection, timeout, status or decode failure
        """
        logger.debug("POST %s", endpoint)
        deadline = time.monotonic() + self._timeout
        try:
            with self._client.stream("POST", endpoint, json=payload) as response:
                body = self._read_body(response, deadline)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _transport_error(e) from e
        return self._handle_response(endpoint, response, body)

    async def asend(self, endpoint: str, payload: dict[str, Any]) -> str:
        """Async variant of :meth:`send` with the same contract."""
        logger.debug("POST %s", endpoint)
        try:
            response = await asyncio.wait_for(
                self._apost(endpoint, payload), timeout=self._timeout
            )
        except asyncio.TimeoutError as e:
            raise self._deadline_error() from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _transport_error(e) from e
        return self._handle_response(endpoint, response, response.text)

    async def _apost(self, endpoint: str, payload: dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.post(endpoint, json=payload)

    def _deadline_error(self) -> TransportError:
        return TransportError(
            f"No complete response within {self._timeout}s",
            TransportErrorKind.TIMEOUT,
        )

    def _read_body(self, response: httpx.Response, deadline: float) -> str:
        # httpx timeouts bound each network step; the deadline bounds the sum
        chunks = []
        if time.monotonic() > deadline:
            raise self._deadline_error()
        for chunk in response.iter_text():
            if time.monotonic() > deadline:
                raise self._deadline_error()
            chunks.append(chunk)
        return "".join(chunks)

    def _handle_response(
        self, endpoint: str, response: httpx.Response, body: str
    ) -> str:
        if not response.is_success:
            raise TransportError(
                f"{endpoint} returned HTTP {response.status_code}",
                TransportErrorKind.STATUS,
                status_code=response.status_code,
                body=body,
            )
        return body
