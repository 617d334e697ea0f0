"""Internal HTTP handling for the range editor client.

Turns httpx calls into decoded JSON or client exceptions, and optionally
resends requests that hit a connect error, a timeout or a 502/503/504.
Import from `client` rather than from here.
"""

import time
from typing import Any, Iterator, Literal

import httpx

from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

HttpMethod = Literal["GET", "POST", "DELETE"]

# Gateway and availability errors worth sending again
TRANSIENT_STATUS_CODES = {502, 503, 504}

BACKOFF_BASE_SECONDS = 0.5
BACKOFF_CAP_SECONDS = 30.0


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Extract message, error type and details from an error response.

    Understands the service's {"error", "detail", ...} bodies and FastAPI's
    request validation lists. Falls back to the raw text.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, details).
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return (text or f"HTTP {response.status_code} error"), None, None

    if not isinstance(body, dict):
        return str(body), None, None

    detail = body.get("detail")
    if isinstance(detail, list):
        messages = [
            f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
            for err in detail
        ]
        return "; ".join(messages), "validation_error", {"errors": detail}
    if isinstance(detail, str):
        details = {k: v for k, v in body.items() if k not in ("detail", "type")} or None
        return detail, body.get("type"), details
    if "error" in body:
        return body["error"], body.get("type"), None
    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the matching client exception for an error response.

    Raises:
        ValidationError: For HTTP 422 responses.
        NotFoundError: For HTTP 404 responses.
        ConflictError: For HTTP 409 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    status_code = response.status_code
    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    if status_code == 422:
        raise ValidationError(message=message, details=details, response_body=response_body)
    if status_code == 404:
        raise NotFoundError(
            message=message,
            resource_id=(details or {}).get("session_id"),
            details=details,
            response_body=response_body,
        )
    if status_code == 409:
        raise ConflictError(message=message, details=details, response_body=response_body)
    if status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    raise APIError(
        message=message,
        status_code=status_code,
        error_type=error_type,
        details=details,
        response_body=response_body,
    )


def _retry_delays(retries: int) -> Iterator[float]:
    """Yield the sleep before each retry: 0.5s, 1s, 2s, ... up to the cap."""
    for retry in range(retries):
        yield min(BACKOFF_BASE_SECONDS * 2**retry, BACKOFF_CAP_SECONDS)


class HTTPClient:
    """Synchronous HTTP client for the range editor API.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Service root, e.g. http://localhost:8000.
            timeout: Request timeout in seconds.
            retry_enabled: Retry connect errors, timeouts and 502/503/504.
            max_retries: Retries after the first attempt.
            transport: Optional httpx transport, used by tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _send(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None,
        json: dict[str, Any] | None,
    ) -> httpx.Response:
        """Send one request, translating httpx transport errors."""
        url = f"{self.base_url}{path}"
        try:
            return self._client.request(method=method, url=path, params=params, json=json)
        except httpx.ConnectError as e:
            raise ConnectionError(
                message=f"Could not reach range service at {url}", url=url, cause=e
            ) from e
        except httpx.TimeoutException as e:
            raise TimeoutError(
                message=f"Range service did not answer {method} {path}",
                timeout=self.timeout,
                url=url,
            ) from e

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Call the range service and decode its JSON reply.

        With retries on, transport failures and 502/503/504 replies are sent
        again after each delay from _retry_delays(). Once the delays run out
        the last failure is raised.

        Returns:
            The decoded body, or None for an empty reply.

        Raises:
            ConnectionError: The service could not be reached.
            TimeoutError: The service did not answer in time.
            APIError: The service replied with an error status.
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        delays = _retry_delays(self.max_retries if self.retry_enabled else 0)

        while True:
            try:
                response = self._send(method, path, params, json)
            except (ConnectionError, TimeoutError):
                delay = next(delays, None)
                if delay is None:
                    raise
            else:
                delay = None
                if response.status_code in TRANSIENT_STATUS_CODES:
                    delay = next(delays, None)
                if delay is None:
                    _raise_for_status(response)
                    return response.json() if response.content else None
            time.sleep(delay)

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)
