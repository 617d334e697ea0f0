"""Main range editor client class.

RangeEditorClient gives namespaced access to the API through sub-clients
(client.ranges, client.validation).

Example:
    with RangeEditorClient(base_url="http://localhost:8000") as client:
        session = client.ranges.create(
            initial_start_date=datetime(2024, 10, 16),
            initial_start_time=datetime(2024, 10, 16, 23, 0),
            initial_end_time=datetime(2024, 10, 17, 0, 0),
            default_duration_minutes=120,
        )
        session = client.ranges.set_start_time(
            session.session_id, datetime(2024, 10, 16, 23, 30)
        )
        print(session.snapshot.end_time)  # 2024-10-17 01:30
"""

from typing import Any

from client._http import HTTPClient
from client._ranges import RangesClient
from client._validation import ValidationClient


class RangeEditorClient:
    """Synchronous client for the range editor REST API.

    Attributes:
        base_url: The base URL of the range editor server.
        timeout: Request timeout in seconds.
        retry_enabled: Whether automatic retry is enabled.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: The base URL of the server (default: http://localhost:8000).
            timeout: Request timeout in seconds (default: 30.0).
            retry_enabled: Whether to retry on connection errors, timeouts and
                HTTP 502/503/504 with exponential backoff (default: False).
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom httpx transport (e.g., httpx.MockTransport for testing).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )
        self._ranges: RangesClient | None = None
        self._validation: ValidationClient | None = None

    def __enter__(self) -> "RangeEditorClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> float:
        return self._http.timeout

    @property
    def retry_enabled(self) -> bool:
        return self._http.retry_enabled

    @property
    def max_retries(self) -> int:
        return self._http.max_retries

    @property
    def ranges(self) -> RangesClient:
        """Sub-client for range editing sessions."""
        if self._ranges is None:
            self._ranges = RangesClient(self._http)
        return self._ranges

    @property
    def validation(self) -> ValidationClient:
        """Sub-client for time constraint checks."""
        if self._validation is None:
            self._validation = ValidationClient(self._http)
        return self._validation

    def health(self) -> bool:
        """Return True if the server reports itself healthy."""
        data = self._http.get("/health")
        return data.get("status") == "healthy"
