"""Unit tests for the client HTTP utilities.

This module tests the HTTP handling layer defined in client/_http.py.
The tests verify:

1. Helper Functions:
   - _parse_error_response: Extracting error info from service responses
   - _raise_for_status: Mapping HTTP status codes to exception types
   - _retry_delays: Exponential backoff schedule for retries

2. HTTPClient:
   - Initialization and context manager support
   - Request methods (GET, POST, DELETE)
   - Error handling and exception mapping
   - Retry logic with exponential backoff

Note: These tests use httpx's mock transport to avoid real network calls.
"""

import json

import httpx
import pytest

from client._http import (
    BACKOFF_BASE_SECONDS,
    BACKOFF_CAP_SECONDS,
    HTTPClient,
    _parse_error_response,
    _raise_for_status,
    _retry_delays,
)
from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip backoff delays and record them instead."""
    delays = []
    monkeypatch.setattr("client._http.time.sleep", delays.append)
    return delays


def mock_client(handler, **kwargs) -> HTTPClient:
    return HTTPClient(
        base_url="http://localhost:8000",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# =============================================================================
# Helper Function Tests: _parse_error_response
# =============================================================================


class TestParseErrorResponse:
    """Tests for the _parse_error_response helper function."""

    def test_parse_service_error_body(self) -> None:
        """Service errors carry error/detail plus extra context fields."""
        response = httpx.Response(
            status_code=404,
            json={
                "error": "Range Session Not Found",
                "detail": "Range session 'abc' not found",
                "session_id": "abc",
            },
        )
        message, error_type, details = _parse_error_response(response)

        assert message == "Range session 'abc' not found"
        assert error_type is None
        assert details == {"error": "Range Session Not Found", "session_id": "abc"}

    def test_parse_detail_with_type(self) -> None:
        response = httpx.Response(
            status_code=400,
            json={"error": "Invalid Value", "detail": "bad", "type": "ValueError"},
        )
        message, error_type, _ = _parse_error_response(response)

        assert message == "bad"
        assert error_type == "ValueError"

    def test_parse_plain_detail(self) -> None:
        response = httpx.Response(status_code=400, json={"detail": "Invalid request"})

        assert _parse_error_response(response) == ("Invalid request", None, None)

    def test_parse_request_validation_errors(self) -> None:
        """FastAPI request validation returns a list of errors in detail."""
        errors = [
            {"loc": ["body", "value"], "msg": "Input should be a valid datetime"},
            {"loc": ["body", "edit"], "msg": "Field required"},
        ]
        response = httpx.Response(status_code=422, json={"detail": errors})

        message, error_type, details = _parse_error_response(response)

        assert message == "value: Input should be a valid datetime; edit: Field required"
        assert error_type == "validation_error"
        assert details == {"errors": errors}

    def test_parse_error_field_only(self) -> None:
        response = httpx.Response(status_code=500, json={"error": "Boom"})

        assert _parse_error_response(response)[0] == "Boom"

    def test_parse_plain_text(self) -> None:
        response = httpx.Response(status_code=502, text="Bad Gateway")

        assert _parse_error_response(response) == ("Bad Gateway", None, None)

    def test_parse_empty_response(self) -> None:
        response = httpx.Response(status_code=503)

        assert _parse_error_response(response)[0] == "HTTP 503 error"

    def test_parse_non_object_json(self) -> None:
        response = httpx.Response(status_code=400, json=["a", "b"])

        assert _parse_error_response(response)[0] == "['a', 'b']"


# =============================================================================
# Helper Function Tests: _raise_for_status
# =============================================================================


class TestRaiseForStatus:
    """Tests for the _raise_for_status helper function."""

    def test_success_does_not_raise(self) -> None:
        _raise_for_status(httpx.Response(status_code=200, json={}))

    def test_422_raises_validation_error(self) -> None:
        response = httpx.Response(status_code=422, json={"detail": []})

        with pytest.raises(ValidationError):
            _raise_for_status(response)

    def test_404_raises_not_found_with_session_id(self) -> None:
        response = httpx.Response(
            status_code=404, json={"detail": "missing", "session_id": "abc"}
        )

        with pytest.raises(NotFoundError) as exc_info:
            _raise_for_status(response)

        assert exc_info.value.resource_id == "abc"

    def test_409_raises_conflict_error(self) -> None:
        response = httpx.Response(
            status_code=409, json={"detail": "limit", "max_sessions": 5}
        )

        with pytest.raises(ConflictError) as exc_info:
            _raise_for_status(response)

        assert exc_info.value.details["max_sessions"] == 5

    def test_5xx_raises_server_error(self) -> None:
        with pytest.raises(ServerError) as exc_info:
            _raise_for_status(httpx.Response(status_code=503, text="down"))

        assert exc_info.value.status_code == 503

    def test_other_4xx_raises_api_error(self) -> None:
        response = httpx.Response(
            status_code=400, json={"detail": "bad edit", "type": "ValueError"}
        )

        with pytest.raises(APIError) as exc_info:
            _raise_for_status(response)

        assert type(exc_info.value) is APIError
        assert exc_info.value.status_code == 400
        assert exc_info.value.error_type == "ValueError"

    def test_response_body_is_preserved(self) -> None:
        body = {"detail": "missing", "session_id": "abc"}

        with pytest.raises(NotFoundError) as exc_info:
            _raise_for_status(httpx.Response(status_code=404, json=body))

        assert exc_info.value.response_body == body


# =============================================================================
# Helper Function Tests: _retry_delays
# =============================================================================


class TestRetryDelays:
    """Tests for the _retry_delays schedule."""

    def test_no_retries_no_delays(self) -> None:
        assert list(_retry_delays(0)) == []

    def test_doubles_from_base(self) -> None:
        assert list(_retry_delays(3)) == [
            BACKOFF_BASE_SECONDS,
            BACKOFF_BASE_SECONDS * 2,
            BACKOFF_BASE_SECONDS * 4,
        ]

    def test_capped(self) -> None:
        assert list(_retry_delays(20))[-1] == BACKOFF_CAP_SECONDS


# =============================================================================
# HTTPClient Tests
# =============================================================================


class TestHTTPClient:
    """Tests for HTTPClient requests and error mapping."""

    def test_default_initialization(self) -> None:
        client = HTTPClient(base_url="http://localhost:8000/")

        assert client.base_url == "http://localhost:8000"
        assert client.timeout == 30.0
        assert client.retry_enabled is False
        assert client.max_retries == 3
        client.close()

    def test_context_manager(self) -> None:
        with HTTPClient(base_url="http://localhost:8000") as client:
            assert isinstance(client, HTTPClient)

    def test_get_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/ranges"
            return httpx.Response(200, json={"session_ids": [], "count": 0})

        with mock_client(handler) as client:
            assert client.get("/ranges") == {"session_ids": [], "count": 0}

    def test_get_filters_none_params(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert dict(request.url.params) == {"keep": "1"}
            return httpx.Response(200, json={})

        with mock_client(handler) as client:
            client.get("/ranges", params={"keep": "1", "drop": None})

    def test_post_sends_json_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert json.loads(request.content) == {"value": "2024-10-16T13:00:00"}
            return httpx.Response(200, json={"ok": True})

        with mock_client(handler) as client:
            assert client.post("/ranges/x/end-time", json={"value": "2024-10-16T13:00:00"}) == {
                "ok": True
            }

    def test_delete_with_empty_response(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "DELETE"
            return httpx.Response(204)

        with mock_client(handler) as client:
            assert client.delete("/ranges/x") is None

    def test_404_raises_not_found_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "missing", "session_id": "x"})

        with mock_client(handler) as client:
            with pytest.raises(NotFoundError):
                client.get("/ranges/x")

    def test_connection_error_raised(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with mock_client(handler) as client:
            with pytest.raises(ConnectionError) as exc_info:
                client.get("/health")

        assert exc_info.value.url == "http://localhost:8000/health"
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_timeout_error_raised(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with mock_client(handler, timeout=2.5) as client:
            with pytest.raises(TimeoutError) as exc_info:
                client.get("/health")

        assert exc_info.value.timeout == 2.5


class TestHTTPClientRetry:
    """Tests for HTTPClient retry logic."""

    def test_no_retry_by_default(self, no_sleep) -> None:
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            return httpx.Response(503, json={"detail": "Unavailable"})

        with mock_client(handler) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert attempts == 1
        assert no_sleep == []

    def test_retry_on_503_when_enabled(self, no_sleep) -> None:
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            if attempts < 3:
                return httpx.Response(503, json={"detail": "Unavailable"})
            return httpx.Response(200, json={"status": "healthy"})

        with mock_client(handler, retry_enabled=True, max_retries=3) as client:
            assert client.get("/health") == {"status": "healthy"}

        assert attempts == 3
        assert no_sleep == [0.5, 1.0]

    def test_no_retry_on_500(self, no_sleep) -> None:
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            return httpx.Response(500, json={"detail": "boom"})

        with mock_client(handler, retry_enabled=True) as client:
            with pytest.raises(ServerError):
                client.get("/health")

        assert attempts == 1

    def test_max_retries_exhausted(self, no_sleep) -> None:
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            return httpx.Response(504, text="gateway timeout")

        with mock_client(handler, retry_enabled=True, max_retries=2) as client:
            with pytest.raises(ServerError) as exc_info:
                client.get("/health")

        assert attempts == 3
        assert exc_info.value.status_code == 504

    def test_retry_on_connection_error(self, no_sleep) -> None:
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            if attempts == 1:
                raise httpx.ConnectError("refused", request=request)
            return httpx.Response(200, json={"status": "healthy"})

        with mock_client(handler, retry_enabled=True) as client:
            assert client.get("/health") == {"status": "healthy"}

        assert attempts == 2

    def test_retry_on_timeout_exhausted(self, no_sleep) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("slow", request=request)

        with mock_client(handler, retry_enabled=True, max_retries=1) as client:
            with pytest.raises(TimeoutError):
                client.get("/health")

        assert no_sleep == [0.5]

    def test_connection_error_exhausted_keeps_cause(self, no_sleep) -> None:
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            raise httpx.ConnectError("refused", request=request)

        with mock_client(handler, retry_enabled=True, max_retries=2) as client:
            with pytest.raises(ConnectionError) as exc_info:
                client.get("/ranges")

        assert attempts == 3
        assert no_sleep == [0.5, 1.0]
        assert exc_info.value.url == "http://localhost:8000/ranges"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_recovers_after_503_then_reports_404(self, no_sleep) -> None:
        replies = iter(
            [
                httpx.Response(503, json={"detail": "Unavailable"}),
                httpx.Response(404, json={"detail": "missing", "session_id": "x"}),
            ]
        )

        with mock_client(lambda request: next(replies), retry_enabled=True) as client:
            with pytest.raises(NotFoundError):
                client.get("/ranges/x")

        assert no_sleep == [0.5]
