"""
Tests for transport adapters.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest
import requests

from darkthrone.exceptions import InvalidConfigurationError, TransportError
from darkthrone.transport import (
    HttpxTransport,
    MockTransport,
    RequestsTransport,
    TransportRequest,
    TransportResponse,
    get_transport,
)


class TestMockTransport:
    def test_returns_registered_response(self):
        expected = TransportResponse(status_code=200, content=b"{}")
        transport = MockTransport({("GET", "http://x/a"): expected})
        assert transport.send(TransportRequest(method="get", url="http://x/a")) is expected

    def test_unmatched_request_is_404(self):
        response = MockTransport().send(TransportRequest(method="GET", url="http://x/none"))
        assert response.status_code == 404
        assert response.status == "404 Not Found"

    def test_records_requests(self):
        transport = MockTransport()
        transport.send(TransportRequest(method="DELETE", url="http://x/1", headers={"X": "1"}))
        assert transport.call_count == 1
        assert transport.sent_requests[0].headers == {"X": "1"}

    def test_registered_exception_becomes_transport_error(self):
        transport = MockTransport()
        transport.add("GET", "http://x", OSError("boom"))
        with pytest.raises(TransportError) as exc_info:
            transport.send(TransportRequest(method="GET", url="http://x"))
        assert isinstance(exc_info.value.__cause__, OSError)


class TestRequestsTransport:
    @patch("darkthrone.transport.requests_transport.requests.request")
    def test_send(self, mock_request):
        mock_request.return_value = MagicMock(
            status_code=200, reason="OK", headers={"Content-Type": "application/json"}, content=b"{}"
        )
        request = TransportRequest(
            method="POST", url="http://x/a", headers={"A": "1"}, body=b"{}", timeout=3.0
        )

        response = RequestsTransport().send(request)

        mock_request.assert_called_once_with(
            method="POST", url="http://x/a", headers={"A": "1"}, data=b"{}", timeout=3.0
        )
        assert response.status_code == 200
        assert response.status == "200 OK"
        assert response.content == b"{}"
        assert response.elapsed_ms >= 0

    @patch("darkthrone.transport.requests_transport.requests.request")
    def test_connection_error(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TransportError) as exc_info:
            RequestsTransport().send(TransportRequest(method="GET", url="http://x"))
        assert exc_info.value.elapsed_ms is not None

    @patch("darkthrone.transport.requests_transport.requests.request")
    def test_timeout(self, mock_request):
        mock_request.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(TransportError):
            RequestsTransport().send(TransportRequest(method="GET", url="http://x", timeout=0.1))


class TestHttpxTransport:
    @patch("darkthrone.transport.httpx_transport.httpx.Client")
    def test_send_uses_fresh_client(self, mock_client_cls):
        client = mock_client_cls.return_value.__enter__.return_value
        client.request.return_value = MagicMock(
            status_code=200, reason_phrase="OK", headers={}, content=b"[]"
        )
        transport = HttpxTransport()

        transport.send(TransportRequest(method="GET", url="http://x/a"))
        transport.send(TransportRequest(method="GET", url="http://x/b"))

        assert mock_client_cls.call_count == 2
        mock_client_cls.assert_called_with(timeout=None, follow_redirects=True)
        client.request.assert_called_with(
            method="GET", url="http://x/b", headers={}, content=None
        )

    @patch("darkthrone.transport.httpx_transport.httpx.Client")
    def test_connect_error(self, mock_client_cls):
        client = mock_client_cls.return_value.__enter__.return_value
        client.request.side_effect = httpx.ConnectError("refused")
        with pytest.raises(TransportError):
            HttpxTransport().send(TransportRequest(method="GET", url="http://x"))


class TestGetTransport:
    def test_known_names(self):
        assert isinstance(get_transport("requests"), RequestsTransport)
        assert isinstance(get_transport("httpx"), HttpxTransport)

    def test_unknown_name(self):
        with pytest.raises(InvalidConfigurationError):
            get_transport("carrier-pigeon")
