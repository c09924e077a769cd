"""
Integration tests for the client against a local HTTP server.

Each test runs with both real transports so requests and httpx are held to
the same wire behavior.
"""

import json
from typing import Dict, Optional

import pytest

from darkthrone import DarkThroneClient
from darkthrone.api import LoginRequest
from darkthrone.core import ApiRequest, Session, execute
from darkthrone.exceptions import NonSuccessStatusError, TransportError
from darkthrone.transport import HttpxTransport, RequestsTransport

JSON_HEADERS = {"Content-Type": "application/json"}


def header(recorded, name: str) -> Optional[str]:
    for key, value in recorded.headers.items():
        if key.lower() == name.lower():
            return value
    return None


@pytest.fixture(params=[RequestsTransport, HttpxTransport], ids=["requests", "httpx"])
def live_session(request, http_server) -> Session:
    return Session(http_server.url, transport=request.param())


class TestExecuteAgainstServer:
    """Test the executor end to end over a real socket."""

    def test_mapping_response(self, live_session, http_server):
        http_server.route("GET", "/foo", body=b'{"foo":"bar"}', headers=JSON_HEADERS)

        result = execute(ApiRequest(
            method="GET", endpoint="foo", session=live_session, response_type=Dict[str, str],
        ))

        assert result == {"foo": "bar"}

    def test_mapping_reference_response(self, live_session, http_server):
        http_server.route("GET", "/foo", body=b'{"foo":"bar"}', headers=JSON_HEADERS)

        result = execute(ApiRequest(
            method="GET", endpoint="foo", session=live_session,
            response_type=Optional[Dict[str, str]],
        ))

        assert result == {"foo": "bar"}

    def test_non_success_status(self, live_session, http_server):
        http_server.route("GET", "/foo", status=400, body=b'{"error":"bad"}')

        with pytest.raises(NonSuccessStatusError) as exc_info:
            execute(ApiRequest(
                method="GET", endpoint="foo", session=live_session, response_type=Dict[str, str],
            ))

        assert exc_info.value.status_code == 400

    def test_zero_body_is_not_sent(self, live_session, http_server):
        http_server.route("POST", "/foo", body=b"{}")

        execute(ApiRequest(
            method="POST", endpoint="foo", body={}, session=live_session,
            response_type=Dict[str, str],
        ))

        recorded = http_server.requests[0]
        assert recorded.body == b""
        assert header(recorded, "Content-Type") == "application/json"

    def test_body_is_sent_as_json(self, live_session, http_server):
        http_server.route("POST", "/foo", body=b"{}")

        execute(ApiRequest(
            method="POST", endpoint="foo", body={"targetID": "p2"}, session=live_session,
            response_type=Dict[str, str],
        ))

        assert json.loads(http_server.requests[0].body) == {"targetID": "p2"}

    def test_custom_content_type_is_kept(self, live_session, http_server):
        http_server.route("POST", "/foo", body=b"{}")

        execute(ApiRequest(
            method="POST", endpoint="foo", headers={"content-type": "text/plain"},
            body="hello", session=live_session, response_type=None,
        ))

        assert header(http_server.requests[0], "Content-Type") == "text/plain"

    @pytest.mark.parametrize("transport_class", [RequestsTransport, HttpxTransport])
    def test_connection_refused(self, transport_class):
        session = Session("http://127.0.0.1:1", transport=transport_class())

        with pytest.raises(TransportError):
            execute(ApiRequest(method="GET", endpoint="foo", session=session))


class TestClientAgainstServer:
    """Test the client facade over a real socket."""

    def test_ping(self, live_session, http_server):
        http_server.route("HEAD", "/", status=204)
        assert DarkThroneClient(live_session).ping() >= 0

    def test_ping_failure_status(self, live_session, http_server):
        http_server.route("HEAD", "/", status=500)
        with pytest.raises(NonSuccessStatusError):
            DarkThroneClient(live_session).ping()

    def test_login_then_authenticated_call(self, live_session, http_server):
        http_server.route("POST", "/auth/login", body=json.dumps({
            "session": {"id": "s1", "email": "a@b.c", "hasConfirmedEmail": True},
            "token": "tok-live",
        }).encode(), headers=JSON_HEADERS)
        http_server.route("GET", "/players/p1", body=b'{"id":"p1","name":"Bob"}',
                          headers=JSON_HEADERS)
        client = DarkThroneClient(live_session)

        client.auth.login(LoginRequest(email="a@b.c", password="pw"))
        player = client.players.fetch_by_id("p1")

        assert player.name == "Bob"
        login, fetch = http_server.requests
        assert header(login, "Authorization") is None
        assert header(fetch, "Authorization") == "Bearer tok-live"
