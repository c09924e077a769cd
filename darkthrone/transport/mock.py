"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Mock transport adapter for local testing.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from darkthrone.exceptions import TransportError
from darkthrone.transport.base import BaseTransport, TransportRequest, TransportResponse

MockResult = Union[TransportResponse, Exception]


class MockTransport(BaseTransport):
    """In-memory transport for unit tests.

    Args:
        responses: Mapping from ``(method, url)`` tuples to
            ``TransportResponse`` instances, or to exceptions to raise.

    Example::

        transport = MockTransport({
            ("GET", "http://x/players"): TransportResponse(status_code=200, content=b"[]"),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], MockResult]] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], MockResult] = responses or {}
        self._sent: list[TransportRequest] = []

    def add(self, method: str, url: str, result: MockResult) -> None:
        """Register (or replace) the result for ``(method, url)``."""
        self._responses[(method.upper(), url)] = result

    def send(self, request: TransportRequest) -> TransportResponse:
        self._sent.append(request)
        key = (request.method.upper(), request.url)
        result = self._responses.get(key)
        if result is None:
            return TransportResponse(
                status_code=404,
                reason="Not Found",
                content=b'{"error": "not mocked"}',
            )
        if isinstance(result, TransportError):
            raise result
        if isinstance(result, Exception):
            raise TransportError(str(result), elapsed_ms=0.0) from result
        return result

    @property
    def sent_requests(self) -> list[TransportRequest]:
        """All requests that have been sent through this transport."""
        return list(self._sent)

    @property
    def call_count(self) -> int:
        return len(self._sent)
