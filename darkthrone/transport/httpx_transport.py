"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

HTTP transport backed by ``httpx``.
"""

from __future__ import annotations

import time

import httpx

from darkthrone.exceptions import TransportError
from darkthrone.logging_config import get_logger
from darkthrone.transport.base import BaseTransport, TransportRequest, TransportResponse

logger = get_logger(__name__)


class HttpxTransport(BaseTransport):
    """HTTP transport using a fresh ``httpx.Client`` per call.

    Redirects are followed to match the behaviour of the ``requests``
    transport. ``httpx`` applies a 5 second default timeout, so the client is
    created with ``timeout=None`` unless the request carries one.
    """

    def send(self, request: TransportRequest) -> TransportResponse:
        start = time.monotonic()
        try:
            with httpx.Client(timeout=request.timeout, follow_redirects=True) as client:
                resp = client.request(
                    method=request.method,
                    url=request.url,
                    headers=request.headers,
                    content=request.body,
                )
                content = resp.content
        except httpx.HTTPError as e:
            elapsed = (time.monotonic() - start) * 1000
            logger.debug(f"Transport failure: {request.method} {request.url}: {e}")
            raise TransportError(
                f"{request.method} {request.url} failed: {e}", elapsed_ms=round(elapsed, 2)
            ) from e
        elapsed = (time.monotonic() - start) * 1000

        return TransportResponse(
            status_code=resp.status_code,
            reason=resp.reason_phrase or "",
            headers=dict(resp.headers),
            content=content,
            elapsed_ms=round(elapsed, 2),
        )
