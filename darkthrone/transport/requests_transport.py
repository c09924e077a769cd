"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

HTTP transport backed by ``requests`` (default).
"""

from __future__ import annotations

import time

import requests

from darkthrone.exceptions import TransportError
from darkthrone.logging_config import get_logger
from darkthrone.transport.base import BaseTransport, TransportRequest, TransportResponse

logger = get_logger(__name__)


class RequestsTransport(BaseTransport):
    """Default HTTP transport using ``requests.request``.

    Every call goes through a throwaway ``requests.Session`` so no connection
    is reused between calls. No retry adapter is mounted.
    """

    def send(self, request: TransportRequest) -> TransportResponse:
        start = time.monotonic()
        try:
            resp = requests.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body,
                timeout=request.timeout,
            )
            content = resp.content
        except requests.exceptions.RequestException as e:
            elapsed = (time.monotonic() - start) * 1000
            logger.debug(f"Transport failure: {request.method} {request.url}: {e}")
            raise TransportError(
                f"{request.method} {request.url} failed: {e}", elapsed_ms=round(elapsed, 2)
            ) from e
        elapsed = (time.monotonic() - start) * 1000

        return TransportResponse(
            status_code=resp.status_code,
            reason=resp.reason or "",
            headers=dict(resp.headers),
            content=content,
            elapsed_ms=round(elapsed, 2),
        )
