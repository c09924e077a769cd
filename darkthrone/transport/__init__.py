"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Transport adapters.
"""

from typing import Dict, Type

from darkthrone.exceptions import InvalidConfigurationError
from darkthrone.transport.base import BaseTransport, TransportRequest, TransportResponse
from darkthrone.transport.httpx_transport import HttpxTransport
from darkthrone.transport.mock import MockTransport
from darkthrone.transport.requests_transport import RequestsTransport

TRANSPORTS: Dict[str, Type[BaseTransport]] = {
    "requests": RequestsTransport,
    "httpx": HttpxTransport,
}


def get_transport(name: str = "requests") -> BaseTransport:
    """Build the transport registered under ``name``."""
    try:
        return TRANSPORTS[name]()
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown transport '{name}', expected one of {sorted(TRANSPORTS)}"
        )


__all__ = [
    "BaseTransport",
    "TransportRequest",
    "TransportResponse",
    "HttpxTransport",
    "MockTransport",
    "RequestsTransport",
    "TRANSPORTS",
    "get_transport",
]
