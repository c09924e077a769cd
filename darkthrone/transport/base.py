"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Transport adapter base class and data structures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class TransportRequest:
    """Outbound HTTP request, fully resolved by the executor."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: Optional[float] = None


@dataclass
class TransportResponse:
    """Inbound HTTP response with the body already read."""
    status_code: int
    reason: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    elapsed_ms: float = 0.0

    @property
    def status(self) -> str:
        """Status line in the ``"200 OK"`` form."""
        return f"{self.status_code} {self.reason}".strip()


class BaseTransport(ABC):
    """Abstract base for all transport adapters.

    Implementations open a fresh connection for every ``send`` and never retry.
    Network-level failures must surface as ``TransportError``.
    """

    @abstractmethod
    def send(self, request: TransportRequest) -> TransportResponse:
        """Send a request and return the response."""
        ...
