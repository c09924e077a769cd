"""
Session state for the DarkThrone API client.

A ``Session`` holds the base URL, an optional logger, the transport used to
reach the server and the bearer token obtained at login. Sessions can be
constructed directly and passed to requests, or established once per process
with ``Session.initialize`` and fetched later with ``Session.current``.
"""

import threading
import time
from typing import Any, ClassVar, Dict, Optional

from darkthrone.exceptions import (
    ConfigurationError,
    NonSuccessStatusError,
    SessionUninitializedError,
    TransportError,
)
from darkthrone.logging_config import get_logger
from darkthrone.transport.base import BaseTransport, TransportRequest
from darkthrone.transport.requests_transport import RequestsTransport

logger = get_logger(__name__)


class Session:
    """
    Process-scoped holder of base URL, logger and auth token.

    The base URL is fixed at construction. The token is the only mutable
    field; reads and writes go through a lock so concurrent login/logout and
    authenticated calls never observe a torn value.
    """

    _instance: ClassVar[Optional["Session"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        base_url: str,
        logger: Optional[Any] = None,
        transport: Optional[BaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        """
        Create a session.

        Args:
            base_url: Root URL of the API, without trailing path
            logger: Optional structlog-compatible logger for request traces
            transport: Transport adapter (default: RequestsTransport)
            timeout: Default per-call timeout in seconds (default: none)
        """
        self._base_url = base_url
        self.logger = logger
        self.transport = transport or RequestsTransport()
        self.timeout = timeout
        self._token: Optional[str] = None
        self._token_lock = threading.Lock()

    @classmethod
    def initialize(
        cls,
        base_url: str,
        logger: Optional[Any] = None,
        transport: Optional[BaseTransport] = None,
        timeout: Optional[float] = None,
    ) -> "Session":
        """
        Establish the process-wide session.

        Only the first call creates a session; later calls ignore their
        arguments and return the existing instance.

        Returns:
            The process-wide Session
        """
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(base_url, logger=logger, transport=transport, timeout=timeout)
                cls._instance._log().info("session_initialized", base_url=base_url)
            return cls._instance

    @classmethod
    def current(cls) -> "Session":
        """
        Return the process-wide session.

        Raises:
            SessionUninitializedError: If ``initialize`` was never called
        """
        instance = cls._instance
        if instance is None:
            raise SessionUninitializedError(
                "DarkThrone session is not initialized. Call Session.initialize() first."
            )
        return instance

    def _log(self) -> Any:
        return self.logger or logger

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> Optional[str]:
        with self._token_lock:
            return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def set_token(self, token: str) -> None:
        """Store the bearer token used by ``auth_headers``."""
        with self._token_lock:
            self._token = token or None

    def clear_token(self) -> None:
        """Forget the bearer token."""
        with self._token_lock:
            self._token = None

    def auth_headers(self) -> Dict[str, str]:
        """
        Build the headers for an authenticated call.

        Returns:
            Content-Type and Accept set to JSON, plus a bearer Authorization
            header when a token is held
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        token = self.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def ping(self) -> int:
        """
        Check that the server is reachable with a HEAD request to the base URL.

        Returns:
            Round-trip latency in milliseconds

        Raises:
            ConfigurationError: If the base URL is empty
            TransportError: If the server cannot be reached (carries elapsed_ms)
            NonSuccessStatusError: If the status is outside [200, 400)
        """
        log = self._log()
        if not self._base_url:
            raise ConfigurationError("Session base URL is required")

        request = TransportRequest(method="HEAD", url=self._base_url, timeout=self.timeout)
        start = time.monotonic()
        try:
            response = self.transport.send(request)
        except TransportError as e:
            if e.elapsed_ms is None:
                e.elapsed_ms = (time.monotonic() - start) * 1000
            log.error("ping_failed", url=self._base_url, error=str(e))
            raise
        latency = int((time.monotonic() - start) * 1000)

        if response.status_code < 200 or response.status_code >= 400:
            log.error("ping_failed", url=self._base_url, status=response.status)
            raise NonSuccessStatusError(
                response.status_code,
                response.reason,
                message=f"ping failed with status: {response.status}",
            )

        log.info("ping_successful", url=self._base_url, status=response.status, latency_ms=latency)
        return latency
