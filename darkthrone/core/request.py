"""
Generic request executor.

An ``ApiRequest`` describes one call: method, endpoint, headers, a typed
body, the session to use and the declared response type. ``do_request``
turns it into an HTTP call and a typed result:

1. require a base URL (no network call otherwise)
2. join base URL and endpoint with a single slash
3. encode the body, omitting it for zero values
4. default ``Content-Type`` to JSON unless the caller set one
5. send through the session's transport (fresh connection, no retry)
6. accept HTTP 200 only
7. materialize the body into the declared response type
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from darkthrone.core.materializer import decode, prepare
from darkthrone.core.serialization import encode_body
from darkthrone.core.session import Session
from darkthrone.exceptions import (
    ConfigurationError,
    DarkThroneError,
    NonSuccessStatusError,
)
from darkthrone.logging_config import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_api_error,
    log_api_request,
    log_api_response,
    set_correlation_id,
)
from darkthrone.transport.base import TransportRequest

logger = get_logger(__name__)

Req = TypeVar("Req")
Resp = TypeVar("Resp")

DEFAULT_CONTENT_TYPE = "application/json"


@dataclass
class ApiRequest(Generic[Req, Resp]):
    """Descriptor for a single API call."""
    method: str
    endpoint: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Req] = None
    session: Optional[Session] = None
    response_type: Any = None
    timeout: Optional[float] = None

    def _log(self) -> Any:
        if self.session is not None and self.session.logger is not None:
            return self.session.logger
        return logger

    def get_url(self) -> str:
        """
        Build the full URL for this request.

        Returns:
            ``"<base_url>/<endpoint>"``, or ``""`` when no base URL is configured
        """
        if self.session is None or not self.session.base_url:
            return ""
        return f"{self.session.base_url}/{self.endpoint}"

    def build_headers(self) -> Dict[str, str]:
        """Copy the caller's headers and default Content-Type to JSON."""
        headers = dict(self.headers or {})
        if not any(key.lower() == "content-type" for key in headers):
            headers["Content-Type"] = DEFAULT_CONTENT_TYPE
        return headers

    def do_request(self) -> Resp:
        """
        Execute the request and return the typed response.

        Returns:
            Value of the declared response type (None when no response type
            was declared)

        Raises:
            ConfigurationError: If the session has no base URL
            SerializationError: If the body cannot be encoded
            TransportError: On network-level failure
            NonSuccessStatusError: If the status is not 200
            DecodeError: If the body does not match the response type
        """
        owns_correlation_id = get_correlation_id() is None
        if owns_correlation_id:
            set_correlation_id()
        try:
            return self._send()
        finally:
            if owns_correlation_id:
                clear_correlation_id()

    def _send(self) -> Resp:
        log = self._log()
        log_api_request(log, self.endpoint, self.method, headers=sorted(self.headers or {}))

        try:
            url = self.get_url()
            if not url:
                raise ConfigurationError("ApiRequest session base URL is required")

            payload = encode_body(self.body)
            shape = prepare(self.response_type)

            timeout = self.timeout if self.timeout is not None else self.session.timeout
            response = self.session.transport.send(
                TransportRequest(
                    method=self.method,
                    url=url,
                    headers=self.build_headers(),
                    body=payload,
                    timeout=timeout,
                )
            )
            log_api_response(
                log, self.endpoint, self.method, response.status_code, response.elapsed_ms
            )

            if response.status_code != 200:
                raise NonSuccessStatusError(response.status_code, response.reason)

            return decode(response.content, shape)
        except DarkThroneError as e:
            log_api_error(log, self.endpoint, self.method, e)
            raise


def execute(request: ApiRequest[Req, Resp]) -> Resp:
    """Execute ``request``; see ``ApiRequest.do_request``."""
    return request.do_request()
