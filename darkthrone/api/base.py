"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Shared plumbing for endpoint operation groups.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from darkthrone.core.request import ApiRequest
from darkthrone.core.session import Session
from darkthrone.logging_config import get_logger

logger = get_logger(__name__)


class Operations:
    """Base for endpoint groups bound to a session.

    Subclasses only describe endpoints; execution, headers and error
    handling live in ``ApiRequest``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def _log(self) -> Any:
        return self._session.logger or logger

    def _build_request(
        self,
        method: str,
        endpoint: str,
        response_type: Any = None,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> ApiRequest:
        if headers is None:
            headers = self._session.auth_headers()
        return ApiRequest(
            method=method,
            endpoint=endpoint,
            headers=headers,
            body=body,
            session=self._session,
            response_type=response_type,
        )

    def _execute(
        self,
        method: str,
        endpoint: str,
        response_type: Any = None,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return self._build_request(method, endpoint, response_type, body, headers).do_request()
