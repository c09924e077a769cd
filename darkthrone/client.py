"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

DarkThrone client facade.

Quick start::

    from darkthrone import DarkThroneClient, LoginRequest

    client = DarkThroneClient.from_config()
    client.auth.login(LoginRequest(email="me@example.com", password="..."))
    player = client.auth.get_player_by_index(0)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from darkthrone.api.auth import AuthOperations
from darkthrone.api.banking import BankingOperations
from darkthrone.api.players import PlayerOperations
from darkthrone.api.structures import StructureOperations
from darkthrone.api.training import TrainingOperations
from darkthrone.config.settings import DarkThroneConfig, load_config
from darkthrone.core.session import Session
from darkthrone.logging_config import get_logger, setup_logging
from darkthrone.transport import get_transport

logger = get_logger(__name__)


class DarkThroneClient:
    """Client for the Dark Throne API.

    Endpoint groups are exposed as attributes (``auth``, ``players``,
    ``training``, ``banking``, ``structures``) and share one session.

    Args:
        session: Session to use. Defaults to the process-wide session, which
            must already be initialized.
    """

    def __init__(self, session: Optional[Session] = None) -> None:
        self._session = session if session is not None else Session.current()
        self.auth = AuthOperations(self._session)
        self.players = PlayerOperations(self._session)
        self.training = TrainingOperations(self._session)
        self.banking = BankingOperations(self._session)
        self.structures = StructureOperations(self._session)

    @classmethod
    def from_config(
        cls,
        config: Optional[DarkThroneConfig] = None,
        configure_logging: bool = False,
    ) -> "DarkThroneClient":
        """
        Build a client on the process-wide session from configuration.

        Args:
            config: Configuration to use. Loaded from the default path if None.
            configure_logging: Also apply the logging section via setup_logging.

        Returns:
            DarkThroneClient bound to ``Session.initialize(...)``
        """
        if config is None:
            config = load_config()

        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_file=Path(config.logging.file) if config.logging.file else None,
                json_format=config.logging.json_format,
            )

        session = Session.initialize(
            config.api.base_url,
            logger=get_logger("client"),
            transport=get_transport(config.api.transport),
            timeout=config.api.timeout,
        )
        logger.info(
            "client_configured",
            base_url=session.base_url,
            transport=type(session.transport).__name__,
        )
        return cls(session)

    @property
    def session(self) -> Session:
        return self._session

    def ping(self) -> int:
        """Reachability check; returns latency in milliseconds."""
        return self._session.ping()
