"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Authentication and account operations.

``login`` stores the returned bearer token on the session and ``logout``
clears it; every other call uses the generic executor like any endpoint.
"""

from __future__ import annotations

from typing import List

from darkthrone.api.base import Operations
from darkthrone.api.models import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    Player,
    RegisterRequest,
    RegisterResponse,
)
from darkthrone.exceptions import DarkThroneError, PlayerSelectionError

LOGIN_ENDPOINT = "auth/login"
REGISTER_ENDPOINT = "auth/register"
LOGOUT_ENDPOINT = "auth/logout"
CURRENT_USER_ENDPOINT = "auth/current-user"
PLAYERS_LIST_ENDPOINT = "auth/current-user/players"
ASSUME_PLAYER_ENDPOINT = "auth/assume-player"
UNASSUME_PLAYER_ENDPOINT = "auth/unassume-player"


class AuthOperations(Operations):
    """Login, registration and player selection for the current user."""

    def login(self, request: LoginRequest) -> str:
        """
        Authenticate and keep the token on the session.

        Args:
            request: Email and password

        Returns:
            The bearer token
        """
        self._log.info("logging_in")
        try:
            response = self._execute(
                "POST", LOGIN_ENDPOINT, LoginResponse, body=request, headers={}
            )
        except DarkThroneError as e:
            self._log.error("login_failed", error=str(e))
            raise

        self._session.set_token(response.token)
        self._log.info("login_successful")
        return response.token

    def register(self, request: RegisterRequest) -> RegisterResponse:
        """Register a new user account."""
        self._log.info("registering_user")
        try:
            response = self._execute(
                "POST",
                REGISTER_ENDPOINT,
                RegisterResponse,
                body=request,
                headers={"Content-Type": "application/json"},
            )
        except DarkThroneError as e:
            self._log.error("registration_failed", error=str(e))
            raise
        self._log.info("registration_successful")
        return response

    def logout(self) -> None:
        """Log out and clear the session token."""
        self._log.info("logging_out")
        try:
            self._execute("POST", LOGOUT_ENDPOINT)
        except DarkThroneError as e:
            self._log.error("logout_failed", error=str(e))
            raise
        self._session.clear_token()
        self._log.info("logout_successful")

    def get_current_user(self) -> CurrentUserResponse:
        """Fetch the authenticated user."""
        self._log.info("fetching_current_user")
        try:
            return self._execute("GET", CURRENT_USER_ENDPOINT, CurrentUserResponse)
        except DarkThroneError as e:
            self._log.error("fetch_current_user_failed", error=str(e))
            raise

    def get_players_for_current_user(self) -> List[Player]:
        """List the players owned by the authenticated user."""
        self._log.info("fetching_user_players")
        try:
            return self._execute("GET", PLAYERS_LIST_ENDPOINT, List[Player])
        except DarkThroneError as e:
            self._log.error("fetch_user_players_failed", error=str(e))
            raise

    def assume_player(self, player_id: str) -> Player:
        """Act as ``player_id`` for subsequent calls."""
        self._log.info("assuming_player", player_id=player_id)
        try:
            response = self._execute(
                "POST",
                ASSUME_PLAYER_ENDPOINT,
                CurrentUserResponse,
                body={"playerID": player_id},
            )
        except DarkThroneError as e:
            self._log.error("assume_player_failed", player_id=player_id, error=str(e))
            raise
        self._log.info("player_assumed", player_id=player_id)
        return response.player

    def unassume_player(self) -> None:
        """Stop acting as the assumed player."""
        self._log.info("unassuming_player")
        try:
            self._execute("POST", UNASSUME_PLAYER_ENDPOINT)
        except DarkThroneError as e:
            self._log.error("unassume_player_failed", error=str(e))
            raise
        self._log.info("player_unassumed")

    def get_player_by_index(self, index: int) -> Player:
        """
        Pick one of the current user's players by position and assume it.

        Args:
            index: Zero-based position in the user's player list

        Returns:
            The assumed Player

        Raises:
            PlayerSelectionError: If not logged in, the user has no players,
                the index is out of range or assuming the player fails
        """
        if not self._session.is_authenticated:
            self._log.error("token_not_set")
            raise PlayerSelectionError("token is not set")

        try:
            players = self._execute("GET", PLAYERS_LIST_ENDPOINT, List[Player])
        except DarkThroneError as e:
            self._log.error("no_players_found", error=str(e))
            raise PlayerSelectionError("no players found") from e
        if not players:
            self._log.error("no_players_found")
            raise PlayerSelectionError("no players found")

        if index < 0 or index >= len(players):
            self._log.error("player_index_out_of_range", index=index, player_count=len(players))
            raise PlayerSelectionError(
                f"player index {index} out of range (found {len(players)} players)"
            )

        player_id = players[index].id
        if not player_id:
            raise PlayerSelectionError("selected player has no id")

        try:
            return self.assume_player(player_id)
        except DarkThroneError as e:
            raise PlayerSelectionError(f"failed to assume player: {e}") from e
