"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Player, war history and attack operations.
"""

from __future__ import annotations

from typing import Any, Dict, List

from darkthrone.api.base import Operations
from darkthrone.api.models import (
    AttackResponse,
    CreatePlayerRequest,
    MatchingPlayersResponse,
    Player,
    PlayersListResponse,
    ValidateNameResponse,
    WarHistory,
    WarHistoryListResponse,
)
from darkthrone.exceptions import DarkThroneError

MIN_ATTACK_TURNS = 10
PAGE_SIZE = 100


class PlayerOperations(Operations):
    """Player lookup, creation and combat."""

    def fetch_all(self, page: int = 1, page_size: int = PAGE_SIZE) -> List[Player]:
        """Fetch one page of players."""
        endpoint = f"players?page={page}&pageSize={page_size}"
        response = self._execute("GET", endpoint, PlayersListResponse)
        return response.items

    def create(self, request: CreatePlayerRequest) -> Player:
        """Create a new player."""
        return self._execute("POST", "players", Player, body=request)

    def validate_name(self, name: str) -> bool:
        """Check whether ``name`` is available as a player name."""
        response = self._execute(
            "POST", "players/validate-name", ValidateNameResponse, body={"name": name}
        )
        return response.valid

    def fetch_by_id(self, player_id: str) -> Player:
        return self._execute("GET", f"players/{player_id}", Player)

    def fetch_matching_ids(self, ids: List[str]) -> List[Player]:
        """Fetch every player whose ID is in ``ids``."""
        response = self._execute(
            "POST", "players/matching-ids", MatchingPlayersResponse, body={"ids": ids}
        )
        return response.players

    def fetch_war_history_by_id(self, war_history_id: str) -> WarHistory:
        return self._execute("GET", f"war-history/{war_history_id}", WarHistory)

    def fetch_all_war_history(self) -> List[WarHistory]:
        response = self._execute("GET", "war-history", WarHistoryListResponse)
        return response.items

    def attack(self, target_id: str) -> bool:
        """
        Attack a player.

        Args:
            target_id: ID of the player to attack

        Returns:
            True if the attacker won
        """
        self._log.warning("attacking_player", target_id=target_id)
        payload: Dict[str, Any] = {
            "targetID": target_id,
            "attackTurns": MIN_ATTACK_TURNS,
        }
        try:
            response = self._execute("POST", "attack", AttackResponse, body=payload)
        except DarkThroneError as e:
            self._log.error("attack_request_failed", target_id=target_id, error=str(e))
            raise

        if response.is_attacker_victor:
            self._log.warning("attack_successful", target_id=target_id)
        else:
            self._log.warning("attack_failed", target_id=target_id)
        return response.is_attacker_victor
