"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Request and response models for the Dark Throne API.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Base model: accepts both wire aliases and Python field names."""
    model_config = ConfigDict(populate_by_name=True)


# Players

class Unit(ApiModel):
    """A unit in a player's army."""
    unit_type: str = Field("", alias="unitType")
    quantity: int = 0


class UnitRequest(ApiModel):
    """A unit type and quantity to train or untrain."""
    unit_type: str = Field("", alias="unitType")
    quantity: int = 0


class Player(ApiModel):
    """A player in the Dark Throne game."""
    id: str = ""
    name: str = ""
    gold: int = 0
    level: int = 0
    army_size: int = Field(0, alias="armySize")
    units: List[Unit] = Field(default_factory=list)
    attack_turns: int = Field(0, alias="attackTurns")


class PlayersListResponse(ApiModel):
    """A page of players."""
    items: List[Player] = Field(default_factory=list)


class MatchingPlayersResponse(ApiModel):
    players: List[Player] = Field(default_factory=list)


class CreatePlayerRequest(ApiModel):
    name: str = ""
    race: str = ""
    password: str = ""


class ValidateNameResponse(ApiModel):
    valid: bool = False


class AttackResponse(ApiModel):
    """Result of an attack."""
    is_attacker_victor: bool = Field(False, alias="isAttackerVictor")


class WarHistory(ApiModel):
    """A war history record."""
    id: str = ""
    player_id: str = Field("", alias="playerId")
    opponent: str = ""
    result: str = ""
    timestamp: str = ""


class WarHistoryListResponse(ApiModel):
    items: List[WarHistory] = Field(default_factory=list)


# Training

class TrainUnitsRequest(ApiModel):
    player_id: str = Field("", alias="playerId")
    units: List[UnitRequest] = Field(default_factory=list)


class TrainUnitsResponse(ApiModel):
    success: bool = False
    message: str = ""


class UntrainUnitsRequest(ApiModel):
    player_id: str = Field("", alias="playerId")
    units: List[UnitRequest] = Field(default_factory=list)


class UntrainUnitsResponse(ApiModel):
    success: bool = False
    message: str = ""


# Banking

class BankDepositRequest(ApiModel):
    """Gold to deposit into the bank."""
    player_id: str = Field("", alias="playerId")
    amount: int = 0


class BankWithdrawRequest(ApiModel):
    """Gold to withdraw from the bank."""
    player_id: str = Field("", alias="playerId")
    amount: int = 0


class BankResponse(ApiModel):
    """Result of a bank operation."""
    success: bool = False
    message: str = ""
    balance: int = 0


# Auth

class SessionInfo(ApiModel):
    """Server-side session returned by login and registration."""
    id: str = ""
    email: str = ""
    player_id: Optional[str] = Field(None, alias="playerID")
    has_confirmed_email: bool = Field(False, alias="hasConfirmedEmail")
    server_time: str = Field("", alias="serverTime")


class LoginRequest(ApiModel):
    email: str = ""
    password: str = ""


class LoginResponse(ApiModel):
    session: SessionInfo = Field(default_factory=SessionInfo)
    token: str = ""


class RegisterRequest(ApiModel):
    email: str = ""
    password: str = ""
    confirm_password: str = Field("", alias="confirmPassword")
    username: str = ""


class RegisterResponse(ApiModel):
    session: SessionInfo = Field(default_factory=SessionInfo)
    token: str = ""


class CurrentUserResponse(ApiModel):
    player: Player = Field(default_factory=Player)


# Structures

class UpgradeStructureRequest(ApiModel):
    structure_id: str = Field("", alias="structureId")
    upgrade_level: int = Field(0, alias="upgradeLevel")


class UpgradeStructureResponse(ApiModel):
    success: bool = False
    message: str = ""
    structure_id: str = Field("", alias="structureId")
    new_level: int = Field(0, alias="newLevel")


class ProficiencyPointsRequest(ApiModel):
    player_id: str = Field("", alias="playerId")
    points_to_spend: int = Field(0, alias="pointsToSpend")
    proficiency_type: str = Field("", alias="proficiencyType")


class ProficiencyPointsResponse(ApiModel):
    success: bool = False
    message: str = ""
    remaining_points: int = Field(0, alias="remainingPoints")
