"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Endpoint catalog for the Dark Throne API.
"""

from darkthrone.api.auth import AuthOperations
from darkthrone.api.banking import BankingOperations
from darkthrone.api.models import (
    Unit,
    UnitRequest,
    Player,
    PlayersListResponse,
    MatchingPlayersResponse,
    CreatePlayerRequest,
    ValidateNameResponse,
    AttackResponse,
    WarHistory,
    WarHistoryListResponse,
    TrainUnitsRequest,
    TrainUnitsResponse,
    UntrainUnitsRequest,
    UntrainUnitsResponse,
    BankDepositRequest,
    BankWithdrawRequest,
    BankResponse,
    SessionInfo,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    CurrentUserResponse,
    UpgradeStructureRequest,
    UpgradeStructureResponse,
    ProficiencyPointsRequest,
    ProficiencyPointsResponse,
)
from darkthrone.api.players import PlayerOperations
from darkthrone.api.structures import StructureOperations
from darkthrone.api.training import TrainingOperations

__all__ = [
    "AuthOperations",
    "BankingOperations",
    "PlayerOperations",
    "StructureOperations",
    "TrainingOperations",
    "Unit",
    "UnitRequest",
    "Player",
    "PlayersListResponse",
    "MatchingPlayersResponse",
    "CreatePlayerRequest",
    "ValidateNameResponse",
    "AttackResponse",
    "WarHistory",
    "WarHistoryListResponse",
    "TrainUnitsRequest",
    "TrainUnitsResponse",
    "UntrainUnitsRequest",
    "UntrainUnitsResponse",
    "BankDepositRequest",
    "BankWithdrawRequest",
    "BankResponse",
    "SessionInfo",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "CurrentUserResponse",
    "UpgradeStructureRequest",
    "UpgradeStructureResponse",
    "ProficiencyPointsRequest",
    "ProficiencyPointsResponse",
]
