"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Unit training operations.
"""

from __future__ import annotations

from darkthrone.api.base import Operations
from darkthrone.api.models import (
    TrainUnitsRequest,
    TrainUnitsResponse,
    UntrainUnitsRequest,
    UntrainUnitsResponse,
)


class TrainingOperations(Operations):

    def train_units(self, request: TrainUnitsRequest) -> TrainUnitsResponse:
        """Train units for the current player."""
        return self._execute("POST", "training/train", TrainUnitsResponse, body=request)

    def untrain_units(self, request: UntrainUnitsRequest) -> UntrainUnitsResponse:
        """Untrain units for the current player."""
        return self._execute("POST", "training/untrain", UntrainUnitsResponse, body=request)
