"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Structure and proficiency operations.

The game server has not released these endpoints yet; both methods fail with
``FeatureNotReleasedError`` until it does.
"""

from __future__ import annotations

from darkthrone.api.base import Operations
from darkthrone.api.models import (
    ProficiencyPointsRequest,
    ProficiencyPointsResponse,
    UpgradeStructureRequest,
    UpgradeStructureResponse,
)
from darkthrone.exceptions import FeatureNotReleasedError


class StructureOperations(Operations):

    def upgrade_structure(self, request: UpgradeStructureRequest) -> UpgradeStructureResponse:
        """Upgrade a structure for the current player (POST structures/upgrade)."""
        raise FeatureNotReleasedError("structure upgrades are not released yet")

    def spend_proficiency_points(
        self, request: ProficiencyPointsRequest
    ) -> ProficiencyPointsResponse:
        """Spend proficiency points for the current player (POST proficiency-points)."""
        raise FeatureNotReleasedError("proficiency points are not released yet")
