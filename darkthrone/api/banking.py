"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
DarkThrone API client, a product of Garudex Labs

Banking operations.
"""

from __future__ import annotations

from darkthrone.api.base import Operations
from darkthrone.api.models import BankDepositRequest, BankResponse, BankWithdrawRequest


class BankingOperations(Operations):
    """Deposit and withdraw gold for the current player."""

    def deposit_gold(self, request: BankDepositRequest) -> BankResponse:
        """Deposit gold into the bank."""
        return self._execute("POST", "bank/deposit", BankResponse, body=request)

    def withdraw_gold(self, request: BankWithdrawRequest) -> BankResponse:
        """Withdraw gold from the bank."""
        return self._execute("POST", "bank/withdraw", BankResponse, body=request)
