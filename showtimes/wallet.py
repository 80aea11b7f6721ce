"""Wallet use case."""

from __future__ import annotations

from typing import Any

from showtimes.errors import UseCaseError
from showtimes.models import WalletAmount


class WalletUseCase:
    """Reads a user's wallet, creating it on first use.

    ``repository`` provides is_wallet_exist, create_wallet and get_wallet.
    """

    def __init__(self, repository: Any) -> None:
        self.repository = repository

    def get_wallet(self, user_id: int) -> WalletAmount:
        try:
            exists = self.repository.is_wallet_exist(user_id)
        except Exception as exc:
            raise UseCaseError("error in database") from exc
        if not exists:
            self.repository.create_wallet(user_id)
        return self.repository.get_wallet(user_id)