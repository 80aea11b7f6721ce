import pytest

from showtimes.errors import UseCaseError
from showtimes.models import WalletAmount
from showtimes.wallet import WalletUseCase


class FakeRepo:
    def __init__(self, wallets=None, broken=False):
        self.wallets = dict(wallets or {})
        self.broken = broken
        self.created = []

    def is_wallet_exist(self, user_id):
        if self.broken:
            raise RuntimeError("db down")
        return user_id in self.wallets

    def create_wallet(self, user_id):
        self.created.append(user_id)
        self.wallets[user_id] = 0.0

    def get_wallet(self, user_id):
        return WalletAmount(amount=self.wallets[user_id])


def test_existing_wallet_is_returned():
    repo = FakeRepo({7: 150.0})
    assert WalletUseCase(repo).get_wallet(7) == WalletAmount(amount=150.0)
    assert repo.created == []


def test_missing_wallet_is_created():
    repo = FakeRepo()
    assert WalletUseCase(repo).get_wallet(3) == WalletAmount(amount=0.0)
    assert repo.created == [3]


def test_database_error_is_reported():
    with pytest.raises(UseCaseError, match="error in database"):
        WalletUseCase(FakeRepo(broken=True)).get_wallet(1)