"""Ledger client Protocol: the service layer only depends on this."""

from typing import Protocol

from src.ps_ledger.domain.models import (
    Category,
    Fetched,
    PocketSmithTransaction,
    TransactionAccount,
    User,
)


class LedgerClientProtocol(Protocol):
    async def get_me(self) -> Fetched[User]: ...

    async def get_accounts(self, user_id: int) -> Fetched[list[TransactionAccount]]: ...

    async def get_categories(self, user_id: int) -> Fetched[list[Category]]: ...

    async def create_transaction(
        self, account_id: int, transaction: PocketSmithTransaction
    ) -> None: ...
