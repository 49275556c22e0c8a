"""Cache store Protocol: dependency inversion for testability.

A getter returning None is a miss. That covers an absent key, an expired
key, a missing "data" field and an unreadable payload alike; callers fall
through to the ledger API. Setters are best-effort and return False when
the write did not land.
"""

from typing import Protocol

from src.ps_ledger.domain.models import Category, TransactionAccount


class CacheStoreProtocol(Protocol):
    async def get_user_id(self) -> int | None: ...

    async def set_user_id(self, user_id: int) -> bool: ...

    async def get_accounts(self, user_id: int) -> list[TransactionAccount] | None: ...

    async def set_accounts(
        self, user_id: int, accounts: list[TransactionAccount]
    ) -> bool: ...

    async def get_categories(self, user_id: int) -> list[Category] | None: ...

    async def set_categories(self, user_id: int, categories: list[Category]) -> bool: ...
