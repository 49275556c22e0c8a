"""TransactionService: resolves names to PocketSmith ids and creates transactions.

add_transaction flow:
  1. resolve the user (cache or /me)
  2. fetch accounts and categories concurrently, join on both
  3. match account (and category when the routing mode needs one)
  4. POST the transaction

A LookupFailedError (ErrorKind.LOOKUP) means the caller named something
that does not exist; every other AppError is a server-side failure.
"""

import asyncio
import logging

from src.ps_common.enums import RoutingMode
from src.ps_common.errors import AccountLookupError, CategoryLookupError
from src.ps_ledger.domain.client import LedgerClientProtocol
from src.ps_ledger.domain.models import (
    Category,
    Fetched,
    PocketSmithTransaction,
    TransactionAccount,
)
from src.ps_transaction.domain.matching import find_account, find_category
from src.ps_transaction.domain.models import AccountInfo, ShortcutEntities, Transaction

logger = logging.getLogger(__name__)


class TransactionService:
    def __init__(
        self,
        client: LedgerClientProtocol,
        routing_mode: RoutingMode = RoutingMode.ACCOUNT_NAME,
    ) -> None:
        self._client = client
        self._mode = routing_mode

    async def add_transaction(self, tx: Transaction) -> None:
        accounts, categories = await self._fetch_collections()

        account = find_account(accounts.value, tx.currency_or_account_name, self._mode)
        if account is None:
            logger.error(
                "No transaction account found with %s %r (searched %d accounts from %s)",
                self._mode.value, tx.currency_or_account_name,
                len(accounts.value), accounts.source,
            )
            raise AccountLookupError(tx.currency_or_account_name)

        category_id: int | None = None
        if self._mode.requires_category:
            title = tx.category_title or ""
            category = find_category(categories.value, title)
            if category is None:
                logger.error(
                    "No category found with title %r (searched %d categories from %s)",
                    title, len(categories.value), categories.source,
                )
                raise CategoryLookupError(title)
            category_id = category.id

        ps_tx = PocketSmithTransaction(
            payee=tx.merchant,
            amount=tx.amount,
            date=tx.date,
            is_transfer=False,
            category_id=category_id,
        )
        await self._client.create_transaction(account.id, ps_tx)

    async def list_categories(self) -> list[str]:
        """All category titles, sorted ascending."""
        user = await self._client.get_me()
        categories = await self._client.get_categories(user.value.id)
        return sorted(c.title for c in categories.value)

    async def list_accounts(self) -> list[AccountInfo]:
        user = await self._client.get_me()
        accounts = await self._client.get_accounts(user.value.id)
        return [_account_info(a) for a in accounts.value]

    async def get_shortcut_entities(self) -> ShortcutEntities:
        accounts, categories = await self._fetch_collections()
        return ShortcutEntities(
            accounts=[_account_info(a) for a in accounts.value],
            categories=sorted(c.title for c in categories.value),
        )

    async def _fetch_collections(
        self,
    ) -> tuple[Fetched[list[TransactionAccount]], Fetched[list[Category]]]:
        # No user, no collections: get_me failures end the request here.
        user = await self._client.get_me()
        user_id = user.value.id
        # Independent reads: issue both before awaiting either. gather raises
        # the first failure and the other branch's result is dropped.
        accounts, categories = await asyncio.gather(
            self._client.get_accounts(user_id),
            self._client.get_categories(user_id),
        )
        return accounts, categories


def _account_info(account: TransactionAccount) -> AccountInfo:
    return AccountInfo(name=account.name, currency=account.currency_code)
