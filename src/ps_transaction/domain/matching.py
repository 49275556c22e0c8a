"""Case-insensitive name matching over fetched ledger collections.

Both scans are linear and first-match-wins in the order the collection was
fetched. Cache and API do not promise the same order, so duplicate names
can resolve differently between a warm and a cold cache.
"""

from src.ps_common.enums import RoutingMode
from src.ps_ledger.domain.models import Category, TransactionAccount


def normalize(value: str) -> str:
    """Comparison form for a lookup string."""
    return value.casefold()


def find_account(
    accounts: list[TransactionAccount], lookup: str, mode: RoutingMode
) -> TransactionAccount | None:
    """Return the first account whose name (or currency code) matches ``lookup``."""
    wanted = normalize(lookup)
    for account in accounts:
        candidate = account.name if mode is RoutingMode.ACCOUNT_NAME else account.currency_code
        if normalize(candidate) == wanted:
            return account
    return None


def find_category(categories: list[Category], title: str) -> Category | None:
    """Flat title match; parent links are not part of the comparison."""
    wanted = normalize(title)
    for category in categories:
        if normalize(category.title) == wanted:
            return category
    return None
