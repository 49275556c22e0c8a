"""Domain models for ps_transaction: pure dataclasses."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Transaction:
    """Normalized inbound transaction, built by the request adapter."""
    currency_or_account_name: str
    merchant: str
    amount: str     # "," already folded to "."
    date: str
    category_title: str | None = None


@dataclass(frozen=True)
class AccountInfo:
    name: str
    currency: str


@dataclass
class ShortcutEntities:
    accounts: list[AccountInfo] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
