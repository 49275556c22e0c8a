"""Domain models for ps_ledger: pure dataclasses, no httpx / Redis dependency."""

from dataclasses import asdict, dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class User:
    id: int


@dataclass(frozen=True)
class TransactionAccount:
    id: int
    name: str
    currency_code: str


@dataclass(frozen=True)
class Category:
    id: int
    title: str
    parent_id: int | None = None   # tree link, never used for lookup


@dataclass
class PocketSmithTransaction:
    payee: str
    amount: str      # opaque, already normalized to a single "." separator
    date: str        # opaque, passed through as received
    is_transfer: bool = False
    category_id: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Request body for POST /transaction_accounts/{id}/transactions."""
        payload = asdict(self)
        if self.category_id is None:
            del payload["category_id"]
        return payload


@dataclass(frozen=True)
class Fetched(Generic[T]):
    """Result of a read-through fetch plus where it came from."""
    value: T
    cached: bool

    @property
    def source(self) -> str:
        return "cache" if self.cached else "api"
