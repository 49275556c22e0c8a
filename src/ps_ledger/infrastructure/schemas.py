"""Pydantic wire schemas for PocketSmith payloads and cached collections.

PocketSmith returns far more fields than we use; unknown fields are ignored.
Categories arrive as a tree (``children``) and are flattened depth-first,
parents before children, so title lookup never needs to walk the tree.
"""

from pydantic import BaseModel, TypeAdapter

from src.ps_ledger.domain.models import Category, TransactionAccount, User


class UserPayload(BaseModel):
    id: int

    def to_domain(self) -> User:
        return User(id=self.id)


class TransactionAccountPayload(BaseModel):
    id: int
    name: str
    currency_code: str

    def to_domain(self) -> TransactionAccount:
        return TransactionAccount(
            id=self.id, name=self.name, currency_code=self.currency_code
        )


class CategoryPayload(BaseModel):
    id: int
    title: str
    parent_id: int | None = None
    children: list["CategoryPayload"] | None = None

    def flatten(self) -> list[Category]:
        flat = [Category(id=self.id, title=self.title, parent_id=self.parent_id)]
        for child in self.children or []:
            flat.extend(child.flatten())
        return flat


_accounts_adapter = TypeAdapter(list[TransactionAccountPayload])
_categories_adapter = TypeAdapter(list[CategoryPayload])


def parse_user(raw: bytes | str) -> User:
    return UserPayload.model_validate_json(raw).to_domain()


def parse_accounts(raw: bytes | str) -> list[TransactionAccount]:
    return [p.to_domain() for p in _accounts_adapter.validate_json(raw)]


def parse_categories(raw: bytes | str) -> list[Category]:
    flat: list[Category] = []
    for payload in _categories_adapter.validate_json(raw):
        flat.extend(payload.flatten())
    return flat


def dump_accounts(accounts: list[TransactionAccount]) -> str:
    return _accounts_adapter.dump_json(
        [TransactionAccountPayload(id=a.id, name=a.name, currency_code=a.currency_code)
         for a in accounts]
    ).decode()


def dump_categories(categories: list[Category]) -> str:
    return _categories_adapter.dump_json(
        [CategoryPayload(id=c.id, title=c.title, parent_id=c.parent_id)
         for c in categories],
        exclude_none=True,
    ).decode()
