"""Tests for ledger domain models and wire schemas."""

import pytest
from pydantic import ValidationError

from src.ps_common.enums import RoutingMode
from src.ps_ledger.domain.models import (
    Category,
    Fetched,
    PocketSmithTransaction,
    TransactionAccount,
    User,
)
from src.ps_ledger.infrastructure.schemas import (
    dump_accounts,
    dump_categories,
    parse_accounts,
    parse_categories,
    parse_user,
)


class TestPocketSmithTransaction:
    def test_payload_defaults(self) -> None:
        payload = PocketSmithTransaction("Store", "-42.50", "2025-01-13").to_payload()
        assert payload == {
            "payee": "Store",
            "amount": "-42.50",
            "date": "2025-01-13",
            "is_transfer": False,
        }

    def test_payload_with_category(self) -> None:
        tx = PocketSmithTransaction("Store", "-42.50", "2025-01-13", category_id=11)
        assert tx.to_payload()["category_id"] == 11


class TestFetched:
    def test_source(self) -> None:
        assert Fetched([], cached=True).source == "cache"
        assert Fetched([], cached=False).source == "api"

    def test_scalar_value(self) -> None:
        fetched = Fetched(User(id=3), cached=True)
        assert fetched.value.id == 3


class TestSchemas:
    def test_user_ignores_extra_fields(self) -> None:
        assert parse_user(b'{"id": 3, "login": "me", "email": "a@b.c"}').id == 3

    def test_account_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_accounts(b'[{"id": 1, "name": "USD General"}]')

    def test_nested_categories_flatten_depth_first(self) -> None:
        raw = b"""[
            {"id": 1, "title": "A", "children": [
                {"id": 2, "title": "A1", "parent_id": 1, "children": [
                    {"id": 3, "title": "A1x", "parent_id": 2}
                ]}
            ]},
            {"id": 4, "title": "B", "children": null}
        ]"""
        assert [c.id for c in parse_categories(raw)] == [1, 2, 3, 4]

    def test_dump_then_parse_accounts(self) -> None:
        accounts = [TransactionAccount(id=1, name="USD General", currency_code="USD")]
        assert parse_accounts(dump_accounts(accounts)) == accounts

    def test_dumped_categories_have_no_children(self) -> None:
        categories = [Category(id=1, title="A"), Category(id=2, title="B", parent_id=1)]
        assert "children" not in dump_categories(categories)


class TestRoutingMode:
    def test_requires_category(self) -> None:
        assert RoutingMode.ACCOUNT_NAME.requires_category is True
        assert RoutingMode.CURRENCY.requires_category is False

    def test_from_env_value(self) -> None:
        assert RoutingMode("currency") is RoutingMode.CURRENCY
