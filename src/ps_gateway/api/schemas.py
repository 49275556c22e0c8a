"""Pydantic schemas for the inbound RPC envelope and API responses."""

from typing import Any

from pydantic import BaseModel, ValidationError

from src.ps_common.errors import BadRequestError, InvalidAmountError
from src.ps_transaction.domain.models import Transaction

ADD_TRANSACTION_METHOD = "transactions.add"

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RpcRequest(BaseModel):
    method: str
    params: dict[str, Any] | None = None


class TransactionParams(BaseModel):
    currency: str = ""
    category: str = ""
    merchant: str = ""
    value: str = ""
    date: str = ""


def normalize_amount(value: str) -> str:
    """Fold "," to "." and reject anything left with more than one separator."""
    amount = value.replace(",", ".")
    if amount.count(".") > 1:
        raise InvalidAmountError(value)
    return amount


def parse_add_transaction(body: bytes, category_required: bool) -> Transaction:
    """Validate an RPC envelope and turn it into a Transaction.

    Raises BadRequestError (400) for anything structurally wrong and
    InvalidAmountError (422) for an ambiguous amount.
    """
    try:
        rpc = RpcRequest.model_validate_json(body)
    except ValidationError:
        raise BadRequestError() from None
    if rpc.method != ADD_TRANSACTION_METHOD or rpc.params is None:
        raise BadRequestError()

    try:
        params = TransactionParams.model_validate(rpc.params)
    except ValidationError:
        raise BadRequestError() from None

    required = [params.currency, params.merchant, params.value, params.date]
    if category_required:
        required.append(params.category)
    if not all(required):
        raise BadRequestError()

    return Transaction(
        currency_or_account_name=params.currency,
        category_title=params.category or None,
        merchant=params.merchant,
        amount=normalize_amount(params.value),
        date=params.date,
    )


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AccountItem(BaseModel):
    name: str
    currency: str


class ItemsResponse(BaseModel):
    items: list[Any]


class ShortcutEntitiesResponse(BaseModel):
    accounts: list[AccountItem]
    categories: list[str]
