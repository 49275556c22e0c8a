"""Global enums shared across modules."""

from enum import Enum


class RoutingMode(str, Enum):
    """How the inbound "currency" param selects a transaction account."""
    ACCOUNT_NAME = "account_name"
    CURRENCY = "currency"

    @property
    def requires_category(self) -> bool:
        return self is RoutingMode.ACCOUNT_NAME


class ErrorKind(str, Enum):
    """Machine-readable error discriminant, checked at the HTTP boundary."""
    REQUEST = "REQUEST"
    LOOKUP = "LOOKUP"
    UPSTREAM = "UPSTREAM"
    INTERNAL = "INTERNAL"
