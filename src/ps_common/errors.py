"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Inbound request (auth, envelope, params)
  2xxx: Lookup (account / category not found)
  3xxx: Upstream ledger API
  9xxx: System

Every AppError carries an ErrorKind. The HTTP boundary maps LOOKUP to a
client error and every other non-REQUEST kind to a server error.
"""

from src.ps_common.enums import ErrorKind


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
        kind: ErrorKind = ErrorKind.INTERNAL,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.kind = kind
        super().__init__(message)


# --- 1xxx: Inbound request ---

class BadRequestError(AppError):
    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(1001, detail, 400, ErrorKind.REQUEST)


class ForbiddenError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Forbidden", 403, ErrorKind.REQUEST)


class InvalidAmountError(AppError):
    def __init__(self, value: str) -> None:
        super().__init__(
            1003,
            f"Invalid amount format: multiple decimal separators in {value!r}",
            422,
            ErrorKind.REQUEST,
        )


# --- 2xxx: Lookup ---

class LookupFailedError(AppError):
    """A named entity was not found among the fetched collection."""

    def __init__(self, code: int, message: str, searched: str) -> None:
        self.searched = searched
        super().__init__(code, message, 400, ErrorKind.LOOKUP)


class AccountLookupError(LookupFailedError):
    def __init__(self, name: str) -> None:
        super().__init__(2001, f"No transaction account matches: {name}", name)


class CategoryLookupError(LookupFailedError):
    def __init__(self, title: str) -> None:
        super().__init__(2002, f"No category found with title: {title}", title)


# --- 3xxx: Upstream ---

class UpstreamError(AppError):
    """The ledger API failed. ``body`` keeps the raw response for diagnostics."""

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(3001, detail, 502, ErrorKind.UPSTREAM)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code}): {self.body}"


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


def is_lookup_error(exc: BaseException) -> bool:
    return isinstance(exc, AppError) and exc.kind is ErrorKind.LOOKUP
