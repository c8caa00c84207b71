"""Domain-level exceptions raised by account queries and loaders."""

from __future__ import annotations

from typing import Any


class AccountQueryError(Exception):
    """Base class for account query failures."""


class AccountNotFoundError(AccountQueryError, LookupError):
    """Raised when no account matches a lookup by email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Cannot find Account by email={email}")
        self.email = email


class DuplicateAccountKeyError(AccountQueryError, ValueError):
    """Raised when a keyed collection would receive the same key twice."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"duplicate account {field}={value!r}")
        self.field = field
        self.value = value


class AccountSourceError(AccountQueryError):
    """Raised when an account source cannot be read or fails validation."""
