"""Read-only filtering, grouping and aggregation queries over accounts."""

from __future__ import annotations

import logging
from collections import Counter
from decimal import Decimal
from operator import attrgetter
from typing import Callable, Collection, Hashable, Iterable, TypeVar

from .account import Account, Sex
from .errors import AccountNotFoundError, DuplicateAccountKeyError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _group(accounts: Iterable[Account], key: Callable[[Account], K]) -> dict[K, list[Account]]:
    """Group accounts by ``key`` preserving encounter order inside each group."""
    groups: dict[K, list[Account]] = {}
    for account in accounts:
        groups.setdefault(key(account), []).append(account)
    return groups


def _index(
    accounts: Iterable[Account],
    field: str,
    key: Callable[[Account], K],
    value: Callable[[Account], V],
) -> dict[K, V]:
    """Build a one-to-one mapping, rejecting repeated keys."""
    index: dict[K, V] = {}
    for account in accounts:
        k = key(account)
        if k in index:
            raise DuplicateAccountKeyError(field, k)
        index[k] = value(account)
    return index


class AccountQueryEngine:
    """Query operations over a caller-owned collection of accounts.

    The collection is held by reference and never mutated. Every call
    re-evaluates against its current contents.
    """

    def __init__(self, accounts: Collection[Account]) -> None:
        self._accounts = accounts

    @classmethod
    def of(cls, accounts: Collection[Account]) -> "AccountQueryEngine":
        return cls(accounts)

    def find_richest_person(self) -> Account | None:
        """Return the account with the largest balance, or ``None`` when empty."""
        return max(self._accounts, key=attrgetter("balance"), default=None)

    def find_accounts_by_birthday_month(self, month: int) -> list[Account]:
        """Return accounts born in ``month`` (1-12) in their original order."""
        return [account for account in self._accounts if account.birthday.month == month]

    def partition_by_sex(self) -> dict[bool, list[Account]]:
        """Split accounts into male (``True``) and female (``False``) lists."""
        return _group(self._accounts, lambda account: account.sex is Sex.MALE)

    def group_by_email_domain(self) -> dict[str, list[Account]]:
        return _group(self._accounts, attrgetter("email_domain"))

    def total_name_letter_count(self) -> int:
        return sum(len(account.first_name) + len(account.last_name) for account in self._accounts)

    def total_balance(self) -> Decimal:
        return sum((account.balance for account in self._accounts), Decimal(0))

    def sort_by_first_then_last_name(self) -> list[Account]:
        return sorted(self._accounts, key=lambda account: (account.first_name, account.last_name))

    def has_email_domain(self, domain: str) -> bool:
        return any(account.email_domain == domain for account in self._accounts)

    def balance_by_email(self, email: str) -> Decimal:
        """Return the balance of the account registered under ``email``.

        Raises
        ------
        AccountNotFoundError
            When no account carries that exact email.
        """
        for account in self._accounts:
            if account.email == email:
                return account.balance
        logger.debug("no account registered under %s", email)
        raise AccountNotFoundError(email)

    def index_by_id(self) -> dict[int, Account]:
        """Map account ids to accounts; duplicate ids raise ``DuplicateAccountKeyError``."""
        return _index(self._accounts, "id", attrgetter("id"), lambda account: account)

    def balances_by_email_for_year(self, year: int) -> dict[str, Decimal]:
        """Map email to balance for accounts created during ``year``."""
        created = (account for account in self._accounts if account.creation_date.year == year)
        return _index(created, "email", attrgetter("email"), attrgetter("balance"))

    def first_names_by_last_name(self) -> dict[str, set[str]]:
        names: dict[str, set[str]] = {}
        for account in self._accounts:
            names.setdefault(account.last_name, set()).add(account.first_name)
        return names

    def comma_joined_first_names_by_birthday_month(self) -> dict[int, str]:
        """Join first names per birthday month with ``", "`` in encounter order."""
        groups = _group(self._accounts, lambda account: account.birthday.month)
        return {
            month: ", ".join(account.first_name for account in members)
            for month, members in groups.items()
        }

    def total_balance_by_creation_month(self) -> dict[int, Decimal]:
        totals: dict[int, Decimal] = {}
        for account in self._accounts:
            month = account.creation_date.month
            totals[month] = totals.get(month, Decimal(0)) + account.balance
        return totals

    def letter_frequency_in_first_names(self) -> dict[str, int]:
        """Count every character across first names, case-sensitively."""
        counts: Counter[str] = Counter()
        for account in self._accounts:
            counts.update(account.first_name)
        return dict(counts)

    def letter_frequency_ignore_case_in_full_names(self) -> dict[str, int]:
        """Count characters across first and last names after lower-casing them."""
        counts: Counter[str] = Counter()
        for account in self._accounts:
            counts.update(account.first_name.lower())
            counts.update(account.last_name.lower())
        return dict(counts)
