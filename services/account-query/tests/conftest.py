"""Shared account fixtures for query, loader and reader tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from itertools import count

import pytest

from account_query.domain.account import Account, Sex


@pytest.fixture
def account_factory():
    """Build accounts with sensible defaults and unique ids."""
    ids = count(1000)

    def _make(**overrides) -> Account:
        fields = {
            "id": next(ids),
            "first_name": "Ann",
            "last_name": "Lee",
            "email": "ann.lee@example.com",
            "sex": Sex.FEMALE,
            "birthday": date(1990, 1, 1),
            "creation_date": date(2015, 1, 1),
            "balance": Decimal("0"),
        }
        fields.update(overrides)
        return Account(**fields)

    return _make


@pytest.fixture
def accounts() -> list[Account]:
    """Five accounts spread over three domains, both sexes and several months."""
    return [
        Account(1, "Justin", "Butler", "justin.butler@gmail.com", Sex.MALE,
                date(2003, 4, 17), date(2016, 6, 13), Decimal("172966")),
        Account(2, "Olivia", "Cardenas", "cardenas@mail.com", Sex.FEMALE,
                date(1930, 1, 19), date(2014, 6, 21), Decimal("38029")),
        Account(3, "Nolan", "Donovan", "nolandonovan@gmail.com", Sex.MALE,
                date(1925, 4, 19), date(2011, 3, 10), Decimal("13889")),
        Account(4, "Lucas", "Lynn", "lucas.lynn@yahoo.com", Sex.MALE,
                date(1987, 9, 4), date(2016, 6, 22), Decimal("16980")),
        Account(5, "Emma", "Butler", "emma.butler@mail.com", Sex.FEMALE,
                date(1995, 1, 28), date(2016, 1, 15), Decimal("1200.50")),
    ]
