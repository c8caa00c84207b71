from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class Sex(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


@dataclass(frozen=True, slots=True)
class Account:
    """Immutable account record observed by query operations."""

    id: int
    first_name: str
    last_name: str
    email: str
    sex: Sex
    birthday: date
    creation_date: date
    balance: Decimal

    @property
    def email_domain(self) -> str:
        """Return the part of the email following ``@``."""
        return self.email.split("@")[1]
