"""Account DTOs shared by loaders and fixtures."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email


class AccountPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    sex: Literal["MALE", "FEMALE"]
    birthday: date
    creation_date: date = Field(..., alias="creationDate")
    balance: Decimal = Field(..., ge=0)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        """Validate as ``EmailStr`` does but keep the address exactly as given."""
        validate_email(value)
        return value
