"""File-backed source of account records."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from schemas import AccountPayload

from .config import get_settings
from .domain.account import Account, Sex
from .domain.errors import AccountSourceError
from .domain.queries import AccountQueryEngine
from .files import FileReadError, read_whole_file

logger = logging.getLogger(__name__)

_PAYLOADS = TypeAdapter(list[AccountPayload])


class AccountFileRepository:
    """Materialise accounts from a JSON document holding a list of accounts."""

    def __init__(self, path: str | Path | None = None, *, encoding: str | None = None) -> None:
        """Store the source location; defaults come from the runtime settings."""
        self._path = Path(path if path is not None else get_settings().accounts_path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def list_accounts(self) -> list[Account]:
        """Read, validate and map every account in the source document."""
        result = read_whole_file(self._path, encoding=self._encoding)
        try:
            payloads = _PAYLOADS.validate_json(result.unwrap())
        except FileReadError as exc:
            logger.warning("account source %s unreadable: %s", exc.path, exc.reason)
            raise AccountSourceError(f"account source unreadable: {exc.reason}") from exc
        except ValidationError as exc:
            logger.warning("rejected account source %s: %d errors", result.path, exc.error_count())
            raise AccountSourceError(f"invalid account source {result.path}") from exc

        accounts = [self._map_record(payload) for payload in payloads]
        logger.info("loaded %d accounts from %s", len(accounts), result.path)
        return accounts

    def query_engine(self) -> AccountQueryEngine:
        """Return a query engine over a freshly loaded account list."""
        return AccountQueryEngine(self.list_accounts())

    def _map_record(self, payload: AccountPayload) -> Account:
        """Convert a validated payload into the domain ``Account`` dataclass."""
        return Account(
            id=payload.id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            sex=Sex(payload.sex),
            birthday=payload.birthday,
            creation_date=payload.creation_date,
            balance=payload.balance,
        )
