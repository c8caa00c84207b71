from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Runtime configuration values shared by readers and loaders."""

    app_name: str = "account-query"
    version: str = "0.1.0"
    resource_root: str = os.getenv("ACCOUNT_QUERY_RESOURCE_ROOT", ".")
    accounts_path: str = os.getenv("ACCOUNT_QUERY_ACCOUNTS_PATH", "accounts.json")
    file_encoding: str = os.getenv("ACCOUNT_QUERY_FILE_ENCODING", "utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance for the running process."""
    return Settings()
