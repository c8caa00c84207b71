"""Shared schema exports."""

from .account import AccountPayload

__all__ = [
    "AccountPayload",
]
