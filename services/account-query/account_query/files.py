"""Whole-file text reading with an explicit success/failure result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import get_settings

logger = logging.getLogger(__name__)


class FileReadError(OSError):
    """Raised by :meth:`ReadResult.unwrap` when the read did not succeed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class ReadResult:
    """Outcome of a whole-file read: either ``text`` or an ``error`` reason."""

    path: Path
    text: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, path: Path, text: str) -> "ReadResult":
        return cls(path=path, text=text)

    @classmethod
    def failure(cls, path: Path, reason: str) -> "ReadResult":
        return cls(path=path, error=reason)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the file text or raise :class:`FileReadError`."""
        if self.error is not None:
            raise FileReadError(self.path, self.error)
        return self.text or ""

    def text_or(self, default: str) -> str:
        """Return the file text, or ``default`` when the read failed."""
        if self.error is not None:
            return default
        return self.text or ""


def read_whole_file(
    file_name: str | Path,
    *,
    root: str | Path | None = None,
    encoding: str | None = None,
) -> ReadResult:
    """Read a text file and return its lines joined by ``"\\n"``.

    Parameters
    ----------
    file_name:
        Path of the file; relative names resolve against ``root``.
    root:
        Base directory, defaulting to the configured resource root.
    encoding:
        Text encoding, defaulting to the configured file encoding.

    Returns
    -------
    ReadResult
        A success carrying the text, or a failure carrying the reason. I/O,
        decoding and unknown-encoding errors never propagate from this function.
    """

    settings = get_settings()
    path = Path(root if root is not None else settings.resource_root) / file_name
    try:
        with open(path, encoding=encoding or settings.file_encoding, newline=None) as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        logger.warning("failed to read %s: %s", path, exc)
        return ReadResult.failure(path, str(exc))

    # newline=None folds \r\n and \r into \n; the last terminator is not a line
    if content.endswith("\n"):
        content = content[:-1]
    logger.debug("read %d characters from %s", len(content), path)
    return ReadResult.success(path, content)
