"""
Session: opaque token authorizing API calls, and the file store that persists it.

The store knows nothing about token validity; a stale token is only detected
when the config endpoint rejects it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """A session token (the JSESSIONID cookie value). Immutable."""

    token: str

    def __repr__(self) -> str:
        return "Session(token=***)"


class SessionLoadKind(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class SessionLoad:
    """Result of SessionStore.load. session is set only when status is FOUND."""

    status: SessionLoadKind
    session: Session | None = None

    @property
    def found(self) -> bool:
        return self.status == SessionLoadKind.FOUND


class SessionStore:
    """
    Persist a session token as raw UTF-8 text in a single file.

    No framing, no expiry metadata, no locking (single-writer).
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> SessionLoad:
        """
        Read the token from disk.

        Surrounding whitespace is stripped. Returns NOT_FOUND if the file does
        not exist or holds no token. Any other
        I/O error propagates.
        """
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            logger.debug("No session file at %s", self.path)
            return SessionLoad(status=SessionLoadKind.NOT_FOUND)
        if not token:
            logger.debug("Session file %s is empty", self.path)
            return SessionLoad(status=SessionLoadKind.NOT_FOUND)
        return SessionLoad(status=SessionLoadKind.FOUND, session=Session(token=token))

    def save(self, session: Session) -> None:
        """Overwrite the file with the session token."""
        self.path.write_text(session.token, encoding="utf-8")
        logger.info("Session saved to %s", self.path)
