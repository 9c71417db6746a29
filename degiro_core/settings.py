"""
Settings: credentials and connection options, passed explicitly into DegiroClient.

from_env() reads DEGIRO_USER / DEGIRO_PASS (required) and optional overrides.
Call load_env() first to pick up a .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from degiro_core.errors import ConfigurationError

BASE_URL = "https://trader.degiro.nl"
DEFAULT_SESSION_PATH = "session.txt"
DEFAULT_TIMEOUT = 10.0

USER_ENV = "DEGIRO_USER"
PASS_ENV = "DEGIRO_PASS"
BASE_URL_ENV = "DEGIRO_BASE_URL"
SESSION_PATH_ENV = "DEGIRO_SESSION_PATH"
TIMEOUT_ENV = "DEGIRO_TIMEOUT"


def load_env(path: str | Path | None = None) -> bool:
    """Load variables from a .env file into os.environ (existing values win)."""
    return load_dotenv(dotenv_path=path)


@dataclass(frozen=True)
class Settings:
    """Connection settings. Immutable."""

    username: str
    password: str
    base_url: str = BASE_URL
    session_path: Path = Path(DEFAULT_SESSION_PATH)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "session_path", Path(self.session_path))
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    def __repr__(self) -> str:
        return (
            f"Settings(username={self.username!r}, password=***, base_url={self.base_url!r}, "
            f"session_path={str(self.session_path)!r}, timeout={self.timeout})"
        )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """
        Build settings from environment variables.

        Raises ConfigurationError if DEGIRO_USER or DEGIRO_PASS is missing or
        DEGIRO_TIMEOUT is not a number.
        """
        env = os.environ if environ is None else environ
        username = env.get(USER_ENV, "").strip()
        password = env.get(PASS_ENV, "")
        if not username:
            raise ConfigurationError(f"{USER_ENV} not in env")
        if not password:
            raise ConfigurationError(f"{PASS_ENV} not in env")
        raw_timeout = env.get(TIMEOUT_ENV, "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from None
        return cls(
            username=username,
            password=password,
            base_url=env.get(BASE_URL_ENV, "").strip() or BASE_URL,
            session_path=Path(env.get(SESSION_PATH_ENV, "").strip() or DEFAULT_SESSION_PATH),
            timeout=timeout,
        )
