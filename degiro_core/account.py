"""
Service configuration and account identity resolved once per session.

Both are immutable and held read-only for the lifetime of a client connection.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class ServiceConfig:
    """
    Per-environment service base URLs plus the session they were issued for.

    urls maps role names as the server spells them (paUrl, tradingUrl, ...)
    to base URLs.
    """

    session_id: str = field(repr=False)
    client_id: int
    urls: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "urls", MappingProxyType(dict(self.urls)))

    @property
    def pa_url(self) -> str:
        return self.urls["paUrl"]

    @property
    def trading_url(self) -> str:
        return self.urls["tradingUrl"]

    @property
    def product_search_url(self) -> str:
        return self.urls["productSearchUrl"]


@dataclass(frozen=True)
class Account:
    """The single account behind a session."""

    int_account: int
    username: str
    display_name: str
    email: str | None = None
