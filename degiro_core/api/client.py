"""
DegiroClient: the session -> config -> account -> positions -> products -> portfolio pipeline.

connect() establishes the session once (stored token, or a fresh login) and
resolves the service config and account. An expired stored session triggers
exactly one re-login. fetch_portfolio() builds a new Portfolio on each call.
"""

from __future__ import annotations

import logging

import httpx

from degiro_core.account import Account, ServiceConfig
from degiro_core.api.account import AccountResolver
from degiro_core.api.auth import Authenticator
from degiro_core.api.config import ConfigResolver
from degiro_core.api.http import HttpClient
from degiro_core.api.positions import PositionDecoder
from degiro_core.api.products import ProductCatalog
from degiro_core.errors import SessionExpired
from degiro_core.portfolio import Portfolio, assemble
from degiro_core.session import Session, SessionStore
from degiro_core.settings import Settings

logger = logging.getLogger(__name__)


class DegiroClient:
    """
    Private-API client for one account.

    Use as an async context manager so the underlying HTTP client is closed:

        async with DegiroClient(settings) as client:
            portfolio = await client.fetch_portfolio()
    """

    def __init__(
        self,
        settings: Settings,
        *,
        store: SessionStore | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self.store = store or SessionStore(settings.session_path)
        self._http = HttpClient(settings.base_url, timeout=settings.timeout, client=http_client)
        self._authenticator = Authenticator(self._http)
        self._config_resolver = ConfigResolver(self._http)
        self._account_resolver = AccountResolver(self._http)
        self._position_decoder = PositionDecoder(self._http)
        self._product_catalog = ProductCatalog(self._http)
        self._session: Session | None = None
        self._config: ServiceConfig | None = None
        self._account: Account | None = None

    async def __aenter__(self) -> DegiroClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def connected(self) -> bool:
        return self._account is not None

    @property
    def config(self) -> ServiceConfig | None:
        return self._config

    @property
    def account(self) -> Account | None:
        return self._account

    async def _login(self) -> Session:
        session = await self._authenticator.authenticate(self.settings.username, self.settings.password)
        self.store.save(session)
        return session

    async def connect(self) -> Account:
        """
        Establish session, service config and account. Idempotent once connected.

        Raises SessionExpired if a freshly obtained session is also rejected;
        every other error propagates unchanged.
        """
        if self._account is not None:
            return self._account

        loaded = self.store.load()
        if loaded.found:
            session = loaded.session
        else:
            logger.info("Cannot find session, performing login...")
            session = await self._login()

        try:
            config = await self._config_resolver.resolve(session)
        except SessionExpired:
            logger.warning("Session expired, performing login...")
            session = await self._login()
            config = await self._config_resolver.resolve(session)

        account = await self._account_resolver.resolve(config)
        self._session, self._config, self._account = session, config, account
        return account

    async def fetch_portfolio(self) -> Portfolio:
        """Fetch positions, resolve their products in one batch, and assemble the portfolio."""
        account = await self.connect()
        config = self._config
        positions = await self._position_decoder.fetch(config, account)
        products = await self._product_catalog.resolve_batch(config, account, [p.id for p in positions])
        return assemble(positions, products)
