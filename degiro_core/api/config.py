"""
ConfigResolver: fetch the per-environment service URL map for a session.

Doubles as session validation: a 401/403 means the token has expired, which
is the only failure the pipeline recovers from (by logging in again).
"""

from __future__ import annotations

import logging

from degiro_core.account import ServiceConfig
from degiro_core.api.http import HttpClient, data_object, json_body
from degiro_core.errors import MalformedConfig, SessionExpired
from degiro_core.session import Session

logger = logging.getLogger(__name__)

CONFIG_PATH = "/login/secure/config"

# Service roles the pipeline cannot run without.
REQUIRED_URLS = ("paUrl", "tradingUrl", "productSearchUrl")
CLIENT_ID_FIELD = "clientId"

SESSION_REJECTED_STATUSES = (401, 403)


def parse_config(data: dict, session: Session) -> ServiceConfig:
    """
    Build a ServiceConfig from the config document's data object.

    Raises MalformedConfig naming the first required field that is absent or
    of the wrong type. Extra *Url entries are kept.
    """
    for name in REQUIRED_URLS:
        value = data.get(name)
        if not isinstance(value, str) or not value:
            raise MalformedConfig(f"Config is missing service URL {name!r}", field=name)
    client_id = data.get(CLIENT_ID_FIELD)
    if isinstance(client_id, bool) or not isinstance(client_id, int):
        raise MalformedConfig(f"Config is missing numeric {CLIENT_ID_FIELD!r}", field=CLIENT_ID_FIELD)
    urls = {
        key: value
        for key, value in data.items()
        if key.endswith("Url") and isinstance(value, str) and value
    }
    return ServiceConfig(session_id=session.token, client_id=client_id, urls=urls)


class ConfigResolver:
    """GET {base}/login/secure/config with the session cookie."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def resolve(self, session: Session) -> ServiceConfig:
        url = f"{self._http.base_url}{CONFIG_PATH}"
        response = await self._http.request("GET", url, session_cookie=session.token)
        if response.status_code in SESSION_REJECTED_STATUSES:
            raise SessionExpired(f"Session rejected by config endpoint (HTTP {response.status_code})")
        payload = json_body(response)
        data = data_object(payload, "config", MalformedConfig)
        config = parse_config(data, session)
        logger.info("Service config resolved: %d service URLs, clientId=%s", len(config.urls), config.client_id)
        return config
