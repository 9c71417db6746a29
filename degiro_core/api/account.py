"""
AccountResolver: fetch the internal account id and display metadata.
"""

from __future__ import annotations

import logging

from degiro_core.account import Account, ServiceConfig
from degiro_core.api.http import HttpClient, data_object, json_body
from degiro_core.errors import MalformedResponse

logger = logging.getLogger(__name__)


def parse_account(data: dict) -> Account:
    """Build an Account; intAccount and username are required."""
    int_account = data.get("intAccount")
    if isinstance(int_account, bool) or not isinstance(int_account, int):
        raise MalformedResponse("Account info is missing numeric 'intAccount'", field="intAccount")
    username = data.get("username")
    if not isinstance(username, str) or not username:
        raise MalformedResponse("Account info is missing 'username'", field="username")
    display_name = data.get("displayName")
    email = data.get("email")
    return Account(
        int_account=int_account,
        username=username,
        display_name=display_name if isinstance(display_name, str) and display_name else username,
        email=email if isinstance(email, str) and email else None,
    )


class AccountResolver:
    """GET {paUrl}client?sessionId=<token>."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def resolve(self, config: ServiceConfig) -> Account:
        url = f"{config.pa_url}client"
        response = await self._http.request("GET", url, params={"sessionId": config.session_id})
        data = data_object(json_body(response), "account info")
        account = parse_account(data)
        logger.info("Account resolved: intAccount=%s (%s)", account.int_account, account.display_name)
        return account
