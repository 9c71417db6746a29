"""
Authenticator: exchange username/password for a session token.

The token is the value of the first set-cookie header of the login response.
Persisting it is the caller's decision.
"""

from __future__ import annotations

import logging

import httpx

from degiro_core.api.http import HttpClient
from degiro_core.errors import AuthenticationError
from degiro_core.session import Session

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login/secure/login"


def session_from_cookie(set_cookie: str | None) -> Session:
    """
    Extract the token from a set-cookie value: first ';' segment, value after '='.

    Raises AuthenticationError if there is no usable value.
    """
    if not set_cookie:
        raise AuthenticationError("Login response carried no session cookie")
    first = set_cookie.split(";")[0]
    name, sep, value = first.partition("=")
    value = value.strip()
    if not sep or not value:
        raise AuthenticationError(f"Malformed session cookie {name.strip()!r}")
    return Session(token=value)


class Authenticator:
    """Log in against {base}/login/secure/login."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def authenticate(self, username: str, password: str) -> Session:
        url = f"{self._http.base_url}{LOGIN_PATH}"
        body = {
            "username": username,
            "password": password,
            "isRedirectToMobile": False,
            "isPassCodeReset": False,
        }
        logger.info("Logging in as %s", username)
        response = await self._http.request("POST", url, json=body)
        if not response.is_success:
            raise AuthenticationError(f"Login rejected (HTTP {response.status_code})")
        cookies = _set_cookie_headers(response)
        if not cookies:
            raise AuthenticationError("Login response carried no session cookie")
        session = session_from_cookie(cookies[0])
        logger.info("Login succeeded for %s", username)
        return session


def _set_cookie_headers(response: httpx.Response) -> list[str]:
    return response.headers.get_list("set-cookie")
