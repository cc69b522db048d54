"""Credential strategies for authenticating against the Zendesk API.

Each strategy is an ``httpx.Auth`` so it can be attached to a client or
to a single request.
"""

from typing import Generator

import httpx


class BearerTokenAuth(httpx.Auth):
    """OAuth access token sent as ``Authorization: Bearer <token>``."""

    def __init__(self, token: str):
        self._token = token

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request

    def __repr__(self) -> str:
        return "BearerTokenAuth(token=***)"


def api_token_auth(email: str, api_token: str) -> httpx.BasicAuth:
    """Basic auth using an agent email and an API token.

    Zendesk expects the username in the form ``{email}/token``.
    """
    return httpx.BasicAuth(f"{email}/token", api_token)


def password_auth(email: str, password: str) -> httpx.BasicAuth:
    """Basic auth using an agent email and password."""
    return httpx.BasicAuth(email, password)
