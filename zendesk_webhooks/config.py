"""Configuration model for the webhooks client.

Values can be passed explicitly or loaded from environment variables with
``ClientConfig.from_env()``.
"""

import logging
import os
from typing import Optional

import httpx
from pydantic import BaseModel, Field, field_validator

from .credentials import BearerTokenAuth, api_token_auth, password_auth
from .exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "zendesk-webhooks-python"


class ClientConfig(BaseModel):
    """Connection settings for a WebhookClient.

    Attributes:
        subdomain: Zendesk account subdomain (``{subdomain}.zendesk.com``)
        base_url: Full API base URL, overrides the subdomain when set
        email: Agent email for API token or password authentication
        api_token: API token, used together with ``email``
        password: Agent password, used together with ``email``
        oauth_token: OAuth access token, takes precedence over the others
        timeout: Default request timeout in seconds
        user_agent: User-Agent header value
        log_level: Level applied to the ``zendesk_webhooks`` logger
    """

    subdomain: Optional[str] = None
    base_url: Optional[str] = None
    email: Optional[str] = None
    api_token: Optional[str] = Field(default=None, repr=False)
    password: Optional[str] = Field(default=None, repr=False)
    oauth_token: Optional[str] = Field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        return value.rstrip("/") if value else value

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a configuration from environment variables.

        Environment Variables:
            ZENDESK_SUBDOMAIN: Account subdomain
            ZENDESK_BASE_URL: Full API base URL
            ZENDESK_EMAIL: Agent email
            ZENDESK_API_TOKEN: API token
            ZENDESK_PASSWORD: Agent password
            ZENDESK_OAUTH_TOKEN: OAuth access token
            ZENDESK_TIMEOUT: Request timeout in seconds (default: "30")
            ZENDESK_USER_AGENT: User-Agent header value
            ZENDESK_LOG_LEVEL: Logger level (e.g. "DEBUG")

        Args:
            **overrides: Explicit values that win over the environment

        Returns:
            ClientConfig instance
        """
        values = {
            "subdomain": os.getenv("ZENDESK_SUBDOMAIN"),
            "base_url": os.getenv("ZENDESK_BASE_URL"),
            "email": os.getenv("ZENDESK_EMAIL"),
            "api_token": os.getenv("ZENDESK_API_TOKEN"),
            "password": os.getenv("ZENDESK_PASSWORD"),
            "oauth_token": os.getenv("ZENDESK_OAUTH_TOKEN"),
            "timeout": os.getenv("ZENDESK_TIMEOUT", str(DEFAULT_TIMEOUT)),
            "user_agent": os.getenv("ZENDESK_USER_AGENT", DEFAULT_USER_AGENT),
            "log_level": os.getenv("ZENDESK_LOG_LEVEL"),
        }
        values.update(overrides)
        return cls(**values)

    def resolve_base_url(self) -> str:
        """Return the API base URL.

        Raises:
            InvalidConfigurationError: If neither base_url nor subdomain is set
        """
        if self.base_url:
            return self.base_url
        if self.subdomain:
            return f"https://{self.subdomain}.zendesk.com/api/v2"
        raise InvalidConfigurationError(
            "Either base_url or subdomain must be configured",
            details={"env": ["ZENDESK_BASE_URL", "ZENDESK_SUBDOMAIN"]},
        )

    def build_auth(self) -> httpx.Auth:
        """Return the credential strategy for this configuration.

        Resolution order: OAuth token, email + API token, email + password.

        Raises:
            InvalidConfigurationError: If no complete credential is configured
        """
        if self.oauth_token:
            return BearerTokenAuth(self.oauth_token)
        if self.email and self.api_token:
            return api_token_auth(self.email, self.api_token)
        if self.email and self.password:
            return password_auth(self.email, self.password)
        raise InvalidConfigurationError(
            "No credentials configured: set oauth_token, or email with "
            "api_token or password"
        )

    def apply_log_level(self) -> None:
        """Apply ``log_level`` to the package logger, if set."""
        if not self.log_level:
            return
        level = getattr(logging, self.log_level.upper(), None)
        if not isinstance(level, int):
            logger.warning(f"Invalid log level: {self.log_level}, skipping")
            return
        logging.getLogger("zendesk_webhooks").setLevel(level)
