"""
Client configuration.

A :class:`ClientConfig` holds the credentials issued for a Baidu AI
application along with the endpoints the clients talk to.  It is
immutable: build a new one rather than changing an existing instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_AUTH_URL = "https://aip.baidubce.com/oauth/2.0/token"
DEFAULT_BASE_URL = "https://aip.baidubce.com"


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and endpoints for one Baidu AI application.

    Parameters
    ----------
    app_id : str
        The application ID shown in the Baidu AI console.  It is not
        sent with requests but identifies the application the keys
        belong to.
    api_key : str
        The API key, used as the OAuth ``client_id``.
    secret_key : str
        The secret key, used as the OAuth ``client_secret``.
    auth_url : str, optional
        Override the token endpoint URL.
    base_url : str, optional
        Override the API base URL.
    """

    app_id: str
    api_key: str
    secret_key: str
    auth_url: str = DEFAULT_AUTH_URL
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("api_key must be provided")
        if not self.secret_key:
            raise ValueError("secret_key must be provided")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(app_id={self.app_id!r}, api_key={self.api_key!r}, "
            f"secret_key='***', auth_url={self.auth_url!r}, base_url={self.base_url!r})"
        )

    @classmethod
    def from_env(cls, prefix: str = "BAIDU_") -> "ClientConfig":
        """Load the configuration from environment variables.

        Reads ``BAIDU_APP_ID``, ``BAIDU_API_KEY`` and ``BAIDU_SECRET_KEY``
        (all required) and the optional ``BAIDU_AUTH_URL`` and
        ``BAIDU_BASE_URL``.  A different ``prefix`` may be given when
        several applications are configured side by side.
        """
        return cls(
            app_id=_get_required_env(f"{prefix}APP_ID"),
            api_key=_get_required_env(f"{prefix}API_KEY"),
            secret_key=_get_required_env(f"{prefix}SECRET_KEY"),
            auth_url=os.getenv(f"{prefix}AUTH_URL", DEFAULT_AUTH_URL),
            base_url=os.getenv(f"{prefix}BASE_URL", DEFAULT_BASE_URL),
        )


def _get_required_env(var_name: str) -> str:
    value: Optional[str] = os.getenv(var_name)
    if value is None:
        raise ValueError(f"Required environment variable '{var_name}' is not set.")
    return value
