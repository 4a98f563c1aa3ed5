"""
Access-token management for the Baidu AI services.

Baidu issues bearer tokens through the OAuth2 client credentials
grant: the API key and secret key of an application are exchanged at
the token endpoint for an ``access_token`` that is valid for
``expires_in`` seconds.  :class:`TokenManager` performs that exchange
lazily, caches the result and fetches a new token once the cached one
has expired.

Each client owns its own manager; managers are never shared between
clients.  The manager does no locking, so two overlapping calls made
before a token exists may both fetch one.  Both tokens are valid and
the last one stored wins.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
import structlog

from .config import ClientConfig
from .exceptions import AuthenticationError

log = structlog.wrap_logger(logging.getLogger(__name__))


@dataclass(frozen=True)
class Credential:
    """A bearer token and the window in which it may be used."""

    token: str
    issued_at: int
    expires_at: int

    def is_valid(self, now: int) -> bool:
        """Return ``True`` while ``now`` has not passed the expiry second."""
        return now <= self.expires_at


class TokenManager:
    """Obtain and cache the access token for one client.

    Parameters
    ----------
    config : ClientConfig
        Supplies the credentials and the token endpoint.
    session : requests.Session, optional
        Session used for the token request.  A new one is created when
        omitted.
    clock : callable, optional
        Returns the current time in seconds since the epoch.  Defaults
        to :func:`time.time`.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self._session = session or requests.Session()
        self._clock = clock
        self._credential: Optional[Credential] = None

    @property
    def credential(self) -> Optional[Credential]:
        """The currently held credential, or ``None`` before the first fetch."""
        return self._credential

    def _now(self) -> int:
        return int(self._clock())

    def get_token(self) -> str:
        """Return a valid access token, fetching a new one if needed.

        A token is reused until the current second is strictly later
        than its expiry; a token expiring in the current second is
        still handed out.
        """
        now = self._now()
        if self._credential is None or not self._credential.is_valid(now):
            self._credential = None
            self._credential = self._fetch_credential(now)
        return self._credential.token

    def _fetch_credential(self, now: int) -> Credential:
        """Exchange the API key and secret key for a new credential.

        Raises :class:`AuthenticationError` on transport failures,
        non-success statuses and malformed token responses.
        """
        params = {
            "grant_type": "client_credentials",
            "client_id": self.config.api_key,
            "client_secret": self.config.secret_key,
        }
        log.debug("Fetching access token", auth_url=self.config.auth_url)
        try:
            response = self._session.post(self.config.auth_url, params=params)
        except requests.exceptions.RequestException as exc:
            log.warning("Access token request failed", auth_url=self.config.auth_url, error=str(exc))
            raise AuthenticationError(f"Failed to connect to auth server: {exc}") from exc

        try:
            token_info: Dict[str, Any] = response.json()
        except ValueError:
            token_info = {}
        if not isinstance(token_info, dict):
            token_info = {}

        if not response.ok:
            # Baidu describes rejected credentials in error/error_description
            detail = token_info.get("error_description") or token_info.get("error") or response.text
            log.warning("Access token rejected", status_code=response.status_code, error=detail)
            raise AuthenticationError(
                f"Authentication failed with status {response.status_code}: {detail}"
            )

        if "error" in token_info:
            detail = token_info.get("error_description") or token_info["error"]
            raise AuthenticationError(f"Authentication failed: {detail}")

        access_token = token_info.get("access_token")
        if not access_token or not isinstance(access_token, str):
            raise AuthenticationError("Authentication response did not contain an access_token")
        expires_in = token_info.get("expires_in")
        if isinstance(expires_in, bool) or not isinstance(expires_in, int):
            raise AuthenticationError(
                f"Authentication response has an invalid expires_in: {expires_in!r}"
            )

        log.debug("Fetched access token", expires_in=expires_in)
        return Credential(token=access_token, issued_at=now, expires_at=now + expires_in)
