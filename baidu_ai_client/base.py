"""
Shared HTTP plumbing for the Baidu AI service clients.

:class:`BaseClient` owns the configuration, a :class:`requests.Session`
and a :class:`~baidu_ai_client.auth.TokenManager`.  Service clients
subclass it and call :meth:`BaseClient._request` for each operation.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional

import requests
import structlog

from .auth import TokenManager
from .config import ClientConfig
from .exceptions import RemoteServiceError

log = structlog.wrap_logger(logging.getLogger(__name__))


class BaseClient:
    """Base class for the Baidu AI service clients.

    Pass either a ready :class:`ClientConfig` or the credentials
    themselves:

    .. code-block:: python

        client = NLPClient(app_id="123", api_key="ak", secret_key="sk")
        client = NLPClient(config=ClientConfig.from_env())

    Parameters
    ----------
    config : ClientConfig, optional
        The configuration to use.  When given, the credential keyword
        arguments must be omitted.
    app_id, api_key, secret_key : str, optional
        Credentials used to build a :class:`ClientConfig`.
    auth_url, base_url : str, optional
        Endpoint overrides used to build a :class:`ClientConfig`.
    session : requests.Session, optional
        Session for all HTTP traffic.  A new one is created when
        omitted.
    clock : callable, optional
        Time source for token expiry, in seconds since the epoch.
    """

    def __init__(
        self,
        *,
        config: Optional[ClientConfig] = None,
        app_id: Optional[str] = None,
        api_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        auth_url: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if config is None:
            overrides = {}
            if auth_url:
                overrides["auth_url"] = auth_url
            if base_url:
                overrides["base_url"] = base_url
            config = ClientConfig(
                app_id=app_id or "",
                api_key=api_key or "",
                secret_key=secret_key or "",
                **overrides,
            )
        elif any(value is not None for value in (app_id, api_key, secret_key, auth_url, base_url)):
            raise ValueError("pass either config or credentials, not both")

        self.config = config
        self._session = session or requests.Session()
        self.token_manager = TokenManager(config, session=self._session, clock=clock)

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def _prepare_url(self, path: str) -> str:
        """Join ``path`` to the configured base URL.

        Absolute URLs are returned as-is.
        """
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """POST to a Baidu AI endpoint with a valid access token.

        The token is requested from the token manager right before the
        call and sent as the ``access_token`` query parameter.

        Parameters
        ----------
        path : str
            Endpoint path relative to the base URL.
        params : dict, optional
            Extra query parameters.
        json : object, optional
            A JSON-serialisable request body.
        data : dict, optional
            A form-encoded request body.
        timeout : float, optional
            Timeout in seconds for the HTTP request.

        Returns
        -------
        Any
            The decoded JSON body, untransformed.

        Raises
        ------
        RemoteServiceError
            On transport failures, non-2xx statuses or a body that is
            not a JSON object.
        AuthenticationError
            If a token could not be obtained.
        """
        url = self._prepare_url(path)
        token = self.token_manager.get_token()
        query = dict(params or {})
        query["access_token"] = token

        log.debug("Sending request", url=url)
        try:
            response = self._session.post(url, params=query, json=json, data=data, timeout=timeout)
        except requests.exceptions.RequestException as exc:
            raise RemoteServiceError(f"Failed to connect to {url}: {exc}") from exc

        if not response.ok:
            err_text = response.text
            error_code = None
            try:
                err_json = response.json()
                err_text = str(err_json)
                if isinstance(err_json, dict):
                    error_code = err_json.get("error_code")
            except ValueError:
                pass
            raise RemoteServiceError(
                f"{response.status_code} Error for {url}: {err_text}",
                status_code=response.status_code,
                error_code=error_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise RemoteServiceError(
                f"Invalid JSON in response from {url}",
                status_code=response.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise RemoteServiceError(
                f"Expected a JSON object from {url}, got {type(body).__name__}",
                status_code=response.status_code,
            )
        return body
