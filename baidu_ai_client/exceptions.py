"""
Custom exception types for the Baidu AI client.

These exceptions allow callers to distinguish between failures
occurring during authentication, while downloading a referenced
document, and those arising from the service requests themselves.

Service-level errors that Baidu reports inside a successful HTTP
response are not exceptions; see
:class:`baidu_ai_client.results.RemoteApplicationError`.
"""

from typing import Optional


class BaiduAIError(Exception):
    """Base exception for all Baidu AI client errors."""


class AuthenticationError(BaiduAIError):
    """Raised when authentication or token retrieval fails."""


class ResourceFetchError(BaiduAIError):
    """Raised when a document referenced by URL cannot be downloaded."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RemoteServiceError(BaiduAIError):
    """Raised when a request to a Baidu AI endpoint fails at the HTTP level."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
