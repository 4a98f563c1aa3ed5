"""
Client for the Baidu NLP lexical analysis service.

.. code-block:: python

    from baidu_ai_client import NLPClient

    client = NLPClient(app_id="123", api_key="ak", secret_key="sk")
    result = client.lexer("百度是一家高科技公司")
    if not result.is_error:
        print([item.item for item in result.items])
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from .base import BaseClient
from .results import LexerResponse, LexerResult, RemoteApplicationError, is_error_envelope

log = structlog.wrap_logger(logging.getLogger(__name__))

LEXER_PATH = "rpc/2.0/nlp/v1/lexer"
LEXER_CUSTOM_PATH = "rpc/2.0/nlp/v1/lexer_custom"


class NLPClient(BaseClient):
    """Lexical analysis client.  See :class:`BaseClient` for parameters."""

    def lexer(self, text: str, custom: bool = False, *, timeout: Optional[float] = None) -> LexerResponse:
        """Split ``text`` into words and tag them.

        Parameters
        ----------
        text : str
            The text to analyse.
        custom : bool, optional
            Use the custom-lexicon variant configured for the
            application in the Baidu console.
        timeout : float, optional
            Timeout in seconds for the HTTP request.

        Returns
        -------
        LexerResult or RemoteApplicationError
        """
        path = LEXER_CUSTOM_PATH if custom else LEXER_PATH
        body = self._request(path, params={"charset": "UTF-8"}, json={"text": text}, timeout=timeout)
        if is_error_envelope(body):
            error = RemoteApplicationError.from_response(body)
            log.info("Lexer returned an error", error_code=error.error_code, log_id=error.log_id)
            return error
        return LexerResult.from_response(body)
