"""
Python client for the Baidu AI lexical analysis and invoice OCR services.

This package provides :class:`NLPClient` and :class:`OCRClient`.  Both
authenticate against the Baidu authorization server with the OAuth2
client-credentials grant, cache the access token for its lifetime and
request a new one once it has expired.

Responses are returned with camelCase keys, wrapped in typed results.
When the service reports an error inside a successful response, the
operation returns a :class:`RemoteApplicationError` instead of raising.

Examples
--------

```python
from baidu_ai_client import ClientConfig, NLPClient, OCRClient

config = ClientConfig.from_env()  # BAIDU_APP_ID, BAIDU_API_KEY, BAIDU_SECRET_KEY

with NLPClient(config=config) as nlp:
    result = nlp.lexer("百度是一家高科技公司")

with OCRClient(config=config) as ocr:
    invoice = ocr.vat_invoice(pdf_file="https://example.com/invoice.pdf")
    if not invoice.is_error:
        print(invoice.invoice_date, invoice.total_tax)
```

The library emits ``structlog`` events but does not configure logging;
that is left to the application.
"""

from .auth import Credential, TokenManager
from .config import ClientConfig
from .exceptions import AuthenticationError, BaiduAIError, RemoteServiceError, ResourceFetchError
from .nlp import NLPClient
from .ocr import OCRClient
from .results import LexerItem, LexerResult, RemoteApplicationError, VatInvoiceResult

__all__ = [
    "AuthenticationError",
    "BaiduAIError",
    "ClientConfig",
    "Credential",
    "LexerItem",
    "LexerResult",
    "NLPClient",
    "OCRClient",
    "RemoteApplicationError",
    "RemoteServiceError",
    "ResourceFetchError",
    "TokenManager",
    "VatInvoiceResult",
]
