"""
Client for the Baidu OCR VAT invoice recognition service.

.. code-block:: python

    from baidu_ai_client import OCRClient

    client = OCRClient(app_id="123", api_key="ak", secret_key="sk")
    with open("invoice.jpg", "rb") as fh:
        result = client.vat_invoice(image=fh.read())
    print(result.invoice_date, result.total_amount_and_tax)
"""

from __future__ import annotations

import base64
import logging
from typing import Dict, Mapping, Optional, Union

import requests
import structlog

from .base import BaseClient
from .exceptions import ResourceFetchError
from .normalize import normalize_vat_invoice
from .results import (
    RemoteApplicationError,
    VatInvoiceResponse,
    VatInvoiceResult,
    is_error_envelope,
)

log = structlog.wrap_logger(logging.getLogger(__name__))

VAT_INVOICE_PATH = "rest/2.0/ocr/v1/vat_invoice"
INVOICE_TYPES = ("normal", "roll")


def _encode(value: Union[bytes, str]) -> str:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    return value


def _is_url(value: Union[bytes, str]) -> bool:
    return isinstance(value, str) and value.startswith(("http://", "https://"))


class OCRClient(BaseClient):
    """VAT invoice OCR client.  See :class:`BaseClient` for parameters."""

    def _download(self, url: str, timeout: Optional[float] = None) -> bytes:
        """Fetch a document referenced by URL."""
        log.debug("Downloading document", url=url)
        try:
            response = self._session.get(url, timeout=timeout)
        except requests.exceptions.RequestException as exc:
            raise ResourceFetchError(f"Failed to download {url}: {exc}", url=url) from exc
        if not response.ok:
            raise ResourceFetchError(
                f"{response.status_code} Error downloading {url}",
                url=url,
                status_code=response.status_code,
            )
        return response.content

    def vat_invoice(
        self,
        *,
        image: Optional[Union[bytes, str]] = None,
        url: Optional[str] = None,
        pdf_file: Optional[Union[bytes, str]] = None,
        type: str = "normal",
        timeout: Optional[float] = None,
    ) -> VatInvoiceResponse:
        """Recognise a VAT invoice.

        Exactly one of ``image``, ``url`` and ``pdf_file`` must be given.

        Parameters
        ----------
        image : bytes or str, optional
            Image content (jpg/jpeg/png/bmp), raw or already base64
            encoded.
        url : str, optional
            URL of the image.  The service downloads it itself.
        pdf_file : bytes or str, optional
            PDF content, raw or base64 encoded, or an ``http(s)`` URL.
            A URL is downloaded here and submitted inline.  Only the
            first page is recognised.
        type : str, optional
            ``"normal"`` for ordinary, special and electronic invoices
            (the default) or ``"roll"`` for roll invoices.
        timeout : float, optional
            Timeout in seconds for each HTTP request.

        Returns
        -------
        VatInvoiceResult or RemoteApplicationError

        Raises
        ------
        ValueError
            If the sources or ``type`` are invalid.
        ResourceFetchError
            If ``pdf_file`` is a URL that cannot be downloaded.
        """
        sources = [name for name, value in (("image", image), ("url", url), ("pdf_file", pdf_file)) if value]
        if len(sources) != 1:
            raise ValueError("exactly one of image, url or pdf_file must be provided")
        if type not in INVOICE_TYPES:
            raise ValueError(f"type must be one of {INVOICE_TYPES}, got {type!r}")

        form: Dict[str, str] = {"type": type}
        if image:
            form["image"] = _encode(image)
        elif url:
            form["url"] = url
        elif _is_url(pdf_file):
            form["pdf_file"] = _encode(self._download(pdf_file, timeout=timeout))
        else:
            form["pdf_file"] = _encode(pdf_file)

        body = self._request(VAT_INVOICE_PATH, data=form, timeout=timeout)
        if is_error_envelope(body):
            error = RemoteApplicationError.from_response(body)
            log.info("VAT invoice returned an error", error_code=error.error_code, log_id=error.log_id)
            return error
        words_result = body.get("words_result")
        if not isinstance(words_result, Mapping):
            words_result = {}
        return VatInvoiceResult(
            fields=normalize_vat_invoice(words_result),
            log_id=body.get("log_id"),
            words_result_num=body.get("words_result_num"),
        )
