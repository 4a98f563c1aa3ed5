"""
Typed results returned by the service clients.

Every operation returns either its success type or a
:class:`RemoteApplicationError`.  Both carry an ``is_error`` flag so
callers can branch on it directly:

.. code-block:: python

    result = client.lexer("百度是一家高科技公司")
    if result.is_error:
        print(result.error_code, result.error_msg)
    else:
        for item in result.items:
            print(item.item, item.pos)

Success results keep the whole normalized response in ``data`` (or
``fields`` for invoices), so values without a typed accessor remain
reachable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .normalize import normalize_keys


def _error_code(value: Any) -> Union[int, str, None]:
    """Return the code as an int when it is numeric, else unchanged."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def is_error_envelope(raw: Any) -> bool:
    """Return ``True`` when ``raw`` is a service-level error response.

    A numeric ``error_code`` other than 0 marks an error, as does any
    non-numeric code such as ``"SDK100"``.
    """
    if not isinstance(raw, Mapping):
        return False
    code = _error_code(raw.get("error_code"))
    if isinstance(code, int):
        return code != 0
    return bool(code)


@dataclass(frozen=True)
class RemoteApplicationError:
    """An error the service reported inside a successful HTTP response.

    This is returned, not raised.  ``error_code`` is an int unless the
    service sent a non-numeric code.
    """

    log_id: Optional[int]
    error_msg: str
    error_code: Union[int, str]

    is_error = True

    @classmethod
    def from_response(cls, raw: Mapping[str, Any]) -> "RemoteApplicationError":
        return cls(
            log_id=raw.get("log_id"),
            error_msg=str(raw.get("error_msg", "")),
            error_code=_error_code(raw["error_code"]),
        )


@dataclass(frozen=True)
class LexerItem:
    """One token produced by lexical analysis."""

    byte_length: int
    byte_offset: int
    formal: str
    item: str
    ne: str
    pos: str
    uri: str
    loc_details: List[str] = field(default_factory=list)
    basic_words: List[str] = field(default_factory=list)

    @classmethod
    def from_normalized(cls, data: Mapping[str, Any]) -> "LexerItem":
        return cls(
            byte_length=data.get("byteLength", 0),
            byte_offset=data.get("byteOffset", 0),
            formal=data.get("formal", ""),
            item=data.get("item", ""),
            ne=data.get("ne", ""),
            pos=data.get("pos", ""),
            uri=data.get("uri", ""),
            loc_details=list(data.get("locDetails") or []),
            basic_words=list(data.get("basicWords") or []),
        )


@dataclass(frozen=True)
class LexerResult:
    """Successful lexical analysis, keyed in camelCase."""

    data: Dict[str, Any]

    is_error = False

    @classmethod
    def from_response(cls, raw: Mapping[str, Any]) -> "LexerResult":
        return cls(data=normalize_keys(dict(raw)))

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    @property
    def log_id(self) -> Optional[int]:
        return self.data.get("logId")

    @property
    def text(self) -> str:
        return self.data.get("text", "")

    @property
    def items(self) -> List[LexerItem]:
        return [LexerItem.from_normalized(item) for item in self.data.get("items") or []]


@dataclass(frozen=True)
class VatInvoiceResult:
    """Fields extracted from a VAT invoice.

    ``fields`` holds the normalized ``words_result`` block; see
    :func:`baidu_ai_client.normalize.normalize_vat_invoice` for the
    derived values it contains.
    """

    fields: Dict[str, Any]
    log_id: Optional[int] = None
    words_result_num: Optional[int] = None

    is_error = False

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    @property
    def invoice_type(self) -> Optional[str]:
        return self.fields.get("invoiceType")

    @property
    def invoice_code(self) -> Optional[str]:
        return self.fields.get("invoiceCode")

    @property
    def invoice_num(self) -> Optional[str]:
        return self.fields.get("invoiceNum")

    @property
    def invoice_date(self) -> Optional[str]:
        return self.fields.get("invoiceDate")

    @property
    def machine_code(self) -> Optional[str]:
        return self.fields.get("machineCode")

    @property
    def check_code(self) -> Optional[str]:
        return self.fields.get("checkCode")

    @property
    def purchaser_name(self) -> Optional[str]:
        return self.fields.get("purchaserName")

    @property
    def purchaser_register_num(self) -> Optional[str]:
        return self.fields.get("purchaserRegisterNum")

    @property
    def seller_name(self) -> Optional[str]:
        return self.fields.get("sellerName")

    @property
    def seller_register_num(self) -> Optional[str]:
        return self.fields.get("sellerRegisterNum")

    @property
    def total_amount(self) -> Optional[str]:
        return self.fields.get("totalAmount")

    @property
    def total_tax(self) -> float:
        return self.fields.get("totalTax", 0.0)

    @property
    def total_amount_and_tax(self) -> Optional[str]:
        return self.fields.get("totalAmountAndTax")

    @property
    def commodity_name(self) -> Optional[str]:
        return self.fields.get("commodityName")

    @property
    def payee(self) -> Optional[str]:
        return self.fields.get("payee")

    @property
    def note_drawer(self) -> Optional[str]:
        return self.fields.get("noteDrawer")

    @property
    def remark(self) -> Optional[str]:
        return self.fields.get("remark")


LexerResponse = Union[LexerResult, RemoteApplicationError]
VatInvoiceResponse = Union[VatInvoiceResult, RemoteApplicationError]
