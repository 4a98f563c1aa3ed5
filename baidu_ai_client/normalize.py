"""
Response normalization.

Baidu returns keys in snake_case (``log_id``) for envelopes and lexer
items and in PascalCase (``InvoiceDate``) for invoice fields.  The
public shape of every result uses camelCase.  The helpers here build
new structures from the raw ones; they never mutate their input.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Mapping

_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")
_LEADING_NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Derived invoice fields: normalized name -> normalized source field.
# "Figuers" is how the service spells it.
INVOICE_ALIASES: Dict[str, str] = {
    "totalAmountAndTax": "amountInFiguers",
    "remark": "remarks",
}

_DATE_MARKERS = str.maketrans({"年": "-", "月": "-", "日": None})


def camel_case(key: str) -> str:
    """Convert ``key`` to camelCase.

    >>> camel_case("log_id")
    'logId'
    >>> camel_case("AmountInFiguers")
    'amountInFiguers'
    """
    words = _WORD_RE.findall(key)
    if not words:
        return key
    first, *rest = words
    return first.lower() + "".join(word.capitalize() for word in rest)


def normalize_keys(raw: Any) -> Any:
    """Return a copy of ``raw`` with every mapping key in camelCase.

    Mappings nested inside mappings or lists are rewritten as well.
    Non-string keys and scalar values pass through untouched.
    """
    if isinstance(raw, Mapping):
        return {
            (camel_case(key) if isinstance(key, str) else key): normalize_keys(value)
            for key, value in raw.items()
        }
    if isinstance(raw, list):
        return [normalize_keys(value) for value in raw]
    return raw


def _join_words(value: Any) -> Any:
    if not isinstance(value, list):
        return value
    return "\n".join(
        str(entry.get("word", "")) if isinstance(entry, Mapping) else str(entry)
        for entry in value
    )


def _parse_float(value: Any) -> float:
    """Read a leading decimal number the way ``"785.40元"`` reads as 785.4.

    Anything that does not start with a finite number gives ``0.0``.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value)
        if not match:
            return 0.0
        result = float(match.group(0))
    else:
        return 0.0
    return result if math.isfinite(result) else 0.0


def normalize_invoice_date(value: Any) -> Any:
    """Turn ``2023年05月01日`` into ``2023-05-01``; other values pass through."""
    if not isinstance(value, str):
        return value
    return value.translate(_DATE_MARKERS)


def normalize_vat_invoice(words_result: Mapping[str, Any]) -> Dict[str, Any]:
    """Normalize the ``words_result`` block of a VAT invoice response.

    After the keys are rewritten, the following rules apply in order:

    1. ``commodityName`` given as ``[{"word": ...}, ...]`` becomes the
       words joined by newlines.
    2. ``totalAmountAndTax`` is copied from ``amountInFiguers``.
    3. ``invoiceDate`` has its year and month markers replaced by
       hyphens and its day marker dropped.
    4. ``remark`` is copied from ``remarks``.
    5. ``totalTax`` becomes the float it starts with, or ``0.0`` when it
       does not start with a finite number.

    None of the rules raise; a malformed field keeps a safe value.
    """
    fields: Dict[str, Any] = normalize_keys(dict(words_result))

    if "commodityName" in fields:
        fields["commodityName"] = _join_words(fields["commodityName"])

    for target, source in INVOICE_ALIASES.items():
        if source in fields:
            fields[target] = fields[source]

    if "invoiceDate" in fields:
        fields["invoiceDate"] = normalize_invoice_date(fields["invoiceDate"])

    fields["totalTax"] = _parse_float(fields.get("totalTax"))
    return fields
