import copy
import re

import pytest

from baidu_ai_client.normalize import (
    camel_case,
    normalize_invoice_date,
    normalize_keys,
    normalize_vat_invoice,
)

_SNAKE_OR_PASCAL = re.compile(r"_|^[A-Z]")


@pytest.mark.parametrize(
    "key, expected",
    [
        ("log_id", "logId"),
        ("words_result_num", "wordsResultNum"),
        ("byte_length", "byteLength"),
        ("ne", "ne"),
        ("InvoiceDate", "invoiceDate"),
        ("AmountInFiguers", "amountInFiguers"),
        ("PurchaserRegisterNum", "purchaserRegisterNum"),
        ("invoiceDate", "invoiceDate"),
        ("XMLHttpRequest", "xmlHttpRequest"),
        ("item-2-name", "item2Name"),
        ("__private", "private"),
        ("发票", "发票"),
    ],
)
def test_camel_case(key, expected):
    assert camel_case(key) == expected


def _all_keys(value):
    if isinstance(value, dict):
        for key, nested in value.items():
            yield key
            yield from _all_keys(nested)
    elif isinstance(value, list):
        for nested in value:
            yield from _all_keys(nested)


def test_normalize_keys_rewrites_nested_structures():
    raw = {
        "log_id": 123,
        "text": "百度",
        "items": [
            {
                "byte_length": 4,
                "byte_offset": 0,
                "loc_details": [],
                "basic_words": ["百度"],
            }
        ],
        "words_result": {"InvoiceNum": "0001", "CommodityName": [{"row": "1", "word": "Widget"}]},
    }

    normalized = normalize_keys(raw)

    assert not [key for key in _all_keys(normalized) if _SNAKE_OR_PASCAL.search(key)]
    assert normalized == {
        "logId": 123,
        "text": "百度",
        "items": [
            {
                "byteLength": 4,
                "byteOffset": 0,
                "locDetails": [],
                "basicWords": ["百度"],
            }
        ],
        "wordsResult": {"invoiceNum": "0001", "commodityName": [{"row": "1", "word": "Widget"}]},
    }


def test_normalize_keys_does_not_mutate_input():
    raw = {"log_id": 1, "items": [{"byte_length": 2}]}
    original = copy.deepcopy(raw)

    normalize_keys(raw)

    assert raw == original


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2023年05月01日", "2023-05-01"),
        ("2023-05-01", "2023-05-01"),
        ("", ""),
        (None, None),
    ],
)
def test_normalize_invoice_date(raw, expected):
    assert normalize_invoice_date(raw) == expected


@pytest.fixture
def words_result():
    return {
        "InvoiceType": "电子普通发票",
        "InvoiceCode": "044031900111",
        "InvoiceNum": "12345678",
        "InvoiceDate": "2023年05月01日",
        "TotalAmount": "100.00",
        "TotalTax": "13.00",
        "AmountInFiguers": "113.00",
        "AmountInWords": "壹佰壹拾叁圆整",
        "SellerName": "示例公司",
        "CommodityName": [{"row": "1", "word": "Widget"}, {"row": "2", "word": "Gadget"}],
        "Remarks": "paid",
    }


def test_normalize_vat_invoice(words_result):
    fields = normalize_vat_invoice(words_result)

    assert fields["invoiceType"] == "电子普通发票"
    assert fields["invoiceNum"] == "12345678"
    assert fields["commodityName"] == "Widget\nGadget"
    assert fields["totalAmountAndTax"] == "113.00"
    assert fields["amountInFiguers"] == "113.00"
    assert fields["invoiceDate"] == "2023-05-01"
    assert fields["remark"] == "paid"
    assert fields["totalTax"] == 13.0
    assert "InvoiceNum" not in fields


def test_unparseable_total_tax_defaults_to_zero(words_result):
    words_result["TotalTax"] = "not-a-number"

    assert normalize_vat_invoice(words_result)["totalTax"] == 0


def test_missing_fields_do_not_raise():
    fields = normalize_vat_invoice({"InvoiceNum": "1"})

    assert fields == {"invoiceNum": "1", "totalTax": 0.0}


def test_commodity_name_string_is_kept():
    fields = normalize_vat_invoice({"CommodityName": "Widget"})

    assert fields["commodityName"] == "Widget"


def test_normalize_vat_invoice_does_not_mutate_input(words_result):
    original = copy.deepcopy(words_result)

    normalize_vat_invoice(words_result)

    assert words_result == original


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("785.40元", 785.4),
        (" 13", 13.0),
        ("-1.5e2", -150.0),
        (".5", 0.5),
        (12, 12.0),
        ("NaN", 0),
        ("inf", 0),
        ("Infinity", 0),
        ("1e400", 0),
        (float("nan"), 0),
        (None, 0),
        (True, 0),
        ("not-a-number", 0),
        ("", 0),
    ],
)
def test_total_tax_reads_leading_finite_number(raw, expected):
    assert normalize_vat_invoice({"TotalTax": raw})["totalTax"] == expected
