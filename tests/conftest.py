"""Shared fixtures for the Baidu AI client tests."""

from __future__ import annotations

import pytest

from baidu_ai_client import ClientConfig, NLPClient, OCRClient

AUTH_URL = "https://aip.baidubce.com/oauth/2.0/token"
LEXER_URL = "https://aip.baidubce.com/rpc/2.0/nlp/v1/lexer"
LEXER_CUSTOM_URL = "https://aip.baidubce.com/rpc/2.0/nlp/v1/lexer_custom"
VAT_INVOICE_URL = "https://aip.baidubce.com/rest/2.0/ocr/v1/vat_invoice"

START = 1_700_000_000


class FakeClock:
    """A settable time source."""

    def __init__(self, now: float = START) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return ClientConfig(app_id="10001", api_key="test-api-key", secret_key="test-secret-key")


@pytest.fixture
def auth_mock(requests_mock):
    """Token endpoint that always hands out the same token for an hour."""
    return requests_mock.post(AUTH_URL, json={"access_token": "token-1", "expires_in": 3600})


@pytest.fixture
def nlp_client(config, clock, auth_mock):
    with NLPClient(config=config, clock=clock) as client:
        yield client


@pytest.fixture
def ocr_client(config, clock, auth_mock):
    with OCRClient(config=config, clock=clock) as client:
        yield client
