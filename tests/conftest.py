"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]

# Add project root to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set test environment variables before importing the app
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("OTEL_LOG_RECORD_FORMAT", "console")

from card_gateway.core.config import SoapBackendConfig  # noqa: E402
from card_gateway.soap.client import SoapClient  # noqa: E402
from tests.utils.soap_responses import BACKEND_URL  # noqa: E402


# =============================================================================
# Sample backend records
# =============================================================================

SAMPLE_CARD = {
    "Account_Status": "A",
    "BrandName": "VISA",
    "CardNumber": "4111111111111111",
    "CardType": "CREDIT",
    "ClientCode": "C001",
    "CprId": "12345",
    "CurrentBalance": "120.500",
    "EmbossingName": "JANE DOE",
    "ExpiryDate": "12/27",
    "MainSupp": "M",
    "pBasicCardNumber": "4111111111111111",
}

SAMPLE_SUPPLEMENTARY_CARD = {
    "BrandName": "VISA",
    "CardNumber": "4012888888881881",
    "CardType": "CREDIT",
    "CprId": "12345",
    "EmbossingName": "JOHN DOE",
    "MainSupp": "S",
}

SAMPLE_STATEMENT = {
    "BillingAmount": "15.250",
    "BillingCurrency": "BHD",
    "CardNumber": "4111111111111111",
    "Description": "COFFEE SHOP MANAMA",
    "PostingDate": "2024-03-02",
    "RunningBalance": "135.750",
    "TransactionAmount": "15.250",
    "TransactionCurrency": "BHD",
    "TransactionDate": "2024-03-01",
    "ValueDate": "2024-03-02",
    "Wording": "PURCHASE",
    "AuthorizationCode": "A1B2C3",
}


@pytest.fixture
def sample_card() -> dict[str, str]:
    """Backend card record including fields outside the allow-list."""
    return SAMPLE_CARD.copy()


@pytest.fixture
def sample_statement() -> dict[str, str]:
    """Backend statement record including fields outside the allow-list."""
    return SAMPLE_STATEMENT.copy()


# =============================================================================
# SOAP backend doubles
# =============================================================================


class RecordingBackend:
    """httpx handler that records requests and replays a canned response."""

    def __init__(
        self,
        body: str = "",
        status_code: int = 200,
        error: Exception | None = None,
    ):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            content=self.body.encode("utf-8"),
            headers={"Content-Type": "text/xml; charset=utf-8"},
        )

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def backend_config() -> SoapBackendConfig:
    """Backend configuration pointing at a fake endpoint."""
    return SoapBackendConfig(endpoint_url=BACKEND_URL, verify_tls=False, ca_bundle=None)


@pytest.fixture
def make_backend() -> Callable[..., RecordingBackend]:
    """Factory for recording backends."""
    return RecordingBackend


@pytest.fixture
def make_client(backend_config: SoapBackendConfig) -> Callable[[RecordingBackend], SoapClient]:
    """Factory for SOAP clients wired to a recording backend."""

    def _make(backend: RecordingBackend) -> SoapClient:
        return SoapClient(backend_config, transport=httpx.MockTransport(backend))

    return _make
