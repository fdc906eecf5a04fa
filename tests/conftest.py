"""
Pytest configuration and fixtures for Przelewy24 SDK tests.
"""
from __future__ import annotations

import os

import pytest

from przelewy24_sdk import (
    AsyncPrzelewy24Client,
    Przelewy24Client,
    Przelewy24Settings,
    SandboxDefaults,
    SiteSettings,
)

BASE_URL = "https://sandbox.przelewy24.pl/api/v1/"

# Mock response data
MOCK_RESPONSES = {
    "register": {"data": {"token": "D35CD73C0E-37C7B5-059083-E4F5E6EF91"}, "responseCode": 0},
    "verify": {"data": {"status": "success"}, "responseCode": 0},
    "transaction": {
        "data": {
            "orderId": 311111111,
            "sessionId": "order-1",
            "amount": 1000,
            "currency": "PLN",
            "email": "buyer@example.com",
            "description": "Order #1",
            "methodId": 154,
            "statement": "p24-A1-B2-C3",
            "status": 1,
        },
        "responseCode": 0,
    },
    "test_access": {"data": True, "error": ""},
    "refund": {"data": {"refundsUuid": "94c1fb0b-f40f-4201-b2a0-f4166839d06c", "status": "accepted"}, "responseCode": 0},
    "refund_details": {
        "data": {
            "orderId": 311111111,
            "sessionId": "order-1",
            "amount": 500,
            "currency": "PLN",
            "status": "completed",
            "refundsUuid": "94c1fb0b-f40f-4201-b2a0-f4166839d06c",
            "createdAt": "2026-10-01 12:00:00",
        },
        "responseCode": 0,
    },
    "payment_methods": {
        "data": [
            {"id": 154, "name": "BLIK", "imgUrl": "https://static.przelewy24.pl/blik.png", "status": True, "mobile": True},
            {"id": 25, "name": "mTransfer", "imgUrl": "https://static.przelewy24.pl/mbank.png", "status": True, "mobile": False},
        ],
        "responseCode": 0,
    },
    "card_info": {"data": {"refId": "ref-abc", "mask": "************1111", "bin": "411111"}, "responseCode": 0},
    "card_charge": {"data": {"orderId": 311111112, "status": "success"}, "responseCode": 0},
    "card_charge_3ds": {"data": {"redirectUrl": "https://sandbox.przelewy24.pl/3ds/abc", "orderId": 311111113}, "responseCode": 0},
    "card_pay": {"data": {"orderId": 311111114, "status": "success"}, "responseCode": 0},
    "blik_charge": {"data": {"orderId": 311111115, "status": "pending"}, "responseCode": 0},
    "blik_aliases": {
        "data": {
            "aliases": [
                {"aliasValue": "alias-1", "aliasLabel": "Phone", "type": "UID"},
                {"aliasValue": "alias-2", "aliasLabel": "Tablet", "type": "PAYID"},
            ]
        },
        "responseCode": 0,
    },
    "report_history": {
        "data": {
            "items": [
                {"type": "transaction", "id": 311111111, "date": "2026-10-01", "amount": 1000, "currency": "PLN", "status": "paid"},
                {"type": "refund", "id": 311111111, "date": "2026-10-02", "amount": 500, "currency": "PLN", "status": "completed"},
            ]
        },
        "responseCode": 0,
    },
    "batch_details": {
        "data": {
            "batchId": 777,
            "date": "2026-10-03",
            "transactions": [
                {"orderId": 311111111, "sessionId": "order-1", "amount": 1000, "currency": "PLN", "status": "paid"},
            ],
            "refunds": [
                {"orderId": 311111111, "amount": 500, "currency": "PLN", "status": "completed"},
            ],
        },
        "responseCode": 0,
    },
}


@pytest.fixture(autouse=True)
def clear_przelewy24_env(monkeypatch):
    """Keep the developer's environment out of settings resolution."""
    for name in list(os.environ):
        if name.upper().startswith("PRZELEWY24_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    """Sandbox base URL."""
    return BASE_URL


@pytest.fixture
def site_settings() -> SiteSettings:
    """Fully configured site settings."""
    return SiteSettings(
        merchant_id=12345,
        pos_id=12345,
        crc_key="test-crc",
        report_key="report-key",
        base_url=BASE_URL,
    )


@pytest.fixture
def process_settings() -> Przelewy24Settings:
    """Empty process configuration, not read from any .env file."""
    return Przelewy24Settings(_env_file=None)


@pytest.fixture
def sandbox() -> SandboxDefaults:
    return SandboxDefaults()


@pytest.fixture
def client(site_settings, process_settings, sandbox):
    """Create a test client."""
    client = Przelewy24Client(site_settings=site_settings, settings=process_settings, sandbox=sandbox)
    yield client
    client.close()


@pytest.fixture
async def async_client(site_settings, process_settings, sandbox):
    """Create an async test client."""
    client = AsyncPrzelewy24Client(site_settings=site_settings, settings=process_settings, sandbox=sandbox)
    yield client
    await client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES
