"""
Tests for Transactions resource
"""
import json
import re
from urllib.parse import parse_qsl

import pytest
from pydantic import ValidationError as PydanticValidationError

from przelewy24_sdk import (
    ConfigurationError,
    Przelewy24Client,
    RegisterRequest,
    SiteSettings,
    ValidationError,
    VerifyRequest,
)
from przelewy24_sdk.resources.transactions import generate_session_id
from przelewy24_sdk.signature import compute_register_signature, compute_verify_signature


def _form(request) -> dict:
    return dict(parse_qsl(request.content.decode(), keep_blank_values=True))


class TestRegister:
    """Tests for transaction registration."""

    def test_register_transaction(self, client, httpx_mock, base_url, mock_responses):
        """Should post a signed form and return the token."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )

        result = client.transactions.register(
            RegisterRequest(
                amount=1000,
                session_id="order-1",
                description="Order #1",
                email="buyer@example.com",
                url_return="https://shop.example.com/return",
                url_status="https://shop.example.com/status",
            )
        )

        assert result.data.token == "D35CD73C0E-37C7B5-059083-E4F5E6EF91"
        request = httpx_mock.get_requests()[0]
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        form = _form(request)
        assert form["merchantId"] == "12345"
        assert form["posId"] == "12345"
        assert form["sessionId"] == "order-1"
        assert form["urlStatus"] == "https://shop.example.com/status"
        assert form["sign"] == compute_register_signature("order-1", 12345, 1000, "PLN", "test-crc")

    def test_form_field_order(self, client, httpx_mock, base_url, mock_responses):
        """Should send fields in documented order."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )

        client.transactions.register(RegisterRequest(amount=1000, session_id="order-1"))

        keys = [key for key, _ in parse_qsl(httpx_mock.get_requests()[0].content.decode(), keep_blank_values=True)]
        assert keys == [
            "merchantId", "posId", "amount", "currency", "description", "email",
            "country", "language", "urlReturn", "urlStatus", "sessionId", "sign",
        ]

    def test_generates_session_id_when_blank(self, client, httpx_mock, base_url, mock_responses):
        """Should generate and sign a session id."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )

        client.transactions.register(RegisterRequest(amount=1000, session_id="  "))

        form = _form(httpx_mock.get_requests()[0])
        assert re.fullmatch(r"[0-9a-f]{32}", form["sessionId"])
        assert form["sign"] == compute_register_signature(form["sessionId"], 12345, 1000, "PLN", "test-crc")

    def test_repeated_registration_generates_distinct_session_ids(self, client, httpx_mock, base_url, mock_responses):
        """Should generate a new session id for each identical registration."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )
        request = RegisterRequest(amount=1000, session_id="")

        client.transactions.register(request)
        client.transactions.register(request)

        first, second = (_form(sent) for sent in httpx_mock.get_requests())
        assert first["sessionId"] != second["sessionId"]
        assert first["sign"] != second["sign"]

    def test_explicit_ids_are_kept(self, client, httpx_mock, base_url, mock_responses):
        """Should sign with the merchant id the caller set."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )

        client.transactions.register(
            RegisterRequest(amount=1000, session_id="order-1", merchant_id=777, pos_id=778, currency="EUR")
        )

        form = _form(httpx_mock.get_requests()[0])
        assert form["merchantId"] == "777"
        assert form["posId"] == "778"
        assert form["sign"] == compute_register_signature("order-1", 777, 1000, "EUR", "test-crc")

    def test_optional_fields(self, client, httpx_mock, base_url, mock_responses):
        """Should append optional fields only when set."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )

        client.transactions.register(
            RegisterRequest(amount=1000, session_id="order-1", time_limit=15, wait_for_result=True)
        )

        form = _form(httpx_mock.get_requests()[0])
        assert form["timeLimit"] == "15"
        assert form["waitForResult"] == "true"
        assert "channel" not in form
        assert "transferLabel" not in form

    def test_zero_amount_is_sdk_validation_error(self, client):
        """Should raise the SDK ValidationError for amount zero."""
        with pytest.raises(ValidationError) as exc_info:
            client.transactions.register(RegisterRequest(amount=0, session_id="order-1"))
        assert exc_info.value.field == "amount"

    def test_negative_amount_rejected_by_model(self):
        """Should refuse a negative amount at construction."""
        with pytest.raises(PydanticValidationError):
            RegisterRequest(amount=-5)

    def test_float_amount_rejected_by_model(self):
        with pytest.raises(PydanticValidationError):
            RegisterRequest(amount=10.0)

    def test_missing_crc_key_raises_configuration_error(self, process_settings, httpx_mock):
        """Should not send anything without a CRC key."""
        site = SiteSettings(merchant_id=1, report_key="k", use_sandbox_fallbacks=False)

        with Przelewy24Client(site_settings=site, settings=process_settings) as client:
            with pytest.raises(ConfigurationError) as exc_info:
                client.transactions.register(RegisterRequest(amount=1000))

        assert exc_info.value.missing == ["crc_key"]
        assert exc_info.value.operation == "register"
        assert httpx_mock.get_requests() == []

    def test_sandbox_crc_used_without_configuration(self, process_settings, httpx_mock, base_url, mock_responses):
        """Should sign with the sandbox CRC key while fallbacks are on."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/register", method="POST", json=mock_responses["register"]
        )
        site = SiteSettings(merchant_id=1)

        with Przelewy24Client(site_settings=site, settings=process_settings) as client:
            client.transactions.register(RegisterRequest(amount=1000, session_id="s"))

        form = _form(httpx_mock.get_requests()[0])
        assert form["sign"] == compute_register_signature("s", 1, 1000, "PLN", "yourSandboxCrcKey")


class TestSessionId:
    """Tests for session id generation."""

    def test_format(self):
        assert re.fullmatch(r"[0-9a-f]{32}", generate_session_id())

    def test_unique(self):
        assert len({generate_session_id() for _ in range(100)}) == 100


class TestVerify:
    """Tests for transaction verification."""

    def test_verify_transaction(self, client, httpx_mock, base_url, mock_responses):
        """Should PUT a signed JSON body."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/verify", method="PUT", json=mock_responses["verify"]
        )

        result = client.transactions.verify(VerifyRequest(session_id="order-1", order_id=311111111, amount=1000))

        assert result.data.status == "success"
        body = json.loads(httpx_mock.get_requests()[0].content)
        assert body == {
            "sessionId": "order-1",
            "orderId": 311111111,
            "amount": 1000,
            "merchantId": 12345,
            "posId": 12345,
            "currency": "PLN",
            "sign": compute_verify_signature("order-1", 311111111, 1000, "PLN", "test-crc"),
        }

    def test_verify_requires_session_id(self, client):
        """Should reject an empty session id."""
        with pytest.raises(ValidationError) as exc_info:
            client.transactions.verify(VerifyRequest(session_id="", order_id=1, amount=1000))
        assert exc_info.value.field == "session_id"

    def test_verify_requires_order_id(self, client):
        """Should reject a zero order id."""
        with pytest.raises(ValidationError) as exc_info:
            client.transactions.verify(VerifyRequest(session_id="s", order_id=0, amount=1000))
        assert exc_info.value.field == "order_id"

    def test_verify_requires_positive_amount(self, client):
        """Should reject a zero amount before signing."""
        with pytest.raises(ValidationError) as exc_info:
            client.transactions.verify(VerifyRequest(session_id="s", order_id=1, amount=0))
        assert exc_info.value.field == "amount"
        assert exc_info.value.operation == "verify"


class TestTransactionLookup:
    """Tests for transaction lookup and payment URL."""

    def test_get_by_session_id(self, client, httpx_mock, base_url, mock_responses):
        """Should return transaction details."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/by/sessionId/order-1", method="GET", json=mock_responses["transaction"]
        )

        result = client.transactions.get_by_session_id("order-1")

        assert result.data.order_id == 311111111
        assert result.data.status == 1
        assert result.response_code == 0

    def test_session_id_is_path_encoded(self, client, httpx_mock, base_url, mock_responses):
        """Should percent-encode the session id."""
        httpx_mock.add_response(
            url=f"{base_url}transaction/by/sessionId/a%2Fb%20c", method="GET", json=mock_responses["transaction"]
        )

        client.transactions.get_by_session_id("a/b c")

    def test_get_by_blank_session_id(self, client):
        with pytest.raises(ValidationError):
            client.transactions.get_by_session_id(" ")

    def test_payment_url(self, client):
        """Should build the payer redirect URL on the API host."""
        url = client.transactions.payment_url("D35CD73C0E-37C7B5-059083-E4F5E6EF91")
        assert url == "https://sandbox.przelewy24.pl/trnRequest/D35CD73C0E-37C7B5-059083-E4F5E6EF91"
