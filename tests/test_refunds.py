"""
Tests for Refunds resource
"""
import json

import pytest

from przelewy24_sdk import RefundRequest, ValidationError


class TestRefunds:
    """Tests for refund operations."""

    def test_create_refund(self, client, httpx_mock, base_url, mock_responses):
        """Should post the refund as JSON."""
        httpx_mock.add_response(url=f"{base_url}transaction/refund", method="POST", json=mock_responses["refund"])

        result = client.refunds.create(
            RefundRequest(order_id=311111111, session_id="order-1", amount=500)
        )

        assert result.data.status == "accepted"
        assert result.data.refunds_uuid == "94c1fb0b-f40f-4201-b2a0-f4166839d06c"
        body = json.loads(httpx_mock.get_requests()[0].content)
        assert body == {"orderId": 311111111, "sessionId": "order-1", "amount": 500, "currency": "PLN"}

    def test_create_refund_with_uuid(self, client, httpx_mock, base_url, mock_responses):
        """Should pass the caller's refunds UUID through."""
        httpx_mock.add_response(url=f"{base_url}transaction/refund", method="POST", json=mock_responses["refund"])

        client.refunds.create(
            RefundRequest(order_id=1, session_id="order-1", amount=500, refunds_uuid="my-uuid")
        )

        assert json.loads(httpx_mock.get_requests()[0].content)["refundsUuid"] == "my-uuid"

    def test_create_requires_session_id(self, client):
        """Should reject a blank session id."""
        with pytest.raises(ValidationError) as exc_info:
            client.refunds.create(RefundRequest(order_id=1, session_id=" ", amount=500))
        assert exc_info.value.field == "session_id"
        assert exc_info.value.operation == "refund"

    def test_create_requires_positive_amount(self, client):
        with pytest.raises(ValidationError):
            client.refunds.create(RefundRequest(order_id=1, session_id="s", amount=0))

    def test_get_by_order_id(self, client, httpx_mock, base_url, mock_responses):
        """Should return refund details."""
        httpx_mock.add_response(
            url=f"{base_url}refund/by/orderId/311111111", method="GET", json=mock_responses["refund_details"]
        )

        result = client.refunds.get_by_order_id(311111111)

        assert result.data.amount == 500
        assert result.data.status == "completed"
        assert result.data.created_at == "2026-10-01 12:00:00"

    def test_get_by_invalid_order_id(self, client):
        with pytest.raises(ValidationError):
            client.refunds.get_by_order_id(0)
