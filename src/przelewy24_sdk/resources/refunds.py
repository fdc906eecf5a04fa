"""
Refunds resource for Przelewy24 SDK.

This module provides both async and sync interfaces for refund operations.
Refunds are only accepted for verified transactions.
"""
from __future__ import annotations

from ..models.refund import RefundDetails, RefundRequest, RefundResponse
from .base import AsyncBaseResource, SyncBaseResource, Timeout, require_positive, require_text


def _validate(request: RefundRequest) -> None:
    require_positive(request.order_id, "order_id", "refund")
    require_text(request.session_id, "session_id", "refund")
    require_positive(request.amount, "amount", "refund")


class AsyncRefundsResource(AsyncBaseResource):
    """Async resource for refund operations."""

    async def create(self, request: RefundRequest, timeout: Timeout = None) -> RefundResponse:
        """Request a full or partial refund.

        Args:
            request: order, session and amount to return
            timeout: Optional request timeout

        Returns:
            RefundResponse with the refund UUID and status
        """
        _validate(request)
        return await self._post("transaction/refund", "refund", RefundResponse, request.to_dict(), timeout=timeout)

    async def get_by_order_id(self, order_id: int, timeout: Timeout = None) -> RefundDetails:
        """Get refund details for an order."""
        require_positive(order_id, "order_id", "refund_by_order")
        return await self._get(f"refund/by/orderId/{order_id}", "refund_by_order", RefundDetails, timeout=timeout)


class RefundsResource(SyncBaseResource):
    """Sync resource for refund operations.

    Example:
        ```python
        with Przelewy24Client(site_settings=site) as client:
            refund = client.refunds.create(
                RefundRequest(order_id=311111111, session_id="order-1", amount=500)
            )
            details = client.refunds.get_by_order_id(311111111)
        ```
    """

    def create(self, request: RefundRequest, timeout: Timeout = None) -> RefundResponse:
        """Request a full or partial refund.

        Args:
            request: order, session and amount to return
            timeout: Optional request timeout

        Returns:
            RefundResponse with the refund UUID and status
        """
        _validate(request)
        return self._post("transaction/refund", "refund", RefundResponse, request.to_dict(), timeout=timeout)

    def get_by_order_id(self, order_id: int, timeout: Timeout = None) -> RefundDetails:
        """Get refund details for an order."""
        require_positive(order_id, "order_id", "refund_by_order")
        return self._get(f"refund/by/orderId/{order_id}", "refund_by_order", RefundDetails, timeout=timeout)


__all__ = [
    "AsyncRefundsResource",
    "RefundsResource",
]
