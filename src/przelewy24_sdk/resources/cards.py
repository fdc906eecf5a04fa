"""
Cards resource for Przelewy24 SDK.

``charge`` and ``charge_with_3ds`` take the token of a registered
transaction and charge the card remembered for it. ``pay`` sends raw card
data and is only available to PCI DSS certified merchants.
"""
from __future__ import annotations

from ..models.card import (
    CardChargeResponse,
    CardChargeWith3dsResponse,
    CardInfoResponse,
    CardPayRequest,
    CardPayResponse,
)
from .base import AsyncBaseResource, SyncBaseResource, Timeout, require_positive, require_text


def _validate_pay(request: CardPayRequest) -> None:
    require_text(request.card_number, "card_number", "card_pay")
    require_text(request.card_date, "card_date", "card_pay")
    require_text(request.cvv, "cvv", "card_pay")
    require_text(request.session_id, "session_id", "card_pay")
    require_positive(request.amount, "amount", "card_pay")


class AsyncCardsResource(AsyncBaseResource):
    """Async resource for card operations."""

    async def info(self, order_id: int, timeout: Timeout = None) -> CardInfoResponse:
        """Get masked card data used to pay an order."""
        require_positive(order_id, "order_id", "card_info")
        return await self._get(f"card/info/{order_id}", "card_info", CardInfoResponse, timeout=timeout)

    async def charge_with_3ds(self, token: str, timeout: Timeout = None) -> CardChargeWith3dsResponse:
        """Charge a card with 3DS authentication.

        Returns:
            CardChargeWith3dsResponse; redirect the payer to ``data.redirect_url``
        """
        token = require_text(token, "token", "card_charge_3ds")
        return await self._post(
            "card/chargeWith3ds", "card_charge_3ds", CardChargeWith3dsResponse, {"token": token}, timeout=timeout
        )

    async def charge(self, token: str, timeout: Timeout = None) -> CardChargeResponse:
        """Charge a card without 3DS (recurring payment)."""
        token = require_text(token, "token", "card_charge")
        return await self._post("card/charge", "card_charge", CardChargeResponse, {"token": token}, timeout=timeout)

    async def pay(self, request: CardPayRequest, timeout: Timeout = None) -> CardPayResponse:
        """Pay with raw card data."""
        _validate_pay(request)
        return await self._post("card/pay", "card_pay", CardPayResponse, request.to_dict(), timeout=timeout)


class CardsResource(SyncBaseResource):
    """Sync resource for card operations.

    Example:
        ```python
        with Przelewy24Client(site_settings=site) as client:
            registered = client.transactions.register(RegisterRequest(amount=1000))
            charged = client.cards.charge_with_3ds(registered.data.token)
            redirect_to = charged.data.redirect_url
        ```
    """

    def info(self, order_id: int, timeout: Timeout = None) -> CardInfoResponse:
        """Get masked card data used to pay an order."""
        require_positive(order_id, "order_id", "card_info")
        return self._get(f"card/info/{order_id}", "card_info", CardInfoResponse, timeout=timeout)

    def charge_with_3ds(self, token: str, timeout: Timeout = None) -> CardChargeWith3dsResponse:
        """Charge a card with 3DS authentication.

        Returns:
            CardChargeWith3dsResponse; redirect the payer to ``data.redirect_url``
        """
        token = require_text(token, "token", "card_charge_3ds")
        return self._post(
            "card/chargeWith3ds", "card_charge_3ds", CardChargeWith3dsResponse, {"token": token}, timeout=timeout
        )

    def charge(self, token: str, timeout: Timeout = None) -> CardChargeResponse:
        """Charge a card without 3DS (recurring payment)."""
        token = require_text(token, "token", "card_charge")
        return self._post("card/charge", "card_charge", CardChargeResponse, {"token": token}, timeout=timeout)

    def pay(self, request: CardPayRequest, timeout: Timeout = None) -> CardPayResponse:
        """Pay with raw card data."""
        _validate_pay(request)
        return self._post("card/pay", "card_pay", CardPayResponse, request.to_dict(), timeout=timeout)


__all__ = [
    "AsyncCardsResource",
    "CardsResource",
]
