"""Payment methods resource for Przelewy24 SDK."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.payment_method import PaymentMethodsResponse
from .base import AsyncBaseResource, SyncBaseResource, Timeout, path_segment, require_text


def _params(amount: Optional[int], currency: Optional[str]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if amount is not None:
        params["amount"] = amount
    if currency and currency.strip():
        params["currency"] = currency
    return params


class AsyncPaymentMethodsResource(AsyncBaseResource):
    """Async resource for listing payment methods."""

    async def list(
        self,
        lang: str = "pl",
        amount: Optional[int] = None,
        currency: Optional[str] = "PLN",
        timeout: Timeout = None,
    ) -> PaymentMethodsResponse:
        """List payment methods available for an amount and currency.

        Args:
            lang: Language of method names (e.g. ``pl``, ``en``)
            amount: Optional amount in minor units; filters by limits
            currency: Optional currency code
            timeout: Optional request timeout
        """
        lang = require_text(lang, "lang", "payment_methods")
        return await self._get(
            f"payment/methods/{path_segment(lang)}",
            "payment_methods",
            PaymentMethodsResponse,
            params=_params(amount, currency),
            timeout=timeout,
        )


class PaymentMethodsResource(SyncBaseResource):
    """Sync resource for listing payment methods."""

    def list(
        self,
        lang: str = "pl",
        amount: Optional[int] = None,
        currency: Optional[str] = "PLN",
        timeout: Timeout = None,
    ) -> PaymentMethodsResponse:
        """List payment methods available for an amount and currency.

        Args:
            lang: Language of method names (e.g. ``pl``, ``en``)
            amount: Optional amount in minor units; filters by limits
            currency: Optional currency code
            timeout: Optional request timeout
        """
        lang = require_text(lang, "lang", "payment_methods")
        return self._get(
            f"payment/methods/{path_segment(lang)}",
            "payment_methods",
            PaymentMethodsResponse,
            params=_params(amount, currency),
            timeout=timeout,
        )


__all__ = [
    "AsyncPaymentMethodsResource",
    "PaymentMethodsResource",
]
