"""Payment method models for Przelewy24 SDK."""
from __future__ import annotations

from typing import Optional

from .base import P24Model, P24Response


class PaymentMethod(P24Model):
    """A payment method available to the merchant."""

    id: int
    name: Optional[str] = None
    img_url: Optional[str] = None
    status: bool = False
    mobile: bool = False


class PaymentMethodsResponse(P24Response):
    data: list[PaymentMethod]
