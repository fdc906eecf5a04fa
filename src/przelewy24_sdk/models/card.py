"""Card payment models for Przelewy24 SDK."""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import MinorAmount, P24Model, P24Response


class CardInfoData(P24Model):
    ref_id: Optional[str] = None
    mask: Optional[str] = None
    bin: Optional[str] = None


class CardInfoResponse(P24Response):
    """Masked card details recorded for a paid order."""

    data: CardInfoData


class CardChargeData(P24Model):
    order_id: Optional[int] = None
    status: Optional[str] = None


class CardChargeResponse(P24Response):
    """Response from a recurring charge without 3DS."""

    data: CardChargeData


class CardChargeWith3dsData(P24Model):
    redirect_url: Optional[str] = None
    order_id: Optional[int] = None


class CardChargeWith3dsResponse(P24Response):
    """Response from a 3DS charge; the payer must follow ``redirect_url``."""

    data: CardChargeWith3dsData


class CardPayRequest(P24Model):
    """Direct card payment with raw card data (requires PCI DSS)."""

    card_number: str = Field(repr=False)
    card_date: str = Field(repr=False)
    cvv: str = Field(repr=False)
    session_id: str
    amount: MinorAmount
    merchant_id: int
    pos_id: int
    currency: str = "PLN"
    description: str = ""
    email: str = ""
    url_return: str = ""
    url_status: str = ""
    country: Optional[str] = None
    language: Optional[str] = None
    sign: Optional[str] = None


class CardPayData(P24Model):
    order_id: Optional[int] = None
    status: Optional[str] = None


class CardPayResponse(P24Response):
    data: CardPayData
