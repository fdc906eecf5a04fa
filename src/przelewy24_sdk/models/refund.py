"""Refund models for Przelewy24 SDK."""
from __future__ import annotations

from typing import Optional

from .base import MinorAmount, P24Model, P24Response


class RefundRequest(P24Model):
    """Request to refund (part of) a verified transaction."""

    order_id: int
    session_id: str
    amount: MinorAmount
    currency: str = "PLN"
    refunds_uuid: Optional[str] = None


class RefundData(P24Model):
    refunds_uuid: Optional[str] = None
    status: Optional[str] = None


class RefundResponse(P24Response):
    data: RefundData


class RefundDetailsData(P24Model):
    order_id: Optional[int] = None
    session_id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    refunds_uuid: Optional[str] = None
    created_at: Optional[str] = None


class RefundDetails(P24Response):
    data: RefundDetailsData
