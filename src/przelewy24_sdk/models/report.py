"""Reporting models for Przelewy24 SDK."""
from __future__ import annotations

from typing import Optional

from pydantic import field_validator

from .base import P24Model, P24Response, none_as_empty


class ReportItem(P24Model):
    """A transaction, refund or batch entry in the history report."""

    id: int
    type: Optional[str] = None
    date: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    status: Optional[str] = None


class ReportHistoryData(P24Model):
    items: list[ReportItem] = []

    _null_items = field_validator("items", mode="before")(none_as_empty)


class ReportHistoryResponse(P24Response):
    data: ReportHistoryData


class BatchTransaction(P24Model):
    order_id: int
    session_id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    status: Optional[str] = None


class BatchRefund(P24Model):
    order_id: int
    amount: Optional[int] = None
    currency: Optional[str] = None
    status: Optional[str] = None


class BatchDetailsData(P24Model):
    """A settlement batch: transactions and refunds paid out together."""

    batch_id: int
    date: Optional[str] = None
    transactions: list[BatchTransaction] = []
    refunds: list[BatchRefund] = []

    _null_lists = field_validator("transactions", "refunds", mode="before")(none_as_empty)


class BatchDetailsResponse(P24Response):
    data: BatchDetailsData
