"""BLIK models for Przelewy24 SDK."""
from __future__ import annotations

from typing import Optional

from pydantic import field_validator

from .base import MinorAmount, P24Model, P24Response, none_as_empty


class BlikChargeByCodeRequest(P24Model):
    """Charge with a 6-digit BLIK code typed by the payer."""

    session_id: str
    amount: MinorAmount
    blik_code: str
    merchant_id: int
    pos_id: int
    currency: str = "PLN"
    description: str = ""
    email: str = ""
    url_return: Optional[str] = None
    url_status: Optional[str] = None
    sign: Optional[str] = None


class BlikChargeByAliasRequest(P24Model):
    """One-click charge with a previously registered BLIK alias."""

    session_id: str
    amount: MinorAmount
    blik_alias_value: str
    blik_alias_label: str
    merchant_id: int
    pos_id: int
    currency: str = "PLN"
    description: str = ""
    email: str = ""
    url_return: Optional[str] = None
    url_status: Optional[str] = None
    sign: Optional[str] = None


class BlikChargeData(P24Model):
    order_id: Optional[int] = None
    status: Optional[str] = None


class BlikChargeResponse(P24Response):
    data: BlikChargeData


class BlikAlias(P24Model):
    alias_value: Optional[str] = None
    alias_label: Optional[str] = None
    type: Optional[str] = None


class BlikAliasesData(P24Model):
    aliases: list[BlikAlias] = []

    _null_aliases = field_validator("aliases", mode="before")(none_as_empty)


class BlikAliasesResponse(P24Response):
    data: BlikAliasesData
