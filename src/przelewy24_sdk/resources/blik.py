"""
BLIK resource for Przelewy24 SDK.

A charge by code uses the 6-digit code from the payer's banking app. A
charge by alias is a one-click payment with an alias registered earlier,
which can be looked up by the payer's email.
"""
from __future__ import annotations

import re

from ..models.blik import (
    BlikAliasesResponse,
    BlikChargeByAliasRequest,
    BlikChargeByCodeRequest,
    BlikChargeResponse,
)
from ..models.errors import ValidationError
from .base import AsyncBaseResource, SyncBaseResource, Timeout, path_segment, require_positive, require_text

BLIK_CODE_PATTERN = re.compile(r"^\d{6}$")


def _validate_code(request: BlikChargeByCodeRequest) -> None:
    require_text(request.session_id, "session_id", "blik_charge_by_code")
    require_positive(request.amount, "amount", "blik_charge_by_code")
    if not BLIK_CODE_PATTERN.match(request.blik_code):
        raise ValidationError(
            "blik_code must be exactly 6 digits", field="blik_code", operation="blik_charge_by_code"
        )


def _validate_alias(request: BlikChargeByAliasRequest) -> None:
    require_text(request.session_id, "session_id", "blik_charge_by_alias")
    require_positive(request.amount, "amount", "blik_charge_by_alias")
    require_text(request.blik_alias_value, "blik_alias_value", "blik_charge_by_alias")


def _aliases_path(email: str, operation: str, custom: bool) -> str:
    email = require_text(email, "email", operation)
    path = f"paymentMethod/blik/getAliasesByEmail/{path_segment(email)}"
    return f"{path}/custom" if custom else path


class AsyncBlikResource(AsyncBaseResource):
    """Async resource for BLIK operations."""

    async def charge_by_code(self, request: BlikChargeByCodeRequest, timeout: Timeout = None) -> BlikChargeResponse:
        """Charge with a 6-digit BLIK code."""
        _validate_code(request)
        return await self._post(
            "paymentMethod/blik/chargeByCode", "blik_charge_by_code", BlikChargeResponse,
            request.to_dict(), timeout=timeout,
        )

    async def charge_by_alias(self, request: BlikChargeByAliasRequest, timeout: Timeout = None) -> BlikChargeResponse:
        """Charge with a registered BLIK alias."""
        _validate_alias(request)
        return await self._post(
            "paymentMethod/blik/chargeByAlias", "blik_charge_by_alias", BlikChargeResponse,
            request.to_dict(), timeout=timeout,
        )

    async def aliases_by_email(self, email: str, timeout: Timeout = None) -> BlikAliasesResponse:
        """List standard BLIK aliases registered for an email."""
        path = _aliases_path(email, "blik_aliases", custom=False)
        return await self._get(path, "blik_aliases", BlikAliasesResponse, timeout=timeout)

    async def custom_aliases_by_email(self, email: str, timeout: Timeout = None) -> BlikAliasesResponse:
        """List custom BLIK aliases registered for an email."""
        path = _aliases_path(email, "blik_custom_aliases", custom=True)
        return await self._get(path, "blik_custom_aliases", BlikAliasesResponse, timeout=timeout)


class BlikResource(SyncBaseResource):
    """Sync resource for BLIK operations."""

    def charge_by_code(self, request: BlikChargeByCodeRequest, timeout: Timeout = None) -> BlikChargeResponse:
        """Charge with a 6-digit BLIK code."""
        _validate_code(request)
        return self._post(
            "paymentMethod/blik/chargeByCode", "blik_charge_by_code", BlikChargeResponse,
            request.to_dict(), timeout=timeout,
        )

    def charge_by_alias(self, request: BlikChargeByAliasRequest, timeout: Timeout = None) -> BlikChargeResponse:
        """Charge with a registered BLIK alias."""
        _validate_alias(request)
        return self._post(
            "paymentMethod/blik/chargeByAlias", "blik_charge_by_alias", BlikChargeResponse,
            request.to_dict(), timeout=timeout,
        )

    def aliases_by_email(self, email: str, timeout: Timeout = None) -> BlikAliasesResponse:
        """List standard BLIK aliases registered for an email."""
        path = _aliases_path(email, "blik_aliases", custom=False)
        return self._get(path, "blik_aliases", BlikAliasesResponse, timeout=timeout)

    def custom_aliases_by_email(self, email: str, timeout: Timeout = None) -> BlikAliasesResponse:
        """List custom BLIK aliases registered for an email."""
        path = _aliases_path(email, "blik_custom_aliases", custom=True)
        return self._get(path, "blik_custom_aliases", BlikAliasesResponse, timeout=timeout)


__all__ = [
    "AsyncBlikResource",
    "BlikResource",
]
