"""
Transactions resource for Przelewy24 SDK.

Standard payment flow:
    1. ``register`` the transaction and receive a token
    2. redirect the payer to ``payment_url(token)``
    3. the provider posts a status notification to ``url_status``
    4. ``verify`` the transaction; unverified payments are not settled
"""
from __future__ import annotations

import logging
import uuid
from urllib.parse import quote, urlsplit

from ..config import EffectiveSettings
from ..models.errors import ConfigurationError
from ..models.transaction import (
    RegisterRequest,
    RegisterResponse,
    TransactionDetails,
    VerifyRequest,
    VerifyResponse,
)
from ..signature import compute_register_signature, compute_verify_signature
from .base import AsyncBaseResource, SyncBaseResource, Timeout, path_segment, require_positive, require_text

logger = logging.getLogger(__name__)


def generate_session_id() -> str:
    """Random 32-character hex session id."""
    return uuid.uuid4().hex


def sign_register_request(request: RegisterRequest, settings: EffectiveSettings) -> RegisterRequest:
    """Fill defaults from settings and attach the register signature.

    The signature covers the values that are actually sent: a generated
    session id and substituted merchant/POS ids included.
    """
    require_positive(request.amount, "amount", "register")
    credentials = settings.require_signing("register")

    session_id = request.session_id
    if not session_id.strip():
        session_id = generate_session_id()
        logger.debug("Generated Przelewy24 session id %s", session_id)

    normalized = request.model_copy(
        update={
            "session_id": session_id,
            "merchant_id": request.merchant_id or credentials.merchant_id,
            "pos_id": request.pos_id or credentials.pos_id,
        }
    )
    sign = compute_register_signature(
        normalized.session_id,
        normalized.merchant_id,
        normalized.amount,
        normalized.currency,
        credentials.crc_key,
    )
    return normalized.model_copy(update={"sign": sign})


def sign_verify_request(request: VerifyRequest, settings: EffectiveSettings) -> VerifyRequest:
    """Fill merchant/POS ids from settings and attach the verify signature."""
    require_text(request.session_id, "session_id", "verify")
    require_positive(request.order_id, "order_id", "verify")
    require_positive(request.amount, "amount", "verify")

    merchant_id, pos_id = request.merchant_id, request.pos_id
    if merchant_id and pos_id:
        if not settings.crc_key:
            raise ConfigurationError(
                "Przelewy24 crc_key not configured", missing=["crc_key"], operation="verify"
            )
        crc_key = settings.crc_key
    else:
        credentials = settings.require_signing("verify")
        merchant_id = merchant_id or credentials.merchant_id
        pos_id = pos_id or credentials.pos_id
        crc_key = credentials.crc_key

    sign = compute_verify_signature(
        request.session_id, request.order_id, request.amount, request.currency, crc_key
    )
    return request.model_copy(update={"merchant_id": merchant_id, "pos_id": pos_id, "sign": sign})


def build_payment_url(settings: EffectiveSettings, token: str) -> str:
    """Payer redirect URL, ``https://<host>/trnRequest/<token>``."""
    parts = urlsplit(settings.base_url)
    return f"{parts.scheme}://{parts.netloc}/trnRequest/{quote(token, safe='')}"


class AsyncTransactionsResource(AsyncBaseResource):
    """Async resource for transaction operations.

    Example:
        ```python
        async with AsyncPrzelewy24Client(site_settings=site) as client:
            registered = await client.transactions.register(RegisterRequest(amount=1000))
            redirect_to = client.transactions.payment_url(registered.data.token)
        ```
    """

    async def register(self, request: RegisterRequest, timeout: Timeout = None) -> RegisterResponse:
        """Register a transaction.

        Args:
            request: transaction data; an empty session id is generated
            timeout: Optional request timeout

        Returns:
            RegisterResponse carrying the payment token
        """
        settings = self._client._resolve_settings()
        signed = sign_register_request(request, settings)
        return await self._post_form(
            "transaction/register", "register", RegisterResponse, signed.to_form(),
            settings=settings, timeout=timeout,
        )

    async def verify(self, request: VerifyRequest, timeout: Timeout = None) -> VerifyResponse:
        """Verify a transaction after its status notification arrived."""
        settings = self._client._resolve_settings()
        signed = sign_verify_request(request, settings)
        return await self._put(
            "transaction/verify", "verify", VerifyResponse, signed.to_dict(),
            settings=settings, timeout=timeout,
        )

    async def get_by_session_id(self, session_id: str, timeout: Timeout = None) -> TransactionDetails:
        """Get transaction details by session id."""
        session_id = require_text(session_id, "session_id", "transaction_by_session")
        return await self._get(
            f"transaction/by/sessionId/{path_segment(session_id)}",
            "transaction_by_session",
            TransactionDetails,
            timeout=timeout,
        )

    def payment_url(self, token: str) -> str:
        """URL to redirect the payer to after registration."""
        token = require_text(token, "token", "payment_url")
        return build_payment_url(self._client._resolve_settings(), token)


class TransactionsResource(SyncBaseResource):
    """Sync resource for transaction operations.

    Example:
        ```python
        with Przelewy24Client(site_settings=site) as client:
            registered = client.transactions.register(RegisterRequest(amount=1000))
            # ... payer pays, notification arrives ...
            client.transactions.verify(
                VerifyRequest(session_id=..., order_id=..., amount=1000)
            )
        ```
    """

    def register(self, request: RegisterRequest, timeout: Timeout = None) -> RegisterResponse:
        """Register a transaction.

        Args:
            request: transaction data; an empty session id is generated
            timeout: Optional request timeout

        Returns:
            RegisterResponse carrying the payment token
        """
        settings = self._client._resolve_settings()
        signed = sign_register_request(request, settings)
        return self._post_form(
            "transaction/register", "register", RegisterResponse, signed.to_form(),
            settings=settings, timeout=timeout,
        )

    def verify(self, request: VerifyRequest, timeout: Timeout = None) -> VerifyResponse:
        """Verify a transaction after its status notification arrived."""
        settings = self._client._resolve_settings()
        signed = sign_verify_request(request, settings)
        return self._put(
            "transaction/verify", "verify", VerifyResponse, signed.to_dict(),
            settings=settings, timeout=timeout,
        )

    def get_by_session_id(self, session_id: str, timeout: Timeout = None) -> TransactionDetails:
        """Get transaction details by session id."""
        session_id = require_text(session_id, "session_id", "transaction_by_session")
        return self._get(
            f"transaction/by/sessionId/{path_segment(session_id)}",
            "transaction_by_session",
            TransactionDetails,
            timeout=timeout,
        )

    def payment_url(self, token: str) -> str:
        """URL to redirect the payer to after registration."""
        token = require_text(token, "token", "payment_url")
        return build_payment_url(self._client._resolve_settings(), token)


__all__ = [
    "AsyncTransactionsResource",
    "TransactionsResource",
    "generate_session_id",
    "sign_register_request",
    "sign_verify_request",
    "build_payment_url",
]
