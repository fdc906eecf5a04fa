"""
Przelewy24 Python SDK

Clients for the Przelewy24 REST API: transaction registration and
verification, refunds, card and BLIK charges, and reporting.

Example usage:
    ```python
    from przelewy24_sdk import Przelewy24Client, RegisterRequest, SiteSettings

    site = SiteSettings(merchant_id=12345, crc_key="...", report_key="...")

    with Przelewy24Client(site_settings=site) as client:
        registered = client.transactions.register(
            RegisterRequest(amount=1000, description="Order #1", email="buyer@example.com")
        )
        url = client.transactions.payment_url(registered.data.token)
    ```

Every call resolves settings afresh, sends exactly one HTTP request and
never retries. Timeouts are explicit: a client-wide default plus an
optional per-call override.
"""
from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import (
    EffectiveSettings,
    Przelewy24Settings,
    SandboxDefaults,
    SettingsResolver,
    SiteSettingsSource,
)
from .models.base import P24Model
from .models.errors import (
    DeserializationError,
    ProviderConnectionError,
    ProviderError,
    RequestTimeoutError,
)
from .models.transaction import TestAccessResponse
from .resources.blik import AsyncBlikResource, BlikResource
from .resources.cards import AsyncCardsResource, CardsResource
from .resources.payment_methods import AsyncPaymentMethodsResource, PaymentMethodsResource
from .resources.refunds import AsyncRefundsResource, RefundsResource
from .resources.reports import AsyncReportsResource, ReportsResource
from .resources.transactions import AsyncTransactionsResource, TransactionsResource

logger = logging.getLogger(__name__)

SDK_VERSION = "0.1.0"
USER_AGENT = f"przelewy24-sdk-python/{SDK_VERSION}"

M = TypeVar("M", bound=P24Model)

_REDACTED_KEYS = frozenset({"cardNumber", "cvv", "crc", "sign"})


@dataclass(frozen=True)
class TimeoutConfig:
    """Per-phase request timeouts in seconds."""

    connect: float = 10.0
    read: float = 30.0
    write: float = 30.0
    pool: float = 10.0

    @classmethod
    def from_value(cls, value: Union[float, int, "TimeoutConfig"]) -> "TimeoutConfig":
        if isinstance(value, TimeoutConfig):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"timeout must be seconds or a TimeoutConfig, got {value!r}")
        seconds = float(value)
        return cls(connect=seconds, read=seconds, write=seconds, pool=seconds)

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(connect=self.connect, read=self.read, write=self.write, pool=self.pool)


def basic_auth_header(pos_id: str, key: str) -> str:
    """``Authorization`` value for ``pos_id:key``."""
    token = base64.b64encode(f"{pos_id}:{key}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _mask_authorization(value: Optional[str]) -> str:
    if not value:
        return "<missing>"
    scheme, _, param = value.partition(" ")
    masked = param[:8] + "..." if len(param) > 8 else "<redacted>"
    return f"{scheme} {masked}"


def _redact(payload: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if payload is None:
        return None
    return {k: ("***" if k in _REDACTED_KEYS else v) for k, v in payload.items()}


class _BaseClient:
    """Settings, request building and response mapping shared by both clients."""

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        site_settings: SiteSettingsSource = None,
        settings: Optional[Przelewy24Settings] = None,
        sandbox: Optional[SandboxDefaults] = None,
        account: Optional[str] = None,
        resolver: Optional[SettingsResolver] = None,
        timeout: Union[float, TimeoutConfig] = DEFAULT_TIMEOUT,
    ) -> None:
        self._resolver = resolver or SettingsResolver(
            site_settings=site_settings,
            process_settings=settings,
            sandbox=sandbox,
        )
        self._account = account
        self._timeout = TimeoutConfig.from_value(timeout)

    def _resolve_settings(self) -> EffectiveSettings:
        return self._resolver.resolve(self._account)

    def _build_request(
        self,
        method: str,
        path: str,
        operation: str,
        settings: EffectiveSettings,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
    ) -> Dict[str, Any]:
        credentials = settings.require_auth(operation)
        headers = {
            "Authorization": basic_auth_header(credentials.pos_id, credentials.key),
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        url = settings.base_url + path.lstrip("/")
        effective_timeout = TimeoutConfig.from_value(timeout) if timeout is not None else self._timeout

        logger.info("Sending request to Przelewy24: %s %s", method, url)
        logger.info("Request Authorization: %s", _mask_authorization(headers["Authorization"]))
        if json is not None or data is not None:
            logger.debug("Request body: %s", _redact(json if json is not None else data))

        kwargs: Dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": headers,
            "timeout": effective_timeout.to_httpx(),
        }
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if json is not None:
            kwargs["json"] = json
        if data is not None:
            kwargs["data"] = data
        return kwargs

    def _check_response(self, response: httpx.Response, operation: str) -> str:
        body = response.text
        logger.info("Received response from Przelewy24: %s", response.status_code)
        if not response.is_success:
            logger.warning("Przelewy24 error response for %s: %s", operation, body)
            raise ProviderError.from_response(response.status_code, body, operation)
        return body

    @staticmethod
    def _parse(body: str, model: Type[M], operation: str) -> M:
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise DeserializationError(
                f"Response is not valid JSON: {e}", body=body, operation=operation
            ) from e
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            raise DeserializationError(
                f"Unexpected response shape for {model.__name__}: {e.error_count()} error(s)",
                body=body,
                operation=operation,
            ) from e

    @staticmethod
    def _transport_error(exc: httpx.HTTPError, operation: str) -> Exception:
        if isinstance(exc, httpx.TimeoutException):
            return RequestTimeoutError(f"Request timed out: {exc}", operation=operation)
        return ProviderConnectionError(f"Connection failed: {exc}", operation=operation)


class Przelewy24Client(_BaseClient):
    """
    Blocking Przelewy24 API client.

    Resources:
    - transactions: register, verify and look up transactions
    - refunds: request refunds and read refund details
    - payment_methods: list available payment methods
    - cards: card info, recurring charges and direct card payments
    - blik: BLIK code and alias charges, alias lookup
    - reports: transaction history and settlement batches

    Args:
        site_settings: site-level settings object, dict or callable
        settings: process configuration (defaults to ``load_settings()``)
        sandbox: sandbox fallback values
        account: named account to resolve
        resolver: a prepared ``SettingsResolver``; overrides the above
        timeout: seconds or ``TimeoutConfig`` (default: 30)
        http_client: optional preconfigured ``httpx.Client``
    """

    def __init__(
        self,
        site_settings: SiteSettingsSource = None,
        settings: Optional[Przelewy24Settings] = None,
        sandbox: Optional[SandboxDefaults] = None,
        account: Optional[str] = None,
        resolver: Optional[SettingsResolver] = None,
        timeout: Union[float, TimeoutConfig] = _BaseClient.DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(site_settings, settings, sandbox, account, resolver, timeout)
        self._client: Optional[httpx.Client] = http_client
        self._owns_client = http_client is None

        self.transactions = TransactionsResource(self)
        self.refunds = RefundsResource(self)
        self.payment_methods = PaymentMethodsResource(self)
        self.cards = CardsResource(self)
        self.blik = BlikResource(self)
        self.reports = ReportsResource(self)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self._timeout.to_httpx())
            self._owns_client = True
        return self._client

    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        model: Type[M],
        settings: Optional[EffectiveSettings] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
    ) -> M:
        """Send one request and map the JSON response onto ``model``."""
        settings = settings or self._resolve_settings()
        kwargs = self._build_request(method, path, operation, settings, params, json, data, timeout)
        try:
            response = self._get_client().request(**kwargs)
        except httpx.HTTPError as e:
            logger.warning("Przelewy24 %s failed: %s", operation, e)
            raise self._transport_error(e, operation) from e
        body = self._check_response(response, operation)
        return self._parse(body, model, operation)

    def test_access(self, timeout: Optional[Union[float, TimeoutConfig]] = None) -> TestAccessResponse:
        """Check that the configured POS id and key are accepted."""
        return self._request("GET", "testAccess", "test_access", TestAccessResponse, timeout=timeout)

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "Przelewy24Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncPrzelewy24Client(_BaseClient):
    """
    Async Przelewy24 API client.

    Same resources and arguments as ``Przelewy24Client``; every operation
    is a coroutine.

    Example:
        ```python
        async with AsyncPrzelewy24Client(site_settings=site) as client:
            details = await client.transactions.get_by_session_id("order-1")
        ```
    """

    def __init__(
        self,
        site_settings: SiteSettingsSource = None,
        settings: Optional[Przelewy24Settings] = None,
        sandbox: Optional[SandboxDefaults] = None,
        account: Optional[str] = None,
        resolver: Optional[SettingsResolver] = None,
        timeout: Union[float, TimeoutConfig] = _BaseClient.DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(site_settings, settings, sandbox, account, resolver, timeout)
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

        self.transactions = AsyncTransactionsResource(self)
        self.refunds = AsyncRefundsResource(self)
        self.payment_methods = AsyncPaymentMethodsResource(self)
        self.cards = AsyncCardsResource(self)
        self.blik = AsyncBlikResource(self)
        self.reports = AsyncReportsResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout.to_httpx())
            self._owns_client = True
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        model: Type[M],
        settings: Optional[EffectiveSettings] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
    ) -> M:
        """Send one request and map the JSON response onto ``model``."""
        settings = settings or self._resolve_settings()
        kwargs = self._build_request(method, path, operation, settings, params, json, data, timeout)
        client = await self._get_client()
        try:
            response = await client.request(**kwargs)
        except httpx.HTTPError as e:
            logger.warning("Przelewy24 %s failed: %s", operation, e)
            raise self._transport_error(e, operation) from e
        body = self._check_response(response, operation)
        return self._parse(body, model, operation)

    async def test_access(self, timeout: Optional[Union[float, TimeoutConfig]] = None) -> TestAccessResponse:
        """Check that the configured POS id and key are accepted."""
        return await self._request("GET", "testAccess", "test_access", TestAccessResponse, timeout=timeout)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncPrzelewy24Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
