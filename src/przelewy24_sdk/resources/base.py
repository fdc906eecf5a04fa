"""
Base resource classes for Przelewy24 SDK.

This module provides the foundation for all API resource classes,
supporting both synchronous and asynchronous clients.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import quote

from ..models.base import P24Model
from ..models.errors import ValidationError

if TYPE_CHECKING:
    from ..client import AsyncPrzelewy24Client, Przelewy24Client, TimeoutConfig
    from ..config import EffectiveSettings

M = TypeVar("M", bound=P24Model)

Timeout = Optional[Union[float, "TimeoutConfig"]]


def require_text(value: Optional[str], field: str, operation: str) -> str:
    """Reject empty or whitespace-only required strings before any I/O."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", field=field, operation=operation)
    return str(value).strip()


def require_positive(value: Optional[int], field: str, operation: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field} must be a positive integer", field=field, operation=operation)
    return value


def path_segment(value: Union[str, int]) -> str:
    """Percent-encode a value used as a single URL path segment."""
    return quote(str(value), safe="@")


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncPrzelewy24Client") -> None:
        self._client = client

    async def _get(
        self,
        path: str,
        operation: str,
        model: Type[M],
        params: Optional[Dict[str, Any]] = None,
        timeout: Timeout = None,
    ) -> M:
        return await self._client._request(
            "GET", path, operation, model, params=params, timeout=timeout
        )

    async def _post(
        self,
        path: str,
        operation: str,
        model: Type[M],
        data: Optional[Dict[str, Any]] = None,
        settings: Optional["EffectiveSettings"] = None,
        timeout: Timeout = None,
    ) -> M:
        """Make a POST request with a JSON body."""
        return await self._client._request(
            "POST", path, operation, model, settings=settings, json=data, timeout=timeout
        )

    async def _post_form(
        self,
        path: str,
        operation: str,
        model: Type[M],
        form: Dict[str, str],
        settings: Optional["EffectiveSettings"] = None,
        timeout: Timeout = None,
    ) -> M:
        """Make a POST request with a form-urlencoded body."""
        return await self._client._request(
            "POST", path, operation, model, settings=settings, data=form, timeout=timeout
        )

    async def _put(
        self,
        path: str,
        operation: str,
        model: Type[M],
        data: Optional[Dict[str, Any]] = None,
        settings: Optional["EffectiveSettings"] = None,
        timeout: Timeout = None,
    ) -> M:
        return await self._client._request(
            "PUT", path, operation, model, settings=settings, json=data, timeout=timeout
        )


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "Przelewy24Client") -> None:
        self._client = client

    def _get(
        self,
        path: str,
        operation: str,
        model: Type[M],
        params: Optional[Dict[str, Any]] = None,
        timeout: Timeout = None,
    ) -> M:
        return self._client._request(
            "GET", path, operation, model, params=params, timeout=timeout
        )

    def _post(
        self,
        path: str,
        operation: str,
        model: Type[M],
        data: Optional[Dict[str, Any]] = None,
        settings: Optional["EffectiveSettings"] = None,
        timeout: Timeout = None,
    ) -> M:
        """Make a POST request with a JSON body."""
        return self._client._request(
            "POST", path, operation, model, settings=settings, json=data, timeout=timeout
        )

    def _post_form(
        self,
        path: str,
        operation: str,
        model: Type[M],
        form: Dict[str, str],
        settings: Optional["EffectiveSettings"] = None,
        timeout: Timeout = None,
    ) -> M:
        """Make a POST request with a form-urlencoded body."""
        return self._client._request(
            "POST", path, operation, model, settings=settings, data=form, timeout=timeout
        )

    def _put(
        self,
        path: str,
        operation: str,
        model: Type[M],
        data: Optional[Dict[str, Any]] = None,
        settings: Optional["EffectiveSettings"] = None,
        timeout: Timeout = None,
    ) -> M:
        return self._client._request(
            "PUT", path, operation, model, settings=settings, json=data, timeout=timeout
        )


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
    "require_text",
    "require_positive",
    "path_segment",
]
