"""Reports resource for Przelewy24 SDK."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.report import BatchDetailsResponse, ReportHistoryResponse
from .base import AsyncBaseResource, SyncBaseResource, Timeout, require_positive, require_text


def _history_params(date_from: str, date_to: str, type: Optional[str]) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "dateFrom": require_text(date_from, "date_from", "report_history"),
        "dateTo": require_text(date_to, "date_to", "report_history"),
    }
    if type and type.strip():
        params["type"] = type.strip()
    return params


class AsyncReportsResource(AsyncBaseResource):
    """Async resource for reporting."""

    async def history(
        self,
        date_from: str,
        date_to: str,
        type: Optional[str] = None,
        timeout: Timeout = None,
    ) -> ReportHistoryResponse:
        """Transaction, refund and batch history for a date range.

        Args:
            date_from: Start date in the provider's format
            date_to: End date in the provider's format
            type: Optional entry type filter
            timeout: Optional request timeout
        """
        params = _history_params(date_from, date_to, type)
        return await self._get("report/history", "report_history", ReportHistoryResponse, params=params, timeout=timeout)

    async def batch_details(self, batch_id: int, timeout: Timeout = None) -> BatchDetailsResponse:
        """Transactions and refunds settled in one batch."""
        require_positive(batch_id, "batch_id", "batch_details")
        return await self._get(f"report/batch/details/{batch_id}", "batch_details", BatchDetailsResponse, timeout=timeout)


class ReportsResource(SyncBaseResource):
    """Sync resource for reporting."""

    def history(
        self,
        date_from: str,
        date_to: str,
        type: Optional[str] = None,
        timeout: Timeout = None,
    ) -> ReportHistoryResponse:
        """Transaction, refund and batch history for a date range.

        Args:
            date_from: Start date in the provider's format
            date_to: End date in the provider's format
            type: Optional entry type filter
            timeout: Optional request timeout
        """
        params = _history_params(date_from, date_to, type)
        return self._get("report/history", "report_history", ReportHistoryResponse, params=params, timeout=timeout)

    def batch_details(self, batch_id: int, timeout: Timeout = None) -> BatchDetailsResponse:
        """Transactions and refunds settled in one batch."""
        require_positive(batch_id, "batch_id", "batch_details")
        return self._get(f"report/batch/details/{batch_id}", "batch_details", BatchDetailsResponse, timeout=timeout)


__all__ = [
    "AsyncReportsResource",
    "ReportsResource",
]
