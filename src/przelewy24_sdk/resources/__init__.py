"""
Resources for the Przelewy24 SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .transactions import AsyncTransactionsResource, TransactionsResource, generate_session_id
from .refunds import AsyncRefundsResource, RefundsResource
from .payment_methods import AsyncPaymentMethodsResource, PaymentMethodsResource
from .cards import AsyncCardsResource, CardsResource
from .blik import AsyncBlikResource, BlikResource
from .reports import AsyncReportsResource, ReportsResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    # Transactions
    "TransactionsResource",
    "AsyncTransactionsResource",
    "generate_session_id",
    # Refunds
    "RefundsResource",
    "AsyncRefundsResource",
    # Payment methods
    "PaymentMethodsResource",
    "AsyncPaymentMethodsResource",
    # Cards
    "CardsResource",
    "AsyncCardsResource",
    # BLIK
    "BlikResource",
    "AsyncBlikResource",
    # Reports
    "ReportsResource",
    "AsyncReportsResource",
]
