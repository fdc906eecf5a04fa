"""Przelewy24 SDK Models."""
from .base import MinorAmount, P24Model, P24Response
from .transaction import (
    RegisterData,
    RegisterRequest,
    RegisterResponse,
    TestAccessResponse,
    TransactionData,
    TransactionDetails,
    VerifyData,
    VerifyRequest,
    VerifyResponse,
)
from .refund import RefundData, RefundDetails, RefundDetailsData, RefundRequest, RefundResponse
from .payment_method import PaymentMethod, PaymentMethodsResponse
from .card import (
    CardChargeData,
    CardChargeResponse,
    CardChargeWith3dsData,
    CardChargeWith3dsResponse,
    CardInfoData,
    CardInfoResponse,
    CardPayData,
    CardPayRequest,
    CardPayResponse,
)
from .blik import (
    BlikAlias,
    BlikAliasesData,
    BlikAliasesResponse,
    BlikChargeByAliasRequest,
    BlikChargeByCodeRequest,
    BlikChargeData,
    BlikChargeResponse,
)
from .report import (
    BatchDetailsData,
    BatchDetailsResponse,
    BatchRefund,
    BatchTransaction,
    ReportHistoryData,
    ReportHistoryResponse,
    ReportItem,
)
from .notification import NotificationPayload
from .errors import (
    ConfigurationError,
    DeserializationError,
    ErrorCode,
    ProviderConnectionError,
    ProviderError,
    Przelewy24Error,
    RequestTimeoutError,
    ValidationError,
)

__all__ = [
    "MinorAmount",
    "P24Model",
    "P24Response",
    # Transactions
    "RegisterRequest",
    "RegisterData",
    "RegisterResponse",
    "VerifyRequest",
    "VerifyData",
    "VerifyResponse",
    "TransactionData",
    "TransactionDetails",
    "TestAccessResponse",
    # Refunds
    "RefundRequest",
    "RefundData",
    "RefundResponse",
    "RefundDetailsData",
    "RefundDetails",
    # Payment methods
    "PaymentMethod",
    "PaymentMethodsResponse",
    # Cards
    "CardInfoData",
    "CardInfoResponse",
    "CardChargeData",
    "CardChargeResponse",
    "CardChargeWith3dsData",
    "CardChargeWith3dsResponse",
    "CardPayRequest",
    "CardPayData",
    "CardPayResponse",
    # BLIK
    "BlikChargeByCodeRequest",
    "BlikChargeByAliasRequest",
    "BlikChargeData",
    "BlikChargeResponse",
    "BlikAlias",
    "BlikAliasesData",
    "BlikAliasesResponse",
    # Reports
    "ReportItem",
    "ReportHistoryData",
    "ReportHistoryResponse",
    "BatchTransaction",
    "BatchRefund",
    "BatchDetailsData",
    "BatchDetailsResponse",
    # Notifications
    "NotificationPayload",
    # Errors
    "ErrorCode",
    "Przelewy24Error",
    "ConfigurationError",
    "ValidationError",
    "ProviderError",
    "DeserializationError",
    "RequestTimeoutError",
    "ProviderConnectionError",
]
