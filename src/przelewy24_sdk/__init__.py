"""
Przelewy24 Python SDK

Client for the Przelewy24 online payment REST API.
"""

from .client import AsyncPrzelewy24Client, Przelewy24Client, TimeoutConfig
from .config import (
    AccountSettings,
    EffectiveSettings,
    Przelewy24Settings,
    SandboxDefaults,
    SettingsResolver,
    SiteSettings,
    load_settings,
    resolve_settings,
)
from .models.errors import (
    ConfigurationError,
    DeserializationError,
    ErrorCode,
    ProviderConnectionError,
    ProviderError,
    Przelewy24Error,
    RequestTimeoutError,
    ValidationError,
)
from .models.transaction import (
    RegisterRequest,
    RegisterResponse,
    TestAccessResponse,
    TransactionDetails,
    VerifyRequest,
    VerifyResponse,
)
from .models.refund import RefundDetails, RefundRequest, RefundResponse
from .models.payment_method import PaymentMethod, PaymentMethodsResponse
from .models.card import (
    CardChargeResponse,
    CardChargeWith3dsResponse,
    CardInfoResponse,
    CardPayRequest,
    CardPayResponse,
)
from .models.blik import (
    BlikAliasesResponse,
    BlikChargeByAliasRequest,
    BlikChargeByCodeRequest,
    BlikChargeResponse,
)
from .models.report import BatchDetailsResponse, ReportHistoryResponse
from .models.notification import NotificationPayload
from .signature import compute_register_signature, compute_verify_signature

__version__ = "0.1.0"

__all__ = [
    # Clients
    "Przelewy24Client",
    "AsyncPrzelewy24Client",
    "TimeoutConfig",
    # Settings
    "AccountSettings",
    "SiteSettings",
    "Przelewy24Settings",
    "SandboxDefaults",
    "SettingsResolver",
    "EffectiveSettings",
    "load_settings",
    "resolve_settings",
    # Signatures
    "compute_register_signature",
    "compute_verify_signature",
    # Errors
    "ErrorCode",
    "Przelewy24Error",
    "ConfigurationError",
    "ValidationError",
    "ProviderError",
    "DeserializationError",
    "RequestTimeoutError",
    "ProviderConnectionError",
    # Transaction models
    "RegisterRequest",
    "RegisterResponse",
    "VerifyRequest",
    "VerifyResponse",
    "TransactionDetails",
    "TestAccessResponse",
    # Refund models
    "RefundRequest",
    "RefundResponse",
    "RefundDetails",
    # Payment method models
    "PaymentMethod",
    "PaymentMethodsResponse",
    # Card models
    "CardInfoResponse",
    "CardChargeResponse",
    "CardChargeWith3dsResponse",
    "CardPayRequest",
    "CardPayResponse",
    # BLIK models
    "BlikChargeByCodeRequest",
    "BlikChargeByAliasRequest",
    "BlikChargeResponse",
    "BlikAliasesResponse",
    # Report models
    "ReportHistoryResponse",
    "BatchDetailsResponse",
    # Notifications
    "NotificationPayload",
]
