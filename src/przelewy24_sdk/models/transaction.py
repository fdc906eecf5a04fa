"""Transaction models for Przelewy24 SDK."""
from __future__ import annotations

from typing import Optional, Union

from .base import MinorAmount, P24Model, P24Response


class RegisterRequest(P24Model):
    """Request to register a transaction.

    ``merchant_id`` and ``pos_id`` left at zero are filled from the
    resolved settings, and an empty ``session_id`` is replaced with a
    generated one before the request is signed.
    """

    amount: MinorAmount
    merchant_id: int = 0
    pos_id: int = 0
    currency: str = "PLN"
    description: str = ""
    email: str = ""
    country: str = "PL"
    language: str = "pl"
    url_return: str = ""
    url_status: str = ""
    session_id: str = ""
    sign: Optional[str] = None
    time_limit: Optional[int] = None
    channel: Optional[int] = None
    wait_for_result: Optional[bool] = None
    regulation_accept: Optional[bool] = None
    transfer_label: Optional[str] = None

    def to_form(self) -> dict[str, str]:
        """Form fields in the order the provider documents them."""
        form = {
            "merchantId": str(self.merchant_id),
            "posId": str(self.pos_id),
            "amount": str(self.amount),
            "currency": self.currency,
            "description": self.description,
            "email": self.email,
            "country": self.country,
            "language": self.language,
            "urlReturn": self.url_return,
            "urlStatus": self.url_status,
            "sessionId": self.session_id,
            "sign": self.sign or "",
        }
        optional = {
            "timeLimit": self.time_limit,
            "channel": self.channel,
            "waitForResult": self.wait_for_result,
            "regulationAccept": self.regulation_accept,
            "transferLabel": self.transfer_label,
        }
        for key, value in optional.items():
            if value is None:
                continue
            if isinstance(value, bool):
                form[key] = "true" if value else "false"
            else:
                form[key] = str(value)
        return form


class RegisterData(P24Model):
    token: Optional[str] = None


class RegisterResponse(P24Response):
    """Response from registering a transaction.

    The token is used to build the payment redirect URL.
    """

    data: RegisterData


class VerifyRequest(P24Model):
    """Request to verify a transaction after the status notification."""

    session_id: str
    order_id: int
    amount: MinorAmount
    merchant_id: int = 0
    pos_id: int = 0
    currency: str = "PLN"
    sign: Optional[str] = None


class VerifyData(P24Model):
    status: Optional[str] = None


class VerifyResponse(P24Response):
    data: VerifyData


class TransactionData(P24Model):
    """Transaction as reported by the provider."""

    order_id: Optional[int] = None
    session_id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    email: Optional[str] = None
    description: Optional[str] = None
    method_id: Optional[int] = None
    statement: Optional[str] = None
    status: Optional[Union[int, str]] = None


class TransactionDetails(P24Response):
    data: TransactionData


class TestAccessResponse(P24Response):
    """Response from the credentials check endpoint."""

    __test__ = False

    data: bool
    error: Optional[str] = None
