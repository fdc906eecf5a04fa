"""Status notification sent by Przelewy24 to ``urlStatus``."""
from __future__ import annotations

from .base import P24Model
from ..signature import verify_notification_signature


class NotificationPayload(P24Model):
    """Payment status notification.

    The notification only says a payment happened; the transaction still
    has to be confirmed with ``transactions.verify``.
    """

    merchant_id: int
    pos_id: int
    session_id: str
    amount: int
    origin_amount: int
    currency: str
    order_id: int
    method_id: int
    statement: str
    sign: str

    def is_authentic(self, crc_key: str) -> bool:
        """Check ``sign`` against the merchant's CRC key."""
        return verify_notification_signature(self.to_dict(), crc_key)
