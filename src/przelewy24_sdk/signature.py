"""Request signing for the Przelewy24 API.

The provider authenticates registration and verification payloads with a
``sign`` field: the lowercase hex SHA-384 digest of a compact JSON object
whose keys appear in a fixed order, for example::

    {"sessionId":"abc123","merchantId":12345,"amount":1000,"currency":"PLN","crc":"test"}

Key order and the absence of whitespace are part of the contract. Strings
are quoted and integers are written bare. A single byte of difference
yields a different digest, which the provider rejects.

This module does no I/O and keeps no state.
"""
from __future__ import annotations

import hashlib
import hmac
import json
from typing import Iterable, Mapping, Tuple, Union

SignatureValue = Union[str, int]

REGISTER_FIELDS = ("sessionId", "merchantId", "amount", "currency", "crc")
VERIFY_FIELDS = ("sessionId", "orderId", "amount", "currency", "crc")
NOTIFICATION_FIELDS = (
    "merchantId",
    "posId",
    "sessionId",
    "amount",
    "originAmount",
    "currency",
    "orderId",
    "methodId",
    "statement",
    "crc",
)


def _encode_value(key: str, value: SignatureValue) -> str:
    # bool is an int subclass; it would serialize as True/False
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"{key} must be str or int, got {type(value).__name__}")
    if isinstance(value, int):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def canonical_json(fields: Iterable[Tuple[str, SignatureValue]]) -> str:
    """Serialize ``(key, value)`` pairs in the given order without whitespace."""
    body = ",".join(f'"{key}":{_encode_value(key, value)}' for key, value in fields)
    return "{" + body + "}"


def sha384_hex(payload: str) -> str:
    return hashlib.sha384(payload.encode("utf-8")).hexdigest()


def register_payload(
    session_id: str,
    merchant_id: int,
    amount: int,
    currency: str,
    crc_key: str,
) -> str:
    """Canonical string hashed for ``transaction/register``."""
    return canonical_json(
        zip(REGISTER_FIELDS, (session_id, merchant_id, amount, currency, crc_key))
    )


def verify_payload(
    session_id: str,
    order_id: int,
    amount: int,
    currency: str,
    crc_key: str,
) -> str:
    """Canonical string hashed for ``transaction/verify``."""
    return canonical_json(
        zip(VERIFY_FIELDS, (session_id, order_id, amount, currency, crc_key))
    )


def compute_register_signature(
    session_id: str,
    merchant_id: int,
    amount: int,
    currency: str,
    crc_key: str,
) -> str:
    return sha384_hex(register_payload(session_id, merchant_id, amount, currency, crc_key))


def compute_verify_signature(
    session_id: str,
    order_id: int,
    amount: int,
    currency: str,
    crc_key: str,
) -> str:
    return sha384_hex(verify_payload(session_id, order_id, amount, currency, crc_key))


def compute_notification_signature(fields: Mapping[str, SignatureValue], crc_key: str) -> str:
    """Signature the provider attaches to its status notification.

    ``fields`` holds the notification's camelCase keys; ``sign`` and any
    extra keys are ignored.

    Raises:
        KeyError: if a signed field is missing
    """
    values = [(key, fields[key]) for key in NOTIFICATION_FIELDS[:-1]]
    values.append(("crc", crc_key))
    return sha384_hex(canonical_json(values))


def verify_notification_signature(fields: Mapping[str, SignatureValue], crc_key: str) -> bool:
    """Check a status notification's ``sign`` in constant time."""
    presented = fields.get("sign")
    if not isinstance(presented, str) or not presented:
        return False
    try:
        expected = compute_notification_signature(fields, crc_key)
    except (KeyError, TypeError):
        return False
    return hmac.compare_digest(expected, presented.lower())
