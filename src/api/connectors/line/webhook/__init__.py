"""Webhook LINE: assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_line_signature
from .receive import (
    InvalidPayloadError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "InvalidPayloadError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "parse_webhook_request",
    "verify_line_signature",
]
