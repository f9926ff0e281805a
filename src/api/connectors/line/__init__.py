"""Conector do LINE Messaging API: webhook inbound e reply outbound."""

from .http_client import LineMessagingClient
from .line_errors import LineApiError, LineApiErrorInfo, parse_line_error
from .signature import SIGNATURE_HEADER, SignatureResult, verify_line_signature

__all__ = [
    "SIGNATURE_HEADER",
    "LineApiError",
    "LineApiErrorInfo",
    "LineMessagingClient",
    "SignatureResult",
    "parse_line_error",
    "verify_line_signature",
]
