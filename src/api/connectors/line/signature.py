"""Validação do header x-line-signature (HMAC-SHA256, base64)."""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass

SIGNATURE_HEADER = "x-line-signature"


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    error: str | None = None


def compute_line_signature(raw_body: bytes, channel_secret: str) -> str:
    digest = hmac.new(channel_secret.encode("utf-8"), raw_body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_line_signature(
    raw_body: bytes,
    signature: str | None,
    channel_secret: str | None,
) -> SignatureResult:
    """Valida a assinatura do corpo bruto contra o channel secret.

    Args:
        raw_body: Corpo bruto da requisição (antes de qualquer parse)
        signature: Valor do header x-line-signature
        channel_secret: Secret do canal

    Returns:
        SignatureResult (nunca levanta)
    """
    if not channel_secret:
        return SignatureResult(valid=False, error="missing_channel_secret")
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    # Header decodificado em latin-1 pode trazer bytes não-ASCII
    expected = compute_line_signature(raw_body, channel_secret).encode("ascii")
    if not hmac.compare_digest(expected, signature.strip().encode("utf-8")):
        return SignatureResult(valid=False, error="invalid_signature")
    return SignatureResult(valid=True)
