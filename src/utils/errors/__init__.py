"""Exceções utilitárias compartilhadas."""

from .exceptions import IntegrationError, ReplyDeliveryError

__all__ = [
    "IntegrationError",
    "ReplyDeliveryError",
]
