"""Observabilidade — correlation_id e métricas via logs estruturados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_translation_outcome
"""

from app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_translation_outcome

__all__ = [
    "get_correlation_id",
    "record_latency",
    "record_translation_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]
