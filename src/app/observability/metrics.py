"""Métricas registradas como logs estruturados.

Agregáveis depois pelo backend de logs (Cloud Logging, BigQuery etc).

Métricas suportadas:
- Latência por componente/operação
- Resultado de tradução por provedor (success, rate_limited, ...)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "google_translate", "line_reply")
        operation: Nome da operação (ex: "call", "reply_message")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )


def record_translation_outcome(provider: str | None, outcome: str) -> None:
    """Registra counter de resultado de tradução.

    Args:
        provider: Provedor usado, ou None quando nenhum estava configurado
        outcome: Tipo do resultado (success, rate_limited, unavailable, provider_error)
    """
    logger.info(
        "metric_translation_outcome",
        extra={
            "metric_type": "counter",
            "provider": provider or "none",
            "outcome": outcome,
        },
    )
