"""Serviços de aplicação.

Unidades de decisão (sem IO direto). Implementações de IO ficam em app/infra/.
"""

from app.services.translation_router import (
    TranslationRouter,
    classify_result,
    select_provider_name,
)

__all__ = [
    "TranslationRouter",
    "classify_result",
    "select_provider_name",
]
