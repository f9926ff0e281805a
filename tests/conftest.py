"""Configuração do pytest para a ponte de tradução LINE."""

import base64
import hashlib
import hmac
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_line_settings,
    get_translation_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas; cada teste enxerga o ambiente atual."""
    get_base_settings.cache_clear()
    get_line_settings.cache_clear()
    get_translation_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_line_settings.cache_clear()
    get_translation_settings.cache_clear()


def sign_line_body(body: bytes, secret: str) -> str:
    """Assinatura x-line-signature esperada para `body`."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


@pytest.fixture
def line_signer():
    return sign_line_body
