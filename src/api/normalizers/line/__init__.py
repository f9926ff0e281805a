"""Normalizer LINE: decide quais eventos são acionáveis."""

from .extractor import extract_actionable_message

__all__ = ["extract_actionable_message"]
