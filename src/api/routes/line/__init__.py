"""Rotas do canal LINE."""

from api.routes.line.webhook import router

__all__ = ["router"]
