"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
"""

from app.services.group_name_resolver import GroupNameResolver

__all__ = [
    "GroupNameResolver",
]
