"""Stores — implementações concretas de leitura de chats.

Módulos disponíveis:
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryChatStorage

__all__ = [
    "MemoryChatStorage",
]
