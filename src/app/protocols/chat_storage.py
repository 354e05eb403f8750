"""Protocolo de leitura do armazenamento de chats.

Usado apenas para enriquecer nomes de grupo; falhas viram "sem nome".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ChatRecord:
    """Registro de chat persistido (subconjunto usado aqui)."""

    jid: str
    name: str = ""


class ChatStorageProtocol(Protocol):
    """Contrato mínimo de lookup de chat por JID.

    Pode levantar exceção em falha de storage; o chamador degrada.
    """

    def get_chat(self, chat_jid: str) -> ChatRecord | None: ...
