"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.protocols.chat_storage import ChatRecord, ChatStorageProtocol


class MemoryChatStorage(ChatStorageProtocol):
    """Lookup de chats em memória — apenas para dev/test."""

    def __init__(self, chats: dict[str, str] | None = None) -> None:
        self._chats: dict[str, ChatRecord] = {
            jid: ChatRecord(jid=jid, name=name) for jid, name in (chats or {}).items()
        }

    def save(self, jid: str, name: str) -> None:
        """Registra (ou substitui) o nome de um chat."""
        self._chats[jid] = ChatRecord(jid=jid, name=name)

    def get_chat(self, chat_jid: str) -> ChatRecord | None:
        """Retorna o chat ou None se desconhecido."""
        return self._chats.get(chat_jid)
