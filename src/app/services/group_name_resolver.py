"""Resolução do nome legível de um grupo via storage de chats.

Nome persistido não vazio tem prioridade; senão user-part do JID do chat;
senão o JID completo. Falhas de storage nunca propagam.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.chat_storage import ChatStorageProtocol
    from app.protocols.models import JID

logger = logging.getLogger(__name__)


class GroupNameResolver:
    """Resolve nomes de grupo com fallback para o identificador."""

    __slots__ = ("_storage",)

    def __init__(self, storage: ChatStorageProtocol | None = None) -> None:
        self._storage = storage

    def resolve_sync(self, chat: JID) -> str:
        """Resolve o nome do grupo com leitura bloqueante no storage."""
        stored = self._lookup(str(chat))
        if stored:
            return stored
        if chat.user:
            return chat.user
        return str(chat)

    async def resolve(self, chat: JID) -> str:
        """Resolve em thread para não bloquear despachos concorrentes."""
        return await asyncio.to_thread(self.resolve_sync, chat)

    def _lookup(self, chat_jid: str) -> str:
        if self._storage is None:
            return ""
        try:
            record = self._storage.get_chat(chat_jid)
        except Exception as exc:
            # Storage indisponível degrada para o fallback
            logger.debug(
                "group_name_lookup_failed",
                extra={"error_type": type(exc).__name__},
            )
            return ""
        if record is None:
            return ""
        return record.name
