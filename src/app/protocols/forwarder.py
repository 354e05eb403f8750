"""Protocolo de encaminhadores de evento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import MessageEvent
    from .request_context import RequestContext


class MessageForwarderProtocol(Protocol):
    """Encaminha um evento para um callback.

    Retorna True se enviado, False se o evento não era elegível.
    Falhas reportáveis levantam ForwardingError.
    """

    callback: str

    async def forward(
        self,
        event: MessageEvent | None,
        request_context: RequestContext | None = None,
    ) -> bool: ...
