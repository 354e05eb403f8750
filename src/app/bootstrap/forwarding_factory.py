"""Factory de wiring do encaminhamento (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.forwarding import create_callback_http_client
from app.coordinators.forwarding.handler import MessageForwardingCoordinator
from app.services.group_name_resolver import GroupNameResolver
from app.use_cases.forwarding import (
    ForwardDeviceMessageUseCase,
    ForwardTwilioCallbackUseCase,
)
from config.settings import get_forwarding_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.chat_storage import ChatStorageProtocol
    from app.protocols.device_identity import DeviceIdentityProtocol
    from config.settings import ForwardingSettings


def create_forwarding_coordinator(
    http_client: httpx.AsyncClient,
    device_identity: DeviceIdentityProtocol,
    chat_storage: ChatStorageProtocol | None = None,
    settings: ForwardingSettings | None = None,
) -> MessageForwardingCoordinator:
    """Cria o coordinator com os dois callbacks e dependências injetadas.

    Args:
        http_client: Cliente httpx compartilhado (dono: o chamador)
        device_identity: Fonte do JID do device próprio
        chat_storage: Lookup de chats para nomes de grupo (opcional)
        settings: ForwardingSettings opcional. Se None, carrega do ambiente.
    """
    forwarding = settings or get_forwarding_settings()
    dispatcher = create_callback_http_client(http_client, forwarding)
    group_names = GroupNameResolver(chat_storage)

    return MessageForwardingCoordinator(
        [
            ForwardDeviceMessageUseCase(dispatcher, device_identity, group_names, forwarding),
            ForwardTwilioCallbackUseCase(dispatcher, device_identity, group_names, forwarding),
        ]
    )
