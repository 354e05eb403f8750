"""Gates de elegibilidade por callback.

Cada gate retorna o motivo do skip, ou None se o evento deve ser encaminhado.
Skip não é erro.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.normalizers.whatsapp import is_control_message

if TYPE_CHECKING:
    from app.protocols.models import MessageEvent

SKIP_MISSING_EVENT = "missing_event"
SKIP_NOT_FROM_ME = "not_from_me"
SKIP_FROM_ME = "from_me"
SKIP_CONTROL_MESSAGE = "control_message"
SKIP_ENDPOINT_NOT_CONFIGURED = "endpoint_not_configured"
SKIP_GROUP_MESSAGE = "group_message"
SKIP_MISSING_SENDER = "missing_sender_number"


def device_skip_reason(event: MessageEvent | None, endpoint: str) -> str | None:
    """Gate do callback de device: só mensagens enviadas por este gateway.

    Ordem: evento/mensagem ausente ou não enviado por mim, mensagem de
    controle, endpoint em branco.
    """
    if event is None or event.message is None:
        return SKIP_MISSING_EVENT
    if not event.info.is_from_me:
        return SKIP_NOT_FROM_ME
    if is_control_message(event.message):
        return SKIP_CONTROL_MESSAGE
    if not endpoint.strip():
        return SKIP_ENDPOINT_NOT_CONFIGURED
    return None


def twilio_skip_reason(
    event: MessageEvent | None,
    endpoint: str,
    *,
    allow_groups: bool = False,
) -> str | None:
    """Gate do callback Twilio: só mensagens recebidas.

    Grupos ficam de fora, salvo com `allow_groups`.
    """
    if not endpoint.strip():
        return SKIP_ENDPOINT_NOT_CONFIGURED
    if event is None or event.message is None:
        return SKIP_MISSING_EVENT
    if event.info.is_from_me:
        return SKIP_FROM_ME
    if event.info.is_group and not allow_groups:
        return SKIP_GROUP_MESSAGE
    return None
