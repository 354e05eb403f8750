"""Normalização de identificadores de transporte em números/endereços.

Funções puras e totais: nunca levantam, retornam "" para entrada ausente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.whatsapp import WHATSAPP_ADDRESS_PREFIX

if TYPE_CHECKING:
    from app.protocols.models import JID


def to_plain_number(jid: JID | None) -> str:
    """Extrai o número (user-part) do JID, sem espaços e sem `+` inicial."""
    if jid is None:
        return ""
    return jid.user.strip().removeprefix("+")


def to_protocol_address(number: str | None) -> str:
    """Formata número como `whatsapp:+<número>` (vazio se não houver número)."""
    number = (number or "").strip().removeprefix("+")
    if not number:
        return ""
    return f"{WHATSAPP_ADDRESS_PREFIX}{number}"


def to_recipient_number(chat: JID) -> str:
    """Número do destinatário a partir do chat.

    Usa o user-part; se vazio, o prefixo antes de `@` do JID completo.
    """
    number = to_plain_number(chat)
    if number:
        return number
    return str(chat).split("@")[0]
