"""Builder do callback de device (mensagem enviada por este gateway)."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field

from api.normalizers.whatsapp import extract_message_text, to_recipient_number
from app.constants.whatsapp import DEFAULT_COMPANY_NID

from ._base import CallbackPayload

if TYPE_CHECKING:
    from app.protocols.models import MessageEvent


class DeviceCallbackPayload(CallbackPayload):
    """Schema `{did, number, name, text, companyNid}` do callback de device."""

    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"company_nid", "companyNid"})

    device_id: str = Field(alias="did")
    number: str
    name: str = ""
    text: str = ""
    company_nid: int = Field(default=DEFAULT_COMPANY_NID, alias="companyNid")


def resolve_company_nid(configured: int) -> int:
    """Tenant do payload: valor configurado se positivo, senão o default."""
    return configured if configured > 0 else DEFAULT_COMPANY_NID


def build_device_payload(
    event: MessageEvent,
    device_id: str,
    *,
    group_name: str = "",
    company_nid: int = 0,
) -> DeviceCallbackPayload:
    """Monta o payload do callback de device.

    Em grupos, `name` vira o nome do grupo (se resolvido) e o texto recebe
    o push name do remetente em negrito.

    Args:
        event: Evento de mensagem enviado pelo próprio device
        device_id: User-part do JID do device próprio
        group_name: Nome do grupo já resolvido (vazio fora de grupos)
        company_nid: Tenant configurado (<= 0 usa o default)

    Returns:
        DeviceCallbackPayload pronto para despacho
    """
    info = event.info
    text = extract_message_text(event)
    name = info.push_name

    if info.is_group:
        if group_name:
            name = group_name
        if info.push_name:
            text = f"*{info.push_name}*\n\n{text}"

    return DeviceCallbackPayload(
        device_id=device_id,
        number=to_recipient_number(info.chat),
        name=name,
        text=text,
        company_nid=resolve_company_nid(company_nid),
    )
