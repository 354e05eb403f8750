"""Builder do callback compatível com o webhook Twilio (mensagem recebida).

Todos os campos são strings, inclusive os numéricos, como no contrato Twilio.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field

from api.normalizers.whatsapp import (
    LocationBody,
    count_media,
    extract_message_text,
    resolve_body,
    to_plain_number,
    to_protocol_address,
)
from app.constants.whatsapp import TWILIO_NUM_SEGMENTS, TWILIO_SMS_STATUS_RECEIVED

from ._base import CallbackPayload

if TYPE_CHECKING:
    from app.protocols.models import MessageEvent

_OPTIONAL_FIELDS = {
    "group_name": "GroupName",
    "from_group": "FromGroup",
    "latitude": "Latitude",
    "longitude": "Longitude",
    "address": "Address",
    "media_content_type": "MediaContentType",
}


class TwilioMessage(CallbackPayload):
    """Payload no formato do webhook Twilio/WhatsApp."""

    omit_when_empty: ClassVar[frozenset[str]] = frozenset(
        {*_OPTIONAL_FIELDS, *_OPTIONAL_FIELDS.values()}
    )

    wa_id: str = Field(alias="WaId")
    profile_name: str = Field(default="", alias="ProfileName")
    sms_message_sid: str = Field(alias="SmsMessageSid")
    num_media: str = Field(default="0", alias="NumMedia")
    sms_sid: str = Field(alias="SmsSid")
    sms_status: str = Field(default=TWILIO_SMS_STATUS_RECEIVED, alias="SmsStatus")
    body: str = Field(default="", alias="Body")
    to: str = Field(default="", alias="To")
    num_segments: str = Field(default=TWILIO_NUM_SEGMENTS, alias="NumSegments")
    message_sid: str = Field(alias="MessageSid")
    account_sid: str = Field(default="", alias="AccountSid")
    from_: str = Field(alias="From")
    group_name: str = Field(default="", alias="GroupName")
    from_group: bool = Field(default=False, alias="FromGroup")
    latitude: str = Field(default="", alias="Latitude")
    longitude: str = Field(default="", alias="Longitude")
    address: str = Field(default="", alias="Address")
    media_content_type: str = Field(default="", alias="MediaContentType")


def build_twilio_payload(
    event: MessageEvent,
    *,
    own_number: str = "",
    account_sid: str = "",
    group_name: str = "",
) -> TwilioMessage | None:
    """Monta o payload Twilio a partir de um evento recebido.

    Args:
        event: Evento de mensagem recebida
        own_number: Número do device próprio (pode ser vazio)
        account_sid: AccountSid configurado
        group_name: Nome do grupo já resolvido (usado só em eventos de grupo)

    Returns:
        TwilioMessage, ou None se não há número de remetente (skip)
    """
    info = event.info
    sender_number = to_plain_number(info.sender) or to_plain_number(info.chat)
    if not sender_number:
        return None

    message_id = str(info.id)
    fields: dict[str, object] = {
        "wa_id": sender_number,
        "profile_name": info.push_name,
        "sms_message_sid": message_id,
        "sms_sid": message_id,
        "message_sid": message_id,
        "body": extract_message_text(event),
        "to": to_protocol_address(own_number),
        "from_": to_protocol_address(sender_number),
        "account_sid": account_sid,
    }

    if info.is_group:
        fields["from_group"] = True
        fields["group_name"] = group_name

    # Mídia tem precedência sobre localização: com ambas, só a mídia sai
    body = resolve_body(event.message)
    if isinstance(body, LocationBody):
        fields["latitude"] = f"{body.latitude:.6f}"
        fields["longitude"] = f"{body.longitude:.6f}"
        fields["address"] = body.name or body.address

    media_count, mime = count_media(body)
    if media_count > 0:
        fields["num_media"] = str(media_count)
        if mime:
            fields["media_content_type"] = mime

    return TwilioMessage(**fields)
