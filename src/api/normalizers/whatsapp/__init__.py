"""Normalizer WhatsApp para encaminhamento de eventos.

Responsabilidades:
- Canonicalizar JIDs em números simples e endereços `whatsapp:+`
- Reduzir a mensagem decodificada a uma variante de corpo
- Extrair texto (dois níveis) e classificar mídia
"""

from ._extraction_helpers import (
    extract_message_text,
    extract_text_from_event,
    extract_text_from_message,
)
from .body import (
    AudioBody,
    ControlBody,
    DocumentBody,
    ImageBody,
    LocationBody,
    MessageBody,
    OtherBody,
    StickerBody,
    TextBody,
    VideoBody,
    is_control_message,
    resolve_body,
    unwrap_message,
)
from .identity import to_plain_number, to_protocol_address, to_recipient_number
from .media import count_media

__all__ = [
    "AudioBody",
    "ControlBody",
    "DocumentBody",
    "ImageBody",
    "LocationBody",
    "MessageBody",
    "OtherBody",
    "StickerBody",
    "TextBody",
    "VideoBody",
    "count_media",
    "extract_message_text",
    "extract_text_from_event",
    "extract_text_from_message",
    "is_control_message",
    "resolve_body",
    "to_plain_number",
    "to_protocol_address",
    "to_recipient_number",
    "unwrap_message",
]
