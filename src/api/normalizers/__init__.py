"""Normalizers por canal — conversão de eventos externos para modelos internos.

Estrutura:
- whatsapp/: identidade (JID → número/endereço), corpo, texto e mídia
"""

from .whatsapp import (
    count_media,
    extract_message_text,
    resolve_body,
    to_plain_number,
    to_protocol_address,
)

__all__ = [
    "count_media",
    "extract_message_text",
    "resolve_body",
    "to_plain_number",
    "to_protocol_address",
]
