"""Extração de texto de eventos de mensagem em dois níveis.

1. Nível de evento: texto de conveniência do transporte ou do corpo resolvido.
2. Nível bruto: campos da WAMessage, descendo em wrappers.

Alguns tipos expõem texto só no evento; outros só na estrutura bruta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .body import DocumentBody, ImageBody, TextBody, VideoBody, resolve_body

if TYPE_CHECKING:
    from app.protocols.models import MessageEvent, WAMessage

_MAX_WRAPPER_DEPTH = 4


def extract_text_from_event(event: MessageEvent) -> str:
    """Texto de alto nível: conveniência do evento, depois corpo resolvido."""
    if event.text.strip():
        return event.text
    match resolve_body(event.message):
        case TextBody(text=text):
            return text
        case ImageBody(caption=caption) | VideoBody(caption=caption) | DocumentBody(caption=caption):
            return caption
        case _:
            return ""


def extract_text_from_message(message: WAMessage | None, _depth: int = 0) -> str:
    """Texto de baixo nível direto dos campos da mensagem decodificada."""
    if message is None or _depth > _MAX_WRAPPER_DEPTH:
        return ""
    if message.conversation:
        return message.conversation
    if message.extended_text is not None and message.extended_text.text:
        return message.extended_text.text
    for media in (message.image, message.video, message.document):
        if media is not None and media.caption:
            return media.caption
    for inner in (message.ephemeral, message.view_once, message.edited):
        text = extract_text_from_message(inner, _depth + 1)
        if text:
            return text
    return ""


def extract_message_text(event: MessageEvent) -> str:
    """Texto do evento: nível de evento, com fallback para o nível bruto."""
    text = extract_text_from_event(event)
    if not text:
        text = extract_text_from_message(event.message)
    return text
