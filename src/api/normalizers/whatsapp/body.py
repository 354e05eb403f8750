"""Corpo de mensagem como tipo soma.

`resolve_body` reduz a WAMessage decodificada a exatamente uma variante,
com precedência fixa: control, image, video, document, audio, sticker,
location, text, other. Wrappers (ephemeral, view_once, edited) são
desembrulhados antes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.models import WAMessage


@dataclass(frozen=True, slots=True)
class TextBody:
    text: str


@dataclass(frozen=True, slots=True)
class LocationBody:
    latitude: float
    longitude: float
    name: str = ""
    address: str = ""


@dataclass(frozen=True, slots=True)
class ImageBody:
    mimetype: str = ""
    caption: str = ""


@dataclass(frozen=True, slots=True)
class VideoBody:
    mimetype: str = ""
    caption: str = ""


@dataclass(frozen=True, slots=True)
class DocumentBody:
    mimetype: str = ""
    caption: str = ""
    file_name: str = ""


@dataclass(frozen=True, slots=True)
class AudioBody:
    mimetype: str = ""


@dataclass(frozen=True, slots=True)
class StickerBody:
    mimetype: str = ""


@dataclass(frozen=True, slots=True)
class ControlBody:
    """Sinal de protocolo sem conteúdo (edit, revoke, etc.)."""

    control_type: str = ""


@dataclass(frozen=True, slots=True)
class OtherBody:
    """Mensagem sem conteúdo encaminhável (reação, enquete, etc.)."""


MessageBody = (
    TextBody
    | LocationBody
    | ImageBody
    | VideoBody
    | DocumentBody
    | AudioBody
    | StickerBody
    | ControlBody
    | OtherBody
)

# Profundidade máxima de wrappers aninhados
_MAX_UNWRAP_DEPTH = 4


def unwrap_message(message: WAMessage) -> WAMessage:
    """Desembrulha ephemeral/view_once/edited até a mensagem de conteúdo."""
    current = message
    for _ in range(_MAX_UNWRAP_DEPTH):
        inner = current.ephemeral or current.view_once or current.edited
        if inner is None:
            break
        current = inner
    return current


def is_control_message(message: WAMessage | None) -> bool:
    """True se a mensagem é sinal de protocolo (edit, revoke, etc.)."""
    return message is not None and message.protocol is not None


def resolve_body(message: WAMessage | None) -> MessageBody:
    """Reduz a mensagem decodificada a uma única variante de corpo."""
    if message is None:
        return OtherBody()
    if message.protocol is not None:
        return ControlBody(control_type=message.protocol.type)

    msg = unwrap_message(message)
    if msg.protocol is not None:
        return ControlBody(control_type=msg.protocol.type)
    if msg.image is not None:
        return ImageBody(mimetype=msg.image.mimetype, caption=msg.image.caption)
    if msg.video is not None:
        return VideoBody(mimetype=msg.video.mimetype, caption=msg.video.caption)
    if msg.document is not None:
        return DocumentBody(
            mimetype=msg.document.mimetype,
            caption=msg.document.caption,
            file_name=msg.document.file_name,
        )
    if msg.audio is not None:
        return AudioBody(mimetype=msg.audio.mimetype)
    if msg.sticker is not None:
        return StickerBody(mimetype=msg.sticker.mimetype)
    if msg.location is not None:
        return LocationBody(
            latitude=msg.location.degrees_latitude,
            longitude=msg.location.degrees_longitude,
            name=msg.location.name,
            address=msg.location.address,
        )
    if msg.conversation:
        return TextBody(text=msg.conversation)
    if msg.extended_text is not None:
        return TextBody(text=msg.extended_text.text)
    return OtherBody()
