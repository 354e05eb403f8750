"""Modelos do evento de mensagem entregue pelo transporte WhatsApp.

Estruturas somente leitura: o encaminhamento nunca muta o evento.
`WAMessage` espelha a mensagem decodificada (sub-mensagens opcionais);
entrada malformada pode trazer mais de uma sub-mensagem preenchida.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - usado em runtime nos dataclasses

from app.constants.whatsapp import GROUP_SERVER


@dataclass(frozen=True, slots=True)
class JID:
    """Identificador de transporte (`user@server`, `user:device@server`)."""

    user: str = ""
    server: str = ""
    device: int = 0

    def __str__(self) -> str:
        if not self.user and not self.server:
            return ""
        if not self.server:
            return self.user
        if self.device > 0:
            return f"{self.user}:{self.device}@{self.server}"
        return f"{self.user}@{self.server}"

    @property
    def is_empty(self) -> bool:
        return not self.user and not self.server

    @property
    def is_group(self) -> bool:
        return self.server == GROUP_SERVER

    @classmethod
    def parse(cls, raw: str) -> JID:
        """Lê JID no formato `user[:device]@server`; string vazia vira JID vazio."""
        raw = (raw or "").strip()
        if not raw:
            return cls()
        if "@" not in raw:
            return cls(server=raw)
        user, server = raw.split("@", 1)
        device = 0
        if ":" in user:
            user, _, device_raw = user.partition(":")
            device = int(device_raw) if device_raw.isdigit() else 0
        return cls(user=user, server=server, device=device)


@dataclass(frozen=True, slots=True)
class MessageInfo:
    """Metadados do evento (direção, identificadores, push name)."""

    id: str
    chat: JID
    sender: JID
    is_from_me: bool = False
    is_group: bool = False
    push_name: str = ""
    timestamp: datetime | None = None


@dataclass(frozen=True, slots=True)
class ExtendedTextMessage:
    text: str = ""


@dataclass(frozen=True, slots=True)
class MediaMessage:
    """Anexo de mídia (imagem, vídeo, documento, áudio ou sticker)."""

    mimetype: str = ""
    caption: str = ""
    file_name: str = ""
    url: str = ""


@dataclass(frozen=True, slots=True)
class LocationMessage:
    degrees_latitude: float = 0.0
    degrees_longitude: float = 0.0
    name: str = ""
    address: str = ""


@dataclass(frozen=True, slots=True)
class ProtocolMessage:
    """Mensagem de controle (edit, revoke, ephemeral setting, etc.)."""

    type: str = ""


@dataclass(frozen=True, slots=True)
class ReactionMessage:
    text: str = ""
    target_message_id: str = ""


@dataclass(frozen=True, slots=True)
class WAMessage:
    """Mensagem decodificada pelo transporte.

    `ephemeral`, `view_once` e `edited` embrulham outra WAMessage.
    """

    conversation: str = ""
    extended_text: ExtendedTextMessage | None = None
    image: MediaMessage | None = None
    video: MediaMessage | None = None
    document: MediaMessage | None = None
    audio: MediaMessage | None = None
    sticker: MediaMessage | None = None
    location: LocationMessage | None = None
    protocol: ProtocolMessage | None = None
    reaction: ReactionMessage | None = None
    ephemeral: WAMessage | None = None
    view_once: WAMessage | None = None
    edited: WAMessage | None = None


@dataclass(frozen=True, slots=True)
class MessageEvent:
    """Evento de entrega de mensagem.

    Attributes:
        info: Metadados do evento
        message: Mensagem decodificada (None se ausente)
        text: Texto de conveniência exposto pelo transporte (pode ser vazio)
    """

    info: MessageInfo
    message: WAMessage | None = None
    text: str = ""
