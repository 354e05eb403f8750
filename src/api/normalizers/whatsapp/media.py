"""Classificação de mídia anexada ao corpo da mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .body import AudioBody, DocumentBody, ImageBody, StickerBody, VideoBody

if TYPE_CHECKING:
    from .body import MessageBody


def count_media(body: MessageBody) -> tuple[int, str]:
    """Retorna (quantidade, mime type) da mídia do corpo.

    No máximo um anexo por mensagem; sem mídia retorna (0, "").
    """
    match body:
        case ImageBody(mimetype=mime) | VideoBody(mimetype=mime) | DocumentBody(mimetype=mime):
            return 1, mime
        case AudioBody(mimetype=mime) | StickerBody(mimetype=mime):
            return 1, mime
        case _:
            return 0, ""
