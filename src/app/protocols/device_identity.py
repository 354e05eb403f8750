"""Protocolo de identidade do device conectado ao transporte."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import JID


class DeviceIdentityProtocol(Protocol):
    """Fornece o JID do device próprio (None se ainda não pareado)."""

    def own_jid(self) -> JID | None: ...
