"""Identidade do device conectado, fornecida explicitamente ao core."""

from __future__ import annotations

from dataclasses import dataclass

from app.protocols.models import JID


@dataclass(frozen=True, slots=True)
class StaticDeviceIdentity:
    """Device próprio conhecido no wiring (None enquanto não pareado)."""

    jid: JID | None = None

    @classmethod
    def from_string(cls, raw: str) -> StaticDeviceIdentity:
        jid = JID.parse(raw)
        return cls(jid=None if jid.is_empty else jid)

    def own_jid(self) -> JID | None:
        return self.jid
