"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pydantic import BaseModel


class CallbackDispatcherProtocol(Protocol):
    """Contrato mínimo para POST de payload em endpoint de callback."""

    async def dispatch(
        self,
        *,
        endpoint: str,
        path: str,
        payload: BaseModel,
        timeout_seconds: float,
        callback: str,
        capture_body: bool = False,
    ) -> int: ...
