"""Encaminhamento best-effort de um evento para todos os callbacks.

Executa os forwarders em paralelo, isola falhas e nunca propaga erro de
encaminhamento para o fluxo principal de mensagens. Sem PII nos logs.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.observability import bind_correlation_id
from utils.errors import CallbackProtocolError, ForwardingError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.forwarder import MessageForwarderProtocol
    from app.protocols.models import MessageEvent
    from app.protocols.request_context import RequestContext

logger = logging.getLogger(__name__)

_SENT = "sent"
_SKIPPED = "skipped"
_FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ForwardingSummary:
    """Resultado do encaminhamento de um evento (nomes de callback)."""

    sent: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
    failed: tuple[str, ...] = ()


class MessageForwardingCoordinator:
    """Distribui cada evento entre os forwarders configurados."""

    def __init__(self, forwarders: Sequence[MessageForwarderProtocol]) -> None:
        self._forwarders = tuple(forwarders)

    async def handle(
        self,
        event: MessageEvent | None,
        request_context: RequestContext | None = None,
    ) -> ForwardingSummary:
        """Encaminha o evento para todos os callbacks.

        Args:
            event: Evento entregue pelo transporte (None é ignorado)
            request_context: Contexto explícito do chamador, se houver

        Returns:
            ForwardingSummary com callbacks enviados, ignorados e com falha
        """
        message_id = event.info.id if event is not None else None
        with bind_correlation_id(message_id):
            outcomes = await asyncio.gather(
                *(self._run(forwarder, event, request_context) for forwarder in self._forwarders)
            )

        summary = ForwardingSummary(
            sent=tuple(name for name, outcome in outcomes if outcome == _SENT),
            skipped=tuple(name for name, outcome in outcomes if outcome == _SKIPPED),
            failed=tuple(name for name, outcome in outcomes if outcome == _FAILED),
        )
        if summary.sent or summary.failed:
            logger.info(
                "forwarding_processed",
                extra={
                    "message_id": message_id or "",
                    "sent": list(summary.sent),
                    "skipped": list(summary.skipped),
                    "failed": list(summary.failed),
                },
            )
        return summary

    async def _run(
        self,
        forwarder: MessageForwarderProtocol,
        event: MessageEvent | None,
        request_context: RequestContext | None,
    ) -> tuple[str, str]:
        name = forwarder.callback
        try:
            sent = await forwarder.forward(event, request_context)
        except ForwardingError as exc:
            _log_forwarding_error(name, exc)
            return name, _FAILED
        except Exception:
            logger.exception("forward_unexpected_error", extra={"callback": name})
            return name, _FAILED
        return name, _SENT if sent else _SKIPPED


def _log_forwarding_error(callback: str, exc: ForwardingError) -> None:
    extra: dict[str, object] = {
        "callback": callback,
        "error_type": type(exc).__name__,
    }
    if isinstance(exc, CallbackProtocolError):
        extra["status_code"] = exc.status_code
        extra["body_excerpt_len"] = len(exc.body_excerpt)
    logger.warning("forward_failed", extra=extra)
