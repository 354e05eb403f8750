"""Exceções do encaminhamento de eventos para webhooks externos.

Taxonomia:
- MissingDeviceIdentityError: encaminhamento devido, mas sem device próprio
- PayloadConstructionError: payload não pôde ser serializado
- CallbackNetworkError: falha de transporte ou deadline excedido
- CallbackProtocolError: endpoint remoto respondeu com status de erro

Skips (evento não elegível) não são erros e nunca levantam exceção.
"""

from __future__ import annotations


class ForwardingError(RuntimeError):
    """Base para falhas de encaminhamento reportáveis ao chamador."""

    def __init__(self, message: str, callback: str = "") -> None:
        super().__init__(message)
        self.callback = callback


class MissingDeviceIdentityError(ForwardingError):
    """Device ID próprio indisponível para o callback de saída."""


class PayloadConstructionError(ForwardingError):
    """Falha ao serializar ou montar a requisição do callback."""


class CallbackNetworkError(ForwardingError):
    """Falha de conexão, DNS ou timeout ao chamar o callback."""


class CallbackProtocolError(ForwardingError):
    """Endpoint respondeu com status HTTP de erro (>= 400)."""

    def __init__(
        self,
        message: str,
        callback: str = "",
        status_code: int = 0,
        body_excerpt: str = "",
    ) -> None:
        super().__init__(message, callback)
        self.status_code = status_code
        self.body_excerpt = body_excerpt
