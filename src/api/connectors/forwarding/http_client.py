"""Cliente HTTP de callbacks do encaminhamento.

Serializa o payload, faz POST com deadline e classifica o resultado:
- PayloadConstructionError: payload não serializável ou URL inválida
- CallbackNetworkError: conexão, DNS ou deadline excedido
- CallbackProtocolError: status >= 400 (com trecho da resposta, se pedido)

Sem retries e sem estado entre chamadas; o httpx.AsyncClient injetado é
compartilhado entre eventos concorrentes (pool de conexões interno).
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

import httpx
from pydantic_core import PydanticSerializationError

from config.settings import RESPONSE_EXCERPT_BYTES, get_forwarding_settings
from utils.errors import (
    CallbackNetworkError,
    CallbackProtocolError,
    PayloadConstructionError,
)

if TYPE_CHECKING:
    from api.payload_builders.forwarding import CallbackPayload
    from config.settings import ForwardingSettings

logger: logging.Logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def build_callback_url(endpoint: str, path: str) -> str:
    """Junta endpoint (sem espaços e `/` finais) e path do callback."""
    return endpoint.strip().rstrip("/") + path


class CallbackHttpClient:
    """Despachante de payloads de callback via POST JSON."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        response_excerpt_bytes: int = RESPONSE_EXCERPT_BYTES,
    ) -> None:
        """Inicializa o despachante.

        Args:
            http_client: Cliente httpx compartilhado (injetado)
            response_excerpt_bytes: Limite do trecho de resposta capturado
        """
        self._client = http_client
        self._excerpt_limit = response_excerpt_bytes

    async def dispatch(
        self,
        *,
        endpoint: str,
        path: str,
        payload: CallbackPayload,
        timeout_seconds: float,
        callback: str,
        capture_body: bool = False,
    ) -> int:
        """Envia o payload e retorna o status HTTP de sucesso.

        Cancelamento do chamador propaga para a requisição em andamento.

        Raises:
            PayloadConstructionError: Falha de serialização/montagem
            CallbackNetworkError: Falha de transporte ou timeout
            CallbackProtocolError: Resposta com status >= 400
        """
        url = build_callback_url(endpoint, path)
        body = self._serialize(payload, callback)

        started = time.perf_counter()
        try:
            async with asyncio.timeout(timeout_seconds):
                status_code = await self._post(url, body, timeout_seconds, callback, capture_body)
        except TimeoutError as exc:
            raise CallbackNetworkError(
                f"{callback} callback timed out after {timeout_seconds}s", callback
            ) from exc
        except httpx.TimeoutException as exc:
            raise CallbackNetworkError(
                f"{callback} callback timed out after {timeout_seconds}s", callback
            ) from exc
        except httpx.InvalidURL as exc:
            raise PayloadConstructionError(
                f"create {callback} callback request: invalid url", callback
            ) from exc
        except httpx.TransportError as exc:
            raise CallbackNetworkError(
                f"send {callback} callback: {type(exc).__name__}", callback
            ) from exc

        logger.debug(
            "callback_delivered",
            extra={
                "callback": callback,
                "path": path,
                "status_code": status_code,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return status_code

    @staticmethod
    def _serialize(payload: CallbackPayload, callback: str) -> bytes:
        try:
            return payload.to_json()
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise PayloadConstructionError(
                f"marshal {callback} payload: {type(exc).__name__}", callback
            ) from exc

    async def _post(
        self,
        url: str,
        body: bytes,
        timeout_seconds: float,
        callback: str,
        capture_body: bool,
    ) -> int:
        async with self._client.stream(
            "POST",
            url,
            content=body,
            headers=_JSON_HEADERS,
            timeout=timeout_seconds,
        ) as response:
            if response.status_code < 400:
                return response.status_code

            excerpt = await self._read_excerpt(response) if capture_body else ""
            message = f"{callback} callback returned {response.status_code}"
            if excerpt:
                message = f"{message}: {excerpt}"
            raise CallbackProtocolError(
                message,
                callback,
                status_code=response.status_code,
                body_excerpt=excerpt,
            )

    async def _read_excerpt(self, response: httpx.Response) -> str:
        """Lê no máximo `response_excerpt_bytes` do corpo da resposta."""
        buffer = bytearray()
        try:
            async for chunk in response.aiter_bytes():
                buffer.extend(chunk)
                if len(buffer) >= self._excerpt_limit:
                    break
        except httpx.HTTPError as exc:
            logger.debug(
                "callback_response_excerpt_unavailable",
                extra={"error_type": type(exc).__name__},
            )
        return bytes(buffer[: self._excerpt_limit]).decode("utf-8", errors="replace").strip()


def create_callback_http_client(
    http_client: httpx.AsyncClient,
    settings: ForwardingSettings | None = None,
) -> CallbackHttpClient:
    """Factory do despachante com limites vindos das settings.

    Args:
        http_client: Cliente httpx compartilhado pelo processo
        settings: ForwardingSettings opcional. Se None, carrega do ambiente.
    """
    forwarding = settings or get_forwarding_settings()
    return CallbackHttpClient(
        http_client,
        response_excerpt_bytes=forwarding.response_excerpt_bytes,
    )
