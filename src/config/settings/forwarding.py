"""Settings do encaminhamento de eventos para a API externa.

Endpoint base, identificadores de tenant/conta e deadlines por callback.
Endpoint vazio desabilita o encaminhamento (não é erro).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Deadlines por destino (segundos)
DEVICE_CALLBACK_TIMEOUT_SECONDS: float = 30.0
TWILIO_CALLBACK_TIMEOUT_SECONDS: float = 10.0

# Limite do trecho de resposta capturado para diagnóstico
RESPONSE_EXCERPT_BYTES: int = 2048

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class ForwardingSettings:
    """Configurações do encaminhamento de mensagens.

    Attributes:
        api_endpoint: URL base da API que recebe os callbacks
        company_nid: ID numérico do tenant (<= 0 usa o default do payload)
        twilio_account_sid: AccountSid enviado no payload compatível Twilio
        forward_group_messages: Permite eventos de grupo no callback Twilio
        device_callback_timeout_seconds: Deadline do callback de device
        twilio_callback_timeout_seconds: Deadline do callback Twilio
        response_excerpt_bytes: Bytes capturados da resposta em erro
    """

    api_endpoint: str = ""
    company_nid: int = 0
    twilio_account_sid: str = ""
    forward_group_messages: bool = False

    device_callback_timeout_seconds: float = DEVICE_CALLBACK_TIMEOUT_SECONDS
    twilio_callback_timeout_seconds: float = TWILIO_CALLBACK_TIMEOUT_SECONDS
    response_excerpt_bytes: int = RESPONSE_EXCERPT_BYTES

    @property
    def endpoint(self) -> str:
        """Endpoint sem espaços nas bordas (vazio = desabilitado)."""
        return self.api_endpoint.strip()

    @property
    def is_enabled(self) -> bool:
        """Retorna True se há endpoint configurado."""
        return bool(self.endpoint)

    def validate(self) -> list[str]:
        """Valida configurações de encaminhamento.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        endpoint = self.endpoint
        if endpoint and not endpoint.startswith(("http://", "https://")):
            errors.append("WHATSAPP_API_ENDPOINT deve começar com http:// ou https://")

        if self.company_nid < 0:
            errors.append("COMPANY_NID deve ser >= 0")

        if self.device_callback_timeout_seconds <= 0:
            errors.append("DEVICE_CALLBACK_TIMEOUT_SECONDS deve ser > 0")

        if self.twilio_callback_timeout_seconds <= 0:
            errors.append("TWILIO_CALLBACK_TIMEOUT_SECONDS deve ser > 0")

        if self.response_excerpt_bytes <= 0:
            errors.append("CALLBACK_RESPONSE_EXCERPT_BYTES deve ser > 0")

        return errors


def _parse_int(raw: str, default: int) -> int:
    """Converte inteiro de env, usando default se inválido."""
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        return default


def _parse_float(raw: str, default: float) -> float:
    """Converte float de env, usando default se inválido."""
    try:
        return float(raw.strip())
    except (AttributeError, ValueError):
        return default


def _load_from_env() -> ForwardingSettings:
    """Carrega ForwardingSettings a partir de variáveis de ambiente."""
    return ForwardingSettings(
        api_endpoint=os.getenv("WHATSAPP_API_ENDPOINT", ""),
        company_nid=_parse_int(os.getenv("COMPANY_NID", "0"), 0),
        twilio_account_sid=os.getenv("TWILIO_ACCOUNT_SID", ""),
        forward_group_messages=os.getenv(
            "FORWARD_GROUP_MESSAGES_TO_TWILIO", ""
        ).lower() in _TRUE_VALUES,
        device_callback_timeout_seconds=_parse_float(
            os.getenv("DEVICE_CALLBACK_TIMEOUT_SECONDS", ""),
            DEVICE_CALLBACK_TIMEOUT_SECONDS,
        ),
        twilio_callback_timeout_seconds=_parse_float(
            os.getenv("TWILIO_CALLBACK_TIMEOUT_SECONDS", ""),
            TWILIO_CALLBACK_TIMEOUT_SECONDS,
        ),
        response_excerpt_bytes=_parse_int(
            os.getenv("CALLBACK_RESPONSE_EXCERPT_BYTES", str(RESPONSE_EXCERPT_BYTES)),
            RESPONSE_EXCERPT_BYTES,
        ),
    )


@lru_cache(maxsize=1)
def get_forwarding_settings() -> ForwardingSettings:
    """Retorna instância cacheada de ForwardingSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
