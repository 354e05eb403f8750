"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, create_forwarding_coordinator

    initialize_app()
    async with httpx.AsyncClient() as http_client:
        coordinator = create_forwarding_coordinator(http_client, device_identity)
        await coordinator.handle(event)
"""

from __future__ import annotations

import logging

from app.bootstrap.forwarding_factory import create_forwarding_coordinator
from app.observability import get_correlation_id
from config.logging import VALID_LOG_LEVELS, configure_logging
from config.settings import get_base_settings, get_forwarding_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id e valida settings.

    Deve ser chamada uma vez no início do processo. LOG_LEVEL inválido cai
    para INFO e é reportado por `validate_runtime_settings`.
    """
    base = get_base_settings()
    level = base.log_level if base.log_level.upper() in VALID_LOG_LEVELS else "INFO"
    configure_logging(
        level=level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido; em `development` apenas alerta.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"forwarding: {error}" for error in get_forwarding_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_forwarding_coordinator",
    "initialize_app",
    "validate_runtime_settings",
]
