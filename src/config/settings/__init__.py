"""Agregador de settings do gateway.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Forwarding settings
from config.settings.forwarding import (
    DEVICE_CALLBACK_TIMEOUT_SECONDS,
    RESPONSE_EXCERPT_BYTES,
    TWILIO_CALLBACK_TIMEOUT_SECONDS,
    ForwardingSettings,
    get_forwarding_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "DEVICE_CALLBACK_TIMEOUT_SECONDS",
    "RESPONSE_EXCERPT_BYTES",
    "TWILIO_CALLBACK_TIMEOUT_SECONDS",
    # Base
    "BaseSettings",
    "Environment",
    # Forwarding
    "ForwardingSettings",
    "get_base_settings",
    "get_forwarding_settings",
]
