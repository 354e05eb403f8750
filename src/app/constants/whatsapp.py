"""Constantes de domínio para eventos de mensagem WhatsApp."""

from __future__ import annotations

from enum import StrEnum

# Servidor de JIDs de grupo
GROUP_SERVER = "g.us"

# Prefixo de endereço no contrato compatível Twilio
WHATSAPP_ADDRESS_PREFIX = "whatsapp:+"


class CallbackName(StrEnum):
    """Destinos de callback atendidos pelo encaminhamento."""

    DEVICE = "device"
    TWILIO = "twilio"


# Paths relativos ao endpoint configurado
DEVICE_CALLBACK_PATH = "/api/callback/qr/message/send"
TWILIO_CALLBACK_PATH = "/api/callback/twilio/"

# Tenant padrão do callback de device quando não há override positivo
DEFAULT_COMPANY_NID = 6

# Campos fixos do contrato Twilio
TWILIO_SMS_STATUS_RECEIVED = "received"
TWILIO_NUM_SEGMENTS = "1"
