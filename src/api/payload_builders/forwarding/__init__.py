"""Builders dos payloads de callback do encaminhamento.

- device: mensagens enviadas por este gateway (`/api/callback/qr/message/send`)
- twilio: mensagens recebidas no formato Twilio (`/api/callback/twilio/`)
"""

from api.payload_builders.forwarding._base import CallbackPayload
from api.payload_builders.forwarding.device import (
    DeviceCallbackPayload,
    build_device_payload,
    resolve_company_nid,
)
from api.payload_builders.forwarding.twilio import TwilioMessage, build_twilio_payload

__all__ = [
    "CallbackPayload",
    "DeviceCallbackPayload",
    "TwilioMessage",
    "build_device_payload",
    "build_twilio_payload",
    "resolve_company_nid",
]
