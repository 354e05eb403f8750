"""Use cases de encaminhamento de eventos para callbacks externos."""

from .eligibility import device_skip_reason, twilio_skip_reason
from .forward_device_message import ForwardDeviceMessageUseCase
from .forward_twilio_callback import ForwardTwilioCallbackUseCase

__all__ = [
    "ForwardDeviceMessageUseCase",
    "ForwardTwilioCallbackUseCase",
    "device_skip_reason",
    "twilio_skip_reason",
]
