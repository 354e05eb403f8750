"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CallbackNetworkError,
    CallbackProtocolError,
    ForwardingError,
    MissingDeviceIdentityError,
    PayloadConstructionError,
)

__all__ = [
    "CallbackNetworkError",
    "CallbackProtocolError",
    "ForwardingError",
    "MissingDeviceIdentityError",
    "PayloadConstructionError",
]
