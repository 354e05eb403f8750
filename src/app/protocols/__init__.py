"""Protocolos e contratos do core da aplicação."""

from .chat_storage import ChatRecord, ChatStorageProtocol
from .device_identity import DeviceIdentityProtocol
from .forwarder import MessageForwarderProtocol
from .http_client import CallbackDispatcherProtocol
from .models import (
    JID,
    ExtendedTextMessage,
    LocationMessage,
    MediaMessage,
    MessageEvent,
    MessageInfo,
    ProtocolMessage,
    ReactionMessage,
    WAMessage,
)
from .request_context import RequestContext

__all__ = [
    "JID",
    "CallbackDispatcherProtocol",
    "ChatRecord",
    "ChatStorageProtocol",
    "DeviceIdentityProtocol",
    "ExtendedTextMessage",
    "LocationMessage",
    "MediaMessage",
    "MessageEvent",
    "MessageForwarderProtocol",
    "MessageInfo",
    "ProtocolMessage",
    "ReactionMessage",
    "RequestContext",
    "WAMessage",
]
