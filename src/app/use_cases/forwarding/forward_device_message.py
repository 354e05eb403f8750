"""Use case: reportar mensagem enviada por este gateway ao callback de device."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.forwarding import build_device_payload
from app.constants.whatsapp import DEVICE_CALLBACK_PATH, CallbackName
from config.logging import log_forward_skipped
from utils.errors import MissingDeviceIdentityError

from .eligibility import device_skip_reason

if TYPE_CHECKING:
    from app.protocols.device_identity import DeviceIdentityProtocol
    from app.protocols.http_client import CallbackDispatcherProtocol
    from app.protocols.models import MessageEvent
    from app.protocols.request_context import RequestContext
    from app.services.group_name_resolver import GroupNameResolver
    from config.settings import ForwardingSettings

logger = logging.getLogger(__name__)


class ForwardDeviceMessageUseCase:
    """Gate → build → dispatch do callback de device."""

    callback = CallbackName.DEVICE.value

    def __init__(
        self,
        dispatcher: CallbackDispatcherProtocol,
        device_identity: DeviceIdentityProtocol,
        group_names: GroupNameResolver,
        settings: ForwardingSettings,
    ) -> None:
        self._dispatcher = dispatcher
        self._device_identity = device_identity
        self._group_names = group_names
        self._settings = settings

    async def forward(
        self,
        event: MessageEvent | None,
        request_context: RequestContext | None = None,
    ) -> bool:
        """Encaminha o evento se elegível.

        Returns:
            True se enviado, False se skip.

        Raises:
            MissingDeviceIdentityError: Evento elegível sem device próprio
            ForwardingError: Falhas de construção/rede/protocolo do despacho
        """
        endpoint = self._settings.endpoint
        reason = device_skip_reason(event, endpoint)
        if reason is not None:
            message_id = event.info.id if event is not None else ""
            log_forward_skipped(logger, self.callback, reason, message_id)
            return False

        device_id = self._own_device_id()
        if not device_id:
            raise MissingDeviceIdentityError(
                "cannot determine device ID for outbound callback", self.callback
            )

        info = event.info
        group_name = await self._group_names.resolve(info.chat) if info.is_group else ""

        company_nid = self._settings.company_nid
        if request_context is not None:
            company_nid = request_context.company_nid_override() or company_nid

        payload = build_device_payload(
            event,
            device_id,
            group_name=group_name,
            company_nid=company_nid,
        )
        await self._dispatcher.dispatch(
            endpoint=endpoint,
            path=DEVICE_CALLBACK_PATH,
            payload=payload,
            timeout_seconds=self._settings.device_callback_timeout_seconds,
            callback=self.callback,
        )
        return True

    def _own_device_id(self) -> str:
        jid = self._device_identity.own_jid()
        if jid is None:
            return ""
        return jid.user.strip()
