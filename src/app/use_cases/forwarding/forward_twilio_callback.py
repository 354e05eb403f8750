"""Use case: reportar mensagem recebida ao callback compatível Twilio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.whatsapp import to_plain_number
from api.payload_builders.forwarding import build_twilio_payload
from app.constants.whatsapp import TWILIO_CALLBACK_PATH, CallbackName
from config.logging import log_forward_skipped

from .eligibility import SKIP_MISSING_SENDER, twilio_skip_reason

if TYPE_CHECKING:
    from app.protocols.device_identity import DeviceIdentityProtocol
    from app.protocols.http_client import CallbackDispatcherProtocol
    from app.protocols.models import MessageEvent
    from app.protocols.request_context import RequestContext
    from app.services.group_name_resolver import GroupNameResolver
    from config.settings import ForwardingSettings

logger = logging.getLogger(__name__)


class ForwardTwilioCallbackUseCase:
    """Gate → build → dispatch do callback Twilio.

    Eventos de grupo só passam com `forward_group_messages` habilitado.
    """

    callback = CallbackName.TWILIO.value

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
        """Encaminha o evento se elegível; True se enviado."""
        endpoint = self._settings.endpoint
        reason = twilio_skip_reason(
            event,
            endpoint,
            allow_groups=self._settings.forward_group_messages,
        )
        if reason is not None:
            message_id = event.info.id if event is not None else ""
            log_forward_skipped(logger, self.callback, reason, message_id)
            return False

        info = event.info
        group_name = await self._group_names.resolve(info.chat) if info.is_group else ""

        payload = build_twilio_payload(
            event,
            own_number=to_plain_number(self._device_identity.own_jid()),
            account_sid=self._settings.twilio_account_sid,
            group_name=group_name,
        )
        if payload is None:
            log_forward_skipped(logger, self.callback, SKIP_MISSING_SENDER, info.id)
            return False

        await self._dispatcher.dispatch(
            endpoint=endpoint,
            path=TWILIO_CALLBACK_PATH,
            payload=payload,
            timeout_seconds=self._settings.twilio_callback_timeout_seconds,
            callback=self.callback,
            capture_body=True,
        )
        return True
