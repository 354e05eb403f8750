"""Testes dos use cases de encaminhamento (device e Twilio)."""

from __future__ import annotations

import pytest

from app.infra.whatsapp import StaticDeviceIdentity
from app.protocols.models import JID, WAMessage
from app.protocols.request_context import RequestContext
from app.services.group_name_resolver import GroupNameResolver
from app.use_cases.forwarding import ForwardDeviceMessageUseCase, ForwardTwilioCallbackUseCase
from config.settings import ForwardingSettings
from tests.fakes.message_events import (
    CONTACT_JID,
    GROUP_JID,
    OWN_JID,
    FakeChatStorage,
    FakeDispatcher,
    make_event,
)
from utils.errors import CallbackNetworkError, MissingDeviceIdentityError

ENDPOINT = "https://crm.example.com/"


def _settings(**overrides: object) -> ForwardingSettings:
    values: dict[str, object] = {"api_endpoint": ENDPOINT, "twilio_account_sid": "AC123"}
    values.update(overrides)
    return ForwardingSettings(**values)  # type: ignore[arg-type]


def _device_use_case(
    dispatcher: FakeDispatcher,
    *,
    own_jid: JID | None = OWN_JID,
    storage: FakeChatStorage | None = None,
    settings: ForwardingSettings | None = None,
) -> ForwardDeviceMessageUseCase:
    return ForwardDeviceMessageUseCase(
        dispatcher,
        StaticDeviceIdentity(own_jid),
        GroupNameResolver(storage),
        settings or _settings(),
    )


def _twilio_use_case(
    dispatcher: FakeDispatcher,
    *,
    own_jid: JID | None = OWN_JID,
    storage: FakeChatStorage | None = None,
    settings: ForwardingSettings | None = None,
) -> ForwardTwilioCallbackUseCase:
    return ForwardTwilioCallbackUseCase(
        dispatcher,
        StaticDeviceIdentity(own_jid),
        GroupNameResolver(storage),
        settings or _settings(),
    )


class TestForwardDeviceMessage:
    @pytest.mark.asyncio
    async def test_dispatches_outgoing_message(self) -> None:
        dispatcher = FakeDispatcher()
        event = make_event(WAMessage(conversation="Pedido enviado"), is_from_me=True)

        sent = await _device_use_case(dispatcher).forward(event)

        assert sent is True
        call = dispatcher.calls[0]
        assert call["endpoint"] == "https://crm.example.com/"
        assert call["path"] == "/api/callback/qr/message/send"
        assert call["timeout_seconds"] == 30.0
        assert call["callback"] == "device"
        assert call.get("capture_body", False) is False
        payload = call["payload"]
        assert payload.device_id == OWN_JID.user
        assert payload.number == CONTACT_JID.user
        assert payload.text == "Pedido enviado"
        assert payload.company_nid == 6

    @pytest.mark.asyncio
    async def test_incoming_message_is_skipped(self) -> None:
        dispatcher = FakeDispatcher()
        assert await _device_use_case(dispatcher).forward(make_event()) is False
        assert dispatcher.calls == []

    @pytest.mark.asyncio
    async def test_blank_endpoint_is_skipped(self) -> None:
        dispatcher = FakeDispatcher()
        use_case = _device_use_case(dispatcher, settings=_settings(api_endpoint=" "))
        assert await use_case.forward(make_event(is_from_me=True)) is False
        assert dispatcher.calls == []

    @pytest.mark.asyncio
    async def test_missing_device_identity_raises(self) -> None:
        dispatcher = FakeDispatcher()

        with pytest.raises(MissingDeviceIdentityError) as exc_info:
            await _device_use_case(dispatcher, own_jid=None).forward(make_event(is_from_me=True))

        assert exc_info.value.callback == "device"
        assert dispatcher.calls == []

    @pytest.mark.asyncio
    async def test_group_event_uses_resolved_name(self) -> None:
        dispatcher = FakeDispatcher()
        storage = FakeChatStorage(name="Equipe Vendas")
        event = make_event(
            WAMessage(conversation="Meta batida"),
            chat=GROUP_JID,
            sender=OWN_JID,
            is_from_me=True,
            is_group=True,
            push_name="Ana",
        )

        await _device_use_case(dispatcher, storage=storage).forward(event)

        payload = dispatcher.calls[0]["payload"]
        assert payload.name == "Equipe Vendas"
        assert payload.text == "*Ana*\n\nMeta batida"
        assert storage.calls == [str(GROUP_JID)]

    @pytest.mark.asyncio
    async def test_direct_event_does_not_query_storage(self) -> None:
        storage = FakeChatStorage(name="x")
        await _device_use_case(FakeDispatcher(), storage=storage).forward(make_event(is_from_me=True))
        assert storage.calls == []

    @pytest.mark.asyncio
    async def test_configured_company_nid(self) -> None:
        dispatcher = FakeDispatcher()
        use_case = _device_use_case(dispatcher, settings=_settings(company_nid=9))
        await use_case.forward(make_event(is_from_me=True))
        assert dispatcher.calls[0]["payload"].company_nid == 9

    @pytest.mark.asyncio
    async def test_request_context_overrides_company_nid(self) -> None:
        dispatcher = FakeDispatcher()
        use_case = _device_use_case(dispatcher, settings=_settings(company_nid=9))
        context = RequestContext(company_nid="31")

        await use_case.forward(make_event(is_from_me=True), context)

        assert dispatcher.calls[0]["payload"].company_nid == 31

    @pytest.mark.asyncio
    async def test_invalid_request_context_keeps_configured(self) -> None:
        dispatcher = FakeDispatcher()
        use_case = _device_use_case(dispatcher, settings=_settings(company_nid=9))

        await use_case.forward(make_event(is_from_me=True), RequestContext(company_nid="abc"))

        assert dispatcher.calls[0]["payload"].company_nid == 9

    @pytest.mark.asyncio
    async def test_dispatch_error_propagates(self) -> None:
        dispatcher = FakeDispatcher(error=CallbackNetworkError("down", "device"))
        with pytest.raises(CallbackNetworkError):
            await _device_use_case(dispatcher).forward(make_event(is_from_me=True))


class TestForwardTwilioCallback:
    @pytest.mark.asyncio
    async def test_dispatches_incoming_message(self) -> None:
        dispatcher = FakeDispatcher()

        sent = await _twilio_use_case(dispatcher).forward(make_event())

        assert sent is True
        call = dispatcher.calls[0]
        assert call["path"] == "/api/callback/twilio/"
        assert call["timeout_seconds"] == 10.0
        assert call["callback"] == "twilio"
        assert call["capture_body"] is True
        payload = call["payload"]
        assert payload.from_ == "whatsapp:+5511988887777"
        assert payload.to == "whatsapp:+5511900000001"
        assert payload.account_sid == "AC123"

    @pytest.mark.asyncio
    async def test_unknown_own_device_still_dispatches(self) -> None:
        dispatcher = FakeDispatcher()
        await _twilio_use_case(dispatcher, own_jid=None).forward(make_event())
        assert dispatcher.calls[0]["payload"].to == ""

    @pytest.mark.asyncio
    async def test_outgoing_message_is_skipped(self) -> None:
        dispatcher = FakeDispatcher()
        assert await _twilio_use_case(dispatcher).forward(make_event(is_from_me=True)) is False
        assert dispatcher.calls == []

    @pytest.mark.asyncio
    async def test_group_message_skipped_by_default(self) -> None:
        dispatcher = FakeDispatcher()
        storage = FakeChatStorage(name="Família")
        event = make_event(chat=GROUP_JID, is_group=True)

        assert await _twilio_use_case(dispatcher, storage=storage).forward(event) is False
        assert dispatcher.calls == []
        assert storage.calls == []

    @pytest.mark.asyncio
    async def test_group_message_with_toggle(self) -> None:
        dispatcher = FakeDispatcher()
        storage = FakeChatStorage(name="Família")
        use_case = _twilio_use_case(
            dispatcher, storage=storage, settings=_settings(forward_group_messages=True)
        )

        assert await use_case.forward(make_event(chat=GROUP_JID, is_group=True)) is True

        payload = dispatcher.calls[0]["payload"]
        assert payload.from_group is True
        assert payload.group_name == "Família"

    @pytest.mark.asyncio
    async def test_missing_sender_number_is_skipped(self) -> None:
        dispatcher = FakeDispatcher()
        event = make_event(chat=JID(), sender=JID())
        assert await _twilio_use_case(dispatcher).forward(event) is False
        assert dispatcher.calls == []
