"""Testes dos gates de elegibilidade por callback."""

from __future__ import annotations

import pytest

from app.protocols.models import ProtocolMessage, WAMessage
from app.use_cases.forwarding import device_skip_reason, twilio_skip_reason
from app.use_cases.forwarding.eligibility import (
    SKIP_CONTROL_MESSAGE,
    SKIP_ENDPOINT_NOT_CONFIGURED,
    SKIP_FROM_ME,
    SKIP_GROUP_MESSAGE,
    SKIP_MISSING_EVENT,
    SKIP_NOT_FROM_ME,
)
from tests.fakes.message_events import GROUP_JID, make_event

ENDPOINT = "https://crm.example.com"


class TestDeviceSkipReason:
    def test_outgoing_message_is_eligible(self) -> None:
        assert device_skip_reason(make_event(is_from_me=True), ENDPOINT) is None

    def test_missing_event(self) -> None:
        assert device_skip_reason(None, ENDPOINT) == SKIP_MISSING_EVENT

    def test_missing_message(self) -> None:
        event = make_event(is_from_me=True)
        event = type(event)(info=event.info, message=None)
        assert device_skip_reason(event, ENDPOINT) == SKIP_MISSING_EVENT

    def test_incoming_message(self) -> None:
        assert device_skip_reason(make_event(is_from_me=False), ENDPOINT) == SKIP_NOT_FROM_ME

    def test_control_message(self) -> None:
        event = make_event(WAMessage(protocol=ProtocolMessage(type="REVOKE")), is_from_me=True)
        assert device_skip_reason(event, ENDPOINT) == SKIP_CONTROL_MESSAGE

    @pytest.mark.parametrize("endpoint", ["", "   "])
    def test_blank_endpoint(self, endpoint: str) -> None:
        assert device_skip_reason(make_event(is_from_me=True), endpoint) == SKIP_ENDPOINT_NOT_CONFIGURED

    def test_incoming_checked_before_endpoint(self) -> None:
        assert device_skip_reason(make_event(is_from_me=False), "") == SKIP_NOT_FROM_ME


class TestTwilioSkipReason:
    def test_incoming_direct_message_is_eligible(self) -> None:
        assert twilio_skip_reason(make_event(), ENDPOINT) is None

    def test_blank_endpoint_checked_first(self) -> None:
        assert twilio_skip_reason(None, " ") == SKIP_ENDPOINT_NOT_CONFIGURED

    def test_missing_event(self) -> None:
        assert twilio_skip_reason(None, ENDPOINT) == SKIP_MISSING_EVENT

    def test_from_me(self) -> None:
        assert twilio_skip_reason(make_event(is_from_me=True), ENDPOINT) == SKIP_FROM_ME

    def test_group_skipped_by_default(self) -> None:
        event = make_event(chat=GROUP_JID, is_group=True)
        assert twilio_skip_reason(event, ENDPOINT) == SKIP_GROUP_MESSAGE

    def test_group_allowed_with_toggle(self) -> None:
        event = make_event(chat=GROUP_JID, is_group=True)
        assert twilio_skip_reason(event, ENDPOINT, allow_groups=True) is None

    def test_control_message_is_not_filtered(self) -> None:
        """Gate Twilio não filtra mensagens de controle."""
        event = make_event(WAMessage(protocol=ProtocolMessage(type="REVOKE")))
        assert twilio_skip_reason(event, ENDPOINT) is None
