"""Testes dos builders de payload de callback (device e Twilio)."""

from __future__ import annotations

import json

import pytest

from api.payload_builders.forwarding import (
    DeviceCallbackPayload,
    build_device_payload,
    build_twilio_payload,
    resolve_company_nid,
)
from app.protocols.models import JID, LocationMessage, MediaMessage, WAMessage
from tests.fakes.message_events import CONTACT_JID, GROUP_JID, OWN_JID, make_event


class TestResolveCompanyNid:
    @pytest.mark.parametrize(("configured", "expected"), [(0, 6), (-3, 6), (42, 42)])
    def test_default_and_override(self, configured: int, expected: int) -> None:
        assert resolve_company_nid(configured) == expected


class TestBuildDevicePayload:
    def test_direct_chat(self) -> None:
        event = make_event(
            WAMessage(conversation="Bom dia"),
            chat=CONTACT_JID,
            sender=OWN_JID,
            is_from_me=True,
            push_name="Loja",
        )

        payload = build_device_payload(event, OWN_JID.user)

        assert json.loads(payload.to_json()) == {
            "did": "5511900000001",
            "number": "5511988887777",
            "name": "Loja",
            "text": "Bom dia",
            "companyNid": 6,
        }

    def test_configured_company_nid(self) -> None:
        event = make_event(is_from_me=True)
        payload = build_device_payload(event, "abc", company_nid=17)
        assert payload.company_nid == 17

    def test_group_replaces_name_and_prefixes_text(self) -> None:
        event = make_event(
            WAMessage(conversation="Reunião às 10h"),
            chat=GROUP_JID,
            sender=OWN_JID,
            is_from_me=True,
            is_group=True,
            push_name="Ana",
        )

        payload = build_device_payload(event, "dev", group_name="Equipe")

        assert payload.name == "Equipe"
        assert payload.text == "*Ana*\n\nReunião às 10h"
        assert payload.number == GROUP_JID.user

    def test_group_without_resolved_name_keeps_push_name(self) -> None:
        event = make_event(chat=GROUP_JID, is_from_me=True, is_group=True, push_name="Ana")
        payload = build_device_payload(event, "dev")
        assert payload.name == "Ana"

    def test_group_without_push_name_has_no_prefix(self) -> None:
        event = make_event(
            WAMessage(conversation="oi"),
            chat=GROUP_JID,
            is_from_me=True,
            is_group=True,
            push_name="",
        )
        payload = build_device_payload(event, "dev", group_name="Equipe")
        assert payload.text == "oi"

    def test_plus_removed_from_recipient(self) -> None:
        event = make_event(chat=JID(user="+5511", server="s.whatsapp.net"), is_from_me=True)
        assert build_device_payload(event, "dev").number == "5511"

    def test_zero_company_nid_is_omitted(self) -> None:
        payload = DeviceCallbackPayload(device_id="d", number="1", company_nid=0)
        assert "companyNid" not in json.loads(payload.to_json())


class TestBuildTwilioPayload:
    def test_direct_text_message(self) -> None:
        event = make_event(WAMessage(conversation="Oi, tudo bem?"), message_id="MSG1")

        payload = build_twilio_payload(event, own_number=OWN_JID.user, account_sid="AC123")

        assert payload is not None
        assert json.loads(payload.to_json()) == {
            "WaId": "5511988887777",
            "ProfileName": "Maria",
            "SmsMessageSid": "MSG1",
            "NumMedia": "0",
            "SmsSid": "MSG1",
            "SmsStatus": "received",
            "Body": "Oi, tudo bem?",
            "To": "whatsapp:+5511900000001",
            "NumSegments": "1",
            "MessageSid": "MSG1",
            "AccountSid": "AC123",
            "From": "whatsapp:+5511988887777",
        }

    def test_unknown_own_number_leaves_to_empty(self) -> None:
        payload = build_twilio_payload(make_event())
        assert payload is not None
        assert payload.to == ""

    def test_sender_falls_back_to_chat(self) -> None:
        event = make_event(sender=JID(), chat=CONTACT_JID)
        payload = build_twilio_payload(event)
        assert payload is not None
        assert payload.wa_id == CONTACT_JID.user

    def test_no_sender_number_returns_none(self) -> None:
        event = make_event(sender=JID(), chat=JID())
        assert build_twilio_payload(event) is None

    def test_location(self) -> None:
        event = make_event(
            WAMessage(
                location=LocationMessage(
                    degrees_latitude=37.4226,
                    degrees_longitude=-122.0841,
                    address="1600 Amphitheatre Pkwy",
                )
            )
        )

        payload = build_twilio_payload(event)

        assert payload is not None
        data = json.loads(payload.to_json())
        assert data["Latitude"] == "37.422600"
        assert data["Longitude"] == "-122.084100"
        assert data["Address"] == "1600 Amphitheatre Pkwy"
        assert data["NumMedia"] == "0"

    def test_location_name_wins_over_address(self) -> None:
        event = make_event(
            WAMessage(location=LocationMessage(name="Googleplex", address="Mountain View"))
        )
        payload = build_twilio_payload(event)
        assert payload is not None
        assert payload.address == "Googleplex"

    def test_image_sets_media_fields(self) -> None:
        event = make_event(WAMessage(image=MediaMessage(mimetype="image/jpeg", caption="foto")))

        payload = build_twilio_payload(event)

        assert payload is not None
        data = json.loads(payload.to_json())
        assert data["NumMedia"] == "1"
        assert data["MediaContentType"] == "image/jpeg"
        assert data["Body"] == "foto"

    def test_media_without_mime_omits_content_type(self) -> None:
        event = make_event(WAMessage(audio=MediaMessage()))
        payload = build_twilio_payload(event)
        assert payload is not None
        data = json.loads(payload.to_json())
        assert data["NumMedia"] == "1"
        assert "MediaContentType" not in data

    def test_optional_fields_omitted_for_plain_text(self) -> None:
        payload = build_twilio_payload(make_event())
        assert payload is not None
        data = json.loads(payload.to_json())
        for key in ("GroupName", "FromGroup", "Latitude", "Longitude", "Address", "MediaContentType"):
            assert key not in data

    def test_group_fields(self) -> None:
        event = make_event(chat=GROUP_JID, sender=CONTACT_JID, is_group=True)

        payload = build_twilio_payload(event, group_name="Família")

        assert payload is not None
        data = json.loads(payload.to_json())
        assert data["FromGroup"] is True
        assert data["GroupName"] == "Família"
        assert data["WaId"] == CONTACT_JID.user

    def test_media_wins_over_location_in_malformed_message(self) -> None:
        """Imagem e localização juntas: só os campos de mídia são preenchidos."""
        event = make_event(
            WAMessage(
                image=MediaMessage(mimetype="image/png"),
                location=LocationMessage(degrees_latitude=1.0, degrees_longitude=2.0, name="Praça"),
            )
        )

        payload = build_twilio_payload(event)

        assert payload is not None
        data = json.loads(payload.to_json())
        assert data["NumMedia"] == "1"
        assert data["MediaContentType"] == "image/png"
        for key in ("Latitude", "Longitude", "Address"):
            assert key not in data
