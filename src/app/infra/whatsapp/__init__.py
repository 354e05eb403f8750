"""Implementações concretas ligadas ao transporte WhatsApp."""

from app.infra.whatsapp.device_identity import StaticDeviceIdentity

__all__ = ["StaticDeviceIdentity"]
