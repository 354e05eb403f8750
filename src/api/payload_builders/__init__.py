"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- forwarding/: callback de device e callback compatível Twilio
"""

__all__: list[str] = []
