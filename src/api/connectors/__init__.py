"""Connectors — adapters de borda para APIs externas.

Estrutura:
- forwarding/: POST JSON dos callbacks de device e Twilio
"""

__all__: list[str] = []
