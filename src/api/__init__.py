"""API — camada de borda do encaminhamento.

Responsabilidades:
- Normalizar eventos do transporte (identidade, corpo, texto, mídia)
- Construir payloads para os callbacks externos
- Despachar payloads via HTTP e classificar o resultado

Subpastas:
- connectors/: cliente HTTP de callbacks
- normalizers/: evento do transporte → valores de payload
- payload_builders/: construção dos payloads de callback

NÃO PODE conter: gates de elegibilidade, orquestração de use cases.
"""
