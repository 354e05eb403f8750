"""App — orquestração do encaminhamento de eventos.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fan-out best-effort de um evento para os callbacks
- use_cases/: gates de elegibilidade e forwarders por callback
- services/: serviços de aplicação (nome de grupo)
- infra/: implementações concretas (stores em memória, identidade do device)
- protocols/: contratos e modelos do evento
- observability/: correlation_id para logs estruturados
- constants/: constantes da aplicação

Padrão: app executa; api adapta; utils apoia.
"""
