"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (settings, logging, wiring)
- domain/: valores de domínio (requisição, resultados, eventos LINE)
- use_cases/: dispatcher do lote de eventos
- services/: roteamento de tradução e classificação de erros
- infra/: adapters concretos dos provedores de tradução
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
