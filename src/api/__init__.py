"""API — camada de borda do canal LINE.

Responsabilidades:
- Receber o webhook, validar assinatura e formato do lote
- Filtrar eventos acionáveis
- Construir e enviar payloads de resposta ao LINE

Subpastas:
- connectors/: assinatura, ingress e cliente HTTP do LINE
- normalizers/: filtro de eventos acionáveis
- payload_builders/: construção de payloads de reply
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: seleção de provedor nem classificação de erros de tradução.
"""
