"""API — camada de borda do relay BRAGBook.

Responsabilidades:
- Receber requests da tela de teste (rotas AJAX same-origin)
- Compor requests upstream a partir do registro de endpoints
- Executar o relay HTTP e normalizar a resposta

Subpastas:
- connectors/: registro de endpoints, conexões e relay HTTP
- normalizers/: resposta bruta → envelope uniforme
- payload_builders/: composição de RequestSpec (params, credenciais)
- routes/: endpoints HTTP (api-test, health)

NÃO PODE conter: orquestração de use cases, leitura direta de env.
"""
