"""App — orquestração do relay de teste: casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (teste de endpoint)
- protocols/: contratos e modelos imutáveis
- observability/: correlation_id para logs estruturados
- constants/: constantes da API BRAGBook

Padrão: app executa; api adapta; config configura; utils apoia.
"""
