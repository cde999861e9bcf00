"""Payload builders — construção de requests para APIs externas.

Estrutura:
- bragbook/: RequestSpec da API BRAGBook (params, credenciais, placement)
"""

__all__: list[str] = []
