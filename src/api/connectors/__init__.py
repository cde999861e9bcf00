"""Connectors — adapters de borda para APIs externas.

Estrutura:
- bragbook/: API de galeria BRAGBook (registro, conexões, relay)
"""

__all__: list[str] = []
